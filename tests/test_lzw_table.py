import pytest

from lzw_table import MAX_DICT_ENTRIES, StringTable


def test_initial_table():
    table = StringTable(8)
    assert len(table) == 256
    assert table.clear_code == 256
    assert table.end_code == 257
    assert table.next_index == 258
    assert table.code_len == 9


def test_small_root():
    table = StringTable(2)
    assert (table.clear_code, table.end_code, table.next_index) == (4, 5, 6)
    assert table.code_len == 3


def test_lookups():
    table = StringTable(8)
    assert table.lookup_code(65) == (65,)
    assert table.lookup_code(256) is None
    assert table.lookup_code(258) is None
    assert table.lookup_string((65,)) == 65
    assert table.lookup_string((65, 66)) is None


def test_insert():
    table = StringTable(8)
    assert table.insert(258, (65, 66))
    assert table.lookup_code(258) == (65, 66)
    assert table.lookup_string((65, 66)) == 258


def test_insert_past_capacity():
    table = StringTable(8)
    assert not table.insert(MAX_DICT_ENTRIES, (1, 2))
    assert table.lookup_string((1, 2)) is None
    assert table.lookup_code(MAX_DICT_ENTRIES) is None


def test_reset():
    table = StringTable(4)
    table.insert(18, (1, 2))
    table.next_index = 19
    table.code_len = 6
    table.reset()
    assert len(table) == 16
    assert table.lookup_string((1, 2)) is None
    assert table.next_index == 18
    assert table.code_len == 5


@pytest.mark.parametrize('root_size', [0, 1, 11, 12])
def test_bad_root_size(root_size):
    with pytest.raises(ValueError):
        StringTable(root_size)
