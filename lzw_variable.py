"""Variable-width LZW encoding and decoding, GIF/TIFF flavour.

Codes start at root_size + 1 bits and grow to MAX_CODE_LEN. A clear code
starts every stream and resets the table whenever it fills up; an
end-of-information code terminates it.
"""

import argparse
import logging

from gif_bitstream import pack_codes, unpack_codes
from lzw_errors import CorruptCodeError, InvalidSymbolError
from lzw_table import MAX_CODE_LEN, StringTable

logger = logging.getLogger(__name__)

DEFAULT_ROOT_SIZE = 8


def encoder_code_len(index, code_len):
    """Width in effect once the encoder has assigned `index`."""
    if index == 2**code_len:
        return code_len + 1
    return code_len


def decoder_code_len(index, code_len):
    """Width in effect once the decoder has assigned `index`.

    One less than the encoder's boundary: the decoder assigns each entry one
    code later than the encoder does.
    """
    if index == 2**code_len - 1:
        return min(MAX_CODE_LEN, code_len + 1)
    return code_len


def iter_lzw_codes(root_size, symbols):
    """Yield (code_len, code) pairs for `symbols`."""
    table = StringTable(root_size)
    yield table.code_len, table.clear_code

    current = ()
    for position, x in enumerate(symbols):
        if not 0 <= x < table.clear_code:
            raise InvalidSymbolError(x, position, root_size)

        candidate = current + (x,)
        if table.lookup_string(candidate) is not None:
            current = candidate
            continue

        # Emit code for current, which is in the table
        yield table.code_len, table.lookup_string(current)

        code_len = encoder_code_len(table.next_index, table.code_len)
        if code_len > MAX_CODE_LEN:
            # Table is full: clear it and start over from x alone
            logger.debug('Table full at index %d, emitting clear code',
                         table.next_index)
            yield MAX_CODE_LEN, table.clear_code
            table.reset()
            current = (x,)
            continue

        table.insert(table.next_index, candidate)
        table.next_index += 1
        if code_len != table.code_len:
            logger.debug('Encoder code length %d -> %d at index %d',
                         table.code_len, code_len, table.next_index - 1)
        table.code_len = code_len
        current = (x,)

    if current:
        yield table.code_len, table.lookup_string(current)
    # The width is bumped as if an entry were added, even though none is
    end_code_len = min(MAX_CODE_LEN,
                       encoder_code_len(table.next_index, table.code_len))
    yield end_code_len, table.end_code


def iter_lzw_decode(root_size, data):
    """Yield the symbol runs encoded in `data`, one tuple per code."""
    table = StringTable(root_size)
    previous = ()
    for code in unpack_codes(data, lambda: table.code_len):
        if code == table.clear_code:
            table.reset()
            previous = ()
            continue
        if code == table.end_code:
            logger.debug('End of information, %d entries in table', len(table))
            return

        string = table.lookup_code(code)
        if string is None:
            # The encoder just assigned this code and we haven't yet
            if not previous or code != table.next_index:
                raise CorruptCodeError(code, table.next_index)
            string = previous + previous[:1]

        if previous:
            table.insert(table.next_index, previous + string[:1])
            code_len = decoder_code_len(table.next_index, table.code_len)
            if code_len != table.code_len:
                logger.debug('Decoder code length %d -> %d at index %d',
                             table.code_len, code_len, table.next_index)
            table.code_len = code_len
            table.next_index += 1

        previous = string
        yield string


def lzw_encode_codes(root_size, symbols):
    return list(iter_lzw_codes(root_size, symbols))


def lzw_encode(root_size, symbols):
    return pack_codes(iter_lzw_codes(root_size, symbols))


def lzw_decode(root_size, data):
    return [s for string in iter_lzw_decode(root_size, data) for s in string]


def lzwv_encode(in_bytes):
    return lzw_encode(DEFAULT_ROOT_SIZE, bytes(in_bytes))


def lzwv_decode(in_array):
    return bytes(lzw_decode(DEFAULT_ROOT_SIZE, in_array))


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Variable-width LZW round trip')
    parser.add_argument('filename', nargs='?', default='test.dat')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log table resets and code length changes')
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    with open(args.filename, 'rb') as f:
        orig = f.read()

    print('Encoding...')
    enc = lzwv_encode(orig)

    print('Decoding...')
    dec = lzwv_decode(enc)

    print(f'Decoded data matches original: {orig == dec}')
    print(f'Original size: {len(orig)}')
    print(f'Compressed size: {len(enc)}')
    if orig:
        print(f'Compression ratio: {len(enc) / len(orig)}')
