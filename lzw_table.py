"""String table shared by the LZW encoder and decoder."""

import logging

logger = logging.getLogger(__name__)

MAX_CODE_LEN = 12
MAX_DICT_ENTRIES = 2**MAX_CODE_LEN

MIN_ROOT_SIZE = 2
# Clear and end codes take two slots past the root alphabet
MAX_ROOT_SIZE = MAX_CODE_LEN - 2


class StringTable:
    """Codes <-> symbol runs, plus the code width that goes with them.

    Both directions are kept so the same class serves the encoder (run to
    code) and the decoder (code to run). Runs are tuples of symbols.
    """

    def __init__(self, root_size):
        if not MIN_ROOT_SIZE <= root_size <= MAX_ROOT_SIZE:
            raise ValueError(
                f'Root size must be between {MIN_ROOT_SIZE} and '
                f'{MAX_ROOT_SIZE}, got {root_size}')
        self.root_size = root_size
        self.clear_code = 2**root_size
        self.end_code = self.clear_code + 1
        self.reset()

    def reset(self):
        self.strings = {i: (i,) for i in range(self.clear_code)}
        self.codes = {(i,): i for i in range(self.clear_code)}
        self.next_index = self.end_code + 1
        self.code_len = self.root_size + 1
        logger.debug('Table reset: %d roots, code length %d',
                     self.clear_code, self.code_len)

    def __len__(self):
        return len(self.strings)

    def lookup_code(self, code):
        return self.strings.get(code)

    def lookup_string(self, string):
        return self.codes.get(string)

    def insert(self, index, string):
        if index >= MAX_DICT_ENTRIES:
            return False
        self.strings[index] = string
        self.codes[string] = index
        return True
