"""Errors raised by the LZW codec."""


class LZWError(Exception):
    pass


class InvalidSymbolError(LZWError, ValueError):
    """Encoder input contains a symbol outside the root alphabet."""

    def __init__(self, symbol, position, root_size):
        super().__init__(
            f'Symbol {symbol} at position {position} is outside the '
            f'{root_size}-bit alphabet')
        self.symbol = symbol
        self.position = position


class TruncatedStreamError(LZWError):
    """Ran out of bits before an end-of-information code."""


class CorruptCodeError(LZWError):
    def __init__(self, code, next_index):
        super().__init__(f'Bad code {code} (next table index is {next_index})')
        self.code = code
