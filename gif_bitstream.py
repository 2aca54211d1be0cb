"""Packing and unpacking of variable-width codes, least significant bit first."""

from bitstring import ConstBitStream, ReadError

from lzw_errors import TruncatedStreamError


def reverse_byte(b):
    # 64-bit multiply/mask/shift bit reversal
    return (((b * 0x80200802) & 0x0884422110) * 0x0101010101 >> 32) & 0xFF


REVERSED_BYTES = bytes(reverse_byte(b) for b in range(256))


def reverse_bytes(data):
    return bytes(data).translate(REVERSED_BYTES)


def to_word(chunk):
    """Turn a code read from the reversed stream back into its value.

    `chunk` holds at most 16 bits, left-aligned, so it spans one or two bytes.
    """
    raw = reverse_bytes(chunk.tobytes())
    if len(raw) > 2:
        raise ValueError(f'{len(chunk)}-bit code does not fit a 16-bit word')
    return int.from_bytes(raw, 'little')


def pack_codes(codes):
    """Pack (code_len, code) pairs into bytes."""
    out = bytearray()
    bits_used = 0
    partial = 0
    for code_len, code in codes:
        if code >> code_len:
            raise ValueError(f'Code {code} does not fit in {code_len} bits')
        # Only full bytes are left behind, so the open byte never holds 8+ bits
        partial |= code << bits_used
        bits_used += code_len
        while bits_used >= 8:
            out.append(partial & 0xFF)
            partial >>= 8
            bits_used -= 8
    if bits_used > 0:
        out.append(partial)
    return bytes(out)


def unpack_codes(data, code_len):
    """Lazily read codes from `data`.

    `code_len` is called before every read, so the width can follow the
    decoder's own state. Raises TruncatedStreamError when the bytes run out.
    """
    stream = ConstBitStream(reverse_bytes(data))
    while True:
        n = code_len()
        try:
            chunk = stream.read(f'bits:{n}')
        except ReadError:
            raise TruncatedStreamError(
                f'Needed {n} bits at bit {stream.pos}, '
                f'only {len(stream) - stream.pos} left') from None
        yield to_word(chunk)
