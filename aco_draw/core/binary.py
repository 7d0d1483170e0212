"""Big-endian 16-bit readers for .aco payloads.

Callers always pass full 2-byte windows. A short buffer raises struct.error.
"""

import struct

_U16 = struct.Struct('>H')
_I16 = struct.Struct('>h')
_WORDS = struct.Struct('>4H')


def read_u16_be(data: bytes, offset: int = 0) -> int:
    """Unsigned 16-bit integer at `offset`."""
    return _U16.unpack_from(data, offset)[0]


def read_i16_be(data: bytes, offset: int = 0) -> int:
    """Signed (two's complement) 16-bit integer at `offset`."""
    return _I16.unpack_from(data, offset)[0]


def read_words(payload: bytes) -> tuple[int, int, int, int]:
    """Split an 8-byte record payload into its four unsigned channel words."""
    return _WORDS.unpack_from(payload, 0)
