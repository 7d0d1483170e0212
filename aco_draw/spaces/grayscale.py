"""Grayscale (space id 8). One channel scaled 0..10000.

Payload words: gray, unused, unused, unused. The value is divided by
39.0625 (10000 / 256) and truncated, then replicated into R, G and B.
0 is black. 10000 would give 256, which is clamped to 255.

Example:
    aco-draw spaces grayscale
"""

from aco_draw.core.binary import read_u16_be
from aco_draw.core.types import Colour, ColourSpace, ColourSpaceId

space = ColourSpace(ColourSpaceId.GRAYSCALE, help='Gray level 0..10000, black at 0.')

GRAY_DIVISOR = 39.0625


@space.decoder
def decode(payload: bytes) -> Colour:
    x = read_u16_be(payload) / GRAY_DIVISOR
    return Colour.clamped(x, x, x)
