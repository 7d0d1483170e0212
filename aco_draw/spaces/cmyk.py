"""CMYK (space id 2). Four inverted 16-bit channels.

Payload words: C, M, Y, K. On the wire 0 means 100% ink and 65535 means
no ink, so each channel is read as 1 - raw / 65535 before conversion.

Conversion (shared with wide-cmyk):
    R = 1 - min(1, C * (1 - K) + K)    (G from M, B from Y)
then each channel is scaled to 0..255 and truncated.

Example:
    aco-draw spaces cmyk
"""

from aco_draw.core.binary import read_words
from aco_draw.core.types import Colour, ColourSpace, ColourSpaceId

space = ColourSpace(ColourSpaceId.CMYK, help='16-bit CMYK, inverted (65535 = no ink).')


def cmyk_to_colour(c: float, m: float, y: float, k: float) -> Colour:
    """Convert CMYK fractions in [0, 1] to a Colour."""
    r = 1 - min(1.0, c * (1 - k) + k)
    g = 1 - min(1.0, m * (1 - k) + k)
    b = 1 - min(1.0, y * (1 - k) + k)
    return Colour.clamped(r * 255, g * 255, b * 255)


@space.decoder
def decode(payload: bytes) -> Colour:
    c, m, y, k = (1 - raw / 65535.0 for raw in read_words(payload))
    return cmyk_to_colour(c, m, y, k)
