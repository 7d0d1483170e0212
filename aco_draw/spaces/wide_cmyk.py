"""Wide CMYK (space id 9). Four channels in percent x 100.

Payload words: C, M, Y, K, each 0..10000 where 10000 is 100% ink. Unlike
plain cmyk the channels are not inverted. Each is reduced to a whole
percent (integer division by 100) and passed to the shared CMYK formula
as a fraction.

Example:
    aco-draw spaces wide-cmyk
"""

from aco_draw.core.binary import read_words
from aco_draw.core.types import Colour, ColourSpace, ColourSpaceId
from aco_draw.spaces.cmyk import cmyk_to_colour

space = ColourSpace(ColourSpaceId.WIDE_CMYK, help='CMYK in percent x 100 (10000 = full ink).')


@space.decoder
def decode(payload: bytes) -> Colour:
    c, m, y, k = ((raw // 100) / 100.0 for raw in read_words(payload))
    return cmyk_to_colour(c, m, y, k)
