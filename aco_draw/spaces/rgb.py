"""RGB (space id 0). Three 16-bit channels, top 8 bits kept.

Payload words: R, G, B, unused. Each word is 0..65535 and is divided by
256 (integer division) to give the 8-bit channel, so 0xFF00 and 0xFFFF
both become 255.

Example:
    aco-draw spaces rgb
"""

from aco_draw.core.binary import read_words
from aco_draw.core.types import Colour, ColourSpace, ColourSpaceId

space = ColourSpace(ColourSpaceId.RGB, help='16-bit RGB, top byte of each channel kept.')


@space.decoder
def decode(payload: bytes) -> Colour:
    r, g, b, _ = read_words(payload)
    return Colour(r // 256, g // 256, b // 256)
