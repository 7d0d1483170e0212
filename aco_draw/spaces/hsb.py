"""HSB (space id 1). Hue, saturation and brightness as 16-bit channels.

Payload words: H, S, B, unused.
  H / 182.04  -> hue in degrees (65535 is about 360)
  S / 655.35  -> saturation in percent
  B / 655.35  -> brightness in percent

RGB comes from the usual six-sector HSV construction. With i the sector
and f the position inside it:
  p = V(1 - S)   q = V(1 - fS)   t = V(1 - (1 - f)S)
  0: (V, t, p)  1: (q, V, p)  2: (p, V, t)
  3: (p, q, V)  4: (t, p, V)  5: (V, p, q)
where V is brightness on the 0..255 scale and S is a fraction.

Example:
    aco-draw spaces hsb
"""

import math

from aco_draw.core.binary import read_words
from aco_draw.core.errors import ColourSpaceInvariantError
from aco_draw.core.types import Colour, ColourSpace, ColourSpaceId

space = ColourSpace(ColourSpaceId.HSB, help='Hue/saturation/brightness, hue in 1/182.04 degree steps.')

HUE_DIVISOR = 182.04
PERCENT_DIVISOR = 655.35


@space.decoder
def decode(payload: bytes) -> Colour:
    raw_h, raw_s, raw_b, _ = read_words(payload)
    h = raw_h / HUE_DIVISOR
    s = raw_s / PERCENT_DIVISOR / 100
    v = raw_b / PERCENT_DIVISOR / 100 * 255

    sector = math.floor(h / 60)
    f = h / 60 - sector
    i = sector % 6
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if i == 0:
        return Colour.clamped(v, t, p)
    elif i == 1:
        return Colour.clamped(q, v, p)
    elif i == 2:
        return Colour.clamped(p, v, t)
    elif i == 3:
        return Colour.clamped(p, q, v)
    elif i == 4:
        return Colour.clamped(t, p, v)
    elif i == 5:
        return Colour.clamped(v, p, q)
    raise ColourSpaceInvariantError(f'HSB sector {i} outside 0..5 (hue {h:.2f})')
