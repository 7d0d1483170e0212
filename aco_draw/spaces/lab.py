"""CIE L*a*b* (space id 7), D50 referenced.

Payload words: L, a, b, unused.
  L  unsigned / 100 -> 0..100
  a  signed   / 100 -> about -128..127
  b  signed   / 100 -> about -128..127

Pipeline:
  1. L*a*b* -> XYZ against the D50 white (0.9642, 1.0, 0.8249), using the
     cube above f = 6/29 and the linear segment below it.
  2. XYZ D50 -> D65 through the fixed adaptation matrix M_ADAPT.
  3. XYZ -> linear RGB through M_XYZ_TO_RGB, scaled by 255 and truncated.

No gamma curve is applied. Out-of-gamut channels are clamped to 0..255.

Example:
    aco-draw spaces lab
"""

import numpy as np

from aco_draw.core.binary import read_i16_be, read_u16_be
from aco_draw.core.types import Colour, ColourSpace, ColourSpaceId

space = ColourSpace(ColourSpaceId.LAB, help='CIE L*a*b* (D50), adapted to D65 linear RGB.')

WHITE_D50 = np.array([0.9642, 1.0, 0.8249])

DELTA = 6 / 29

M_ADAPT = np.array(
    [
        [3.134187, -1.617209, -0.490694],
        [-0.978749, 1.916130, 0.033433],
        [0.071964, -0.228994, 1.405754],
    ]
)

M_XYZ_TO_RGB = np.array(
    [
        [3.240479, -1.537150, -0.498535],
        [-0.969256, 1.875991, 0.041556],
        [0.055648, -0.204043, 1.057331],
    ]
)


def lab_to_xyz(L: float, a: float, b: float) -> np.ndarray:
    """L*a*b* -> XYZ relative to the D50 white."""
    f_y = (L + 16) / 116
    f = np.array([f_y + a / 500, f_y, f_y - b / 200])
    cube = f**3
    linear = (3 / 29) ** 3 * (116 * f - 16)
    return np.where(f > DELTA, cube, linear) * WHITE_D50


def xyz_to_rgb(xyz: np.ndarray) -> np.ndarray:
    """D50 XYZ -> D65 linear RGB on the 0..255 scale (unclamped)."""
    return 255 * (M_XYZ_TO_RGB @ (M_ADAPT @ xyz))


@space.decoder
def decode(payload: bytes) -> Colour:
    L = read_u16_be(payload, 0) / 100.0
    a = read_i16_be(payload, 2) / 100.0
    b = read_i16_be(payload, 4) / 100.0
    r, g, bl = xyz_to_rgb(lab_to_xyz(L, a, b))
    return Colour.clamped(float(r), float(g), float(bl))
