"""Grid renderer: paint a palette as solid cells and save it as an image.

Cell (col, row) takes colours[col + row * columns]. Cells past the end of
the palette stay white; palette entries past the last cell are not drawn.
"""

from collections.abc import Sequence

import numpy as np
from PIL import Image

from aco_draw.core.types import Colour, GridLayout

BACKGROUND = (255, 255, 255)


def parse_size(text: str) -> tuple[int, int]:
    """Parse 'AxB' into (A, B). Both parts must be positive integers."""
    first, sep, second = text.strip().lower().partition('x')
    if not sep:
        raise ValueError(f'expected <a>x<b>, got {text!r}')
    if not (first.isdigit() and second.isdigit()):
        raise ValueError(f'both sides of {text!r} must be whole numbers')
    a, b = int(first), int(second)
    if a <= 0 or b <= 0:
        raise ValueError(f'both sides of {text!r} must be greater than zero')
    return (a, b)


def render_palette(colours: Sequence[Colour], layout: GridLayout) -> Image.Image:
    """Render colours into an RGB image laid out by `layout`."""
    width, height = layout.image_size
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = BACKGROUND

    for index in range(min(len(colours), layout.cell_count)):
        x1, y1, x2, y2 = layout.cell_box(index)
        canvas[y1:y2, x1:x2] = colours[index].rgb

    return Image.fromarray(canvas)


def save_palette_image(colours: Sequence[Colour], layout: GridLayout, path: str) -> Image.Image:
    """Render and save. The image format follows the file extension."""
    image = render_palette(colours, layout)
    image.save(path)
    return image
