"""Report builder — text and JSON listings of a decoded palette."""

import json
import os
from typing import Any

from aco_draw.core.types import Palette


def format_text(palette: Palette, path: str | None = None) -> str:
    """Format palette as human-readable text, one colour per line."""
    lines = []
    header = f'aco-draw: {len(palette)} colours (version {palette.version})'
    if path:
        header = f'aco-draw: {os.path.basename(path)} — {len(palette)} colours (version {palette.version})'
    lines.append(header)
    lines.append('')

    width = len(str(max(len(palette) - 1, 0)))
    for i, colour in enumerate(palette):
        r, g, b = colour.rgb
        lines.append(f'  {i:>{width}}  {colour.hex}  rgb({r:>3}, {g:>3}, {b:>3})')

    return '\n'.join(lines)


def format_json(palette: Palette, path: str | None = None) -> str:
    """Format palette as JSON."""
    obj: dict[str, Any] = {}
    if path:
        obj['file'] = path
    obj['version'] = palette.version
    obj['count'] = len(palette)
    obj['colours'] = [{'index': i, 'hex': c.hex, 'r': c.r, 'g': c.g, 'b': c.b} for i, c in enumerate(palette)]
    return json.dumps(obj, indent=2)
