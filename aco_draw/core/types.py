"""Shared types for aco-draw: Colour, RawRecord, ColourSpace, Palette, GridLayout."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import overload


def _clamp_channel(value: float) -> int:
    # int() truncates toward zero
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Colour:
    """An opaque 8-bit RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f'Colour channel {name}={value!r} outside 0..255')

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> Colour:
        """Truncate each channel toward zero, then clamp it into 0..255."""
        for value in (r, g, b):
            if isinstance(value, float) and math.isnan(value):
                raise ValueError('Colour channel is NaN')
        return cls(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


class ColourSpaceId(IntEnum):
    """Colour space ids as they appear on the wire."""

    RGB = 0
    HSB = 1
    CMYK = 2
    LAB = 7
    GRAYSCALE = 8
    WIDE_CMYK = 9


@dataclass(frozen=True)
class RawRecord:
    """One undecoded record: a colour space id and its 8-byte payload."""

    space_id: int
    payload: bytes


class ColourSpace:
    """A self-registering colour space decoder.

    Usage in a space module:

        space = ColourSpace(ColourSpaceId.RGB, help='16-bit RGB')

        @space.decoder
        def decode(payload):
            ...
    """

    def __init__(self, space_id: ColourSpaceId, help: str = ''):
        self.id = space_id
        self.name = space_id.name.lower().replace('_', '-')
        self.help = help
        self._decode_fn: Callable[[bytes], Colour] | None = None

    def decoder(self, fn: Callable[[bytes], Colour]) -> Callable[[bytes], Colour]:
        """Decorator to register the decode function."""
        self._decode_fn = fn
        return fn

    def decode(self, payload: bytes) -> Colour:
        """Decode one 8-byte payload into a Colour."""
        if self._decode_fn is None:
            raise RuntimeError(f'Colour space {self.name} has no decode function')
        return self._decode_fn(payload)


@dataclass
class Palette(Sequence[Colour]):
    """Decoded colours in file order, plus the version field the parser skipped."""

    version: int = 0
    colours: list[Colour] = field(default_factory=list)

    @overload
    def __getitem__(self, index: int) -> Colour: ...

    @overload
    def __getitem__(self, index: slice) -> list[Colour]: ...

    def __getitem__(self, index):
        return self.colours[index]

    def __len__(self) -> int:
        return len(self.colours)

    def __iter__(self) -> Iterator[Colour]:
        return iter(self.colours)


@dataclass(frozen=True)
class GridLayout:
    """Grid geometry for rendering: columns x rows cells of cell_width x cell_height pixels."""

    columns: int
    rows: int
    cell_width: int
    cell_height: int

    def __post_init__(self) -> None:
        for name in ('columns', 'rows', 'cell_width', 'cell_height'):
            if getattr(self, name) <= 0:
                raise ValueError(f'{name} must be positive, got {getattr(self, name)}')

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    @property
    def image_size(self) -> tuple[int, int]:
        """(width, height) of the rendered image in pixels."""
        return (self.columns * self.cell_width, self.rows * self.cell_height)

    def cell_box(self, index: int) -> tuple[int, int, int, int]:
        """(x1, y1, x2, y2) pixel box of the cell at linear index col + row * columns."""
        if not 0 <= index < self.cell_count:
            raise IndexError(f'cell index {index} outside grid of {self.cell_count} cells')
        row, col = divmod(index, self.columns)
        x1 = col * self.cell_width
        y1 = row * self.cell_height
        return (x1, y1, x1 + self.cell_width, y1 + self.cell_height)
