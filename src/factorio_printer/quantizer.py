"""Quantizer capability handed to dithering strategies."""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from .palette import Palette

RGBA = Tuple[int, int, int, int]


class ColorMap(Protocol):
    """What a dithering pass needs from a palette."""

    def index_of(self, color: Sequence[int]) -> int:
        ...

    def map_color(self, color: Sequence[int]) -> RGBA:
        ...


class PaletteQuantizer:
    """Expose a :class:`Palette` through the :class:`ColorMap` interface.

    Alpha is never quantized: :meth:`map_color` always returns an opaque
    colour and the caller keeps the original alpha separately.
    """

    def __init__(self, palette: Palette):
        self.palette = palette

    def index_of(self, color: Sequence[int]) -> int:
        return self.palette.exact_index(color)

    def map_color(self, color: Sequence[int]) -> RGBA:
        r, g, b = self.palette.nearest(color)
        return (r, g, b, 255)
