"""Turn a quantized image into one blueprint per grid cell."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import List

from PIL import Image

from .errors import PaletteMismatchError
from .grid import MAX_SPLIT, GridPartition
from .palette import NOT_FOUND, Palette
from .schema import Blueprint

DEFAULT_ALPHA_THRESHOLD = 128
MAX_ICON_COORDINATE = 99


@dataclass
class AssembleOptions:
    """Options for walking the quantized image."""

    label: str = "Blueprint"
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD
    split: int = 0

    def validate(self) -> None:
        if not 0 <= self.alpha_threshold <= 255:
            raise ValueError("Alpha threshold must be between 0 and 255")
        if self.split > MAX_SPLIT:
            raise ValueError(f"Split size must be at most {MAX_SPLIT}")


def cell_label(label: str, cell_x: int, cell_y: int) -> str:
    return f"{label}: x: {cell_x} y: {cell_y}"


def _assign_icons(blueprints: List[Blueprint], grid: GridPartition) -> None:
    values = []
    overflow = False
    for _index, cell_x, cell_y in grid.iter_cells():
        if cell_x > MAX_ICON_COORDINATE or cell_y > MAX_ICON_COORDINATE:
            overflow = True
            break
        values.append(cell_x * 100 + cell_y)

    if overflow:
        warnings.warn(
            f"resulting split side count >{MAX_ICON_COORDINATE}, icons will be set to 0",
            RuntimeWarning,
            stacklevel=3,
        )
        values = [0] * len(blueprints)

    for blueprint, value in zip(blueprints, values):
        blueprint.set_icons(value)


def assemble_blueprints(
    image: Image.Image,
    alpha: Image.Image,
    palette: Palette,
    options: AssembleOptions | None = None,
) -> List[Blueprint]:
    """Build blueprints from a dithered ``image`` and an ``alpha`` mask.

    ``image`` must already be quantized onto ``palette``; only its RGB
    channels are looked up. ``alpha`` supplies the alpha channel that
    decides which pixels are kept. Blueprints are returned in row-major
    cell order and entities are numbered in row-major pixel order.
    """

    options = options or AssembleOptions()
    options.validate()

    if image.size != alpha.size:
        raise ValueError(
            f"Image size {image.size} does not match alpha mask size {alpha.size}"
        )
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")
    if alpha.mode != "RGBA":
        alpha = alpha.convert("RGBA")

    width, height = image.size
    grid = GridPartition(width, height, options.split)

    blueprints = [
        Blueprint(label=cell_label(options.label, cell_x, cell_y))
        for _index, cell_x, cell_y in grid.iter_cells()
    ]
    _assign_icons(blueprints, grid)

    pixels = image.load()
    mask = alpha.load()
    for y in range(height):
        for x in range(width):
            if mask[x, y][3] < options.alpha_threshold:
                continue
            color = pixels[x, y]
            entry_index = palette.exact_index(color)
            if entry_index == NOT_FOUND:
                raise PaletteMismatchError(
                    f"No palette entry matches pixel ({x}, {y}) with color "
                    f"{tuple(color[:3])}. Did you forget the dithering?"
                )
            entry = palette[entry_index]
            cell, local_x, local_y = grid.locate(x, y)
            if entry.is_tile:
                blueprints[cell].add_tile(entry.label, local_x, local_y)
            else:
                blueprints[cell].add_entity(entry.label, local_x, local_y)

    return blueprints
