"""Image to blueprint converter.

Dithers an image onto a palette of placeable objects, walks the result into
one or more blueprints and exports them as a version-prefixed exchange
string. It can be invoked through the CLI (``python -m factorio_printer``) or
imported to convert images in memory.
"""

from .assembler import AssembleOptions, assemble_blueprints
from .codec import build_document, encode_exchange_string, serialize_blueprints
from .converter import ConversionResult, ConvertOptions, convert_file, convert_image
from .dithering import floyd_steinberg, nearest_only
from .errors import ConversionError, PaletteMismatchError, TilesetError
from .grid import GridPartition
from .palette import (
    NOT_FOUND,
    PERCEPTUAL_WEIGHTS,
    UNIFORM_WEIGHTS,
    Palette,
    PaletteEntry,
)
from .quantizer import PaletteQuantizer
from .schema import Blueprint, BlueprintBook, icons_for_number
from .tileset import load_tileset, save_tileset

__all__ = [
    "AssembleOptions",
    "Blueprint",
    "BlueprintBook",
    "ConversionError",
    "ConversionResult",
    "ConvertOptions",
    "GridPartition",
    "NOT_FOUND",
    "PERCEPTUAL_WEIGHTS",
    "Palette",
    "PaletteEntry",
    "PaletteMismatchError",
    "PaletteQuantizer",
    "TilesetError",
    "UNIFORM_WEIGHTS",
    "assemble_blueprints",
    "build_document",
    "convert_file",
    "convert_image",
    "encode_exchange_string",
    "floyd_steinberg",
    "icons_for_number",
    "load_tileset",
    "nearest_only",
    "save_tileset",
    "serialize_blueprints",
]
