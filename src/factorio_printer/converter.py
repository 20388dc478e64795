"""End-to-end conversion from an image to a blueprint exchange string."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from PIL import Image

from .assembler import DEFAULT_ALPHA_THRESHOLD, AssembleOptions, assemble_blueprints
from .codec import serialize_blueprints
from .dithering import DITHERERS
from .errors import ConversionError
from .palette import Palette, Weights
from .quantizer import PaletteQuantizer

Size = Tuple[int, int]


@dataclass
class ConvertOptions:
    """Options for the whole image to blueprint pipeline."""

    label: str = "Blueprint"
    palette: Palette = field(default_factory=Palette.preset_base_game)
    weights: Weights | None = None
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD
    split: int = 0
    dither: str = "fs"  # fs, none
    resize: Size | None = None

    def effective_palette(self) -> Palette:
        if self.weights is None:
            return self.palette
        return self.palette.with_weights(self.weights)


@dataclass
class ConversionResult:
    preview: Image.Image
    blueprint_string: str
    blueprint_count: int


def parse_size(text: str) -> Size:
    """Parse ``WIDTHxHEIGHT``; either side may be 0 to keep the aspect ratio."""

    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ConversionError(f"Size must look like WIDTHxHEIGHT: {text}")
    try:
        width, height = (int(part) for part in parts)
    except ValueError as exc:
        raise ConversionError(f"Invalid size: {text}") from exc
    if width < 0 or height < 0 or (width == 0 and height == 0):
        raise ConversionError(f"Invalid size: {text}")
    return width, height


def resize_image(image: Image.Image, size: Size) -> Image.Image:
    width, height = image.size
    target_w, target_h = size
    if target_w == 0:
        target_w = max(1, round(width * target_h / height))
    elif target_h == 0:
        target_h = max(1, round(height * target_w / width))
    if (target_w, target_h) == (width, height):
        return image
    return image.resize((target_w, target_h), Image.NEAREST)


def convert_image(image: Image.Image, options: ConvertOptions | None = None) -> ConversionResult:
    options = options or ConvertOptions()
    palette = options.effective_palette()
    if len(palette) == 0:
        raise ConversionError("Tileset is empty")

    try:
        ditherer = DITHERERS[options.dither]
    except KeyError as exc:
        raise ConversionError(f"Unknown dither mode: {options.dither}") from exc

    original = image.convert("RGBA")
    if original.width == 0 or original.height == 0:
        raise ConversionError(f"Image is empty: {original.width}x{original.height}")
    if options.resize is not None:
        original = resize_image(original, options.resize)

    quantized = original.copy()
    ditherer(quantized, PaletteQuantizer(palette))

    try:
        blueprints = assemble_blueprints(
            quantized,
            original,
            palette,
            AssembleOptions(
                label=options.label,
                alpha_threshold=options.alpha_threshold,
                split=options.split,
            ),
        )
        blueprint_string = serialize_blueprints(blueprints, options.label)
    except ValueError as exc:
        raise ConversionError(str(exc)) from exc

    return ConversionResult(
        preview=quantized,
        blueprint_string=blueprint_string,
        blueprint_count=len(blueprints),
    )


def convert_file(path: str | Path, options: ConvertOptions | None = None) -> ConversionResult:
    path = Path(path)
    try:
        with Image.open(path) as img:
            return convert_image(img, options)
    except FileNotFoundError as exc:
        raise ConversionError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise ConversionError(f"Failed to read image: {path}") from exc
