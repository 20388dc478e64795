"""Dithering strategies driving a :class:`~factorio_printer.quantizer.ColorMap`.

Both strategies mutate an RGBA image in place, visiting pixels in row-major
order and calling ``map_color`` exactly once per pixel.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from PIL import Image

from .quantizer import ColorMap

Ditherer = Callable[[Image.Image, ColorMap], None]

# (dx, dy, weight / 16)
FLOYD_STEINBERG_KERNEL = (
    (1, 0, 7),
    (-1, 1, 3),
    (0, 1, 5),
    (1, 1, 1),
)


def _require_rgba(image: Image.Image) -> None:
    if image.mode != "RGBA":
        raise ValueError(f"Dithering expects an RGBA image, got {image.mode}")


def _scaled_error(error: int, weight: int) -> int:
    # Integer division truncating toward zero.
    value = abs(error) * weight // 16
    return -value if error < 0 else value


def _clamp(value: int) -> int:
    if value < 0:
        return 0
    if value > 255:
        return 255
    return value


def floyd_steinberg(image: Image.Image, color_map: ColorMap) -> None:
    """Floyd-Steinberg error diffusion over the RGB channels.

    The quantization error of each pixel is pushed to its unvisited
    neighbours (7/16 right, 3/16 lower-left, 5/16 below, 1/16 lower-right).
    Error keeps travelling right along the bottom row as well.
    Alpha is left for ``map_color`` to decide and is never diffused.
    """

    _require_rgba(image)
    width, height = image.size
    pixels = image.load()
    for y in range(height):
        for x in range(width):
            old = pixels[x, y]
            new = color_map.map_color(old)
            pixels[x, y] = new
            error = [old[c] - new[c] for c in range(3)]
            if not any(error):
                continue
            for dx, dy, weight in FLOYD_STEINBERG_KERNEL:
                nx = x + dx
                ny = y + dy
                if nx < 0 or nx >= width or ny >= height:
                    continue
                target = pixels[nx, ny]
                pixels[nx, ny] = (
                    _clamp(target[0] + _scaled_error(error[0], weight)),
                    _clamp(target[1] + _scaled_error(error[1], weight)),
                    _clamp(target[2] + _scaled_error(error[2], weight)),
                    target[3],
                )


def nearest_only(image: Image.Image, color_map: ColorMap) -> None:
    """Snap every pixel to its nearest palette colour without diffusion."""

    _require_rgba(image)
    width, height = image.size
    pixels = image.load()
    for y in range(height):
        for x in range(width):
            pixels[x, y] = color_map.map_color(pixels[x, y])


DITHERERS: Dict[str, Ditherer] = {
    "fs": floyd_steinberg,
    "none": nearest_only,
}


def available_ditherers() -> List[str]:
    return sorted(DITHERERS)
