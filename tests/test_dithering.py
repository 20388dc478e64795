from PIL import Image

from factorio_printer.dithering import available_ditherers, floyd_steinberg, nearest_only
from factorio_printer.palette import NOT_FOUND, Palette, PaletteEntry
from factorio_printer.quantizer import PaletteQuantizer


def _black_white() -> Palette:
    return Palette(
        [
            PaletteEntry((0, 0, 0), "black", True),
            PaletteEntry((255, 255, 255), "white", False),
        ]
    )


class RecordingColorMap:
    def __init__(self, quantizer: PaletteQuantizer):
        self.quantizer = quantizer
        self.calls = []

    def index_of(self, color):
        return self.quantizer.index_of(color)

    def map_color(self, color):
        self.calls.append(tuple(color))
        return self.quantizer.map_color(color)


def test_quantizer_index_of_matches_exact_lookup() -> None:
    quantizer = PaletteQuantizer(_black_white())

    assert quantizer.index_of((255, 255, 255, 255)) == 1
    assert quantizer.index_of((254, 255, 255, 255)) == NOT_FOUND


def test_quantizer_map_color_forces_opaque_alpha() -> None:
    quantizer = PaletteQuantizer(_black_white())

    assert quantizer.map_color((30, 20, 10, 0)) == (0, 0, 0, 255)
    assert quantizer.map_color((200, 220, 180, 77)) == (255, 255, 255, 255)


def test_floyd_steinberg_outputs_only_palette_colors() -> None:
    image = Image.new("RGBA", (8, 4))
    image.putdata([(x * 32, y * 60, 128, 255) for y in range(4) for x in range(8)])

    floyd_steinberg(image, PaletteQuantizer(_black_white()))

    pixels = image.load()
    colors = {pixels[x, y] for y in range(4) for x in range(8)}
    assert colors <= {(0, 0, 0, 255), (255, 255, 255, 255)}


def test_floyd_steinberg_mixes_mid_grey() -> None:
    image = Image.new("RGBA", (8, 8), (128, 128, 128, 255))

    floyd_steinberg(image, PaletteQuantizer(_black_white()))

    pixels = image.load()
    colors = [pixels[x, y] for y in range(8) for x in range(8)]
    whites = colors.count((255, 255, 255, 255))
    assert 16 < whites < 48


def test_floyd_steinberg_diffuses_error_to_the_right() -> None:
    image = Image.new("RGBA", (2, 1), (100, 100, 100, 255))

    floyd_steinberg(image, PaletteQuantizer(_black_white()))

    pixels = image.load()
    # 100 maps to black; 100 + 100 * 7 // 16 = 143 maps to white.
    assert pixels[0, 0] == (0, 0, 0, 255)
    assert pixels[1, 0] == (255, 255, 255, 255)


def test_strategies_call_map_color_once_per_pixel() -> None:
    for ditherer in (floyd_steinberg, nearest_only):
        image = Image.new("RGBA", (3, 2))
        image.putdata([(i * 40, i * 40, i * 40, 255) for i in range(6)])
        recorder = RecordingColorMap(PaletteQuantizer(_black_white()))

        ditherer(image, recorder)

        assert len(recorder.calls) == 6


def test_nearest_only_visits_pixels_in_row_major_order() -> None:
    image = Image.new("RGBA", (3, 2))
    image.putdata([(i, i, i, 255) for i in range(6)])
    recorder = RecordingColorMap(PaletteQuantizer(_black_white()))

    nearest_only(image, recorder)

    assert [call[0] for call in recorder.calls] == [0, 1, 2, 3, 4, 5]


def test_nearest_only_keeps_no_error() -> None:
    image = Image.new("RGBA", (2, 1), (100, 100, 100, 10))

    nearest_only(image, PaletteQuantizer(_black_white()))

    pixels = image.load()
    assert pixels[0, 0] == pixels[1, 0] == (0, 0, 0, 255)


def test_available_ditherers() -> None:
    assert available_ditherers() == ["fs", "none"]


def test_floyd_steinberg_diffuses_along_the_bottom_row() -> None:
    image = Image.new("RGBA", (2, 2), (0, 0, 0, 255))
    image.putpixel((0, 1), (100, 100, 100, 255))
    image.putpixel((1, 1), (100, 100, 100, 255))

    floyd_steinberg(image, PaletteQuantizer(_black_white()))

    pixels = image.load()
    # 100 maps to black; its neighbour becomes 100 + 100 * 7 // 16 = 143 and maps to white.
    assert pixels[0, 1] == (0, 0, 0, 255)
    assert pixels[1, 1] == (255, 255, 255, 255)
