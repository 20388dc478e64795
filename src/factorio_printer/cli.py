"""Command line interface for the blueprint printer."""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

from .converter import ConvertOptions, convert_file, parse_size
from .dithering import available_ditherers
from .errors import ConversionError
from .grid import MAX_SPLIT
from .palette import WEIGHT_PRESETS, Palette
from .tileset import load_tileset, save_tileset

PRESETS = {
    "base": Palette.preset_base_game,
    "color-coding": Palette.preset_color_coding,
}


def _threshold(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError("must be between 0 and 255")
    return value


def _split(text: str) -> int:
    value = int(text)
    if not 0 <= value <= MAX_SPLIT:
        raise argparse.ArgumentTypeError(f"must be between 0 and {MAX_SPLIT}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Convert an image into a blueprint exchange string.\n"
            "Pixels are dithered onto the tileset colors; every pixel becomes a tile or an "
            "entity. Use --split to cut large images into a blueprint book of square cells."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Input image file")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="Destination directory for the blueprint and preview files",
    )
    parser.add_argument("--label", help="Blueprint label (default: input file name)")
    parser.add_argument(
        "--tileset",
        default="base",
        help=f"Built-in tileset ({', '.join(sorted(PRESETS))}) or path to a tileset CSV",
    )
    parser.add_argument(
        "--export-tileset",
        metavar="PATH",
        help="Write the selected tileset as CSV and exit",
    )
    parser.add_argument(
        "--alpha-threshold",
        type=_threshold,
        default=128,
        help="Pixels with alpha below this value are left empty (0-255)",
    )
    parser.add_argument(
        "--split",
        type=_split,
        default=0,
        help="Cut the image into square blueprints of this size (0 disables splitting)",
    )
    parser.add_argument(
        "--weights",
        choices=sorted(WEIGHT_PRESETS),
        default="uniform",
        help="Channel weights for nearest color search",
    )
    parser.add_argument(
        "--dither",
        choices=available_ditherers(),
        default="fs",
        help="Dithering strategy (fs: Floyd-Steinberg, none: nearest color only)",
    )
    parser.add_argument("--resize", help="Resize before converting, e.g. 64x0 or 64x48")
    parser.add_argument(
        "--no-preview",
        action="store_true",
        help="Do not write the dithered preview PNG",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files",
    )
    return parser


def select_tileset(name: str) -> Palette:
    if name in PRESETS:
        return PRESETS[name]()
    return load_tileset(name)


def write_outputs(targets: dict[Path, object], force: bool) -> None:
    conflicts = [str(target) for target in targets if target.exists() and not force]
    if conflicts:
        raise ConversionError(
            "Output files already exist (use --force to overwrite):\n" + "\n".join(conflicts)
        )
    for target, data in targets.items():
        target.parent.mkdir(parents=True, exist_ok=True)
        try:
            if isinstance(data, str):
                target.write_text(data, encoding="ascii")
            else:
                data.save(target)  # type: ignore[attr-defined]
        except OSError as exc:
            raise ConversionError(f"Failed to write {target}: {exc}") from exc
        print(f"wrote {target}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        palette = select_tileset(args.tileset).with_weights(WEIGHT_PRESETS[args.weights])

        if args.export_tileset:
            target = Path(args.export_tileset)
            if target.exists() and not args.force:
                raise ConversionError(f"Output file already exists (use --force to overwrite): {target}")
            save_tileset(palette, target)
            print(f"wrote {target}")
            return 0

        if not args.input:
            parser.error("an input image is required unless --export-tileset is given")

        input_path = Path(args.input)
        if not input_path.is_file():
            raise ConversionError(f'"{input_path}" is not a file')

        options = ConvertOptions(
            label=args.label or input_path.stem,
            palette=palette,
            alpha_threshold=args.alpha_threshold,
            split=args.split,
            dither=args.dither,
            resize=parse_size(args.resize) if args.resize else None,
        )

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", RuntimeWarning)
            result = convert_file(input_path, options)
        for warning in caught:
            print(f"Warning: {warning.message}", file=sys.stderr)

        output_dir = Path(args.output_dir)
        targets: dict[Path, object] = {
            output_dir / f"{input_path.stem}_blueprint.txt": result.blueprint_string,
        }
        if not args.no_preview:
            targets[output_dir / f"{input_path.stem}_converted.png"] = result.preview
        write_outputs(targets, args.force)
        print(f"{result.blueprint_count} blueprint(s)")
        return 0
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
