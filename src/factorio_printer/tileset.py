"""Read and write palettes as ``red,green,blue,name,is_tile`` CSV files."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from .errors import TilesetError
from .palette import UNIFORM_WEIGHTS, Palette, PaletteEntry, Weights

FIELDNAMES = ["red", "green", "blue", "name", "is_tile"]

_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


def _parse_component(text: str, line: int) -> int:
    try:
        value = int(text.strip())
    except ValueError as exc:
        raise TilesetError(f"Line {line}: invalid color component: {text!r}") from exc
    if not 0 <= value <= 255:
        raise TilesetError(f"Line {line}: color components must be between 0 and 255")
    return value


def _parse_bool(text: str, line: int) -> bool:
    value = text.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise TilesetError(f"Line {line}: invalid is_tile value: {text!r}")


def load_tileset(path: str | Path, weights: Weights = UNIFORM_WEIGHTS) -> Palette:
    path = Path(path)
    entries: List[PaletteEntry] = []
    try:
        with path.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            missing = [name for name in FIELDNAMES if name not in (reader.fieldnames or [])]
            if missing:
                raise TilesetError(f"Tileset {path} is missing columns: {', '.join(missing)}")
            for row in reader:
                line = reader.line_num
                if any(row.get(name) is None for name in FIELDNAMES):
                    raise TilesetError(f"Line {line}: expected {len(FIELDNAMES)} columns")
                name = row["name"].strip()
                if not name:
                    raise TilesetError(f"Line {line}: name must not be empty")
                color = (
                    _parse_component(row["red"], line),
                    _parse_component(row["green"], line),
                    _parse_component(row["blue"], line),
                )
                entries.append(PaletteEntry(color, name, _parse_bool(row["is_tile"], line)))
    except FileNotFoundError as exc:
        raise TilesetError(f"Tileset file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise TilesetError(f"Tileset {path} is not valid UTF-8") from exc
    except OSError as exc:
        raise TilesetError(f"Failed to read tileset: {path}") from exc
    return Palette(entries, weights)


def save_tileset(palette: Palette, path: str | Path) -> Path:
    path = Path(path)
    try:
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(FIELDNAMES)
            for entry in palette:
                r, g, b = entry.color
                writer.writerow([r, g, b, entry.label, "true" if entry.is_tile else "false"])
    except OSError as exc:
        raise TilesetError(f"Failed to write tileset: {path}") from exc
    return path
