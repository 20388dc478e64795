"""Palette of placeable objects and nearest-colour search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

Color = Tuple[int, int, int]
Weights = Tuple[int, int, int]

NOT_FOUND = -1

UNIFORM_WEIGHTS: Weights = (1, 1, 1)
PERCEPTUAL_WEIGHTS: Weights = (11, 59, 30)

WEIGHT_PRESETS = {
    "uniform": UNIFORM_WEIGHTS,
    "perceptual": PERCEPTUAL_WEIGHTS,
}

# (red, green, blue, name, is_tile)
TILESET_BASE: List[Tuple[int, int, int, str, bool]] = [
    (47, 49, 41, "refined-concrete", True),
    (115, 93, 25, "refined-hazard-concrete-left", True),
    (82, 81, 74, "stone-path", True),
    (58, 61, 58, "concrete", True),
    (181, 142, 33, "hazard-concrete-left", True),
    (0, 93, 148, "wooden-chest", False),
    (206, 158, 66, "transport-belt", False),
    (206, 215, 206, "stone-wall", False),
]

TILESET_COLOR_CODING: List[Tuple[int, int, int, str, bool]] = TILESET_BASE + [
    (100, 0, 0, "refined-concrete-red", True),
    (8, 97, 19, "refined-concrete-green", True),
    (16, 70, 115, "refined-concrete-blue", True),
    (107, 61, 16, "refined-concrete-orange", True),
    (107, 85, 8, "refined-concrete-yellow", True),
    (115, 49, 66, "refined-concrete-pink", True),
    (58, 12, 82, "refined-concrete-purple", True),
    (8, 12, 8, "refined-concrete-black", True),
    (33, 12, 0, "refined-concrete-brown", True),
    (33, 97, 90, "refined-concrete-cyan", True),
    (67, 97, 16, "refined-concrete-acid", True),
    (123, 125, 123, "refined-concrete-white", True),
]


@dataclass(frozen=True)
class PaletteEntry:
    """One placeable object and the colour that stands for it."""

    color: Color
    label: str
    is_tile: bool


class Palette:
    """Ordered, immutable list of :class:`PaletteEntry`.

    Order matters: :meth:`exact_index` returns the first matching entry and
    :meth:`nearest` keeps the earliest entry when distances tie.
    """

    def __init__(self, entries: Iterable[PaletteEntry] = (), weights: Weights = UNIFORM_WEIGHTS):
        self._entries: Tuple[PaletteEntry, ...] = tuple(entries)
        if len(weights) != 3:
            raise ValueError("Colour weights must have exactly three components")
        self.weights: Weights = tuple(int(w) for w in weights)  # type: ignore[assignment]

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Tuple[int, int, int, str, bool]],
        weights: Weights = UNIFORM_WEIGHTS,
    ) -> "Palette":
        return cls(
            (PaletteEntry((r, g, b), name, is_tile) for r, g, b, name, is_tile in rows),
            weights,
        )

    @classmethod
    def preset_base_game(cls, weights: Weights = UNIFORM_WEIGHTS) -> "Palette":
        return cls.from_rows(TILESET_BASE, weights)

    @classmethod
    def preset_color_coding(cls, weights: Weights = UNIFORM_WEIGHTS) -> "Palette":
        return cls.from_rows(TILESET_COLOR_CODING, weights)

    def with_weights(self, weights: Weights) -> "Palette":
        return Palette(self._entries, weights)

    @property
    def entries(self) -> Tuple[PaletteEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> PaletteEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._entries == other._entries and self.weights == other.weights

    def __repr__(self) -> str:
        return f"Palette({len(self._entries)} entries, weights={self.weights})"

    def exact_index(self, color: Sequence[int]) -> int:
        """Return the index of the first entry whose colour equals ``color``.

        Only the red, green and blue channels are compared. Returns
        :data:`NOT_FOUND` on a miss.
        """

        rgb = tuple(color[:3])
        for i, entry in enumerate(self._entries):
            if entry.color == rgb:
                return i
        return NOT_FOUND

    def distance(self, a: Sequence[int], b: Sequence[int]) -> int:
        wr, wg, wb = self.weights
        dr = a[0] - b[0]
        dg = a[1] - b[1]
        db = a[2] - b[2]
        return wr * dr * dr + wg * dg * dg + wb * db * db

    def nearest_index(self, color: Sequence[int]) -> int:
        if not self._entries:
            raise ValueError("Palette must not be empty")
        best_idx = 0
        best_dist = self.distance(color, self._entries[0].color)
        for i, entry in enumerate(self._entries[1:], start=1):
            dist = self.distance(color, entry.color)
            if dist < best_dist:
                best_idx = i
                best_dist = dist
        return best_idx

    def nearest(self, color: Sequence[int]) -> Color:
        """Return the palette colour closest to ``color`` by weighted squared distance."""

        return self._entries[self.nearest_index(color)].color
