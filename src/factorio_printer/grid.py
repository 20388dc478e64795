"""Split an image into square cells, one blueprint per cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

MAX_SPLIT = 10000


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


@dataclass(frozen=True)
class GridPartition:
    """Pure mapping from image pixels to cells.

    A ``split`` of zero or less means no splitting: one cell covers the
    whole image and pixel coordinates are kept as they are.
    """

    width: int
    height: int
    split: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Image dimensions must not be negative")
        if self.split > MAX_SPLIT:
            raise ValueError(f"Split size must be at most {MAX_SPLIT}")

    @property
    def is_split(self) -> bool:
        return self.split > 0

    @property
    def count_x(self) -> int:
        if not self.is_split:
            return 1
        return _ceil_div(self.width, self.split)

    @property
    def count_y(self) -> int:
        if not self.is_split:
            return 1
        return _ceil_div(self.height, self.split)

    @property
    def cell_count(self) -> int:
        return self.count_x * self.count_y

    def locate(self, x: int, y: int) -> Tuple[int, int, int]:
        """Return ``(cell_index, local_x, local_y)`` for pixel ``(x, y)``."""

        if not self.is_split:
            return 0, x, y
        cell_x, local_x = divmod(x, self.split)
        cell_y, local_y = divmod(y, self.split)
        return cell_x + cell_y * self.count_x, local_x, local_y

    def cell_origin(self, index: int) -> Tuple[int, int]:
        """Return the ``(cell_x, cell_y)`` coordinates of cell ``index``."""

        if not 0 <= index < self.cell_count:
            raise IndexError(f"Cell index {index} is out of range")
        return index % self.count_x, index // self.count_x

    def iter_cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(index, cell_x, cell_y)`` in row-major order."""

        for index in range(self.cell_count):
            cell_x, cell_y = self.cell_origin(index)
            yield index, cell_x, cell_y
