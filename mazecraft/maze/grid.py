"""Fixed-size cell storage with a linear ``x + y * width`` index.

The start sits in the bottom-left corner and the finish in the top-right
corner. Both are assigned once when the grid is built and never move.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from .cells import DELTAS, OPPOSITE, Cell
from .errors import CellLookupError, InvalidDimensionError, ensure

MIN_DIMENSION = 2
MAX_DIMENSION = 20


def validate_dimension(field: str, value) -> int:
    ensure(
        isinstance(value, int) and not isinstance(value, bool),
        f"{field} must be an integer, got {value!r}",
        InvalidDimensionError,
        field=field,
        value=value,
    )
    ensure(
        MIN_DIMENSION <= value <= MAX_DIMENSION,
        f"{field} must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {value}",
        InvalidDimensionError,
        field=field,
        value=value,
    )
    return value


class Grid:
    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int):
        self.width = 0
        self.height = 0
        self._cells: List[Cell] = []
        self.initialize(width, height)

    def initialize(self, width: int, height: int) -> None:
        """Validate the dimensions and allocate a fresh, fully walled cell set."""
        validate_dimension("width", width)
        validate_dimension("height", height)
        start = (0, height - 1)
        finish = (width - 1, 0)
        cells = []
        for y in range(height):
            for x in range(width):
                cells.append(Cell(x, y, is_start=(x, y) == start, is_finish=(x, y) == finish))
        # Swap in only after the whole collection is built
        self.width = width
        self.height = height
        self._cells = cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        ensure(
            self.in_bounds(x, y),
            f"cell ({x}, {y}) outside {self.width}x{self.height} grid",
            CellLookupError,
            x=x,
            y=y,
        )
        return x + y * self.width

    def cell_at(self, x: int, y: int) -> Cell:
        return self._cells[self.index_of(x, y)]

    def cell_at_index(self, index: int) -> Cell:
        ensure(
            0 <= index < len(self._cells),
            f"cell index {index} outside {self.width}x{self.height} grid",
            CellLookupError,
            index=index,
        )
        return self._cells[index]

    def neighbor(self, cell: Cell, direction: str) -> Optional[Cell]:
        dx, dy = DELTAS[direction]
        nx, ny = cell.x + dx, cell.y + dy
        if not self.in_bounds(nx, ny):
            return None
        return self._cells[nx + ny * self.width]

    def connect(self, cell: Cell, direction: str) -> Cell:
        """Carve the shared edge between ``cell`` and its ``direction`` neighbor.

        Both sides of the edge are opened together; this is the only place two
        cells become linked. Returns the neighbor.
        """
        other = self.neighbor(cell, direction)
        ensure(
            other is not None,
            f"cannot carve {direction} from ({cell.x}, {cell.y}): edge of grid",
            CellLookupError,
            x=cell.x,
            y=cell.y,
            direction=direction,
        )
        cell.open_toward(direction)
        other.open_toward(OPPOSITE[direction])
        return other

    def cells(self) -> Iterator[Cell]:
        return iter(self._cells)

    def starts(self) -> List[Cell]:
        return [c for c in self._cells if c.is_start]

    def finishes(self) -> List[Cell]:
        return [c for c in self._cells if c.is_finish]

    def __len__(self) -> int:
        return len(self._cells)


__all__ = ["Grid", "validate_dimension", "MIN_DIMENSION", "MAX_DIMENSION"]
