"""ASCII rendering: every cell becomes a 3x3 character block.

    #.#     corners are always wall; the four edge midpoints are floor when
    .S.     the matching side is open; the center carries the start/finish
    #.#     marker or floor.
"""

from __future__ import annotations

from typing import List, NamedTuple

from .cells import Cell
from .grid import Grid

WALL_GLYPH = "#"
FLOOR_GLYPH = " "
START_GLYPH = "S"
FINISH_GLYPH = "F"


class Glyphs(NamedTuple):
    wall: str = WALL_GLYPH
    floor: str = FLOOR_GLYPH
    start: str = START_GLYPH
    finish: str = FINISH_GLYPH


DEFAULT_GLYPHS = Glyphs()


def _center(cell: Cell, glyphs: Glyphs) -> str:
    if cell.is_start:
        return glyphs.start
    if cell.is_finish:
        return glyphs.finish
    return glyphs.floor


def _side(is_open: bool, glyphs: Glyphs) -> str:
    return glyphs.floor if is_open else glyphs.wall


def render_rows(grid: Grid, glyphs: Glyphs = DEFAULT_GLYPHS) -> List[str]:
    rows: List[str] = []
    for y in range(grid.height):
        top, mid, bottom = [], [], []
        for x in range(grid.width):
            cell = grid.cell_at(x, y)
            top.append(glyphs.wall + _side(cell.north, glyphs) + glyphs.wall)
            mid.append(_side(cell.west, glyphs) + _center(cell, glyphs) + _side(cell.east, glyphs))
            bottom.append(glyphs.wall + _side(cell.south, glyphs) + glyphs.wall)
        rows.extend(("".join(top), "".join(mid), "".join(bottom)))
    return rows


def render_grid(grid: Grid, glyphs: Glyphs = DEFAULT_GLYPHS) -> str:
    return "\n".join(render_rows(grid, glyphs))


__all__ = [
    "Glyphs",
    "DEFAULT_GLYPHS",
    "WALL_GLYPH",
    "FLOOR_GLYPH",
    "START_GLYPH",
    "FINISH_GLYPH",
    "render_rows",
    "render_grid",
]
