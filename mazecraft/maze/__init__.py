"""Public maze package interface."""

from .cells import EAST, NORTH, SOUTH, WEST, Cell  # noqa: F401
from .config import MazeConfig  # noqa: F401
from .errors import (  # noqa: F401
    CellLookupError,
    GenerationInvariantError,
    InvalidDimensionError,
    MazeContractError,
)
from .grid import MAX_DIMENSION, MIN_DIMENSION, Grid  # noqa: F401
from .maze import Maze  # noqa: F401
from .render import FINISH_GLYPH, FLOOR_GLYPH, START_GLYPH, WALL_GLYPH  # noqa: F401

__all__ = [
    "Maze",
    "MazeConfig",
    "Grid",
    "Cell",
    "NORTH",
    "SOUTH",
    "EAST",
    "WEST",
    "MIN_DIMENSION",
    "MAX_DIMENSION",
    "WALL_GLYPH",
    "FLOOR_GLYPH",
    "START_GLYPH",
    "FINISH_GLYPH",
    "MazeContractError",
    "InvalidDimensionError",
    "CellLookupError",
    "GenerationInvariantError",
]
