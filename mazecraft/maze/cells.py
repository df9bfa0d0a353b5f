from typing import Dict, Tuple

# Direction constants centralized for modular imports
NORTH = "north"
SOUTH = "south"
EAST = "east"
WEST = "west"

# Neighbor registration order used by the generator
DIRECTIONS = (EAST, NORTH, WEST, SOUTH)

DELTAS: Dict[str, Tuple[int, int]] = {
    NORTH: (0, -1),
    SOUTH: (0, 1),
    EAST: (1, 0),
    WEST: (-1, 0),
}

OPPOSITE: Dict[str, str] = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

# Wall bitmask layout
EAST_WALL = 0x1
NORTH_WALL = 0x2
WEST_WALL = 0x4
SOUTH_WALL = 0x8


class Cell:
    """One grid position: four opening flags plus the start/finish role."""

    __slots__ = ("x", "y", "north", "south", "east", "west", "is_start", "is_finish")

    def __init__(self, x: int, y: int, is_start: bool = False, is_finish: bool = False):
        self.x = x
        self.y = y
        self.north = False
        self.south = False
        self.east = False
        self.west = False
        self.is_start = is_start
        self.is_finish = is_finish

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_filled(self) -> bool:
        return self.north or self.south or self.east or self.west

    def is_open(self, direction: str) -> bool:
        return getattr(self, direction)

    def open_toward(self, direction: str) -> None:
        """Open this cell's side facing ``direction``.

        Only ``Grid.connect`` calls this; it opens the neighbor's opposite side
        in the same step.
        """
        if direction not in DELTAS:
            raise ValueError(f"unknown direction {direction!r}")
        setattr(self, direction, True)

    def open_sides(self) -> Tuple[str, ...]:
        return tuple(d for d in (NORTH, EAST, SOUTH, WEST) if getattr(self, d))

    @property
    def wall_config(self) -> int:
        # Historic derivation, kept as the reported value: the east bit
        # mirrors the west opening and the east opening is never consulted.
        cfg = 0
        if not self.west:
            cfg |= EAST_WALL
        if not self.north:
            cfg |= NORTH_WALL
        if not self.west:
            cfg |= WEST_WALL
        if not self.south:
            cfg |= SOUTH_WALL
        return cfg

    @property
    def corrected_wall_config(self) -> int:
        """One bit per walled side, east bit taken from the east opening."""
        cfg = 0
        if not self.east:
            cfg |= EAST_WALL
        if not self.north:
            cfg |= NORTH_WALL
        if not self.west:
            cfg |= WEST_WALL
        if not self.south:
            cfg |= SOUTH_WALL
        return cfg

    def to_dict(self, corrected_wall_config: bool = False):
        return {
            "x": self.x,
            "y": self.y,
            "north": self.north,
            "south": self.south,
            "east": self.east,
            "west": self.west,
            "is_start": self.is_start,
            "is_finish": self.is_finish,
            "is_filled": self.is_filled,
            "wall_config": self.corrected_wall_config if corrected_wall_config else self.wall_config,
        }

    def __repr__(self) -> str:
        role = " start" if self.is_start else (" finish" if self.is_finish else "")
        return f"Cell({self.x}, {self.y}{role} open={','.join(self.open_sides()) or '-'})"


__all__ = [
    "Cell",
    "NORTH",
    "SOUTH",
    "EAST",
    "WEST",
    "DIRECTIONS",
    "DELTAS",
    "OPPOSITE",
    "EAST_WALL",
    "NORTH_WALL",
    "WEST_WALL",
    "SOUTH_WALL",
]
