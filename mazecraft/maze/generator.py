"""Randomized growing-frontier carver.

Phases: grid init, start seeding, frontier loop. Each loop step draws one
candidate, links it to exactly one already carved neighbor and offers the
candidate's own unfilled neighbors. Because every new cell gets exactly one
link, the open edges form a spanning tree over the grid.

The finish cell is kept a leaf: it never offers its neighbors, and no cell
ever carves into it through its east or north side.
"""
from __future__ import annotations

import time
from typing import Dict, List, NamedTuple, Optional

from .cells import DIRECTIONS, EAST, NORTH, Cell
from .errors import GenerationInvariantError, ensure
from .frontier import Frontier, RandRange
from .grid import Grid
from .metrics import init_metrics

# Directions from which a neighbor may only be entered when it is not the finish
FINISH_GUARDED_DIRECTIONS = (EAST, NORTH)

# Start seeding choices, picked with rand_range(0, 1)
SEED_DIRECTIONS = (EAST, NORTH)


def finish_is_leaf_only(direction: str, neighbor: Cell) -> bool:
    """Return True when carving from a cell toward ``neighbor`` via ``direction`` is allowed."""
    if direction in FINISH_GUARDED_DIRECTIONS:
        return not neighbor.is_finish
    return True


class GenerationOutputs(NamedTuple):
    grid: Grid
    metrics: Dict[str, object]


class Generator:
    def __init__(self, width: int, height: int, rand_range: RandRange, enable_metrics: bool = True):
        self.width = width
        self.height = height
        self.rand_range = rand_range
        self.enable_metrics = enable_metrics
        self.metrics: Dict[str, object] = init_metrics() if enable_metrics else {}

    def init_grid(self) -> Grid:
        return Grid(self.width, self.height)

    def find_start(self, grid: Grid) -> Cell:
        starts = grid.starts()
        ensure(
            len(starts) == 1,
            f"expected exactly one start cell, found {len(starts)}",
            GenerationInvariantError,
            starts=len(starts),
        )
        return starts[0]

    def register_neighbors(self, grid: Grid, frontier: Frontier, cell: Cell) -> None:
        if cell.is_finish:
            return
        for direction in DIRECTIONS:
            other = grid.neighbor(cell, direction)
            if other is None or other.is_filled:
                continue
            if frontier.offer(grid.index_of(other.x, other.y)) and self.enable_metrics:
                self.metrics['frontier_offers'] += 1
        if self.enable_metrics and len(frontier) > self.metrics['frontier_peak']:
            self.metrics['frontier_peak'] = len(frontier)

    def eligible_directions(self, grid: Grid, cell: Cell) -> List[str]:
        eligible = []
        for direction in DIRECTIONS:
            other = grid.neighbor(cell, direction)
            if other is None or not other.is_filled:
                continue
            if finish_is_leaf_only(direction, other):
                eligible.append(direction)
        return eligible

    def choose(self, options) -> str:
        return options[self.rand_range(0, len(options) - 1)]

    def seed_start(self, grid: Grid, frontier: Frontier) -> Cell:
        start = self.find_start(grid)
        direction = self.choose(SEED_DIRECTIONS)
        first = grid.connect(start, direction)
        if self.enable_metrics:
            self.metrics['carves'] += 1
            self.metrics['seed_direction'] = direction
        self.register_neighbors(grid, frontier, start)
        self.register_neighbors(grid, frontier, first)
        return start

    def carve_step(self, grid: Grid, frontier: Frontier) -> Optional[Cell]:
        """Draw one candidate and attach it. Returns None once the frontier is exhausted."""
        index = frontier.draw_random(self.rand_range)
        if index is None:
            return None
        current = grid.cell_at_index(index)
        if current.is_filled:
            # Filled since it was offered
            if self.enable_metrics:
                self.metrics['stale_draws'] += 1
            return current
        eligible = self.eligible_directions(grid, current)
        ensure(
            bool(eligible),
            f"frontier cell ({current.x}, {current.y}) has no eligible carved neighbor",
            GenerationInvariantError,
            x=current.x,
            y=current.y,
        )
        grid.connect(current, self.choose(eligible))
        if self.enable_metrics:
            self.metrics['carves'] += 1
        self.register_neighbors(grid, frontier, current)
        return current

    def run(self) -> GenerationOutputs:
        started = time.perf_counter()
        self.metrics = init_metrics() if self.enable_metrics else {}
        grid = self.init_grid()
        frontier = Frontier()
        self.seed_start(grid, frontier)
        while frontier:
            self.carve_step(grid, frontier)
        if self.enable_metrics:
            self.metrics['cells'] = len(grid)
            self.metrics['runtime_ms'] = round((time.perf_counter() - started) * 1000, 3)
        return GenerationOutputs(grid, self.metrics)


__all__ = ["Generator", "GenerationOutputs", "finish_is_leaf_only", "FINISH_GUARDED_DIRECTIONS"]
