"""Maze facade: owns one generated grid and its rendering.

Public contract consumed elsewhere:
    Maze(MazeConfig(...)) OR Maze(width=W, height=H, seed=S) OR Maze.create(W, H)
    Attributes: config, seed, metrics (dict), width, height
    Queries: cell_at(x, y), render(), to_dict()
    Mutation: regenerate(width=None, height=None, seed=None)

A maze is generated on construction. ``regenerate`` validates the new
dimensions first and only then replaces the grid, so a failed call leaves the
previous maze untouched.

The random source defaults to ``random.Random(seed).randint`` (inclusive on
both ends). Passing ``rand_range`` replaces it, which is how tests drive the
generator with a scripted sequence; such a maze reports ``seed`` as None.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Any, Dict, Optional

from mazecraft.logging_utils import get_logger

from .cells import Cell
from .config import MazeConfig
from .frontier import RandRange
from .generator import Generator
from .grid import Grid, validate_dimension
from .render import DEFAULT_GLYPHS, Glyphs, render_grid, render_rows

_log = get_logger("mazecraft.maze")

SEED_MAX = 2**31 - 1


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        width: int | None = None,
        height: int | None = None,
        seed: int | None = None,
        rand_range: RandRange | None = None,
    ):
        # Accept either a config object or keyword dimensions; the caller's
        # config is copied so it can be reused for further mazes
        config = MazeConfig() if config is None else replace(config)
        if width is not None:
            config.width = width
        if height is not None:
            config.height = height
        if seed is not None:
            config.seed = seed
        self.config = config
        self._rand_range = rand_range
        if rand_range is not None:
            # An injected source is not described by any seed
            self.config.seed = None
            self._rng = random.Random()
        else:
            if self.config.seed is None:
                self.config.seed = random.randint(0, SEED_MAX)
            # Local RNG so external random usage does not affect generation
            self._rng = random.Random(self.config.seed)
        self.seed: Optional[int] = self.config.seed
        self.grid: Grid
        self.metrics: Dict[str, Any] = {}
        self._generate(self.config.width, self.config.height)

    @classmethod
    def create(cls, width: int, height: int, seed: int | None = None, rand_range: RandRange | None = None) -> "Maze":
        return cls(MazeConfig(width=width, height=height, seed=seed), rand_range=rand_range)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def rand_range(self) -> RandRange:
        return self._rand_range or self._rng.randint

    def _generate(self, width: int, height: int) -> None:
        validate_dimension("width", width)
        validate_dimension("height", height)
        gen = Generator(width, height, self.rand_range, enable_metrics=self.config.enable_metrics)
        outputs = gen.run()
        self.grid = outputs.grid
        self.metrics = dict(outputs.metrics)
        self.config.width, self.config.height = width, height
        _log.info(
            event="maze_generated",
            width=width,
            height=height,
            seed=self.seed,
            carves=self.metrics.get("carves"),
            runtime_ms=self.metrics.get("runtime_ms"),
        )

    def regenerate(self, width: int | None = None, height: int | None = None, seed: int | None = None) -> "Maze":
        """Discard the current grid and carve a new one.

        Omitted dimensions keep their current values. Without a seed the next
        one is drawn from the current stream, so the maze changes and
        ``seed`` still reproduces it. With an injected ``rand_range`` no seed
        is reported.
        """
        new_width = self.width if width is None else width
        new_height = self.height if height is None else height
        validate_dimension("width", new_width)
        validate_dimension("height", new_height)
        if self._rand_range is None:
            if seed is None:
                seed = self._rng.randint(0, SEED_MAX)
            self.config.seed = seed
            self.seed = seed
            self._rng = random.Random(seed)
        self._generate(new_width, new_height)
        return self

    def cell_at(self, x: int, y: int) -> Cell:
        return self.grid.cell_at(x, y)

    def render(self, glyphs: Glyphs = DEFAULT_GLYPHS) -> str:
        return render_grid(self.grid, glyphs)

    def rows(self, glyphs: Glyphs = DEFAULT_GLYPHS):
        return render_rows(self.grid, glyphs)

    def to_dict(self) -> Dict[str, Any]:
        corrected = self.config.corrected_wall_config
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "cells": [c.to_dict(corrected_wall_config=corrected) for c in self.grid.cells()],
            "rows": self.rows(),
            "metrics": self.metrics,
        }

    def __str__(self) -> str:
        return self.render()


__all__ = ["Maze"]
