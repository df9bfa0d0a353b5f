"""Structural checks over a generated grid.

Used by the diagnostics script and the test suite. Nothing here computes a
route between cells; reachability is a plain flood fill over open edges.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, List, Set, Tuple

from .cells import DIRECTIONS, OPPOSITE
from .grid import Grid

Edge = Tuple[Tuple[int, int], Tuple[int, int]]


def open_edges(grid: Grid) -> Set[Edge]:
    """Undirected carved edges, each stored once with its endpoints sorted."""
    edges: Set[Edge] = set()
    for cell in grid.cells():
        for direction in DIRECTIONS:
            if not cell.is_open(direction):
                continue
            other = grid.neighbor(cell, direction)
            if other is None:
                continue
            a, b = cell.pos, other.pos
            edges.add((a, b) if a < b else (b, a))
    return edges


def asymmetric_edges(grid: Grid) -> List[Tuple[Tuple[int, int], str]]:
    """Cells whose opening toward a neighbor is not mirrored by that neighbor.

    An opening on the outer boundary counts as asymmetric too.
    """
    bad = []
    for cell in grid.cells():
        for direction in DIRECTIONS:
            other = grid.neighbor(cell, direction)
            mine = cell.is_open(direction)
            theirs = other.is_open(OPPOSITE[direction]) if other is not None else False
            if mine != theirs:
                bad.append((cell.pos, direction))
    return bad


def reachable_from_start(grid: Grid) -> Set[Tuple[int, int]]:
    starts = grid.starts()
    if not starts:
        return set()
    start = starts[0]
    seen = {start.pos}
    q = deque([start])
    while q:
        cell = q.popleft()
        for direction in cell.open_sides():
            other = grid.neighbor(cell, direction)
            if other is not None and other.pos not in seen:
                seen.add(other.pos)
                q.append(other)
    return seen


def analyze(grid: Grid) -> Dict[str, Any]:
    edges = open_edges(grid)
    reached = reachable_from_start(grid)
    unreachable = [c.pos for c in grid.cells() if c.pos not in reached]
    asymmetric = asymmetric_edges(grid)
    expected = len(grid) - 1
    finish = grid.finishes()
    start = grid.starts()
    return {
        "cells": len(grid),
        "edges": len(edges),
        "expected_edges": expected,
        "unreachable": unreachable,
        "unfilled": [c.pos for c in grid.cells() if not c.is_filled],
        "asymmetric": asymmetric,
        "finish_open_sides": list(finish[0].open_sides()) if finish else [],
        "start_open_sides": list(start[0].open_sides()) if start else [],
        # connected + |E| = |V| - 1 <=> spanning tree
        "perfect": not unreachable and not asymmetric and len(edges) == expected,
    }


__all__ = ["open_edges", "asymmetric_edges", "reachable_from_start", "analyze"]
