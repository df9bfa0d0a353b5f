"""Maze generation invariant tests.

Invariants covered:
1. Every cell is filled and reachable from the start.
2. The open-edge graph is a spanning tree: width*height - 1 edges, connected.
3. Openings are symmetric across every shared edge; no opening faces the boundary.
4. The finish has exactly one open side and it is west or south.
5. The start is never fully walled.
"""

from __future__ import annotations

import pytest

from mazecraft.maze import EAST, NORTH, SOUTH, WEST, Maze
from mazecraft.maze.analysis import analyze, asymmetric_edges, open_edges, reachable_from_start


def gen(width: int, height: int, seed: int = 12345) -> Maze:
    return Maze(width=width, height=height, seed=seed)


def test_all_dimensions_produce_spanning_trees():
    for w in range(2, 21):
        for h in range(2, 21):
            m = gen(w, h, seed=w * 100 + h)
            res = analyze(m.grid)
            assert not res["unfilled"], f"{w}x{h} unfilled cells {res['unfilled']}"
            assert not res["unreachable"], f"{w}x{h} unreachable cells {res['unreachable']}"
            assert res["edges"] == w * h - 1, f"{w}x{h} edges={res['edges']}"
            assert res["perfect"]
            finish = m.cell_at(w - 1, 0)
            sides = finish.open_sides()
            assert len(sides) == 1 and sides[0] in (WEST, SOUTH), f"{w}x{h} finish sides={sides}"
            start = m.cell_at(0, h - 1)
            assert start.open_sides() and not start.west and not start.south, f"{w}x{h} start={start!r}"


@pytest.mark.parametrize("seed", range(20))
def test_symmetric_openings(seed):
    m = gen(12, 9, seed)
    assert asymmetric_edges(m.grid) == []


@pytest.mark.parametrize("seed", range(40))
def test_finish_is_single_entry_leaf(seed):
    m = gen(7, 5, seed)
    finish = m.cell_at(m.width - 1, 0)
    assert finish.is_finish
    sides = finish.open_sides()
    assert len(sides) == 1, f"seed={seed} finish sides={sides}"
    assert sides[0] in (WEST, SOUTH)
    assert not finish.east and not finish.north


@pytest.mark.parametrize("seed", range(40))
def test_start_never_walled_in(seed):
    m = gen(6, 6, seed)
    start = m.cell_at(0, m.height - 1)
    assert start.is_start
    assert start.is_filled
    # bottom-left corner can only open east or north
    assert not start.west and not start.south
    assert start.east or start.north


def test_edges_counted_once():
    m = gen(4, 4, seed=3)
    edges = open_edges(m.grid)
    stored = sum(len(c.open_sides()) for c in m.grid.cells())
    assert stored == 2 * len(edges)


def test_reachability_covers_grid_for_both_seed_directions():
    seen_dirs = set()
    for s in range(30):
        m = gen(5, 5, seed=s)
        seen_dirs.add(m.metrics["seed_direction"])
        assert len(reachable_from_start(m.grid)) == 25
    assert seen_dirs == {EAST, NORTH}


def test_metrics_account_for_every_carve():
    m = gen(8, 6, seed=77)
    assert m.metrics["cells"] == 48
    assert m.metrics["carves"] == 47
    assert m.metrics["frontier_peak"] >= 1
    assert m.metrics["runtime_ms"] >= 0
