import pytest

from mazecraft.maze import EAST, NORTH, SOUTH, WEST, GenerationInvariantError, Maze
from mazecraft.maze.analysis import analyze
from mazecraft.maze.frontier import Frontier
from mazecraft.maze.generator import Generator, finish_is_leaf_only
from mazecraft.maze.grid import Grid

from tests.maze_test_utils import scripted


def test_policy_guards_finish_from_east_and_north():
    g = Grid(3, 3)
    finish = g.cell_at(2, 0)
    plain = g.cell_at(1, 1)
    assert finish_is_leaf_only(EAST, finish) is False
    assert finish_is_leaf_only(NORTH, finish) is False
    assert finish_is_leaf_only(WEST, finish) is True
    assert finish_is_leaf_only(SOUTH, finish) is True
    for d in (EAST, NORTH, WEST, SOUTH):
        assert finish_is_leaf_only(d, plain) is True


def test_eligible_directions_skip_filled_finish():
    gen = Generator(3, 3, scripted([]))
    g = gen.init_grid()
    # Fill finish (2,0) together with (1,0)
    g.connect(g.cell_at(2, 0), WEST)
    # (2,1) only touches the carved area through the finish
    assert gen.eligible_directions(g, g.cell_at(2, 1)) == []
    # (1,1) reaches (1,0) through its north side
    assert gen.eligible_directions(g, g.cell_at(1, 1)) == [NORTH]


def test_finish_never_registers_neighbors():
    gen = Generator(3, 3, scripted([]))
    g = gen.init_grid()
    f = Frontier()
    g.connect(g.cell_at(2, 0), WEST)
    gen.register_neighbors(g, f, g.cell_at(2, 0))
    assert len(f) == 0
    gen.register_neighbors(g, f, g.cell_at(1, 0))
    assert sorted(f._items) == [g.index_of(0, 0), g.index_of(1, 1)]


@pytest.mark.parametrize("pick", ["low", "high"])
def test_degenerate_sources_still_give_perfect_mazes(pick):
    rr = (lambda lo, hi: lo) if pick == "low" else (lambda lo, hi: hi)
    m = Maze.create(9, 7, rand_range=rr)
    res = analyze(m.grid)
    assert res["perfect"]
    assert m.metrics["seed_direction"] == (EAST if pick == "low" else NORTH)


def test_seed_uses_fifty_fifty_draw():
    calls = []

    def rand_range(lo, hi):
        calls.append((lo, hi))
        return lo

    Maze.create(4, 4, rand_range=rand_range)
    assert calls[0] == (0, 1)


def test_two_by_two_seed_east():
    # seed east, then frontier holds only (0,0): draw it, carve to its one eligible neighbor
    m = Maze.create(2, 2, rand_range=scripted([0]))
    start = m.cell_at(0, 1)
    assert start.east
    assert m.cell_at(1, 1).west
    assert m.cell_at(0, 0).south
    finish = m.cell_at(1, 0)
    assert finish.open_sides() == (SOUTH,) or finish.open_sides() == (WEST,)
    assert analyze(m.grid)["perfect"]


def test_multiple_starts_is_fatal():
    gen = Generator(3, 3, scripted([]))
    g = gen.init_grid()
    g.cell_at(1, 1).is_start = True
    with pytest.raises(GenerationInvariantError):
        gen.find_start(g)


def test_isolated_frontier_cell_is_fatal():
    gen = Generator(3, 3, scripted([]))
    g = gen.init_grid()
    f = Frontier()
    f.offer(g.index_of(1, 1))
    with pytest.raises(GenerationInvariantError):
        gen.carve_step(g, f)


def test_stale_frontier_entry_is_skipped():
    gen = Generator(3, 3, scripted([]))
    g = gen.init_grid()
    f = Frontier()
    g.connect(g.cell_at(0, 0), EAST)
    f.offer(g.index_of(0, 0))
    cell = gen.carve_step(g, f)
    assert cell.pos == (0, 0)
    assert gen.metrics["stale_draws"] == 1
    assert gen.metrics["carves"] == 0
    assert len(f) == 0


def test_carve_step_on_empty_frontier():
    gen = Generator(2, 2, scripted([]))
    g = gen.init_grid()
    assert gen.carve_step(g, Frontier()) is None


def test_metrics_can_be_disabled():
    gen = Generator(4, 4, scripted([]), enable_metrics=False)
    out = gen.run()
    assert out.metrics == {}
    assert analyze(out.grid)["perfect"]
