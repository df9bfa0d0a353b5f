import random

from mazecraft.maze.frontier import Frontier


def test_offer_is_idempotent():
    f = Frontier()
    assert f.offer(3) is True
    assert f.offer(3) is False
    assert f.offer(7) is True
    assert len(f) == 2
    assert 3 in f and 7 in f


def test_draw_from_empty_returns_none():
    f = Frontier()
    assert not f
    assert f.draw_random(random.Random(1).randint) is None


def test_draw_removes_member():
    f = Frontier()
    for i in (5, 6, 7):
        f.offer(i)
    first = f.draw_random(lambda lo, hi: lo)
    assert first == 5
    assert first not in f
    assert len(f) == 2
    # removed members can be offered again
    assert f.offer(5) is True


def test_draw_uses_inclusive_range_over_members():
    f = Frontier()
    for i in range(4):
        f.offer(i)
    calls = []

    def rand_range(lo, hi):
        calls.append((lo, hi))
        return hi

    assert f.draw_random(rand_range) == 3
    assert calls == [(0, 3)]


def test_drains_every_member_exactly_once():
    rng = random.Random(2024)
    f = Frontier()
    for i in range(50):
        f.offer(i)
        f.offer(i)
    drawn = []
    while f:
        drawn.append(f.draw_random(rng.randint))
    assert sorted(drawn) == list(range(50))
    assert f.draw_random(rng.randint) is None
