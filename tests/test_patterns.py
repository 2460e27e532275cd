import pytest

from life_universe.patterns import PATTERNS, pattern_size, stamp


def test_pattern_sizes():
    assert pattern_size("block") == (2, 2)
    assert pattern_size("blinker") == (1, 3)
    assert pattern_size("glider") == (3, 3)
    assert pattern_size("glider_gun") == (9, 36)


def test_glider_gun_cell_count():
    assert len(PATTERNS["glider_gun"]) == 36
    assert len(set(PATTERNS["glider_gun"])) == 36


def test_stamp_places_offsets(empty_universe, alive_set):
    u = empty_universe(8, 8)
    stamp(u, "glider", 2, 3)
    assert alive_set(u) == {(2, 4), (3, 5), (4, 3), (4, 4), (4, 5)}


def test_stamp_wraps_around_edges(empty_universe, alive_set):
    u = empty_universe(10, 10)
    stamp(u, "glider", 9, 9)
    assert alive_set(u) == {(9, 0), (0, 1), (1, 9), (1, 0), (1, 1)}


def test_stamp_keeps_existing_cells(empty_universe, alive_set):
    u = empty_universe(6, 6)
    u.set_cells([(5, 5)])
    stamp(u, "block", 0, 0)
    assert alive_set(u) == {(5, 5), (0, 0), (0, 1), (1, 0), (1, 1)}


def test_stamp_unknown_pattern(empty_universe):
    with pytest.raises(KeyError):
        stamp(empty_universe(5, 5), "spaceship")


def test_stamp_too_large(empty_universe):
    u = empty_universe(20, 20)
    with pytest.raises(ValueError):
        stamp(u, "glider_gun")
    assert u.live_count == 0


def test_glider_gun_fires(empty_universe):
    u = empty_universe(60, 40)
    stamp(u, "glider_gun", 2, 1)
    start = u.live_count
    for _ in range(30):
        u.tick()
    # One period later the gun has emitted a glider
    assert u.live_count > start
