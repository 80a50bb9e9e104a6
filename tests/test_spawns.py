import random

import pytest

from ghosthunt.exceptions import SpawnExhaustedError
from ghosthunt.level.generator import generate_level
from ghosthunt.level.grid import LevelGrid, Point
from ghosthunt.level.spawns import SpawnLocator, compute_spawn_candidates
from ghosthunt.level.tiles import TileType


def test_candidates_never_include_blocking_or_special_tiles():
    grid = generate_level()
    candidates = compute_spawn_candidates(grid)
    assert candidates
    for p in candidates:
        assert grid.get(p.x, p.y) not in (TileType.WALL, TileType.BANK, TileType.BREACH)
    # doors and both floor variants are fine
    assert Point(6, 8) in candidates


def test_candidates_are_column_major_and_stable():
    grid = generate_level()
    candidates = compute_spawn_candidates(grid)
    assert candidates[:3] == [Point(1, 1), Point(1, 2), Point(1, 3)]
    assert candidates == compute_spawn_candidates(grid)


def test_degenerate_grid_has_no_candidates():
    grid = LevelGrid.from_lines([
        "#####",
        "#$X##",
        "#####",
    ])
    assert compute_spawn_candidates(grid) == []
    with pytest.raises(SpawnExhaustedError):
        SpawnLocator.for_grid(grid).take_random(random.Random(1))


def test_take_consumes_points():
    locator = SpawnLocator.for_grid(generate_level())
    before = len(locator)
    assert locator.take(Point(23, 16)) == Point(23, 16)
    assert len(locator) == before - 1
    assert Point(23, 16) not in locator
    with pytest.raises(SpawnExhaustedError):
        locator.take(Point(23, 16))


def test_take_random_never_repeats():
    locator = SpawnLocator([Point(1, 1), Point(2, 2), Point(3, 3)])
    rng = random.Random(5)
    taken = {locator.take_random(rng) for _ in range(3)}
    assert taken == {Point(1, 1), Point(2, 2), Point(3, 3)}
    with pytest.raises(SpawnExhaustedError):
        locator.take_random(rng)
