import pytest

from ghosthunt.exceptions import ConfigError
from ghosthunt.level.generator import BANK, BREACHES, DOORS, LevelGenerator, generate_level
from ghosthunt.level.grid import LevelGrid, Point
from ghosthunt.level.tiles import TileType


def test_reference_level_dimensions_and_border():
    grid = generate_level()
    assert (grid.width, grid.height) == (35, 18)
    assert grid.border_is_wall()


def test_exactly_one_bank_and_expected_features():
    grid = generate_level()
    assert grid.find(TileType.BANK) == [BANK]
    assert sorted(grid.find(TileType.BREACH), key=lambda p: (p.x, p.y)) == sorted(
        BREACHES, key=lambda p: (p.x, p.y)
    )
    for door in DOORS:
        assert grid.get(door.x, door.y) is TileType.DOOR


def test_every_open_tile_is_reachable_from_the_player_start():
    grid = generate_level()
    reachable = grid.reachable_from(Point(23, 16))
    open_tiles = {p for p, t in grid.cells() if t is not TileType.WALL}
    assert reachable == open_tiles
    for breach in grid.find(TileType.BREACH):
        # a breach always touches ordinary floor
        assert any(grid.get(n.x, n.y).is_floor for n in grid.neighbors_4(breach.x, breach.y))


def test_each_generation_returns_a_fresh_grid():
    gen = LevelGenerator()
    first = gen.generate(1)
    first.set(5, 3, TileType.FLOOR2)
    second = gen.generate(2)
    assert second.get(5, 3) is TileType.BREACH


def test_larger_levels_keep_the_template_and_border():
    grid = LevelGenerator(40, 20).generate()
    assert grid.border_is_wall()
    assert grid.count(TileType.BANK) == 1


def test_level_smaller_than_template_is_rejected():
    with pytest.raises(ConfigError):
        LevelGenerator(20, 10)


def test_grid_access_outside_bounds_raises():
    grid = generate_level()
    with pytest.raises(IndexError):
        grid.get(35, 0)
    with pytest.raises(IndexError):
        grid.set(-1, 0, TileType.FLOOR1)
    assert grid.safe_get(0, 18) is None


def test_lines_roundtrip_with_all_glyphs():
    lines = [
        "#####",
        "#.,$#",
        "#X+.#",
        "#####",
    ]
    grid = LevelGrid.from_lines(lines)
    assert grid.get(3, 1) is TileType.BANK
    assert grid.get(1, 2) is TileType.BREACH
    assert grid.get(2, 2) is TileType.DOOR
    assert grid.to_lines() == lines


def test_from_lines_rejects_ragged_rows_and_unknown_glyphs():
    with pytest.raises(ValueError):
        LevelGrid.from_lines(["###", "##", "###"])
    with pytest.raises(ValueError):
        LevelGrid.from_lines(["###", "#?#", "###"])
