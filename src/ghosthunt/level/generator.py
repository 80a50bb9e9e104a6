from __future__ import annotations

import logging
from typing import Iterable, Tuple

from ..exceptions import ConfigError
from .grid import LevelGrid, Point
from .tiles import TileType

logger = logging.getLogger(__name__)

# Reference geometry, (x, y) in tiles. Rows of wall segments are given as
# (x_from, x_to, y) and columns as (x, y_from, y_to), both inclusive.
WALL_ROWS: Tuple[Tuple[int, int, int], ...] = (
    (0, 5, 8),
    (7, 8, 8),
    (0, 2, 15),
    (4, 9, 15),
    (13, 17, 8),
    (20, 24, 12),
    (26, 29, 12),
)
WALL_COLUMNS: Tuple[Tuple[int, int, int], ...] = (
    (9, 8, 15),
    (18, 0, 8),
    (30, 12, 16),
    (19, 12, 13),
    (19, 15, 16),
)
DOORS: Tuple[Point, ...] = (Point(6, 8), Point(3, 15), Point(19, 14), Point(25, 12))
BANK = Point(4, 12)
BREACHES: Tuple[Point, ...] = (Point(5, 3), Point(11, 15), Point(22, 4), Point(28, 9))

MIN_WIDTH = 35
MIN_HEIGHT = 18


class LevelGenerator:
    """Builds the level template.

    The layout is fixed: an open floor interior inside a wall border, split
    into rooms by interior walls with doors, one bank in the south-west room
    and a handful of breaches. Every call returns a fresh grid so levels can be
    mutated (breaches sealed) without affecting later levels.
    """

    def __init__(self, width: int = MIN_WIDTH, height: int = MIN_HEIGHT) -> None:
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            raise ConfigError(
                f"Level template needs at least {MIN_WIDTH}x{MIN_HEIGHT} tiles, got {width}x{height}"
            )
        self.width = width
        self.height = height

    def generate(self, level_number: int = 1) -> LevelGrid:
        logger.info("Generating level %d (%dx%d)", level_number, self.width, self.height)
        grid = LevelGrid(self.width, self.height, default=TileType.FLOOR1)
        self._stamp_border(grid)

        for x_from, x_to, y in WALL_ROWS:
            self._stamp(grid, ((x, y) for x in range(x_from, x_to + 1)), TileType.WALL)
        for x, y_from, y_to in WALL_COLUMNS:
            self._stamp(grid, ((x, y) for y in range(y_from, y_to + 1)), TileType.WALL)
        self._stamp(grid, ((p.x, p.y) for p in DOORS), TileType.DOOR)
        grid.set(BANK.x, BANK.y, TileType.BANK)
        self._stamp(grid, ((p.x, p.y) for p in BREACHES), TileType.BREACH)

        logger.debug("Generated level:\n%s", grid)
        return grid

    @staticmethod
    def _stamp_border(grid: LevelGrid) -> None:
        for x in range(grid.width):
            grid.set(x, 0, TileType.WALL)
            grid.set(x, grid.height - 1, TileType.WALL)
        for y in range(grid.height):
            grid.set(0, y, TileType.WALL)
            grid.set(grid.width - 1, y, TileType.WALL)

    @staticmethod
    def _stamp(grid: LevelGrid, coords: Iterable[Tuple[int, int]], tile: TileType) -> None:
        for x, y in coords:
            grid.set(x, y, tile)


def generate_level(width: int = MIN_WIDTH, height: int = MIN_HEIGHT) -> LevelGrid:
    """Convenience wrapper returning a freshly generated template level."""
    return LevelGenerator(width, height).generate()
