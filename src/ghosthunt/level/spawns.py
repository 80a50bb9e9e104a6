from __future__ import annotations

import logging
import random
from typing import List

from ..exceptions import SpawnExhaustedError
from .grid import LevelGrid, Point

logger = logging.getLogger(__name__)


def compute_spawn_candidates(grid: LevelGrid) -> List[Point]:
    """Return every coordinate that may host a newly placed entity.

    Cells are scanned column-major (x outer, y inner) so the order is stable
    between runs. Walls, banks and breaches are never included.

    Args:
        grid: The freshly generated level, before any entity is placed.

    Returns:
        Spawnable points in scan order. The list is empty if nothing qualifies.
    """
    return [p for p, tile in grid.cells() if tile.is_spawnable]


class SpawnLocator:
    """Consumable list of spawn candidates for one level.

    Each placed entity removes its point so that no two entities share a tile.
    Running out of candidates is an initialization failure, never a silent
    out-of-bounds placement.
    """

    def __init__(self, candidates: List[Point]) -> None:
        self._candidates = list(candidates)

    @classmethod
    def for_grid(cls, grid: LevelGrid) -> "SpawnLocator":
        locator = cls(compute_spawn_candidates(grid))
        logger.debug("Computed %d spawn candidates", len(locator))
        return locator

    @property
    def candidates(self) -> List[Point]:
        return list(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, point: object) -> bool:
        return point in self._candidates

    def take(self, point: Point) -> Point:
        """Remove and return a specific spawn point."""
        try:
            self._candidates.remove(point)
        except ValueError:
            raise SpawnExhaustedError(f"{point} is not an available spawn location") from None
        return point

    def take_random(self, rng: random.Random) -> Point:
        """Remove and return a random spawn point."""
        if not self._candidates:
            raise SpawnExhaustedError("No spawn locations left")
        return self._candidates.pop(rng.randrange(len(self._candidates)))
