from __future__ import annotations

import logging
import random
from typing import Protocol

from ..entities import Ghost, Player
from ..level.grid import LevelGrid
from ..level.tiles import TileType

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """The subset of ``random.Random`` the engine relies on."""

    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...


def is_player_near(player: Player, ghost: Ghost, distance: int = 3) -> bool:
    return abs(player.x - ghost.x) < distance and abs(player.y - ghost.y) < distance


class GhostMover:
    """Biased random walk for ghosts.

    Each turn a ghost makes two independent draws, one per axis. Ghosts never
    enter walls and, while the player is near, stay off doors. There is no
    pathfinding: ghosts neither chase nor flee on purpose.
    """

    def __init__(self, rng: RandomSource, move_chance: float = 0.4, near_distance: int = 3) -> None:
        self.rng = rng
        self.move_chance = move_chance
        self.near_distance = near_distance

    def move(self, ghost: Ghost, player: Player, grid: LevelGrid) -> None:
        """Advance one ghost by the biased random walk.

        Up to two steps are tried, a vertical one and then a horizontal one,
        each taken with probability ``move_chance``. Ghosts avoid walls and,
        while the player is within ``near_distance``, doors as well.

        Args:
            ghost: The ghost to move; its position is updated in place.
            player: Used only to decide whether the player is near.
            grid: The current level; read, never modified.
        """
        near = is_player_near(player, ghost, self.near_distance)
        start = ghost.pos

        if self.rng.random() < self.move_chance:
            self._move_vertical(ghost, grid, near)

        if self.rng.random() < self.move_chance:
            if ghost.x + 1 < grid.width - 3 and self._can_enter(grid, ghost.x + 1, ghost.y, near):
                ghost.move_by(1, 0)
        elif ghost.x > 0 and self._can_enter(grid, ghost.x - 1, ghost.y, near):
            ghost.move_by(-1, 0)

        if ghost.pos != start:
            logger.debug("Ghost moved from %s to %s (player near=%s)", start, ghost.pos, near)

    def _move_vertical(self, ghost: Ghost, grid: LevelGrid, near: bool) -> None:
        below = ghost.y + 1
        if below >= grid.height - 2 or grid.get(ghost.x, below) is TileType.WALL:
            return
        if not (near and grid.get(ghost.x, below) is TileType.DOOR):
            ghost.move_by(0, 1)
        elif ghost.y > 0 and self._can_enter(grid, ghost.x, ghost.y - 1, near):
            # Door below with the player close by: back off upwards instead.
            ghost.move_by(0, -1)

    @staticmethod
    def _can_enter(grid: LevelGrid, x: int, y: int, near: bool) -> bool:
        tile = grid.get(x, y)
        if tile is TileType.WALL:
            return False
        return not (near and tile is TileType.DOOR)


def default_rng(seed: int | None = None) -> random.Random:
    return random.Random(seed)
