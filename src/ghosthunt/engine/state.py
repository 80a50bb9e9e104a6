from __future__ import annotations

from dataclasses import dataclass

from ..entities import Player
from ..level.grid import LevelGrid
from ..level.spawns import SpawnLocator
from .roster import GhostRoster


@dataclass
class SimulationState:
    """Everything that changes while the game runs.

    Owned by the TurnEngine; presentation only ever sees snapshots of it.
    """

    grid: LevelGrid
    player: Player
    roster: GhostRoster
    spawns: SpawnLocator
    level_number: int = 1
    turn_number: int = 1

    @property
    def level_complete(self) -> bool:
        return self.roster.is_empty()
