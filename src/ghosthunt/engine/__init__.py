from .events import GameEvent
from .ghost_ai import GhostMover, is_player_near
from .roster import GhostRoster
from .session import GameSession
from .state import SimulationState
from .turn import Direction, TurnEngine

__all__ = [
    "Direction",
    "GameEvent",
    "GameSession",
    "GhostMover",
    "GhostRoster",
    "SimulationState",
    "TurnEngine",
    "is_player_near",
]
