from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by the turn engine to notify UI or systems."""

    PLAYER_MOVED = auto()
    PLAYER_BLOCKED = auto()
    GHOST_HIT = auto()
    GHOST_CAPTURED = auto()
    GHOST_DEPOSITED = auto()
    BREACH_SEALED = auto()
    GHOSTS_RESPAWNED = auto()
    LEVEL_ADVANCED = auto()
    TURN_COMPLETED = auto()
