from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from ..render.snapshot import Renderer
from ..settings import Settings
from .ghost_ai import RandomSource
from .turn import Direction, TurnEngine

logger = logging.getLogger(__name__)

MOVE_CODES: Dict[str, Direction] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


class GameSession:
    """Input-facing wrapper: one command in, one complete turn out."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        renderer: Optional[Renderer] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.engine = TurnEngine(settings=settings, renderer=renderer, rng=rng)

    def start(self) -> None:
        if self.engine.started:
            logger.debug("GameSession.start() called while already running")
            return
        self.engine.start_game()

    def play(self, direction: Direction) -> bool:
        """Move the player and run the rest of the turn. Returns True on level change."""
        self.engine.move_player(direction)
        return self.engine.do_turn()

    def play_script(self, moves: Iterable[str]) -> int:
        """Play a sequence of U/D/L/R codes. Whitespace is ignored.

        Returns the number of levels completed while playing.
        """
        completed = 0
        for ch in moves:
            if ch.isspace():
                continue
            try:
                direction = MOVE_CODES[ch.upper()]
            except KeyError:
                raise ValueError(f"Unknown move code {ch!r}; expected one of {''.join(MOVE_CODES)}") from None
            if self.play(direction):
                completed += 1
        return completed
