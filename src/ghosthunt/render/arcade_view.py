from __future__ import annotations

import logging
from typing import Optional, Tuple

import arcade

from ..engine.events import GameEvent
from ..engine.session import GameSession
from ..engine.turn import Direction, TurnEngine
from .ascii import status_line
from .snapshot import LevelSnapshot

logger = logging.getLogger(__name__)

TITLE = "Ghost Hunt"
MARGIN = 2
HUD_PX = 28
BG_COLOR: Tuple[int, int, int] = (11, 13, 18)
PLAYER_COLOR: Tuple[int, int, int] = (60, 180, 255)
CARRYING_COLOR: Tuple[int, int, int] = (120, 255, 160)
GHOST_COLOR: Tuple[int, int, int] = (235, 235, 250)

KEY_DIRECTIONS = {
    arcade.key.UP: Direction.UP,
    arcade.key.W: Direction.UP,
    arcade.key.DOWN: Direction.DOWN,
    arcade.key.S: Direction.DOWN,
    arcade.key.LEFT: Direction.LEFT,
    arcade.key.A: Direction.LEFT,
    arcade.key.RIGHT: Direction.RIGHT,
    arcade.key.D: Direction.RIGHT,
}


class GhostWindow(arcade.Window):
    """Arcade window that draws snapshots and turns key presses into moves.

    The window is a Renderer: the engine hands it a snapshot every turn and
    ``on_draw`` only paints the most recent one.
    """

    def __init__(self, session: GameSession, tile_px: int = 32) -> None:
        settings = session.engine.settings
        self.tile_px = tile_px
        super().__init__(settings.width * tile_px, settings.height * tile_px + HUD_PX, TITLE)
        self.background_color = BG_COLOR
        self.session = session
        self._snapshot: Optional[LevelSnapshot] = None
        session.engine.renderer = self
        session.engine.add_listener(self._on_event)
        logger.info("Arcade window initialized (%dx%d)", self.width, self.height)

    # Renderer protocol
    def render(self, snapshot: LevelSnapshot) -> None:
        self._snapshot = snapshot

    def _on_event(self, event: GameEvent, engine: TurnEngine) -> None:
        if event is GameEvent.LEVEL_ADVANCED:
            self.set_caption(f"{TITLE} - level {engine.state.level_number}")
            self._snapshot = engine.snapshot()

    def _cell_lrbt(self, x: int, y: int, rows: int) -> Tuple[float, float, float, float]:
        # Grid row 0 is drawn at the top of the window.
        left = x * self.tile_px + MARGIN / 2
        bottom = (rows - 1 - y) * self.tile_px + MARGIN / 2
        return left, left + self.tile_px - MARGIN, bottom, bottom + self.tile_px - MARGIN

    def on_draw(self) -> None:  # pragma: no cover - drawing needs a GL context
        self.clear()
        snap = self._snapshot
        if snap is None:
            return
        rows = snap.height
        for y, row in enumerate(snap.tiles):
            for x, tile in enumerate(row):
                arcade.draw_lrbt_rectangle_filled(*self._cell_lrbt(x, y, rows), tile.color)
        radius = self.tile_px / 2 - MARGIN
        for ghost in snap.ghosts:
            if ghost is None:
                continue
            left, _, bottom, _ = self._cell_lrbt(ghost.x, ghost.y, rows)
            arcade.draw_circle_filled(left + radius, bottom + radius, radius, GHOST_COLOR)
        p = snap.player
        color = CARRYING_COLOR if p.carrying_ghost else PLAYER_COLOR
        arcade.draw_lrbt_rectangle_filled(*self._cell_lrbt(p.x, p.y, rows), color)
        arcade.draw_text(status_line(snap), 8, rows * self.tile_px + 8, arcade.color.WHITE, 12)

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is None:
            return
        self.session.play(direction)


def run(session: GameSession) -> None:  # pragma: no cover - manual usage
    """Open the window and block in the Arcade event loop."""
    session.start()
    window = GhostWindow(session, tile_px=session.engine.settings.tile_px)
    window.render(session.engine.snapshot())
    arcade.run()
