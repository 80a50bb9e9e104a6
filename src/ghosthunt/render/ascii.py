from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .snapshot import LevelSnapshot

PLAYER_GLYPH = "@"
GHOST_GLYPH = "G"


def render_lines(snapshot: LevelSnapshot) -> List[str]:
    """Draw a snapshot as text rows, player on top of ghosts on top of tiles."""
    rows = [[tile.glyph for tile in row] for row in snapshot.tiles]
    for ghost in snapshot.ghosts:
        if ghost is not None:
            rows[ghost.y][ghost.x] = GHOST_GLYPH
    rows[snapshot.player.y][snapshot.player.x] = PLAYER_GLYPH
    return ["".join(r) for r in rows]


def status_line(snapshot: LevelSnapshot) -> str:
    p = snapshot.player
    carrying = "yes" if p.carrying_ghost else "no"
    return (
        f"Level {snapshot.level_number}  Turn {snapshot.turn_number}  "
        f"Energy {p.energy}/{p.max_energy}  Carrying {carrying}  "
        f"Ghosts {snapshot.ghosts_remaining}/{len(snapshot.ghosts)}"
    )


def format_frame(snapshot: LevelSnapshot) -> str:
    """Board rows followed by the status line."""
    return "\n".join(render_lines(snapshot) + [status_line(snapshot)])


class AsciiRenderer:
    """Headless renderer that keeps the last frame and optionally echoes it."""

    def __init__(self, stream: Optional[TextIO] = None, echo: bool = False) -> None:
        self.stream = stream or sys.stdout
        self.echo = echo
        self.last: Optional[LevelSnapshot] = None
        self.frames = 0

    def render(self, snapshot: LevelSnapshot) -> None:
        self.last = snapshot
        self.frames += 1
        if self.echo:
            self.stream.write(self.frame_text() + "\n")

    def frame_text(self) -> str:
        if self.last is None:
            return ""
        return format_frame(self.last)
