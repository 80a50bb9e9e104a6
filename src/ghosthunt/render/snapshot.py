from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from ..level.tiles import TileType


@dataclass(frozen=True)
class PlayerView:
    x: int
    y: int
    energy: int
    max_energy: int
    carrying_ghost: bool


@dataclass(frozen=True)
class GhostView:
    x: int
    y: int
    health: int
    max_health: int


@dataclass(frozen=True)
class LevelSnapshot:
    """Read-only picture of one turn handed to renderers.

    ``tiles`` is indexed ``[y][x]``. ``ghosts`` keeps one entry per roster
    slot, with None for empty slots.
    """

    level_number: int
    turn_number: int
    tiles: Tuple[Tuple[TileType, ...], ...]
    player: PlayerView
    ghosts: Tuple[Optional[GhostView], ...]

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def ghosts_remaining(self) -> int:
        return sum(1 for g in self.ghosts if g is not None)


class Renderer(Protocol):
    """Presentation boundary: called once per turn with the current snapshot."""

    def render(self, snapshot: LevelSnapshot) -> None: ...


class NullRenderer:
    """Renderer that discards every snapshot. Default for headless use."""

    def render(self, snapshot: LevelSnapshot) -> None:
        return None
