from enum import Enum, auto
from typing import Tuple


class TileType(Enum):
    """Tile types that make up a level.

    - WALL: Impassable for the player and ghosts
    - FLOOR1/FLOOR2: Open floor; the two variants only differ visually
    - BANK: Walkable tile where captured ghosts are deposited
    - BREACH: Ghost entry point; blocks the player until sealed
    - DOOR: Walkable tile that ghosts avoid while the player is near
    """

    WALL = auto()
    FLOOR1 = auto()
    FLOOR2 = auto()
    BANK = auto()
    BREACH = auto()
    DOOR = auto()

    @property
    def is_floor(self) -> bool:
        return self in {TileType.FLOOR1, TileType.FLOOR2}

    @property
    def blocks_player(self) -> bool:
        return self in {TileType.WALL, TileType.BREACH}

    @property
    def is_spawnable(self) -> bool:
        return self not in {TileType.WALL, TileType.BANK, TileType.BREACH}

    @property
    def glyph(self) -> str:
        """A single-character visualization used by the ASCII renderer and logs."""
        return _GLYPHS[self]

    @property
    def color(self) -> Tuple[int, int, int]:
        """Default RGB color for 2D rendering (Arcade)."""
        return _COLORS[self]

    @classmethod
    def from_glyph(cls, ch: str) -> "TileType":
        for tile, glyph in _GLYPHS.items():
            if glyph == ch:
                return tile
        raise ValueError(f"Unknown tile glyph: {ch!r}")


_GLYPHS = {
    TileType.WALL: "#",
    TileType.FLOOR1: ".",
    TileType.FLOOR2: ",",
    TileType.BANK: "$",
    TileType.BREACH: "X",
    TileType.DOOR: "+",
}

_COLORS = {
    TileType.WALL: (40, 40, 48),
    TileType.FLOOR1: (170, 170, 176),
    TileType.FLOOR2: (150, 150, 160),
    TileType.BANK: (210, 170, 40),
    TileType.BREACH: (150, 40, 170),
    TileType.DOOR: (120, 80, 40),
}
