from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from .tiles import TileType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


class LevelGrid:
    """A bounds-checked 2D tile grid for one level.

    All tile access goes through this class. Reading or writing outside the
    grid raises IndexError so that a broken invariant (e.g. a missing wall
    border) is loud instead of silently wrapping around.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, width: int, height: int, default: TileType = TileType.FLOOR1) -> None:
        if width < 3 or height < 3:
            raise ValueError("LevelGrid must be at least 3x3 to maintain wall borders")
        self._w = int(width)
        self._h = int(height)
        # tiles[y][x]
        self._tiles: List[List[TileType]] = [[default for _ in range(self._w)] for _ in range(self._h)]

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._w and 0 <= y < self._h

    def get(self, x: int, y: int) -> TileType:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in [0,{self._w})x[0,{self._h})")
        return self._tiles[y][x]

    def set(self, x: int, y: int, tile: TileType) -> None:
        if not isinstance(tile, TileType):
            raise TypeError("tile must be a TileType enum member")
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in [0,{self._w})x[0,{self._h})")
        self._tiles[y][x] = tile

    def safe_get(self, x: int, y: int) -> Optional[TileType]:
        """Return the tile at (x, y), or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._tiles[y][x]

    # ---- Query -----------------------------------------------------------
    def cells(self) -> Iterator[Tuple[Point, TileType]]:
        """Yield every cell in column-major order (x outer, y inner)."""
        for x in range(self._w):
            for y in range(self._h):
                yield Point(x, y), self._tiles[y][x]

    def find(self, tile: TileType) -> List[Point]:
        return [p for p, t in self.cells() if t is tile]

    def count(self, tile: TileType) -> int:
        return sum(1 for _, t in self.cells() if t is tile)

    def neighbors_4(self, x: int, y: int) -> Iterator[Point]:
        # Ordered for deterministic traversal
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield Point(nx, ny)

    def border_is_wall(self) -> bool:
        for x in range(self._w):
            if self._tiles[0][x] is not TileType.WALL or self._tiles[self._h - 1][x] is not TileType.WALL:
                return False
        for y in range(self._h):
            if self._tiles[y][0] is not TileType.WALL or self._tiles[y][self._w - 1] is not TileType.WALL:
                return False
        return True

    def reachable_from(self, start: Point) -> Set[Point]:
        """Flood fill over non-wall tiles starting at ``start``."""
        if not self.in_bounds(start.x, start.y) or self.get(start.x, start.y) is TileType.WALL:
            return set()
        seen = {start}
        dq = deque([start])
        while dq:
            p = dq.popleft()
            for n in self.neighbors_4(p.x, p.y):
                if n in seen or self._tiles[n.y][n.x] is TileType.WALL:
                    continue
                seen.add(n)
                dq.append(n)
        return seen

    # ---- Export / Import -------------------------------------------------
    def to_lines(self) -> List[str]:
        return ["".join(self._tiles[y][x].glyph for x in range(self._w)) for y in range(self._h)]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "LevelGrid":
        """Build a grid from glyph rows (see ``TileType.glyph``)."""
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                grid.set(x, y, TileType.from_glyph(ch))
        return grid

    def snapshot(self) -> Tuple[Tuple[TileType, ...], ...]:
        """Immutable copy of the tiles, indexed ``[y][x]``."""
        return tuple(tuple(row) for row in self._tiles)

    def __str__(self) -> str:
        return "\n".join(self.to_lines())

    def __repr__(self) -> str:
        return f"LevelGrid(width={self._w}, height={self._h})"
