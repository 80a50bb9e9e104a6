from .generator import LevelGenerator, generate_level
from .grid import LevelGrid, Point
from .spawns import SpawnLocator, compute_spawn_candidates
from .tiles import TileType

__all__ = [
    "LevelGenerator",
    "LevelGrid",
    "Point",
    "SpawnLocator",
    "TileType",
    "compute_spawn_candidates",
    "generate_level",
]
