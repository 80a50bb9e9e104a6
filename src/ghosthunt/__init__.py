"""
Ghost Hunt package root.

The simulation core (level, entities, engine) is pure Python and has no
knowledge of rendering. Presentation adapters live in ``ghosthunt.render`` and
only ever receive read-only snapshots of the game state.
"""

__all__ = [
    "engine",
    "level",
]
