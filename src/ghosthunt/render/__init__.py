from .ascii import AsciiRenderer, render_lines, status_line
from .snapshot import GhostView, LevelSnapshot, NullRenderer, PlayerView, Renderer

__all__ = [
    "AsciiRenderer",
    "GhostView",
    "LevelSnapshot",
    "NullRenderer",
    "PlayerView",
    "Renderer",
    "render_lines",
    "status_line",
]
