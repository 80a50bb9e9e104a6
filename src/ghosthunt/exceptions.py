class GhostHuntError(Exception):
    """Base exception for the Ghost Hunt project."""


class SpawnExhaustedError(GhostHuntError):
    """Raised when no suitable spawn location is left for an entity."""


class ConfigError(GhostHuntError):
    """Raised when settings cannot be loaded or contain invalid values."""
