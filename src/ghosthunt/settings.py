from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml

from .exceptions import ConfigError
from .level.grid import Point

logger = logging.getLogger(__name__)

ENV_SETTINGS_FILE = "GH_SETTINGS_FILE"


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey values into a bool.

    Accepts: True/False, 1/0, "true"/"false", "yes"/"no", "on"/"off" (case-insensitive).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off"}:
            return False
    raise ValueError(f"Not a boolean: {value!r}")


def _as_optional_int(value: Any) -> Optional[int]:
    if value is None or (isinstance(value, str) and value.strip().lower() in {"", "none", "null"}):
        return None
    return int(value)


def _as_point(value: Any) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, str):
        value = value.split(",")
    x, y = value
    return Point(int(x), int(y))


def _as_optional_point(value: Any) -> Optional[Point]:
    if value is None or (isinstance(value, str) and value.strip().lower() in {"", "none", "null"}):
        return None
    return _as_point(value)


def _as_points(value: Any) -> Tuple[Point, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        # "10,10;23,4" style, used by environment overrides
        value = [part for part in value.split(";") if part.strip()]
    return tuple(_as_point(v) for v in value)


@dataclass(frozen=True)
class Settings:
    """Tunable game rules and layout.

    Precedence (lowest to highest): packaged defaults < YAML file < GH_* env vars.
    ``player_start`` and ``ghost_starts`` pin entities to fixed spawn points;
    leave them empty to place entities at random spawn candidates.
    """

    width: int = 35
    height: int = 18
    roster_capacity: int = 4

    player_max_energy: int = 100
    ghost_max_health: int = 100
    ghost_health_per_level: int = 0
    energy_cost: int = 10
    ghost_damage: int = 20

    move_chance: float = 0.4
    near_distance: int = 3
    bank_double_step: bool = False

    player_start: Optional[Point] = Point(23, 16)
    ghost_starts: Tuple[Point, ...] = (Point(10, 10), Point(23, 4), Point(25, 14), Point(26, 6))

    seed: Optional[int] = None
    tile_px: int = 32

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Level size must be positive, got {self.width}x{self.height}")
        if self.roster_capacity <= 0:
            raise ConfigError("roster_capacity must be positive")
        if self.player_max_energy <= 0 or self.ghost_max_health <= 0:
            raise ConfigError("player_max_energy and ghost_max_health must be positive")
        if self.energy_cost < 0 or self.ghost_damage < 0 or self.ghost_health_per_level < 0:
            raise ConfigError("energy_cost, ghost_damage and ghost_health_per_level must not be negative")
        if not 0.0 <= self.move_chance <= 1.0:
            raise ConfigError(f"move_chance must be within [0, 1], got {self.move_chance}")
        if self.near_distance < 0:
            raise ConfigError("near_distance must not be negative")
        if len(self.ghost_starts) > self.roster_capacity:
            raise ConfigError(
                f"{len(self.ghost_starts)} ghost_starts do not fit a roster of {self.roster_capacity}"
            )
        if self.tile_px <= 0:
            raise ConfigError("tile_px must be positive")

    def replace(self, **changes: Any) -> "Settings":
        return dataclasses.replace(self, **changes)

    # ------------------------ Loading & Overrides ------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - allowed
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")
        converted: Dict[str, Any] = {}
        for key, value in data.items():
            try:
                converted[key] = _CASTERS[key](value)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid value for {key}: {value!r} ({exc})") from exc
        return cls(**converted)

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Collect GH_<FIELD> overrides from the environment."""
        env = os.environ if env is None else env
        out: Dict[str, Any] = {}
        for field_name in _CASTERS:
            env_key = f"GH_{field_name.upper()}"
            if env_key in env and env[env_key] != "":
                out[field_name] = env[env_key]
        return out

    @staticmethod
    def from_yaml_text(text: str, source: str = "<string>") -> Dict[str, Any]:
        try:
            raw = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse settings from {source}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Settings in {source} must be a mapping, got {type(raw).__name__}")
        return raw


def _default_data() -> Dict[str, Any]:
    text = resource_files("ghosthunt.data").joinpath("defaults.yaml").read_text(encoding="utf-8")
    logger.debug("Loaded embedded default settings resource")
    return Settings.from_yaml_text(text, "defaults.yaml")


def load_settings(
    path: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Load settings from the packaged defaults, an optional YAML file and the environment.

    If ``path`` is None, GH_SETTINGS_FILE is consulted.
    """
    env = os.environ if env is None else env
    data = _default_data()

    if path is None and env.get(ENV_SETTINGS_FILE):
        path = env[ENV_SETTINGS_FILE]
    if path is not None:
        file_path = Path(path).expanduser()
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read settings file {file_path}: {exc}") from exc
        data.update(Settings.from_yaml_text(text, str(file_path)))
        logger.debug("Loaded settings from path: %s", file_path)

    data.update(Settings.from_env(env))
    settings = Settings.from_dict(data)
    logger.info("Settings: %dx%d, roster=%d, seed=%s", settings.width, settings.height,
                settings.roster_capacity, settings.seed)
    return settings


_CASTERS: Dict[str, Callable[[Any], Any]] = {
    "width": int,
    "height": int,
    "roster_capacity": int,
    "player_max_energy": int,
    "ghost_max_health": int,
    "ghost_health_per_level": int,
    "energy_cost": int,
    "ghost_damage": int,
    "move_chance": float,
    "near_distance": int,
    "bank_double_step": _as_bool,
    "player_start": _as_optional_point,
    "ghost_starts": _as_points,
    "seed": _as_optional_int,
    "tile_px": int,
}
