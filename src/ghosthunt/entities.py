from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .level.grid import Point


@dataclass(eq=False)
class Entity:
    """Base entity on the level grid. Entities compare by identity."""

    x: int
    y: int

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def move_by(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


@dataclass(eq=False)
class Player(Entity):
    """The player. Energy is spent on attacks and refilled at the bank."""

    max_energy: int = 100
    energy: int = field(init=False)
    carrying_ghost: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.max_energy <= 0:
            raise ValueError("max_energy must be positive")
        self.energy = self.max_energy

    def change_energy(self, amount: int) -> None:
        """Add (or remove, if negative) energy, clamped to [0, max_energy]."""
        self.energy = max(0, min(self.energy + amount, self.max_energy))

    def refill_energy(self) -> None:
        self.energy = self.max_energy

    def capture_ghost(self) -> None:
        self.carrying_ghost = True

    def deposit_ghost(self) -> bool:
        """Drop the carried ghost. Returns True if a ghost was actually carried."""
        was_carrying = self.carrying_ghost
        self.carrying_ghost = False
        return was_carrying

    def reset(self, x: int, y: int) -> None:
        """Place the player for a new level with full energy and empty hands."""
        self.move_to(x, y)
        self.refill_energy()
        self.carrying_ghost = False


@dataclass(eq=False)
class Ghost(Entity):
    """A wandering ghost. Health at or below zero means it has been captured."""

    max_health: int = 100
    health: int = field(init=False)

    def __post_init__(self) -> None:
        if self.max_health <= 0:
            raise ValueError("max_health must be positive")
        self.health = self.max_health

    @property
    def defeated(self) -> bool:
        return self.health <= 0

    def change_health(self, amount: int) -> None:
        # Only the upper bound is clamped; cleanup relies on health <= 0.
        self.health = min(self.health + amount, self.max_health)
