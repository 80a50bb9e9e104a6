from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..entities import Ghost


class GhostRoster:
    """Fixed-capacity set of ghost slots for one level.

    A slot holds either a Ghost or None ("no ghost here"). The capacity never
    changes; placing into a full roster returns None instead of growing it.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Roster capacity must be positive")
        self._slots: List[Optional[Ghost]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> Tuple[Optional[Ghost], ...]:
        return tuple(self._slots)

    def __getitem__(self, index: int) -> Optional[Ghost]:
        return self._slots[index]

    def __len__(self) -> int:
        """Number of present ghosts (not the capacity)."""
        return sum(1 for g in self._slots if g is not None)

    def __iter__(self) -> Iterator[Ghost]:
        """Iterate over present ghosts, skipping empty slots."""
        return (g for g in list(self._slots) if g is not None)

    def is_empty(self) -> bool:
        return all(g is None for g in self._slots)

    def first_free_slot(self) -> Optional[int]:
        for i, g in enumerate(self._slots):
            if g is None:
                return i
        return None

    def place(self, ghost: Ghost) -> Optional[int]:
        """Put a ghost into the first free slot; returns the slot or None if full."""
        index = self.first_free_slot()
        if index is None:
            return None
        self._slots[index] = ghost
        return index

    def clear(self, index: int) -> None:
        self._slots[index] = None

    def remove_defeated(self) -> int:
        """Empty every slot whose ghost has health <= 0. Returns the count removed."""
        removed = 0
        for i, g in enumerate(self._slots):
            if g is not None and g.defeated:
                self._slots[i] = None
                removed += 1
        return removed

    def __repr__(self) -> str:
        return f"GhostRoster({self._slots!r})"
