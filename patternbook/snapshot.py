"""Snapshot (memento): save and restore the state of a creator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


def _emit(line: str) -> str:
    log.info(line)
    return line


class Snapshot:
    """An opaque saved state."""

    __slots__ = ("_state",)

    def __init__(self, state: str) -> None:
        self._state = state

    def saved_state(self) -> str:
        """Return the state that was saved."""
        return self._state

    def __repr__(self) -> str:
        return f"Snapshot({self._state!r})"


@dataclass
class Creator:
    state: str

    def create(self) -> Snapshot:
        """Save the current state."""
        return Snapshot(self.state)

    def restore(self, snapshot: Snapshot) -> None:
        """Return to the state held by ``snapshot``."""
        self.state = snapshot.saved_state()


@dataclass
class Guardian:
    """Keeps snapshots in the order they were added."""

    items: list[Snapshot] = field(default_factory=list)

    def add(self, snapshot: Snapshot) -> None:
        self.items.append(snapshot)

    def get(self, index: int) -> Snapshot:
        """Return the snapshot at ``index``; raise IndexError if there is none."""
        if index < 0:
            raise IndexError(f"snapshot index out of range: {index}")
        return self.items[index]


def demo() -> list[str]:
    """Save three states, then restore the second and the first."""
    storage = Guardian()
    creator = Creator("A")
    lines: list[str] = []
    for state in ("A", "B", "C"):
        creator.state = state
        lines.append(_emit(f"Creator current State {creator.state}"))
        storage.add(creator.create())

    for index in (1, 0):
        creator.restore(storage.get(index))
        lines.append(_emit(f"Restored to State {creator.state}"))
    return lines