"""Singleton: hand out one shared instance instead of creating a new one."""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


def _emit(line: str) -> str:
    log.info(line)
    return line


def _reuse_message(item: Singleton) -> str:
    return f"Type {item.type} - is created"


@dataclass
class Singleton:
    type: str

    def print_details(self) -> str:
        """Log and return the type of this instance."""
        return _emit(f"Type {self.type}")


def new_singleton(item: Singleton | None, type_name: str) -> Singleton:
    """Return ``item`` if it already exists, otherwise a new instance of ``type_name``."""
    if item is None:
        return Singleton(type_name)
    _emit(_reuse_message(item))
    return item


def demo() -> list[str]:
    """Create the instance once, then ask for it three more times."""
    lines = [_emit("Singleton initialisation")]
    singleton = Singleton("Singleton")
    for _ in range(3):
        existing = singleton
        singleton = new_singleton(singleton, "Create Singleton")
        if singleton is existing:
            lines.append(_reuse_message(singleton))
    return lines