"""Factory method: build a computer of a kind chosen by name."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

log = logging.getLogger(__name__)

SERVER_TYPE = "server"
PERSONAL_COMPUTER_TYPE = "computer"
NOTEBOOK_TYPE = "notebook"


def _emit(line: str) -> str:
    log.info(line)
    return line


class Computer(ABC):
    type: str

    @abstractmethod
    def print_details(self) -> str:
        """Log and return a one-line description of the computer."""


@dataclass(frozen=True)
class Server(Computer):
    type: str = SERVER_TYPE
    core: int = 32
    memory: int = 256

    def print_details(self) -> str:
        return _emit(f"{self.type} Core:[{self.core}], Mem:[{self.memory}]")


@dataclass(frozen=True)
class Notebook(Computer):
    type: str = NOTEBOOK_TYPE
    core: int = 6
    memory: int = 8
    monitor: bool = True

    def print_details(self) -> str:
        return _emit(
            f"{self.type} Core:[{self.core}], Mem:[{self.memory}], "
            f"Monitor: [{str(self.monitor).lower()}]"
        )


@dataclass(frozen=True)
class PersonalComputer(Computer):
    type: str = PERSONAL_COMPUTER_TYPE
    core: int = 8
    memory: int = 16
    monitor: bool = True

    def print_details(self) -> str:
        return _emit(
            f"{self.type} Core:[{self.core}], Mem:[{self.memory}], "
            f"Monitor: [{str(self.monitor).lower()}]"
        )


_KINDS: dict[str, type[Computer]] = {
    SERVER_TYPE: Server,
    PERSONAL_COMPUTER_TYPE: PersonalComputer,
    NOTEBOOK_TYPE: Notebook,
}


def create(type_name: str) -> Computer | None:
    """Return a computer of the named kind, or None if the kind does not exist."""
    kind = _KINDS.get(type_name)
    if kind is None:
        log.info("%s Не существующий тип объекта", type_name)
        return None
    return kind()


def demo() -> list[str]:
    """Describe a computer of each kind, skipping an unknown one."""
    lines: list[str] = []
    for type_name in (SERVER_TYPE, NOTEBOOK_TYPE, PERSONAL_COMPUTER_TYPE, "monoblock"):
        computer = create(type_name)
        if computer is not None:
            lines.append(computer.print_details())
    return lines