"""Abstract factory: brand factories that produce matching computers and monitors."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

log = logging.getLogger(__name__)

ASUS = "asus"
HP = "hp"


class UnknownBrandError(LookupError):
    """Raised when no factory exists for the requested brand."""

    def __init__(self, brand: str) -> None:
        super().__init__(f"Производитель {brand} - не найден!")
        self.brand = brand


def _emit(line: str) -> str:
    log.info(line)
    return line


@dataclass(frozen=True)
class AsusComputer:
    memory: int
    cpu: int

    def print_details(self) -> str:
        """Log and return a one-line description of the computer."""
        return _emit(f"[Asus] Pc Cpu: [{self.cpu}], Memory: [{self.memory}]")


@dataclass(frozen=True)
class HpComputer:
    memory: int
    cpu: int

    def print_details(self) -> str:
        """Log and return a one-line description of the computer."""
        return _emit(f"[HP] Pc Cpu: [{self.cpu}], Memory: [{self.memory}]")


@dataclass(frozen=True)
class AsusMonitor:
    size: int

    def print_details(self) -> str:
        """Log and return a one-line description of the monitor."""
        return _emit(f"[Asus] Monitor Size: [{self.size}]")


@dataclass(frozen=True)
class HpMonitor:
    size: int

    def print_details(self) -> str:
        """Log and return a one-line description of the monitor."""
        return _emit(f"[HP] Monitor Size: [{self.size}]")


class Factory(ABC):
    """Produces a family of products of one brand."""

    @abstractmethod
    def get_computer(self):
        """Return a computer of this factory's brand."""

    @abstractmethod
    def get_monitor(self):
        """Return a monitor of this factory's brand."""


class AsusFactory(Factory):
    def get_computer(self) -> AsusComputer:
        return AsusComputer(memory=8, cpu=4)

    def get_monitor(self) -> AsusMonitor:
        return AsusMonitor(size=32)


class HpFactory(Factory):
    def get_computer(self) -> HpComputer:
        return HpComputer(memory=16, cpu=6)

    def get_monitor(self) -> HpMonitor:
        return HpMonitor(size=24)


_FACTORIES: dict[str, type[Factory]] = {ASUS: AsusFactory, HP: HpFactory}


def get_factory(brand: str) -> Factory:
    """Return the factory for ``brand`` or raise UnknownBrandError."""
    try:
        return _FACTORIES[brand]()
    except KeyError:
        raise UnknownBrandError(brand) from None


def demo() -> list[str]:
    """Build a monitor and a computer for each known brand; report unknown ones."""
    lines: list[str] = []
    for brand in (ASUS, HP, "Dell"):
        try:
            factory = get_factory(brand)
        except UnknownBrandError as exc:
            lines.append(_emit(str(exc)))
            continue
        lines.append(factory.get_monitor().print_details())
        lines.append(factory.get_computer().print_details())
    return lines