"""Builder: collectors assemble computers step by step under a factory's direction."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

log = logging.getLogger(__name__)

ASUS_COLLECTOR_TYPE = "asus"
HP_COLLECTOR_TYPE = "hp"


@dataclass(frozen=True)
class Computer:
    core: int = 0
    brand: str = ""
    memory: int = 0
    monitor: int = 0
    graphical_card: int = 0

    def report(self) -> str:
        """Log and return a one-line description of the computer."""
        line = (
            f"{self.brand} Core:[{self.core}], Memory: [{self.memory}], "
            f"Monitor: [{self.monitor}], GraphicalCard: [{self.graphical_card}]"
        )
        log.info(line)
        return line


@dataclass
class Collector(ABC):
    """Holds the parts set so far and turns them into a Computer."""

    core: int = 0
    brand: str = ""
    memory: int = 0
    monitor: int = 0
    graphical_card: int = 0

    @abstractmethod
    def set_core(self) -> None: ...

    @abstractmethod
    def set_brand(self) -> None: ...

    @abstractmethod
    def set_memory(self) -> None: ...

    @abstractmethod
    def set_monitor(self) -> None: ...

    @abstractmethod
    def set_graphical_card(self) -> None: ...

    def get_computer(self) -> Computer:
        """Return the computer; the monitor count is not carried over."""
        return Computer(
            core=self.core,
            brand=self.brand,
            memory=self.memory,
            graphical_card=self.graphical_card,
        )


@dataclass
class AsusCollector(Collector):
    def set_core(self) -> None:
        self.core = 4

    def set_brand(self) -> None:
        self.brand = "Asus"

    def set_memory(self) -> None:
        self.memory = 8

    def set_monitor(self) -> None:
        self.monitor = 2

    def set_graphical_card(self) -> None:
        self.graphical_card = 1


@dataclass
class HpCollector(Collector):
    def set_core(self) -> None:
        self.core = 4

    def set_brand(self) -> None:
        self.brand = "Hp"

    def set_memory(self) -> None:
        self.memory = 16

    def set_monitor(self) -> None:
        # The monitor step of this collector overwrites the memory size.
        self.memory = 1

    def set_graphical_card(self) -> None:
        self.graphical_card = 2


_COLLECTORS: dict[str, type[Collector]] = {
    ASUS_COLLECTOR_TYPE: AsusCollector,
    HP_COLLECTOR_TYPE: HpCollector,
}


def get_collector(collector_type: str) -> Collector | None:
    """Return a fresh collector of the given type, or None if it is unknown."""
    collector_cls = _COLLECTORS.get(collector_type)
    return collector_cls() if collector_cls else None


@dataclass
class Factory:
    """Directs a collector through every assembly step."""

    collector: Collector

    def create_computer(self) -> Computer:
        self.collector.set_core()
        self.collector.set_brand()
        self.collector.set_memory()
        self.collector.set_monitor()
        self.collector.set_graphical_card()
        return self.collector.get_computer()


def demo() -> list[str]:
    """Build one Asus and one Hp computer with the same factory."""
    factory = Factory(get_collector(ASUS_COLLECTOR_TYPE))
    asus = factory.create_computer()
    factory.collector = get_collector(HP_COLLECTOR_TYPE)
    hp = factory.create_computer()
    return [asus.report(), hp.report()]