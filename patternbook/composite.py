"""Composite: search a tree of computer components by name."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass
class Component:
    """A single part; matches a search when its name is equal."""

    name: str
    description: str

    def search(self, name: str) -> list[Component]:
        """Return every component under this one (itself included) named ``name``."""
        if self.name == name:
            log.info("Component: [%s] is find %s", self.name, self.description)
            return [self]
        return []


@dataclass
class Cpu(Component):
    pass


@dataclass
class GraphicsCard(Component):
    pass


@dataclass
class Motherboard(Component):
    components: list[Component] = field(default_factory=list)

    def search(self, name: str) -> list[Component]:
        found = super().search(name)
        for component in self.components:
            found.extend(component.search(name))
        return found


@dataclass
class Pc(Component):
    components: list[Component] = field(default_factory=list)

    def search(self, name: str) -> list[Component]:
        found = super().search(name)
        for component in self.components:
            found.extend(component.search(name))
        return found


def demo() -> list[str]:
    """Search a sample computer for several components and return what was found."""
    motherboard = Motherboard(
        "Gigabyte",
        "Материнская плата",
        [
            Cpu("Cpu-1", "Процессор-1"),
            Cpu("Cpu-2", "Процессор-2"),
            GraphicsCard("Radeon", "Видеокарта-1"),
            GraphicsCard("GeForce", "Видеокарта-2"),
        ],
    )
    pc = Pc("PC", "Компьютер", [motherboard])
    return [
        component.name
        for wanted in ("Gigabyte", "Radeon", "Cpu-2")
        for component in pc.search(wanted)
    ]