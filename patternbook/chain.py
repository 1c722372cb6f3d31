"""Chain of responsibility: a device, an updater and a saver handle data in turn."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


def _emit(line: str) -> str:
    log.info(line)
    return line


@dataclass
class Data:
    get_source: bool = False
    update_source: bool = False


@dataclass
class Service(ABC):
    """A link in the chain; passes data on to ``next`` when it has to."""

    name: str = ""
    next: Service | None = field(default=None, repr=False)

    def set_next(self, service: Service) -> Service:
        """Link ``service`` after this one and return it."""
        self.next = service
        return service

    @abstractmethod
    def execute(self, data: Data) -> list[str]:
        """Handle ``data`` and return the messages of every link that ran."""

    def _forward(self, data: Data) -> list[str]:
        if self.next is None:
            raise RuntimeError(f"service {self.name!r} has no next link")
        return self.next.execute(data)


@dataclass
class Device(Service):
    def execute(self, data: Data) -> list[str]:
        if data.get_source:
            line = _emit(f"Data from device {self.name} already get")
        else:
            line = _emit(f"Get data from device {self.name}")
            data.get_source = True
        return [line, *self._forward(data)]


@dataclass
class UpdateDataService(Service):
    def execute(self, data: Data) -> list[str]:
        if data.update_source:
            line = _emit(f"Data from device {self.name} already update")
        else:
            line = _emit(f"Update data from device {self.name}")
            data.update_source = True
        return [line, *self._forward(data)]


@dataclass
class DataService(Service):
    def execute(self, data: Data) -> list[str]:
        if not data.update_source:
            line = _emit("Data not update")
            return [line, *self._forward(data)]
        return [_emit("Data save")]


def demo() -> list[str]:
    """Run fresh data through device, updater and saver."""
    device = Device("Device-1")
    device.set_next(UpdateDataService("Update-1")).set_next(DataService())
    return device.execute(Data())