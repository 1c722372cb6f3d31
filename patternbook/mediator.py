"""Mediator: a station manager lets vehicles use a single platform in turn."""

from __future__ import annotations

import logging
import time
from abc import ABC
from collections import deque
from dataclasses import dataclass, field
from typing import ClassVar

log = logging.getLogger(__name__)


def _emit(line: str) -> str:
    log.info(line)
    return line


@dataclass
class StationManager:
    """Grants the platform to one vehicle and queues the rest."""

    platform_free: bool = True
    queue: deque[Vehicle] = field(default_factory=deque)

    def can_arrive(self, vehicle: Vehicle) -> bool:
        """Take the platform if it is free; otherwise queue ``vehicle``."""
        if self.platform_free:
            self.platform_free = False
            return True
        self.queue.append(vehicle)
        return False

    def notify_about_go(self) -> list[str]:
        """Free the platform and let the first queued vehicle in."""
        self.platform_free = True
        if self.queue:
            return self.queue.popleft().permit_arrive()
        return []


@dataclass(eq=False)
class Vehicle(ABC):
    """A vehicle that asks its dispatcher before using the platform."""

    dispatcher: StationManager

    permit_message: ClassVar[str]
    go_message: ClassVar[str]
    delayed_message: ClassVar[str]
    arrived_message: ClassVar[str]

    def arrive(self) -> list[str]:
        """Try to take the platform; return the messages produced."""
        if not self.dispatcher.can_arrive(self):
            return [_emit(self.delayed_message)]
        return [_emit(self.arrived_message)]

    def go(self) -> list[str]:
        """Leave the platform and let the next vehicle in."""
        return [_emit(self.go_message), *self.dispatcher.notify_about_go()]

    def permit_arrive(self) -> list[str]:
        """Called by the dispatcher when this vehicle may come in."""
        return [_emit(self.permit_message), *self.arrive()]


@dataclass(eq=False)
class Passenger(Vehicle):
    permit_message = "Пасажиры: занимайте места..."
    go_message = "Пасажиры: отправление!"
    delayed_message = "Пасажиры: отправление задерживается..."
    arrived_message = "Пасажиры: занимайте места..."


@dataclass(eq=False)
class Cargo(Vehicle):
    permit_message = "Грузовик: погрузка..."
    go_message = "Грузовик: отправление!"
    delayed_message = "Грузовик: отправление задерживается..."
    arrived_message = "Грузовик: отправлен"


def demo(pause: float = 1.0) -> list[str]:
    """A passenger bus arrives, a truck has to wait, then the bus leaves."""
    manager = StationManager()
    passenger = Passenger(manager)
    cargo = Cargo(manager)

    lines = passenger.arrive()
    time.sleep(pause)
    lines += cargo.arrive()
    time.sleep(pause)
    lines += passenger.go()
    return lines