"""Decorator: computer configurations that wrap and scale a base price."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

log = logging.getLogger(__name__)


class Wrapper(ABC):
    @abstractmethod
    def price(self) -> float:
        """Return the price of this configuration."""


@dataclass(frozen=True)
class BasePc(Wrapper):
    def price(self) -> float:
        return 10.0


@dataclass(frozen=True)
class HomePc(Wrapper):
    cpu: int
    graphical_card: int
    wrapper: Wrapper

    def price(self) -> float:
        return self.wrapper.price() * float(self.cpu) * float(self.graphical_card)


@dataclass(frozen=True)
class ServerPc(Wrapper):
    cpu: int
    memory: int
    wrapper: Wrapper

    def price(self) -> float:
        return self.wrapper.price() * float(self.cpu) * float(self.memory)


def demo() -> tuple[float, float, float]:
    """Return the prices of a base, a home and a server configuration."""
    base = BasePc()
    home = HomePc(cpu=4, graphical_card=1, wrapper=base)
    server = ServerPc(cpu=12, memory=256, wrapper=base)
    prices = (base.price(), home.price(), server.price())
    log.info("%s %s %s", *prices)
    return prices