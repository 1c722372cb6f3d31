"""Strategy: a navigator plans a route with an interchangeable travel strategy."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

log = logging.getLogger(__name__)


def _emit(line: str) -> str:
    log.info(line)
    return line


class Strategy(ABC):
    @abstractmethod
    def route(self, start_point: int, end_point: int) -> str:
        """Plan a route from ``start_point`` to ``end_point``; return its summary."""


class WalkStrategy(Strategy):
    avg_speed = 4

    def route(self, start_point: int, end_point: int) -> str:
        total = end_point - start_point
        total_time = total * 60
        return _emit(
            f"Walk A:[{start_point}] to B:[{end_point}] AVG speed [{self.avg_speed}] "
            f"Total [{total}] Total time [{total_time}] min"
        )


class RoadStrategy(Strategy):
    avg_speed = 30
    traffic_jam = 2

    def route(self, start_point: int, end_point: int) -> str:
        total = end_point - start_point
        total_time = total * self.avg_speed * self.traffic_jam
        return _emit(
            f"Road A:[{start_point}] to B:[{end_point}] AVG speed [{self.avg_speed}] "
            f"Traffic [{self.traffic_jam}] Total [{total}] Total time [{total_time}] min"
        )


class PublicTransportStrategy(Strategy):
    avg_speed = 40

    def route(self, start_point: int, end_point: int) -> str:
        total = end_point - start_point
        total_time = total * self.avg_speed
        return _emit(
            f"Tran A:[{start_point}] to B:[{end_point}] AVG speed [{self.avg_speed}] "
            f"Total [{total}] Total time [{total_time}] min"
        )


@dataclass
class Navigator:
    """Plans routes with whichever strategy is currently set."""

    strategy: Strategy | None = None

    def route(self, start_point: int, end_point: int) -> str:
        if self.strategy is None:
            raise RuntimeError("no route strategy set")
        return self.strategy.route(start_point, end_point)


def demo() -> list[str]:
    """Plan the same trip on foot, by road and by public transport."""
    navigator = Navigator()
    lines: list[str] = []
    for strategy in (WalkStrategy(), RoadStrategy(), PublicTransportStrategy()):
        navigator.strategy = strategy
        lines.append(navigator.route(10, 100))
    return lines