"""Iterator: walk a list of routes one at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    name: str
    travel_time: int


@dataclass
class Routes:
    """A collection of routes with a cursor over them."""

    routes: list[Route] = field(default_factory=list)
    index: int = 0

    def has_next(self) -> bool:
        """Return True while the cursor has not passed the last route."""
        return self.index < len(self.routes)

    def get_next(self) -> Route | None:
        """Return the route under the cursor, or None past the end; always advance."""
        route = self.routes[self.index] if self.has_next() else None
        self.index += 1
        return route

    def __iter__(self) -> Routes:
        return self

    def __next__(self) -> Route:
        if not self.has_next():
            raise StopIteration
        return self.get_next()


def demo() -> list[tuple[str, int]]:
    """List the name and travel time of each sample route."""
    routes = Routes(
        [
            Route("Route-1", 110),
            Route("Route-2", 50),
            Route("Route-3", 60),
            Route("Route-4", 40),
        ]
    )
    result: list[tuple[str, int]] = []
    for route in routes:
        log.info("%s %d", route.name, route.travel_time)
        result.append((route.name, route.travel_time))
    return result