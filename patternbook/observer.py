"""Observer: a publisher notifies every current subscriber by name."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

log = logging.getLogger(__name__)


class Consumer(Protocol):
    name: str

    def update(self, pub_name: str) -> str: ...


@dataclass
class Subscriber:
    name: str

    def update(self, pub_name: str) -> str:
        """Receive a notification from ``pub_name``; return the delivery message."""
        line = f"Sending to subscribe {self.name} from publisher {pub_name}"
        log.info(line)
        return line


@dataclass
class Publisher:
    """Keeps consumers keyed by name; a later one with the same name replaces it."""

    name: str
    consumers: dict[str, Consumer] = field(default_factory=dict)

    def subscribe(self, consumer: Consumer) -> None:
        self.consumers[consumer.name] = consumer

    def unsubscribe(self, consumer: Consumer) -> None:
        self.consumers.pop(consumer.name, None)

    def notify(self) -> list[str]:
        """Notify every consumer and return their delivery messages."""
        return [consumer.update(self.name) for consumer in self.consumers.values()]


def demo() -> list[str]:
    """Subscribe four consumers, drop one, and notify the rest."""
    subs = [Subscriber(name) for name in ("Sub-1", "Sub-2", "Sub-3", "Sub-n")]
    channel = Publisher("Publisher chanel")
    for sub in subs:
        channel.subscribe(sub)
    channel.unsubscribe(subs[1])
    return channel.notify()