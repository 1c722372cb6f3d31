"""Proxy: guard database access with a per-user permission table."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


class ForbiddenError(PermissionError):
    """Raised when a user may not read the data."""

    def __init__(self) -> None:
        super().__init__("Forbidden")


class Service(ABC):
    @abstractmethod
    def get_data(self, user: str) -> list[str]:
        """Return the rows visible to ``user``."""


class Database(Service):
    def get_data(self, user: str) -> list[str]:
        return ["String-1", "String-2"]


@dataclass
class ProxyDatabase(Service):
    """Passes requests to the database only for users marked as allowed."""

    users: dict[str, bool]
    db: Database = field(default_factory=Database)

    def get_data(self, user: str) -> list[str]:
        if not self.users.get(user, False):
            raise ForbiddenError()
        return self.db.get_data(user)


def demo() -> list[str]:
    """Read as the admin, then try to read as a plain user."""
    proxy = ProxyDatabase({"admin": True, "user": False}, Database())
    lines: list[str] = []
    for user in ("admin", "user"):
        try:
            data = proxy.get_data(user)
        except ForbiddenError as exc:
            log.info("%s", exc)
            lines.append(str(exc))
            break
        line = "[" + " ".join(data) + "]"
        log.info(line)
        lines.append(line)
    return lines