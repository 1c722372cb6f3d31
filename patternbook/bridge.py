"""Bridge: computers of several systems working with any kind of scanner."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

log = logging.getLogger(__name__)


def _emit(line: str) -> str:
    log.info(line)
    return line


class Scanner(ABC):
    @abstractmethod
    def scan_file(self) -> str:
        """Scan a file and return the status message."""


class Epson(Scanner):
    def scan_file(self) -> str:
        return _emit("Epson scan file")


class Hp(Scanner):
    def scan_file(self) -> str:
        return _emit("Epson scan file")


class Pc:
    """A computer that delegates scanning to whatever scanner is attached."""

    system: ClassVar[str] = "generic"

    def __init__(self, scanner: Scanner | None = None) -> None:
        self.scanner = scanner

    def add_scanner(self, scanner: Scanner) -> None:
        """Attach ``scanner``, replacing any previous one."""
        self.scanner = scanner

    def scan(self) -> list[str]:
        """Scan with the attached scanner and return the messages produced."""
        if self.scanner is None:
            raise RuntimeError(f"no scanner attached to the {self.system} pc")
        header = _emit(f"Scan pc.go {self.system} system")
        return [header, self.scanner.scan_file()]


class LinuxPc(Pc):
    system = "linux"


class MacPc(Pc):
    system = "mac"


class WindowsPc(Pc):
    system = "windows"


def demo() -> list[str]:
    """Scan from several systems with several scanners."""
    hp, epson = Hp(), Epson()
    linux, mac, windows = LinuxPc(), MacPc(), WindowsPc()
    lines: list[str] = []
    for pc, scanner in ((linux, hp), (linux, epson), (mac, hp), (windows, epson)):
        pc.add_scanner(scanner)
        lines.extend(pc.scan())
    return lines