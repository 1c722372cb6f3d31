"""Adapter: lets a JSON document be used where an XML data service is expected."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

SEND_MESSAGE = "Отправка xml документа!"


class AnalyticalDataService(ABC):
    """Something that can send XML data."""

    @abstractmethod
    def send_xml_data(self) -> str:
        """Send the XML data and return the status message."""


class XmlDocument(AnalyticalDataService):
    def send_xml_data(self) -> str:
        log.info(SEND_MESSAGE)
        return SEND_MESSAGE


class JsonDocument:
    def convert_to_xml(self) -> str:
        """Return the document rendered as XML."""
        return "<xml></xml>"


@dataclass
class JsonDocumentAdapter(AnalyticalDataService):
    json_document: JsonDocument = field(default_factory=JsonDocument)

    def send_xml_data(self) -> str:
        self.json_document.convert_to_xml()
        log.info(SEND_MESSAGE)
        return SEND_MESSAGE


def demo() -> list[str]:
    """Send data through a native XML service and through the adapter."""
    services: list[AnalyticalDataService] = [XmlDocument(), JsonDocumentAdapter()]
    return [service.send_xml_data() for service in services]