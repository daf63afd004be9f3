"""Audit-Log: append-only Protokoll von Konto- und Admin-Aktionen.

Genau eine Instanz pro ``ReservationSystem``; sie wird beim Start angelegt,
an Verzeichnis und Admin-Operationen weitergereicht und nie zurückgesetzt.
"""

import logging
import threading
from typing import Iterator

logger = logging.getLogger(__name__)


class AuditLog:
    """Geordnete, nur erweiterbare Liste von Texteinträgen."""

    def __init__(self):
        self._entries: list[str] = []
        self._lock = threading.Lock()

    def append(self, entry: str) -> None:
        with self._lock:
            self._entries.append(entry)
        logger.info(f"Audit: {entry}")

    def entries(self) -> list[str]:
        """Kopie aller Einträge in Einfügereihenfolge."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries())
