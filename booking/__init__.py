"""Buchungs-Modul: Verfügbarkeitsprüfung und Reservierungs-Engine."""

from .availability import conflicting_reservations, is_available
from .engine import ReservationEngine
from .outcome import ErrorKind, Outcome

__all__ = [
    "conflicting_reservations",
    "is_available",
    "ReservationEngine",
    "ErrorKind",
    "Outcome",
]
