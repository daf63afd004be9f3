"""Verfügbarkeitsprüfung: kollidiert ein Zeitfenster mit bestehenden Buchungen?"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from models.time_range import TimeRange

if TYPE_CHECKING:
    from models.reservation import Reservation
    from models.room import Room


def conflicting_reservations(
    room: Room, start: datetime, end: datetime
) -> list[Reservation]:
    """Alle Reservierungen des Raums, die [start, end) strikt überlappen."""
    requested = TimeRange(start, end)
    return [r for r in room.reservations if requested.overlaps(r.window)]


def is_available(room: Room, start: datetime, end: datetime) -> bool:
    """True wenn keine bestehende Reservierung mit [start, end) kollidiert.

    Berührende Endpunkte sind KEIN Konflikt. Ein Raum ohne Reservierungen
    ist immer verfügbar.
    """
    requested = TimeRange(start, end)
    return not any(requested.overlaps(r.window) for r in room.reservations)
