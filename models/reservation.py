"""Datenmodell für eine Reservierung (Verknüpfung Nutzer ↔ Raum ↔ Zeitfenster)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from models.time_range import TimeRange

if TYPE_CHECKING:
    from models.room import Room
    from models.user import User


def new_reservation_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Reservation:
    """Unveränderliche Reservierung.

    Gleichheit und Hash laufen NUR über ``reservation_id``: zwei Reservierungen
    mit identischen Feldern aber verschiedener ID sind verschiedene Buchungen.
    Lebenszyklus: entsteht nur über ``ReservationEngine.make_reservation``,
    verschwindet nur über ``ReservationEngine.cancel_reservation``.
    """

    user: User = field(compare=False, repr=False)
    room: Room = field(compare=False, repr=False)
    start_time: datetime = field(compare=False)
    end_time: datetime = field(compare=False)
    reservation_id: str = field(default_factory=new_reservation_id)

    @property
    def window(self) -> TimeRange:
        return TimeRange(self.start_time, self.end_time)

    @property
    def username(self) -> str:
        return self.user.username

    @property
    def room_number(self) -> str:
        return self.room.room_number

    def details(self) -> str:
        """Mehrzeilige Detailansicht (Raum, Beginn, Ende, Gebucht von)."""
        return "\n".join([
            "Reservierungsdetails:",
            f"Raum: {self.room_number}",
            f"Beginn: {self.start_time:%Y-%m-%d %H:%M}",
            f"Ende: {self.end_time:%Y-%m-%d %H:%M}",
            f"Gebucht von: {self.username}",
        ])

    def __str__(self) -> str:
        return f"Raum {self.room_number} ({self.window}, {self.username})"
