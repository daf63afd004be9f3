"""Datenmodell für einen Raum und seine Belegungszeiten."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from models.time_range import TimeRange

if TYPE_CHECKING:
    from models.reservation import Reservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomSchedule:
    """Angekündigtes Betriebsfenster eines Raums.

    Rein beschreibend: Buchungen werden NICHT dagegen geprüft.
    """

    start_time: datetime
    end_time: datetime

    @property
    def window(self) -> TimeRange:
        return TimeRange(self.start_time, self.end_time)


@dataclass(eq=False)
class Room:
    """Repräsentiert einen buchbaren Raum.

    Passives Aggregat: hält Belegungszeiten und aktive Reservierungen,
    prüft aber selbst keine Konflikte (das macht ``booking.engine``).
    """

    room_number: str                                  # "101", "102"
    schedules: list[RoomSchedule] = field(default_factory=list)
    reservations: list[Reservation] = field(default_factory=list, repr=False)

    def add_schedule(self, schedule: RoomSchedule) -> None:
        self.schedules.append(schedule)
        logger.info(
            f"Belegungszeit für Raum {self.room_number} hinzugefügt: "
            f"{schedule.window}"
        )

    def add_reservation(self, reservation: Reservation) -> None:
        self.reservations.append(reservation)

    def remove_reservation(self, reservation: Reservation) -> bool:
        """Entfernt eine Reservierung anhand ihrer ID. False wenn nicht vorhanden."""
        for i, r in enumerate(self.reservations):
            if r.reservation_id == reservation.reservation_id:
                del self.reservations[i]
                return True
        return False
