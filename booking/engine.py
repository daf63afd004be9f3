"""Reservierungs-Engine: Buchen und Stornieren mit zweiseitiger Verknüpfung.

Jede Reservierung hängt gleichzeitig in ``user.reservations`` und
``room.reservations``. Beide Listen werden nur hier und nur gemeinsam
verändert. Prüfung und Einfügen laufen pro Raum unter einem Lock, damit zwei
überlappende Buchungen nie beide angenommen werden.
Die Liste eines Nutzers wird zusätzlich unter einem Nutzer-Lock verändert,
weil sie über mehrere Räume geteilt ist. Lock-Reihenfolge: erst Raum, dann
Nutzer.
"""

import logging
import threading
from datetime import datetime

from booking.availability import conflicting_reservations, is_available
from booking.outcome import ErrorKind, Outcome
from models.reservation import Reservation
from models.room import Room
from models.time_range import TimeRange
from models.user import User

logger = logging.getLogger(__name__)


class ReservationEngine:
    """Legt Reservierungen an und storniert sie."""

    def __init__(self, reject_inverted_ranges: bool = True):
        self.reject_inverted_ranges = reject_inverted_ranges
        self._locks_by_room: dict[str, threading.RLock] = {}
        self._locks_by_user: dict[str, threading.RLock] = {}
        self._global_lock = threading.RLock()

    def _get_room_lock(self, room: Room) -> threading.RLock:
        with self._global_lock:
            if room.room_number not in self._locks_by_room:
                self._locks_by_room[room.room_number] = threading.RLock()
            return self._locks_by_room[room.room_number]

    def _get_user_lock(self, user: User) -> threading.RLock:
        with self._global_lock:
            if user.username not in self._locks_by_user:
                self._locks_by_user[user.username] = threading.RLock()
            return self._locks_by_user[user.username]

    # ─── Buchen ───

    def make_reservation(
        self, user: User, room: Room, start: datetime, end: datetime
    ) -> Outcome:
        """Bucht ``room`` für [start, end) im Namen von ``user``.

        Fehlerfälle (jeweils ohne jede Zustandsänderung):
        - Rolle darf nicht reservieren → PERMISSION_DENIED
        - end <= start (wenn ``reject_inverted_ranges``) → INVALID_TIME_RANGE
        - Überlappung mit bestehender Buchung → ROOM_UNAVAILABLE
        """
        window = TimeRange(start, end)

        if not user.role.can_reserve:
            return Outcome.failure(
                ErrorKind.PERMISSION_DENIED,
                f"{user.username} darf keine Räume reservieren.",
            )

        if self.reject_inverted_ranges and not window.is_valid:
            logger.warning(
                f"Ungültiges Zeitfenster von {user.username} für Raum "
                f"{room.room_number}: {window}"
            )
            return Outcome.failure(
                ErrorKind.INVALID_TIME_RANGE,
                f"Ungültiges Zeitfenster {window}: Ende muss nach Beginn liegen.",
            )

        with self._get_room_lock(room):
            if not is_available(room, start, end):
                blocking = conflicting_reservations(room, start, end)
                logger.info(
                    f"Raum {room.room_number} belegt im Zeitfenster {window} "
                    f"(Anfrage von {user.username}, Konflikte: "
                    f"{', '.join(str(r) for r in blocking)})"
                )
                return Outcome.failure(
                    ErrorKind.ROOM_UNAVAILABLE,
                    f"Reservierung fehlgeschlagen. Raum {room.room_number} ist "
                    f"im Zeitraum {window} nicht verfügbar.",
                )

            reservation = Reservation(
                user=user, room=room, start_time=start, end_time=end
            )
            with self._get_user_lock(user):
                user.reservations.append(reservation)
            room.add_reservation(reservation)

        logger.info(
            f"Reservierung {reservation.reservation_id} angelegt: "
            f"Raum {room.room_number}, {window}, {user.username}"
        )
        return Outcome.success(
            f"Reservierung von {user.username} für Raum {room.room_number} "
            f"von {start:%Y-%m-%d %H:%M} bis {end:%Y-%m-%d %H:%M}",
            reservation=reservation,
        )

    # ─── Stornieren ───

    def cancel_reservation(self, user: User, reservation: Reservation) -> Outcome:
        """Storniert ``reservation``, aber nur wenn sie ``user`` gehört.

        Eigentum wird über die Reservierungs-ID in der Liste des Nutzers
        geprüft, nicht über gleiche Felder.
        """
        room = reservation.room
        with self._get_room_lock(room), self._get_user_lock(user):
            if not user.owns(reservation):
                logger.info(
                    f"Stornierung abgelehnt: Reservierung "
                    f"{reservation.reservation_id} gehört nicht {user.username}"
                )
                return Outcome.failure(
                    ErrorKind.RESERVATION_NOT_OWNED,
                    f"Stornierung nicht möglich. Diese Reservierung gehört "
                    f"nicht {user.username}.",
                )

            user.remove_reservation(reservation)
            room.remove_reservation(reservation)

        logger.info(
            f"Reservierung {reservation.reservation_id} storniert von {user.username}"
        )
        return Outcome.success(
            f"Reservierung für Raum {room.room_number} von "
            f"{reservation.start_time:%Y-%m-%d %H:%M} bis "
            f"{reservation.end_time:%Y-%m-%d %H:%M} storniert von {user.username}",
            reservation=reservation,
        )
