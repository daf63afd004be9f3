"""Ergebniskanal für alle Domänenoperationen.

Fachliche Fehler werden NICHT als Exception geworfen, sondern als
``Outcome`` mit ``ErrorKind`` zurückgegeben. Aufrufer prüfen ``outcome.ok``
(oder einfach ``if outcome:``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from models.reservation import Reservation
    from models.user import User


class ErrorKind(str, Enum):
    DUPLICATE_USERNAME = "duplicate_username"
    USER_NOT_FOUND = "user_not_found"
    INVALID_CREDENTIAL = "invalid_credential"
    ROOM_UNAVAILABLE = "room_unavailable"
    RESERVATION_NOT_OWNED = "reservation_not_owned"
    ROOM_NOT_REGISTERED = "room_not_registered"
    INVALID_TIME_RANGE = "invalid_time_range"
    PERMISSION_DENIED = "permission_denied"


@dataclass(frozen=True)
class Outcome:
    """Ergebnis einer Operation: Erfolg mit Nutzlast oder Fehler mit Grund."""

    ok: bool
    message: str
    error: Optional[ErrorKind] = None
    reservation: Optional[Reservation] = None
    user: Optional[User] = None
    entries: tuple[str, ...] = ()

    @classmethod
    def success(cls, message: str, **payload) -> "Outcome":
        return cls(ok=True, message=message, **payload)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Outcome":
        return cls(ok=False, message=message, error=error)

    def __bool__(self) -> bool:
        return self.ok

