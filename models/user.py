"""Datenmodell für Nutzer und ihre Rollen.

Rollen sind ein Tagged Union aus drei Varianten: ``User`` (einfacher Nutzer),
``Manager`` und ``Admin``. Die Rolle ist ein Klassen-Tag der Variante und
damit nach dem Anlegen unveränderlich. Nur ``Admin`` trägt Zusatzzustand
(sein Raumverzeichnis). Was eine Rolle darf, steht in ``Role``; die
eigentlichen Operationen liegen in ``accounts.roles`` bzw. ``booking.engine``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from models.reservation import Reservation
    from models.room import Room


class Role(str, Enum):
    USER = "user"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def label(self) -> str:
        return {"user": "User", "manager": "Manager", "admin": "Admin"}[self.value]

    @property
    def can_reserve(self) -> bool:
        return True

    @property
    def can_manage_rooms(self) -> bool:
        return self in (Role.MANAGER, Role.ADMIN)

    @property
    def can_manage_schedules(self) -> bool:
        # Nur Manager; Belegungszeiten brauchen keine Admin-Beteiligung
        return self is Role.MANAGER

    @property
    def can_view_logs(self) -> bool:
        return self is Role.ADMIN


@dataclass(frozen=True, eq=False)
class User:
    """Einfacher Nutzer: darf reservieren und stornieren.

    ``frozen`` schützt Name, Passwort und Rolle; die Reservierungsliste selbst
    bleibt veränderbar und wird nur von der ReservationEngine gepflegt.
    """

    role: ClassVar[Role] = Role.USER

    username: str
    password: str = field(repr=False)
    reservations: list[Reservation] = field(default_factory=list, repr=False)

    def authenticate(self, password: str) -> bool:
        """Exakter, case-sensitiver Vergleich (kein Hashing)."""
        return self.password == password

    def owns(self, reservation: Reservation) -> bool:
        return any(r.reservation_id == reservation.reservation_id
                   for r in self.reservations)

    def remove_reservation(self, reservation: Reservation) -> bool:
        """Entfernt genau den Eintrag mit dieser ID. False wenn nicht vorhanden."""
        for i, r in enumerate(self.reservations):
            if r.reservation_id == reservation.reservation_id:
                del self.reservations[i]
                return True
        return False


@dataclass(frozen=True, eq=False)
class Manager(User):
    """Manager: verwaltet Belegungszeiten direkt, Räume nur über einen Admin."""

    role: ClassVar[Role] = Role.MANAGER


@dataclass(frozen=True, eq=False)
class Admin(User):
    """Admin: besitzt das maßgebliche Raumverzeichnis und sieht das Audit-Log."""

    role: ClassVar[Role] = Role.ADMIN

    available_rooms: list[Room] = field(default_factory=list, repr=False)

    def manages(self, room: Room) -> bool:
        return any(r.room_number == room.room_number for r in self.available_rooms)


Account = Union[User, Manager, Admin]

_VARIANTS: dict[Role, type[User]] = {
    Role.USER: User,
    Role.MANAGER: Manager,
    Role.ADMIN: Admin,
}


def create_account(username: str, password: str, role: Role) -> Account:
    """Erzeugt die zur Rolle passende Variante."""
    return _VARIANTS[Role(role)](username=username, password=password)
