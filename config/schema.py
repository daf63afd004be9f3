from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from models.user import Role


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ─── BUCHUNG ───

class BookingConfig(BaseModel):
    """Regeln der Reservierungs-Engine."""
    # Reservierungen mit Ende <= Beginn ablehnen (INVALID_TIME_RANGE)
    reject_inverted_ranges: bool = Field(True,
        description="Zeitfenster mit Ende <= Beginn ablehnen")


# ─── DEMO-SZENARIO ───

class DemoUser(BaseModel):
    """Ein Konto, das im Demo-Szenario registriert und angemeldet wird."""
    username: str
    # Klartext, es gibt bewusst kein Hashing
    password: str
    role: Role = Role.USER


class DemoSchedule(BaseModel):
    """Eine angekündigte Belegungszeit eines Raums."""
    start_time: datetime
    end_time: datetime

    @model_validator(mode='after')
    def _check_window(self):
        if self.end_time <= self.start_time:
            raise ValueError(
                f"Belegungszeit endet ({self.end_time}) nicht nach Beginn "
                f"({self.start_time})"
            )
        return self


class DemoRoom(BaseModel):
    """Ein Raum, den der Manager über den Admin anlegen lässt."""
    room_number: str
    schedules: list[DemoSchedule] = []


class DemoReservation(BaseModel):
    """Eine Buchungsanfrage im Demo-Szenario."""
    username: str
    room_number: str
    start_time: datetime
    end_time: datetime


class DemoConfig(BaseModel):
    """Ablauf des Demo-Szenarios.

    Reihenfolge: registrieren → anmelden → Räume + Belegungszeiten →
    Reservierungen → Stornierungen → QR-Scans → Log-Ansicht.
    Inhaltlich überlappende Reservierungen sind erlaubt: sie laufen in
    ROOM_UNAVAILABLE und zeigen so die Konfliktprüfung.
    """
    users: list[DemoUser] = []
    # Manager, der Räume über den Admin anlegen lässt
    room_manager: Optional[str] = None
    # Admin, dessen Raumverzeichnis befüllt wird und der das Log einsieht
    room_admin: Optional[str] = None
    rooms: list[DemoRoom] = []
    reservations: list[DemoReservation] = []
    # Nutzer, deren jeweils erste Reservierung storniert wird
    cancel_first_reservation_of: list[str] = []
    qr_scans: list[str] = []

    @model_validator(mode='after')
    def _check_references(self):
        """Prüft Eindeutigkeit und dass alle Verweise auf bekannte Nutzer/Räume zeigen."""
        roles = {}
        for u in self.users:
            if u.username in roles:
                raise ValueError(f"Nutzername {u.username} ist doppelt definiert")
            roles[u.username] = u.role

        room_numbers = set()
        for r in self.rooms:
            if r.room_number in room_numbers:
                raise ValueError(f"Raum {r.room_number} ist doppelt definiert")
            room_numbers.add(r.room_number)

        if self.rooms:
            if roles.get(self.room_manager) != Role.MANAGER:
                raise ValueError(
                    f"room_manager '{self.room_manager}' ist kein definierter Manager")
            if roles.get(self.room_admin) != Role.ADMIN:
                raise ValueError(
                    f"room_admin '{self.room_admin}' ist kein definierter Admin")

        for res in self.reservations:
            if res.username not in roles:
                raise ValueError(f"Reservierung für unbekannten Nutzer {res.username}")
            if res.room_number not in room_numbers:
                raise ValueError(f"Reservierung für unbekannten Raum {res.room_number}")

        for name in self.cancel_first_reservation_of + self.qr_scans:
            if name not in roles:
                raise ValueError(f"Unbekannter Nutzer {name}")
        return self


# ─── GESAMT-CONFIG ───

class SystemConfig(BaseModel):
    """Gesamtkonfiguration des Reservierungssystems."""
    # Anzeigename
    system_name: str = Field("Raumbuchung",
        description="Name des Systems")
    # Log-Level für die CLI
    log_level: LogLevel = Field(LogLevel.INFO)
    # Regeln der Reservierungs-Engine
    booking: BookingConfig = Field(default_factory=BookingConfig)
    # Demo-Szenario
    demo: DemoConfig = Field(default_factory=DemoConfig)
