"""ReservationSystem: verdrahtet Verzeichnis, Engine, Raumverwaltung und Audit-Log.

Pro Prozess wird genau ein System angelegt; es besitzt das einzige Audit-Log.
Der gesamte Zustand lebt im Speicher und geht beim Beenden verloren.
"""

import logging
from datetime import datetime
from typing import Optional

from accounts.audit_log import AuditLog
from accounts.directory import Directory
from accounts.roles import RoomAdministration, scan_qr_code
from booking.engine import ReservationEngine
from booking.outcome import Outcome
from config.schema import DemoConfig, SystemConfig
from models.reservation import Reservation
from models.room import Room, RoomSchedule
from models.user import Role, User

logger = logging.getLogger(__name__)


class ReservationSystem:
    """Fassade über alle Komponenten."""

    def __init__(self, config: Optional[SystemConfig] = None):
        self.config = config or SystemConfig()
        self.audit_log = AuditLog()
        self.directory = Directory(self.audit_log)
        self.engine = ReservationEngine(
            reject_inverted_ranges=self.config.booking.reject_inverted_ranges
        )
        self.rooms = RoomAdministration(self.audit_log)

    def sign_up(self, username: str, password: str, role: Role = Role.USER) -> Outcome:
        return self.directory.sign_up(username, password, role)

    def login(self, username: str, password: str) -> Outcome:
        return self.directory.login(username, password)

    def make_reservation(
        self, user: User, room: Room, start: datetime, end: datetime
    ) -> Outcome:
        return self.engine.make_reservation(user, room, start, end)

    def cancel_reservation(self, user: User, reservation: Reservation) -> Outcome:
        return self.engine.cancel_reservation(user, reservation)

    def logs(self) -> list[str]:
        return self.audit_log.entries()

    # ─── Demo ───

    def run_demo(self, demo: Optional[DemoConfig] = None) -> list[tuple[str, Outcome]]:
        """Spielt ein Demo-Szenario durch und gibt (Schritt, Ergebnis)-Paare zurück.

        Schritte, deren Voraussetzung fehlschlägt (z.B. Anmeldung), werden
        übersprungen statt abgebrochen.
        """
        demo = demo or self.config.demo
        steps: list[tuple[str, Outcome]] = []

        for u in demo.users:
            steps.append((f"Registrierung {u.username}",
                          self.sign_up(u.username, u.password, u.role)))

        accounts: dict[str, User] = {}
        for u in demo.users:
            outcome = self.login(u.username, u.password)
            steps.append((f"Anmeldung {u.username}", outcome))
            if outcome:
                accounts[u.username] = outcome.user

        admin = accounts.get(demo.room_admin)
        manager = accounts.get(demo.room_manager)
        rooms: dict[str, Room] = {}
        if demo.rooms and (admin is None or manager is None):
            logger.warning("Admin oder Manager nicht angemeldet – Räume werden übersprungen")
        elif demo.rooms:
            for r in demo.rooms:
                room = Room(r.room_number)
                rooms[r.room_number] = room
                steps.append((f"Raum {r.room_number}",
                              self.rooms.manager_add_room(manager, room, admin)))
            for r in demo.rooms:
                for s in r.schedules:
                    steps.append((
                        f"Belegungszeit {r.room_number}",
                        self.rooms.add_schedule(
                            manager, rooms[r.room_number],
                            RoomSchedule(s.start_time, s.end_time),
                        ),
                    ))

        for res in demo.reservations:
            user = accounts.get(res.username)
            room = rooms.get(res.room_number)
            if user is None or room is None:
                logger.warning(
                    f"Reservierung {res.username}/{res.room_number} übersprungen")
                continue
            steps.append((f"Reservierung {res.username}",
                          self.make_reservation(user, room, res.start_time, res.end_time)))

        for name in demo.cancel_first_reservation_of:
            user = accounts.get(name)
            if user is None or not user.reservations:
                logger.warning(f"Keine Reservierung von {name} zum Stornieren")
                continue
            steps.append((f"Stornierung {name}",
                          self.cancel_reservation(user, user.reservations[0])))

        for name in demo.qr_scans:
            user = accounts.get(name)
            if user is not None:
                steps.append((f"QR-Scan {name}", scan_qr_code(user)))

        if admin is not None:
            steps.append((f"Logs {admin.username}", self.rooms.view_logs(admin)))

        return steps
