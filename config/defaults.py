from datetime import datetime

from config.schema import (
    DemoConfig,
    DemoReservation,
    DemoRoom,
    DemoSchedule,
    DemoUser,
    SystemConfig,
)
from models.user import Role


def _at(hour: int, day: int = 1) -> datetime:
    return datetime(2024, 5, day, hour, 0)


def default_demo() -> DemoConfig:
    """Standard-Szenario.

    Konten: user1 (User), admin1 (Admin), manager1 (Manager)
    Räume (über manager1 → admin1 angelegt):
      101  Belegungszeiten 08-12, 13-17
      102  Belegungszeit   09-11
    Buchungen von user1: 101 09-11, 102 10-12
    Danach storniert user1 seine erste Buchung und scannt einen QR-Code.
    Belegungszeiten werden NICHT gegen Buchungen geprüft (102 10-12 geht durch).
    """
    return DemoConfig(
        users=[
            DemoUser(username="user1", password="password123", role=Role.USER),
            DemoUser(username="admin1", password="adminpassword", role=Role.ADMIN),
            DemoUser(username="manager1", password="managerpassword", role=Role.MANAGER),
        ],
        room_manager="manager1",
        room_admin="admin1",
        rooms=[
            DemoRoom(room_number="101", schedules=[
                DemoSchedule(start_time=_at(8), end_time=_at(12)),
                DemoSchedule(start_time=_at(13), end_time=_at(17)),
            ]),
            DemoRoom(room_number="102", schedules=[
                DemoSchedule(start_time=_at(9), end_time=_at(11)),
            ]),
        ],
        reservations=[
            DemoReservation(username="user1", room_number="101",
                            start_time=_at(9), end_time=_at(11)),
            DemoReservation(username="user1", room_number="102",
                            start_time=_at(10), end_time=_at(12)),
        ],
        cancel_first_reservation_of=["user1"],
        qr_scans=["user1"],
    )


def default_system_config() -> SystemConfig:
    """Komplette Default-Konfiguration."""
    return SystemConfig(demo=default_demo())
