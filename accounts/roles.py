"""Rollenabhängige Operationen (Manager / Admin / Nutzer).

Berechtigungsmodell:
- Raum-Lebenszyklus (hinzufügen/entfernen) läuft IMMER über einen Admin.
  Ein Manager hält kein eigenes Raumverzeichnis, er delegiert nur.
- Belegungszeiten darf ein Manager direkt am Raum pflegen, ohne Admin.
  Diese Asymmetrie ist so gewollt und bleibt erhalten.
- Das Audit-Log sieht nur ein Admin.

Fehlt einer Rolle die nötige Fähigkeit, gibt es PERMISSION_DENIED und keine
Zustandsänderung.
"""

import logging

from accounts.audit_log import AuditLog
from booking.outcome import ErrorKind, Outcome
from models.room import Room, RoomSchedule
from models.user import Admin, User

logger = logging.getLogger(__name__)


def _denied(actor: User, action: str) -> Outcome:
    logger.warning(f"{actor.role.label} {actor.username} darf nicht: {action}")
    return Outcome.failure(
        ErrorKind.PERMISSION_DENIED,
        f"{actor.username} ({actor.role.label}) ist nicht berechtigt: {action}.",
    )


class RoomAdministration:
    """Raumverwaltung und Log-Einsicht, gebunden an ein Audit-Log."""

    def __init__(self, audit_log: AuditLog):
        self.audit_log = audit_log

    # ─── Admin ───

    def add_room(self, admin: User, room: Room) -> Outcome:
        """Nimmt ``room`` bedingungslos in das Verzeichnis des Admins auf."""
        if not isinstance(admin, Admin):
            return _denied(admin, f"Raum {room.room_number} hinzufügen")
        admin.available_rooms.append(room)
        self.audit_log.append(
            f"Raum {room.room_number} hinzugefügt von Admin {admin.username}"
        )
        return Outcome.success(f"Raum {room.room_number} wurde hinzugefügt.")

    def remove_room(self, admin: User, room: Room) -> Outcome:
        """Entfernt ``room`` nur, wenn er im Verzeichnis des Admins steht.

        Bei Misserfolg wird nichts protokolliert.
        """
        if not isinstance(admin, Admin):
            return _denied(admin, f"Raum {room.room_number} entfernen")
        if not admin.manages(room):
            return Outcome.failure(
                ErrorKind.ROOM_NOT_REGISTERED,
                f"Raum {room.room_number} ist nicht vorhanden und kann nicht "
                f"entfernt werden.",
            )
        index = next(i for i, r in enumerate(admin.available_rooms)
                     if r.room_number == room.room_number)
        del admin.available_rooms[index]
        self.audit_log.append(
            f"Raum {room.room_number} entfernt von Admin {admin.username}"
        )
        return Outcome.success(f"Raum {room.room_number} wurde entfernt.")

    def view_logs(self, admin: User) -> Outcome:
        """Gesamtes Audit-Log in Einfügereihenfolge (in ``outcome.entries``)."""
        if not admin.role.can_view_logs:
            return _denied(admin, "Logs einsehen")
        entries = tuple(self.audit_log.entries())
        return Outcome.success(f"{len(entries)} Log-Einträge", entries=entries)

    # ─── Manager ───

    def manager_add_room(self, manager: User, room: Room, admin: User) -> Outcome:
        """Reicht das Hinzufügen an ``admin`` weiter."""
        if not manager.role.can_manage_rooms:
            return _denied(manager, f"Raum {room.room_number} hinzufügen")
        return self.add_room(admin, room)

    def manager_remove_room(self, manager: User, room: Room, admin: User) -> Outcome:
        """Reicht das Entfernen an ``admin`` weiter."""
        if not manager.role.can_manage_rooms:
            return _denied(manager, f"Raum {room.room_number} entfernen")
        return self.remove_room(admin, room)

    def add_schedule(self, actor: User, room: Room, schedule: RoomSchedule) -> Outcome:
        """Hängt eine Belegungszeit direkt an den Raum (ohne Admin)."""
        if not actor.role.can_manage_schedules:
            return _denied(actor, f"Belegungszeit für Raum {room.room_number} anlegen")
        if not schedule.window.is_valid:
            return Outcome.failure(
                ErrorKind.INVALID_TIME_RANGE,
                f"Ungültige Belegungszeit {schedule.window}: Ende muss nach "
                f"Beginn liegen.",
            )
        room.add_schedule(schedule)
        return Outcome.success(
            f"Belegungszeit für Raum {room.room_number} hinzugefügt: "
            f"{schedule.window}"
        )


def scan_qr_code(user: User) -> Outcome:
    """Beitritts-Benachrichtigung, ohne Zustandsänderung."""
    message = f"{user.username} hat einen QR-Code gescannt, um einem Raum beizutreten."
    logger.info(message)
    return Outcome.success(message)
