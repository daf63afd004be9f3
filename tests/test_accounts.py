"""Tests für Audit-Log, Nutzerverzeichnis und rollenabhängige Operationen."""

from datetime import datetime

import pytest

from accounts.audit_log import AuditLog
from accounts.directory import Directory
from accounts.roles import RoomAdministration, scan_qr_code
from booking.outcome import ErrorKind
from models.room import Room, RoomSchedule
from models.user import Admin, Manager, Role, User


@pytest.fixture
def audit_log() -> AuditLog:
    return AuditLog()


@pytest.fixture
def directory(audit_log) -> Directory:
    return Directory(audit_log)


@pytest.fixture
def admin_ops(audit_log) -> RoomAdministration:
    return RoomAdministration(audit_log)


# ─── AUDIT-LOG ────────────────────────────────────────────────────────────────

class TestAuditLog:
    def test_append_keeps_order(self, audit_log):
        audit_log.append("eins")
        audit_log.append("zwei")
        assert audit_log.entries() == ["eins", "zwei"]
        assert list(audit_log) == ["eins", "zwei"]
        assert len(audit_log) == 2

    def test_entries_returns_copy(self, audit_log):
        audit_log.append("eins")
        audit_log.entries().append("manipuliert")
        assert audit_log.entries() == ["eins"]


# ─── VERZEICHNIS ──────────────────────────────────────────────────────────────

class TestDirectory:
    def test_sign_up_creates_role_variant(self, directory):
        assert isinstance(directory.sign_up("u", "pw", Role.USER).user, User)
        assert isinstance(directory.sign_up("m", "pw", Role.MANAGER).user, Manager)
        assert isinstance(directory.sign_up("a", "pw", Role.ADMIN).user, Admin)
        assert directory.get("a").role is Role.ADMIN
        assert len(directory) == 3
        assert "m" in directory

    def test_sign_up_appends_audit_entry(self, directory, audit_log):
        directory.sign_up("admin1", "pw", Role.ADMIN)
        assert audit_log.entries() == ["Admin admin1 hat sich registriert."]

    def test_duplicate_sign_up_keeps_stored_entity(self, directory, audit_log):
        first = directory.sign_up("user1", "original", Role.USER).user
        outcome = directory.sign_up("user1", "anders", Role.ADMIN)

        assert not outcome.ok
        assert outcome.error == ErrorKind.DUPLICATE_USERNAME
        stored = directory.get("user1")
        assert stored is first
        assert stored.role is Role.USER
        assert stored.authenticate("original")
        assert len(audit_log) == 1

    def test_login_success(self, directory, audit_log):
        user = directory.sign_up("user1", "password123").user
        outcome = directory.login("user1", "password123")
        assert outcome.ok
        assert outcome.user is user
        assert audit_log.entries()[-1] == "user1 hat sich angemeldet."

    def test_login_unknown_user(self, directory, audit_log):
        outcome = directory.login("niemand", "pw")
        assert outcome.error == ErrorKind.USER_NOT_FOUND
        assert outcome.user is None
        assert len(audit_log) == 0

    def test_login_wrong_password_is_case_sensitive(self, directory, audit_log):
        directory.sign_up("user1", "Secret")
        outcome = directory.login("user1", "secret")
        assert outcome.error == ErrorKind.INVALID_CREDENTIAL
        assert outcome.user is None
        assert len(audit_log) == 1   # nur die Registrierung


# ─── ADMIN ────────────────────────────────────────────────────────────────────

class TestAdminOperations:
    def test_add_then_remove_logs_once_each(self, admin_ops, audit_log):
        """Hinzufügen + Entfernen = genau ein Eintrag je Aktion; zweites Entfernen loggt nichts."""
        admin = Admin(username="admin1", password="pw")
        room = Room("101")

        assert admin_ops.add_room(admin, room).ok
        assert admin_ops.remove_room(admin, room).ok

        entries = audit_log.entries()
        assert sum("101" in e and "hinzugefügt" in e for e in entries) == 1
        assert sum("101" in e and "entfernt" in e for e in entries) == 1

        again = admin_ops.remove_room(admin, room)
        assert again.error == ErrorKind.ROOM_NOT_REGISTERED
        assert audit_log.entries() == entries

    def test_add_room_is_unconditional(self, admin_ops):
        admin = Admin(username="admin1", password="pw")
        room = Room("101")
        admin_ops.add_room(admin, room)
        admin_ops.add_room(admin, room)
        assert len(admin.available_rooms) == 2

    def test_remove_unknown_room_no_mutation(self, admin_ops, audit_log):
        admin = Admin(username="admin1", password="pw")
        admin_ops.add_room(admin, Room("101"))
        outcome = admin_ops.remove_room(admin, Room("999"))
        assert not outcome
        assert [r.room_number for r in admin.available_rooms] == ["101"]
        assert len(audit_log) == 1

    def test_view_logs_in_insertion_order(self, admin_ops, audit_log, directory):
        directory.sign_up("admin1", "pw", Role.ADMIN)
        admin = directory.login("admin1", "pw").user
        admin_ops.add_room(admin, Room("101"))

        outcome = admin_ops.view_logs(admin)
        assert outcome.ok
        assert list(outcome.entries) == [
            "Admin admin1 hat sich registriert.",
            "admin1 hat sich angemeldet.",
            "Raum 101 hinzugefügt von Admin admin1",
        ]

    def test_view_logs_denied_for_manager(self, admin_ops):
        outcome = admin_ops.view_logs(Manager(username="m", password="pw"))
        assert outcome.error == ErrorKind.PERMISSION_DENIED
        assert outcome.entries == ()

    def test_non_admin_cannot_add_room(self, admin_ops, audit_log):
        user = User(username="u", password="pw")
        outcome = admin_ops.add_room(user, Room("101"))
        assert outcome.error == ErrorKind.PERMISSION_DENIED
        assert len(audit_log) == 0


# ─── MANAGER ──────────────────────────────────────────────────────────────────

class TestManagerOperations:
    def test_add_room_delegates_to_admin(self, admin_ops, audit_log):
        manager = Manager(username="manager1", password="pw")
        admin = Admin(username="admin1", password="pw")
        room = Room("101")

        assert admin_ops.manager_add_room(manager, room, admin).ok
        assert admin.available_rooms == [room]
        assert audit_log.entries() == ["Raum 101 hinzugefügt von Admin admin1"]

        assert admin_ops.manager_remove_room(manager, room, admin).ok
        assert admin.available_rooms == []

    def test_manager_remove_unregistered(self, admin_ops):
        manager = Manager(username="manager1", password="pw")
        admin = Admin(username="admin1", password="pw")
        outcome = admin_ops.manager_remove_room(manager, Room("101"), admin)
        assert outcome.error == ErrorKind.ROOM_NOT_REGISTERED

    def test_delegation_target_must_be_admin(self, admin_ops):
        manager = Manager(username="manager1", password="pw")
        other = Manager(username="manager2", password="pw")
        outcome = admin_ops.manager_add_room(manager, Room("101"), other)
        assert outcome.error == ErrorKind.PERMISSION_DENIED

    def test_plain_user_cannot_delegate(self, admin_ops):
        user = User(username="u", password="pw")
        admin = Admin(username="admin1", password="pw")
        outcome = admin_ops.manager_add_room(user, Room("101"), admin)
        assert outcome.error == ErrorKind.PERMISSION_DENIED
        assert admin.available_rooms == []

    def test_add_schedule_without_admin(self, admin_ops, audit_log):
        """Dokumentierte Asymmetrie: Belegungszeiten brauchen keinen Admin."""
        manager = Manager(username="manager1", password="pw")
        room = Room("101")
        schedule = RoomSchedule(datetime(2024, 5, 1, 8), datetime(2024, 5, 1, 12))

        outcome = admin_ops.add_schedule(manager, room, schedule)

        assert outcome.ok
        assert room.schedules == [schedule]
        assert len(audit_log) == 0

    def test_add_schedule_denied_for_plain_user(self, admin_ops):
        room = Room("101")
        schedule = RoomSchedule(datetime(2024, 5, 1, 8), datetime(2024, 5, 1, 12))
        outcome = admin_ops.add_schedule(User(username="u", password="pw"), room, schedule)
        assert outcome.error == ErrorKind.PERMISSION_DENIED
        assert room.schedules == []

    def test_add_schedule_denied_for_admin(self, admin_ops):
        """Belegungszeiten sind Manager-Sache, auch ein Admin darf sie nicht anlegen."""
        room = Room("101")
        schedule = RoomSchedule(datetime(2024, 5, 1, 8), datetime(2024, 5, 1, 12))
        outcome = admin_ops.add_schedule(Admin(username="a", password="pw"), room, schedule)
        assert outcome.error == ErrorKind.PERMISSION_DENIED
        assert room.schedules == []

    def test_add_schedule_rejects_inverted_window(self, admin_ops):
        room = Room("101")
        schedule = RoomSchedule(datetime(2024, 5, 1, 12), datetime(2024, 5, 1, 8))
        outcome = admin_ops.add_schedule(Manager(username="m", password="pw"), room, schedule)
        assert outcome.error == ErrorKind.INVALID_TIME_RANGE
        assert room.schedules == []


class TestScanQrCode:
    def test_scan_has_no_side_effects(self):
        user = User(username="user1", password="pw")
        outcome = scan_qr_code(user)
        assert outcome.ok
        assert "user1" in outcome.message
        assert user.reservations == []
