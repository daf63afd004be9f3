"""Konten-Modul: Audit-Log, Nutzerverzeichnis und rollenabhängige Operationen."""

from .audit_log import AuditLog
from .directory import Directory
from .roles import RoomAdministration, scan_qr_code

__all__ = [
    "AuditLog",
    "Directory",
    "RoomAdministration",
    "scan_qr_code",
]
