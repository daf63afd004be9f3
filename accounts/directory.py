"""Nutzerverzeichnis: Registrierung und Anmeldung.

Passwörter werden im Klartext verglichen (exakt, case-sensitiv); es gibt
bewusst kein Hashing.
"""

import logging
import threading
from typing import Optional

from accounts.audit_log import AuditLog
from booking.outcome import ErrorKind, Outcome
from models.user import Role, User, create_account

logger = logging.getLogger(__name__)


class Directory:
    """Abbildung Nutzername → Konto (eindeutige Schlüssel)."""

    def __init__(self, audit_log: AuditLog):
        self.audit_log = audit_log
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def sign_up(self, username: str, password: str, role: Role = Role.USER) -> Outcome:
        """Legt ein Konto mit der zur Rolle passenden Variante an.

        Ist der Name schon vergeben, bleibt das gespeicherte Konto unverändert
        und es wird kein Audit-Eintrag geschrieben.
        """
        role = Role(role)
        with self._lock:
            if username in self._users:
                logger.warning(f"Nutzername {username} ist bereits vergeben.")
                return Outcome.failure(
                    ErrorKind.DUPLICATE_USERNAME,
                    f"Nutzername {username} ist bereits vergeben.",
                )
            user = create_account(username, password, role)
            self._users[username] = user

        message = f"{role.label} {username} hat sich registriert."
        self.audit_log.append(message)
        return Outcome.success(message, user=user)

    def login(self, username: str, password: str) -> Outcome:
        """Meldet einen Nutzer an; bei Erfolg steckt das Konto in ``outcome.user``."""
        user = self.get(username)
        if user is None:
            logger.info(f"Anmeldung fehlgeschlagen: {username} unbekannt")
            return Outcome.failure(ErrorKind.USER_NOT_FOUND, "Nutzer nicht gefunden.")
        if not user.authenticate(password):
            logger.info(f"Anmeldung fehlgeschlagen: falsches Passwort für {username}")
            return Outcome.failure(ErrorKind.INVALID_CREDENTIAL, "Ungültiges Passwort.")

        message = f"{username} hat sich angemeldet."
        self.audit_log.append(message)
        return Outcome.success(message, user=user)

    def get(self, username: str) -> Optional[User]:
        with self._lock:
            return self._users.get(username)

    def __contains__(self, username: str) -> bool:
        return self.get(username) is not None

    def __len__(self) -> int:
        return len(self._users)
