"""
Login-Prüfung (austauschbar).

Zweck:
    Die App zeigt vor den Notizen eine Login-Maske. Die eigentliche Prüfung der Zugangsdaten
    läuft über das Interface `CredentialVerifier`, damit die UI keine Zugangsdaten kennt.

Inhalt:
    - CredentialVerifier: Protocol mit `verify(username, password) -> bool`
    - StaticCredentialVerifier: fest hinterlegtes Nutzer/Passwort-Paar
    - login(): Hilfsfunktion für die Login-Maske

Hinweise:
    `StaticCredentialVerifier` ist ein Platzhalter für Entwicklung/Demo und KEIN
    Authentifizierungssystem (keine Nutzerverwaltung, keine Passwort-Hashes, keine Sperren).
"""

from __future__ import annotations

import hmac
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class CredentialVerifier(Protocol):
    """
    Interface zur Prüfung von Zugangsdaten.
    """

    def verify(self, username: str, password: str) -> bool: ...


class StaticCredentialVerifier:
    """
    Prüft gegen genau ein fest hinterlegtes Nutzer/Passwort-Paar.

    Hinweise:
        Sicherheits-Platzhalter: nur für lokale Entwicklung gedacht.
    """

    def __init__(self, username: str = "user", password: str = "password") -> None:
        self._username = username
        self._password = password

    def verify(self, username: str, password: str) -> bool:
        user_ok = hmac.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        pw_ok = hmac.compare_digest(password.encode("utf-8"), self._password.encode("utf-8"))
        return user_ok and pw_ok


def login(verifier: CredentialVerifier, username: str, password: str) -> bool:
    """
    Prüft die Eingaben der Login-Maske.

    Parameter:
        verifier (CredentialVerifier): Konkrete Prüf-Implementierung.
        username (str): Eingegebener Nutzername.
        password (str): Eingegebenes Passwort.

    Rückgabe:
        bool: True bei gültigen Zugangsdaten.

    Hinweise:
        Leere Eingaben werden ohne Aufruf des Verifiers abgelehnt. Das Passwort wird nie geloggt.
    """

    if not username or not password:
        logger.warning("Login abgelehnt: leere Eingabe")
        return False
    if verifier.verify(username, password):
        logger.info("Login erfolgreich für %r", username)
        return True
    logger.warning("Login fehlgeschlagen für %r", username)
    return False
