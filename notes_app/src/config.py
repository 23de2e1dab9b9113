"""
Konfiguration aus Umgebungsvariablen bzw. `.env`.

Zweck:
    Liefert den Pfad der Notiz-Datenbank und das Log-Level, ohne dass die Service-Schicht
    Umgebungsvariablen selbst auslesen muss.

Variablen:
    - NOTES_APP_DB_PATH: Pfad zur SQLite-Datei (Default: `notes_app/docs/database/notes.db`)
    - NOTES_APP_LOG_LEVEL: Log-Level-Name, z. B. `INFO` (Default: `WARNING`)

Hinweise:
    Explizit übergebene Argumente (z. B. `NoteStore.bootstrap(db_path=...)`) haben immer
    Vorrang vor Umgebungswerten.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DB_PATH_ENV = "NOTES_APP_DB_PATH"
LOG_LEVEL_ENV = "NOTES_APP_LOG_LEVEL"

DATABASE_NAME = "notes.db"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Laufzeit-Einstellungen des Kerns.

    Attribute:
        db_path (Path): Pfad zur SQLite-Datei.
        log_level (str): Name des Log-Levels.
    """

    db_path: Path
    log_level: str = DEFAULT_LOG_LEVEL


def default_db_path() -> Path:
    """
    Ermittelt den Standardpfad der SQLite-Datenbank.

    Zweck:
        Legt die Datenbank standardmäßig unterhalb des Paketordners `notes_app` an:
        `docs/database/notes.db`.

    Rückgabe:
        Path: Vollständiger Pfad zur Datenbankdatei.

    Hinweise:
        Das Zielverzeichnis wird bei Bedarf automatisch erstellt.
    """

    here = Path(__file__).resolve()
    project_root = here.parents[1]
    db_dir = project_root / "docs" / "database"
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir / DATABASE_NAME


def load_settings(*, dotenv_path: Optional[str | os.PathLike[str]] = None) -> Settings:
    """
    Liest die Einstellungen aus Umgebung und optionaler `.env`-Datei.

    Parameter:
        dotenv_path (str | PathLike | None): Optionaler Pfad zu einer `.env`-Datei.

    Rückgabe:
        Settings: Aufgelöste Einstellungen.
    """

    # Bereits gesetzte Umgebungsvariablen werden von `.env` nicht überschrieben.
    load_dotenv(dotenv_path)

    env_path = os.getenv(DB_PATH_ENV)
    db_path = Path(env_path) if env_path else default_db_path()
    return Settings(db_path=db_path, log_level=_env_log_level())


def _env_log_level() -> str:
    return (os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Richtet ein einfaches Logging für die einbettende Anwendung ein.

    Zweck:
        Der Kern selbst konfiguriert beim Import kein Logging. Anwendungen ohne eigenes
        Logging-Setup können diese Funktion einmal beim Start aufrufen.

    Parameter:
        level (str | None): Log-Level-Name; ohne Angabe aus `NOTES_APP_LOG_LEVEL`.
    """

    if level is None:
        # Nur das Log-Level lesen; der DB-Pfad (und sein Verzeichnis) wird hier nicht gebraucht.
        load_dotenv()
        level = _env_log_level()
    name = level.strip().upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
