from __future__ import annotations

# -----------------------------------------------------------------------------
# Infrastructure: SQLite DB
# -----------------------------------------------------------------------------
# Enthält:
# - SQLiteDatabase: dünner Adapter um sqlite3.Connection (für DatabaseProtocol)
# - connect(): öffnet DB (Default-Pfad aus `config.load_settings()`)
# - create_schema(): legt die Tabelle `notes` an (optional reset_db für Demo/Test)
# - StorageUnavailable: einheitlicher Fehler für nicht erreichbare/defekte DB
#
# Repositories typisieren gegen `DatabaseProtocol` (typing.Protocol), nicht gegen sqlite3.
# -----------------------------------------------------------------------------


"""SQLite-Infrastruktur.

Zweck:
    Stellt die konkrete SQLite-Implementierung bereit, die vom Notiz-Kern genutzt wird.
    Repository und Service typisieren dabei gegen `DatabaseProtocol` (siehe `db_protocol.py`).

Inhalt:
    - SQLiteDatabase: Adapter um `sqlite3.Connection` passend zu `DatabaseProtocol`
    - connect(): Öffnet die Datenbank (Default-Pfad aus der Konfiguration)
    - create_schema(): Legt Tabelle an, prüft die Schema-Version (optional: Reset)

Hinweise:
    Fehler von `sqlite3` (Datei nicht lesbar, keine Schreibrechte, keine SQLite-Datei)
    werden als `StorageUnavailable` weitergereicht. `sqlite3.IntegrityError` bleibt
    unverändert, da es sich um einen Programmierfehler und nicht um Speicherausfall handelt.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Any, Optional, Sequence

from notes_app.src.config import load_settings
from notes_app.src.db_protocol import DatabaseProtocol

__all__ = [
    "DatabaseProtocol",
    "SCHEMA_VERSION",
    "SQLiteDatabase",
    "StorageUnavailable",
    "connect",
    "create_schema",
]

logger = logging.getLogger(__name__)

# Wird in `PRAGMA user_version` abgelegt.
SCHEMA_VERSION = 1


class StorageUnavailable(RuntimeError):
    """
    Fehlerklasse für eine nicht nutzbare Datenbank.

    Zweck:
        Signalisiert, dass die aktuelle Operation wegen eines Speicherproblems
        (Datei/Rechte/Format/Schema-Version) abgebrochen wurde. Die aufrufende
        Anwendung kann diesen Fehler abfangen, statt abzustürzen.
    """


class SQLiteDatabase:
    """
    SQLite-Adapter passend zu `DatabaseProtocol`.

    Zweck:
        Kapselt eine `sqlite3.Connection` und bietet nur die Methoden an, die in
        Repository-/Service-Schicht benötigt werden.

    Hinweise:
        Schlägt ein Statement fehl, wird die offene Transaktion zurückgesetzt und ein
        `StorageUnavailable` mit verketteter Ursache ausgelöst.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        """
        Initialisiert den Datenbank-Adapter.

        Parameter:
            conn (sqlite3.Connection): Offene Datenbankverbindung.
        """

        self._conn = conn

    # --- DatabaseProtocol ---
    def execute(self, sql: str, params: Sequence[Any] = ()) -> Any:
        """
        Führt ein einzelnes SQL-Statement aus.

        Zweck:
            Zentrale Ausführungsfunktion für das Repository (SELECT/INSERT/UPDATE/DELETE).

        Parameter:
            sql (str): SQL-Statement (ggf. mit Platzhaltern `?`).
            params (Sequence[Any]): Parameterwerte für die Platzhalter.

        Rückgabe:
            Any: Cursor-ähnliches Objekt (bei sqlite3: `sqlite3.Cursor`).

        Ausnahmen:
            StorageUnavailable: Wenn SQLite das Statement nicht ausführen kann.
        """

        try:
            return self._conn.execute(sql, params)
        except sqlite3.IntegrityError:
            raise
        except sqlite3.DatabaseError as exc:
            self._safe_rollback()
            raise StorageUnavailable(f"Datenbankzugriff fehlgeschlagen: {exc}") from exc

    def executescript(self, sql_script: str) -> None:
        """
        Führt ein SQL-Skript (mehrere Statements) aus.

        Zweck:
            Wird zum Anlegen/Zurücksetzen des Schemas genutzt.

        Parameter:
            sql_script (str): Mehrzeiliges SQL-Skript.
        """

        try:
            self._conn.executescript(sql_script)
        except sqlite3.IntegrityError:
            raise
        except sqlite3.DatabaseError as exc:
            self._safe_rollback()
            raise StorageUnavailable(f"Schema-Skript fehlgeschlagen: {exc}") from exc

    def commit(self) -> None:
        """
        Bestätigt die aktuelle Transaktion (COMMIT).
        """

        try:
            self._conn.commit()
        except sqlite3.DatabaseError as exc:
            self._safe_rollback()
            raise StorageUnavailable(f"COMMIT fehlgeschlagen: {exc}") from exc

    def rollback(self) -> None:
        """
        Setzt die aktuelle Transaktion zurück (ROLLBACK).
        """

        self._conn.rollback()

    def close(self) -> None:
        """
        Schließt die Datenbankverbindung.

        Hinweise:
            Das kontrollierte Schließen übernimmt `NoteStore.close`.
        """

        self._conn.close()

    def _safe_rollback(self) -> None:
        # Nach einem Fehler ist die Verbindung evtl. selbst defekt; der ursprüngliche Fehler hat Vorrang.
        try:
            self._conn.rollback()
        except sqlite3.Error:
            logger.debug("Rollback nach Fehler nicht möglich", exc_info=True)


def connect(db_path: Optional[str | os.PathLike[str]] = None) -> SQLiteDatabase:
    """
    Öffnet eine SQLite-Verbindung und gibt einen `SQLiteDatabase`-Adapter zurück.

    Zweck:
        Erstellt eine Verbindung zur Datenbankdatei und setzt `row_factory` auf
        `sqlite3.Row`, damit das Repository spaltenbasiert zugreifen kann.

    Parameter:
        db_path (str | PathLike | None): Optionaler Pfad; ohne Angabe aus `NOTES_APP_DB_PATH`
            bzw. dem Standardpfad.

    Rückgabe:
        SQLiteDatabase: Adapter-Objekt, das `DatabaseProtocol` erfüllt.

    Ausnahmen:
        StorageUnavailable: Wenn die Datei nicht geöffnet werden kann.
    """

    path = Path(db_path) if db_path is not None else load_settings().db_path
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise StorageUnavailable(f"Datenbank {path} kann nicht geöffnet werden: {exc}") from exc
    conn.row_factory = sqlite3.Row
    logger.debug("Datenbank geöffnet: %s", path)
    return SQLiteDatabase(conn)


def _user_version(db: DatabaseProtocol) -> int:
    row = db.execute("PRAGMA user_version").fetchone()
    return int(row[0]) if row else 0


def create_schema(db: DatabaseProtocol, reset_db: bool = False) -> None:
    """
    Legt das Datenbankschema an bzw. prüft die vorhandene Schema-Version.

    Zweck:
        Erstellt die Tabelle `notes`, falls sie fehlt, und stempelt die aktuelle
        `SCHEMA_VERSION` in `PRAGMA user_version`.

    Parameter:
        db (DatabaseProtocol): Datenbank-Adapter.
        reset_db (bool): Wenn True, wird die Tabelle vorher gelöscht (alle Notizen gehen verloren).

    Ausnahmen:
        StorageUnavailable: Wenn die Datei eine neuere Schema-Version trägt als dieser Code.

    Hinweise:
        Ein Versionswechsel löscht keine Daten. Das Verwerfen der Tabelle passiert nur
        über `reset_db=True` (Demo/Test).
    """

    if reset_db:
        logger.warning("reset_db=True: Tabelle 'notes' wird gelöscht")
        db.executescript("DROP TABLE IF EXISTS notes;")
        db.execute("PRAGMA user_version = 0")

    version = _user_version(db)
    if version > SCHEMA_VERSION:
        raise StorageUnavailable(
            f"Schema-Version {version} ist neuer als unterstützt ({SCHEMA_VERSION})"
        )

    db.executescript(
        """
        CREATE TABLE IF NOT EXISTS notes(
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            content TEXT NOT NULL
        );
        """
    )
    if version < SCHEMA_VERSION:
        logger.debug("Schema-Version %s -> %s", version, SCHEMA_VERSION)
        db.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
    db.commit()
