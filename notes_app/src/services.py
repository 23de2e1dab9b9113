from __future__ import annotations

# -----------------------------------------------------------------------------
# Service-Schicht (Anwendungsfälle Notizen)
# -----------------------------------------------------------------------------
# Diese Schicht kapselt die Anwendungsfälle rund um Notizen und stellt eine stabile API
# für die (externe) UI bereit.
#
# Architektur-Regel:
# - UI spricht nur mit Services.
# - Services prüfen Eingaben und nutzen Repositories.
# - Repositories kapseln SQL und nutzen `DatabaseProtocol` für den DB-Zugriff.
#
# `NoteStore.bootstrap()` fungiert als „Composition Root“: Dort werden DB-Verbindung
# und Schema initialisiert. Die einbettende Anwendung ruft es einmal beim Start auf.
# -----------------------------------------------------------------------------


"""Service-Schicht für Notizen.

Zweck:
    Kapselt Anlegen, Auflisten, Bearbeiten und Löschen von Notizen.
    Die UI ruft ausschließlich Methoden dieser Schicht auf.

Architektur:
    - UI → NoteStore → NoteRepository → Datenbank

Hinweise:
    Nicht gefundene IDs sind kein Fehler: `update`/`delete` liefern dann 0.
"""

import logging
import os
from typing import Optional

from notes_app.src.db import connect, create_schema
from notes_app.src.db_protocol import DatabaseProtocol
from notes_app.src.models import Note
from notes_app.src.repositories import NoteRepository
from notes_app.src.validation import require_note_id, validate_note_fields

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Fassade für alle Anwendungsfälle rund um Notizen.

    Zweck:
        Stellt eine stabile API für die UI bereit. Die UI kennt nur diese Klasse und
        greift weder direkt auf das Repository noch auf SQL zu.

    Hinweise:
        - `bootstrap()` erzeugt DB + Repository (Composition Root).
        - CRUD-Methoden prüfen Eingaben und delegieren an das Repository.
        - Nur für einen Prozess mit einem Schreiber ausgelegt; es gibt keine Sperren.
    """

    def __init__(self, db: DatabaseProtocol, note_repo: NoteRepository, *, owns_db: bool = False) -> None:
        """
        Initialisiert den Service.

        Parameter:
            db (DatabaseProtocol): Datenbank-Adapter.
            note_repo (NoteRepository): Zugriff auf die Tabelle `notes`.
            owns_db (bool): Wenn True, wird die DB bei `close()` geschlossen.
        """

        self._db = db
        self._owns_db = owns_db
        self.note_repo = note_repo

    # -----------------------------
    # Factory helpers
    # -----------------------------
    @classmethod
    def from_db(cls, db: DatabaseProtocol, *, owns_db: bool = False) -> "NoteStore":
        """
        Erzeugt einen Store für ein bereits existierendes DB-Objekt.

        Parameter:
            db (DatabaseProtocol): Geöffnete Datenbank (Schema muss existieren).
            owns_db (bool): Ob der Store die DB später selbst schließen soll.

        Rückgabe:
            NoteStore: Fertig konfigurierter Store.
        """

        return cls(db=db, note_repo=NoteRepository(db), owns_db=owns_db)

    @classmethod
    def bootstrap(
        cls,
        *,
        db_path: Optional[str | os.PathLike[str]] = None,
        reset_db: bool = False,
    ) -> "NoteStore":
        """
        Bootstrapt den Store (DB öffnen + Schema anlegen).

        Parameter:
            db_path (str | PathLike | None): Optionaler Pfad zur SQLite-Datei.
            reset_db (bool): Wenn True, werden alle Notizen vor dem Anlegen gelöscht (Demo/Test).

        Rückgabe:
            NoteStore: Fertig konfigurierter Store.

        Ausnahmen:
            StorageUnavailable: Wenn die Datenbank nicht geöffnet/initialisiert werden kann.
        """

        db = connect(db_path)
        try:
            create_schema(db, reset_db=reset_db)
        except Exception:
            db.close()
            raise
        return cls.from_db(db, owns_db=True)

    def close(self) -> None:
        """
        Schließt die DB-Verbindung (nur wenn der Store sie besitzt).
        """

        if self._owns_db:
            self._db.close()

    def __enter__(self) -> "NoteStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -----------------------------
    # Note CRUD
    # -----------------------------
    def create(self, title: str, content: str) -> int:
        """
        Legt eine neue Notiz an (CRUD: Create).

        Parameter:
            title (str): Titel (nicht leer).
            content (str): Inhalt (nicht leer).

        Rückgabe:
            int: Neue, streng steigende `id`.

        Ausnahmen:
            ValidationError: Wenn Titel oder Inhalt leer sind.
        """

        title, content = validate_note_fields(title, content)
        note_id = self.note_repo.create(title, content)
        logger.info("Notiz %s angelegt", note_id)
        return note_id

    def list(self) -> list[Note]:
        """
        Liefert alle Notizen, neueste zuerst (CRUD: Read).

        Rückgabe:
            list[Note]: Bei jedem Aufruf frisch aus der DB gelesen.
        """

        return self.note_repo.list_all()

    def get(self, note_id: int) -> Optional[Note]:
        """
        Lädt eine einzelne Notiz, z. B. für die Bearbeitungsansicht.

        Parameter:
            note_id (int): Primärschlüssel.

        Rückgabe:
            Note | None: Notiz oder `None`.
        """

        note_id = require_note_id(note_id)
        return self.note_repo.get_by_id(note_id)

    def count(self) -> int:
        return self.note_repo.count()

    def update(self, note_id: int, title: str, content: str) -> int:
        """
        Aktualisiert Titel und Inhalt einer Notiz (CRUD: Update).

        Parameter:
            note_id (int): Primärschlüssel.
            title (str): Neuer Titel (nicht leer).
            content (str): Neuer Inhalt (nicht leer).

        Rückgabe:
            int: 1 bei Erfolg, 0 wenn keine Notiz mit `note_id` existiert.

        Ausnahmen:
            ValidationError: Wenn Titel oder Inhalt leer sind oder `note_id` keine Ganzzahl ist.
        """

        note_id = require_note_id(note_id)
        title, content = validate_note_fields(title, content)
        affected = self.note_repo.update(note_id, title, content)
        if affected:
            logger.info("Notiz %s aktualisiert", note_id)
        else:
            logger.warning("Notiz %s nicht gefunden (update)", note_id)
        return affected

    def delete(self, note_id: int) -> int:
        """
        Löscht eine Notiz (CRUD: Delete).

        Parameter:
            note_id (int): Primärschlüssel.

        Rückgabe:
            int: 1 bei Erfolg, 0 wenn keine Notiz mit `note_id` existiert.

        Ausnahmen:
            ValidationError: Wenn `note_id` keine Ganzzahl ist.
        """

        note_id = require_note_id(note_id)
        affected = self.note_repo.delete(note_id)
        if affected:
            logger.info("Notiz %s gelöscht", note_id)
        else:
            logger.warning("Notiz %s nicht gefunden (delete)", note_id)
        return affected
