from __future__ import annotations

# -----------------------------------------------------------------------------
# Repository layer (Persistence)
# -----------------------------------------------------------------------------
# Das Repository kapselt *sämtliche* SQL-Zugriffe auf die Tabelle `notes` und stellt
# CRUD-Operationen bereit. Es enthält keine GUI-Logik und keine Eingabeprüfung.
#
# Abhängigkeiten:
# - Das Repository kennt nur `DatabaseProtocol` (ein kleines Interface/Protocol).
# - `NoteStore` (services.py) validiert Eingaben und verwendet das Repository.
# -----------------------------------------------------------------------------


from typing import Any, Optional

from notes_app.src.db import DatabaseProtocol
from notes_app.src.models import Note


def _to_note(r: Any) -> Note:
    return Note(note_id=int(r["id"]), title=str(r["title"]), content=str(r["content"]))


class NoteRepository:
    """
    Repository für `Note` (Persistenzzugriff).

    Zweck:
        Kapselt SQL-Zugriffe auf die Tabelle `notes` (Anlegen, Laden, Aktualisieren, Löschen).

    Hinweise:
        Jede schreibende Operation ist ein einzelnes Statement und wird sofort committet.
        UPDATE/DELETE liefern die Anzahl betroffener Zeilen; 0 bedeutet „ID nicht vorhanden“.
    """

    def __init__(self, db: DatabaseProtocol) -> None:
        """
        Initialisiert das Repository.

        Parameter:
            db (DatabaseProtocol): Datenbank-Adapter, über den alle SQL-Zugriffe laufen.
        """

        self.db = db

    def create(self, title: str, content: str) -> int:
        """
        Legt eine neue Notiz an (INSERT).

        Parameter:
            title (str): Titel.
            content (str): Inhalt.

        Rückgabe:
            int: Primärschlüssel `id` der neu angelegten Notiz.
        """

        cursor = self.db.execute(
            "INSERT INTO notes(title, content) VALUES (?, ?)",
            (title, content),
        )
        self.db.commit()

        # Nach INSERT ist `lastrowid` i. d. R. gesetzt. Falls nicht, nutzen wir SQLite-Fallback.
        if getattr(cursor, "lastrowid", None):
            return int(cursor.lastrowid)

        cursor = self.db.execute("SELECT last_insert_rowid() AS id")
        row = cursor.fetchone()
        return int(row["id"])

    def get_by_id(self, note_id: int) -> Optional[Note]:
        """
        Lädt eine Notiz anhand ihrer ID.

        Parameter:
            note_id (int): Primärschlüssel.

        Rückgabe:
            Note | None: Notiz oder `None`.
        """

        cursor = self.db.execute(
            "SELECT id, title, content FROM notes WHERE id=?",
            (note_id,),
        )
        r = cursor.fetchone()
        if not r:
            return None
        return _to_note(r)

    def list_all(self) -> list[Note]:
        """
        Liefert alle Notizen, neueste zuerst (`ORDER BY id DESC`).

        Rückgabe:
            list[Note]: Vollständig geladene Liste (bei jedem Aufruf neu gelesen).
        """

        cursor = self.db.execute("SELECT id, title, content FROM notes ORDER BY id DESC")
        return [_to_note(r) for r in cursor.fetchall()]

    def count(self) -> int:
        cursor = self.db.execute("SELECT COUNT(*) AS n FROM notes")
        row = cursor.fetchone()
        return int(row["n"])

    def update(self, note_id: int, title: str, content: str) -> int:
        """
        Aktualisiert Titel und Inhalt einer bestehenden Notiz.

        Parameter:
            note_id (int): Primärschlüssel.
            title (str): Neuer Titel.
            content (str): Neuer Inhalt.

        Rückgabe:
            int: Anzahl geänderter Zeilen (0 oder 1). Es wird nie eine Notiz neu angelegt.
        """

        cursor = self.db.execute(
            "UPDATE notes SET title=?, content=? WHERE id=?",
            (title, content, note_id),
        )
        self.db.commit()
        return int(cursor.rowcount)

    def delete(self, note_id: int) -> int:
        """
        Löscht eine Notiz.

        Parameter:
            note_id (int): Primärschlüssel.

        Rückgabe:
            int: Anzahl gelöschter Zeilen (0 oder 1).
        """

        cursor = self.db.execute("DELETE FROM notes WHERE id=?", (note_id,))
        self.db.commit()
        return int(cursor.rowcount)
