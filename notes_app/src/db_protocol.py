"""
Datenbank-Interfaces (Protocols) für Repository- und Service-Schicht.

Zweck:
    Entkoppelt `NoteRepository`/`NoteStore` von der konkreten Datenbank-Implementierung
    (hier: SQLite), indem nur gegen kleine, stabile Interfaces typisiert wird.

Inhalt:
    - CursorProtocol: minimales Cursor-Verhalten (fetchone/fetchall/lastrowid/rowcount)
    - DatabaseProtocol: minimale DB-API (execute/executescript + Transaktionen)

Hinweise:
    Die konkrete Implementierung des Interfaces erfolgt in `db.py` (SQLiteDatabase).
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence


class CursorProtocol(Protocol):
    """
    Cursor-Interface, das vom Notiz-Repository benötigt wird.

    Zweck:
        Beschreibt nur die Cursor-Funktionen, die im Projekt tatsächlich verwendet werden
        (SELECT-Abfragen, `lastrowid` nach INSERT, `rowcount` nach UPDATE/DELETE).
    """

    # sqlite3.Cursor stellt `lastrowid` bereit; bei UPDATE/DELETE ist nur `rowcount` relevant.
    lastrowid: Any
    rowcount: int

    def fetchone(self) -> Any: ...
    def fetchall(self) -> list[Any]: ...


class DatabaseProtocol(Protocol):
    """
    Minimales Datenbank-Interface für Repository und Service.

    Zweck:
        Vereinheitlicht den Zugriff auf die Persistenz (execute/commit/rollback/close),
        ohne die Anwendung an `sqlite3` zu koppeln.
    """

    def execute(self, sql: str, params: Sequence[Any] = ()) -> CursorProtocol: ...
    def executescript(self, sql_script: str) -> None: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
    def close(self) -> None: ...
