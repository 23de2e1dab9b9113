"""Tests für die SQLite-Infrastruktur (Schema, Versionen, Fehlerabbildung)."""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Sequence

import pytest

from notes_app.src.db import SCHEMA_VERSION, StorageUnavailable, connect, create_schema
from notes_app.src.repositories import NoteRepository
from notes_app.src.services import NoteStore


def _columns(path: Path) -> list[tuple[str, str, int, int]]:
    conn = sqlite3.connect(path)
    try:
        rows = conn.execute("PRAGMA table_info(notes)").fetchall()
    finally:
        conn.close()
    # (name, type, notnull, pk)
    return [(r[1], r[2], r[3], r[5]) for r in rows]


def test_schema_matches_notes_table(db_path: Path) -> None:
    NoteStore.bootstrap(db_path=db_path).close()

    assert _columns(db_path) == [
        ("id", "INTEGER", 0, 1),
        ("title", "TEXT", 1, 0),
        ("content", "TEXT", 1, 0),
    ]


def test_fresh_database_is_stamped_with_schema_version(db_path: Path) -> None:
    db = connect(db_path)
    try:
        create_schema(db)
        assert db.execute("PRAGMA user_version").fetchone()[0] == SCHEMA_VERSION
    finally:
        db.close()


def test_create_schema_is_idempotent_and_keeps_data(db_path: Path) -> None:
    db = connect(db_path)
    try:
        create_schema(db)
        NoteRepository(db).create("A", "a")
        create_schema(db)
        assert NoteRepository(db).count() == 1
    finally:
        db.close()


def test_newer_schema_version_is_rejected(db_path: Path) -> None:
    conn = sqlite3.connect(db_path)
    conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION + 1}")
    conn.commit()
    conn.close()

    with pytest.raises(StorageUnavailable):
        NoteStore.bootstrap(db_path=db_path)


def test_unopenable_path_raises_storage_unavailable(tmp_path: Path) -> None:
    missing_dir = tmp_path / "gibt-es-nicht" / "notes.db"

    with pytest.raises(StorageUnavailable) as info:
        NoteStore.bootstrap(db_path=missing_dir)
    assert isinstance(info.value.__cause__, sqlite3.Error)


def test_corrupted_file_raises_storage_unavailable(db_path: Path) -> None:
    db_path.write_bytes(b"das ist keine sqlite-datei " * 100)

    with pytest.raises(StorageUnavailable) as info:
        NoteStore.bootstrap(db_path=db_path)
    assert isinstance(info.value.__cause__, sqlite3.DatabaseError)


def test_statement_on_missing_table_raises_storage_unavailable(db_path: Path) -> None:
    db = connect(db_path)
    try:
        with pytest.raises(StorageUnavailable):
            NoteRepository(db).list_all()
    finally:
        db.close()


def test_db_path_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "env.db"
    monkeypatch.setenv("NOTES_APP_DB_PATH", str(target))

    with NoteStore.bootstrap() as s:
        s.create("Env", "Pfad")

    assert target.exists()


class _NoLastRowIdCursor:
    def __init__(self, inner: Any) -> None:
        self._inner = inner
        self.lastrowid = None
        self.rowcount = inner.rowcount

    def fetchone(self) -> Any:
        return self._inner.fetchone()

    def fetchall(self) -> list[Any]:
        return self._inner.fetchall()


class _NoLastRowIdDatabase:
    """Adapter, dessen Cursor nach INSERT kein `lastrowid` liefert."""

    def __init__(self, inner: Any) -> None:
        self._inner = inner

    def execute(self, sql: str, params: Sequence[Any] = ()) -> Any:
        cursor = self._inner.execute(sql, params)
        if sql.lstrip().upper().startswith("INSERT"):
            return _NoLastRowIdCursor(cursor)
        return cursor

    def executescript(self, sql_script: str) -> None:
        self._inner.executescript(sql_script)

    def commit(self) -> None:
        self._inner.commit()

    def rollback(self) -> None:
        self._inner.rollback()

    def close(self) -> None:
        self._inner.close()


def test_create_falls_back_to_last_insert_rowid(db_path: Path) -> None:
    inner = connect(db_path)
    create_schema(inner)
    store = NoteStore.from_db(_NoLastRowIdDatabase(inner), owns_db=True)
    try:
        assert store.create("A", "a") == 1
        assert store.create("B", "b") == 2
    finally:
        store.close()


def test_integrity_error_passes_through_execute(db_path: Path) -> None:
    db = connect(db_path)
    try:
        create_schema(db)
        with pytest.raises(sqlite3.IntegrityError):
            NoteRepository(db).create(None, "x")  # type: ignore[arg-type]
    finally:
        db.close()


def test_integrity_error_passes_through_executescript(db_path: Path) -> None:
    db = connect(db_path)
    try:
        create_schema(db)
        with pytest.raises(sqlite3.IntegrityError):
            db.executescript("INSERT INTO notes(title, content) VALUES (NULL, 'x');")
        assert NoteRepository(db).count() == 0
    finally:
        db.close()
