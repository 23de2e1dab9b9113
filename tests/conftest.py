from __future__ import annotations

from pathlib import Path

import pytest

from notes_app.src.quiz import QuizEngine
from notes_app.src.services import NoteStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Pfad zu einer frischen SQLite-Datei pro Test."""
    return tmp_path / "notes.db"


@pytest.fixture
def store(db_path: Path):
    """Gebootstrapter NoteStore auf einer leeren Datenbank."""
    s = NoteStore.bootstrap(db_path=db_path)
    yield s
    s.close()


@pytest.fixture
def engine() -> QuizEngine:
    return QuizEngine()
