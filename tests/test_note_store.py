"""Tests für NoteStore (CRUD auf der Tabelle `notes`)."""
from __future__ import annotations

import pytest

from notes_app.src.models import Note
from notes_app.src.services import NoteStore
from notes_app.src.validation import ValidationError


def test_groceries_todo_scenario(store: NoteStore) -> None:
    assert store.create("Groceries", "Milk, eggs") == 1
    assert store.create("Todo", "Call Bob") == 2

    assert store.list() == [
        Note(note_id=2, title="Todo", content="Call Bob"),
        Note(note_id=1, title="Groceries", content="Milk, eggs"),
    ]

    assert store.delete(1) == 1
    assert store.list() == [Note(note_id=2, title="Todo", content="Call Bob")]


def test_create_returns_fresh_id_visible_in_list(store: NoteStore) -> None:
    existing = {store.create(f"t{i}", f"c{i}") for i in range(3)}
    new_id = store.create("Neu", "Inhalt")

    assert new_id not in existing
    assert Note(note_id=new_id, title="Neu", content="Inhalt") in store.list()


def test_list_is_strictly_descending_by_id(store: NoteStore) -> None:
    for i in range(5):
        store.create(f"Titel {i}", f"Inhalt {i}")

    ids = [n.note_id for n in store.list()]
    assert ids == sorted(ids, reverse=True)
    assert len(set(ids)) == len(ids)


def test_list_returns_fresh_list_each_call(store: NoteStore) -> None:
    store.create("a", "b")
    first = store.list()
    first.clear()

    assert len(store.list()) == 1


def test_ids_are_never_reused_after_delete(store: NoteStore) -> None:
    store.create("a", "1")
    second = store.create("b", "2")
    store.delete(second)

    assert store.create("c", "3") == second + 1


def test_update_changes_only_target_note(store: NoteStore) -> None:
    a = store.create("A", "alt")
    b = store.create("B", "bleibt")

    assert store.update(a, "A2", "neu") == 1

    assert store.get(a) == Note(note_id=a, title="A2", content="neu")
    assert store.get(b) == Note(note_id=b, title="B", content="bleibt")


def test_update_unknown_id_reports_zero_and_does_not_upsert(store: NoteStore) -> None:
    store.create("A", "a")
    before = store.list()

    assert store.update(999, "X", "Y") == 0
    assert store.list() == before
    assert store.get(999) is None


def test_delete_unknown_id_reports_zero(store: NoteStore) -> None:
    store.create("A", "a")

    assert store.delete(42) == 0
    assert store.count() == 1


def test_delete_twice_is_idempotent(store: NoteStore) -> None:
    note_id = store.create("A", "a")

    assert store.delete(note_id) == 1
    assert store.delete(note_id) == 0
    assert store.list() == []


@pytest.mark.parametrize(
    "title, content",
    [("", "Inhalt"), ("Titel", ""), ("   ", "Inhalt"), ("Titel", "\n\t"), (None, "Inhalt")],
)
def test_create_rejects_empty_fields(store: NoteStore, title, content) -> None:
    with pytest.raises(ValidationError):
        store.create(title, content)
    assert store.count() == 0


def test_update_rejects_empty_fields_and_keeps_note(store: NoteStore) -> None:
    note_id = store.create("Titel", "Inhalt")

    with pytest.raises(ValidationError):
        store.update(note_id, "", "neu")
    assert store.get(note_id) == Note(note_id=note_id, title="Titel", content="Inhalt")


def test_text_is_stored_unchanged(store: NoteStore) -> None:
    note_id = store.create("  Titel ", "Zeile 1\nZeile 2 ")

    assert store.get(note_id) == Note(note_id=note_id, title="  Titel ", content="Zeile 1\nZeile 2 ")


def test_notes_persist_across_reopen(db_path) -> None:
    with NoteStore.bootstrap(db_path=db_path) as s:
        s.create("Bleibt", "erhalten")

    with NoteStore.bootstrap(db_path=db_path) as s:
        assert [n.title for n in s.list()] == ["Bleibt"]


def test_reset_db_discards_notes(db_path) -> None:
    with NoteStore.bootstrap(db_path=db_path) as s:
        s.create("Weg", "damit")

    with NoteStore.bootstrap(db_path=db_path, reset_db=True) as s:
        assert s.list() == []
        assert s.create("Neu", "Start") == 1


@pytest.mark.parametrize("bad_id", [True, False, "1", 1.0, None])
def test_non_integer_ids_are_rejected(store: NoteStore, bad_id) -> None:
    note_id = store.create("Titel", "Inhalt")

    with pytest.raises(ValidationError):
        store.update(bad_id, "X", "Y")
    with pytest.raises(ValidationError):
        store.delete(bad_id)
    with pytest.raises(ValidationError):
        store.get(bad_id)

    assert store.get(note_id) == Note(note_id=note_id, title="Titel", content="Inhalt")
