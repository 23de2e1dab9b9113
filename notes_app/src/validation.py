"""
Validierung und Parsing von Benutzereingaben.

Zweck:
    Die Oberfläche nimmt Eingaben als Strings entgegen. Dieses Modul prüft Notiz-Felder
    und wandelt IDs/Indizes in passende Python-Typen um, damit keine ungültigen Daten in
    Service/Repository-Schicht gelangen.

Hinweise:
    `NoteStore` ruft `validate_note_fields` selbst auf; die UI muss die Prüfung also
    nicht wiederholen, kann aber `ValidationError` für eine Meldung abfangen.
"""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """
    Fehlerklasse für ungültige Benutzereingaben.

    Zweck:
        Wird in der UI abgefangen, um eine verständliche Fehlermeldung anzuzeigen
        (z. B. „Titel und Inhalt dürfen nicht leer sein“), ohne einen Traceback zu zeigen.
    """


def require_text(value: Any, *, field: str) -> str:
    """
    Prüft, ob ein Pflicht-Text gesetzt ist.

    Parameter:
        value (Any): Zu prüfender Wert.
        field (str): Feldname für die Fehlermeldung.

    Rückgabe:
        str: Der unveränderte Text (Leerzeichen bleiben erhalten).

    Ausnahmen:
        ValidationError: Wenn `value` kein String oder leer/whitespace ist.
    """

    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} darf nicht leer sein")
    return value


def validate_note_fields(title: Any, content: Any) -> tuple[str, str]:
    """
    Validiert Titel und Inhalt einer Notiz vor dem Speichern.

    Parameter:
        title (Any): Titel aus dem Eingabefeld.
        content (Any): Inhalt aus dem Eingabefeld.

    Rückgabe:
        tuple[str, str]: (title, content), unverändert.

    Ausnahmen:
        ValidationError: Wenn eines der Felder leer ist.
    """

    return require_text(title, field="title"), require_text(content, field="content")


def parse_note_id(text: Any) -> int:
    """
    Parst eine Notiz-ID (z. B. aus einem Navigationsparameter).

    Parameter:
        text (Any): Eingabe, typischerweise ein String wie "12".

    Rückgabe:
        int: Positive Ganzzahl.

    Ausnahmen:
        ValidationError: Bei nicht numerischer Eingabe oder Wert < 1.
    """

    if isinstance(text, bool):
        raise ValidationError("note_id muss eine ganze Zahl sein")
    try:
        v = int(str(text).strip())
    except ValueError as exc:
        raise ValidationError("note_id muss eine ganze Zahl sein") from exc
    if v < 1:
        raise ValidationError("note_id muss >= 1 sein")
    return v


def validate_option_index(index: Any, option_count: int) -> int:
    """
    Prüft einen Options-Index für die aktuelle Quizfrage.

    Parameter:
        index (Any): Gewählter Index.
        option_count (int): Anzahl Antwortmöglichkeiten.

    Rückgabe:
        int: Der geprüfte Index.

    Ausnahmen:
        ValidationError: Wenn der Index kein int ist oder außerhalb von 0..option_count-1 liegt.
    """

    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError("option_index muss eine ganze Zahl sein")
    if not (0 <= index < option_count):
        raise ValidationError(f"option_index muss zwischen 0 und {option_count - 1} liegen")
    return index


def require_note_id(note_id: Any) -> int:
    """
    Prüft, ob eine an den Store übergebene ID eine echte Ganzzahl ist.

    Ausnahmen:
        ValidationError: Bei `bool` oder Nicht-`int` (z. B. "1" oder 1.0).

    Hinweise:
        Unbekannte IDs sind kein Fehler; sie führen in `update`/`delete` zu 0 Zeilen.
    """

    if isinstance(note_id, bool) or not isinstance(note_id, int):
        raise ValidationError("note_id muss eine ganze Zahl sein")
    return note_id
