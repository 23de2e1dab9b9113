from __future__ import annotations

# -----------------------------------------------------------------------------
# Domain model (Entities)
# -----------------------------------------------------------------------------
# Diese Datei enthält die fachlichen Kernobjekte (Entities) der App.
#
# Ziel: schlanke, gut testbare Datenklassen (dataclasses).
# - Invarianten / Wertebereiche werden über __post_init__ als Basisschutz geprüft.
# - Eingabeprüfung für Notizen (nicht leer) passiert in `validation.py`.
# - Persistenzdetails (SQL/Row-Objekte) bleiben im Repository.
#
# Hinweis zum Quiz:
# `Question` und `QuizSession` werden nie persistiert. Eine Session ist unveränderlich;
# jeder Übergang liefert über `QuizEngine` eine neue Instanz.
# -----------------------------------------------------------------------------


from dataclasses import dataclass
from typing import Optional

OPTIONS_PER_QUESTION = 4
NO_SELECTION = -1


@dataclass(slots=True)
class Note:
    """
    Eine vom Nutzer verfasste Notiz (Titel + Inhalt).

    Attribute:
        note_id (int | None): Primärschlüssel; `None`, solange die Notiz nicht gespeichert ist.
        title (str): Titel der Notiz.
        content (str): Inhalt der Notiz.

    Hinweise:
        Die Prüfung auf „nicht leer“ erfolgt beim Schreiben im `NoteStore`. Beim Lesen
        werden Zeilen unverändert übernommen.
    """

    note_id: Optional[int]
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class Question:
    """
    Eine Multiple-Choice-Frage des Quiz.

    Attribute:
        text (str): Fragetext.
        options (tuple[str, ...]): Genau vier Antwortmöglichkeiten in fester Reihenfolge.
        correct_answer (int): 0-basierter Index der richtigen Antwort.
    """

    text: str
    options: tuple[str, ...]
    correct_answer: int

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("text darf nicht leer sein")
        # Listen werden zu Tupeln, damit die Frage wirklich unveränderlich ist.
        object.__setattr__(self, "options", tuple(self.options))
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(f"options muss genau {OPTIONS_PER_QUESTION} Einträge haben")
        if not (0 <= self.correct_answer < len(self.options)):
            raise ValueError("correct_answer muss ein gültiger Index in options sein")


@dataclass(frozen=True, slots=True)
class QuizSession:
    """
    Unveränderlicher Fortschritt eines Quiz-Durchlaufs.

    Zweck:
        Bildet die beiden Zustände des Quiz ab:
        - InProgress: `completed=False`, aktueller Index, Auswahl (-1 = keine), Punkte
        - Completed: `completed=True`, `score` ist der Endstand von `total_questions`

    Attribute:
        total_questions (int): Anzahl Fragen im Katalog.
        current_question_index (int): Index der aktuellen Frage (0..total-1).
        selected_option_index (int): Gewählte Option oder -1.
        score (int): Bisher erzielte Punkte.
        completed (bool): True, sobald alle Fragen beantwortet sind.
    """

    total_questions: int
    current_question_index: int = 0
    selected_option_index: int = NO_SELECTION
    score: int = 0
    completed: bool = False

    def __post_init__(self) -> None:
        """
        Validiert die Wertebereiche der Session.
        """

        if self.total_questions < 1:
            raise ValueError("total_questions muss >= 1 sein")
        if not (0 <= self.current_question_index < self.total_questions):
            raise ValueError("current_question_index liegt außerhalb des Fragenkatalogs")
        if self.selected_option_index < NO_SELECTION:
            raise ValueError("selected_option_index muss >= -1 sein")
        if not (0 <= self.score <= self.total_questions):
            raise ValueError("score muss zwischen 0 und total_questions liegen")

    @property
    def in_progress(self) -> bool:
        return not self.completed

    @property
    def has_selection(self) -> bool:
        return self.selected_option_index != NO_SELECTION
