from __future__ import annotations

# -----------------------------------------------------------------------------
# Quiz („Guess the Animal“)
# -----------------------------------------------------------------------------
# Enthält:
# - DEFAULT_QUESTIONS: fester Fragenkatalog (10 Fragen, je 4 Optionen)
# - QuizEngine: Übergänge als reine Funktionen (Session rein → neue Session raus)
#
# Die UI hält nur die jeweils aktuelle `QuizSession` und ersetzt sie nach jedem Klick.
# -----------------------------------------------------------------------------


"""Quiz-Logik.

Zweck:
    Verwaltet den statischen Fragenkatalog und den linearen Durchlauf mit Punktestand.

Zustände:
    - InProgress(current_question_index, selected_option_index, score)
    - Completed(score, total_questions)

Hinweise:
    Punkte werden genau einmal pro Frage beim `advance()` vergeben. Ein Zurückspringen
    zu früheren Fragen ist nicht vorgesehen.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from notes_app.src.models import NO_SELECTION, Question, QuizSession
from notes_app.src.validation import ValidationError, validate_option_index

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question("What is the largest land animal?", ("Elephant", "Giraffe", "Rhinoceros", "Hippopotamus"), 0),
    Question("Which animal is known as the King of the Jungle?", ("Tiger", "Lion", "Elephant", "Bear"), 1),
    Question("What is the fastest land animal?", ("Cheetah", "Lion", "Antelope", "Horse"), 0),
    Question("Which animal is known for its black and white stripes?", ("Zebra", "Tiger", "Penguin", "Panda"), 0),
    Question("What is the tallest animal in the world?", ("Elephant", "Giraffe", "Kangaroo", "Camel"), 1),
    Question("Which bird is often associated with delivering babies?", ("Stork", "Eagle", "Sparrow", "Owl"), 0),
    Question(
        "What is the largest species of shark?",
        ("Great White Shark", "Hammerhead Shark", "Whale Shark", "Tiger Shark"),
        2,
    ),
    Question("Which animal is known for its ability to change colors?", ("Chameleon", "Octopus", "Frog", "Snake"), 0),
    Question("What is the main diet of a Panda?", ("Fish", "Bamboo", "Insects", "Fruits"), 1),
    Question("Which mammal is known for having a pouch to carry its young?", ("Kangaroo", "Elephant", "Lion", "Wolf"), 0),
)


class QuizEngine:
    """
    Zustandsloser Reducer für einen Quiz-Durchlauf.

    Zweck:
        Hält nur den (unveränderlichen) Fragenkatalog. Der Fortschritt steckt vollständig
        in der übergebenen `QuizSession`; jede Methode liefert eine neue Session.

    Hinweise:
        Ungültige Übergänge (Auswahl/Weiter nach Abschluss, Weiter ohne Auswahl) sind
        No-ops und geben die unveränderte Session zurück.
    """

    def __init__(self, questions: Iterable[Question] = DEFAULT_QUESTIONS) -> None:
        """
        Initialisiert die Engine.

        Parameter:
            questions (Iterable[Question]): Fragenkatalog in fester Reihenfolge (mind. eine Frage).

        Ausnahmen:
            ValueError: Wenn der Katalog leer ist.
        """

        self._questions = tuple(questions)
        if not self._questions:
            raise ValueError("questions darf nicht leer sein")

    def get_questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    def start(self) -> QuizSession:
        """
        Startet einen neuen Durchlauf: InProgress(0, -1, 0).
        """

        return QuizSession(total_questions=self.total_questions)

    def restart(self, session: Optional[QuizSession] = None) -> QuizSession:
        """
        Setzt das Quiz zurück (aus Completed oder erzwungen aus InProgress).

        Parameter:
            session (QuizSession | None): Bisherige Session; wird verworfen.

        Rückgabe:
            QuizSession: Frische Session InProgress(0, -1, 0).
        """

        if session is not None and session.in_progress:
            logger.debug("Quiz bei Frage %s neu gestartet", session.current_question_index)
        return self.start()

    def current_question(self, session: QuizSession) -> Optional[Question]:
        """
        Liefert die anzuzeigende Frage oder `None`, wenn das Quiz abgeschlossen ist.
        """

        self._check_session(session)
        if session.completed:
            return None
        return self._questions[session.current_question_index]

    def select_option(self, session: QuizSession, option_index: int) -> QuizSession:
        """
        Merkt sich die gewählte Antwort der aktuellen Frage.

        Parameter:
            session (QuizSession): Aktuelle Session.
            option_index (int): Index der gewählten Antwort.

        Rückgabe:
            QuizSession: Neue Session mit gesetzter Auswahl (Index/Punkte unverändert).

        Ausnahmen:
            ValidationError: Wenn `option_index` keine Option der aktuellen Frage ist
                oder die Session nicht zu diesem Fragenkatalog gehört.
        """

        self._check_session(session)
        if session.completed:
            return session
        question = self._questions[session.current_question_index]
        validate_option_index(option_index, len(question.options))
        return replace(session, selected_option_index=option_index)

    def advance(self, session: QuizSession) -> QuizSession:
        """
        Bewertet die Auswahl und geht zur nächsten Frage bzw. zum Ergebnis.

        Ablauf:
            1) Richtige Auswahl → `score + 1`
            2) Letzte Frage → Completed(score, total)
            3) Sonst → nächste Frage, Auswahl zurück auf -1

        Parameter:
            session (QuizSession): Aktuelle Session.

        Rückgabe:
            QuizSession: Neue Session (oder dieselbe, falls kein gültiger Übergang).
        """

        self._check_session(session)
        if session.completed or not session.has_selection:
            return session

        question = self._questions[session.current_question_index]
        score = session.score
        if session.selected_option_index == question.correct_answer:
            score += 1

        if session.current_question_index >= self.total_questions - 1:
            logger.info("Quiz abgeschlossen: %s/%s", score, self.total_questions)
            return replace(session, score=score, completed=True)

        return replace(
            session,
            current_question_index=session.current_question_index + 1,
            selected_option_index=NO_SELECTION,
            score=score,
        )

    def _check_session(self, session: QuizSession) -> None:
        # Eine Session gehört immer zu genau einem Fragenkatalog.
        if session.total_questions != self.total_questions:
            raise ValidationError(
                f"Session mit {session.total_questions} Fragen passt nicht zum Katalog mit {self.total_questions} Fragen"
            )

    @staticmethod
    def result_text(session: QuizSession) -> str:
        # Text wie auf dem Ergebnis-Screen der App
        return f"Your score: {session.score}/{session.total_questions}"
