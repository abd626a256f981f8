"""
Quiz Controller

State machine over (mode, phase) for the element study tool. Every
operation mutates the session synchronously and returns a RenderDirective;
there is no UI code in here.

Transitions:
    FlashCard/Question --reveal_answer--> FlashCard/Answer
    FlashCard/*        --advance-------> FlashCard/Question (wraps to 0)
    Quiz/Question      --submit_answer-> Quiz/Answer
    Quiz/Answer        --advance-------> Quiz/Question, or Quiz/Score after the last element
    Quiz/Score         --dismiss_score-> FlashCard/Question (fresh)
    any                --set_mode(X)---> X/Question (fresh)
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from core.quiz.config import get_shuffle_seed
from core.quiz.constants import ELEMENT_CATALOG, Mode, Phase
from core.quiz.directive import RenderDirective, build_render_directive
from core.quiz.exceptions import InvalidTransitionError
from core.quiz.session import RandomSource, Session


class QuizController:
    """
    Owns the Session and exposes the event-handling operations.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        catalog: Sequence[str] = ELEMENT_CATALOG,
    ):
        """
        Initialize the controller in FlashCard/Question at position 0.

        Args:
            rng: Random source used for quiz shuffles (defaults to a
                random.Random seeded from ELEMENT_QUIZ_SEED, or unseeded)
            catalog: Element names to study, in flash card order
        """
        if not catalog:
            raise ValueError("Element catalog must not be empty")

        self._catalog = tuple(catalog)
        self._rng = rng if rng is not None else random.Random(get_shuffle_seed())
        self._session = Session(sequence=list(self._catalog))

    # ---- Read-only state ----

    @property
    def catalog(self) -> tuple[str, ...]:
        return self._catalog

    @property
    def mode(self) -> Mode:
        return self._session.mode

    @property
    def phase(self) -> Phase:
        return self._session.phase

    @property
    def position(self) -> int:
        return self._session.position

    @property
    def sequence(self) -> tuple[str, ...]:
        return tuple(self._session.sequence)

    @property
    def current_element(self) -> str:
        return self._session.current_element

    @property
    def correct_count(self) -> int:
        return self._session.correct_count

    @property
    def last_answer_correct(self) -> bool:
        return self._session.last_answer_correct

    def render(self) -> RenderDirective:
        """Directive for the current state, without changing it."""
        return build_render_directive(self._session)

    # ---- Events ----

    def set_mode(self, new_mode: Mode) -> RenderDirective:
        """
        Switch mode and start a fresh run in it.

        Re-selecting the current mode also restarts the run.
        """
        new_mode = Mode(new_mode)
        if new_mode == Mode.FLASH_CARD:
            self._session.setup_flash_cards(self._catalog)
            print(f"[QUIZ] Started flash cards with {len(self._catalog)} elements")
        else:
            self._session.setup_quiz(self._catalog, self._rng)
            print(f"[QUIZ] Started quiz with order: {', '.join(self._session.sequence)}")
        return self.render()

    def reveal_answer(self) -> RenderDirective:
        """Show the current flash card's answer."""
        session = self._session
        if session.mode != Mode.FLASH_CARD or session.phase != Phase.QUESTION:
            raise InvalidTransitionError(
                "reveal_answer", session.mode, session.phase, expected="flash_card/question"
            )
        session.phase = Phase.ANSWER
        return self.render()

    def advance(self) -> RenderDirective:
        """
        Move to the next element.

        Flash cards wrap silently to the first element; a quiz moves to the
        score phase after its last element.
        """
        session = self._session
        if session.mode == Mode.QUIZ and session.phase != Phase.ANSWER:
            raise InvalidTransitionError(
                "advance", session.mode, session.phase, expected="quiz/answer or flash_card"
            )

        if session.position + 1 < len(session.sequence):
            session.position += 1
            session.phase = Phase.QUESTION
        else:
            session.position = 0
            if session.mode == Mode.QUIZ:
                session.phase = Phase.SCORE
                print(f"[QUIZ] Quiz finished: {session.correct_count}/{session.total_count} correct")
            else:
                session.phase = Phase.QUESTION
        return self.render()

    def submit_answer(self, text: object) -> RenderDirective:
        """
        Check a typed answer against the current element (case-insensitive).

        Non-text input is treated as empty text and never matches.
        """
        session = self._session
        if session.mode != Mode.QUIZ or session.phase != Phase.QUESTION:
            raise InvalidTransitionError(
                "submit_answer", session.mode, session.phase, expected="quiz/question"
            )

        answer = text if isinstance(text, str) else ""
        session.last_answer_correct = answer.lower() == session.current_element.lower()
        if session.last_answer_correct:
            session.correct_count += 1
        session.phase = Phase.ANSWER
        return self.render()

    def dismiss_score(self) -> RenderDirective:
        """Close the score summary and return to flash cards."""
        session = self._session
        if session.phase != Phase.SCORE:
            raise InvalidTransitionError(
                "dismiss_score", session.mode, session.phase, expected="quiz/score"
            )
        return self.set_mode(Mode.FLASH_CARD)
