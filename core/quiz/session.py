"""
Session state for a single study or quiz run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from core.quiz.constants import ELEMENT_CATALOG, Mode, Phase


class RandomSource(Protocol):
    """Anything exposing random.Random.sample()."""

    def sample(self, population: Sequence[str], k: int) -> list[str]:
        ...


@dataclass
class Session:
    """
    Mutable state of the active run.

    Owned by QuizController and mutated only through its operations.
    """
    mode: Mode = Mode.FLASH_CARD
    phase: Phase = Phase.QUESTION
    sequence: list[str] = field(default_factory=lambda: list(ELEMENT_CATALOG))
    position: int = 0
    last_answer_correct: bool = False
    correct_count: int = 0

    @property
    def current_element(self) -> str:
        return self.sequence[self.position]

    @property
    def total_count(self) -> int:
        return len(self.sequence)

    @property
    def is_last_element(self) -> bool:
        return self.position == len(self.sequence) - 1

    def setup_flash_cards(self, catalog: Sequence[str]) -> None:
        """
        Reset in place for a new flash card pass (catalog order).
        """
        self.mode = Mode.FLASH_CARD
        self.phase = Phase.QUESTION
        self.position = 0
        self.sequence = list(catalog)

    def setup_quiz(self, catalog: Sequence[str], rng: RandomSource) -> None:
        """
        Reset in place for a new quiz with a fresh shuffle and zeroed score.
        """
        self.mode = Mode.QUIZ
        self.phase = Phase.QUESTION
        self.position = 0
        self.last_answer_correct = False
        self.correct_count = 0
        self.sequence = rng.sample(list(catalog), len(catalog))
