"""Tests for Session setup routines."""

import random

from core import quiz
from core.quiz import Mode, Phase, Session

from tests.conftest import REVERSED_ORDER, ReversedSample


class TestSession:

    def test_defaults(self):
        session = Session()
        assert session.mode == Mode.FLASH_CARD
        assert session.phase == Phase.QUESTION
        assert session.sequence == list(quiz.ELEMENT_CATALOG)
        assert session.current_element == "Carbon"
        assert session.total_count == 4
        assert session.is_last_element is False

    def test_setup_quiz_resets_everything(self):
        session = Session(phase=Phase.ANSWER, position=3, last_answer_correct=True, correct_count=3)
        session.setup_quiz(quiz.ELEMENT_CATALOG, ReversedSample())
        assert session.mode == Mode.QUIZ
        assert session.phase == Phase.QUESTION
        assert session.position == 0
        assert session.last_answer_correct is False
        assert session.correct_count == 0
        assert session.sequence == REVERSED_ORDER

    def test_setup_flash_cards_uses_catalog_order(self):
        session = Session(mode=Mode.QUIZ, phase=Phase.SCORE, sequence=list(REVERSED_ORDER), position=2)
        session.setup_flash_cards(quiz.ELEMENT_CATALOG)
        assert session.mode == Mode.FLASH_CARD
        assert session.phase == Phase.QUESTION
        assert session.position == 0
        assert session.sequence == list(quiz.ELEMENT_CATALOG)

    def test_quiz_shuffle_is_a_permutation(self):
        rng = random.Random(5)
        session = Session()
        for _ in range(20):
            session.setup_quiz(quiz.ELEMENT_CATALOG, rng)
            assert sorted(session.sequence) == sorted(quiz.ELEMENT_CATALOG)

    def test_quiz_shuffle_does_not_touch_catalog(self):
        catalog = ["Carbon", "Gold", "Chlorine", "Sodium"]
        session = Session()
        session.setup_quiz(catalog, ReversedSample())
        session.sequence.append("Iron")
        assert catalog == ["Carbon", "Gold", "Chlorine", "Sodium"]
