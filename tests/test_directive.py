"""Tests for the render directive emitted in every mode/phase."""

import pydantic
import pytest

from core import quiz
from core.quiz import Mode, Phase, RenderDirective, ScoreSummary, Session, build_render_directive

from tests.conftest import REVERSED_ORDER


class TestFlashCardDirective:

    def test_question(self, controller):
        directive = controller.render()
        assert directive.image_key == "Carbon"
        assert directive.mode == Mode.FLASH_CARD
        assert directive.phase == Phase.QUESTION
        assert directive.answer_field_visible is False
        assert directive.answer_field_editable is False
        assert directive.answer_field_prefill == ""
        assert directive.answer_text == ""
        assert directive.answer_correct is None
        assert directive.reveal_button_visible is True
        assert directive.reveal_button_enabled is True
        assert directive.next_button_label == "Next Element"
        assert directive.next_button_enabled is False
        assert directive.score_summary is None

    def test_answer(self, controller):
        directive = controller.reveal_answer()
        assert directive.answer_text == "Carbon"
        assert directive.next_button_enabled is True
        assert directive.reveal_button_visible is True
        assert directive.reveal_button_enabled is False

    def test_last_element_keeps_next_label(self, controller):
        for _ in range(3):
            controller.advance()
        directive = controller.reveal_answer()
        assert directive.image_key == "Sodium"
        assert directive.next_button_label == "Next Element"


class TestQuizDirective:

    def test_question(self, quiz_controller):
        directive = quiz_controller.render()
        assert directive.image_key == REVERSED_ORDER[0]
        assert directive.mode == Mode.QUIZ
        assert directive.answer_field_visible is True
        assert directive.answer_field_editable is True
        assert directive.answer_field_prefill == ""
        assert directive.answer_text == ""
        assert directive.reveal_button_visible is False
        assert directive.reveal_button_enabled is False
        assert directive.next_button_label == "Next Question"
        assert directive.next_button_enabled is False

    def test_answer_correct(self, quiz_controller):
        directive = quiz_controller.submit_answer(REVERSED_ORDER[0])
        assert directive.answer_field_visible is True
        assert directive.answer_field_editable is False
        assert directive.answer_text == "Correct!"
        assert directive.answer_correct is True
        assert directive.next_button_enabled is True

    def test_answer_missed(self, quiz_controller):
        directive = quiz_controller.submit_answer("Helium")
        assert directive.answer_text == "❌\nCorrect Answer: Sodium"
        assert directive.answer_correct is False

    def test_last_question_shows_score_label(self, quiz_controller):
        for element in REVERSED_ORDER[:3]:
            quiz_controller.submit_answer(element)
            quiz_controller.advance()
        directive = quiz_controller.render()
        assert directive.position == 3
        assert directive.next_button_label == "Show Score"
        assert directive.next_button_enabled is False

    def test_score(self, quiz_controller):
        for element in REVERSED_ORDER:
            quiz_controller.submit_answer("wrong" if element == "Gold" else element)
            directive = quiz_controller.advance()

        assert directive.phase == Phase.SCORE
        assert directive.answer_text == ""
        assert directive.answer_field_visible is False
        assert directive.answer_field_editable is False
        assert directive.next_button_enabled is False
        assert directive.reveal_button_visible is False
        assert directive.reveal_button_enabled is False
        assert directive.score_summary == ScoreSummary(correct_count=3, total_count=4)
        assert directive.score_summary.title == "Quiz Score"
        assert directive.score_summary.message == "Your score is 3 out of 4."


class TestDirectiveModel:

    def test_models_are_frozen(self):
        assert RenderDirective.model_config["frozen"] is True
        assert ScoreSummary.model_config["frozen"] is True

    def test_directive_is_immutable(self, controller):
        directive = controller.render()
        with pytest.raises(pydantic.ValidationError):
            directive.answer_text = "Gold"

    def test_score_summary_validates_counts(self):
        with pytest.raises(pydantic.ValidationError):
            ScoreSummary(correct_count=-1, total_count=4)
        with pytest.raises(pydantic.ValidationError):
            ScoreSummary(correct_count=0, total_count=0)

    def test_build_from_session(self):
        session = Session(mode=Mode.QUIZ, phase=Phase.ANSWER, position=2, last_answer_correct=True)
        directive = build_render_directive(session)
        assert directive.image_key == quiz.ELEMENT_CATALOG[2]
        assert directive.answer_text == "Correct!"
        assert directive.total_count == 4
