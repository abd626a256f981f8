"""
Render Directive

Declarative description of everything the presentation layer shows.
The controller emits one after every event; the UI renders it verbatim
and never derives display content on its own.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.quiz.constants import (
    CORRECT_ANSWER_TEXT,
    MISSED_ANSWER_TEMPLATE,
    NEXT_ELEMENT_LABEL,
    NEXT_QUESTION_LABEL,
    SCORE_MESSAGE_TEMPLATE,
    SCORE_TITLE,
    SHOW_SCORE_LABEL,
    Mode,
    Phase,
)
from core.quiz.session import Session


class ScoreSummary(BaseModel):
    """Quiz result, shown in a modal once every element has been answered."""
    model_config = ConfigDict(frozen=True)

    correct_count: int = Field(..., ge=0, description="Correctly answered elements")
    total_count: int = Field(..., gt=0, description="Elements in the quiz")

    @property
    def title(self) -> str:
        return SCORE_TITLE

    @property
    def message(self) -> str:
        return SCORE_MESSAGE_TEMPLATE.format(correct=self.correct_count, total=self.total_count)


class RenderDirective(BaseModel):
    """
    Complete presentation state after an event.
    """
    model_config = ConfigDict(frozen=True)

    image_key: str = Field(..., description="Current element name, used to resolve its image")
    mode: Mode
    phase: Phase
    position: int = Field(..., ge=0)
    total_count: int = Field(..., gt=0)

    # Free-text answer input (quiz only)
    answer_field_visible: bool
    answer_field_editable: bool
    answer_field_prefill: str = ""

    # Answer / feedback area
    answer_text: str = ""
    answer_correct: Optional[bool] = Field(default=None, description="Quiz/Answer only: whether the submitted answer matched")

    # Buttons
    reveal_button_visible: bool
    reveal_button_enabled: bool
    next_button_label: str
    next_button_enabled: bool

    # Present only in the score phase
    score_summary: Optional[ScoreSummary] = None


def _answer_text(session: Session) -> str:
    if session.phase != Phase.ANSWER:
        return ""
    if session.mode == Mode.FLASH_CARD:
        return session.current_element
    if session.last_answer_correct:
        return CORRECT_ANSWER_TEXT
    return MISSED_ANSWER_TEMPLATE.format(element=session.current_element)


def _next_button_label(session: Session) -> str:
    if session.mode == Mode.FLASH_CARD:
        return NEXT_ELEMENT_LABEL
    if session.is_last_element:
        return SHOW_SCORE_LABEL
    return NEXT_QUESTION_LABEL


def build_render_directive(session: Session) -> RenderDirective:
    """
    Describe what the presentation layer should display for a session.
    """
    is_quiz = session.mode == Mode.QUIZ

    answer_correct = None
    if is_quiz and session.phase == Phase.ANSWER:
        answer_correct = session.last_answer_correct

    score_summary = None
    if session.phase == Phase.SCORE:
        score_summary = ScoreSummary(
            correct_count=session.correct_count,
            total_count=session.total_count,
        )

    return RenderDirective(
        image_key=session.current_element,
        mode=session.mode,
        phase=session.phase,
        position=session.position,
        total_count=session.total_count,
        answer_field_visible=is_quiz and session.phase != Phase.SCORE,
        answer_field_editable=is_quiz and session.phase == Phase.QUESTION,
        answer_field_prefill="",
        answer_text=_answer_text(session),
        answer_correct=answer_correct,
        reveal_button_visible=not is_quiz,
        reveal_button_enabled=not is_quiz and session.phase == Phase.QUESTION,
        next_button_label=_next_button_label(session),
        next_button_enabled=session.phase == Phase.ANSWER,
        score_summary=score_summary,
    )
