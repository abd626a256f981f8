"""UI Components for Element Quiz"""

from app.ui.flashcard import render_card, render_element_card, render_answer_text
from app.ui.mode_selector import render_mode_selector
from app.ui.answer_form import render_answer_form
from app.ui.score_dialog import render_score_dialog

__all__ = [
    "render_card",
    "render_element_card",
    "render_answer_text",
    "render_mode_selector",
    "render_answer_form",
    "render_score_dialog",
]
