"""
Element Quiz - flash card / quiz state machine

Quick start:
    from core import quiz

    controller = quiz.QuizController()
    directive = controller.reveal_answer()        # flash card answer
    directive = controller.set_mode(quiz.Mode.QUIZ)
    directive = controller.submit_answer("carbon")
    directive = controller.advance()

Every operation returns a RenderDirective describing the full screen.
"""

# Controller
from core.quiz.controller import QuizController

# Session and output contract
from core.quiz.session import Session, RandomSource
from core.quiz.directive import RenderDirective, ScoreSummary, build_render_directive

# Constants
from core.quiz.constants import (
    Mode,
    Phase,
    ELEMENT_CATALOG,
    MODE_LABELS,
    SHOW_ANSWER_LABEL,
    DISMISS_SCORE_LABEL,
)

# Errors
from core.quiz.exceptions import QuizError, InvalidTransitionError

# Configuration
from core.quiz.config import get_shuffle_seed, get_assets_dir, get_default_mode

__all__ = [
    "QuizController",
    "Session",
    "RandomSource",
    "RenderDirective",
    "ScoreSummary",
    "build_render_directive",
    "Mode",
    "Phase",
    "ELEMENT_CATALOG",
    "MODE_LABELS",
    "SHOW_ANSWER_LABEL",
    "DISMISS_SCORE_LABEL",
    "QuizError",
    "InvalidTransitionError",
    "get_shuffle_seed",
    "get_assets_dir",
    "get_default_mode",
]
