"""
Quiz Constants

Modes, phases, the element catalog and every display string the
controller emits, kept in one place.
"""

from enum import Enum


# ---- Modes and Phases ----

class Mode(str, Enum):
    """Interaction mode."""
    FLASH_CARD = "flash_card"  # Self-paced, answer revealed on demand
    QUIZ = "quiz"              # Typed answers, scored


class Phase(str, Enum):
    """Sub-state within a mode."""
    QUESTION = "question"
    ANSWER = "answer"
    SCORE = "score"  # Quiz only


# ---- Element Catalog ----

ELEMENT_CATALOG: tuple[str, ...] = ("Carbon", "Gold", "Chlorine", "Sodium")


# ---- Button Labels ----

NEXT_ELEMENT_LABEL = "Next Element"
NEXT_QUESTION_LABEL = "Next Question"
SHOW_SCORE_LABEL = "Show Score"
SHOW_ANSWER_LABEL = "Show Answer"
DISMISS_SCORE_LABEL = "OK"

MODE_LABELS = {
    Mode.FLASH_CARD: "Flash Cards",
    Mode.QUIZ: "Quiz",
}


# ---- Feedback Text ----

CORRECT_ANSWER_TEXT = "Correct!"
MISSED_ANSWER_TEMPLATE = "❌\nCorrect Answer: {element}"

SCORE_TITLE = "Quiz Score"
SCORE_MESSAGE_TEMPLATE = "Your score is {correct} out of {total}."
