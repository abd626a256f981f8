"""
Element card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
QUESTION_BG_COLOR = "#f0f2f6"
ANSWER_BG_COLOR = "#e8f4f8"
CORRECT_BG_COLOR = "#e6f4ea"
MISSED_BG_COLOR = "#fdecea"
IMAGE_WIDTH = 260


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "3em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_MAIN_WEIGHT = "normal"
DEFAULT_SUBTITLE_FONT_SIZE = "1.2em"
DEFAULT_SUBTITLE_COLOR = "#666"
DEFAULT_CORNER_FONT_SIZE = "0.9em"
DEFAULT_CORNER_COLOR = "#666"


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style preset for element and answer cards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    bg_color: str = QUESTION_BG_COLOR
    min_height: str = CARD_MIN_HEIGHT


DEFAULT_CARD_STYLE = CardStyle()


# ---- Presets ----

# Symbol tile shown when no element image is available
ELEMENT_TILE_STYLE = CardStyle(
    main_font_size="4.5em",
    main_weight="bold",
    bg_color=QUESTION_BG_COLOR,
)

ANSWER_STYLE = CardStyle(
    main_font_size="2.2em",
    bg_color=ANSWER_BG_COLOR,
    min_height="90px",
)

CORRECT_STYLE = CardStyle(
    main_font_size="2.2em",
    main_color="#1e7b34",
    main_weight="bold",
    bg_color=CORRECT_BG_COLOR,
    min_height="90px",
)

MISSED_STYLE = CardStyle(
    main_font_size="1.6em",
    main_color="#a12622",
    bg_color=MISSED_BG_COLOR,
    min_height="90px",
)
