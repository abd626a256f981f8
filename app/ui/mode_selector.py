"""
Mode Selector UI

Segmented Flash Cards / Quiz switch.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import on_mode_selected
from core import quiz


MODE_ORDER = [quiz.Mode.FLASH_CARD, quiz.Mode.QUIZ]


def render_mode_selector(directive: quiz.RenderDirective) -> None:
    """
    Render the mode switch, highlighting the directive's mode.
    """
    # Keep the widget in sync when the controller changes mode itself (score dismissal).
    st.session_state.mode_selector = quiz.MODE_LABELS[directive.mode]
    st.radio(
        "Mode",
        [quiz.MODE_LABELS[mode] for mode in MODE_ORDER],
        key="mode_selector",
        horizontal=True,
        label_visibility="collapsed",
        on_change=on_mode_selected,
    )
