"""
Score Dialog UI

Modal shown when a quiz finishes.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import dismiss_score
from core import quiz


def render_score_dialog(summary: quiz.ScoreSummary) -> None:
    """
    Open the score modal. Only OK closes it, returning to flash cards.
    """

    @st.dialog(summary.title, dismissible=False)
    def _score_dialog() -> None:
        st.markdown(summary.message)
        if st.button(quiz.DISMISS_SCORE_LABEL, type="primary", width="stretch"):
            dismiss_score()
            st.rerun()

    _score_dialog()
