"""
Study page rendering.

Draws a RenderDirective and forwards widget events to the controller.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import next_element, reveal_answer, submit_answer
from app.ui import (
    render_answer_form,
    render_answer_text,
    render_element_card,
    render_mode_selector,
    render_score_dialog,
)
from core import quiz


def render_study_page(directive: quiz.RenderDirective) -> None:
    """
    Render the element card, answer area and controls for a directive.
    """
    render_mode_selector(directive)
    st.markdown("<br>", unsafe_allow_html=True)

    render_element_card(directive)
    st.markdown("<br>", unsafe_allow_html=True)

    submitted = render_answer_form(directive)
    if submitted is not None:
        submit_answer(submitted)
        st.rerun()

    render_answer_text(directive)
    st.markdown("<br>", unsafe_allow_html=True)

    _render_buttons(directive)

    if directive.score_summary is not None:
        render_score_dialog(directive.score_summary)


def _render_buttons(directive: quiz.RenderDirective) -> None:
    if directive.reveal_button_visible:
        col1, col2 = st.columns(2)
        with col1:
            if st.button(
                quiz.SHOW_ANSWER_LABEL,
                type="primary",
                width="stretch",
                disabled=not directive.reveal_button_enabled,
            ):
                reveal_answer()
                st.rerun()
        next_column = col2
    else:
        next_column = st.container()

    with next_column:
        if st.button(
            directive.next_button_label,
            width="stretch",
            disabled=not directive.next_button_enabled,
        ):
            next_element()
            st.rerun()
