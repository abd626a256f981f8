"""
Quiz Answer Form

Free-text input for typing the element name. Enter submits.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from core import quiz


def render_answer_form(directive: quiz.RenderDirective) -> Optional[str]:
    """
    Render the answer field according to the directive.

    Returns:
        Submitted text, or None if nothing was submitted this run
    """
    if not directive.answer_field_visible:
        return None

    disabled = not directive.answer_field_editable
    with st.form("answer_form", clear_on_submit=True, border=False):
        text = st.text_input(
            "Element name",
            value=directive.answer_field_prefill,
            placeholder="Type the element name and press Enter",
            disabled=disabled,
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("Submit", disabled=disabled)

    if submitted and not disabled:
        return text
    return None
