"""
Streamlit session state helpers.
"""

from __future__ import annotations

import streamlit as st

from core import quiz


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with a controller and its first directive.
    """
    if "controller" not in st.session_state:
        controller = quiz.QuizController()
        default_mode = quiz.get_default_mode()
        if default_mode == quiz.Mode.FLASH_CARD:
            st.session_state.directive = controller.render()
        else:
            st.session_state.directive = controller.set_mode(default_mode)
        st.session_state.controller = controller
    if "directive" not in st.session_state:
        st.session_state.directive = st.session_state.controller.render()
    if "last_error" not in st.session_state:
        st.session_state.last_error = None
