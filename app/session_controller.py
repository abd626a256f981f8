"""
Event handlers bridging Streamlit widgets to the quiz controller.

Each handler forwards one UI event and stores the returned directive;
the page then renders whatever directive is in session_state.
"""

from __future__ import annotations

from typing import Callable

import streamlit as st

from core import quiz


def _dispatch(event: str, operation: Callable[[], quiz.RenderDirective]) -> None:
    try:
        st.session_state.directive = operation()
        st.session_state.last_error = None
    except quiz.InvalidTransitionError as exc:
        # A stale widget fired after the state moved on; keep the last directive.
        print(f"[STREAMLIT] Rejected {event}: {exc}")
        st.session_state.last_error = str(exc)


def switch_mode(mode: quiz.Mode) -> None:
    """
    Start a fresh run in the selected mode.
    """
    print(f"[STREAMLIT] Mode switched to {quiz.Mode(mode).value}")
    controller: quiz.QuizController = st.session_state.controller
    _dispatch("set_mode", lambda: controller.set_mode(mode))


def on_mode_selected() -> None:
    """on_change callback for the mode selector."""
    label = st.session_state.mode_selector
    mode = next(m for m, text in quiz.MODE_LABELS.items() if text == label)
    switch_mode(mode)


def reveal_answer() -> None:
    controller: quiz.QuizController = st.session_state.controller
    _dispatch("reveal_answer", controller.reveal_answer)


def next_element() -> None:
    controller: quiz.QuizController = st.session_state.controller
    _dispatch("advance", controller.advance)


def submit_answer(text: str) -> None:
    """
    Check the typed answer for the current quiz question.
    """
    controller: quiz.QuizController = st.session_state.controller
    _dispatch("submit_answer", lambda: controller.submit_answer(text))


def dismiss_score() -> None:
    print("[STREAMLIT] Score dismissed, returning to flash cards")
    controller: quiz.QuizController = st.session_state.controller
    _dispatch("dismiss_score", controller.dismiss_score)
