"""
Element Quiz - Main App

Streamlit front end for the flash card / quiz controller.

Run with:
    streamlit run app/streamlit_app.py
"""

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from app.views.study import render_study_page
from app.state import ensure_session_state


# ---- Page Setup ----

st.set_page_config(
    page_title="Element Quiz",
    page_icon="⚗️",
    layout="centered"
)


# ---- Main App ----

def main():
    """Main app entry point."""
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("⚗️ Element Quiz")

    ensure_session_state()

    if st.session_state.last_error:
        st.error(st.session_state.last_error)
        st.session_state.last_error = None

    render_study_page(st.session_state.directive)


if __name__ == "__main__":
    main()
