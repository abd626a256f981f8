"""
Element Card UI Component

Renders the element being studied and the answer/feedback area.
"""

from __future__ import annotations

import html

import streamlit as st

from app.ui.element_assets import element_tile, resolve_element_image
from app.ui.flashcard_style import (
    ANSWER_STYLE,
    CARD_PADDING,
    CORRECT_STYLE,
    DEFAULT_CARD_STYLE,
    ELEMENT_TILE_STYLE,
    IMAGE_WIDTH,
    MISSED_STYLE,
    CardStyle,
)
from core import quiz


def render_card(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: CardStyle | None = None,
) -> None:
    """
    Render a card with centered main text.

    Args:
        main_text: Primary text (center, large); newlines become line breaks
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        style: Style preset (default: DEFAULT_CARD_STYLE)
    """
    style = style or DEFAULT_CARD_STYLE

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color};">'
            f"{html.escape(corner_text)}</div>"
        )

    main_body = html.escape(main_text).replace("\n", "<br>")
    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        f'font-weight: {style.main_weight}; margin: 0; text-align: center; '
        f'line-height: 1.4;">{main_body}</h1>'
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'margin: 15px 0 0 0; text-align: center;">{html.escape(subtitle)}</p>'
        )

    card_html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {style.min_height}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)


def render_element_card(directive: quiz.RenderDirective) -> None:
    """
    Render the current element's image, or its symbol tile if no image exists.
    """
    progress = f"{directive.position + 1}/{directive.total_count}"
    image_path = resolve_element_image(directive.image_key)
    if image_path is not None:
        st.caption(progress)
        st.image(str(image_path), width=IMAGE_WIDTH)
        return

    symbol, subtitle = element_tile(directive.image_key)
    render_card(
        main_text=symbol,
        subtitle=subtitle,
        corner_text=progress,
        style=ELEMENT_TILE_STYLE,
    )


def render_answer_text(directive: quiz.RenderDirective) -> None:
    """
    Render the answer/feedback area. Nothing is shown while it is empty.
    """
    if not directive.answer_text:
        return

    if directive.mode == quiz.Mode.FLASH_CARD:
        style = ANSWER_STYLE
    elif directive.answer_correct:
        style = CORRECT_STYLE
    else:
        style = MISSED_STYLE
    render_card(main_text=directive.answer_text, style=style)
