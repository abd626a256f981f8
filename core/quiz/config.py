"""
Configuration

Environment-driven settings for the element quiz. Values may come from a
.env file; the app entry point loads it with python-dotenv before anything
here is read.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from core.quiz.constants import Mode


PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ASSETS_DIR = PROJECT_ROOT / "assets" / "elements"


def get_shuffle_seed() -> Optional[int]:
    """
    Get the fixed quiz shuffle seed, if one is configured.

    Returns:
        Integer seed from ELEMENT_QUIZ_SEED, or None for an unseeded shuffle
    """
    raw = os.getenv("ELEMENT_QUIZ_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"ELEMENT_QUIZ_SEED must be an integer, got {raw!r}"
        ) from None


def get_assets_dir() -> Path:
    """
    Directory holding element images named <ElementName>.png.
    """
    raw = os.getenv("ELEMENT_QUIZ_ASSETS_DIR", "").strip()
    if not raw:
        return DEFAULT_ASSETS_DIR
    return Path(raw).expanduser()


def get_default_mode() -> Mode:
    """
    Mode a new browser session starts in (flash cards unless overridden).
    """
    raw = os.getenv("ELEMENT_QUIZ_DEFAULT_MODE", Mode.FLASH_CARD.value).strip().lower()
    try:
        return Mode(raw)
    except ValueError:
        valid = ", ".join(mode.value for mode in Mode)
        raise ValueError(
            f"ELEMENT_QUIZ_DEFAULT_MODE must be one of: {valid} (got {raw!r})"
        ) from None
