"""
Element image resolution.

Maps a directive's image_key (the element name) to an image file in the
configured assets directory, with a symbol tile as fallback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from core import quiz


IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")

# (symbol, atomic number) for the fallback tile
ELEMENT_TILES: dict[str, tuple[str, int]] = {
    "Carbon": ("C", 6),
    "Gold": ("Au", 79),
    "Chlorine": ("Cl", 17),
    "Sodium": ("Na", 11),
}


def resolve_element_image(image_key: str, assets_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Find the image file for an element, or None if there is none.
    """
    assets_dir = assets_dir or quiz.get_assets_dir()
    for extension in IMAGE_EXTENSIONS:
        candidate = assets_dir / f"{image_key}{extension}"
        if candidate.is_file():
            return candidate
    return None


def element_tile(image_key: str) -> tuple[str, str]:
    """
    Symbol and subtitle text for the fallback tile.
    """
    if image_key not in ELEMENT_TILES:
        return "?", ""
    symbol, atomic_number = ELEMENT_TILES[image_key]
    return symbol, f"Atomic number {atomic_number}"
