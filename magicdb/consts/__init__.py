"""
MagicDB Constants Module.

Centralized enumerations for layouts and colors.

Usage:
    from magicdb.consts import Color, LayoutVariant, MULTIFACE_LAYOUTS
"""

from __future__ import annotations

from magicdb.consts.colors import (
    COLOR_ORDER,
    Color,
    color_from_name,
    color_from_symbol,
)
from magicdb.consts.layouts import (
    MULTIFACE_LAYOUTS,
    SINGLE_FACE_LAYOUTS,
    SPECIAL_LAYOUTS,
    LayoutFamily,
    LayoutVariant,
    get_layout_family,
    parse_layout,
)

__all__ = [
    "COLOR_ORDER",
    "MULTIFACE_LAYOUTS",
    "SINGLE_FACE_LAYOUTS",
    "SPECIAL_LAYOUTS",
    "Color",
    "LayoutFamily",
    "LayoutVariant",
    "color_from_name",
    "color_from_symbol",
    "get_layout_family",
    "parse_layout",
]
