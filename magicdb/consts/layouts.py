"""
Card layout constants and classifications.

Single source of truth for layout-related logic throughout the loader.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Optional


class LayoutVariant(Enum):
    """Printed card layouts understood by the catalog loader."""

    NORMAL = "normal"
    LEVELER = "leveler"
    SPLIT = "split"
    FLIP = "flip"
    DOUBLE_FACED = "double-faced"
    TOKEN = "token"
    PLANE = "plane"
    SCHEME = "scheme"
    PHENOMENON = "phenomenon"
    VANGUARD = "vanguard"


class LayoutFamily(Enum):
    """How a layout is published in the catalog."""

    SINGLE_FACE = "single"
    MULTI_FACE = "multi"
    SPECIAL = "special"


SINGLE_FACE_LAYOUTS: Final[frozenset[LayoutVariant]] = frozenset(
    {
        LayoutVariant.NORMAL,
        LayoutVariant.LEVELER,
    }
)

MULTIFACE_LAYOUTS: Final[frozenset[LayoutVariant]] = frozenset(
    {
        LayoutVariant.SPLIT,
        LayoutVariant.FLIP,
        LayoutVariant.DOUBLE_FACED,
    }
)

SPECIAL_LAYOUTS: Final[frozenset[LayoutVariant]] = frozenset(
    {
        LayoutVariant.TOKEN,
        LayoutVariant.PLANE,
        LayoutVariant.SCHEME,
        LayoutVariant.PHENOMENON,
        LayoutVariant.VANGUARD,
    }
)


def parse_layout(layout: str) -> Optional[LayoutVariant]:
    """Look up a layout by its exact JSON value."""
    try:
        return LayoutVariant(layout)
    except ValueError:
        return None


def get_layout_family(layout: LayoutVariant) -> LayoutFamily:
    """Classify a layout into the family it is published as."""
    if layout in MULTIFACE_LAYOUTS:
        return LayoutFamily.MULTI_FACE
    if layout in SPECIAL_LAYOUTS:
        return LayoutFamily.SPECIAL
    return LayoutFamily.SINGLE_FACE

