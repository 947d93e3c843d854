"""
Color constants and lookups.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Optional

from magicdb.constants import SYMBOL_MAP


class Color(Enum):
    """The five colors of Magic."""

    WHITE = "White"
    BLUE = "Blue"
    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"

    @property
    def symbol(self) -> str:
        """Single letter used inside mana symbols."""
        return SYMBOL_MAP[self.value]


# WUBRG order
COLOR_ORDER: Final[tuple[Color, ...]] = (
    Color.WHITE,
    Color.BLUE,
    Color.BLACK,
    Color.RED,
    Color.GREEN,
)

_COLORS_BY_NAME: Final[dict[str, Color]] = {
    color.value.lower(): color for color in COLOR_ORDER
}
_COLORS_BY_SYMBOL: Final[dict[str, Color]] = {
    color.symbol: color for color in COLOR_ORDER
}


def color_from_name(name: str) -> Optional[Color]:
    """Case-insensitive lookup of a color by its full name ("blue" => Blue)"""
    return _COLORS_BY_NAME.get(name.lower())


def color_from_symbol(symbol: str) -> Optional[Color]:
    """Case-insensitive lookup of a color by its mana letter ("u" => Blue)"""
    return _COLORS_BY_SYMBOL.get(symbol.upper())
