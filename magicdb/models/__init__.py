"""
MagicDB Model Dispatcher
"""

from .cards import (
    Card,
    CardBase,
    CardFace,
    ExtraInfo,
    ManyFace,
    NoExtraInfo,
    PowerToughness,
    SingleFace,
    Special,
    StartingLoyalty,
    TwoFace,
)
from .mana import (
    Arbitrary,
    Colored,
    Colorless,
    ColorlessHybrid,
    Half,
    Hybrid,
    ManaCost,
    ManaSymbol,
    ManaSymbolBase,
    PhyrexianHybrid,
    format_mana_cost,
    get_mana_colors,
    get_mana_value,
)

__all__ = [
    "Arbitrary",
    "Card",
    "CardBase",
    "CardFace",
    "Colored",
    "Colorless",
    "ColorlessHybrid",
    "ExtraInfo",
    "Half",
    "Hybrid",
    "ManaCost",
    "ManaSymbol",
    "ManaSymbolBase",
    "ManyFace",
    "NoExtraInfo",
    "PhyrexianHybrid",
    "PowerToughness",
    "SingleFace",
    "Special",
    "StartingLoyalty",
    "TwoFace",
    "format_mana_cost",
    "get_mana_colors",
    "get_mana_value",
]
