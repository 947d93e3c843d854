"""
Mana symbol models.

Every symbol is a frozen pydantic model tagged by ``kind``; ``ManaSymbol`` is
the discriminated union of all of them and ``ManaCost`` an ordered tuple of
symbols as printed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Iterable, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from magicdb.constants import ARBITRARY_MANA_LETTERS
from magicdb.consts.colors import COLOR_ORDER, Color


class ManaSymbolBase(BaseModel, ABC):
    """Behaviour shared by all mana symbols."""

    model_config = ConfigDict(frozen=True)

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Canonical text of the symbol, braces included."""

    @property
    def mana_value(self) -> float:
        """Contribution of the symbol to a card's mana value."""
        return 1.0

    @property
    def colors(self) -> Tuple[Color, ...]:
        """Colors this symbol can be paid with."""
        return ()

    def __str__(self) -> str:
        return self.symbol


class Colored(ManaSymbolBase):
    """One mana of a single color, e.g. {U}"""

    kind: Literal["colored"] = "colored"
    color: Color

    @property
    def symbol(self) -> str:
        return f"{{{self.color.symbol}}}"

    @property
    def colors(self) -> Tuple[Color, ...]:
        return (self.color,)


class Colorless(ManaSymbolBase):
    """A generic amount, e.g. {3} or {16}"""

    kind: Literal["colorless"] = "colorless"
    amount: int = Field(ge=0)

    @property
    def symbol(self) -> str:
        return f"{{{self.amount}}}"

    @property
    def mana_value(self) -> float:
        return float(self.amount)


class Arbitrary(ManaSymbolBase):
    """
    An unbound variable cost: X, Y or Z (ids 0, 1 and 2).
    What the variable resolves to is decided when the spell is cast.
    """

    kind: Literal["arbitrary"] = "arbitrary"
    id: int = Field(ge=0, le=len(ARBITRARY_MANA_LETTERS) - 1)

    @property
    def letter(self) -> str:
        return ARBITRARY_MANA_LETTERS[self.id]

    @property
    def symbol(self) -> str:
        return f"{{{self.letter}}}"

    @property
    def mana_value(self) -> float:
        return 0.0


class Hybrid(ManaSymbolBase):
    """Payable by either of two colors (Manamorphose), e.g. {R/G}"""

    kind: Literal["hybrid"] = "hybrid"
    first: Color
    second: Color

    @property
    def symbol(self) -> str:
        return f"{{{self.first.symbol}/{self.second.symbol}}}"

    @property
    def colors(self) -> Tuple[Color, ...]:
        return (self.first, self.second)


class ColorlessHybrid(ManaSymbolBase):
    """Payable by a generic amount or one colored mana (Spectral Procession), e.g. {2/W}"""

    kind: Literal["colorless_hybrid"] = "colorless_hybrid"
    amount: int = Field(ge=0)
    color: Color

    @property
    def symbol(self) -> str:
        return f"{{{self.amount}/{self.color.symbol}}}"

    @property
    def mana_value(self) -> float:
        # Higher of the two halves counts
        return float(max(self.amount, 1))

    @property
    def colors(self) -> Tuple[Color, ...]:
        return (self.color,)


class PhyrexianHybrid(ManaSymbolBase):
    """Payable by one colored mana or 2 life, e.g. {W/P}"""

    kind: Literal["phyrexian"] = "phyrexian"
    color: Color

    @property
    def symbol(self) -> str:
        return f"{{{self.color.symbol}/P}}"

    @property
    def colors(self) -> Tuple[Color, ...]:
        return (self.color,)


class Half(ManaSymbolBase):
    """Half of one colored mana (Little Girl), e.g. {HW}"""

    kind: Literal["half"] = "half"
    color: Color

    @property
    def symbol(self) -> str:
        return f"{{H{self.color.symbol}}}"

    @property
    def mana_value(self) -> float:
        return 0.5

    @property
    def colors(self) -> Tuple[Color, ...]:
        return (self.color,)


ManaSymbol = Annotated[
    Union[
        Colored,
        Colorless,
        Arbitrary,
        Hybrid,
        ColorlessHybrid,
        PhyrexianHybrid,
        Half,
    ],
    Field(discriminator="kind"),
]

ManaCost = Tuple[ManaSymbol, ...]


def format_mana_cost(mana_cost: Iterable[ManaSymbolBase]) -> str:
    """
    Render a parsed cost back to its printed form
    :param mana_cost: Symbols in printed order
    :return: Mana cost string, e.g. "{3}{U}{U}"
    """
    return "".join(symbol.symbol for symbol in mana_cost)


def get_mana_value(mana_cost: Iterable[ManaSymbolBase]) -> float:
    """
    Total mana value of a cost. Variable costs count as zero,
    half mana as 0.5 and hybrid symbols use their higher half.
    :param mana_cost: Symbols to total
    :return: Mana value
    """
    return sum((symbol.mana_value for symbol in mana_cost), 0.0)


def get_mana_colors(mana_cost: Iterable[ManaSymbolBase]) -> List[Color]:
    """
    Colors referenced by a cost
    :param mana_cost: Symbols to inspect
    :return: Distinct colors, in WUBRG order
    """
    found = {color for symbol in mana_cost for color in symbol.colors}
    return [color for color in COLOR_ORDER if color in found]
