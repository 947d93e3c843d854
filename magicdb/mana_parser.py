"""
MagicDB Mana Cost Parser

Turns printed mana costs such as "{3}{U}{U}", "{W/U}", "{2/W}", "{HW}",
"{W/P}" or "{X}" into mana symbols with a single left-to-right scan.

The scan is a finite-state machine. Between characters it carries:
- the fragment state (outside braces, inside empty braces, or inside braces
  holding a partial symbol),
- the partial symbol itself,
- a half flag ("H" seen, waiting for a color),
- whether that "H" was seen in the fragment still open,
- a split flag ("/" seen, waiting for the second half of a hybrid).
Every transition depends only on that state and the current character.
"""

import logging
from enum import Enum
from typing import List, NoReturn, Optional, Tuple

from . import constants
from .consts.colors import Color, color_from_symbol
from .errors import InvalidFieldError
from .models.mana import (
    Arbitrary,
    Colored,
    Colorless,
    ColorlessHybrid,
    Half,
    Hybrid,
    ManaSymbolBase,
    PhyrexianHybrid,
)

LOGGER = logging.getLogger(__name__)

DIGITS = "0123456789"


class TokenizerState(Enum):
    """Where the scan is relative to the current {...} fragment."""

    IDLE = "idle"
    OPEN_EMPTY = "open_empty"
    OPEN_WITH_SYMBOL = "open_with_symbol"


class ManaCostTokenizer:
    """
    Character-at-a-time mana cost scanner.

    Feed characters with feed(), then call finish() to get the symbols.
    Any illegal transition raises InvalidFieldError("manaCost").
    """

    state: TokenizerState
    partial: Optional[ManaSymbolBase]
    is_half: bool
    half_in_fragment: bool
    is_split: bool
    symbols: List[ManaSymbolBase]

    def __init__(self) -> None:
        self.state = TokenizerState.IDLE
        self.partial = None
        self.is_half = False
        self.half_in_fragment = False
        self.is_split = False
        self.symbols = []

    def feed(self, char: str) -> None:
        """
        Advance the machine by one character (case-insensitive)
        :param char: Next character of the cost
        """
        char = char.upper()

        if char == "{":
            self._open_fragment()
        elif char == "}":
            self._close_fragment()
        elif char == "H":
            self._start_half()
        elif char == "/":
            self._start_split()
        elif char == "P":
            self._add_phyrexian()
        elif char in constants.ARBITRARY_MANA_LETTERS:
            self._add_arbitrary(constants.ARBITRARY_MANA_LETTERS.index(char))
        elif char in DIGITS:
            self._add_digit(int(char))
        else:
            color = color_from_symbol(char)
            if color is None:
                self._fail()
            self._add_color(color)

    def finish(self) -> List[ManaSymbolBase]:
        """
        End of input. Unterminated fragments and dangling half markers are errors.
        :return: Symbols in printed order
        """
        if self.state is not TokenizerState.IDLE or self.is_half:
            self._fail()
        return self.symbols

    def _open_fragment(self) -> None:
        if self.state is not TokenizerState.IDLE:
            self._fail()
        self.state = TokenizerState.OPEN_EMPTY
        self.half_in_fragment = False

    def _close_fragment(self) -> None:
        if self.state is TokenizerState.OPEN_WITH_SYMBOL and not self.is_split:
            self.symbols.append(self.partial)
            self.state = TokenizerState.IDLE
            self.partial = None
            self.is_half = False
            self.is_split = False
        elif self.state is TokenizerState.OPEN_EMPTY and self.half_in_fragment:
            # "{H}{W}": the half marker carries over to the next fragment
            self.state = TokenizerState.IDLE
        else:
            self._fail()

    def _start_half(self) -> None:
        if self.state is not TokenizerState.OPEN_EMPTY or self.is_half:
            self._fail()
        self.is_half = True
        self.half_in_fragment = True

    def _start_split(self) -> None:
        if (
            self.state is not TokenizerState.OPEN_WITH_SYMBOL
            or self.is_split
            or not isinstance(self.partial, (Colored, Colorless))
        ):
            self._fail()
        self.is_split = True

    def _add_color(self, color: Color) -> None:
        if self.state is TokenizerState.OPEN_EMPTY:
            if self.is_half:
                self.is_half = False
                self._set_partial(Half(color=color))
            else:
                self._set_partial(Colored(color=color))
        elif self.state is TokenizerState.OPEN_WITH_SYMBOL and self.is_split:
            if isinstance(self.partial, Colored):
                self._set_partial(Hybrid(first=self.partial.color, second=color))
            elif isinstance(self.partial, Colorless):
                self._set_partial(
                    ColorlessHybrid(amount=self.partial.amount, color=color)
                )
            else:
                self._fail()
            self.is_split = False
        else:
            self._fail()

    def _add_phyrexian(self) -> None:
        if (
            self.state is not TokenizerState.OPEN_WITH_SYMBOL
            or not self.is_split
            or not isinstance(self.partial, Colored)
        ):
            self._fail()
        self.is_split = False
        self._set_partial(PhyrexianHybrid(color=self.partial.color))

    def _add_arbitrary(self, arbitrary_id: int) -> None:
        if self.state is not TokenizerState.OPEN_EMPTY or self.is_half:
            self._fail()
        self._set_partial(Arbitrary(id=arbitrary_id))

    def _add_digit(self, digit: int) -> None:
        if self.state is TokenizerState.OPEN_EMPTY and not self.is_half:
            self._set_partial(Colorless(amount=digit))
        elif (
            self.state is TokenizerState.OPEN_WITH_SYMBOL
            and not self.is_split
            and isinstance(self.partial, Colorless)
        ):
            self._set_partial(Colorless(amount=self.partial.amount * 10 + digit))
        else:
            self._fail()

    def _set_partial(self, symbol: ManaSymbolBase) -> None:
        self.partial = symbol
        self.state = TokenizerState.OPEN_WITH_SYMBOL

    @staticmethod
    def _fail() -> NoReturn:
        raise InvalidFieldError(constants.MANA_COST_FIELD)


def parse_mana_cost(mana_cost: str) -> Tuple[ManaSymbolBase, ...]:
    """
    Parse a printed mana cost
    :param mana_cost: Mana cost string, e.g. "{2}{W/U}"
    :return: Mana symbols in printed order
    :raises InvalidFieldError: The string is not a well-formed mana cost
    """
    tokenizer = ManaCostTokenizer()
    try:
        for char in mana_cost:
            tokenizer.feed(char)
        return tuple(tokenizer.finish())
    except InvalidFieldError:
        LOGGER.debug(f"Unable to parse mana cost {mana_cost!r}")
        raise
