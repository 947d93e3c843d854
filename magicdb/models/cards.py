"""
MagicDB card models.

Hierarchy:
- CardFace: one flat, named printed face
- CardBase: common fields of a published catalog entry
  - SingleFace: normal and leveler cards
  - TwoFace: split/flip/double-faced cards with one companion
  - ManyFace: printed groups of three or more names
  - Special: tokens, planes, schemes, phenomena and vanguards

All models are frozen. Linked entries hold the same CardFace instances,
so ``catalog["A"].other_face is catalog["B"].this_face``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from magicdb.constants import TYPE_LINE_SEPARATOR
from magicdb.consts.colors import Color
from magicdb.consts.layouts import LayoutVariant
from magicdb.models.mana import ManaCost, get_mana_value


# =============================================================================
# Extra info
# =============================================================================


class NoExtraInfo(BaseModel):
    """Neither power/toughness nor loyalty is printed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class PowerToughness(BaseModel):
    """Creature stats. Kept as text since printed values may be "*" or "1+*"."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["power_toughness"] = "power_toughness"
    power: str
    toughness: str


class StartingLoyalty(BaseModel):
    """Planeswalker starting loyalty."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loyalty"] = "loyalty"
    loyalty: int


ExtraInfo = Annotated[
    Union[NoExtraInfo, PowerToughness, StartingLoyalty],
    Field(discriminator="kind"),
]


# =============================================================================
# Faces
# =============================================================================


class CardFace(BaseModel):
    """The flat record built for every name in the document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    mana_cost: Optional[ManaCost] = Field(default=None, alias="manaCost")
    colors: Optional[Tuple[Color, ...]] = Field(default=None)

    supertypes: Optional[Tuple[str, ...]] = Field(default=None)
    types: Optional[Tuple[str, ...]] = Field(default=None)
    subtypes: Optional[Tuple[str, ...]] = Field(default=None)

    image_name: str = Field(alias="imageName")
    text: Optional[str] = Field(default=None)
    flavor_text: Optional[str] = Field(default=None, alias="flavorText")

    extra: ExtraInfo = Field(default_factory=NoExtraInfo)

    @property
    def mana_value(self) -> float:
        """Mana value of the face; a face without a cost has 0"""
        return get_mana_value(self.mana_cost or ())

    @property
    def type_line(self) -> str:
        """
        Rebuild the printed type line from its parts,
        e.g. "Legendary Creature — Spirit"
        """
        head = " ".join((self.supertypes or ()) + (self.types or ()))
        if not self.subtypes:
            return head
        return f"{head}{TYPE_LINE_SEPARATOR}{' '.join(self.subtypes)}"


# =============================================================================
# Published cards
# =============================================================================


class CardBase(BaseModel, ABC):
    """Fields shared by every published catalog entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    layout: LayoutVariant

    @property
    @abstractmethod
    def faces(self) -> Tuple[CardFace, ...]:
        """Every face of the card, the one it is stored under first."""

    @property
    def name(self) -> str:
        return self.faces[0].name


class SingleFace(CardBase):
    kind: Literal["single"] = "single"
    face: CardFace

    @property
    def faces(self) -> Tuple[CardFace, ...]:
        return (self.face,)


class TwoFace(CardBase):
    """``this_face`` matches the catalog key, ``other_face`` is its companion."""

    kind: Literal["two"] = "two"
    this_face: CardFace = Field(alias="thisFace")
    other_face: CardFace = Field(alias="otherFace")

    @property
    def faces(self) -> Tuple[CardFace, ...]:
        return (self.this_face, self.other_face)


class ManyFace(CardBase):
    """A group of three or more names printed as one card."""

    kind: Literal["many"] = "many"
    this_face: CardFace = Field(alias="thisFace")
    other_faces: Tuple[CardFace, ...] = Field(alias="otherFaces")

    @property
    def faces(self) -> Tuple[CardFace, ...]:
        return (self.this_face,) + self.other_faces


class Special(CardBase):
    """Non-playable layouts; no companion linking applies."""

    kind: Literal["special"] = "special"
    face: CardFace

    @property
    def faces(self) -> Tuple[CardFace, ...]:
        return (self.face,)


Card = Annotated[
    Union[SingleFace, TwoFace, ManyFace, Special],
    Field(discriminator="kind"),
]
