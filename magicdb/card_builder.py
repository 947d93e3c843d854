"""
MagicDB Card Record Builder
"""

import logging
from typing import List, Optional, Tuple

from .constants import MANA_COST_FIELD
from .consts.colors import Color, color_from_name
from .errors import CardFieldError, InvalidFieldError, NamedCardError
from .field_reader import (
    JsonObject,
    read_integer,
    read_optional,
    read_string,
    read_string_array,
)
from .mana_parser import parse_mana_cost
from .models.cards import (
    CardFace,
    ExtraInfo,
    NoExtraInfo,
    PowerToughness,
    StartingLoyalty,
)
from .models.mana import ManaSymbolBase

LOGGER = logging.getLogger(__name__)


def parse_colors(color_names: List[str]) -> Tuple[Color, ...]:
    """
    Map color names to Colors, case-insensitively
    :param color_names: Names from the "colors" field
    :return: Colors in source order
    :raises InvalidFieldError: Any name is not one of the five colors
    """
    colors: List[Color] = []
    for color_name in color_names:
        color = color_from_name(color_name)
        if color is None:
            raise InvalidFieldError("colors")
        colors.append(color)

    return tuple(colors)


def read_mana_cost(card_obj: JsonObject) -> Optional[Tuple[ManaSymbolBase, ...]]:
    """Parse the optional "manaCost" field"""
    mana_cost = read_optional(read_string, card_obj, MANA_COST_FIELD)
    if mana_cost is None:
        return None
    return parse_mana_cost(mana_cost)


def read_colors(card_obj: JsonObject) -> Optional[Tuple[Color, ...]]:
    """Parse the optional "colors" field"""
    color_names = read_optional(read_string_array, card_obj, "colors")
    if color_names is None:
        return None
    return parse_colors(color_names)


def read_extra_info(card_obj: JsonObject) -> ExtraInfo:
    """
    Power/toughness wins over loyalty. Once power is present,
    toughness is required.
    :param card_obj: Card JSON object
    :return: Extra info of the face
    """
    power = read_optional(read_string, card_obj, "power")
    if power is not None:
        return PowerToughness(power=power, toughness=read_string(card_obj, "toughness"))

    loyalty = read_optional(read_integer, card_obj, "loyalty")
    if loyalty is not None:
        return StartingLoyalty(loyalty=loyalty)

    return NoExtraInfo()


def read_string_tuple(card_obj: JsonObject, field: str) -> Optional[Tuple[str, ...]]:
    """Read an optional string array field as a tuple"""
    values = read_optional(read_string_array, card_obj, field)
    return tuple(values) if values is not None else None


def build_card_face(card_obj: JsonObject, card_name: str) -> CardFace:
    """
    Build the flat face record for one catalog entry
    :param card_obj: Card JSON object
    :param card_name: Catalog key of the entry, used to name errors
    :return: Immutable face record
    :raises NamedCardError: Any field is missing or malformed
    """
    try:
        return CardFace(
            name=read_string(card_obj, "name"),
            mana_cost=read_mana_cost(card_obj),
            colors=read_colors(card_obj),
            supertypes=read_string_tuple(card_obj, "supertypes"),
            types=read_string_tuple(card_obj, "types"),
            subtypes=read_string_tuple(card_obj, "subtypes"),
            image_name=read_string(card_obj, "imageName"),
            text=read_optional(read_string, card_obj, "text"),
            flavor_text=read_optional(read_string, card_obj, "flavorText"),
            extra=read_extra_info(card_obj),
        )
    except CardFieldError as error:
        LOGGER.debug(f"Unable to build {card_name}: {error}")
        raise NamedCardError(card_name, error) from error
