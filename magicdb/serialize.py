"""
Serialize a loaded catalog back into the MTGJSON card format
"""

from typing import Any, Dict, Mapping, Optional

import orjson

from .models.cards import (
    Card,
    CardFace,
    ManyFace,
    PowerToughness,
    StartingLoyalty,
    TwoFace,
)
from .models.mana import format_mana_cost
from .utils import to_camel_case

FACE_LIST_FIELDS = ("supertypes", "types", "subtypes")
FACE_TEXT_FIELDS = ("image_name", "text", "flavor_text")


def card_face_to_json(face: CardFace) -> Dict[str, Any]:
    """
    Convert a face to its JSON object, omitting absent fields
    :param face: Face to convert
    :return: JSON object with camelCase keys
    """
    face_json: Dict[str, Any] = {"name": face.name}

    if face.mana_cost is not None:
        face_json["manaCost"] = format_mana_cost(face.mana_cost)
    if face.colors is not None:
        face_json["colors"] = [color.value for color in face.colors]

    for key in FACE_LIST_FIELDS:
        values = getattr(face, key)
        if values is not None:
            face_json[key] = list(values)

    for key in FACE_TEXT_FIELDS:
        value = getattr(face, key)
        if value is not None:
            face_json[to_camel_case(key)] = value

    if isinstance(face.extra, PowerToughness):
        face_json["power"] = face.extra.power
        face_json["toughness"] = face.extra.toughness
    elif isinstance(face.extra, StartingLoyalty):
        face_json["loyalty"] = face.extra.loyalty

    return face_json


def index_face_keys(catalog: Mapping[str, Card]) -> Dict[int, str]:
    """
    Map every face to the catalog key it is stored under.
    Faces are shared by identity, so they are indexed by id().
    :param catalog: Loaded catalog
    :return: id(face) => catalog key
    """
    return {id(card.faces[0]): name for name, card in catalog.items()}


def card_to_json(
    card: Card, face_keys: Optional[Mapping[int, str]] = None
) -> Dict[str, Any]:
    """
    Convert a published card to its JSON object. Linked cards
    list every name of the group, their own name first.
    :param card: Card to convert
    :param face_keys: Catalog keys of the faces (see index_face_keys);
        without it, face names stand in for keys
    :return: JSON object, loadable again by the catalog builder
    """
    card_json = card_face_to_json(card.faces[0])
    card_json["layout"] = card.layout.value

    if isinstance(card, (TwoFace, ManyFace)):
        face_keys = face_keys or {}
        card_json["names"] = [face_keys.get(id(face), face.name) for face in card.faces]

    return card_json


def catalog_to_json(catalog: Mapping[str, Card]) -> Dict[str, Dict[str, Any]]:
    """
    Convert a whole catalog, sorted by card name
    :param catalog: Loaded catalog
    :return: Card name => card JSON object
    """
    face_keys = index_face_keys(catalog)
    return {name: card_to_json(catalog[name], face_keys) for name in sorted(catalog)}


def dump_catalog(catalog: Mapping[str, Card], pretty: bool = False) -> bytes:
    """
    Dump a catalog to JSON bytes
    :param catalog: Loaded catalog
    :param pretty: Indent the output
    :return: UTF-8 encoded JSON document
    """
    options = orjson.OPT_SORT_KEYS
    if pretty:
        options |= orjson.OPT_INDENT_2

    return orjson.dumps(catalog_to_json(catalog), option=options)
