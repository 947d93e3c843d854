"""
MagicDB Catalog Builder

Loading is done in two passes over the document:
1. every entry is built into a flat CardFace, keyed by its catalog name;
2. every entry's layout is classified and multi-face groups are linked,
   reusing the faces from the first pass.
A companion may be defined after the card naming it, so linking cannot
happen in the first pass. The first error in either pass aborts the load.
"""

import collections
import logging
from typing import IO, Any, Dict, FrozenSet, List, Mapping, Union

import orjson

from .card_builder import build_card_face
from .constants import LAYOUT_FIELD, NAMES_FIELD
from .consts.layouts import LayoutFamily, LayoutVariant, get_layout_family, parse_layout
from .errors import (
    CardFieldError,
    InvalidCardObjectError,
    InvalidFieldError,
    JsonDecodeError,
    NamedCardError,
    NoTopLevelObjectError,
)
from .field_reader import JsonObject, read_string, read_string_array
from .models.cards import Card, CardFace, ManyFace, SingleFace, Special, TwoFace

LOGGER = logging.getLogger(__name__)


def build_face_table(document: Mapping[str, Any]) -> Dict[str, CardFace]:
    """
    First pass: build a face for every entry, regardless of layout
    :param document: Card name => card JSON object
    :return: Card name => face
    """
    faces: Dict[str, CardFace] = {}
    for card_name, card_obj in document.items():
        if not isinstance(card_obj, dict):
            raise InvalidCardObjectError(card_name)
        faces[card_name] = build_card_face(card_obj, card_name)

    return faces


def read_layout(card_obj: JsonObject) -> LayoutVariant:
    """
    Read the required "layout" field
    :raises InvalidFieldError: The layout is not one of the known values
    """
    layout = parse_layout(read_string(card_obj, LAYOUT_FIELD))
    if layout is None:
        raise InvalidFieldError(LAYOUT_FIELD)
    return layout


def read_face_group(
    card_obj: JsonObject, card_name: str, faces: Mapping[str, CardFace]
) -> List[str]:
    """
    Read and validate the "names" list of a multi-face entry.
    The list must hold the card's own name exactly once, no other
    name twice, and only names defined in the document.
    :param card_obj: Card JSON object
    :param card_name: Catalog key of the entry
    :param faces: First pass face table
    :return: Every name of the printed card, in source order
    """
    names = read_string_array(card_obj, NAMES_FIELD)
    if len(names) < 2:
        raise InvalidFieldError(NAMES_FIELD)

    companions = [name for name in names if name != card_name]
    if len(companions) != len(names) - 1:
        raise InvalidFieldError(NAMES_FIELD)

    if len(set(companions)) != len(companions):
        raise InvalidFieldError(NAMES_FIELD)

    for companion in companions:
        if companion not in faces:
            LOGGER.debug(f"{card_name} names unknown companion {companion}")
            raise InvalidFieldError(NAMES_FIELD)

    return names


def link_face_group(
    layout: LayoutVariant, group: List[str], faces: Mapping[str, CardFace]
) -> Dict[str, Card]:
    """
    Build the published entry of every name in a multi-face group.
    Entries reference the first pass faces, never copies of them.
    :param layout: Layout of the group
    :param group: Every name of the printed card
    :param faces: First pass face table
    :return: Card name => card, for each group member
    """
    linked: Dict[str, Card] = {}
    for card_name in group:
        other_faces = tuple(faces[name] for name in group if name != card_name)
        if len(other_faces) == 1:
            linked[card_name] = TwoFace(
                layout=layout,
                this_face=faces[card_name],
                other_face=other_faces[0],
            )
        else:
            linked[card_name] = ManyFace(
                layout=layout,
                this_face=faces[card_name],
                other_faces=other_faces,
            )

    LOGGER.debug(f"Linked {layout.value} card {' // '.join(group)}")
    return linked


def resolve_layouts(
    document: Mapping[str, JsonObject], faces: Mapping[str, CardFace]
) -> Dict[str, Card]:
    """
    Second pass: classify every entry and link multi-face groups
    :param document: Card name => card JSON object
    :param faces: First pass face table
    :return: Card name => published card
    """
    catalog: Dict[str, Card] = {}
    groups: Dict[str, FrozenSet[str]] = {}

    for card_name, card_obj in document.items():
        try:
            layout = read_layout(card_obj)
            family = get_layout_family(layout)

            if card_name in catalog:
                # Already published as a companion of an earlier entry
                if family is not LayoutFamily.MULTI_FACE:
                    raise InvalidFieldError(LAYOUT_FIELD)
                if catalog[card_name].layout is not layout:
                    raise InvalidFieldError(LAYOUT_FIELD)
                group = read_face_group(card_obj, card_name, faces)
                if frozenset(group) != groups[card_name]:
                    raise InvalidFieldError(NAMES_FIELD)
                continue

            if family is LayoutFamily.SINGLE_FACE:
                catalog[card_name] = SingleFace(layout=layout, face=faces[card_name])
            elif family is LayoutFamily.SPECIAL:
                catalog[card_name] = Special(layout=layout, face=faces[card_name])
            else:
                group = read_face_group(card_obj, card_name, faces)
                if any(name in catalog for name in group):
                    raise InvalidFieldError(NAMES_FIELD)

                catalog.update(link_face_group(layout, group, faces))
                members = frozenset(group)
                groups.update({name: members for name in group})
        except CardFieldError as error:
            raise NamedCardError(card_name, error) from error

    return catalog


def summarize_catalog(catalog: Mapping[str, Card]) -> Dict[str, int]:
    """
    Count published entries per card family
    :param catalog: Loaded catalog
    :return: Family ("single", "two", "many", "special") => entry count
    """
    counts = collections.Counter(card.kind for card in catalog.values())
    return {kind: counts[kind] for kind in ("single", "two", "many", "special")}


def load_from_json(document: Any) -> Dict[str, Card]:
    """
    Build a catalog from an already parsed JSON document
    :param document: Card name => card JSON object
    :return: Card name => published card
    :raises CatalogBuildError: The document is not a valid catalog
    """
    if not isinstance(document, dict):
        raise NoTopLevelObjectError()

    LOGGER.info(f"Building catalog from {len(document)} entries")
    faces = build_face_table(document)
    catalog = resolve_layouts(document, faces)

    summary = ", ".join(f"{count} {kind}" for kind, count in summarize_catalog(catalog).items())
    LOGGER.info(f"Finished building catalog ({summary})")
    return catalog


def load_from_str(text: Union[str, bytes]) -> Dict[str, Card]:
    """
    Build a catalog from JSON text
    :param text: JSON document
    :return: Card name => published card
    :raises JsonDecodeError: The text is not valid JSON
    :raises CatalogBuildError: The document is not a valid catalog
    """
    try:
        document = orjson.loads(text)
    except orjson.JSONDecodeError as error:
        raise JsonDecodeError(error) from error

    return load_from_json(document)


def load_from_reader(reader: IO[Any]) -> Dict[str, Card]:
    """
    Build a catalog from a text or binary stream
    :param reader: Open file or stream holding the JSON document
    :return: Card name => published card
    """
    return load_from_str(reader.read())
