"""
Typed, presence-checked accessors over a parsed JSON card object
"""

from typing import Any, Callable, Dict, List, Optional, TypeVar

from .errors import InvalidFieldError, NoFieldError

T = TypeVar("T")

JsonObject = Dict[str, Any]


def read_string(card_obj: JsonObject, field: str) -> str:
    """
    Read a string field
    :param card_obj: Card JSON object
    :param field: Key to read
    :return: Field value
    :raises NoFieldError: Field is absent
    :raises InvalidFieldError: Field is not a string
    """
    if field not in card_obj:
        raise NoFieldError(field)

    value = card_obj[field]
    if not isinstance(value, str):
        raise InvalidFieldError(field)

    return value


def read_integer(card_obj: JsonObject, field: str) -> int:
    """
    Read an integer field. Booleans and floats are rejected.
    :param card_obj: Card JSON object
    :param field: Key to read
    :return: Field value
    :raises NoFieldError: Field is absent
    :raises InvalidFieldError: Field is not an integer
    """
    if field not in card_obj:
        raise NoFieldError(field)

    value = card_obj[field]
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(field)

    return value


def read_string_array(card_obj: JsonObject, field: str) -> List[str]:
    """
    Read an array of strings. A single non-string element fails the whole field.
    :param card_obj: Card JSON object
    :param field: Key to read
    :return: Field values, in source order
    :raises NoFieldError: Field is absent
    :raises InvalidFieldError: Field is not an array of strings
    """
    if field not in card_obj:
        raise NoFieldError(field)

    value = card_obj[field]
    if not isinstance(value, list):
        raise InvalidFieldError(field)

    if not all(isinstance(entry, str) for entry in value):
        raise InvalidFieldError(field)

    return list(value)


def read_optional(
    reader: Callable[[JsonObject, str], T], card_obj: JsonObject, field: str
) -> Optional[T]:
    """
    Run a reader, treating an absent field as None.
    A present but malformed field still raises InvalidFieldError.
    :param reader: One of the read_* functions
    :param card_obj: Card JSON object
    :param field: Key to read
    :return: Field value, or None if absent
    """
    try:
        return reader(card_obj, field)
    except NoFieldError:
        return None
