"""
MagicDB error taxonomy.

Field-level errors are raised by the field readers and the mana cost parser;
the card builder re-raises them wrapped with the name of the failing card.
"""

from __future__ import annotations

from typing import Any


class CardFieldError(Exception):
    """Raised when a single field of a card object cannot be read."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self.field == other.field

    def __hash__(self) -> int:
        return hash((type(self), self.field))


class NoFieldError(CardFieldError):
    """The field is absent from the card object."""

    def __init__(self, field: str):
        super().__init__(field, f"Missing field '{field}'")


class InvalidFieldError(CardFieldError):
    """The field is present but has the wrong shape or an illegal value."""

    def __init__(self, field: str):
        super().__init__(field, f"Invalid field '{field}'")


class CatalogBuildError(Exception):
    """Base class for every error that aborts a catalog load."""


class NoTopLevelObjectError(CatalogBuildError):
    """The root of the document is not a JSON object."""

    def __init__(self) -> None:
        super().__init__("Top level JSON value is not an object")


class InvalidCardObjectError(CatalogBuildError):
    """An entry of the document is not a JSON object."""

    def __init__(self, card_name: str):
        self.card_name = card_name
        super().__init__(f"Card entry '{card_name}' is not an object")


class NamedCardError(CatalogBuildError):
    """A field error, tagged with the card it was raised for."""

    def __init__(self, card_name: str, error: CardFieldError):
        self.card_name = card_name
        self.error = error
        super().__init__(f"{card_name}: {error}")

    @property
    def field(self) -> str:
        """Name of the field that failed"""
        return self.error.field


class JsonDecodeError(CatalogBuildError):
    """The document text could not be parsed as JSON."""

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"Unable to decode catalog JSON: {error}")
