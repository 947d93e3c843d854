"""
MagicDB, a typed loader for MTGJSON card catalogs
MIT License
"""

from .catalog_builder import (
    load_from_json,
    load_from_reader,
    load_from_str,
    summarize_catalog,
)
from .errors import (
    CardFieldError,
    CatalogBuildError,
    InvalidCardObjectError,
    InvalidFieldError,
    JsonDecodeError,
    NamedCardError,
    NoFieldError,
    NoTopLevelObjectError,
)

__all__ = [
    "CardFieldError",
    "CatalogBuildError",
    "InvalidCardObjectError",
    "InvalidFieldError",
    "JsonDecodeError",
    "NamedCardError",
    "NoFieldError",
    "NoTopLevelObjectError",
    "load_from_json",
    "load_from_reader",
    "load_from_str",
    "summarize_catalog",
]
