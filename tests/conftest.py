"""Pytest configuration and fixtures for MagicDB tests."""

import copy
import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "cards"


def load_fixture(name: str) -> Dict[str, Any]:
    """Load a JSON fixture file and return parsed data."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture(scope="session")
def sample_cards_path() -> Path:
    """Path of the sample catalog on disk."""
    return FIXTURES_DIR / "sample_cards.json"


@pytest.fixture
def sample_cards() -> Dict[str, Any]:
    """A fresh, mutable copy of the sample catalog document."""
    return copy.deepcopy(load_fixture("sample_cards"))


@pytest.fixture
def make_card() -> Callable[..., Dict[str, Any]]:
    """Factory for minimal valid card objects, with extra fields merged in."""

    def _make_card(name: str, layout: str = "normal", **fields: Any) -> Dict[str, Any]:
        card = {"name": name, "layout": layout, "imageName": name.lower()}
        card.update(fields)
        return card

    return _make_card
