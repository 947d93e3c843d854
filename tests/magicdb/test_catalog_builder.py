"""
Tests for magicdb/catalog_builder.py

Covers:
- Two pass loading of a full document (load_from_json)
- Multi-face linking and face sharing (resolve_layouts, link_face_group)
- names / layout validation
- Fail-fast error reporting
- Text and stream entry points (load_from_str, load_from_reader)
"""

import io
import json
import logging

import pytest

from magicdb import catalog_builder
from magicdb.consts import Color, LayoutVariant
from magicdb.errors import (
    InvalidCardObjectError,
    InvalidFieldError,
    JsonDecodeError,
    NamedCardError,
    NoFieldError,
    NoTopLevelObjectError,
)
from magicdb.models import (
    Colored,
    Colorless,
    ManyFace,
    SingleFace,
    Special,
    TwoFace,
)


# =============================================================================
# Loading the sample catalog
# =============================================================================


class TestLoadSampleCatalog:
    """Test suite for loading a well-formed document."""

    def test_every_entry_published(self, sample_cards):
        catalog = catalog_builder.load_from_json(sample_cards)

        assert set(catalog) == set(sample_cards)

    def test_normal_cards_are_single_face(self, sample_cards):
        """
        Test normal cards reflect their input fields exactly.

        Given: The sample catalog
        When: load_from_json is called
        Then: Every normal card is a SingleFace whose colors and mana cost
              are present exactly when the input has them
        """
        catalog = catalog_builder.load_from_json(sample_cards)

        for card_name, card_obj in sample_cards.items():
            if card_obj["layout"] != "normal":
                continue

            card = catalog[card_name]
            assert isinstance(card, SingleFace)
            assert card.layout is LayoutVariant.NORMAL
            assert (card.face.mana_cost is None) == ("manaCost" not in card_obj)
            assert (card.face.colors is None) == ("colors" not in card_obj)

    def test_air_elemental(self, sample_cards):
        face = catalog_builder.load_from_json(sample_cards)["Air Elemental"].face

        assert face.mana_cost == (
            Colorless(amount=3),
            Colored(color=Color.BLUE),
            Colored(color=Color.BLUE),
        )
        assert face.colors == (Color.BLUE,)

    def test_token_is_special(self, sample_cards):
        card = catalog_builder.load_from_json(sample_cards)["Soldier"]

        assert isinstance(card, Special)
        assert card.layout is LayoutVariant.TOKEN
        assert card.name == "Soldier"

    def test_summary(self, sample_cards):
        catalog = catalog_builder.load_from_json(sample_cards)

        assert catalog_builder.summarize_catalog(catalog) == {
            "single": 4,
            "two": 4,
            "many": 0,
            "special": 1,
        }


# =============================================================================
# Multi-face linking
# =============================================================================


class TestTwoFaceLinking:
    """Test suite for split, flip and double-faced pairs."""

    @pytest.mark.parametrize(
        "first,second,layout",
        [
            ("Budoka Pupil", "Ichiga, Who Topples Oaks", LayoutVariant.FLIP),
            ("Fire", "Ice", LayoutVariant.SPLIT),
        ],
    )
    def test_pair_is_symmetric(self, sample_cards, first, second, layout):
        catalog = catalog_builder.load_from_json(sample_cards)

        first_card = catalog[first]
        second_card = catalog[second]

        assert isinstance(first_card, TwoFace)
        assert isinstance(second_card, TwoFace)
        assert first_card.layout is layout
        assert second_card.layout is layout
        assert first_card.this_face.name == first
        assert first_card.other_face.name == second
        assert second_card.this_face.name == second
        assert second_card.other_face.name == first

    def test_faces_are_shared_not_copied(self, sample_cards):
        """
        Test both entries of a pair point at the same face instances.

        Given: A flip pair A <-> B
        When: The catalog is loaded
        Then: B's face reachable from A is the very object stored as B's
              own face, and the other way around
        """
        catalog = catalog_builder.load_from_json(sample_cards)

        pupil = catalog["Budoka Pupil"]
        ichiga = catalog["Ichiga, Who Topples Oaks"]

        assert pupil.other_face is ichiga.this_face
        assert ichiga.other_face is pupil.this_face

    def test_faces_come_from_first_pass(self, sample_cards):
        faces = catalog_builder.build_face_table(sample_cards)
        catalog = catalog_builder.resolve_layouts(sample_cards, faces)

        assert catalog["Fire"].this_face is faces["Fire"]
        assert catalog["Fire"].other_face is faces["Ice"]
        assert catalog["Air Elemental"].face is faces["Air Elemental"]

    def test_companion_defined_before_card(self, make_card):
        document = {
            "Ice": make_card("Ice", "split", names=["Fire", "Ice"]),
            "Fire": make_card("Fire", "split", names=["Fire", "Ice"]),
        }

        catalog = catalog_builder.load_from_json(document)

        assert catalog["Ice"].other_face is catalog["Fire"].this_face
        assert catalog["Fire"].other_face is catalog["Ice"].this_face

    def test_double_faced(self, make_card):
        document = {
            "Delver of Secrets": make_card(
                "Delver of Secrets",
                "double-faced",
                names=["Delver of Secrets", "Insectile Aberration"],
            ),
            "Insectile Aberration": make_card(
                "Insectile Aberration",
                "double-faced",
                names=["Delver of Secrets", "Insectile Aberration"],
            ),
        }

        catalog = catalog_builder.load_from_json(document)

        assert catalog["Delver of Secrets"].layout is LayoutVariant.DOUBLE_FACED
        assert catalog["Insectile Aberration"].faces[1].name == "Delver of Secrets"


class TestManyFaceLinking:
    """Test suite for groups of three or more names."""

    @pytest.fixture
    def three_part_document(self, make_card):
        names = ["Who", "What", "When"]
        return {name: make_card(name, "split", names=list(names)) for name in names}

    def test_every_member_is_many_face(self, three_part_document):
        catalog = catalog_builder.load_from_json(three_part_document)

        for name in three_part_document:
            assert isinstance(catalog[name], ManyFace)
            assert catalog[name].this_face.name == name

    def test_other_faces_in_source_order(self, three_part_document):
        catalog = catalog_builder.load_from_json(three_part_document)

        assert [face.name for face in catalog["What"].other_faces] == ["Who", "When"]
        assert [face.name for face in catalog["Who"].faces] == ["Who", "What", "When"]

    def test_faces_shared_across_group(self, three_part_document):
        catalog = catalog_builder.load_from_json(three_part_document)

        who = catalog["Who"].this_face
        for name in ("What", "When"):
            assert any(face is who for face in catalog[name].other_faces)

    def test_member_disagreeing_on_group(self, three_part_document):
        three_part_document["When"]["names"] = ["When", "Who"]

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(three_part_document)

        assert excinfo.value.card_name == "When"
        assert excinfo.value.error == InvalidFieldError("names")


# =============================================================================
# names / layout validation
# =============================================================================


class TestNamesValidation:
    """Test suite for rejected names lists."""

    @pytest.mark.parametrize(
        "names",
        [
            pytest.param(["Ice", "Ice"], id="other-name-twice"),
            pytest.param(["Fire", "Fire"], id="own-name-twice"),
            pytest.param(["Fire"], id="too-short"),
            pytest.param([], id="empty"),
            pytest.param(["Ice", "Steam"], id="own-name-missing"),
            pytest.param(["Fire", "Ice", "Ice"], id="duplicate-companion"),
            pytest.param(["Fire", "Ghost"], id="dangling-companion"),
        ],
    )
    def test_rejected(self, make_card, names):
        document = {
            "Fire": make_card("Fire", "split", names=names),
            "Ice": make_card("Ice", "split", names=["Fire", "Ice"]),
        }

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(document)

        assert excinfo.value.card_name == "Fire"
        assert excinfo.value.error == InvalidFieldError("names")

    def test_dangling_companion_raised_not_warned(self, make_card, caplog):
        document = {"Fire": make_card("Fire", "split", names=["Fire", "Ghost"])}

        with caplog.at_level(logging.DEBUG, logger="magicdb.catalog_builder"):
            with pytest.raises(NamedCardError):
                catalog_builder.load_from_json(document)

        assert "Ghost" in caplog.text
        assert not [record for record in caplog.records if record.levelno >= logging.WARNING]

    def test_names_required_for_multi_face(self, make_card):
        document = {"Fire": make_card("Fire", "split")}

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(document)

        assert excinfo.value.error == NoFieldError("names")

    def test_names_ignored_for_single_face(self, make_card):
        document = {"Forest": make_card("Forest", names=["Forest", "Ghost"])}

        catalog = catalog_builder.load_from_json(document)

        assert isinstance(catalog["Forest"], SingleFace)

    def test_companion_published_as_normal_first(self, make_card):
        document = {
            "Ice": make_card("Ice"),
            "Fire": make_card("Fire", "split", names=["Fire", "Ice"]),
        }

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(document)

        assert excinfo.value.card_name == "Fire"
        assert excinfo.value.field == "names"

    def test_companion_published_as_normal_later(self, make_card):
        document = {
            "Fire": make_card("Fire", "split", names=["Fire", "Ice"]),
            "Ice": make_card("Ice"),
        }

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(document)

        assert excinfo.value.card_name == "Ice"
        assert excinfo.value.field == "layout"

    def test_companion_with_different_layout(self, make_card):
        document = {
            "Fire": make_card("Fire", "split", names=["Fire", "Ice"]),
            "Ice": make_card("Ice", "flip", names=["Fire", "Ice"]),
        }

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(document)

        assert excinfo.value.card_name == "Ice"
        assert excinfo.value.error == InvalidFieldError("layout")


class TestLayoutValidation:
    """Test suite for the layout field."""

    @pytest.mark.parametrize(
        "layout,expected_type",
        [
            ("normal", SingleFace),
            ("leveler", SingleFace),
            ("token", Special),
            ("plane", Special),
            ("scheme", Special),
            ("phenomenon", Special),
            ("vanguard", Special),
        ],
    )
    def test_single_record_layouts(self, make_card, layout, expected_type):
        catalog = catalog_builder.load_from_json({"Card": make_card("Card", layout)})

        assert type(catalog["Card"]) is expected_type
        assert catalog["Card"].layout.value == layout

    @pytest.mark.parametrize("layout", ["meld", "Normal", "double_faced", ""])
    def test_unknown_layout(self, make_card, layout):
        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json({"Card": make_card("Card", layout)})

        assert excinfo.value.error == InvalidFieldError("layout")

    def test_missing_layout(self, make_card):
        card_obj = make_card("Card")
        del card_obj["layout"]

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json({"Card": card_obj})

        assert excinfo.value.error == NoFieldError("layout")


# =============================================================================
# Structural errors and fail-fast behaviour
# =============================================================================


class TestLoadErrors:
    """Test suite for whole-document failures."""

    @pytest.mark.parametrize("document", [[], [{"name": "Forest"}], "Forest", 3, None])
    def test_top_level_not_an_object(self, document):
        with pytest.raises(NoTopLevelObjectError):
            catalog_builder.load_from_json(document)

    def test_entry_not_an_object(self, sample_cards):
        sample_cards["Forest"] = ["Forest"]

        with pytest.raises(InvalidCardObjectError) as excinfo:
            catalog_builder.load_from_json(sample_cards)

        assert excinfo.value.card_name == "Forest"

    def test_one_invalid_card_fails_whole_load(self, sample_cards):
        """
        Test no partial catalog is returned.

        Given: A document with several valid cards and one broken mana cost
        When: load_from_json is called
        Then: Raises NamedCardError naming the broken card
        """
        sample_cards["Ashiok, Nightmare Weaver"]["manaCost"] = "{1}{U}{Q}"

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(sample_cards)

        assert excinfo.value.card_name == "Ashiok, Nightmare Weaver"
        assert excinfo.value.error == InvalidFieldError("manaCost")

    def test_first_pass_errors_win(self, sample_cards):
        # Layout error on an earlier entry, field error on a later one
        sample_cards["Air Elemental"]["layout"] = "meld"
        del sample_cards["Soldier"]["imageName"]

        with pytest.raises(NamedCardError) as excinfo:
            catalog_builder.load_from_json(sample_cards)

        assert excinfo.value.card_name == "Soldier"


# =============================================================================
# Entry points
# =============================================================================


class TestEntryPoints:
    """Test suite for load_from_str and load_from_reader."""

    def test_load_from_str(self, sample_cards):
        catalog = catalog_builder.load_from_str(json.dumps(sample_cards))

        assert catalog == catalog_builder.load_from_json(sample_cards)

    def test_load_from_bytes(self, sample_cards):
        catalog = catalog_builder.load_from_str(json.dumps(sample_cards).encode("utf-8"))

        assert len(catalog) == len(sample_cards)

    def test_load_from_binary_reader(self, sample_cards_path):
        with sample_cards_path.open("rb") as catalog_file:
            catalog = catalog_builder.load_from_reader(catalog_file)

        assert isinstance(catalog["Ice"], TwoFace)

    def test_load_from_text_reader(self, sample_cards):
        catalog = catalog_builder.load_from_reader(io.StringIO(json.dumps(sample_cards)))

        assert catalog["Little Girl"].face.mana_value == 0.5

    @pytest.mark.parametrize("text", ["{", "", "{'Forest': {}}", "[1, 2,]"])
    def test_invalid_json(self, text):
        with pytest.raises(JsonDecodeError) as excinfo:
            catalog_builder.load_from_str(text)

        assert excinfo.value.__cause__ is excinfo.value.error

    def test_array_text(self):
        with pytest.raises(NoTopLevelObjectError):
            catalog_builder.load_from_str("[]")
