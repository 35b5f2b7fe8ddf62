"""
Tests for generation provenance and hand edits.
"""

import json

import pytest

from starforge.data_models import StarClass
from starforge.errors import InvalidParameterError
from starforge.provenance import Custom, GenerationMethod, Procedural, mark_custom, override_field
from starforge.stars import generate_primary
from tests.helpers import scripted_dice


class TestMarkCustom:
    """Deriving Custom provenance."""

    def test_from_procedural(self):
        custom = mark_custom(Procedural({"a": 3, "b": 5}), overridden=("a",), cleared=("a",))
        assert custom.method == GenerationMethod.CUSTOM
        assert custom.overridden_fields == ("a",)
        assert dict(custom.rolls) == {"b": 5}

    def test_merges_new_rolls(self):
        custom = mark_custom(Procedural({"a": 3}), overridden=("a",), rolls={"a": 9})
        assert dict(custom.rolls) == {"a": 9}

    def test_accumulates_without_duplicates(self):
        first = mark_custom(Procedural({}), overridden=("a",))
        second = mark_custom(first, overridden=("b", "a"))
        assert second.overridden_fields == ("a", "b")

    def test_original_untouched(self):
        original = Procedural({"a": 3})
        mark_custom(original, overridden=("a",), cleared=("a",))
        assert dict(original.rolls) == {"a": 3}

    def test_to_dict(self):
        assert Procedural({"x": 7}).to_dict() == {"method": "procedural", "rolls": {"x": 7}}
        assert Custom(("x",), {}).to_dict() == {
            "method": "custom",
            "overridden_fields": ["x"],
            "rolls": {},
        }


class TestOverrideField:
    """override_field on generated records."""

    def _star(self):
        # class roll 7 (G), grade face 3 -> 2
        return generate_primary("s:primary", dice=scripted_dice(3, 4, 3))

    def test_generated_star_is_procedural(self):
        star = self._star()
        assert star.generation_method == GenerationMethod.PROCEDURAL
        assert star.rolls == {"star_class": 7, "grade": 2}

    def test_override_clears_only_that_roll(self):
        star = override_field(self._star(), "name", "Vega")
        assert star.name == "Vega"
        assert star.generation_method == GenerationMethod.CUSTOM
        assert star.provenance.overridden_fields == ("name",)
        assert star.rolls == {"star_class": 7, "grade": 2}

    def test_override_with_roll_key(self):
        star = override_field(self._star(), "grade", 5, roll_key="grade")
        assert star.grade == 5
        assert star.rolls == {"star_class": 7}

    def test_unknown_field_rejected(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            override_field(self._star(), "colour", "red")
        assert exc_info.value.field == "field_name"

    def test_provenance_field_rejected(self):
        with pytest.raises(InvalidParameterError):
            override_field(self._star(), "provenance", Procedural())

    def test_non_record_rejected(self):
        with pytest.raises(InvalidParameterError):
            override_field({"name": "x"}, "name", "y")

    def test_caller_supplied_values_are_custom(self):
        star = generate_primary("s:primary", star_class=StarClass.K, grade=4)
        assert star.generation_method == GenerationMethod.CUSTOM
        assert star.provenance.overridden_fields == ("star_class", "grade")
        assert star.rolls == {}

    def test_record_serializes_method(self):
        data = self._star().to_dict()
        assert data["generation_method"] == "procedural"
        assert data["star_class"] == "G"
        assert data["provenance"]["rolls"] == {"star_class": 7, "grade": 2}
        json.dumps(data)
