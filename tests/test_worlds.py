"""
Tests for the primary world generator.
"""

from dataclasses import replace

import pytest

from starforge.data_models import (
    Atmosphere,
    BiochemicalResources,
    DwarfComposition,
    HabitabilityRating,
    HazardType,
    Temperature,
    WorldType,
)
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from starforge.provenance import GenerationMethod
from starforge.worlds import generate_world, override_world_field, validate_world
from tests.helpers import HABITAT_WORLD_TOTALS, TERRESTRIAL_WORLD_TOTALS, faces_2d6, scripted_dice


def terrestrial_world(tech_level=9):
    return generate_world("sys", tech_level, dice=scripted_dice(*faces_2d6(*TERRESTRIAL_WORLD_TOTALS)))


class TestGenerateWorld:
    """Scripted world generation."""

    def test_terrestrial(self):
        world = terrestrial_world()
        assert world.id == "sys:world"
        assert world.name == "Terrestrial 3"
        assert world.world_type == WorldType.TERRESTRIAL
        assert world.size_label == "Standard"
        assert world.mass == 1.0
        assert world.gravity == 1.0
        assert world.composition is None
        assert world.atmosphere == Atmosphere.STANDARD
        assert world.temperature == Temperature.TEMPERATE
        assert world.hazard_type == HazardType.VOLCANIC
        assert world.hazard_intensity == 3
        assert world.biochemical_resources == BiochemicalResources.RICH

    def test_terrestrial_score(self):
        # 2 + 2 - 0.5 - 1 + 1 + 0 + 1 (TL 9)
        world = terrestrial_world()
        assert world.habitability_score == pytest.approx(4.5)
        assert world.habitability_rating == HabitabilityRating.EXCELLENT

    def test_roll_order_recorded(self):
        assert list(terrestrial_world().rolls) == [
            "world_type",
            "size",
            "gravity",
            "atmosphere",
            "temperature",
            "hazard_type",
            "hazard_intensity",
            "biochemical_resources",
        ]

    def test_habitat_skips_gravity_and_intensity(self):
        dice = scripted_dice(*faces_2d6(*HABITAT_WORLD_TOTALS))
        world = generate_world("sys", 7, world_name="Ring", dice=dice)
        assert world.world_type == WorldType.HABITAT
        assert world.name == "Ring"
        assert world.gravity is None
        assert world.hazard_type == HazardType.NONE
        assert world.hazard_intensity is None
        assert "gravity" not in world.rolls
        assert "hazard_intensity" not in world.rolls
        assert world.habitability_score == -7
        assert world.habitability_rating == HabitabilityRating.HARSH
        assert dice._rng.remaining == 0

    def test_dwarf_has_composition(self):
        dice = scripted_dice(*faces_2d6(3, 7, 6, 10, 2, 4, 2, 6))
        world = generate_world("sys", 7, orbit_position=5, dice=dice)
        assert world.world_type == WorldType.DWARF
        assert world.name == "Lesser Earth 5"
        assert world.gravity == 0.08
        assert world.composition == DwarfComposition.CARBONACEOUS
        assert world.rolls["composition"] == 10

    def test_seeded_worlds_are_consistent(self):
        dice = DiceRoller(seed=11)
        for _ in range(300):
            world = generate_world("sys", 10, dice=dice)
            assert validate_world(world) == []
            assert world.generation_method == GenerationMethod.PROCEDURAL

    def test_same_seed_same_world(self):
        first = generate_world("sys", 8, dice=DiceRoller(seed=3))
        second = generate_world("sys", 8, dice=DiceRoller(seed=3))
        assert first.rolls == second.rolls
        assert first.habitability_score == second.habitability_score

    def test_advantage_rolls_stay_in_range(self):
        dice = DiceRoller(seed=5)
        for _ in range(50):
            world = generate_world("sys", 7, dice=dice, advantage=2)
            assert all(2 <= r <= 12 for r in world.rolls.values())

    @pytest.mark.parametrize("tech_level", [-1, 21, 7.5, None])
    def test_bad_tech_level(self, tech_level):
        with pytest.raises(InvalidParameterError) as exc_info:
            generate_world("sys", tech_level)
        assert exc_info.value.field == "tech_level"

    @pytest.mark.parametrize("orbit", [0, 21])
    def test_bad_orbit(self, orbit):
        with pytest.raises(InvalidParameterError):
            generate_world("sys", 7, orbit_position=orbit)

    def test_missing_system_id(self):
        with pytest.raises(InvalidParameterError):
            generate_world("", 7)


class TestOverrideWorldField:
    """Hand edits to a generated world."""

    def test_override_atmosphere_rescores(self):
        world = override_world_field(terrestrial_world(), "atmosphere", Atmosphere.NONE)
        # standard (+2) -> none (-3)
        assert world.habitability_score == pytest.approx(-0.5)
        assert world.habitability_rating == HabitabilityRating.MARGINAL
        assert world.generation_method == GenerationMethod.CUSTOM
        assert "atmosphere" not in world.rolls
        assert world.rolls["temperature"] == 7

    def test_clearing_hazard_drops_intensity(self):
        world = override_world_field(terrestrial_world(), "hazard_type", HazardType.NONE)
        assert world.hazard_intensity is None
        # hazard -0.5 and intensity -1 both gone
        assert world.habitability_score == pytest.approx(6.0)

    def test_clearing_hazard_drops_intensity_roll(self):
        world = override_world_field(terrestrial_world(), "hazard_type", HazardType.NONE)
        assert "hazard_type" not in world.rolls
        assert "hazard_intensity" not in world.rolls
        assert world.provenance.overridden_fields == ("hazard_type", "hazard_intensity")
        assert world.rolls["temperature"] == 7

    def test_tech_level_rescores(self):
        world = override_world_field(terrestrial_world(), "tech_level", 7)
        assert world.habitability_score == pytest.approx(3.5)

    def test_name_keeps_score(self):
        original = terrestrial_world()
        world = override_world_field(original, "name", "Kepler")
        assert world.name == "Kepler"
        assert world.habitability_score == original.habitability_score
        assert world.updated_at >= original.updated_at

    def test_bad_tech_level(self):
        with pytest.raises(InvalidParameterError):
            override_world_field(terrestrial_world(), "tech_level", 30)


class TestValidateWorld:
    """Consistency checks."""

    def test_habitat_with_gravity(self):
        world = replace(terrestrial_world(), world_type=WorldType.HABITAT)
        assert "Habitats use artificial gravity and carry no gravity value" in validate_world(world)

    def test_intensity_without_hazard(self):
        world = replace(terrestrial_world(), hazard_type=HazardType.NONE)
        assert "Hazard intensity requires a hazard" in validate_world(world)

    def test_missing_name(self):
        world = replace(terrestrial_world(), name="")
        assert "Missing world name" in validate_world(world)
