"""
Tests for end-to-end star system generation and partial re-rolls.
"""

import json
import logging

import pytest

from starforge.culture import format_culture_traits
from starforge.data_models import BaseType, CultureCategory, PlanetType, StarClass
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from starforge.provenance import GenerationMethod
from starforge.secondary import validate_brown_dwarf, validate_disk, validate_moon, validate_planet
from starforge.system import (
    GenerationParams,
    generate_star_system,
    reroll_base,
    reroll_culture_category,
    reroll_planet,
)
from starforge.worlds import validate_world
from tests.helpers import faces_2d6, scripted_dice


def comparable(system):
    """to_dict() without the world's timestamps."""
    data = system.to_dict()
    data["world"].pop("created_at")
    data["world"].pop("updated_at")
    return data


def system_with_giant():
    for seed in range(100):
        system = generate_star_system(GenerationParams(star_system_id="g"), DiceRoller(seed=seed))
        giants = [p for p in system.planets if p.planet_type == PlanetType.GAS_GIANT and system.moons_of(p.id)]
        if giants:
            return system, giants[0]
    raise AssertionError("no seed produced a gas giant with moons")


class TestGenerateStarSystem:
    """Whole-system generation."""

    def test_world_carries_derived_values(self, seeded_system):
        world = seeded_system.world
        assert world.id == "tau-ceti:world"
        assert world.tech_level == 9
        assert world.population == seeded_system.inhabitants.population
        assert world.wealth == seeded_system.inhabitants.wealth
        assert world.starport_class == seeded_system.starport.starport_class
        assert world.port_value_score == seeded_system.starport.port_value_score
        assert world.development_level is not None
        assert list(world.cultural_traits) == format_culture_traits(seeded_system.culture.traits)
        assert world.generation_method == GenerationMethod.PROCEDURAL
        assert validate_world(world) == []

    def test_ids_derive_from_system_id(self, seeded_system):
        assert seeded_system.primary.id == "tau-ceti:primary"
        assert seeded_system.starport.world_id == "tau-ceti:world"
        assert seeded_system.culture.world_id == "tau-ceti:world"
        for body in seeded_system.disks + seeded_system.planets + seeded_system.brown_dwarfs:
            assert body.id.startswith("tau-ceti:")
            assert body.star_system_id == "tau-ceti"

    def test_zones_from_primary(self, seeded_system):
        assert seeded_system.zones.luminosity == seeded_system.primary.luminosity

    def test_secondary_bodies_valid(self, seeded_system):
        assert all(validate_disk(d) == [] for d in seeded_system.disks)
        assert all(validate_planet(p) == [] for p in seeded_system.planets)
        assert all(validate_moon(m) == [] for m in seeded_system.moons)
        assert all(validate_brown_dwarf(b) == [] for b in seeded_system.brown_dwarfs)
        assert len(seeded_system.brown_dwarfs) == 1 or seeded_system.orbits_exhausted

    def test_same_seed_same_system(self):
        params = GenerationParams(star_system_id="rep", tech_level=11)
        first = generate_star_system(params, DiceRoller(seed=99))
        second = generate_star_system(params, DiceRoller(seed=99))
        assert comparable(first) == comparable(second)

    def test_orbits_unique_across_seeds(self):
        for seed in range(1000):
            system = generate_star_system(GenerationParams(brown_dwarf_count=seed % 3), DiceRoller(seed=seed))
            orbits = system.occupied_orbits
            assert len(orbits) == len(set(orbits))
            assert all(1 <= o <= 20 for o in orbits)
            assert not system.orbits_exhausted
            assert len(system.planets) == system.rolls["planet_count"]

    def test_moons_belong_to_world_or_giants(self):
        for seed in range(200):
            system = generate_star_system(dice=DiceRoller(seed=seed))
            giant_ids = {p.id for p in system.planets if p.is_giant}
            for moon in system.moons:
                assert moon.parent_id == system.world.id or moon.parent_id in giant_ids
            assert len(system.moons_of(system.world.id)) == system.rolls["world_moon_count"]

    def test_supplied_star_and_world(self):
        params = GenerationParams(
            star_system_id="sol",
            star_class=StarClass.G,
            grade=2,
            star_name="Sol",
            world_name="Earth",
            orbit_position=3,
        )
        system = generate_star_system(params, DiceRoller(seed=1))
        assert system.primary.designation == "G2"
        assert system.primary.name == "Sol"
        assert system.world.name == "Earth"
        assert system.world.orbit_position == 3
        assert system.occupied_orbits.count(3) == 1

    def test_without_secondary_bodies(self):
        params = GenerationParams(include_secondary_bodies=False, brown_dwarf_count=2)
        system = generate_star_system(params, DiceRoller(seed=4))
        assert system.disks == system.planets == system.moons == system.brown_dwarfs == ()
        assert list(system.rolls) == ["companion_checks"]
        assert system.occupied_orbits == [system.world.orbit_position]

    def test_orbits_run_out(self, caplog):
        params = GenerationParams(brown_dwarf_count=20)
        with caplog.at_level(logging.WARNING, logger="starforge.system"):
            system = generate_star_system(params, DiceRoller(seed=2))
        assert system.orbits_exhausted
        assert system.occupied_orbits == list(range(1, 21))
        assert "Stopped adding" in caplog.text

    def test_json_output(self, seeded_system):
        data = json.loads(json.dumps(seeded_system.to_dict()))
        assert data["id"] == "tau-ceti"
        assert data["world"]["generation_method"] == "procedural"
        assert data["system_type"] in ("single", "binary", "trinary", "quaternary")
        assert data["occupied_orbits"] == sorted(data["occupied_orbits"])

    @pytest.mark.parametrize("params", [
        GenerationParams(tech_level=25),
        GenerationParams(orbit_position=0),
        GenerationParams(brown_dwarf_count=-1),
        GenerationParams(star_system_id=""),
        GenerationParams(star_class="Q"),
        GenerationParams(grade=10),
    ])
    def test_invalid_params(self, params):
        with pytest.raises(InvalidParameterError):
            generate_star_system(params, DiceRoller(seed=1))


class TestPartialRerolls:
    """Re-rolling one part leaves the rest of the system alone."""

    def test_reroll_base(self, seeded_system):
        rerolled = reroll_base(seeded_system, BaseType.SCOUT, DiceRoller(seed=3))
        assert rerolled.world is seeded_system.world
        assert rerolled.planets is seeded_system.planets
        assert rerolled.starport.port_value_score == seeded_system.starport.port_value_score
        assert rerolled.starport.generation_method == GenerationMethod.CUSTOM
        for base_type in (BaseType.NAVAL, BaseType.PIRATE, BaseType.RESEARCH, BaseType.MILITARY):
            assert rerolled.starport.base(base_type) == seeded_system.starport.base(base_type)

    def test_reroll_culture_syncs_world(self, seeded_system):
        rerolled = reroll_culture_category(seeded_system, CultureCategory.SOCIAL, scripted_dice(3, 4))
        assert rerolled.culture.trait(CultureCategory.SOCIAL).trait == "Isolationist"
        assert rerolled.world.cultural_traits[0].startswith("Isolationist: ")
        assert rerolled.world.cultural_traits[1:] == seeded_system.world.cultural_traits[1:]
        assert rerolled.world.generation_method == GenerationMethod.PROCEDURAL

    def test_giant_stays_giant_keeps_moons(self):
        system, giant = system_with_giant()
        rerolled = reroll_planet(system, giant.id, scripted_dice(*faces_2d6(6, 6)))
        assert rerolled.planet(giant.id).planet_type == PlanetType.GAS_GIANT
        assert rerolled.moons_of(giant.id) == system.moons_of(giant.id)
        assert rerolled.disks is system.disks

    def test_gas_to_ice_giant_renames_moons(self):
        system, giant = system_with_giant()
        rerolled = reroll_planet(system, giant.id, scripted_dice(*faces_2d6(4, 6)))
        ice_giant = rerolled.planet(giant.id)
        assert ice_giant.planet_type == PlanetType.ICE_GIANT
        moons = rerolled.moons_of(giant.id)
        assert [m.id for m in moons] == [m.id for m in system.moons_of(giant.id)]
        for moon in moons:
            assert moon.name.startswith(f"{ice_giant.name} ")
            assert not moon.name.startswith(giant.name)

    def test_giant_to_belt_loses_moons(self):
        system, giant = system_with_giant()
        rerolled = reroll_planet(system, giant.id, scripted_dice(*faces_2d6(2, 10)))
        assert rerolled.planet(giant.id).planet_type == PlanetType.ASTEROID_BELT
        assert rerolled.moons_of(giant.id) == []
        assert len(rerolled.moons) == len(system.moons) - len(system.moons_of(giant.id))

    def test_belt_to_giant_gains_moons(self):
        system, giant = system_with_giant()
        belt_system = reroll_planet(system, giant.id, scripted_dice(*faces_2d6(2, 10)))
        # gas giant, size 6, moon count 1d6-1 = 2, two moons of type 8 and size 8
        dice = scripted_dice(*faces_2d6(6, 6), 3, *faces_2d6(8, 8, 8, 8))
        regrown = reroll_planet(belt_system, giant.id, dice)
        moons = regrown.moons_of(giant.id)
        assert [m.id for m in moons] == [f"{giant.id}:moon-1", f"{giant.id}:moon-2"]
        assert moons[0].name == f"{regrown.planet(giant.id).name} I"

    def test_unknown_planet(self, seeded_system):
        with pytest.raises(InvalidParameterError):
            reroll_planet(seeded_system, "tau-ceti:planet-99", DiceRoller(seed=1))
