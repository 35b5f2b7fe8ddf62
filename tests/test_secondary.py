"""
Tests for secondary bodies: orbit slots, disks, planets, moons and brown dwarfs.
"""

from dataclasses import replace

import pytest

from starforge.data_models import (
    BeltDensity,
    BrownDwarfSpectralType,
    DiskType,
    DiskZone,
    MassUnit,
    MoonType,
    PlanetType,
)
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError, NoAvailableOrbitError
from starforge.provenance import GenerationMethod
from starforge.secondary import (
    OrbitAllocator,
    default_moon_name,
    generate_brown_dwarf,
    generate_disk,
    generate_disks,
    generate_moon,
    generate_moons,
    generate_planet,
    generate_planets,
    moon_gravity,
    reroll_planet,
    roll_disk_count,
    roll_giant_moon_count,
    roll_world_moon_count,
    spectral_subtype,
    to_roman,
    validate_brown_dwarf,
    validate_disk,
    validate_moon,
    validate_planet,
)
from tests.helpers import FixedRng, faces_2d6, scripted_dice


def gas_giant(orbit=4, name=None):
    return generate_planet("sys", orbit, scripted_dice(*faces_2d6(6, 6)), name=name)


class TestOrbitAllocator:
    """Orbit slot bookkeeping."""

    def test_reserved_slot_not_available(self):
        allocator = OrbitAllocator([3])
        assert allocator.occupied == frozenset({3})
        assert 3 not in allocator.available()
        assert not allocator.is_free(3)
        assert allocator.is_free(4)
        assert not allocator.is_free(21)

    def test_reserve_twice_rejected(self):
        allocator = OrbitAllocator([3])
        with pytest.raises(InvalidParameterError):
            allocator.reserve(3)

    @pytest.mark.parametrize("position", [0, 21, "2", True])
    def test_reserve_out_of_range(self, position):
        with pytest.raises(InvalidParameterError):
            OrbitAllocator().reserve(position)

    def test_allocate_picks_from_free_slots(self):
        allocator = OrbitAllocator([1, 2])
        # index 0 of [3..20]
        assert allocator.allocate(scripted_dice(0)) == 3
        assert allocator.occupied == frozenset({1, 2, 3})

    def test_allocate_never_repeats(self):
        allocator = OrbitAllocator([5])
        dice = DiceRoller(seed=3)
        taken = [allocator.allocate(dice) for _ in range(19)]
        assert sorted(taken + [5]) == list(range(1, 21))

    def test_exhausted(self):
        allocator = OrbitAllocator(range(1, 21))
        with pytest.raises(NoAvailableOrbitError) as exc_info:
            allocator.allocate(DiceRoller(seed=1))
        assert exc_info.value.max_orbits == 20
        assert not isinstance(exc_info.value, ValueError)

    def test_bad_max_orbits(self):
        with pytest.raises(InvalidParameterError):
            OrbitAllocator(max_orbits=0)


class TestDisks:
    """Circumstellar disks."""

    def test_habitable_inner_disk(self, sun_like_zones):
        # zone 5, type 7, mass 10
        disk = generate_disk("sys", sun_like_zones, 4, scripted_dice(*faces_2d6(5, 7, 10)))
        assert disk.id == "sys:disk-4"
        assert disk.disk_zone == DiskZone.HABITABLE_INNER
        assert disk.disk_type == DiskType.PROTOPLANETARY
        assert (disk.disk_mass, disk.disk_mass_unit) == (1, MassUnit.EM)
        assert disk.inner_radius == pytest.approx(0.95)
        assert disk.outer_radius == pytest.approx(1.16)
        assert disk.name == "Protoplanetary Disk (Habitable-Inner)"
        assert list(disk.rolls) == ["disk_zone", "disk_type", "disk_mass"]
        assert validate_disk(disk) == []

    def test_infernal_disk_starts_at_star(self, sun_like_zones):
        disk = generate_disk("sys", sun_like_zones, 1, scripted_dice(*faces_2d6(2, 2, 2)))
        assert disk.disk_zone == DiskZone.INFERNAL
        assert disk.inner_radius == 0.0
        assert disk.outer_radius == pytest.approx(0.475)
        assert validate_disk(disk) == []

    def test_habitable_halves_meet(self, sun_like_zones):
        inner = generate_disk("sys", sun_like_zones, 1, scripted_dice(*faces_2d6(6, 2, 2)))
        outer = generate_disk("sys", sun_like_zones, 2, scripted_dice(*faces_2d6(8, 2, 2)))
        assert inner.outer_radius == outer.inner_radius

    @pytest.mark.parametrize("face,count", [(1, 1), (3, 1), (4, 2), (6, 2)])
    def test_disk_count(self, face, count):
        assert roll_disk_count(scripted_dice(face)) == (count, face)

    def test_generate_disks_uses_free_slots(self, sun_like_zones):
        allocator = OrbitAllocator([3])
        disks = generate_disks("sys", sun_like_zones, allocator, DiceRoller(seed=6), count=2)
        positions = [d.orbit_position for d in disks]
        assert len(set(positions)) == 2
        assert 3 not in positions

    def test_inverted_radii_invalid(self, sun_like_zones):
        disk = generate_disk("sys", sun_like_zones, 1, DiceRoller(seed=2))
        broken = replace(disk, inner_radius=disk.outer_radius + 1)
        assert "Disk inner radius must be less than outer radius" in validate_disk(broken)


class TestPlanets:
    """Giants and belts."""

    def test_gas_giant(self):
        planet = gas_giant()
        assert planet.id == "sys:planet-4"
        assert planet.name == "Gas Giant IV"
        assert planet.planet_type == PlanetType.GAS_GIANT
        assert planet.is_giant
        assert planet.size == pytest.approx(1.0)
        assert planet.mass == pytest.approx(1.0)
        assert planet.size_label == "Jupiter-sized"
        assert planet.density is None
        assert planet.rolls == {"planet_type": 6, "size": 6}
        assert validate_planet(planet) == []

    def test_asteroid_belt(self):
        planet = generate_planet("sys", 7, scripted_dice(*faces_2d6(2, 10)))
        assert planet.name == "Asteroid Belt VII"
        assert planet.planet_type == PlanetType.ASTEROID_BELT
        assert not planet.is_giant
        assert planet.density == BeltDensity.DENSE
        assert planet.belt_width == 0.5
        assert planet.size is None
        assert planet.rolls == {"planet_type": 2, "density": 10}
        assert validate_planet(planet) == []

    def test_seeded_planets_valid(self):
        dice = DiceRoller(seed=17)
        for orbit in range(1, 21):
            for _ in range(30):
                assert validate_planet(generate_planet("sys", orbit, dice)) == []

    def test_planet_count_range(self):
        dice = DiceRoller(seed=9)
        allocator = OrbitAllocator()
        planets = generate_planets("sys", allocator, dice)
        assert 3 <= len(planets) <= 8

    def test_reroll_keeps_slot_and_id(self):
        planet = gas_giant()
        rerolled = reroll_planet(planet, scripted_dice(*faces_2d6(2, 10)))
        assert rerolled.id == planet.id
        assert rerolled.orbit_position == 4
        assert rerolled.planet_type == PlanetType.ASTEROID_BELT
        assert rerolled.name == "Asteroid Belt IV"
        assert rerolled.generation_method == GenerationMethod.CUSTOM
        assert rerolled.provenance.overridden_fields == ("planet_type", "density")
        assert rerolled.rolls == {"planet_type": 2, "density": 10}

    def test_reroll_keeps_hand_given_name(self):
        planet = gas_giant(name="Zeus")
        rerolled = reroll_planet(planet, scripted_dice(*faces_2d6(4, 6)))
        assert rerolled.name == "Zeus"
        assert rerolled.planet_type == PlanetType.ICE_GIANT

    def test_belt_with_mass_invalid(self):
        planet = generate_planet("sys", 7, scripted_dice(*faces_2d6(2, 10)))
        errors = validate_planet(replace(planet, mass=1.0))
        assert "Belts should not have size or mass properties" in errors

    @pytest.mark.parametrize("number,numeral", [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (40, "XL")])
    def test_roman(self, number, numeral):
        assert to_roman(number) == numeral

    @pytest.mark.parametrize("number", [0, -3, True, 2.0])
    def test_roman_rejects(self, number):
        with pytest.raises(InvalidParameterError):
            to_roman(number)


class TestMoons:
    """Moons of the primary world and of giants."""

    def test_scripted_moon(self):
        # type 8 (major), size 8 (0.8-1.0 LM)
        moon = generate_moon("sys:world", "sys", 2, "Terra", scripted_dice(*faces_2d6(8, 8)))
        assert moon.id == "sys:world:moon-2"
        assert moon.name == "Terra II"
        assert moon.moon_type == MoonType.MAJOR
        assert moon.size == pytest.approx(0.9)
        assert moon.gravity == pytest.approx(0.9 * 0.165, abs=1e-3)
        assert moon.size_label == "Large"
        assert validate_moon(moon) == []

    @pytest.mark.parametrize("number,moon_type,parent,name", [
        (2, MoonType.MAJOR, "Terra", "Terra II"),
        (1, MoonType.CAPTURED_ASTEROID, "Terra", "Terra Captured A"),
        (2, MoonType.MINOR, None, "Moon II"),
        (3, MoonType.CAPTURED_ASTEROID, None, "Captured Asteroid C"),
    ])
    def test_default_names(self, number, moon_type, parent, name):
        assert default_moon_name(number, moon_type, parent) == name

    def test_gravity_scales_from_luna(self):
        assert moon_gravity(1.0) == pytest.approx(0.165)
        assert moon_gravity(2.0) == pytest.approx(0.33)

    def test_numbered_per_parent(self):
        moons = generate_moons("sys:planet-5", "sys", 3, "Gas Giant V", DiceRoller(seed=5))
        assert [m.orbit_position for m in moons] == [1, 2, 3]
        assert [m.id for m in moons] == [f"sys:planet-5:moon-{n}" for n in (1, 2, 3)]
        assert all(m.parent_id == "sys:planet-5" for m in moons)

    def test_negative_count(self):
        with pytest.raises(InvalidParameterError):
            generate_moons("p", "sys", -1)

    def test_moon_counts(self):
        low = DiceRoller(rng=FixedRng(high=False))
        high = DiceRoller(rng=FixedRng(high=True))
        assert roll_world_moon_count(low) == 0
        assert roll_world_moon_count(high) == 3
        assert roll_giant_moon_count(low) == 0
        assert roll_giant_moon_count(high) == 5


class TestBrownDwarfs:
    """Brown dwarf generation."""

    def test_scripted(self):
        # mass 2 (13-20 JM, midpoint), spectral 9 (L, 1300-1600 K), temperature 1450
        dice = scripted_dice(*faces_2d6(2, 9), 1450)
        dwarf = generate_brown_dwarf("sys", 4, dice)
        assert dwarf.id == "sys:brown-dwarf-4"
        assert dwarf.name == "Brown Dwarf L8"
        assert dwarf.mass == 16.5
        assert dwarf.temperature == 1450
        assert dwarf.spectral_type == BrownDwarfSpectralType.L
        assert dwarf.color == "Crimson"
        assert dwarf.rolls == {"mass": 2, "spectral_type": 9}
        assert validate_brown_dwarf(dwarf) == []

    def test_seeded_dwarfs_valid(self):
        dice = DiceRoller(seed=12)
        for _ in range(200):
            dwarf = generate_brown_dwarf("sys", 16, dice)
            assert validate_brown_dwarf(dwarf) == []
            assert 13 <= dwarf.mass <= 80
            assert dwarf.name[-1].isdigit() and dwarf.name[-2] in "LTY"

    @pytest.mark.parametrize("spectral_type,temperature,subtype", [
        (BrownDwarfSpectralType.L, 2500, 0),
        (BrownDwarfSpectralType.L, 1450, 8),
        (BrownDwarfSpectralType.L, 1300, 9),
        (BrownDwarfSpectralType.T, 1250, 0),
        (BrownDwarfSpectralType.Y, 450, 5),
        (BrownDwarfSpectralType.Y, 300, 9),
    ])
    def test_subtype_from_temperature(self, spectral_type, temperature, subtype):
        assert spectral_subtype(spectral_type, temperature) == subtype

    def test_overweight_invalid(self):
        dwarf = generate_brown_dwarf("sys", 6, DiceRoller(seed=1))
        assert validate_brown_dwarf(replace(dwarf, mass=90)) != []
