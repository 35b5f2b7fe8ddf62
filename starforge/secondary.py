"""
Secondary body generator: orbit slots, circumstellar disks, planets, moons
and brown dwarfs.

Orbit slots are the integers 1-20. Each star system shares one
OrbitAllocator holding the occupied slots (the primary world's slot is
reserved up front); disks, planets and brown dwarfs each take a free slot.
When none remain the allocator raises NoAvailableOrbitError instead of
reusing a slot. Moons are numbered per parent and take no system slot.

Roll order per body:
- disk: zone, type, mass
- planet: type, then size (giants) or density (belts)
- moon: type, size
- brown dwarf: mass, spectral type
"""

import logging
import math
from dataclasses import replace
from typing import Any, Iterable, Optional

from starforge.data_models import (
    BrownDwarfRecord,
    BrownDwarfSpectralType,
    DiskRecord,
    DiskZone,
    MoonRecord,
    MoonType,
    OrbitalZone,
    PlanetRecord,
    PlanetType,
    StellarZones,
)
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError, NoAvailableOrbitError
from starforge.provenance import Procedural, mark_custom
from starforge.tables.secondary import (
    BELT_DENSITY_TABLE,
    BELT_WIDTH,
    BROWN_DWARF_MASS_TABLE,
    BROWN_DWARF_MAX_MASS,
    BROWN_DWARF_MIN_MASS,
    BROWN_DWARF_SPECTRAL_TABLE,
    BROWN_DWARF_TEMPERATURE_SPANS,
    DISK_COUNT_TABLE,
    DISK_MASS_TABLE,
    DISK_TYPE_TABLE,
    DISK_ZONE_NAMES,
    DISK_ZONE_TABLE,
    GIANT_SIZE_TABLES,
    LUNAR_SURFACE_GRAVITY,
    MAX_GIANT_MASS,
    MAX_MOON_SIZE,
    MAX_ORBITS,
    MOON_SIZE_TABLE,
    MOON_TYPE_TABLE,
    PLANET_TYPE_NAMES,
    PLANET_TYPE_TABLE,
)
from starforge.tables.table_types import lookup

logger = logging.getLogger(__name__)

_ROMAN = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_roman(number: int) -> str:
    if isinstance(number, bool) or not isinstance(number, int) or number < 1:
        raise InvalidParameterError("number", number, "must be a positive integer")
    numeral = ""
    for value, symbol in _ROMAN:
        while number >= value:
            numeral += symbol
            number -= value
    return numeral


def _check_rolls(rolls: dict[str, Any], errors: list[str]) -> None:
    for name, value in rolls.items():
        if isinstance(value, int) and not 2 <= value <= 12:
            errors.append(f"{name.replace('_', ' ').capitalize()} roll must be between 2 and 12")


def _check_orbit(orbit_position: Any, max_orbits: int, errors: list[str]) -> None:
    if isinstance(orbit_position, bool) or not isinstance(orbit_position, int) \
            or not 1 <= orbit_position <= max_orbits:
        errors.append(f"Orbit position must be between 1 and {max_orbits}")


# =============================================================================
# ORBIT SLOTS
# =============================================================================


class OrbitAllocator:
    """
    View of the occupied orbit slots in one star system.

    Not thread-safe: callers generating bodies concurrently must serialize
    reserve() and allocate().
    """

    def __init__(self, occupied: Iterable[int] = (), max_orbits: int = MAX_ORBITS):
        if isinstance(max_orbits, bool) or not isinstance(max_orbits, int) or max_orbits < 1:
            raise InvalidParameterError("max_orbits", max_orbits, "must be a positive integer")
        self.max_orbits = max_orbits
        self._occupied: set[int] = set()
        for position in occupied:
            self.reserve(position)

    @property
    def occupied(self) -> frozenset[int]:
        return frozenset(self._occupied)

    def available(self) -> list[int]:
        return [p for p in range(1, self.max_orbits + 1) if p not in self._occupied]

    def is_free(self, position: int) -> bool:
        return 1 <= position <= self.max_orbits and position not in self._occupied

    def reserve(self, position: int) -> int:
        """
        Claim a specific slot.

        Raises:
            InvalidParameterError: If the slot is out of range or already taken.
        """
        if isinstance(position, bool) or not isinstance(position, int) \
                or not 1 <= position <= self.max_orbits:
            raise InvalidParameterError("orbit_position", position, f"expected 1-{self.max_orbits}")
        if position in self._occupied:
            raise InvalidParameterError("orbit_position", position, "slot already occupied")
        self._occupied.add(position)
        return position

    def allocate(self, dice: Optional[DiceRoller] = None) -> int:
        """
        Claim a free slot picked uniformly at random.

        Raises:
            NoAvailableOrbitError: If every slot is occupied.
        """
        free = self.available()
        if not free:
            raise NoAvailableOrbitError(self._occupied, self.max_orbits)
        dice = dice or DiceRoller()
        position = dice.choice(free, "orbit slot")
        self._occupied.add(position)
        return position


# =============================================================================
# CIRCUMSTELLAR DISKS
# =============================================================================


def roll_disk_count(dice: Optional[DiceRoller] = None) -> tuple[int, int]:
    """1d6: 1-3 one disk, 4-6 two. Returns (count, roll)."""
    dice = dice or DiceRoller()
    roll = dice.roll_d6(1, "disk count").total
    return lookup(DISK_COUNT_TABLE, roll, "disk_count_roll"), roll


def disk_radii(disk_zone: DiskZone, zones: StellarZones) -> tuple[float, float]:
    """Inner and outer radius (AU) of a disk; the habitable zone splits at its midpoint."""
    if disk_zone == DiskZone.HABITABLE_INNER:
        return zones.habitable_inner, zones.habitable_midpoint
    if disk_zone == DiskZone.HABITABLE_OUTER:
        return zones.habitable_midpoint, zones.habitable_outer
    orbital_zone = {
        DiskZone.INFERNAL: OrbitalZone.INFERNAL,
        DiskZone.HOT: OrbitalZone.HOT,
        DiskZone.COLD: OrbitalZone.COLD,
        DiskZone.OUTER: OrbitalZone.OUTER,
    }[disk_zone]
    return zones.zone_range(orbital_zone)


def default_disk_name(disk_type: Any, disk_zone: DiskZone) -> str:
    return f"{disk_type.value.capitalize()} Disk ({DISK_ZONE_NAMES[disk_zone]})"


def generate_disk(
    star_system_id: str,
    zones: StellarZones,
    orbit_position: int,
    dice: Optional[DiceRoller] = None,
    name: Optional[str] = None,
    disk_id: Optional[str] = None,
) -> DiskRecord:
    """Roll one circumstellar disk in an already claimed orbit slot."""
    if not star_system_id:
        raise InvalidParameterError("star_system_id", star_system_id, "an id is required")
    dice = dice or DiceRoller()
    rolls = {
        "disk_zone": dice.roll_2d6("disk zone").total,
        "disk_type": dice.roll_2d6("disk type").total,
        "disk_mass": dice.roll_2d6("disk mass").total,
    }
    disk_zone = lookup(DISK_ZONE_TABLE, rolls["disk_zone"], "disk_zone_roll")
    disk_type = lookup(DISK_TYPE_TABLE, rolls["disk_type"], "disk_type_roll")
    mass = lookup(DISK_MASS_TABLE, rolls["disk_mass"], "disk_mass_roll")
    inner, outer = disk_radii(disk_zone, zones)

    disk = DiskRecord(
        id=disk_id or f"{star_system_id}:disk-{orbit_position}",
        name=name or default_disk_name(disk_type, disk_zone),
        star_system_id=star_system_id,
        orbit_position=orbit_position,
        disk_type=disk_type,
        disk_zone=disk_zone,
        disk_mass=mass.mass,
        disk_mass_unit=mass.unit,
        inner_radius=inner,
        outer_radius=outer,
        provenance=Procedural(rolls),
    )
    logger.info(f"Generated {disk.name} in orbit {orbit_position} ({mass.mass} {mass.unit.value})")
    return disk


def generate_disks(
    star_system_id: str,
    zones: StellarZones,
    allocator: OrbitAllocator,
    dice: Optional[DiceRoller] = None,
    count: Optional[int] = None,
) -> list[DiskRecord]:
    """
    Roll the disk count (unless given) and generate each disk in a free slot.

    Raises:
        NoAvailableOrbitError: If the slots run out.
    """
    dice = dice or DiceRoller()
    if count is None:
        count, _ = roll_disk_count(dice)
    return [
        generate_disk(star_system_id, zones, allocator.allocate(dice), dice)
        for _ in range(count)
    ]


def validate_disk(disk: DiskRecord, max_orbits: int = MAX_ORBITS) -> list[str]:
    errors = []
    if not disk.name or not disk.name.strip():
        errors.append("Disk name is required")
    if not disk.star_system_id:
        errors.append("Star system ID is required")
    _check_orbit(disk.orbit_position, max_orbits, errors)
    if disk.disk_mass is None or disk.disk_mass <= 0:
        errors.append("Disk mass must be greater than 0")
    if disk.inner_radius is None or disk.inner_radius < 0:
        errors.append("Disk inner radius must not be negative")
    if disk.outer_radius is None or disk.outer_radius <= 0:
        errors.append("Disk outer radius must be greater than 0 AU")
    elif disk.inner_radius is not None and disk.inner_radius >= disk.outer_radius:
        errors.append("Disk inner radius must be less than outer radius")
    _check_rolls(disk.rolls, errors)
    return errors


# =============================================================================
# PLANETS
# =============================================================================


def roll_planet_count(dice: Optional[DiceRoller] = None) -> int:
    """1d6 + 2 planets (3-8)."""
    dice = dice or DiceRoller()
    return dice.roll("1d6+2", "planet count").total


def default_planet_name(planet_type: PlanetType, orbit_position: int) -> str:
    return f"{PLANET_TYPE_NAMES[planet_type]} {to_roman(orbit_position)}"


def generate_planet(
    star_system_id: str,
    orbit_position: int,
    dice: Optional[DiceRoller] = None,
    name: Optional[str] = None,
    planet_id: Optional[str] = None,
    advantage: int = 0,
    disadvantage: int = 0,
) -> PlanetRecord:
    """
    Roll one planet in an already claimed orbit slot.

    Giants take the midpoint of their size band as size and mass (Jupiter
    masses). Belts roll a density and take a fixed width instead.
    """
    if not star_system_id:
        raise InvalidParameterError("star_system_id", star_system_id, "an id is required")
    dice = dice or DiceRoller()
    rolls = {"planet_type": dice.roll_2d6("planet type", advantage, disadvantage).total}
    planet_type = lookup(PLANET_TYPE_TABLE, rolls["planet_type"], "planet_type_roll")

    extra: dict[str, Any] = {}
    if planet_type in GIANT_SIZE_TABLES:
        rolls["size"] = dice.roll_2d6("giant size", advantage, disadvantage).total
        band = lookup(GIANT_SIZE_TABLES[planet_type], rolls["size"], "size_roll")
        extra.update(size=band.midpoint, mass=band.midpoint, size_label=band.label)
    else:
        rolls["density"] = dice.roll_2d6("belt density", advantage, disadvantage).total
        extra.update(
            density=lookup(BELT_DENSITY_TABLE, rolls["density"], "density_roll"),
            belt_width=BELT_WIDTH[planet_type],
        )

    planet = PlanetRecord(
        id=planet_id or f"{star_system_id}:planet-{orbit_position}",
        name=name or default_planet_name(planet_type, orbit_position),
        star_system_id=star_system_id,
        orbit_position=orbit_position,
        planet_type=planet_type,
        provenance=Procedural(rolls),
        **extra,
    )
    logger.info(f"Generated {planet.name} in orbit {orbit_position}")
    return planet


def generate_planets(
    star_system_id: str,
    allocator: OrbitAllocator,
    dice: Optional[DiceRoller] = None,
    count: Optional[int] = None,
) -> list[PlanetRecord]:
    """
    Roll the planet count (unless given) and generate each planet in a free slot.

    Raises:
        NoAvailableOrbitError: If the slots run out.
    """
    dice = dice or DiceRoller()
    if count is None:
        count = roll_planet_count(dice)
    return [
        generate_planet(star_system_id, allocator.allocate(dice), dice)
        for _ in range(count)
    ]


def reroll_planet(planet: PlanetRecord, dice: Optional[DiceRoller] = None) -> PlanetRecord:
    """
    Re-roll a planet in place: same id, system and orbit slot.

    A name that was the default for the old type follows the new type; a
    hand-given name is kept.
    """
    keep_name = planet.name != default_planet_name(planet.planet_type, planet.orbit_position)
    fresh = generate_planet(
        planet.star_system_id,
        planet.orbit_position,
        dice,
        name=planet.name if keep_name else None,
        planet_id=planet.id,
    )
    provenance = mark_custom(
        planet.provenance,
        overridden=tuple(fresh.rolls),
        rolls=fresh.rolls,
        cleared=tuple(planet.rolls),
    )
    return replace(fresh, provenance=provenance)


def validate_planet(planet: PlanetRecord, max_orbits: int = MAX_ORBITS) -> list[str]:
    errors = []
    if not planet.name or not planet.name.strip():
        errors.append("Planet name is required")
    if not planet.star_system_id:
        errors.append("Star system ID is required")
    _check_orbit(planet.orbit_position, max_orbits, errors)

    if planet.is_giant:
        if not planet.size or not 0 < planet.size <= MAX_GIANT_MASS:
            errors.append(f"Giant planet size must be between 0 and {MAX_GIANT_MASS} Jupiter masses")
        if not planet.mass or not 0 < planet.mass <= MAX_GIANT_MASS:
            errors.append(f"Giant planet mass must be between 0 and {MAX_GIANT_MASS} Jupiter masses")
        if planet.belt_width is not None or planet.density is not None:
            errors.append("Giant planets should not have belt properties")
    else:
        if planet.density is None:
            errors.append("Belt must have a density value")
        if not planet.belt_width or planet.belt_width <= 0:
            errors.append("Belt width must be greater than 0 AU")
        if planet.size is not None or planet.mass is not None:
            errors.append("Belts should not have size or mass properties")
    _check_rolls(planet.rolls, errors)
    return errors


# =============================================================================
# MOONS
# =============================================================================


def roll_world_moon_count(dice: Optional[DiceRoller] = None) -> int:
    """Moons of the primary world: max(0, 1d6 - 3)."""
    dice = dice or DiceRoller()
    return max(0, dice.roll("1d6-3", "world moon count").total)


def roll_giant_moon_count(dice: Optional[DiceRoller] = None) -> int:
    """Moons of a giant planet: 1d6 - 1."""
    dice = dice or DiceRoller()
    return dice.roll("1d6-1", "giant moon count").total


def default_moon_name(number: int, moon_type: MoonType, parent_name: Optional[str] = None) -> str:
    """
    "<parent> II" for regular moons, "<parent> Captured B" for captured
    asteroids; without a parent name, "Moon II" and "Captured Asteroid B".
    """
    if moon_type == MoonType.CAPTURED_ASTEROID:
        letter = _LETTERS[number - 1] if number <= len(_LETTERS) else str(number)
        return f"{parent_name} Captured {letter}" if parent_name else f"Captured Asteroid {letter}"
    return f"{parent_name or 'Moon'} {to_roman(number)}"


def moon_gravity(size: float) -> float:
    """Surface gravity (G), scaled from Luna's 0.165 G at one lunar mass."""
    return round(size * LUNAR_SURFACE_GRAVITY, 3)


def generate_moon(
    parent_id: str,
    star_system_id: str,
    orbit_position: int = 1,
    parent_name: Optional[str] = None,
    dice: Optional[DiceRoller] = None,
    name: Optional[str] = None,
) -> MoonRecord:
    """Roll one moon; orbit_position is its sequence number around the parent."""
    if not parent_id:
        raise InvalidParameterError("parent_id", parent_id, "an id is required")
    if not star_system_id:
        raise InvalidParameterError("star_system_id", star_system_id, "an id is required")
    dice = dice or DiceRoller()
    rolls = {
        "moon_type": dice.roll_2d6("moon type").total,
        "size": dice.roll_2d6("moon size").total,
    }
    moon_type = lookup(MOON_TYPE_TABLE, rolls["moon_type"], "moon_type_roll")
    band = lookup(MOON_SIZE_TABLE, rolls["size"], "size_roll")

    moon = MoonRecord(
        id=f"{parent_id}:moon-{orbit_position}",
        name=name or default_moon_name(orbit_position, moon_type, parent_name),
        parent_id=parent_id,
        star_system_id=star_system_id,
        orbit_position=orbit_position,
        moon_type=moon_type,
        size=band.midpoint,
        mass=band.midpoint,
        gravity=moon_gravity(band.midpoint),
        size_label=band.label,
        provenance=Procedural(rolls),
    )
    logger.debug(f"Generated moon {moon.name} ({moon_type.value}, {moon.size} LM)")
    return moon


def generate_moons(
    parent_id: str,
    star_system_id: str,
    count: int,
    parent_name: Optional[str] = None,
    dice: Optional[DiceRoller] = None,
) -> list[MoonRecord]:
    """Generate count moons numbered 1..count around one parent."""
    if count < 0:
        raise InvalidParameterError("count", count, "must not be negative")
    dice = dice or DiceRoller()
    moons = [
        generate_moon(parent_id, star_system_id, number, parent_name, dice)
        for number in range(1, count + 1)
    ]
    if moons:
        logger.info(f"Generated {len(moons)} moon(s) for {parent_name or parent_id}")
    return moons


def validate_moon(moon: MoonRecord) -> list[str]:
    errors = []
    if not moon.name or not moon.name.strip():
        errors.append("Moon name is required")
    if not moon.parent_id:
        errors.append("Parent ID is required")
    if not moon.star_system_id:
        errors.append("Star system ID is required")
    if not 0 < moon.size <= MAX_MOON_SIZE:
        errors.append(f"Moon size must be between 0 and {MAX_MOON_SIZE} lunar masses")
    if not 0 < moon.mass <= MAX_MOON_SIZE:
        errors.append(f"Moon mass must be between 0 and {MAX_MOON_SIZE} lunar masses")
    if not 0 <= moon.gravity <= 1:
        errors.append("Moon gravity must be between 0 and 1 G")
    if moon.orbit_position < 1:
        errors.append("Moon orbit position must be at least 1")
    _check_rolls(moon.rolls, errors)
    return errors


# =============================================================================
# BROWN DWARFS
# =============================================================================


def spectral_subtype(spectral_type: BrownDwarfSpectralType, temperature: int) -> int:
    """Subtype digit 0 (hottest) to 9 (coolest) inside the spectral class's temperature span."""
    coolest, hottest = BROWN_DWARF_TEMPERATURE_SPANS[spectral_type]
    digit = math.floor((hottest - temperature) * 10 / (hottest - coolest))
    return min(9, max(0, digit))


def default_brown_dwarf_name(spectral_type: BrownDwarfSpectralType, subtype: int) -> str:
    return f"Brown Dwarf {spectral_type.value}{subtype}"


def generate_brown_dwarf(
    star_system_id: str,
    orbit_position: int,
    dice: Optional[DiceRoller] = None,
    name: Optional[str] = None,
    brown_dwarf_id: Optional[str] = None,
) -> BrownDwarfRecord:
    """
    Roll a brown dwarf in an already claimed orbit slot.

    Mass is drawn inside the rolled band (one decimal place); temperature is
    a whole number of Kelvin inside the spectral band.
    """
    if not star_system_id:
        raise InvalidParameterError("star_system_id", star_system_id, "an id is required")
    dice = dice or DiceRoller()
    rolls = {"mass": dice.roll_2d6("brown dwarf mass").total}
    band = lookup(BROWN_DWARF_MASS_TABLE, rolls["mass"], "mass_roll")
    mass = round(dice.uniform(band.min, band.max, "brown dwarf mass"), 1)

    rolls["spectral_type"] = dice.roll_2d6("brown dwarf spectral type").total
    spectral = lookup(BROWN_DWARF_SPECTRAL_TABLE, rolls["spectral_type"], "spectral_type_roll")
    temperature = dice.randint(spectral.min_temperature, spectral.max_temperature, "brown dwarf temperature")

    dwarf = BrownDwarfRecord(
        id=brown_dwarf_id or f"{star_system_id}:brown-dwarf-{orbit_position}",
        name=name or default_brown_dwarf_name(
            spectral.spectral_type, spectral_subtype(spectral.spectral_type, temperature)
        ),
        star_system_id=star_system_id,
        orbit_position=orbit_position,
        mass=mass,
        temperature=temperature,
        spectral_type=spectral.spectral_type,
        color=spectral.color,
        description=spectral.description,
        provenance=Procedural(rolls),
    )
    logger.info(f"Generated {dwarf.name}: {mass} JM, {temperature} K")
    return dwarf


def validate_brown_dwarf(dwarf: BrownDwarfRecord, max_orbits: int = MAX_ORBITS) -> list[str]:
    errors = []
    if not dwarf.name or not dwarf.name.strip():
        errors.append("Brown dwarf name is required")
    if not dwarf.star_system_id:
        errors.append("Star system ID is required")
    _check_orbit(dwarf.orbit_position, max_orbits, errors)
    if not BROWN_DWARF_MIN_MASS <= dwarf.mass <= BROWN_DWARF_MAX_MASS:
        errors.append(
            f"Brown dwarf mass must be between {BROWN_DWARF_MIN_MASS} and {BROWN_DWARF_MAX_MASS} Jupiter masses"
        )
    if dwarf.temperature <= 0:
        errors.append("Brown dwarf temperature must be positive")
    _check_rolls(dwarf.rolls, errors)
    return errors
