"""
End-to-end star system generation.

Pipeline, in roll order:

    primary star -> companions -> zones -> primary world -> development
    -> inhabitants -> starport -> culture -> disks -> planets
    -> brown dwarfs -> moons (primary world, then each giant)

The result is a frozen StarSystem aggregate. The reroll_* helpers take an
existing aggregate and return a new one that differs only in the targeted
part, so a caller can re-roll one base or one planet without regenerating
everything.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from starforge.culture import format_culture_traits, generate_culture
from starforge.culture import reroll_culture_category as reroll_culture_trait
from starforge.data_models import (
    BaseType,
    BrownDwarfRecord,
    CultureCategory,
    CultureRecord,
    DevelopmentLevel,
    DiskRecord,
    InhabitantsRecord,
    MoonRecord,
    PlanetRecord,
    StarClass,
    StarRecord,
    StarportRecord,
    StellarZones,
    SystemType,
    WorldRecord,
    serialize,
)
from starforge.development import determine_world_development
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError, NoAvailableOrbitError
from starforge.inhabitants import generate_inhabitants
from starforge.secondary import (
    OrbitAllocator,
    default_moon_name,
    generate_brown_dwarf,
    generate_disk,
    generate_moons,
    generate_planet,
    roll_disk_count,
    roll_giant_moon_count,
    roll_planet_count,
    roll_world_moon_count,
)
from starforge.secondary import reroll_planet as reroll_planet_record
from starforge.starport import generate_starport
from starforge.starport import reroll_base as reroll_starport_base
from starforge.stars import generate_companions, generate_primary
from starforge.stellar import calculate_stellar_zones
from starforge.tables.habitability import TECH_LEVEL_BASELINE
from starforge.tables.secondary import MAX_ORBITS
from starforge.worlds import DEFAULT_ORBIT_POSITION, generate_world, validate_orbit_position, validate_tech_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationParams:
    """Seed parameters for generate_star_system."""
    star_system_id: str = "system"
    tech_level: int = TECH_LEVEL_BASELINE
    star_class: Optional[Union[str, StarClass]] = None
    grade: Optional[int] = None
    star_name: Optional[str] = None
    world_name: Optional[str] = None
    orbit_position: int = DEFAULT_ORBIT_POSITION
    brown_dwarf_count: int = 0
    include_secondary_bodies: bool = True


@dataclass(frozen=True)
class StarSystem:
    """A generated star system and everything in it."""
    id: str
    primary: StarRecord
    companions: tuple[StarRecord, ...]
    system_type: SystemType
    zones: StellarZones
    world: WorldRecord
    inhabitants: InhabitantsRecord
    starport: StarportRecord
    culture: CultureRecord
    disks: tuple[DiskRecord, ...] = ()
    planets: tuple[PlanetRecord, ...] = ()
    moons: tuple[MoonRecord, ...] = ()
    brown_dwarfs: tuple[BrownDwarfRecord, ...] = ()
    rolls: dict[str, Any] = field(default_factory=dict)
    orbits_exhausted: bool = False

    @property
    def occupied_orbits(self) -> list[int]:
        """Every claimed orbit slot, the primary world's included."""
        bodies = (self.world,) + self.disks + self.planets + self.brown_dwarfs
        return sorted(body.orbit_position for body in bodies)

    def planet(self, planet_id: str) -> PlanetRecord:
        for planet in self.planets:
            if planet.id == planet_id:
                return planet
        raise InvalidParameterError("planet_id", planet_id, "no such planet in this system")

    def moons_of(self, parent_id: str) -> list[MoonRecord]:
        return [m for m in self.moons if m.parent_id == parent_id]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "system_type": self.system_type.value,
            "primary": serialize(self.primary),
            "companions": serialize(self.companions),
            "zones": serialize(self.zones),
            "world": serialize(self.world),
            "inhabitants": serialize(self.inhabitants),
            "starport": serialize(self.starport),
            "culture": serialize(self.culture),
            "disks": serialize(self.disks),
            "planets": serialize(self.planets),
            "moons": serialize(self.moons),
            "brown_dwarfs": serialize(self.brown_dwarfs),
            "occupied_orbits": self.occupied_orbits,
            "rolls": dict(self.rolls),
            "orbits_exhausted": self.orbits_exhausted,
        }


def populate_world(
    world: WorldRecord,
    development: DevelopmentLevel,
    inhabitants: InhabitantsRecord,
    starport: StarportRecord,
    culture: CultureRecord,
) -> WorldRecord:
    """Copy the derived attributes onto the world record; provenance is unchanged."""
    return replace(
        world,
        population=inhabitants.population,
        wealth=inhabitants.wealth,
        power_structure=inhabitants.power_structure,
        governance=inhabitants.governance,
        source_of_power=inhabitants.source_of_power,
        development_level=development,
        starport_class=starport.starport_class,
        port_value_score=starport.port_value_score,
        cultural_traits=tuple(format_culture_traits(culture.traits)),
    )


def _claim_orbit(allocator: OrbitAllocator, dice: DiceRoller, body: str) -> Optional[int]:
    try:
        return allocator.allocate(dice)
    except NoAvailableOrbitError as e:
        logger.warning(f"Stopped adding {body}s: {e}")
        return None


def _giant_moons(planet: PlanetRecord, dice: DiceRoller) -> list[MoonRecord]:
    if not planet.is_giant:
        return []
    return generate_moons(planet.id, planet.star_system_id, roll_giant_moon_count(dice), planet.name, dice)


def generate_star_system(
    params: Optional[GenerationParams] = None,
    dice: Optional[DiceRoller] = None,
) -> StarSystem:
    """
    Generate a complete star system.

    When the orbit slots run out, a warning is logged, no further bodies are
    placed and the result's orbits_exhausted flag is set.

    Raises:
        InvalidParameterError: On an invalid seed parameter.
    """
    params = params or GenerationParams()
    dice = dice or DiceRoller()
    sid = params.star_system_id
    if not sid:
        raise InvalidParameterError("star_system_id", sid, "an id is required")
    validate_tech_level(params.tech_level)
    validate_orbit_position(params.orbit_position)
    if params.brown_dwarf_count < 0:
        raise InvalidParameterError("brown_dwarf_count", params.brown_dwarf_count, "must not be negative")

    logger.info(f"Generating star system {sid} (TL {params.tech_level})")
    primary = generate_primary(
        star_id=f"{sid}:primary",
        name=params.star_name,
        star_class=params.star_class,
        grade=params.grade,
        dice=dice,
    )
    companions = generate_companions(primary, dice, sid)
    zones = calculate_stellar_zones(primary.luminosity)

    world = generate_world(
        sid,
        params.tech_level,
        world_name=params.world_name,
        orbit_position=params.orbit_position,
        dice=dice,
    )
    development = determine_world_development(world.tech_level, world.habitability_score)
    inhabitants = generate_inhabitants(world, dice)
    starport = generate_starport(
        world.id,
        world.habitability_score,
        world.tech_level,
        inhabitants.wealth,
        development_level=development,
        dice=dice,
    )
    culture = generate_culture(world.id, dice)
    world = populate_world(world, development, inhabitants, starport, culture)

    rolls: dict[str, Any] = {"companion_checks": list(companions.count_rolls)}
    disks: list[DiskRecord] = []
    planets: list[PlanetRecord] = []
    brown_dwarfs: list[BrownDwarfRecord] = []
    moons: list[MoonRecord] = []
    exhausted = False

    if params.include_secondary_bodies:
        allocator = OrbitAllocator([world.orbit_position], MAX_ORBITS)

        disk_count, rolls["disk_count"] = roll_disk_count(dice)
        for _ in range(disk_count):
            position = _claim_orbit(allocator, dice, "disk")
            if position is None:
                exhausted = True
                break
            disks.append(generate_disk(sid, zones, position, dice))

        rolls["planet_count"] = planet_count = roll_planet_count(dice)
        for _ in range(planet_count if not exhausted else 0):
            position = _claim_orbit(allocator, dice, "planet")
            if position is None:
                exhausted = True
                break
            planets.append(generate_planet(sid, position, dice))

        for _ in range(params.brown_dwarf_count if not exhausted else 0):
            position = _claim_orbit(allocator, dice, "brown dwarf")
            if position is None:
                exhausted = True
                break
            brown_dwarfs.append(generate_brown_dwarf(sid, position, dice))

        rolls["world_moon_count"] = world_moon_count = roll_world_moon_count(dice)
        moons.extend(generate_moons(world.id, sid, world_moon_count, world.name, dice))
        for planet in planets:
            moons.extend(_giant_moons(planet, dice))

    system = StarSystem(
        id=sid,
        primary=primary,
        companions=companions.companions,
        system_type=companions.system_type,
        zones=zones,
        world=world,
        inhabitants=inhabitants,
        starport=starport,
        culture=culture,
        disks=tuple(disks),
        planets=tuple(planets),
        moons=tuple(moons),
        brown_dwarfs=tuple(brown_dwarfs),
        rolls=rolls,
        orbits_exhausted=exhausted,
    )
    logger.info(
        f"Generated {system.system_type.value} system {sid}: {primary.designation} primary, "
        f"{len(disks)} disk(s), {len(planets)} planet(s), {len(moons)} moon(s)"
    )
    return system


# =============================================================================
# PARTIAL RE-ROLLS
# =============================================================================


def reroll_base(
    system: StarSystem,
    base_type: Union[str, BaseType],
    dice: Optional[DiceRoller] = None,
) -> StarSystem:
    """Re-roll one starport base; nothing else in the system changes."""
    return replace(system, starport=reroll_starport_base(system.starport, base_type, dice))


def reroll_culture_category(
    system: StarSystem,
    category: Union[str, CultureCategory],
    dice: Optional[DiceRoller] = None,
) -> StarSystem:
    """Re-roll one culture category and refresh the world's trait summary."""
    culture = reroll_culture_trait(system.culture, category, dice)
    world = replace(system.world, cultural_traits=tuple(format_culture_traits(culture.traits)))
    return replace(system, culture=culture, world=world)


def _rename_moon(moon: MoonRecord, old_parent_name: str, new_parent_name: str) -> MoonRecord:
    if moon.name != default_moon_name(moon.orbit_position, moon.moon_type, old_parent_name):
        return moon
    return replace(moon, name=default_moon_name(moon.orbit_position, moon.moon_type, new_parent_name))


def reroll_planet(
    system: StarSystem,
    planet_id: str,
    dice: Optional[DiceRoller] = None,
) -> StarSystem:
    """
    Re-roll one planet in its orbit slot.

    A giant that stays a giant keeps its moons, and moons still carrying the
    old planet's default names are renamed after the new one. A planet that
    becomes a giant rolls new moons; one that becomes a belt loses them.
    """
    dice = dice or DiceRoller()
    old = system.planet(planet_id)
    new = reroll_planet_record(old, dice)

    moons = [m for m in system.moons if m.parent_id != planet_id]
    if new.is_giant:
        if old.is_giant:
            kept = [_rename_moon(m, old.name, new.name) for m in system.moons_of(planet_id)]
        else:
            kept = _giant_moons(new, dice)
        moons.extend(kept)

    planets = tuple(new if p.id == planet_id else p for p in system.planets)
    logger.info(f"Re-rolled {old.name} as {new.name}")
    return replace(system, planets=planets, moons=tuple(moons))
