"""
World generator.

Rolls the primary world of a star system in a fixed order so a replayed dice
sequence reproduces the same world:

1. world type
2. size
3. gravity (dwarf and terrestrial only)
4. composition (dwarf only)
5. atmosphere
6. temperature
7. hazard type
8. hazard intensity (only when there is a hazard)
9. biochemical resources

Every roll is a 2d6 (with optional advantage/disadvantage) stored in the
record's provenance under the field it produced.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

from starforge.data_models import HazardType, WorldRecord, WorldType
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from starforge.habitability import (
    calculate_habitability_score,
    get_habitability_rating,
    modifiers_for_environment,
    modifiers_for_world,
)
from starforge.provenance import Procedural, mark_custom, override_field
from starforge.tables.habitability import (
    ATMOSPHERE_TABLE,
    BIOCHEMICAL_RESOURCES_TABLE,
    HAZARD_INTENSITY_TABLE,
    HAZARD_TYPE_TABLE,
    TEMPERATURE_TABLE,
)
from starforge.tables.secondary import MAX_ORBITS
from starforge.tables.table_types import lookup
from starforge.tables.world import (
    DWARF_COMPOSITION_TABLE,
    GRAVITY_TABLE,
    SIZE_TABLES,
    WORLD_TYPE_LABELS,
    WORLD_TYPE_TABLE,
)

logger = logging.getLogger(__name__)

MIN_TECH_LEVEL = 0
MAX_TECH_LEVEL = 20
DEFAULT_ORBIT_POSITION = 3

# Fields whose edits change the habitability score
ENVIRONMENT_FIELDS = frozenset({
    "atmosphere",
    "temperature",
    "hazard_type",
    "hazard_intensity",
    "biochemical_resources",
    "gravity",
    "tech_level",
})


def validate_tech_level(tech_level: Any) -> int:
    if isinstance(tech_level, bool) or not isinstance(tech_level, int) \
            or not MIN_TECH_LEVEL <= tech_level <= MAX_TECH_LEVEL:
        raise InvalidParameterError("tech_level", tech_level, f"expected {MIN_TECH_LEVEL}-{MAX_TECH_LEVEL}")
    return tech_level


def validate_orbit_position(orbit_position: Any) -> int:
    if isinstance(orbit_position, bool) or not isinstance(orbit_position, int) \
            or not 1 <= orbit_position <= MAX_ORBITS:
        raise InvalidParameterError("orbit_position", orbit_position, f"expected 1-{MAX_ORBITS}")
    return orbit_position


def default_world_name(world_type: WorldType, orbit_position: int) -> str:
    return f"{WORLD_TYPE_LABELS[world_type]} {orbit_position}"


def generate_world(
    star_system_id: str,
    tech_level: int,
    world_name: Optional[str] = None,
    world_id: Optional[str] = None,
    orbit_position: int = DEFAULT_ORBIT_POSITION,
    dice: Optional[DiceRoller] = None,
    advantage: int = 0,
    disadvantage: int = 0,
) -> WorldRecord:
    """
    Generate a primary world with its environment and habitability score.

    Args:
        star_system_id: Parent system id (required)
        tech_level: Tech level 0-20
        world_name: Name to use; defaults to "<type> <orbit>"
        world_id: Id to use; defaults to "<star_system_id>:world"
        orbit_position: Orbit slot 1-20 the world occupies
        dice: Dice roller; an unseeded one is created when omitted
        advantage: Extra dice kept high on every roll
        disadvantage: Extra dice kept low on every roll

    Raises:
        InvalidParameterError: On a missing id, tech level or orbit out of range.
    """
    if not star_system_id:
        raise InvalidParameterError("star_system_id", star_system_id, "an id is required")
    validate_tech_level(tech_level)
    validate_orbit_position(orbit_position)
    dice = dice or DiceRoller()
    rolls: dict[str, int] = {}

    def roll(field: str) -> int:
        rolls[field] = dice.roll_2d6(field.replace("_", " "), advantage, disadvantage).total
        return rolls[field]

    world_type = lookup(WORLD_TYPE_TABLE, roll("world_type"), "world_type_roll")
    size = roll("size")
    size_entry = lookup(SIZE_TABLES[world_type], size, "size_roll")

    gravity = None
    if world_type != WorldType.HABITAT:
        gravity = lookup(GRAVITY_TABLE, roll("gravity"), "gravity_roll").for_type(world_type)

    composition = None
    if world_type == WorldType.DWARF:
        composition = lookup(DWARF_COMPOSITION_TABLE, roll("composition"), "composition_roll").value

    atmosphere = lookup(ATMOSPHERE_TABLE, roll("atmosphere"), "atmosphere_roll").value
    temperature = lookup(TEMPERATURE_TABLE, roll("temperature"), "temperature_roll").value
    hazard_type = lookup(HAZARD_TYPE_TABLE, roll("hazard_type"), "hazard_type_roll").value
    hazard_intensity = None
    if hazard_type != HazardType.NONE:
        hazard_intensity = lookup(HAZARD_INTENSITY_TABLE, roll("hazard_intensity"), "hazard_intensity_roll").value
    resources = lookup(
        BIOCHEMICAL_RESOURCES_TABLE, roll("biochemical_resources"), "biochemical_resources_roll"
    ).value

    modifiers = modifiers_for_environment(
        world_type, atmosphere, temperature, hazard_type, hazard_intensity, resources, gravity, tech_level,
    )
    score = calculate_habitability_score(modifiers)

    now = datetime.now()
    world = WorldRecord(
        id=world_id or f"{star_system_id}:world",
        name=world_name or default_world_name(world_type, orbit_position),
        star_system_id=star_system_id,
        world_type=world_type,
        size=size,
        size_label=size_entry.label,
        mass=size_entry.mass,
        gravity=gravity,
        composition=composition,
        atmosphere=atmosphere,
        temperature=temperature,
        hazard_type=hazard_type,
        hazard_intensity=hazard_intensity,
        biochemical_resources=resources,
        habitability_score=score,
        habitability_rating=get_habitability_rating(score),
        tech_level=tech_level,
        orbit_position=orbit_position,
        provenance=Procedural(rolls),
        created_at=now,
        updated_at=now,
    )
    logger.info(
        f"Generated world {world.name}: {world_type.value}, size {size}, "
        f"habitability {score} ({world.habitability_rating.value})"
    )
    return world


def override_world_field(world: WorldRecord, field_name: str, value: Any) -> WorldRecord:
    """
    Set one world field by hand.

    The field's roll is cleared, provenance becomes custom and, when the field
    feeds the habitability score, the score and rating are recomputed.
    """
    if field_name == "tech_level":
        validate_tech_level(value)
    elif field_name == "orbit_position":
        validate_orbit_position(value)

    edited = override_field(world, field_name, value)
    if field_name == "hazard_type" and value == HazardType.NONE:
        edited = replace(
            edited,
            hazard_intensity=None,
            provenance=mark_custom(
                edited.provenance, overridden=("hazard_intensity",), cleared=("hazard_intensity",)
            ),
        )
    if field_name in ENVIRONMENT_FIELDS:
        score = calculate_habitability_score(modifiers_for_world(edited))
        edited = replace(edited, habitability_score=score, habitability_rating=get_habitability_rating(score))
    return replace(edited, updated_at=datetime.now())


def validate_world(world: WorldRecord) -> list[str]:
    """Consistency problems in a (possibly hand-edited) world record."""
    errors = []
    if not world.id:
        errors.append("Missing world ID")
    if not world.name:
        errors.append("Missing world name")
    if not world.star_system_id:
        errors.append("Missing star system ID")
    for field, value in world.rolls.items():
        if isinstance(value, int) and not 2 <= value <= 12:
            errors.append(f"Invalid {field.replace('_', ' ')} roll (must be 2-12)")
    if world.world_type == WorldType.DWARF and world.composition is None:
        errors.append("Dwarf worlds must have composition")
    if world.world_type != WorldType.DWARF and world.composition is not None:
        errors.append("Only dwarf worlds have a composition")
    if world.world_type == WorldType.HABITAT and world.gravity is not None:
        errors.append("Habitats use artificial gravity and carry no gravity value")
    if world.world_type != WorldType.HABITAT and world.gravity is None:
        errors.append("Dwarf and terrestrial worlds must have gravity")
    if world.hazard_type == HazardType.NONE and world.hazard_intensity is not None:
        errors.append("Hazard intensity requires a hazard")
    if not MIN_TECH_LEVEL <= world.tech_level <= MAX_TECH_LEVEL:
        errors.append(f"Tech level must be between {MIN_TECH_LEVEL} and {MAX_TECH_LEVEL}")
    if not 1 <= world.orbit_position <= MAX_ORBITS:
        errors.append(f"Orbit position must be between 1 and {MAX_ORBITS}")
    return errors
