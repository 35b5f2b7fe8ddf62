"""
Inhabitants generator.

Wealth, power structure, governance and source of power are four independent
2d6 rolls, made in that order. Wealth doubles as the social standing (SOC)
modifier used by the starport classifier.
"""

import logging
import math
from dataclasses import replace
from typing import Any, Mapping, Optional

from starforge.data_models import InhabitantsRecord, WorldRecord, WorldType
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from starforge.provenance import Procedural, override_field
from starforge.tables.habitability import TECH_LEVEL_BASELINE
from starforge.tables.inhabitants import (
    GOVERNANCE_TABLE,
    MIN_HABITABILITY_FACTOR,
    POPULATION_SCALE,
    POWER_STRUCTURE_TABLE,
    SOURCE_OF_POWER_TABLE,
    WEALTH_TABLE,
)
from starforge.tables.table_types import ModifierEntry, lookup
from starforge.tables.world import HABITAT_SIZE_TABLE
from starforge.worlds import validate_tech_level

logger = logging.getLogger(__name__)

INHABITANT_TABLES: Mapping[str, Mapping[int, ModifierEntry]] = {
    "wealth": WEALTH_TABLE,
    "power_structure": POWER_STRUCTURE_TABLE,
    "governance": GOVERNANCE_TABLE,
    "source_of_power": SOURCE_OF_POWER_TABLE,
}


def calculate_population(
    world_type: WorldType,
    mass: float,
    habitability_score: float,
    tech_level: int,
    size: Optional[int] = None,
) -> int:
    """
    Estimate a world's population.

    Habitats house the lower bound of their size band. Other worlds scale
    with mass, habitability (never below a tenth) and an order of magnitude
    per tech level around the baseline of 7.
    """
    if world_type == WorldType.HABITAT:
        if size is None:
            raise InvalidParameterError("size", size, "habitat population needs the size roll")
        return lookup(HABITAT_SIZE_TABLE, size, "size_roll").population
    validate_tech_level(tech_level)
    factor = max(MIN_HABITABILITY_FACTOR, 1 + habitability_score / 10)
    return math.floor(mass * factor * 10 ** (tech_level - TECH_LEVEL_BASELINE) * POPULATION_SCALE)


def population_for_world(world: WorldRecord) -> int:
    return calculate_population(
        world.world_type, world.mass, world.habitability_score, world.tech_level, world.size,
    )


def generate_inhabitants(world: WorldRecord, dice: Optional[DiceRoller] = None) -> InhabitantsRecord:
    """Roll the inhabitants of a world."""
    dice = dice or DiceRoller()
    rolls = {
        name: dice.roll_2d6(name.replace("_", " ")).total
        for name in INHABITANT_TABLES
    }
    wealth = lookup(WEALTH_TABLE, rolls["wealth"], "wealth_roll")
    power = lookup(POWER_STRUCTURE_TABLE, rolls["power_structure"], "power_structure_roll")
    governance = lookup(GOVERNANCE_TABLE, rolls["governance"], "governance_roll")
    source = lookup(SOURCE_OF_POWER_TABLE, rolls["source_of_power"], "source_of_power_roll")

    record = InhabitantsRecord(
        world_id=world.id,
        wealth=wealth.value,
        wealth_label=wealth.label,
        soc_modifier=wealth.modifier,
        power_structure=power.value,
        governance=governance.value,
        governance_modifier=governance.modifier,
        source_of_power=source.value,
        population=population_for_world(world),
        provenance=Procedural(rolls),
    )
    logger.info(
        f"Generated inhabitants for {world.name}: wealth {wealth.label}, "
        f"{power.label}, {governance.label} governance, population {record.population:,}"
    )
    return record


def _entry_for_value(table: Mapping[int, ModifierEntry], value: Any, field: str) -> ModifierEntry:
    for entry in table.values():
        if entry.value == value:
            return entry
    raise InvalidParameterError(field, value, "not a table value")


def override_inhabitant_field(record: InhabitantsRecord, field_name: str, value: Any) -> InhabitantsRecord:
    """
    Set one inhabitant field by hand, clearing only that field's roll.

    Setting wealth or governance also updates the labels derived from them.
    """
    if field_name in INHABITANT_TABLES:
        entry = _entry_for_value(INHABITANT_TABLES[field_name], value, field_name)
        value = entry.value
    edited = override_field(record, field_name, value)
    if field_name == "wealth":
        edited = replace(edited, wealth_label=entry.label, soc_modifier=entry.modifier)
    elif field_name == "governance":
        edited = replace(edited, governance_modifier=entry.modifier)
    return edited
