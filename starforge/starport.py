"""
Starport classifier.

The Port Value Score (PVS) combines habitability, tech level, wealth and
development:

    PVS = floor(habitability / 4) + (tech level - 7) + wealth + development modifier

Class is a step function of PVS (X below 0 up to A at 16+). Each of the five
base types is then checked with 2d6 against a target that depends on the
base type and class. Combinations with no target cannot host that base; they
are reported as absent with no roll and no target.
"""

import logging
import math
from dataclasses import replace
from typing import Optional, Union

from starforge.data_models import BasePresence, BaseType, DevelopmentLevel, StarportClass, StarportRecord
from starforge.development import development_modifier_for_pvs, port_fee_multiplier
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from starforge.provenance import Procedural, mark_custom
from starforge.tables.habitability import TECH_LEVEL_BASELINE
from starforge.tables.starport import (
    BASE_ORDER,
    BASE_PRESENCE_TARGETS,
    STARPORT_CLASS_INFO,
    STARPORT_CLASS_TABLE,
    StarportClassEntry,
)

logger = logging.getLogger(__name__)


def calculate_port_value_score(
    habitability_score: float,
    tech_level: int,
    wealth: int,
    development_modifier: int,
) -> int:
    return math.floor(habitability_score / 4) + (tech_level - TECH_LEVEL_BASELINE) + wealth + development_modifier


def starport_class_for_pvs(pvs: int) -> StarportClass:
    for entry in STARPORT_CLASS_TABLE:
        if entry.contains(pvs):
            return entry.starport_class
    raise InvalidParameterError("port_value_score", pvs, "no starport class covers this score")


def _parse_class(starport_class: Union[str, StarportClass]) -> StarportClass:
    try:
        return StarportClass(starport_class)
    except ValueError:
        raise InvalidParameterError("starport_class", starport_class, "expected one of X, E, D, C, B, A") from None


def _parse_base(base_type: Union[str, BaseType]) -> BaseType:
    try:
        return BaseType(base_type)
    except ValueError:
        raise InvalidParameterError("base_type", base_type) from None


def starport_class_info(starport_class: Union[str, StarportClass]) -> StarportClassEntry:
    return STARPORT_CLASS_INFO[_parse_class(starport_class)]


def pvs_range_for_class(starport_class: Union[str, StarportClass]) -> tuple[Optional[int], Optional[int]]:
    """Inclusive (min, max) PVS for a class; None marks an open end."""
    entry = starport_class_info(starport_class)
    return entry.min_pvs, entry.max_pvs


def base_presence_target(
    base_type: Union[str, BaseType],
    starport_class: Union[str, StarportClass],
) -> Optional[int]:
    """2d6 target for a base at a class, or None when the base cannot exist there."""
    return BASE_PRESENCE_TARGETS[_parse_base(base_type)].get(_parse_class(starport_class))


def base_roll_key(base_type: BaseType) -> str:
    return f"{base_type.value}_base"


def roll_base_presence(
    base_type: Union[str, BaseType],
    starport_class: Union[str, StarportClass],
    dice: Optional[DiceRoller] = None,
) -> BasePresence:
    """
    Check one base type at a starport class.

    Impossible combinations consume no dice and come back absent with no
    roll and no target.
    """
    base_type = _parse_base(base_type)
    target = base_presence_target(base_type, starport_class)
    if target is None:
        return BasePresence(base_type=base_type, present=False)
    dice = dice or DiceRoller()
    roll = dice.roll_2d6(f"{base_type.value} base").total
    return BasePresence(base_type=base_type, present=roll >= target, roll=roll, target=target)


def generate_starport(
    world_id: str,
    habitability_score: float,
    tech_level: int,
    wealth: int,
    development_modifier: Optional[int] = None,
    development_level: Optional[Union[str, DevelopmentLevel]] = None,
    dice: Optional[DiceRoller] = None,
) -> StarportRecord:
    """
    Classify a world's starport and roll its bases.

    Args:
        world_id: Id of the world the port serves
        habitability_score: The world's habitability score
        tech_level: The world's tech level
        wealth: Wealth level (SOC modifier)
        development_modifier: PVS modifier; taken from development_level when omitted
        development_level: The world's development level, also sets the port fee multiplier
        dice: Dice roller for the base checks

    Raises:
        InvalidParameterError: If neither development input is given.
    """
    if not world_id:
        raise InvalidParameterError("world_id", world_id, "an id is required")
    if development_modifier is None:
        if development_level is None:
            raise InvalidParameterError("development_modifier", None, "give a modifier or a development level")
        development_modifier = development_modifier_for_pvs(development_level)
    dice = dice or DiceRoller()

    pvs = calculate_port_value_score(habitability_score, tech_level, wealth, development_modifier)
    info = STARPORT_CLASS_INFO[starport_class_for_pvs(pvs)]

    bases = tuple(roll_base_presence(base_type, info.starport_class, dice) for base_type in BASE_ORDER)
    rolls = {base_roll_key(b.base_type): b.roll for b in bases if b.roll is not None}

    starport = StarportRecord(
        world_id=world_id,
        starport_class=info.starport_class,
        port_value_score=pvs,
        label=info.label,
        description=info.description,
        capabilities=info.capabilities,
        bases=bases,
        port_fee_multiplier=None if development_level is None else port_fee_multiplier(development_level),
        provenance=Procedural(rolls),
    )
    present = ", ".join(b.value for b in starport.present_bases) or "none"
    logger.info(f"Generated class {info.starport_class.value} starport (PVS {pvs}) for {world_id}; bases: {present}")
    return starport


# =============================================================================
# PARTIAL EDITS
# =============================================================================


def _replace_base(starport: StarportRecord, presence: BasePresence) -> tuple[BasePresence, ...]:
    return tuple(presence if b.base_type == presence.base_type else b for b in starport.bases)


def reroll_base(
    starport: StarportRecord,
    base_type: Union[str, BaseType],
    dice: Optional[DiceRoller] = None,
) -> StarportRecord:
    """
    Re-roll one base. PVS, class, capabilities and the other bases are untouched.
    """
    base_type = _parse_base(base_type)
    presence = roll_base_presence(base_type, starport.starport_class, dice)
    key = base_roll_key(base_type)
    provenance = mark_custom(
        starport.provenance,
        overridden=(key,),
        rolls={key: presence.roll} if presence.roll is not None else None,
        cleared=(key,),
    )
    logger.debug(f"Re-rolled {base_type.value} base: {'present' if presence.present else 'absent'}")
    return replace(starport, bases=_replace_base(starport, presence), provenance=provenance)


def set_base_presence(
    starport: StarportRecord,
    base_type: Union[str, BaseType],
    present: bool,
) -> StarportRecord:
    """Set a base by hand; its stored roll is cleared."""
    base_type = _parse_base(base_type)
    current = starport.base(base_type)
    key = base_roll_key(base_type)
    presence = replace(current, present=present, roll=None)
    provenance = mark_custom(starport.provenance, overridden=(key,), cleared=(key,))
    return replace(starport, bases=_replace_base(starport, presence), provenance=provenance)
