"""
Star generator: primary stars, companion stars and system type.

Companions are always dimmer than the primary: same class with a higher
grade, or a later class. The companion loop rolls 2d6 against a target set
by the primary's class; only a natural 12 lets it roll again.
"""

import logging
import math
from typing import Optional, Union

from starforge.data_models import CompanionResult, StarClass, StarRecord, SystemType
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from starforge.provenance import Custom, Procedural
from starforge.stellar import (
    calculate_stellar_zones,
    parse_star_class,
    resolve_stellar_property,
    validate_companion_orbit,
    validate_grade,
)
from starforge.tables.stellar import (
    COMPANION_ORBIT_TABLE,
    COMPANION_TARGET,
    MAX_COMPANIONS,
    MIN_COMPANION_SEPARATION,
    PRIMARY_CLASS_TABLE,
    STAR_CLASS_ORDER,
)
from starforge.tables.table_types import lookup

logger = logging.getLogger(__name__)

_SYSTEM_TYPES = (
    SystemType.SINGLE,
    SystemType.BINARY,
    SystemType.TRINARY,
    SystemType.QUATERNARY,
)


# =============================================================================
# PRIMARY STAR
# =============================================================================


def roll_star_class(dice: Optional[DiceRoller] = None) -> tuple[StarClass, int]:
    """Roll 2d6 on the primary class table. Returns (class, roll)."""
    dice = dice or DiceRoller()
    roll = dice.roll_2d6("primary star class").total
    return lookup(PRIMARY_CLASS_TABLE, roll, "star_class_roll"), roll


def roll_star_grade(dice: Optional[DiceRoller] = None) -> int:
    """Grade 0-9 from 1d10-1."""
    dice = dice or DiceRoller()
    return dice.roll("1d10-1", "stellar grade").total


def generate_primary(
    star_id: str = "primary",
    name: Optional[str] = None,
    star_class: Optional[Union[str, StarClass]] = None,
    grade: Optional[int] = None,
    dice: Optional[DiceRoller] = None,
) -> StarRecord:
    """
    Generate a primary star.

    A class or grade supplied by the caller is used as-is instead of rolled;
    the record's provenance then lists it as a custom field.

    Raises:
        InvalidParameterError: If a supplied class or grade is invalid.
    """
    dice = dice or DiceRoller()
    if not star_id:
        raise InvalidParameterError("star_id", star_id, "an id is required")

    rolls: dict[str, int] = {}
    overridden: list[str] = []

    if star_class is None:
        star_class, rolls["star_class"] = roll_star_class(dice)
    else:
        star_class = parse_star_class(star_class)
        overridden.append("star_class")

    if grade is None:
        grade = roll_star_grade(dice)
        rolls["grade"] = grade
    else:
        grade = validate_grade(grade)
        overridden.append("grade")

    prop = resolve_stellar_property(star_class, grade)
    provenance = Custom(tuple(overridden), rolls) if overridden else Procedural(rolls)

    star = StarRecord(
        id=star_id,
        name=name or f"Primary {prop.star_class.value}{grade}",
        star_class=prop.star_class,
        grade=grade,
        orbital_distance=0.0,
        mass=prop.mass,
        luminosity=prop.luminosity,
        temperature=prop.temperature,
        radius=prop.radius,
        provenance=provenance,
    )
    logger.info(f"Generated primary star {star.name} ({star.designation})")
    return star


# =============================================================================
# COMPANIONS
# =============================================================================


def system_type_for(companion_count: int) -> SystemType:
    """Single, binary, trinary or quaternary from the number of companions."""
    if isinstance(companion_count, bool) or not isinstance(companion_count, int) \
            or not 0 <= companion_count <= MAX_COMPANIONS:
        raise InvalidParameterError("companion_count", companion_count, f"expected 0-{MAX_COMPANIONS}")
    return _SYSTEM_TYPES[companion_count]


def can_have_companion(primary_class: StarClass, primary_grade: int) -> bool:
    """False only for M9, the dimmest star there is."""
    return not (primary_class == StarClass.M and primary_grade == 9)


def is_dimmer(
    companion_class: StarClass,
    companion_grade: int,
    primary_class: StarClass,
    primary_grade: int,
) -> bool:
    c_index = STAR_CLASS_ORDER.index(companion_class)
    p_index = STAR_CLASS_ORDER.index(primary_class)
    if c_index != p_index:
        return c_index > p_index
    return companion_grade > primary_grade


def roll_dimmer_class_grade(dice: DiceRoller) -> tuple[int, int]:
    """Grade for a companion of a later class: 2d6 spread over 0-9. Returns (grade, roll)."""
    roll = dice.roll_2d6("companion grade").total
    return math.floor((roll - 2) * 9 / 10), roll


def roll_companion_class_grade(
    primary_class: StarClass,
    primary_grade: int,
    dice: Optional[DiceRoller] = None,
) -> tuple[StarClass, int, dict[str, int]]:
    """
    Pick a companion class and grade no brighter than the primary.

    The class is drawn uniformly from the primary's class and every later
    class. A same-class companion takes a higher grade. A grade 9 primary has
    none left, so the class is drawn again from the later classes only.

    Returns:
        (class, grade, rolls)
    """
    dice = dice or DiceRoller()
    if not can_have_companion(primary_class, primary_grade):
        raise InvalidParameterError("primary", f"{primary_class.value}{primary_grade}",
                                    "an M9 primary cannot have a dimmer companion")

    start = STAR_CLASS_ORDER.index(primary_class)
    candidates = STAR_CLASS_ORDER[start:]
    pick = dice.randint(0, len(candidates) - 1, "companion class")
    rolls = {"star_class": pick}
    star_class = candidates[pick]

    if star_class == primary_class and primary_grade < 9:
        grade = dice.randint(primary_grade + 1, 9, "companion grade")
        rolls["grade"] = grade
    else:
        if star_class == primary_class:
            later = STAR_CLASS_ORDER[start + 1:]
            repick = dice.randint(0, len(later) - 1, "companion class (later classes)")
            rolls["next_class"] = repick
            star_class = later[repick]
        grade, rolls["grade"] = roll_dimmer_class_grade(dice)

    return star_class, grade, rolls


def roll_companion_distance(primary_class: StarClass, dice: Optional[DiceRoller] = None) -> tuple[float, int]:
    """Orbital distance (AU) from a 3d6 band, log-uniform inside it. Returns (distance, roll)."""
    dice = dice or DiceRoller()
    roll = dice.roll_3d6("companion orbit").total
    band = lookup(COMPANION_ORBIT_TABLE[primary_class], roll, "companion_orbit_roll")
    distance = dice.log_uniform(band.min, band.max, f"companion orbit ({band.label})")
    return max(MIN_COMPANION_SEPARATION, distance), roll


def generate_companion(
    primary: StarRecord,
    number: int,
    check_roll: int,
    dice: Optional[DiceRoller] = None,
    star_system_id: Optional[str] = None,
) -> StarRecord:
    """Generate the number-th companion (from 1) of a primary star."""
    dice = dice or DiceRoller()
    star_class, grade, rolls = roll_companion_class_grade(primary.star_class, primary.grade, dice)
    distance, rolls["orbital_distance"] = roll_companion_distance(primary.star_class, dice)
    rolls["companion_check"] = check_roll

    prop = resolve_stellar_property(star_class, grade)
    zones = calculate_stellar_zones(primary.luminosity)
    prefix = star_system_id or primary.id
    return StarRecord(
        id=f"{prefix}:companion-{number}",
        name=f"Companion {number}",
        star_class=star_class,
        grade=grade,
        orbital_distance=distance,
        mass=prop.mass,
        luminosity=prop.luminosity,
        temperature=prop.temperature,
        radius=prop.radius,
        provenance=Procedural(rolls),
        warnings=tuple(validate_companion_orbit(distance, zones)),
    )


def generate_companions(
    primary: StarRecord,
    dice: Optional[DiceRoller] = None,
    star_system_id: Optional[str] = None,
) -> CompanionResult:
    """
    Roll the companion stars of a primary.

    Each iteration rolls 2d6; below the class target ends the loop. A success
    adds a companion, and only a natural 12 allows another check, up to three
    companions.
    """
    dice = dice or DiceRoller()
    target = COMPANION_TARGET[primary.star_class]
    companions: list[StarRecord] = []
    count_rolls: list[int] = []
    max_reached = False

    while len(companions) < MAX_COMPANIONS:
        roll = dice.roll_2d6("companion check").total
        count_rolls.append(roll)
        if roll < target:
            break
        if not can_have_companion(primary.star_class, primary.grade):
            logger.debug("M9 primary cannot host a companion; stopping")
            break

        companions.append(generate_companion(primary, len(companions) + 1, roll, dice, star_system_id))

        if roll != 12:
            break
        if len(companions) >= MAX_COMPANIONS:
            max_reached = True

    result = CompanionResult(
        companions=tuple(companions),
        system_type=system_type_for(len(companions)),
        count_rolls=tuple(count_rolls),
        max_reached=max_reached,
    )
    logger.info(
        f"Generated {len(companions)} companion(s) for {primary.designation}: {result.system_type.value}"
    )
    return result
