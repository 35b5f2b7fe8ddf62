"""
Culture generator: one d66 trait per category (social, economic, technological).
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional, Union

from starforge.data_models import CultureCategory, CultureRecord, CultureTrait
from starforge.dice import DiceRoller
from starforge.errors import InvalidParameterError
from starforge.provenance import Procedural, mark_custom
from starforge.tables.culture import CULTURE_TABLES

logger = logging.getLogger(__name__)

CATEGORY_ORDER = (
    CultureCategory.SOCIAL,
    CultureCategory.ECONOMIC,
    CultureCategory.TECHNOLOGICAL,
)


def all_d66_codes() -> list[str]:
    """Every d66 code, "11" through "66"."""
    return [f"{tens}{units}" for tens in range(1, 7) for units in range(1, 7)]


def _parse_category(category: Union[str, CultureCategory]) -> CultureCategory:
    try:
        return CultureCategory(category)
    except ValueError:
        raise InvalidParameterError("category", category, "expected social, economic or technological") from None


def get_culture_trait(code: str, category: Union[str, CultureCategory]) -> CultureTrait:
    """
    Look up the trait for a d66 code.

    Raises:
        InvalidParameterError: If the code is not "11".."66" or the category is unknown.
    """
    category = _parse_category(category)
    try:
        trait, description = CULTURE_TABLES[category][code]
    except (KeyError, TypeError):
        raise InvalidParameterError("roll", code, "expected a d66 code 11-66") from None
    return CultureTrait(category=category, trait=trait, description=description, roll=code)


def roll_culture_trait(category: Union[str, CultureCategory], dice: Optional[DiceRoller] = None) -> CultureTrait:
    category = _parse_category(category)
    dice = dice or DiceRoller()
    return get_culture_trait(dice.roll_d66(f"{category.value} culture").code, category)


def generate_culture(world_id: str, dice: Optional[DiceRoller] = None) -> CultureRecord:
    """Roll social, economic and technological traits, in that order."""
    if not world_id:
        raise InvalidParameterError("world_id", world_id, "an id is required")
    dice = dice or DiceRoller()
    traits = tuple(roll_culture_trait(category, dice) for category in CATEGORY_ORDER)
    culture = CultureRecord(
        world_id=world_id,
        traits=traits,
        provenance=Procedural({t.category.value: t.roll for t in traits}),
    )
    logger.info(f"Generated culture for {world_id}: {', '.join(t.trait for t in traits)}")
    return culture


def _replace_trait(culture: CultureRecord, trait: CultureTrait) -> tuple[CultureTrait, ...]:
    return tuple(trait if t.category == trait.category else t for t in culture.traits)


def reroll_culture_category(
    culture: CultureRecord,
    category: Union[str, CultureCategory],
    dice: Optional[DiceRoller] = None,
) -> CultureRecord:
    """Re-roll one category; the other traits keep their values and rolls."""
    trait = roll_culture_trait(category, dice)
    provenance = mark_custom(
        culture.provenance,
        overridden=(trait.category.value,),
        rolls={trait.category.value: trait.roll},
    )
    logger.debug(f"Re-rolled {trait.category.value} culture: {trait.trait} ({trait.roll})")
    return replace(culture, traits=_replace_trait(culture, trait), provenance=provenance)


def set_culture_trait(
    culture: CultureRecord,
    category: Union[str, CultureCategory],
    code: str,
) -> CultureRecord:
    """Pick a trait by hand from its d66 code. The category's roll is cleared."""
    trait = get_culture_trait(code, category)
    provenance = mark_custom(
        culture.provenance,
        overridden=(trait.category.value,),
        cleared=(trait.category.value,),
    )
    return replace(culture, traits=_replace_trait(culture, trait), provenance=provenance)


def format_culture_traits(traits: Iterable[CultureTrait]) -> list[str]:
    return [str(t) for t in traits]
