"""
Habitability scorer.

A world's habitability score is the plain sum of seven independent signed
components. The rating is a step function of the score with inclusive lower
bounds.
"""

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional, Union

from starforge.data_models import (
    Atmosphere,
    BiochemicalResources,
    HabitabilityRating,
    HazardType,
    Temperature,
    WorldType,
)
from starforge.errors import InvalidParameterError
from starforge.tables.habitability import (
    ATMOSPHERE_TABLE,
    BIOCHEMICAL_RESOURCES_TABLE,
    HABITABILITY_RATINGS,
    HAZARD_INTENSITY_TABLE,
    HAZARD_PRESENT_MODIFIER,
    TECH_LEVEL_BASELINE,
    TECH_LEVEL_MODIFIER_PER_LEVEL,
    TEMPERATURE_TABLE,
)
from starforge.tables.world import GRAVITY_TABLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HabitabilityModifiers:
    """Signed habitability components; an absent component counts as 0."""
    atmosphere: float = 0
    temperature: float = 0
    hazard: float = 0
    hazard_intensity: float = 0
    biochemical_resources: float = 0
    gravity: float = 0
    tech_level: float = 0

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[float]]) -> "HabitabilityModifiers":
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise InvalidParameterError("modifiers", sorted(unknown), "unknown habitability component")
        return cls(**{k: (0 if v is None else v) for k, v in values.items()})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def calculate_habitability_score(
    modifiers: Union[HabitabilityModifiers, Mapping[str, Optional[float]]],
) -> float:
    """
    Sum the habitability components.

    Args:
        modifiers: A HabitabilityModifiers or a mapping of component name to
            value; missing or None components contribute 0.
    """
    if not isinstance(modifiers, HabitabilityModifiers):
        modifiers = HabitabilityModifiers.from_mapping(modifiers)
    return sum(getattr(modifiers, f.name) for f in fields(modifiers))


def get_habitability_rating(score: float) -> HabitabilityRating:
    """Paradise >= 8, Excellent >= 4, Good >= 0, Marginal >= -4, Harsh >= -8, else Hostile."""
    for minimum, rating, _ in HABITABILITY_RATINGS:
        if minimum is None or score >= minimum:
            return rating
    return HabitabilityRating.HOSTILE


def rating_description(rating: HabitabilityRating) -> str:
    for _, candidate, description in HABITABILITY_RATINGS:
        if candidate == rating:
            return description
    raise InvalidParameterError("rating", rating)


# =============================================================================
# COMPONENT LOOKUPS
# =============================================================================


def tech_level_modifier(tech_level: int) -> float:
    """Half a point per tech level above the baseline of 7."""
    return max(0, tech_level - TECH_LEVEL_BASELINE) * TECH_LEVEL_MODIFIER_PER_LEVEL


def _modifier_for_value(table: Mapping[int, Any], value: Any, field: str) -> float:
    for entry in table.values():
        if entry.value == value:
            return entry.modifier
    raise InvalidParameterError(field, value, "not a table value")


def hazard_modifier(hazard_type: HazardType) -> float:
    return 0 if hazard_type == HazardType.NONE else HAZARD_PRESENT_MODIFIER


def gravity_modifier(world_type: WorldType, gravity: Optional[float]) -> float:
    """
    Gravity component for a world.

    Habitats have artificial gravity and score 0. Other worlds take the
    modifier of the gravity table row nearest their gravity, so hand-set
    values off the table still score.
    """
    if world_type == WorldType.HABITAT or gravity is None:
        return 0
    nearest = min(GRAVITY_TABLE.values(), key=lambda e: abs(e.for_type(world_type) - gravity))
    return nearest.modifier


def modifiers_for_environment(
    world_type: WorldType,
    atmosphere: Atmosphere,
    temperature: Temperature,
    hazard_type: HazardType,
    hazard_intensity: Optional[int],
    biochemical_resources: BiochemicalResources,
    gravity: Optional[float],
    tech_level: int,
) -> HabitabilityModifiers:
    """Build the components from a world's environmental values."""
    intensity = 0
    if hazard_type != HazardType.NONE and hazard_intensity is not None:
        intensity = _modifier_for_value(HAZARD_INTENSITY_TABLE, hazard_intensity, "hazard_intensity")
    return HabitabilityModifiers(
        atmosphere=_modifier_for_value(ATMOSPHERE_TABLE, atmosphere, "atmosphere"),
        temperature=_modifier_for_value(TEMPERATURE_TABLE, temperature, "temperature"),
        hazard=hazard_modifier(hazard_type),
        hazard_intensity=intensity,
        biochemical_resources=_modifier_for_value(
            BIOCHEMICAL_RESOURCES_TABLE, biochemical_resources, "biochemical_resources"
        ),
        gravity=gravity_modifier(world_type, gravity),
        tech_level=tech_level_modifier(tech_level),
    )


def modifiers_for_world(world: Any) -> HabitabilityModifiers:
    """Components for an existing WorldRecord."""
    return modifiers_for_environment(
        world.world_type,
        world.atmosphere,
        world.temperature,
        world.hazard_type,
        world.hazard_intensity,
        world.biochemical_resources,
        world.gravity,
        world.tech_level,
    )
