"""
Habitability and development tables.

Environmental 2d6 tables (atmosphere, temperature, hazard, hazard intensity,
biochemical resources), the habitability rating bands and the world
development levels.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from starforge.data_models import (
    Atmosphere,
    BiochemicalResources,
    DevelopmentLevel,
    HabitabilityRating,
    HazardType,
    Temperature,
)
from starforge.tables.table_types import ModifierEntry, build_roll_table


# =============================================================================
# ENVIRONMENT
# =============================================================================

ATMOSPHERE_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 3, ModifierEntry(Atmosphere.NONE, "None", "Vacuum or trace atmosphere", -3)),
    (4, 5, ModifierEntry(Atmosphere.TRACE, "Trace", "Very thin atmosphere", -2)),
    (6, 7, ModifierEntry(Atmosphere.THIN, "Thin", "Breathable but thin", -1)),
    (8, 9, ModifierEntry(Atmosphere.STANDARD, "Standard", "Earth-like pressure", 2)),
    (10, 11, ModifierEntry(Atmosphere.DENSE, "Dense", "Heavy but breathable", 0)),
    (12, 12, ModifierEntry(Atmosphere.VERY_DENSE, "Very Dense", "Crushing atmosphere", -2)),
])

TEMPERATURE_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 3, ModifierEntry(Temperature.FROZEN, "Frozen", "Below -50C", -2)),
    (4, 5, ModifierEntry(Temperature.COLD, "Cold", "-20C to 0C", -1)),
    (6, 6, ModifierEntry(Temperature.COOL, "Cool", "0C to 15C", 0)),
    (7, 8, ModifierEntry(Temperature.TEMPERATE, "Temperate", "15C to 25C", 2)),
    (9, 9, ModifierEntry(Temperature.WARM, "Warm", "25C to 35C", 0)),
    (10, 11, ModifierEntry(Temperature.HOT, "Hot", "35C to 50C", -1)),
    (12, 12, ModifierEntry(Temperature.VERY_HOT, "Very Hot", "Above 50C", -2)),
])

HAZARD_TYPE_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 7, ModifierEntry(HazardType.NONE, "None", "No environmental hazards")),
    (8, 8, ModifierEntry(HazardType.SEISMIC, "Seismic", "Earthquakes and tremors")),
    (9, 9, ModifierEntry(HazardType.VOLCANIC, "Volcanic", "Active volcanoes and lava flows")),
    (10, 10, ModifierEntry(HazardType.WEATHER, "Weather", "Severe storms and weather events")),
    (11, 11, ModifierEntry(HazardType.RADIATION, "Radiation", "Dangerous radiation levels")),
    (12, 12, ModifierEntry(HazardType.OTHER, "Other", "Unusual or exotic hazard")),
])

# Flat penalty for having any hazard at all; intensity is scored separately
HAZARD_PRESENT_MODIFIER = -0.5

# value = intensity 1-5
HAZARD_INTENSITY_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 3, ModifierEntry(1, "Mild", "Minor inconvenience", -0.5)),
    (4, 5, ModifierEntry(2, "Mild", "Minor inconvenience", -0.5)),
    (6, 8, ModifierEntry(3, "Moderate", "Noticeable danger", -1)),
    (9, 10, ModifierEntry(4, "Severe", "Serious threat", -1.5)),
    (11, 12, ModifierEntry(5, "Extreme", "Life-threatening", -2)),
])

BIOCHEMICAL_RESOURCES_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 3, ModifierEntry(BiochemicalResources.NONE, "None", "No organic chemistry", -2)),
    (4, 5, ModifierEntry(BiochemicalResources.POOR, "Poor", "Minimal organic compounds", -1)),
    (6, 8, ModifierEntry(BiochemicalResources.MODERATE, "Moderate", "Some organic chemistry", 0)),
    (9, 10, ModifierEntry(BiochemicalResources.RICH, "Rich", "Abundant organic compounds", 1)),
    (11, 12, ModifierEntry(BiochemicalResources.VERY_RICH, "Very Rich", "Thriving biosphere", 2)),
])

TECH_LEVEL_BASELINE = 7
TECH_LEVEL_MODIFIER_PER_LEVEL = 0.5


# =============================================================================
# RATINGS
# =============================================================================

# (minimum score, rating, description), best first; lower bounds inclusive
HABITABILITY_RATINGS: tuple[tuple[Optional[float], HabitabilityRating, str], ...] = (
    (8, HabitabilityRating.PARADISE, "Ideal conditions for human habitation"),
    (4, HabitabilityRating.EXCELLENT, "Highly favorable conditions"),
    (0, HabitabilityRating.GOOD, "Favorable conditions with minor challenges"),
    (-4, HabitabilityRating.MARGINAL, "Habitable but challenging"),
    (-8, HabitabilityRating.HARSH, "Difficult conditions requiring technology"),
    (None, HabitabilityRating.HOSTILE, "Extremely hostile environment"),
)


# =============================================================================
# DEVELOPMENT
# =============================================================================


@dataclass(frozen=True)
class DevelopmentInfo:
    level: DevelopmentLevel
    min_score: Optional[int]
    label: str
    description: str
    effects: tuple[str, ...]
    governance_modifier: str
    port_fee_multiplier: float
    pvs_modifier: int
    min_tech_level: Optional[int] = None  # informational only


# Highest threshold first
DEVELOPMENT_LEVELS: tuple[DevelopmentInfo, ...] = (
    DevelopmentInfo(
        DevelopmentLevel.VERY_DEVELOPED, 20, "Very Developed",
        "Futuristic infrastructure, post-scarcity economy, unparalleled services",
        (
            "Advantage+3 to governance checks",
            "Perfect medical care (life extension available)",
            "Quantum-encrypted global networks",
            "Near-utopian governance",
        ),
        "Adv+3", 20, 3, 14,
    ),
    DevelopmentInfo(
        DevelopmentLevel.WELL_DEVELOPED, 16, "Well Developed",
        "Cutting-edge infrastructure, wealthy economy, premium services",
        (
            "Advantage+2 to governance checks",
            "State-of-the-art medical facilities",
            "Instantaneous global communications",
            "Highly efficient bureaucracy",
        ),
        "Adv+2", 10, 2, 12,
    ),
    DevelopmentInfo(
        DevelopmentLevel.DEVELOPED, 12, "Developed",
        "Advanced infrastructure, prosperous economy, excellent services",
        (
            "Advantage+1 to governance checks",
            "Advanced medical facilities",
            "High-speed communication networks",
            "Strong rule of law",
        ),
        "Adv+1", 5, 1, 10,
    ),
    DevelopmentInfo(
        DevelopmentLevel.MATURE, 9, "Mature",
        "Established infrastructure, stable economy, reliable services",
        (
            "Reliable financial transactions",
            "Standard governance",
            "Good medical facilities",
            "Efficient communication networks",
        ),
        "Standard", 2, 0, 8,
    ),
    DevelopmentInfo(
        DevelopmentLevel.DEVELOPING, 6, "Developing",
        "Growing infrastructure, emerging economy, basic services",
        (
            "DM-1 to all norm checks",
            "Disadvantage+1 to governance checks",
            "Basic medical facilities",
            "Functional communication networks",
        ),
        "Dis+1", 1, -1,
    ),
    DevelopmentInfo(
        DevelopmentLevel.UNDERDEVELOPED, None, "Underdeveloped",
        "Minimal infrastructure, struggling economy, limited services",
        (
            "DM-2 to all norm checks",
            "Disadvantage+2 to governance checks",
            "Limited medical facilities",
            "Poor communication networks",
        ),
        "Dis+2", 0.5, -2,
    ),
)

DEVELOPMENT_INFO: Mapping[DevelopmentLevel, DevelopmentInfo] = MappingProxyType(
    {info.level: info for info in DEVELOPMENT_LEVELS}
)
