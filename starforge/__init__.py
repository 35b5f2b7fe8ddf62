"""
Starforge: procedural star system generation for science-fiction tabletop RPGs.

This package provides:
- A seedable dice roller (2d6, d66, notation rolls with advantage)
- Stellar property lookup and orbital zone calculation
- Generators for stars, the primary world, inhabitants, starport, culture
  and secondary bodies (disks, planets, moons, brown dwarfs)
- Habitability, development and Port Value Score formulas
- Procedural/custom provenance for every generated record
"""

from starforge.dice import DiceResult, DiceRoller
from starforge.errors import InvalidParameterError, NoAvailableOrbitError, StarforgeError
from starforge.provenance import Custom, GenerationMethod, Procedural, override_field
from starforge.data_models import (
    # Enums
    StarClass,
    SystemType,
    OrbitalZone,
    WorldType,
    HabitabilityRating,
    DevelopmentLevel,
    StarportClass,
    BaseType,
    CultureCategory,
    PlanetType,
    # Records
    StellarProperty,
    StellarZones,
    StarRecord,
    WorldRecord,
    InhabitantsRecord,
    StarportRecord,
    BasePresence,
    CultureRecord,
    CultureTrait,
    DiskRecord,
    PlanetRecord,
    MoonRecord,
    BrownDwarfRecord,
)
from starforge.stellar import calculate_stellar_zones, classify_orbit, resolve_stellar_property
from starforge.stars import generate_companions, generate_primary
from starforge.worlds import generate_world
from starforge.habitability import calculate_habitability_score, get_habitability_rating
from starforge.development import determine_world_development
from starforge.inhabitants import generate_inhabitants
from starforge.starport import calculate_port_value_score, generate_starport, roll_base_presence
from starforge.culture import generate_culture
from starforge.secondary import (
    OrbitAllocator,
    generate_brown_dwarf,
    generate_disk,
    generate_moon,
    generate_planet,
)
from starforge.system import GenerationParams, StarSystem, generate_star_system

__version__ = "0.1.0"

__all__ = [
    # Dice and errors
    "DiceResult",
    "DiceRoller",
    "StarforgeError",
    "InvalidParameterError",
    "NoAvailableOrbitError",
    # Provenance
    "GenerationMethod",
    "Procedural",
    "Custom",
    "override_field",
    # Enums
    "StarClass",
    "SystemType",
    "OrbitalZone",
    "WorldType",
    "HabitabilityRating",
    "DevelopmentLevel",
    "StarportClass",
    "BaseType",
    "CultureCategory",
    "PlanetType",
    # Records
    "StellarProperty",
    "StellarZones",
    "StarRecord",
    "WorldRecord",
    "InhabitantsRecord",
    "StarportRecord",
    "BasePresence",
    "CultureRecord",
    "CultureTrait",
    "DiskRecord",
    "PlanetRecord",
    "MoonRecord",
    "BrownDwarfRecord",
    # Generators and formulas
    "resolve_stellar_property",
    "calculate_stellar_zones",
    "classify_orbit",
    "generate_primary",
    "generate_companions",
    "generate_world",
    "calculate_habitability_score",
    "get_habitability_rating",
    "determine_world_development",
    "generate_inhabitants",
    "calculate_port_value_score",
    "generate_starport",
    "roll_base_presence",
    "generate_culture",
    "OrbitAllocator",
    "generate_disk",
    "generate_planet",
    "generate_moon",
    "generate_brown_dwarf",
    "GenerationParams",
    "StarSystem",
    "generate_star_system",
]
