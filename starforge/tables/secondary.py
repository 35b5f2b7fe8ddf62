"""
Secondary body tables: circumstellar disks, planets, moons and brown dwarfs.

All 2d6. Giant and moon size bands are (min, max) ranges; generators use the
band midpoint. Brown dwarf bands are sampled inside the band.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from starforge.data_models import (
    BeltDensity,
    BrownDwarfSpectralType,
    DiskType,
    DiskZone,
    MassUnit,
    MoonType,
    PlanetType,
)
from starforge.tables.table_types import RangeEntry, build_roll_table

MAX_ORBITS = 20


# =============================================================================
# CIRCUMSTELLAR DISKS
# =============================================================================


@dataclass(frozen=True)
class DiskMassEntry:
    mass: float
    unit: MassUnit
    label: str
    description: str


DISK_ZONE_TABLE: Mapping[int, DiskZone] = build_roll_table([
    (2, 2, DiskZone.INFERNAL),
    (3, 4, DiskZone.HOT),
    (5, 6, DiskZone.HABITABLE_INNER),
    (7, 8, DiskZone.HABITABLE_OUTER),
    (9, 10, DiskZone.COLD),
    (11, 12, DiskZone.OUTER),
])

DISK_TYPE_TABLE: Mapping[int, DiskType] = build_roll_table([
    (2, 6, DiskType.ACCRETION),
    (7, 12, DiskType.PROTOPLANETARY),
])

DISK_MASS_TABLE: Mapping[int, DiskMassEntry] = build_roll_table([
    (2, 2, DiskMassEntry(0.01, MassUnit.CM, "Trace", "Very sparse dust (0.01 Ceres masses)")),
    (3, 3, DiskMassEntry(0.1, MassUnit.CM, "Sparse", "Thin dust disk (0.1 Ceres masses)")),
    (4, 4, DiskMassEntry(1, MassUnit.CM, "Light", "Ceres-mass of material (1 CM)")),
    (5, 5, DiskMassEntry(0.01, MassUnit.LM, "Moderate-Light", "10 Ceres masses (0.01 Lunar masses)")),
    (6, 6, DiskMassEntry(0.1, MassUnit.LM, "Moderate", "Sub-lunar disk (0.1 Lunar masses)")),
    (7, 7, DiskMassEntry(1, MassUnit.LM, "Substantial", "Lunar-mass disk (1 LM)")),
    (8, 8, DiskMassEntry(0.01, MassUnit.EM, "Heavy", "10 Lunar masses (0.01 Earth masses)")),
    (9, 9, DiskMassEntry(0.1, MassUnit.EM, "Very Heavy", "Sub-Earth disk (0.1 Earth masses)")),
    (10, 10, DiskMassEntry(1, MassUnit.EM, "Massive", "Earth-mass disk (1 EM)")),
    (11, 11, DiskMassEntry(0.1, MassUnit.JM, "Huge", "Sub-Jovian disk (0.1 Jupiter masses)")),
    (12, 12, DiskMassEntry(3, MassUnit.JM, "Colossal", "Massive protoplanetary disk (3 Jupiter masses)")),
])

DISK_ZONE_NAMES: Mapping[DiskZone, str] = MappingProxyType({
    DiskZone.INFERNAL: "Infernal",
    DiskZone.HOT: "Inner",
    DiskZone.HABITABLE_INNER: "Habitable-Inner",
    DiskZone.HABITABLE_OUTER: "Habitable-Outer",
    DiskZone.COLD: "Cold",
    DiskZone.OUTER: "Outer",
})

# 1d6 -> number of disks
DISK_COUNT_TABLE: Mapping[int, int] = build_roll_table([
    (1, 3, 1),
    (4, 6, 2),
], low=1, high=6)


# =============================================================================
# PLANETS
# =============================================================================

PLANET_TYPE_TABLE: Mapping[int, PlanetType] = build_roll_table([
    (2, 2, PlanetType.ASTEROID_BELT),
    (3, 3, PlanetType.PLANETOID_BELT),
    (4, 5, PlanetType.ICE_GIANT),
    (6, 10, PlanetType.GAS_GIANT),
    (11, 11, PlanetType.ICE_GIANT),
    (12, 12, PlanetType.GAS_GIANT),
])

PLANET_TYPE_NAMES: Mapping[PlanetType, str] = MappingProxyType({
    PlanetType.GAS_GIANT: "Gas Giant",
    PlanetType.ICE_GIANT: "Ice Giant",
    PlanetType.ASTEROID_BELT: "Asteroid Belt",
    PlanetType.PLANETOID_BELT: "Planetoid Belt",
})

# Jupiter masses
GAS_GIANT_SIZE_TABLE: Mapping[int, RangeEntry] = build_roll_table([
    (2, 2, RangeEntry(0.1, 0.3, "Small", "Saturn-sized (0.1-0.3 JM)")),
    (3, 3, RangeEntry(0.3, 0.5, "Medium-Small", "Sub-Jovian (0.3-0.5 JM)")),
    (4, 4, RangeEntry(0.5, 0.7, "Below Average", "Below Jovian (0.5-0.7 JM)")),
    (5, 5, RangeEntry(0.7, 0.9, "Average", "Near-Jovian (0.7-0.9 JM)")),
    (6, 6, RangeEntry(0.9, 1.1, "Jupiter-sized", "Jupiter-sized (0.9-1.1 JM)")),
    (7, 7, RangeEntry(1.1, 1.5, "Large", "Super-Jovian (1.1-1.5 JM)")),
    (8, 8, RangeEntry(1.5, 2.0, "Very Large", "Large Giant (1.5-2.0 JM)")),
    (9, 9, RangeEntry(2.0, 3.0, "Huge", "Huge Giant (2.0-3.0 JM)")),
    (10, 10, RangeEntry(3.0, 5.0, "Massive", "Massive Giant (3.0-5.0 JM)")),
    (11, 11, RangeEntry(5.0, 8.0, "Super-Massive", "Super-Massive (5.0-8.0 JM)")),
    (12, 12, RangeEntry(8.0, 13.0, "Sub-Brown Dwarf", "Near brown dwarf limit (8.0-13.0 JM)")),
])

ICE_GIANT_SIZE_TABLE: Mapping[int, RangeEntry] = build_roll_table([
    (2, 2, RangeEntry(0.02, 0.03, "Tiny", "Tiny ice giant (0.02-0.03 JM)")),
    (3, 3, RangeEntry(0.03, 0.04, "Very Small", "Very small (0.03-0.04 JM)")),
    (4, 4, RangeEntry(0.04, 0.045, "Small", "Uranus-sized (0.04-0.045 JM)")),
    (5, 5, RangeEntry(0.045, 0.05, "Below Average", "Below average (0.045-0.05 JM)")),
    (6, 6, RangeEntry(0.05, 0.055, "Average", "Neptune-sized (0.05-0.055 JM)")),
    (7, 7, RangeEntry(0.055, 0.06, "Above Average", "Above average (0.055-0.06 JM)")),
    (8, 8, RangeEntry(0.06, 0.07, "Large", "Large ice giant (0.06-0.07 JM)")),
    (9, 9, RangeEntry(0.07, 0.08, "Very Large", "Very large (0.07-0.08 JM)")),
    (10, 10, RangeEntry(0.08, 0.09, "Huge", "Huge ice giant (0.08-0.09 JM)")),
    (11, 11, RangeEntry(0.09, 0.1, "Massive", "Massive ice giant (0.09-0.1 JM)")),
    (12, 12, RangeEntry(0.1, 0.15, "Super-Massive", "Super ice giant (0.1-0.15 JM)")),
])

GIANT_SIZE_TABLES: Mapping[PlanetType, Mapping[int, RangeEntry]] = MappingProxyType({
    PlanetType.GAS_GIANT: GAS_GIANT_SIZE_TABLE,
    PlanetType.ICE_GIANT: ICE_GIANT_SIZE_TABLE,
})

BELT_DENSITY_TABLE: Mapping[int, BeltDensity] = build_roll_table([
    (2, 4, BeltDensity.SPARSE),
    (5, 9, BeltDensity.MODERATE),
    (10, 12, BeltDensity.DENSE),
])

BELT_WIDTH: Mapping[PlanetType, float] = MappingProxyType({
    PlanetType.ASTEROID_BELT: 0.5,
    PlanetType.PLANETOID_BELT: 1.0,
})

MAX_GIANT_MASS = 15  # Jupiter masses, for validation


# =============================================================================
# MOONS
# =============================================================================

MOON_TYPE_TABLE: Mapping[int, MoonType] = build_roll_table([
    (2, 2, MoonType.CAPTURED_ASTEROID),
    (3, 6, MoonType.MINOR),
    (7, 12, MoonType.MAJOR),
])

# Lunar masses
MOON_SIZE_TABLE: Mapping[int, RangeEntry] = build_roll_table([
    (2, 2, RangeEntry(0.01, 0.05, "Tiny", "Asteroid-sized (50-250 km diameter)")),
    (3, 3, RangeEntry(0.05, 0.1, "Very Small", "Small captured body (250-500 km)")),
    (4, 4, RangeEntry(0.1, 0.2, "Small", "Small moon (500-800 km)")),
    (5, 5, RangeEntry(0.2, 0.4, "Below Average", "Medium-small moon (800-1,200 km)")),
    (6, 6, RangeEntry(0.4, 0.6, "Average", "Medium moon (1,200-1,800 km)")),
    (7, 7, RangeEntry(0.6, 0.8, "Above Average", "Medium-large moon (1,800-2,400 km)")),
    (8, 8, RangeEntry(0.8, 1.0, "Large", "Large moon, Luna-sized (2,400-3,500 km)")),
    (9, 9, RangeEntry(1.0, 1.3, "Very Large", "Very large moon (3,500-4,200 km)")),
    (10, 10, RangeEntry(1.3, 1.6, "Huge", "Huge moon (4,200-4,800 km)")),
    (11, 11, RangeEntry(1.6, 1.9, "Titan-sized", "Titan-sized moon (4,800-5,200 km)")),
    (12, 12, RangeEntry(1.9, 2.2, "Ganymede-sized", "Ganymede-sized moon (5,200-5,600 km)")),
])

LUNAR_SURFACE_GRAVITY = 0.165  # G at one lunar mass
MAX_MOON_SIZE = 5  # Lunar masses, for validation


# =============================================================================
# BROWN DWARFS
# =============================================================================


@dataclass(frozen=True)
class SpectralEntry:
    spectral_type: BrownDwarfSpectralType
    min_temperature: int  # Kelvin
    max_temperature: int
    color: str
    description: str


# Jupiter masses
BROWN_DWARF_MASS_TABLE: Mapping[int, RangeEntry] = build_roll_table([
    (2, 2, RangeEntry(13, 20, "Very Small")),
    (3, 3, RangeEntry(20, 25, "Small")),
    (4, 4, RangeEntry(25, 30, "Below Average")),
    (5, 5, RangeEntry(30, 35, "Moderately Small")),
    (6, 6, RangeEntry(35, 40, "Average")),
    (7, 7, RangeEntry(40, 45, "Standard")),
    (8, 8, RangeEntry(45, 50, "Above Average")),
    (9, 9, RangeEntry(50, 55, "Moderately Large")),
    (10, 10, RangeEntry(55, 65, "Large")),
    (11, 11, RangeEntry(65, 75, "Very Large")),
    (12, 12, RangeEntry(75, 80, "Near Stellar")),
])

BROWN_DWARF_SPECTRAL_TABLE: Mapping[int, SpectralEntry] = build_roll_table([
    (2, 2, SpectralEntry(BrownDwarfSpectralType.Y, 300, 400, "Dark Purple", "Very cool, ammonia clouds, barely visible")),
    (3, 3, SpectralEntry(BrownDwarfSpectralType.Y, 400, 500, "Purple-Gray", "Cool, ammonia-dominated atmosphere")),
    (4, 4, SpectralEntry(BrownDwarfSpectralType.Y, 500, 600, "Gray-Blue", "Cool, transitioning to T class")),
    (5, 5, SpectralEntry(BrownDwarfSpectralType.T, 600, 800, "Magenta-Brown", "Moderate, strong methane absorption")),
    (6, 6, SpectralEntry(BrownDwarfSpectralType.T, 800, 1000, "Brown-Red", "Moderate, methane bands prominent")),
    (7, 7, SpectralEntry(BrownDwarfSpectralType.T, 1000, 1200, "Burgundy", "Warm T class, methane weakening")),
    (8, 8, SpectralEntry(BrownDwarfSpectralType.T, 1200, 1300, "Deep Red", "Hot T class, transitioning to L")),
    (9, 9, SpectralEntry(BrownDwarfSpectralType.L, 1300, 1600, "Crimson", "Hot, lithium present, faint glow")),
    (10, 10, SpectralEntry(BrownDwarfSpectralType.L, 1600, 2000, "Bright Red", "Very hot, dust clouds forming")),
    (11, 11, SpectralEntry(BrownDwarfSpectralType.L, 2000, 2300, "Orange-Red", "Near stellar, silicate clouds")),
    (12, 12, SpectralEntry(BrownDwarfSpectralType.L, 2300, 2500, "Bright Orange", "Hottest brown dwarf, close to M dwarf")),
])

# Coolest and hottest temperature (K) each spectral class covers, for subtype digits
BROWN_DWARF_TEMPERATURE_SPANS: Mapping[BrownDwarfSpectralType, tuple[int, int]] = MappingProxyType({
    spectral_type: (
        min(e.min_temperature for e in BROWN_DWARF_SPECTRAL_TABLE.values() if e.spectral_type == spectral_type),
        max(e.max_temperature for e in BROWN_DWARF_SPECTRAL_TABLE.values() if e.spectral_type == spectral_type),
    )
    for spectral_type in BrownDwarfSpectralType
})

BROWN_DWARF_MIN_MASS = 13
BROWN_DWARF_MAX_MASS = 80
