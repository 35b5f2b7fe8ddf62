"""
Primary world tables: world type, size by type, gravity and dwarf composition.

All tables are 2d6. Masses are in Earth masses except habitats, whose mass
column is the structure's mass value in megatonnes/gigatonnes (MVT/GVT).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from starforge.data_models import DwarfComposition, WorldType
from starforge.tables.table_types import ModifierEntry, SizeEntry, build_roll_table

LUNAR_MASS_IN_EARTH_MASSES = 0.0123

WORLD_TYPE_TABLE: Mapping[int, WorldType] = build_roll_table([
    (2, 4, WorldType.DWARF),
    (5, 9, WorldType.TERRESTRIAL),
    (10, 12, WorldType.HABITAT),
])

WORLD_TYPE_LABELS: Mapping[WorldType, str] = MappingProxyType({
    WorldType.HABITAT: "Habitat",
    WorldType.TERRESTRIAL: "Terrestrial",
    WorldType.DWARF: "Lesser Earth",
})


# =============================================================================
# SIZE TABLES
# =============================================================================

HABITAT_SIZE_TABLE: Mapping[int, SizeEntry] = build_roll_table([
    (2, 2, SizeEntry("Tiny", "1 MVT", 0.001, "10K-33K people", 10_000)),
    (3, 3, SizeEntry("Small", "3 MVT", 0.003, "30K-99K people", 30_000)),
    (4, 4, SizeEntry("Medium", "10 MVT", 0.01, "100K-333K people", 100_000)),
    (5, 5, SizeEntry("Large", "30 MVT", 0.03, "300K-999K people", 300_000)),
    (6, 6, SizeEntry("Very Large", "100 MVT", 0.1, "1M-3M people", 1_000_000)),
    (7, 7, SizeEntry("Huge", "300 MVT", 0.3, "3M-9M people", 3_000_000)),
    (8, 8, SizeEntry("Massive", "1 GVT", 1, "10M-33M people", 10_000_000)),
    (9, 9, SizeEntry("Giant", "3 GVT", 3, "30M-99M people", 30_000_000)),
    (10, 10, SizeEntry("Enormous", "10 GVT", 10, "100M-333M people", 100_000_000)),
    (11, 11, SizeEntry("Colossal", "30 GVT", 30, "300M-999M people", 300_000_000)),
    (12, 12, SizeEntry("Mega", "100 GVT", 100, "1B-3B people", 1_000_000_000)),
])


def _dwarf(label: str, lunar_masses: float, description: str) -> SizeEntry:
    return SizeEntry(
        label,
        f"{lunar_masses} LM",
        round(lunar_masses * LUNAR_MASS_IN_EARTH_MASSES, 6),
        description,
    )


DWARF_SIZE_TABLE: Mapping[int, SizeEntry] = build_roll_table([
    (2, 2, _dwarf("Micro", 0.1, "Very small dwarf")),
    (3, 3, _dwarf("Tiny", 0.2, "Small dwarf")),
    (4, 4, _dwarf("Small", 0.3, "Below average")),
    (5, 5, _dwarf("Below Average", 0.5, "Moderately small")),
    (6, 6, _dwarf("Average", 0.7, "Average dwarf")),
    (7, 7, _dwarf("Standard", 1.0, "Luna-sized")),
    (8, 8, _dwarf("Large", 1.5, "Large dwarf")),
    (9, 9, _dwarf("Very Large", 2.0, "Very large dwarf")),
    (10, 10, _dwarf("Huge", 3.0, "Huge dwarf")),
    (11, 11, _dwarf("Massive", 5.0, "Massive dwarf")),
    (12, 12, _dwarf("Giant", 7.0, "Giant dwarf")),
])

TERRESTRIAL_SIZE_TABLE: Mapping[int, SizeEntry] = build_roll_table([
    (2, 2, SizeEntry("Micro", "0.1 EM", 0.1, "Mars-sized")),
    (3, 3, SizeEntry("Tiny", "0.2 EM", 0.2, "Very small")),
    (4, 4, SizeEntry("Small", "0.3 EM", 0.3, "Below average")),
    (5, 5, SizeEntry("Below Average", "0.5 EM", 0.5, "Moderately small")),
    (6, 6, SizeEntry("Average", "0.7 EM", 0.7, "Below Earth")),
    (7, 7, SizeEntry("Standard", "1.0 EM", 1.0, "Earth-sized")),
    (8, 8, SizeEntry("Large", "1.5 EM", 1.5, "Super Earth")),
    (9, 9, SizeEntry("Very Large", "2.0 EM", 2.0, "Large super Earth")),
    (10, 10, SizeEntry("Huge", "3.0 EM", 3.0, "Huge terrestrial")),
    (11, 11, SizeEntry("Massive", "5.0 EM", 5.0, "Massive terrestrial")),
    (12, 12, SizeEntry("Mega Earth", "7.0 EM", 7.0, "Mega Earth")),
])

SIZE_TABLES: Mapping[WorldType, Mapping[int, SizeEntry]] = MappingProxyType({
    WorldType.HABITAT: HABITAT_SIZE_TABLE,
    WorldType.DWARF: DWARF_SIZE_TABLE,
    WorldType.TERRESTRIAL: TERRESTRIAL_SIZE_TABLE,
})


# =============================================================================
# GRAVITY
# =============================================================================


@dataclass(frozen=True)
class GravityEntry:
    dwarf: float        # G
    terrestrial: float  # G
    modifier: float     # habitability modifier

    def for_type(self, world_type: WorldType) -> float:
        return self.dwarf if world_type == WorldType.DWARF else self.terrestrial


# Habitats never roll on this table
GRAVITY_TABLE: Mapping[int, GravityEntry] = build_roll_table([
    (2, 2, GravityEntry(0.001, 0.3, -2)),
    (3, 3, GravityEntry(0.02, 0.4, -1.5)),
    (4, 4, GravityEntry(0.04, 0.5, -1)),
    (5, 5, GravityEntry(0.06, 0.7, -0.5)),
    (6, 6, GravityEntry(0.08, 0.9, 0)),
    (7, 7, GravityEntry(0.10, 1.0, 0)),
    (8, 8, GravityEntry(0.12, 1.0, 0)),
    (9, 9, GravityEntry(0.14, 1.2, 0)),
    (10, 10, GravityEntry(0.16, 1.5, -0.5)),
    (11, 11, GravityEntry(0.18, 2.0, -1.5)),
    (12, 12, GravityEntry(0.20, 3.0, -2.5)),
])


# =============================================================================
# DWARF COMPOSITION
# =============================================================================

DWARF_COMPOSITION_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 3, ModifierEntry(DwarfComposition.METALLIC, "Metallic", "Dense, found near star", -1)),
    (4, 8, ModifierEntry(DwarfComposition.SILICACEOUS, "Silicaceous", "Stony, moderate density", 0)),
    (9, 11, ModifierEntry(DwarfComposition.CARBONACEOUS, "Carbonaceous", "Volatile-rich, found in outer zones", 1)),
    (12, 12, ModifierEntry(DwarfComposition.OTHER, "Other", "Unusual composition", 0)),
])
