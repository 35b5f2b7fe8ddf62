"""
Starport tables: class by Port Value Score, capabilities and base targets.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from starforge.data_models import BaseType, StarportClass


@dataclass(frozen=True)
class StarportClassEntry:
    starport_class: StarportClass
    min_pvs: Optional[int]  # None: unbounded below
    max_pvs: Optional[int]  # None: unbounded above
    label: str
    description: str
    capabilities: tuple[str, ...]

    def contains(self, pvs: int) -> bool:
        if self.min_pvs is not None and pvs < self.min_pvs:
            return False
        if self.max_pvs is not None and pvs > self.max_pvs:
            return False
        return True


# Ascending PVS; ranges are inclusive and contiguous
STARPORT_CLASS_TABLE: tuple[StarportClassEntry, ...] = (
    StarportClassEntry(StarportClass.X, None, -1, "No Starport", "No port facilities", ()),
    StarportClassEntry(
        StarportClass.E, 0, 3, "Frontier Port", "Minimal facilities",
        ("Basic landing pad", "No fuel", "No repair"),
    ),
    StarportClassEntry(
        StarportClass.D, 4, 7, "Poor Port", "Limited services",
        ("Landing facilities", "Unrefined fuel", "Limited repair"),
    ),
    StarportClassEntry(
        StarportClass.C, 8, 11, "Routine Port", "Standard services",
        ("Good facilities", "Refined fuel", "Shipyard (small craft)"),
    ),
    StarportClassEntry(
        StarportClass.B, 12, 15, "Good Port", "Excellent services",
        ("Excellent facilities", "Refined fuel", "Shipyard (spacecraft)"),
    ),
    StarportClassEntry(
        StarportClass.A, 16, None, "Excellent Port", "Best possible services",
        ("Best facilities", "Refined fuel", "Shipyard (all classes)", "Naval base possible"),
    ),
)

STARPORT_CLASS_INFO: Mapping[StarportClass, StarportClassEntry] = MappingProxyType(
    {entry.starport_class: entry for entry in STARPORT_CLASS_TABLE}
)

# 2d6 target per (base type, class); a missing class means the base cannot exist there
BASE_PRESENCE_TARGETS: Mapping[BaseType, Mapping[StarportClass, int]] = MappingProxyType({
    BaseType.NAVAL: MappingProxyType({
        StarportClass.A: 8,
        StarportClass.B: 10,
    }),
    BaseType.SCOUT: MappingProxyType({
        StarportClass.A: 7,
        StarportClass.B: 8,
        StarportClass.C: 9,
        StarportClass.D: 10,
    }),
    BaseType.PIRATE: MappingProxyType({
        StarportClass.C: 12,
        StarportClass.D: 12,
        StarportClass.E: 12,
    }),
    BaseType.RESEARCH: MappingProxyType({
        StarportClass.A: 8,
        StarportClass.B: 9,
        StarportClass.C: 10,
    }),
    BaseType.MILITARY: MappingProxyType({
        StarportClass.A: 9,
        StarportClass.B: 9,
        StarportClass.C: 10,
        StarportClass.D: 11,
    }),
})

# Roll order within generate_starport
BASE_ORDER: tuple[BaseType, ...] = (
    BaseType.NAVAL,
    BaseType.SCOUT,
    BaseType.PIRATE,
    BaseType.RESEARCH,
    BaseType.MILITARY,
)
