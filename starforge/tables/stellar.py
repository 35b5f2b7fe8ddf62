"""
Stellar tables for Starforge.

Mass, luminosity and temperature by spectral class and grade (index = grade
0-9, grade 0 the hottest member of the class), the primary star class table,
companion star targets and companion orbit bands.
"""

from types import MappingProxyType
from typing import Any, Mapping

from starforge.data_models import StarClass
from starforge.tables.table_types import RangeEntry, build_roll_table

STAR_CLASS_ORDER: tuple[StarClass, ...] = (
    StarClass.O,
    StarClass.B,
    StarClass.A,
    StarClass.F,
    StarClass.G,
    StarClass.K,
    StarClass.M,
)

GRADES = range(10)


# =============================================================================
# PHYSICAL PROPERTIES
# =============================================================================

# Solar masses
STELLAR_MASS: Mapping[StarClass, tuple[float, ...]] = MappingProxyType({
    StarClass.O: (128.0, 116.8, 105.6, 94.4, 83.2, 72.0, 60.8, 49.6, 38.4, 27.2),
    StarClass.B: (16.0, 14.61, 13.22, 11.83, 10.44, 9.05, 7.66, 6.27, 4.88, 3.49),
    StarClass.A: (2.1, 2.03, 1.96, 1.89, 1.82, 1.75, 1.68, 1.61, 1.54, 1.47),
    StarClass.F: (1.4, 1.36, 1.33, 1.29, 1.26, 1.22, 1.18, 1.15, 1.11, 1.08),
    StarClass.G: (1.04, 1.02, 0.99, 0.97, 0.94, 0.92, 0.9, 0.87, 0.85, 0.82),
    StarClass.K: (0.8, 0.77, 0.73, 0.7, 0.66, 0.63, 0.59, 0.56, 0.52, 0.49),
    StarClass.M: (0.45, 0.41, 0.38, 0.34, 0.3, 0.27, 0.23, 0.19, 0.15, 0.12),
})

# Solar luminosities
STELLAR_LUMINOSITY: Mapping[StarClass, tuple[float, ...]] = MappingProxyType({
    StarClass.O: (3516325, 2071113, 1219884, 718510, 423202, 249266, 146817, 86475, 50934, 30000),
    StarClass.B: (14752.9, 7260.98, 3573.66, 1758.86, 865.66, 426.06, 209.69, 103.21, 50.8, 25.0),
    StarClass.A: (23.0, 21.2, 19.4, 17.6, 15.8, 14.0, 12.2, 10.4, 8.6, 5.0),
    StarClass.F: (4.65, 4.34, 4.02, 3.71, 3.39, 3.08, 2.76, 2.45, 2.13, 1.5),
    StarClass.G: (1.41, 1.33, 1.25, 1.17, 1.09, 1.01, 0.92, 0.84, 0.76, 0.6),
    StarClass.K: (0.55, 0.5, 0.45, 0.41, 0.36, 0.31, 0.27, 0.22, 0.17, 0.08),
    # Published M row repeats values at two-decimal precision; interpolated to stay strictly decreasing
    StarClass.M: (0.07, 0.064, 0.058, 0.052, 0.046, 0.040, 0.034, 0.028, 0.020, 0.012),
})

# Kelvin
STELLAR_TEMPERATURE: Mapping[StarClass, tuple[int, ...]] = MappingProxyType({
    StarClass.O: (50000, 47000, 44000, 41000, 38000, 35000, 33000, 31000, 30000, 30000),
    StarClass.B: (30000, 25000, 22000, 18500, 16000, 15000, 14000, 13000, 11500, 10500),
    StarClass.A: (10000, 9750, 9500, 9250, 9000, 8750, 8500, 8250, 8000, 7500),
    StarClass.F: (7500, 7300, 7100, 6900, 6700, 6500, 6400, 6300, 6200, 6000),
    StarClass.G: (6000, 5900, 5850, 5800, 5750, 5700, 5600, 5500, 5400, 5200),
    StarClass.K: (5200, 5000, 4800, 4600, 4400, 4200, 4000, 3900, 3800, 3700),
    StarClass.M: (3700, 3600, 3500, 3400, 3300, 3200, 3100, 3000, 2800, 2400),
})

STAR_CLASS_INFO: Mapping[StarClass, Mapping[str, Any]] = MappingProxyType({
    StarClass.O: MappingProxyType({
        "color": "Blue",
        "description": "Extremely hot and luminous",
        "temperature_range": ">=30,000 K",
    }),
    StarClass.B: MappingProxyType({
        "color": "Blue-White",
        "description": "Very hot and bright",
        "temperature_range": "10,000-30,000 K",
    }),
    StarClass.A: MappingProxyType({
        "color": "White",
        "description": "Hot main sequence",
        "temperature_range": "7,500-10,000 K",
    }),
    StarClass.F: MappingProxyType({
        "color": "Yellow-White",
        "description": "Intermediate temperature",
        "temperature_range": "6,000-7,500 K",
    }),
    StarClass.G: MappingProxyType({
        "color": "Yellow",
        "description": "Sun-like stars",
        "temperature_range": "5,200-6,000 K",
    }),
    StarClass.K: MappingProxyType({
        "color": "Orange",
        "description": "Cool main sequence",
        "temperature_range": "3,700-5,200 K",
    }),
    StarClass.M: MappingProxyType({
        "color": "Red",
        "description": "Cool, dim, and common",
        "temperature_range": "2,400-3,700 K",
    }),
})

SOLAR_TEMPERATURE = 5778


# =============================================================================
# ZONE CONSTANTS
# =============================================================================

# Multiples of sqrt(luminosity), in AU
HABITABLE_INNER_COEFFICIENT = 0.95
HABITABLE_OUTER_COEFFICIENT = 1.37
FROSTLINE_COEFFICIENT = 4.85

# Multiples of the habitable zone edges
HOT_INNER_MULTIPLIER = 0.5   # x habitable inner
COLD_OUTER_MULTIPLIER = 2.0  # x habitable outer

ZONE_INFO: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "infernal": MappingProxyType({
        "name": "Infernal Zone",
        "description": "Molten surface, extreme heat, no atmosphere retention",
    }),
    "hot": MappingProxyType({
        "name": "Hot Zone",
        "description": "Hot desert worlds, minimal water, challenging conditions",
    }),
    "habitable": MappingProxyType({
        "name": "Habitable Zone",
        "description": "Liquid water possible, optimal for life",
    }),
    "cold": MappingProxyType({
        "name": "Cold Zone",
        "description": "Frozen surface, potential subsurface oceans",
    }),
    "outer": MappingProxyType({
        "name": "Outer Zone",
        "description": "Gas giants and ice worlds, beyond habitable range",
    }),
    "beyond": MappingProxyType({
        "name": "Beyond Frostline",
        "description": "Far outer system, comets and icy bodies",
    }),
})


# =============================================================================
# STAR GENERATION TABLES
# =============================================================================

# 2d6 -> primary star class
PRIMARY_CLASS_TABLE: Mapping[int, StarClass] = build_roll_table([
    (2, 2, StarClass.O),
    (3, 3, StarClass.B),
    (4, 4, StarClass.A),
    (5, 5, StarClass.F),
    (6, 7, StarClass.G),
    (8, 9, StarClass.K),
    (10, 12, StarClass.M),
])

# 2d6 target for each companion roll, by primary class
COMPANION_TARGET: Mapping[StarClass, int] = MappingProxyType({
    StarClass.O: 4,
    StarClass.B: 5,
    StarClass.A: 6,
    StarClass.F: 7,
    StarClass.G: 8,
    StarClass.K: 9,
    StarClass.M: 10,
})

MAX_COMPANIONS = 3
MIN_COMPANION_SEPARATION = 0.01  # AU

_HOT_BANDS = build_roll_table([
    (3, 6, RangeEntry(0.1, 1, "Close")),
    (7, 10, RangeEntry(1, 10, "Near")),
    (11, 14, RangeEntry(10, 100, "Far")),
    (15, 18, RangeEntry(100, 1000, "Distant")),
], low=3, high=18)

_SOLAR_BANDS = build_roll_table([
    (3, 6, RangeEntry(0.05, 0.5, "Close")),
    (7, 10, RangeEntry(0.5, 5, "Near")),
    (11, 14, RangeEntry(5, 50, "Far")),
    (15, 18, RangeEntry(50, 500, "Distant")),
], low=3, high=18)

_COOL_BANDS = build_roll_table([
    (3, 6, RangeEntry(0.01, 0.1, "Close")),
    (7, 10, RangeEntry(0.1, 1, "Near")),
    (11, 14, RangeEntry(1, 10, "Far")),
    (15, 18, RangeEntry(10, 100, "Distant")),
], low=3, high=18)

# 3d6 -> AU band (log-uniform inside the band), by primary class
COMPANION_ORBIT_TABLE: Mapping[StarClass, Mapping[int, RangeEntry]] = MappingProxyType({
    StarClass.O: _HOT_BANDS,
    StarClass.B: _HOT_BANDS,
    StarClass.A: _HOT_BANDS,
    StarClass.F: _SOLAR_BANDS,
    StarClass.G: _SOLAR_BANDS,
    StarClass.K: _COOL_BANDS,
    StarClass.M: _COOL_BANDS,
})
