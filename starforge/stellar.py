"""
Stellar property resolver and orbital zones.

Maps (spectral class, grade) to physical properties, derives orbital zone
boundaries from luminosity and classifies orbital distances into zones.
"""

import logging
import math
from typing import Any, Union

from starforge.data_models import OrbitalZone, StarClass, StellarProperty, StellarZones
from starforge.errors import InvalidParameterError
from starforge.tables.stellar import (
    COLD_OUTER_MULTIPLIER,
    FROSTLINE_COEFFICIENT,
    GRADES,
    HABITABLE_INNER_COEFFICIENT,
    HABITABLE_OUTER_COEFFICIENT,
    HOT_INNER_MULTIPLIER,
    SOLAR_TEMPERATURE,
    STAR_CLASS_INFO,
    STELLAR_LUMINOSITY,
    STELLAR_MASS,
    STELLAR_TEMPERATURE,
    ZONE_INFO,
)

logger = logging.getLogger(__name__)

# Fraction of a companion's separation inside which planetary orbits stay stable
STABLE_ORBIT_FRACTION = 1 / 3


# =============================================================================
# VALIDATION
# =============================================================================


def parse_star_class(value: Union[str, StarClass]) -> StarClass:
    """Accept a StarClass or its letter (any case)."""
    if isinstance(value, StarClass):
        return value
    if isinstance(value, str):
        try:
            return StarClass(value.strip().upper())
        except ValueError:
            pass
    raise InvalidParameterError("star_class", value, "expected one of O, B, A, F, G, K, M")


def validate_grade(grade: Any) -> int:
    if isinstance(grade, bool) or not isinstance(grade, int) or grade not in GRADES:
        raise InvalidParameterError("grade", grade, "expected an integer 0-9")
    return grade


# =============================================================================
# PROPERTY RESOLUTION
# =============================================================================


def calculate_radius(luminosity: float, temperature: float) -> float:
    """Radius in solar radii from L = R^2 T^4 (solar units)."""
    return math.sqrt(luminosity) * (SOLAR_TEMPERATURE / temperature) ** 2


def resolve_stellar_property(star_class: Union[str, StarClass], grade: int) -> StellarProperty:
    """
    Look up mass, luminosity and temperature for a class and grade.

    Raises:
        InvalidParameterError: If the class is unknown or the grade is outside 0-9.
    """
    star_class = parse_star_class(star_class)
    grade = validate_grade(grade)

    luminosity = STELLAR_LUMINOSITY[star_class][grade]
    temperature = STELLAR_TEMPERATURE[star_class][grade]
    info = STAR_CLASS_INFO[star_class]
    return StellarProperty(
        star_class=star_class,
        grade=grade,
        mass=STELLAR_MASS[star_class][grade],
        luminosity=luminosity,
        temperature=temperature,
        radius=calculate_radius(luminosity, temperature),
        color=info["color"],
        description=info["description"],
    )


# =============================================================================
# ZONES
# =============================================================================


def calculate_stellar_zones(luminosity: float) -> StellarZones:
    """
    Derive zone boundaries (AU) from luminosity.

    Every boundary scales with sqrt(luminosity), so all of them move outward
    together as luminosity rises and their order never changes.
    """
    if isinstance(luminosity, bool) or not isinstance(luminosity, (int, float)) or not luminosity > 0:
        raise InvalidParameterError("luminosity", luminosity, "must be a positive number")
    root = math.sqrt(luminosity)
    habitable_inner = HABITABLE_INNER_COEFFICIENT * root
    habitable_outer = HABITABLE_OUTER_COEFFICIENT * root
    return StellarZones(
        luminosity=luminosity,
        hot_inner=HOT_INNER_MULTIPLIER * habitable_inner,
        habitable_inner=habitable_inner,
        habitable_outer=habitable_outer,
        cold_outer=COLD_OUTER_MULTIPLIER * habitable_outer,
        frostline=FROSTLINE_COEFFICIENT * root,
    )


def zones_for_star(star_class: Union[str, StarClass], grade: int) -> StellarZones:
    return calculate_stellar_zones(resolve_stellar_property(star_class, grade).luminosity)


def classify_orbit(distance: float, zones: StellarZones) -> OrbitalZone:
    """Zone an orbital distance (AU) falls into. The habitable zone includes both edges."""
    if distance < 0:
        raise InvalidParameterError("distance", distance, "must not be negative")
    if distance < zones.hot_inner:
        return OrbitalZone.INFERNAL
    if distance < zones.habitable_inner:
        return OrbitalZone.HOT
    if distance <= zones.habitable_outer:
        return OrbitalZone.HABITABLE
    if distance < zones.cold_outer:
        return OrbitalZone.COLD
    if distance <= zones.frostline:
        return OrbitalZone.OUTER
    return OrbitalZone.BEYOND


def zone_display_name(zone: OrbitalZone) -> str:
    return ZONE_INFO[zone.value]["name"]


def zone_description(zone: OrbitalZone) -> str:
    return ZONE_INFO[zone.value]["description"]


# =============================================================================
# COMPANION STABILITY
# =============================================================================


def stable_orbit_limit(companion_distance: float) -> float:
    """Outermost stable planetary orbit (AU) around the primary given a companion's distance."""
    return companion_distance * STABLE_ORBIT_FRACTION


def validate_companion_orbit(companion_distance: float, zones: StellarZones) -> list[str]:
    """
    Warnings about a companion's effect on the primary's planets.

    Returns:
        A list of human-readable warnings; empty when the orbit is harmless.
    """
    warnings = []
    if companion_distance <= zones.habitable_outer:
        warnings.append(
            "Companion orbit is inside or near the habitable zone. "
            "This may destabilize planetary orbits."
        )
    if companion_distance <= zones.habitable_inner:
        warnings.append(
            "Companion is very close to primary star. "
            "Tidal interactions will be significant."
        )
    if warnings:
        logger.debug(f"Companion at {companion_distance:.3f} AU: {len(warnings)} warning(s)")
    return warnings
