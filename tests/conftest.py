"""
Pytest fixtures for the Starforge test suite.
"""

import pytest

from starforge.data_models import StarClass
from starforge.dice import DiceRoller
from starforge.stars import generate_primary
from starforge.stellar import calculate_stellar_zones
from starforge.system import GenerationParams, generate_star_system


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a DiceRoller with a fixed seed for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def clean_dice():
    """Provide an unseeded DiceRoller with an empty roll log."""
    dice = DiceRoller()
    dice.clear_roll_log()
    return dice


# =============================================================================
# STELLAR FIXTURES
# =============================================================================


@pytest.fixture
def sun_like_primary():
    """A G2 primary set by hand (no dice consumed)."""
    return generate_primary("sol:primary", name="Sol", star_class=StarClass.G, grade=2)


@pytest.fixture
def sun_like_zones():
    """Zones for a luminosity of exactly 1."""
    return calculate_stellar_zones(1.0)


# =============================================================================
# SYSTEM FIXTURES
# =============================================================================


@pytest.fixture
def seeded_system():
    """A complete system from seed 7 with one brown dwarf requested."""
    params = GenerationParams(star_system_id="tau-ceti", tech_level=9, brown_dwarf_count=1)
    return generate_star_system(params, DiceRoller(seed=7))
