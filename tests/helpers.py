"""
Test helpers for the Starforge test suite.

Provides deterministic random sources for DiceRoller:
- ScriptedRng replays exact die faces, then falls back to a seeded source
- FixedRng always answers the low or high end of every range
- NoDiceRng fails the test if anything rolls at all
"""

import random
from typing import Iterable

from starforge.dice import DiceRoller


def faces_2d6(*totals: int) -> list[int]:
    """Die faces that produce each 2d6 total in turn."""
    faces = []
    for total in totals:
        if not 2 <= total <= 12:
            raise ValueError(f"2d6 total out of range: {total}")
        first = max(1, total - 6)
        faces.extend([first, total - first])
    return faces


class ScriptedRng:
    """
    random.Random stand-in that answers randint() from a script.

    Once the script runs out, randint() uses a seeded fallback. uniform()
    returns the scripted fraction of the range, or the midpoint.
    """

    def __init__(self, faces: Iterable[int] = (), uniforms: Iterable[float] = (), seed: int = 0):
        self._faces = list(faces)
        self._uniforms = list(uniforms)
        self._fallback = random.Random(seed)

    @property
    def remaining(self) -> int:
        return len(self._faces)

    def randint(self, low: int, high: int) -> int:
        if not self._faces:
            return self._fallback.randint(low, high)
        value = self._faces.pop(0)
        if not low <= value <= high:
            raise AssertionError(f"Scripted face {value} outside [{low}, {high}]")
        return value

    def uniform(self, low: float, high: float) -> float:
        if self._uniforms:
            return low + (high - low) * self._uniforms.pop(0)
        return (low + high) / 2


class FixedRng:
    """Always the high (or low) end of every range."""

    def __init__(self, high: bool = True):
        self.high = high

    def randint(self, low: int, high: int) -> int:
        return high if self.high else low

    def uniform(self, low: float, high: float) -> float:
        return high if self.high else low


class NoDiceRng:
    """Fails on any draw."""

    def randint(self, low: int, high: int) -> int:
        raise AssertionError("Unexpected dice roll")

    def uniform(self, low: float, high: float) -> float:
        raise AssertionError("Unexpected dice roll")


def scripted_dice(*faces: int, uniforms: Iterable[float] = (), seed: int = 0) -> DiceRoller:
    """DiceRoller over a ScriptedRng."""
    return DiceRoller(rng=ScriptedRng(faces, uniforms, seed))


# =============================================================================
# WORLD SCRIPTS
# =============================================================================

# type 7, size 7, gravity 7, atmosphere 8 (standard), temperature 7
# (temperate), hazard 9 (volcanic), intensity 6, resources 9 (rich)
TERRESTRIAL_WORLD_TOTALS = (7, 7, 7, 8, 7, 9, 6, 9)

# type 11, size 8, atmosphere 2, temperature 2, hazard 7 (none, so no
# intensity roll), resources 2
HABITAT_WORLD_TOTALS = (11, 8, 2, 2, 7, 2)
