"""
Table entry types and lookup helpers shared by all Starforge tables.

Tables are static data: each is built once at import time into a read-only
mapping keyed by roll, and a coverage check makes a gap or overlap in the
transcribed ranges fail at import rather than at generation time.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, TypeVar

from starforge.errors import InvalidParameterError

T = TypeVar("T")


# =============================================================================
# TABLE BUILDING
# =============================================================================


def build_roll_table(rows: Iterable[tuple[int, int, T]], low: int = 2, high: int = 12) -> Mapping[int, T]:
    """
    Expand (min_roll, max_roll, entry) rows into an immutable roll -> entry map.

    Raises:
        ValueError: If the rows overlap or leave any roll in [low, high] unmapped.
    """
    table: dict[int, T] = {}
    for min_roll, max_roll, entry in rows:
        for roll in range(min_roll, max_roll + 1):
            if roll in table:
                raise ValueError(f"Roll {roll} mapped twice")
            table[roll] = entry
    missing = [r for r in range(low, high + 1) if r not in table]
    extra = [r for r in table if r < low or r > high]
    if missing or extra:
        raise ValueError(f"Table does not cover {low}-{high}: missing {missing}, extra {extra}")
    return MappingProxyType(table)


def lookup(table: Mapping[Any, T], roll: Any, table_name: str) -> T:
    """Fetch a table entry, treating an unknown roll as an invalid parameter."""
    try:
        return table[roll]
    except (KeyError, TypeError):
        raise InvalidParameterError(table_name, roll, "no table entry for this roll") from None


# =============================================================================
# ENTRY TYPES
# =============================================================================


@dataclass(frozen=True)
class ModifierEntry:
    """A categorical result with a signed habitability modifier."""
    value: Any
    label: str
    description: str
    modifier: float = 0


@dataclass(frozen=True)
class SizeEntry:
    """One row of a world size table."""
    label: str
    mass_label: str
    mass: float
    description: str
    population: Optional[int] = None


@dataclass(frozen=True)
class RangeEntry:
    """A rolled band with numeric bounds; generators pick the midpoint or a value inside."""
    min: float
    max: float
    label: str
    description: str = ""

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2
