"""Static lookup tables for Starforge generators."""

from starforge.tables.table_types import (
    ModifierEntry,
    RangeEntry,
    SizeEntry,
    build_roll_table,
    lookup,
)

__all__ = [
    "ModifierEntry",
    "RangeEntry",
    "SizeEntry",
    "build_roll_table",
    "lookup",
]
