"""
Generation provenance for Starforge records.

Every generated record carries exactly one provenance value:
- Procedural: every field came from a generator; rolls maps field name to the
  dice value that produced it (an int total or a d66 code string).
- Custom: at least one field was edited or re-rolled by hand after
  generation. overridden_fields names them; rolls keeps the dice values that
  still explain the remaining fields.

Records are frozen, so edits go through override_field(), which returns a new
record rather than mutating the old one.
"""

from dataclasses import dataclass, field, fields, is_dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional, Union

from starforge.errors import InvalidParameterError


class GenerationMethod(str, Enum):
    """How a record's values were produced."""
    PROCEDURAL = "procedural"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Procedural:
    """All values came from dice rolls."""
    rolls: Mapping[str, Any] = field(default_factory=dict)

    @property
    def method(self) -> GenerationMethod:
        return GenerationMethod.PROCEDURAL

    def to_dict(self) -> dict[str, Any]:
        return {"method": self.method.value, "rolls": dict(self.rolls)}


@dataclass(frozen=True)
class Custom:
    """Some values were set or re-rolled manually after generation."""
    overridden_fields: tuple[str, ...] = ()
    rolls: Mapping[str, Any] = field(default_factory=dict)

    @property
    def method(self) -> GenerationMethod:
        return GenerationMethod.CUSTOM

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method.value,
            "overridden_fields": list(self.overridden_fields),
            "rolls": dict(self.rolls),
        }


Provenance = Union[Procedural, Custom]


def mark_custom(
    provenance: Provenance,
    overridden: tuple[str, ...] = (),
    rolls: Optional[Mapping[str, Any]] = None,
    cleared: tuple[str, ...] = (),
) -> Custom:
    """
    Derive a Custom provenance from an existing one.

    Args:
        provenance: The record's current provenance
        overridden: Field names to add to overridden_fields
        rolls: Roll values to merge in (for re-rolled fields)
        cleared: Roll keys to drop (for hand-set fields)
    """
    merged = dict(provenance.rolls)
    for key in cleared:
        merged.pop(key, None)
    if rolls:
        merged.update(rolls)

    existing = provenance.overridden_fields if isinstance(provenance, Custom) else ()
    names = tuple(existing) + tuple(name for name in overridden if name not in existing)
    return Custom(overridden_fields=names, rolls=merged)


def override_field(record: Any, field_name: str, value: Any, roll_key: Optional[str] = None) -> Any:
    """
    Return a copy of a generated record with one field set by hand.

    The field's stored roll (roll_key, defaulting to the field name) is
    cleared and the record's provenance becomes Custom.

    Raises:
        InvalidParameterError: If the record has no such field.
    """
    if not is_dataclass(record) or not hasattr(record, "provenance"):
        raise InvalidParameterError("record", type(record).__name__, "not a generated record")
    names = {f.name for f in fields(record)}
    if field_name not in names or field_name == "provenance":
        raise InvalidParameterError("field_name", field_name, f"not a field of {type(record).__name__}")

    provenance = mark_custom(
        record.provenance,
        overridden=(field_name,),
        cleared=(roll_key or field_name,),
    )
    return replace(record, **{field_name: value, "provenance": provenance})
