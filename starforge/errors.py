"""
Exceptions raised by the Starforge generation engine.

Two failure kinds exist:
- InvalidParameterError: the caller passed something the engine cannot use
  (a grade outside 0-9, an unknown star class, a missing id). Always names
  the offending field.
- NoAvailableOrbitError: a secondary body needed an orbit slot and every slot
  is taken. Callers usually stop adding bodies rather than retry.

Impossible combinations (a naval base at a class E port, for example) are
ordinary outcomes and never raise.
"""

from typing import Any, Iterable


class StarforgeError(Exception):
    """Base class for every error raised by the engine."""

    pass


class InvalidParameterError(StarforgeError, ValueError):
    """Raised when a generator input is out of range or missing."""

    def __init__(self, field: str, value: Any = None, reason: str = ""):
        self.field = field
        self.value = value
        self.reason = reason
        message = f"Invalid value for '{field}': {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoAvailableOrbitError(StarforgeError):
    """Raised when a body needs an orbit slot and none are free."""

    def __init__(self, occupied: Iterable[int], max_orbits: int):
        self.occupied = sorted(occupied)
        self.max_orbits = max_orbits
        super().__init__(
            f"No available orbit: all {max_orbits} slots occupied {self.occupied}"
        )
