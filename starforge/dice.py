"""
Dice engine for Starforge.

All randomness in the generators flows through a DiceRoller instance so that
a seeded roller (or a scripted source in tests) replays a whole star system
exactly. Rolls are recorded in the roller's log for provenance and debugging.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Sequence
import logging
import math
import random
import re

from starforge.errors import InvalidParameterError

logger = logging.getLogger(__name__)

_NOTATION = re.compile(r"^\s*(\d*)[dD](\d+)\s*(?:([+-])\s*(\d+))?\s*$")


# =============================================================================
# DICE RESULT
# =============================================================================


@dataclass
class DiceResult:
    """Result of a dice roll with full information."""
    notation: str
    rolls: list[int]
    modifier: int
    total: int
    reason: str
    dropped: list[int] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def die1(self) -> int:
        return self.rolls[0]

    @property
    def die2(self) -> int:
        return self.rolls[1]

    @property
    def code(self) -> Optional[str]:
        """Two-digit d66 code such as "34", or None for ordinary rolls."""
        if self.notation != "d66":
            return None
        return f"{self.rolls[0]}{self.rolls[1]}"

    def __str__(self) -> str:
        if self.code is not None:
            return f"d66: {self.rolls} = {self.code}"
        faces = f"{self.rolls}"
        if self.dropped:
            faces = f"{self.rolls} (dropped {self.dropped})"
        if self.modifier > 0:
            return f"{self.notation}: {faces} + {self.modifier} = {self.total}"
        elif self.modifier < 0:
            return f"{self.notation}: {faces} - {abs(self.modifier)} = {self.total}"
        return f"{self.notation}: {faces} = {self.total}"


# =============================================================================
# DICE ROLLER
# =============================================================================


class DiceRoller:
    """
    Randomization interface used by every generator.

    Args:
        seed: Seed for the private random source. Two rollers created with the
            same seed produce identical roll sequences.
        rng: Optional replacement random source. Anything exposing
            random.Random's randint(a, b) and uniform(a, b) works, which lets
            tests script exact faces.
    """

    def __init__(self, seed: Optional[int] = None, rng: Any = None):
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)
        self._roll_log: list[DiceResult] = []

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Reset the random source to a new seed."""
        self._seed = seed
        self._rng = random.Random(seed)

    def roll(
        self,
        dice: str,
        reason: str = "",
        advantage: int = 0,
        disadvantage: int = 0,
    ) -> DiceResult:
        """
        Roll dice using standard notation (e.g., '2d6', '1d10-1', '3d6').

        Advantage rolls one extra die per point and keeps the highest faces;
        disadvantage keeps the lowest. The two cancel each other out.

        Args:
            dice: Dice notation string
            reason: Why this roll is being made (for logging)
            advantage: Extra dice to roll, keeping the highest
            disadvantage: Extra dice to roll, keeping the lowest

        Returns:
            DiceResult with the kept faces, dropped faces and total
        """
        match = _NOTATION.match(dice)
        if not match:
            raise InvalidParameterError("notation", dice, "expected NdS[+M]")
        num_dice = int(match.group(1)) if match.group(1) else 1
        die_size = int(match.group(2))
        if num_dice < 1 or die_size < 1:
            raise InvalidParameterError("notation", dice, "need at least one die with one face")
        modifier = int(match.group(4) or 0)
        if match.group(3) == "-":
            modifier = -modifier

        net = advantage - disadvantage
        faces = [self._rng.randint(1, die_size) for _ in range(num_dice + abs(net))]
        if net:
            # Keep roll order for the surviving faces
            ranked = sorted(range(len(faces)), key=lambda i: faces[i], reverse=net > 0)
            keep = set(ranked[:num_dice])
            rolls = [f for i, f in enumerate(faces) if i in keep]
            dropped = [f for i, f in enumerate(faces) if i not in keep]
        else:
            rolls, dropped = faces, []

        result = DiceResult(
            notation=dice,
            rolls=rolls,
            modifier=modifier,
            total=sum(rolls) + modifier,
            reason=reason,
            dropped=dropped,
        )
        self._record(result)
        return result

    def roll_2d6(self, reason: str = "", advantage: int = 0, disadvantage: int = 0) -> DiceResult:
        """Convenience method for the 2d6 table rolls used everywhere."""
        return self.roll("2d6", reason, advantage, disadvantage)

    def roll_3d6(self, reason: str = "") -> DiceResult:
        """Convenience method for 3d6 rolls (companion orbits)."""
        return self.roll("3d6", reason)

    def roll_d6(self, num_dice: int = 1, reason: str = "") -> DiceResult:
        """Convenience method for d6 rolls."""
        return self.roll(f"{num_dice}d6", reason)

    def roll_d10(self, reason: str = "") -> DiceResult:
        """Convenience method for d10 rolls."""
        return self.roll("1d10", reason)

    def roll_d66(self, reason: str = "") -> DiceResult:
        """
        Roll d66: two independent d6 read as tens and units.

        The result's code is a string "11".."66"; total is the same value as
        an integer.
        """
        tens = self._rng.randint(1, 6)
        units = self._rng.randint(1, 6)
        result = DiceResult(
            notation="d66",
            rolls=[tens, units],
            modifier=0,
            total=tens * 10 + units,
            reason=reason,
        )
        self._record(result)
        return result

    def randint(self, low: int, high: int, reason: str = "") -> int:
        """Uniform integer in [low, high]."""
        value = self._rng.randint(low, high)
        logger.debug(f"randint({low}, {high}) = {value} ({reason})")
        return value

    def choice(self, seq: Sequence[Any], reason: str = "") -> Any:
        """Uniform pick from a non-empty sequence."""
        if not seq:
            raise InvalidParameterError("seq", seq, "cannot choose from an empty sequence")
        return seq[self.randint(0, len(seq) - 1, reason)]

    def uniform(self, low: float, high: float, reason: str = "") -> float:
        """Uniform float in [low, high], used to place values inside a rolled band."""
        value = self._rng.uniform(low, high)
        logger.debug(f"uniform({low}, {high}) = {value} ({reason})")
        return value

    def log_uniform(self, low: float, high: float, reason: str = "") -> float:
        """Value spread evenly in log space between two positive bounds."""
        if low <= 0 or high <= 0:
            raise InvalidParameterError("bounds", (low, high), "must be positive")
        return math.exp(self.uniform(math.log(low), math.log(high), reason))

    def get_roll_log(self) -> list[DiceResult]:
        """Get every roll made by this roller."""
        return self._roll_log.copy()

    def clear_roll_log(self) -> None:
        """Clear the roll log."""
        self._roll_log = []

    def _record(self, result: DiceResult) -> None:
        self._roll_log.append(result)
        logger.debug(f"Rolled {result} ({result.reason})")
