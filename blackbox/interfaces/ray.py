"""Ray outcome types shared by the simulator and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from blackbox.core.geometry import Position


class Outcome(Enum):
    """Terminal state of one ray."""

    ABSORBED = "ABSORBED"
    """Ray hit an atom head-on."""

    REFLECTED = "REFLECTED"
    """Ray came back out through its own entry point."""

    EXIT = "EXIT"
    """Ray left through a different perimeter point."""


class Interaction(Enum):
    """What a ray does at one step, given the cell ahead and its two flanks."""

    ABSORB = "absorb"
    ADVANCE = "advance"
    DEFLECT_POSITIVE = "deflect_positive"
    DEFLECT_NEGATIVE = "deflect_negative"

    @property
    def turn_sign(self) -> int:
        """Sign of the new heading on the idle axis; 0 when no turn happens."""
        if self is Interaction.DEFLECT_POSITIVE:
            return 1
        if self is Interaction.DEFLECT_NEGATIVE:
            return -1
        return 0


@dataclass(frozen=True)
class RayResult:
    """Outcome and full path of one fired ray.

    ``trajectory`` starts at the entry cell. A deflection appends the
    unchanged position again, so consecutive duplicates mark turns.
    """

    ray_id: int
    outcome: Outcome
    trajectory: tuple[Position, ...]
    exit_id: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.outcome is Outcome.EXIT) != (self.exit_id is not None):
            raise ValueError("exit_id is required for EXIT and forbidden otherwise")

    @property
    def entry(self) -> Position:
        return self.trajectory[0]

    @property
    def last(self) -> Position:
        return self.trajectory[-1]

    @property
    def deflections(self) -> int:
        """Number of in-place turns taken along the way."""
        return sum(1 for a, b in zip(self.trajectory, self.trajectory[1:]) if a == b)

    def describe(self) -> str:
        """One-line log entry for this ray."""
        if self.outcome is Outcome.ABSORBED:
            return "Absorbed"
        if self.outcome is Outcome.REFLECTED:
            return "Reflected"
        return f"Exit at {self.exit_id}"
