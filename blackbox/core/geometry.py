"""Grid coordinates, headings and perimeter sides."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class Position(NamedTuple):
    """Cell coordinate in the padded grid.

    ``x`` is the column (left to right), ``y`` the row (top to bottom).
    Compares equal to a plain ``(x, y)`` tuple.
    """

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass(frozen=True)
class Direction:
    """Axis-aligned unit step. Exactly one component is non-zero."""

    dx: int
    dy: int

    def __post_init__(self) -> None:
        if (abs(self.dx), abs(self.dy)) not in ((1, 0), (0, 1)):
            raise ValueError(f"Direction must be an axis-aligned unit step, got ({self.dx}, {self.dy})")

    @property
    def is_vertical(self) -> bool:
        return self.dx == 0

    def turned(self, sign: int) -> Direction:
        """Swap the moving axis, heading ``sign`` along the previously idle one."""
        if self.is_vertical:
            return Direction(sign, 0)
        return Direction(0, sign)


EAST = Direction(1, 0)
WEST = Direction(-1, 0)
SOUTH = Direction(0, 1)
NORTH = Direction(0, -1)


class Side(IntEnum):
    """Perimeter side, in the clockwise order of the ray id bands."""

    LEFT = 0
    """Ray ids 1..N, rows top to bottom."""

    BOTTOM = 1
    """Ray ids N+1..2N, columns left to right."""

    RIGHT = 2
    """Ray ids 2N+1..3N, rows bottom to top."""

    TOP = 3
    """Ray ids 3N+1..4N, columns right to left."""
