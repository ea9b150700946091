"""Perimeter numbering: ray id <-> (border cell, inward heading).

Ids run clockwise in four bands of ``size``: left side (rows top to
bottom), bottom side (columns left to right), right side (rows bottom to
top), top side (columns right to left). The same numbering identifies
where a ray leaves the grid.
"""

from __future__ import annotations

from typing import Optional

from blackbox.core.exceptions import InvalidRayError
from blackbox.core.geometry import EAST, NORTH, SOUTH, WEST, Direction, Position, Side
from blackbox.utils.consts import ray_count

_INWARD = {
    Side.LEFT: EAST,
    Side.BOTTOM: NORTH,
    Side.RIGHT: WEST,
    Side.TOP: SOUTH,
}


def validate_ray_id(ray_id: object, size: int) -> int:
    """Return ``ray_id`` if it names a perimeter point, else raise InvalidRayError."""
    count = ray_count(size)
    # bool is an int subclass but never a meaningful id
    if isinstance(ray_id, bool) or not isinstance(ray_id, int) or not 1 <= ray_id <= count:
        raise InvalidRayError(ray_id, count)
    return ray_id


def side_of(ray_id: int, size: int) -> Side:
    validate_ray_id(ray_id, size)
    return Side((ray_id - 1) // size)


def entry_for_ray(ray_id: int, size: int) -> tuple[Position, Direction]:
    """Border cell a ray starts on and the heading that points it inward."""
    side = side_of(ray_id, size)
    if side is Side.LEFT:
        position = Position(0, ray_id)
    elif side is Side.BOTTOM:
        position = Position(ray_id - size, size + 1)
    elif side is Side.RIGHT:
        position = Position(size + 1, 3 * size + 1 - ray_id)
    else:
        position = Position(4 * size + 1 - ray_id, 0)
    return position, _INWARD[side]


def ray_for_border(position: tuple[int, int], size: int) -> Optional[int]:
    """Ray id of a border cell, or None for corners and non-border cells."""
    x, y = position
    edge = size + 1
    if x == 0 and 1 <= y <= size:
        return y
    if y == edge and 1 <= x <= size:
        return size + x
    if x == edge and 1 <= y <= size:
        return 3 * size + 1 - y
    if y == 0 and 1 <= x <= size:
        return 4 * size + 1 - x
    return None


def opposite_ray(ray_id: int, size: int) -> int:
    """Id straight across the grid, where the ray exits when nothing is in its way."""
    side = side_of(ray_id, size)
    if side in (Side.LEFT, Side.RIGHT):
        return 3 * size + 1 - ray_id
    return 5 * size + 1 - ray_id
