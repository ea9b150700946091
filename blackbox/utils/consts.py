"""Constants and utility values for the Blackbox simulator."""


class ConstUtils:
    """Grid geometry and game defaults."""

    GRID_SIZE = 8
    """Interior side length of the classic board (8x8 atoms area)."""

    BORDER_WIDTH = 1
    """Width of the inert border ring around the interior."""

    SIDES = 4
    """Number of perimeter sides, one band of ray ids per side."""

    DEFAULT_ATOM_COUNT = 4
    """Atoms hidden by a freshly started game."""

    DIRECTIONS = 4
    """Axis-aligned headings a ray can have."""

    DEFAULT_STEP_LIMIT_FACTOR = 1
    """Multiplier applied to the propagation state count to cap iterations."""


def padded_size(size: int) -> int:
    """Side of the padded grid that surrounds an interior of ``size``."""
    return size + 2 * ConstUtils.BORDER_WIDTH


def ray_count(size: int) -> int:
    """Number of perimeter entry/exit points for an interior of ``size``."""
    return ConstUtils.SIDES * size


def state_count(size: int) -> int:
    """Distinct (position, direction) states a ray can occupy.

    A ray that visits more states than this has revisited one, so the
    propagation loop uses it as its iteration cap.
    """
    side = padded_size(size)
    return side * side * ConstUtils.DIRECTIONS
