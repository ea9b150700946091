"""Core modules for the simulator.

- geometry: Positions, headings and perimeter sides
- board: Immutable board value and random atom placement
- perimeter: Ray id numbering around the border
- ray_simulator: Ray propagation (absorb / advance / deflect)
- simulation_engine: Config-bound ray firing with a per-board log
"""

from blackbox.core.board import Board, create_empty_board, place_atoms
from blackbox.core.geometry import EAST, NORTH, SOUTH, WEST, Direction, Position, Side
from blackbox.core.perimeter import (
    entry_for_ray,
    opposite_ray,
    ray_for_border,
    side_of,
    validate_ray_id,
)
from blackbox.core.ray_simulator import classify, flanks, simulate
from blackbox.core.simulation_engine import SimulationEngine

__all__ = [
    # Geometry
    "Position",
    "Direction",
    "Side",
    "EAST",
    "WEST",
    "NORTH",
    "SOUTH",
    # Board
    "Board",
    "create_empty_board",
    "place_atoms",
    # Perimeter numbering
    "entry_for_ray",
    "ray_for_border",
    "opposite_ray",
    "side_of",
    "validate_ray_id",
    # Propagation
    "classify",
    "flanks",
    "simulate",
    "SimulationEngine",
]
