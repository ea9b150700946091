"""Blackbox ray simulator.

This package simulates the classic "Blackbox" deduction game: atoms are
hidden inside a bordered square grid and probed with rays fired from the
perimeter. Each ray is absorbed, reflected back to its entry point, or
deflected out through another perimeter point.

Getting started:
    from blackbox import Board, simulate

    board = Board.from_atoms([(3, 2), (6, 5)])
    result = simulate(board, 1)
    print(result.describe())
"""

from blackbox.core.board import Board, create_empty_board, place_atoms
from blackbox.core.exceptions import (
    BlackboxError,
    BoardError,
    ConfigurationError,
    InternalInvariantViolation,
    InvalidRayError,
)
from blackbox.core.geometry import Direction, Position, Side
from blackbox.core.perimeter import entry_for_ray, opposite_ray, ray_for_border
from blackbox.core.ray_simulator import simulate
from blackbox.core.simulation_engine import SimulationEngine
from blackbox.interfaces.board import AtomGrid
from blackbox.interfaces.ray import Outcome, RayResult
from blackbox.utils.config_loader import BlackboxConfig, get_config, load_config

__all__ = [
    # Core
    "AtomGrid",
    "Board",
    "SimulationEngine",
    "simulate",
    # Board creation
    "create_empty_board",
    "place_atoms",
    # Geometry and numbering
    "Direction",
    "Position",
    "Side",
    "entry_for_ray",
    "opposite_ray",
    "ray_for_border",
    # Results
    "Outcome",
    "RayResult",
    # Configuration
    "BlackboxConfig",
    "get_config",
    "load_config",
    # Errors
    "BlackboxError",
    "BoardError",
    "ConfigurationError",
    "InternalInvariantViolation",
    "InvalidRayError",
]
