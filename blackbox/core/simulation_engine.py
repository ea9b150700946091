"""Simulation engine for firing rays at a board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from blackbox.core.exceptions import BlackboxError, BoardError
from blackbox.core.perimeter import validate_ray_id
from blackbox.core.ray_simulator import simulate
from blackbox.utils.config_loader import BlackboxConfig, get_config
from blackbox.utils.consts import ray_count

if TYPE_CHECKING:
    from blackbox.interfaces.board import AtomGrid
    from blackbox.interfaces.ray import RayResult

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Fires rays at one board and keeps the ordered log of results.

    The board is bound with start(), which also clears the log. A perimeter
    point already used by a logged ray, as its entry or as its exit, is not
    fired again; the logged result is returned instead.
    """

    def __init__(self, config: Optional[BlackboxConfig] = None):
        self._config = config or get_config()
        self._board: Optional[AtomGrid] = None
        self._results: dict[int, RayResult] = {}
        self._exits: dict[int, int] = {}

    @property
    def config(self) -> BlackboxConfig:
        return self._config

    @property
    def board(self) -> Optional["AtomGrid"]:
        return self._board

    @property
    def results(self) -> list[RayResult]:
        """Fired rays in firing order."""
        return list(self._results.values())

    def start(self, board: "AtomGrid") -> None:
        """Bind ``board`` for the following fire() calls and clear the log."""
        self._check_board(board)
        self._board = board
        self.reset()

    def fire(self, ray_id: int) -> "RayResult":
        """Simulate ``ray_id`` against the bound board and log the result."""
        board = self._require_board()
        validate_ray_id(ray_id, board.size)
        if ray_id in self._results:
            logger.debug("Ray %d already fired; returning logged result", ray_id)
            return self._results[ray_id]
        if ray_id in self._exits:
            source = self._exits[ray_id]
            logger.debug("Ray %d is the exit of ray %d; returning logged result", ray_id, source)
            return self._results[source]

        result = simulate(board, ray_id, self._config.simulation.step_limit_factor)
        self._results[ray_id] = result
        if result.exit_id is not None:
            self._exits[result.exit_id] = ray_id
        logger.info("Ray %d: %s", ray_id, result.describe())
        return result

    def fire_all(self) -> list["RayResult"]:
        """Fire every unused perimeter point in id order and return the log."""
        board = self._require_board()
        for ray_id in range(1, ray_count(board.size) + 1):
            self.fire(ray_id)
        return self.results

    def reset(self) -> None:
        """Forget all logged rays; the bound board is kept."""
        self._results.clear()
        self._exits.clear()

    def _require_board(self) -> "AtomGrid":
        if self._board is None:
            raise BlackboxError("No board loaded; call start() first")
        return self._board

    def _check_board(self, board: "AtomGrid") -> None:
        expected = self._config.board.size
        if board.size != expected:
            raise BoardError(
                f"Board size {board.size} does not match configured size {expected}",
                details={"board_size": board.size, "configured_size": expected},
            )
