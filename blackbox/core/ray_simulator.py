"""Ray propagation through a board.

``simulate`` is a pure function of (board, ray id). Each iteration looks at
the cell the ray would move into next and at that cell's two flanks, then
the ray is absorbed, advances, or turns in place. After every advance or
turn, reaching the border ends the run.
"""

from __future__ import annotations

import logging

from blackbox.core.exceptions import InternalInvariantViolation
from blackbox.core.geometry import Direction, Position
from blackbox.core.perimeter import entry_for_ray, ray_for_border, validate_ray_id
from blackbox.interfaces.board import AtomGrid
from blackbox.interfaces.ray import Interaction, Outcome, RayResult
from blackbox.utils.consts import ConstUtils, state_count

logger = logging.getLogger(__name__)


def flanks(candidate: Position, direction: Direction) -> tuple[Position, Position]:
    """Cells beside ``candidate``, perpendicular to travel.

    Returns (left, right) when moving vertically and (above, below) when
    moving horizontally. The first one takes precedence in a funnel.
    """
    if direction.is_vertical:
        return Position(candidate.x - 1, candidate.y), Position(candidate.x + 1, candidate.y)
    return Position(candidate.x, candidate.y - 1), Position(candidate.x, candidate.y + 1)


def classify(ahead: bool, first_flank: bool, second_flank: bool) -> Interaction:
    """Map the three neighbour reads to what the ray does this step.

    An atom ahead absorbs regardless of flanks. A lone second-flank atom
    turns the ray negatively; a lone first-flank atom, or both flanks
    (funnel), turns it positively.
    """
    if ahead:
        return Interaction.ABSORB
    if not first_flank and not second_flank:
        return Interaction.ADVANCE
    if second_flank and not first_flank:
        return Interaction.DEFLECT_NEGATIVE
    return Interaction.DEFLECT_POSITIVE


def interaction_at(board: AtomGrid, position: Position, direction: Direction) -> Interaction:
    candidate = position.step(direction)
    first, second = flanks(candidate, direction)
    return classify(board.has_atom(candidate), board.has_atom(first), board.has_atom(second))


def simulate(
    board: AtomGrid,
    ray_id: int,
    step_limit_factor: int = ConstUtils.DEFAULT_STEP_LIMIT_FACTOR,
) -> RayResult:
    """Fire ray ``ray_id`` into ``board`` and follow it until it terminates.

    Args:
        board: Grid to probe; never modified
        ray_id: Perimeter entry point, 1..4*size
        step_limit_factor: Multiplier on the state-count iteration cap

    Returns:
        RayResult with the outcome and the full trajectory from the entry cell

    Raises:
        InvalidRayError: If ray_id is not a valid perimeter id
        InternalInvariantViolation: If the ray has not terminated within the cap
    """
    size = board.size
    validate_ray_id(ray_id, size)
    position, direction = entry_for_ray(ray_id, size)
    trajectory = [position]
    max_steps = step_limit_factor * state_count(size)

    for _ in range(max_steps):
        interaction = interaction_at(board, position, direction)

        if interaction is Interaction.ABSORB:
            result = RayResult(ray_id, Outcome.ABSORBED, tuple(trajectory))
            logger.debug("Ray %d absorbed after %d positions", ray_id, len(trajectory))
            return result

        if interaction is Interaction.ADVANCE:
            position = position.step(direction)
        else:
            # Turn in place; the blocked cell is never entered.
            direction = direction.turned(interaction.turn_sign)
        trajectory.append(position)

        if board.is_border(position):
            exit_id = ray_for_border(position, size)
            if exit_id is None:
                logger.error("Ray %d reached corner cell (%d, %d)", ray_id, position.x, position.y)
                raise InternalInvariantViolation(
                    f"Ray {ray_id} reached corner cell ({position.x}, {position.y})",
                    ray_id=ray_id,
                    steps=len(trajectory) - 1,
                )
            if exit_id == ray_id:
                result = RayResult(ray_id, Outcome.REFLECTED, tuple(trajectory))
            else:
                result = RayResult(ray_id, Outcome.EXIT, tuple(trajectory), exit_id=exit_id)
            logger.debug("Ray %d: %s", ray_id, result.describe())
            return result

    logger.error("Ray %d did not terminate within %d steps", ray_id, max_steps)
    raise InternalInvariantViolation(
        f"Ray {ray_id} did not terminate within {max_steps} steps",
        ray_id=ray_id,
        steps=max_steps,
    )
