import pytest

from blackbox.core.geometry import Position
from blackbox.interfaces.ray import Interaction, Outcome, RayResult


def test_describe_matches_log_entries():
    path = (Position(0, 1),)
    assert RayResult(1, Outcome.ABSORBED, path).describe() == "Absorbed"
    assert RayResult(1, Outcome.REFLECTED, path).describe() == "Reflected"
    assert RayResult(1, Outcome.EXIT, path, exit_id=24).describe() == "Exit at 24"


def test_exit_id_only_for_exit():
    path = (Position(0, 1),)
    with pytest.raises(ValueError):
        RayResult(1, Outcome.EXIT, path)
    with pytest.raises(ValueError):
        RayResult(1, Outcome.ABSORBED, path, exit_id=3)


def test_deflections_count_repeated_positions():
    path = (Position(0, 4), Position(1, 4), Position(1, 4), Position(1, 4), Position(0, 4))
    result = RayResult(4, Outcome.REFLECTED, path)

    assert result.deflections == 2
    assert result.entry == (0, 4)
    assert result.last == (0, 4)


def test_result_is_frozen():
    result = RayResult(1, Outcome.ABSORBED, (Position(0, 1),))
    with pytest.raises(AttributeError):
        result.outcome = Outcome.EXIT


@pytest.mark.parametrize(
    "interaction, sign",
    [
        (Interaction.ABSORB, 0),
        (Interaction.ADVANCE, 0),
        (Interaction.DEFLECT_POSITIVE, 1),
        (Interaction.DEFLECT_NEGATIVE, -1),
    ],
)
def test_turn_sign(interaction, sign):
    assert interaction.turn_sign == sign
