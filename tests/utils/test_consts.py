from blackbox.utils.consts import ConstUtils, padded_size, ray_count, state_count


def test_const_utils_defaults():
    assert ConstUtils.GRID_SIZE == 8
    assert ConstUtils.DEFAULT_ATOM_COUNT == 4
    assert ConstUtils.SIDES == 4


def test_grid_derived_sizes():
    assert padded_size(8) == 10
    assert ray_count(8) == 32
    assert state_count(8) == 400
    assert ray_count(1) == 4
