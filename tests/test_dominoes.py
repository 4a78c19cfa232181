import pytest

from algo_katas.dominoes import can_dominoes_make_row, domino_degrees


def test_worked_examples():
    assert can_dominoes_make_row([[0, 1], [1, 1]]) is True
    assert can_dominoes_make_row([[1, 1], [2, 2], [1, 5], [5, 6], [6, 3]]) is False
    assert can_dominoes_make_row([[1, 3], [2, 3], [1, 4], [2, 4], [1, 5], [2, 5]]) is True
    tiles = [[0, 0], [0, 1], [1, 1], [0, 2], [1, 2], [2, 2], [0, 3], [1, 3], [2, 3], [3, 3]]
    assert can_dominoes_make_row(tiles) is False


def test_trivial_inputs():
    assert can_dominoes_make_row([]) is True
    assert can_dominoes_make_row([[4, 2]]) is True
    assert can_dominoes_make_row([[3, 3]]) is True


def test_orientation_is_free():
    assert can_dominoes_make_row([[1, 1], [2, 2], [1, 2]]) is True
    assert can_dominoes_make_row([[2, 1], [3, 2], [1, 3]]) is True


def test_disconnected_doubles():
    assert can_dominoes_make_row([[1, 1], [0, 3], [1, 4]]) is False
    assert can_dominoes_make_row([[1, 1], [2, 2]]) is False


def test_self_loops_count_twice():
    assert domino_degrees([[1, 1], [1, 2]]) == {1: 3, 2: 1}


@pytest.mark.parametrize("bad", [[[1, 2, 3]], [5, 6], [{3}], [[1, "a"]], [[-1, 2]], [[True, 1]]])
def test_malformed_tiles_raise(bad):
    with pytest.raises(ValueError):
        can_dominoes_make_row(bad)
