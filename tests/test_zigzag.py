import numpy as np
import pytest

from algo_katas.zigzag import get_zigzag_matrix, zigzag_order, zigzag_scan


def test_small_matrices():
    assert get_zigzag_matrix(1) == [[0]]
    assert get_zigzag_matrix(2) == [[0, 1], [2, 3]]
    assert get_zigzag_matrix(3) == [[0, 1, 5], [2, 4, 6], [3, 7, 8]]
    assert get_zigzag_matrix(4) == [
        [0, 1, 5, 6],
        [2, 4, 7, 12],
        [3, 8, 11, 13],
        [9, 10, 14, 15],
    ]


@pytest.mark.parametrize("n", [5, 8, 11])
def test_every_index_appears_once(n):
    m = get_zigzag_matrix(n)
    flat = sorted(v for row in m for v in row)
    assert flat == list(range(n * n))


def test_order_steps_between_neighbours():
    cells = zigzag_order(6)
    assert cells[0] == (0, 0)
    assert cells[-1] == (5, 5)
    for (r0, c0), (r1, c1) in zip(cells, cells[1:]):
        assert max(abs(r1 - r0), abs(c1 - c0)) == 1


def test_scan_inverts_the_index_matrix():
    m = np.array(get_zigzag_matrix(8))
    assert zigzag_scan(m).tolist() == list(range(64))


@pytest.mark.parametrize("bad", [0, -2, 2.5, True])
def test_invalid_size_raises(bad):
    with pytest.raises(ValueError):
        get_zigzag_matrix(bad)


def test_scan_requires_square_block():
    with pytest.raises(ValueError):
        zigzag_scan(np.zeros((2, 3)))
