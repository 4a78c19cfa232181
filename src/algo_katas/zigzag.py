from __future__ import annotations

from numbers import Integral
from typing import List, Tuple

import numpy as np


def _check_size(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise ValueError(f"n must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return int(n)


def zigzag_order(n: int) -> List[Tuple[int, int]]:
    """Cells of an n x n grid in JPEG zigzag order.

    Anti-diagonal d holds the cells with row + col == d. Even diagonals run
    bottom-left to top-right (row decreasing), odd ones the other way.
    """
    n = _check_size(n)
    cells: List[Tuple[int, int]] = []
    for d in range(2 * n - 1):
        rows = range(max(0, d - n + 1), min(d, n - 1) + 1)
        if d % 2 == 0:
            rows = reversed(rows)
        cells.extend((r, d - r) for r in rows)
    return cells


def _zigzag_index(n: int) -> np.ndarray:
    m = np.empty((n, n), dtype=int)
    for k, (r, c) in enumerate(zigzag_order(n)):
        m[r, c] = k
    return m


def get_zigzag_matrix(n: int) -> List[List[int]]:
    """n x n matrix of 0..n²-1 laid out along the zigzag path.

    >>> get_zigzag_matrix(3)
    [[0, 1, 5], [2, 4, 6], [3, 7, 8]]
    """
    return _zigzag_index(_check_size(n)).tolist()


def zigzag_scan(block: np.ndarray) -> np.ndarray:
    """Flattens a square block into a 1-D array in zigzag order."""
    b = np.asarray(block)
    if b.ndim != 2 or b.shape[0] != b.shape[1] or b.shape[0] == 0:
        raise ValueError(f"block must be a non-empty square 2-D array, got shape {b.shape}")
    rows, cols = zip(*zigzag_order(b.shape[0]))
    return b[list(rows), list(cols)]
