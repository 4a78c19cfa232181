from __future__ import annotations

from collections import Counter
from numbers import Integral
from typing import Dict, Iterable, List, Sequence, Tuple

Tile = Tuple[int, int]


def _as_tiles(dominoes: Iterable[Sequence[int]]) -> List[Tile]:
    tiles: List[Tile] = []
    for i, tile in enumerate(dominoes):
        try:
            x, y = tile
        except (TypeError, ValueError):
            raise ValueError(f"tile {i} must have exactly two ends, got {tile!r}") from None
        for v in (x, y):
            if isinstance(v, bool) or not isinstance(v, Integral) or v < 0:
                raise ValueError(f"tile {i} has an invalid value {v!r}")
        tiles.append((int(x), int(y)))
    return tiles


def domino_degrees(dominoes: Iterable[Sequence[int]]) -> Dict[int, int]:
    """Degree of every value in the tile graph. A double [x, x] counts 2 for x."""
    deg: Counter = Counter()
    for x, y in _as_tiles(dominoes):
        deg[x] += 1
        deg[y] += 1
    return dict(deg)


def _find(parent: Dict[int, int], v: int) -> int:
    while parent[v] != v:
        parent[v] = parent[parent[v]]
        v = parent[v]
    return v


def can_dominoes_make_row(dominoes: Iterable[Sequence[int]]) -> bool:
    """True if the tiles can be laid in one row, matching ends touching.

    This is the Eulerian path test on the multigraph whose vertices are the
    tile values and whose edges are the tiles: all used values connected, and
    at most two of them with odd degree.
    """
    tiles = _as_tiles(dominoes)
    if len(tiles) <= 1:
        return True

    deg: Counter = Counter()
    parent: Dict[int, int] = {}
    for x, y in tiles:
        deg[x] += 1
        deg[y] += 1
        parent.setdefault(x, x)
        parent.setdefault(y, y)
        rx, ry = _find(parent, x), _find(parent, y)
        if rx != ry:
            parent[rx] = ry

    odd = sum(1 for d in deg.values() if d % 2)
    if odd > 2:
        return False
    roots = {_find(parent, v) for v in parent}
    return len(roots) == 1
