"""Range notation for ordered integer lists.

``[0, 1, 2, 5, 7, 8, 9]`` is written ``"0-2,5,7-9"``: runs of three or more
values are collapsed to ``start-end``, shorter ones are listed value by value.
"""

from __future__ import annotations

import re
from numbers import Integral
from typing import Iterable, Iterator, List, Optional, Tuple

MIN_RUN = 3

_ITEM_RE = re.compile(r"^\s*(-?\d+)\s*(?:-\s*(-?\d+)\s*)?$")


def iter_runs(nums: Iterable[int]) -> Iterator[Tuple[int, int]]:
    """Yields (start, end) for each maximal run of consecutive integers.

    Input must be strictly increasing.
    """
    start: Optional[int] = None
    last: Optional[int] = None
    for i, v in enumerate(nums):
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise ValueError(f"item {i} is not an integer: {v!r}")
        v = int(v)
        if last is not None and v <= last:
            raise ValueError(f"input must be strictly increasing, got {v} after {last}")
        if last is not None and v == last + 1:
            last = v
            continue
        if start is not None:
            yield start, last
        start = last = v
    if start is not None:
        yield start, last


def extract_ranges(nums: Iterable[int]) -> str:
    items: List[str] = []
    for start, end in iter_runs(nums):
        if end - start + 1 >= MIN_RUN:
            items.append(f"{start}-{end}")
        else:
            items.extend(str(v) for v in range(start, end + 1))
    return ",".join(items)


def expand_ranges(text: str) -> List[int]:
    """Parses range notation back into the list of integers.

    >>> expand_ranges("-3--1,4,6-8")
    [-3, -2, -1, 4, 6, 7, 8]
    """
    if not text.strip():
        return []
    out: List[int] = []
    for item in text.split(","):
        m = _ITEM_RE.match(item)
        if m is None:
            raise ValueError(f"malformed range item: {item!r}")
        lo = int(m.group(1))
        hi = int(m.group(2)) if m.group(2) is not None else lo
        if hi < lo:
            raise ValueError(f"descending range: {item!r}")
        out.extend(range(lo, hi + 1))
    return out
