from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import pandas as pd

CARDINALS = ("N", "E", "S", "W")
N_POINTS = 32
STEP_DEG = 360.0 / N_POINTS


@dataclass(frozen=True)
class CompassPoint:
    abbreviation: str
    azimuth: float

    def to_dict(self) -> Dict[str, Any]:
        return {"abbreviation": self.abbreviation, "azimuth": self.azimuth}


def _point_name(cardinal: int, offset: int) -> str:
    """Name of the point `offset` 1/32-turns away from cardinal index `cardinal`."""
    centre = CARDINALS[cardinal]
    if offset == 0:
        return centre
    side = CARDINALS[(cardinal + (1 if offset > 0 else -1)) % 4]
    k = abs(offset)
    if k == 1:
        return centre + "b" + side
    if k == 3:
        return centre + side + "b" + centre
    if k == 5:
        return centre + side + "b" + side
    if k == 4:
        return centre + side
    # k == 2: intercardinals are always written N/S first
    if cardinal % 2:
        return centre + side + centre
    return centre + centre + side


def create_compass_points() -> List[CompassPoint]:
    """Returns the 32 compass points, clockwise from North in 11.25° steps.

    North and South sweep five points on each side, East and West the two
    points in between, so every slot is named exactly once.
    """
    names: List[str] = [""] * N_POINTS
    for cardinal in range(4):
        span = 2 if cardinal % 2 else 5
        for offset in range(-span, span + 1):
            names[(cardinal * 8 + offset) % N_POINTS] = _point_name(cardinal, offset)
    return [CompassPoint(abbreviation=name, azimuth=i * STEP_DEG) for i, name in enumerate(names)]


def compass_table() -> pd.DataFrame:
    return pd.DataFrame([p.to_dict() for p in create_compass_points()], columns=["abbreviation", "azimuth"])
