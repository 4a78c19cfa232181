"""algo_katas

Small, independent algorithmic exercises.

The package exposes:
- the 32-point compass table
- shell-style brace expansion (lazy, restartable)
- the JPEG zigzag index matrix and zigzag scan
- the domino row feasibility check
- range notation for ordered integer lists
- a self-check runner over the documented worked examples
"""

from .braces import BraceSyntaxError, count_expansions, expand_braces, parse_braces
from .compass import CompassPoint, compass_table, create_compass_points
from .dominoes import can_dominoes_make_row, domino_degrees
from .logger import RunLogger
from .ranges import expand_ranges, extract_ranges, iter_runs
from .selfcheck import run_selfcheck, write_selfcheck_report
from .settings import DEFAULT_SETTINGS, KataSettings, load_settings
from .zigzag import get_zigzag_matrix, zigzag_order, zigzag_scan

__version__ = "0.1.0"

__all__ = [
    "CompassPoint",
    "create_compass_points",
    "compass_table",
    "BraceSyntaxError",
    "parse_braces",
    "expand_braces",
    "count_expansions",
    "get_zigzag_matrix",
    "zigzag_order",
    "zigzag_scan",
    "can_dominoes_make_row",
    "domino_degrees",
    "extract_ranges",
    "expand_ranges",
    "iter_runs",
    "KataSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "RunLogger",
    "run_selfcheck",
    "write_selfcheck_report",
]
