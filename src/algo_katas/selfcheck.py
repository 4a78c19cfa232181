from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .braces import expand_braces
from .compass import create_compass_points
from .dominoes import can_dominoes_make_row
from .logger import RunLogger, utc_now
from .ranges import extract_ranges
from .settings import DEFAULT_SETTINGS, KataSettings
from .zigzag import get_zigzag_matrix

REPORT_VERSION = "0.1.0"

STANDARD_COMPASS = [
    "N", "NbE", "NNE", "NEbN", "NE", "NEbE", "ENE", "EbN",
    "E", "EbS", "ESE", "SEbE", "SE", "SEbS", "SSE", "SbE",
    "S", "SbW", "SSW", "SWbS", "SW", "SWbW", "WSW", "WbS",
    "W", "WbN", "WNW", "NWbW", "NW", "NWbN", "NNW", "NbW",
]

Example = Tuple[str, Tuple[Any, ...], Any]

WORKED_EXAMPLES: Dict[str, List[Example]] = {
    "compass": [
        ("32 points", (), STANDARD_COMPASS),
    ],
    "braces": [
        ("no groups", ("nothing to do",), ["nothing to do"]),
        ("nested", ("thumbnail.{png,jp{e,}g}",), sorted(["thumbnail.png", "thumbnail.jpeg", "thumbnail.jpg"])),
        (
            "two groups",
            ("~/{Downloads,Pictures}/*.{jpg,gif,png}",),
            sorted(
                [
                    "~/Downloads/*.jpg", "~/Downloads/*.gif", "~/Downloads/*.png",
                    "~/Pictures/*.jpg", "~/Pictures/*.gif", "~/Pictures/*.png",
                ]
            ),
        ),
        (
            "deep nesting",
            ("It{{em,alic}iz,erat}e{d,}, please.",),
            sorted(
                [
                    "Itemized, please.", "Itemize, please.", "Italicized, please.",
                    "Italicize, please.", "Iterated, please.", "Iterate, please.",
                ]
            ),
        ),
        ("empty group", ("a{}b",), ["ab"]),
    ],
    "zigzag": [
        ("n=1", (1,), [[0]]),
        ("n=2", (2,), [[0, 1], [2, 3]]),
        ("n=3", (3,), [[0, 1, 5], [2, 4, 6], [3, 7, 8]]),
        ("n=4", (4,), [[0, 1, 5, 6], [2, 4, 7, 12], [3, 8, 11, 13], [9, 10, 14, 15]]),
    ],
    "dominoes": [
        ("double joins", ([[0, 1], [1, 1]],), True),
        ("isolated double", ([[1, 1], [2, 2], [1, 5], [5, 6], [6, 3]],), False),
        ("two odd values", ([[1, 3], [2, 3], [1, 4], [2, 4], [1, 5], [2, 5]],), True),
        (
            "double-three set",
            ([[0, 0], [0, 1], [1, 1], [0, 2], [1, 2], [2, 2], [0, 3], [1, 3], [2, 3], [3, 3]],),
            False,
        ),
        ("empty", ([],), True),
    ],
    "ranges": [
        ("single run", ([0, 1, 2, 3, 4, 5],), "0-5"),
        ("pair kept", ([1, 4, 5],), "1,4,5"),
        ("mixed", ([0, 1, 2, 5, 7, 8, 9],), "0-2,5,7-9"),
        ("two pairs", ([1, 2, 4, 5],), "1,2,4,5"),
        ("exactly two", ([7, 8],), "7,8"),
    ],
}


def _run_compass(settings: KataSettings) -> List[str]:
    return [p.abbreviation for p in create_compass_points()]


def _run_braces(settings: KataSettings, template: str) -> List[str]:
    return sorted(expand_braces(template, settings=settings))


def _run_zigzag(settings: KataSettings, n: int) -> List[List[int]]:
    return get_zigzag_matrix(n)


def _run_dominoes(settings: KataSettings, dominoes: Sequence[Sequence[int]]) -> bool:
    return can_dominoes_make_row(dominoes)


def _run_ranges(settings: KataSettings, nums: Sequence[int]) -> str:
    return extract_ranges(nums)


RUNNERS: Dict[str, Callable[..., Any]] = {
    "compass": _run_compass,
    "braces": _run_braces,
    "zigzag": _run_zigzag,
    "dominoes": _run_dominoes,
    "ranges": _run_ranges,
}


@dataclass(frozen=True)
class CaseResult:
    kata: str
    label: str
    passed: bool
    expected: Any
    actual: Any

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kata": self.kata,
            "label": self.label,
            "passed": self.passed,
            "expected": self.expected,
            "actual": self.actual,
        }


@dataclass(frozen=True)
class SelfCheckReport:
    version: str
    created_utc: str
    settings: Dict[str, Any]
    cases: List[CaseResult]
    summary: Dict[str, Any]

    def to_frame(self) -> pd.DataFrame:
        rows = [{"kata": c.kata, "label": c.label, "passed": c.passed} for c in self.cases]
        return pd.DataFrame(rows, columns=["kata", "label", "passed"])


def run_selfcheck(
    *,
    settings: Optional[KataSettings] = None,
    logger: Optional[RunLogger] = None,
) -> SelfCheckReport:
    """Runs every worked example and compares it with its documented answer.

    The examples are all well-formed, so every brace policy must pass them.
    """
    settings = settings or DEFAULT_SETTINGS
    settings.validate()

    cases: List[CaseResult] = []
    for kata, examples in WORKED_EXAMPLES.items():
        runner = RUNNERS[kata]
        for label, args, expected in examples:
            actual = runner(settings, *args)
            res = CaseResult(kata=kata, label=label, passed=bool(actual == expected), expected=expected, actual=actual)
            cases.append(res)
            if logger is not None:
                logger.log("case", res.to_dict(), kata=kata)

    n_passed = sum(1 for c in cases if c.passed)
    summary = {
        "n_cases": len(cases),
        "n_passed": n_passed,
        "all_passed": n_passed == len(cases),
    }
    if logger is not None:
        logger.log("summary", summary)

    return SelfCheckReport(
        version=REPORT_VERSION,
        created_utc=utc_now(),
        settings=settings.to_dict(),
        cases=cases,
        summary=summary,
    )


def write_selfcheck_report(report: SelfCheckReport, out_path: str | Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "version": report.version,
        "created_utc": report.created_utc,
        "settings": report.settings,
        "cases": [c.to_dict() for c in report.cases],
        "summary": report.summary,
    }
    out_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False),
        encoding="utf-8",
    )
