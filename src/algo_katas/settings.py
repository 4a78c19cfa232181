from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

BRACE_POLICIES = ("reject", "literal")


@dataclass(frozen=True)
class KataSettings:
    """Knobs for input the katas do not define on their own.

    Only malformed input is affected; well-formed input always gives the
    documented answers. The object is serialized alongside self-check
    reports so a run can be replayed.
    """

    # Unbalanced braces: raise ("reject") or keep them as text ("literal")
    brace_policy: str = "reject"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> None:
        if self.brace_policy not in BRACE_POLICIES:
            raise ValueError(f"brace_policy must be one of {BRACE_POLICIES}, got {self.brace_policy!r}")


DEFAULT_SETTINGS = KataSettings()


def load_settings(path: str | Path) -> KataSettings:
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a mapping at top level")
    known = {f.name for f in fields(KataSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"{p}: unknown settings: {unknown}")
    settings = KataSettings(**data)
    settings.validate()
    return settings
