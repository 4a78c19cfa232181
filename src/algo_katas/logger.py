from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

LOG_NAME = "katas_log.jsonl"


def utc_now() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="seconds") + "Z"


class RunLogger:
    """JSONL log of kata runs, one record per line.

    Records carry a sequence number that keeps counting across loggers
    opened on the same file, so appended runs stay ordered.
    """

    def __init__(self, logdir: str | Path, *, name: str = LOG_NAME) -> None:
        self.path = Path(logdir) / name
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._seq = len(self.read())

    def log(self, event: str, payload: Dict[str, Any], *, kata: Optional[str] = None) -> Dict[str, Any]:
        self._seq += 1
        rec = {"seq": self._seq, "ts_utc": utc_now(), "event": event, "kata": kata, "payload": payload}
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False, sort_keys=True) + "\n")
        return rec

    def read(self, event: Optional[str] = None) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as f:
            records = [json.loads(line) for line in f if line.strip()]
        if event is not None:
            records = [r for r in records if r["event"] == event]
        return records
