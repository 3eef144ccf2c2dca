from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List


class AuditLogger:
    """
    Appends one JSON object per simulated request, including failed ones.
    The file and its parent directory are created on first use.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, event: Dict[str, Any]) -> None:
        record = {"ts": time.time(), **event}
        line = json.dumps(record, ensure_ascii=False, default=str)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")

    def read_events(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
