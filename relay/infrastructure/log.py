"""Stderr logger — the single logging collaborator injected into components."""

import sys
from datetime import datetime, timezone
from typing import Any, Optional, TextIO


class StderrLogger:
    """Writes one timestamped line per event. Implements LogPort."""

    def __init__(self, name: str = "relay", stream: Optional[TextIO] = None):
        self.name = name
        self._stream = stream

    def _emit(self, level: str, msg: str, fields: dict):
        line = f"[{datetime.now(timezone.utc).isoformat()}] [{self.name}] {level} {msg}"
        if fields:
            line += " " + " ".join(f"{k}={v!r}" for k, v in fields.items())
        print(line, file=self._stream or sys.stderr)

    def info(self, msg: str, **fields: Any) -> None:
        self._emit("INFO", msg, fields)

    def error(self, msg: str, **fields: Any) -> None:
        self._emit("ERROR", msg, fields)

    def child(self, name: str) -> "StderrLogger":
        return StderrLogger(f"{self.name}.{name}", self._stream)
