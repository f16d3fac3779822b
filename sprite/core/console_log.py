"""Console log target — timestamped, level-tagged execution messages.

Any ``(level, message)`` callable can be injected as a log function;
ConsoleLog is the one the command line uses.
"""
from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, TextIO

LogFn = Callable[[str, str], None]       # (level, message)

LEVELS: dict[str, int] = {
    "TRACE":   5,
    "DEBUG":   10,
    "INFO":    20,
    "SUCCESS": 25,
    "WARNING": 30,
    "ERROR":   40,
}


def null_log(level: str, message: str) -> None:
    pass


class ConsoleLog:
    """Writes log entries at or above ``min_level`` to a text stream."""

    def __init__(self, min_level: str = "INFO", stream: TextIO | None = None) -> None:
        level = min_level.upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {min_level!r}")
        self._threshold = LEVELS[level]
        self._stream    = stream if stream is not None else sys.stderr

    def enabled(self, level: str) -> bool:
        return LEVELS.get(level.upper(), LEVELS["INFO"]) >= self._threshold

    def __call__(self, level: str, message: str) -> None:
        self.log(level, message)

    def log(self, level: str, message: str) -> None:
        """Append a timestamped log entry."""
        if not self.enabled(level):
            return
        ts = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        self._stream.write(f"[{ts}] [{level.upper():7}] {message}\n")
        self._stream.flush()
