"""Shared test fixtures."""
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `sprite.*` and `main` imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sprite.core.executor import LoggingSink  # noqa: E402


@pytest.fixture
def sink():
    """A log-only sink whose .actions records every effect."""
    return LoggingSink()


@pytest.fixture
def log_records():
    """A (level, message) log function that keeps what it receives."""
    records: list[tuple[str, str]] = []

    def log_fn(level: str, message: str) -> None:
        records.append((level, message))

    log_fn.records = records
    return log_fn


@pytest.fixture
def write_script(tmp_path):
    """Write script text to a temp .spr file and return its path."""
    def _write(text: str, name: str = "script.spr") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
