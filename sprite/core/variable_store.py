"""Variable store for one parse run.

Populated by ``pos name x y`` and read by ``move name``.  Variables are
global to the script (no block scoping); the last ``pos`` wins.
The store is discarded once parsing completes.
"""
from __future__ import annotations

from typing import Optional

Point = tuple[int, int]


class VariableStore:
    """Maps 'name' → (x, y)."""

    def __init__(self) -> None:
        self._vars: dict[str, Point] = {}

    # ------------------------------------------------------------------
    def get(self, name: str) -> Optional[Point]:
        return self._vars.get(name)

    def set(self, name: str, x: int, y: int) -> None:
        self._vars[name] = (x, y)

    def as_dict(self) -> dict[str, Point]:
        return dict(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"VariableStore({self._vars!r})"
