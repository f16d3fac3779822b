"""Instruction dataclasses for the sprite script language.

Each instruction type represents one parsed step.  The tree is built by
parser.py and executed by runner.py.

Leaf instructions
-----------------
Move   — move the pointer to absolute (x, y)
Mouse  — click a named button ``count`` times
Sleep  — pause for ``ms`` milliseconds

Branch instructions
-------------------
Loop   — loop-start N / loop-end
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Move:
    """Absolute pointer target."""
    x: int
    y: int


@dataclass(frozen=True)
class Mouse:
    """A named button and how many times to click it."""
    button: str
    count:  int = 1


@dataclass(frozen=True)
class Sleep:
    ms: int


@dataclass(frozen=True)
class Loop:
    """loop-start count / loop-end — fixed iteration count.

    body is a tuple so a finished tree cannot be mutated during execution.
    """
    count: int
    body:  tuple["Instruction", ...] = ()


# Convenience union type (for type hints only; use isinstance() at runtime)
Instruction = Union[Move, Mouse, Sleep, Loop]


def count_leaf_instructions(instructions: Iterable[Instruction]) -> int:
    """Recursively count Move/Mouse/Sleep leaves, ignoring repetition."""
    total = 0
    for ins in instructions:
        if isinstance(ins, Loop):
            total += count_leaf_instructions(ins.body)
        else:
            total += 1
    return total


def count_effects(instructions: Iterable[Instruction]) -> int:
    """Number of leaf effects a full run performs (loops expanded)."""
    total = 0
    for ins in instructions:
        if isinstance(ins, Loop):
            total += ins.count * count_effects(ins.body)
        else:
            total += 1
    return total
