"""Instruction runner — walks an instruction tree and performs each step.

Usage
-----
    runner = Runner(sink, log_fn)
    runner.run(instructions)

Recursion depth equals loop nesting depth.  Exceptions raised by the
sink propagate to the caller untouched.
"""
from __future__ import annotations

from typing import Callable, Iterable

from sprite.core.console_log import LogFn, null_log
from sprite.core.executor import ActionSink
from sprite.core.instructions import Instruction, Move, Mouse, Sleep, Loop

StepFn = Callable[[Instruction], None]     # called after each leaf effect


class Runner:
    """Recursively executes a tree produced by parser.parse_script()."""

    def __init__(
        self,
        sink:    ActionSink,
        log_fn:  LogFn | None = None,
        on_step: StepFn | None = None,
    ) -> None:
        self._sink    = sink
        self._log     = log_fn or null_log
        self._on_step = on_step or (lambda ins: None)

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def run(self, instructions: Iterable[Instruction]) -> None:
        """Execute instructions in order."""
        for ins in instructions:
            self.execute(ins)

    def execute(self, ins: Instruction) -> None:
        if   isinstance(ins, Move):   self._run_move(ins)
        elif isinstance(ins, Mouse):  self._run_mouse(ins)
        elif isinstance(ins, Sleep):  self._run_sleep(ins)
        elif isinstance(ins, Loop):   self._run_loop(ins)
        else:
            raise TypeError(f"Not an instruction: {ins!r}")

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    def _run_move(self, ins: Move) -> None:
        self._log("TRACE", f"execute move ({ins.x}, {ins.y})")
        self._sink.move_pointer_to(ins.x, ins.y)
        self._on_step(ins)

    def _run_mouse(self, ins: Mouse) -> None:
        self._log("TRACE", f"execute mouse {ins.button} x{ins.count}")
        self._sink.click_button(ins.button, ins.count)
        self._on_step(ins)

    def _run_sleep(self, ins: Sleep) -> None:
        self._log("TRACE", f"execute sleep {ins.ms} ms")
        self._sink.pause(ins.ms)
        self._on_step(ins)

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def _run_loop(self, ins: Loop) -> None:
        self._log("TRACE", f"execute loop x{ins.count} ({len(ins.body)} instructions)")
        for _ in range(ins.count):
            self.run(ins.body)
