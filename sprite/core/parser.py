"""Sprite script parser — tokenizer and line-by-line interpreter.

Responsibilities
----------------
- Strip whole-line and inline comments  (** …)
- Split lines into [opcode, arg1, arg2, …] tokens
- Apply syntax-sugar aliases from settings.ini [COMMANDS] section
- Build the instruction tree in a single pass, using a stack of open
  loop frames for loop-start / loop-end blocks

Entry point
-----------
    from sprite.core.parser import parse_script, ParseError
    instructions = parse_script("clicks.spr")   # list[Instruction]

Instructions between a loop-start and its matching loop-end, including
move / mouse / sleep, become that loop's body.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from sprite.core.console_log import LogFn, null_log
from sprite.core.constants import (
    OP_POS, OP_MOVE, OP_MOUSE, OP_SLEEP, OP_LOOP_START, OP_LOOP_END,
    OPCODES, DEFAULT_CLICK_COUNT, INT32_MIN, INT32_MAX,
)
from sprite.core.errors import ParseError, ScriptSyntaxError, ScriptValueError
from sprite.core.instructions import Instruction, Move, Mouse, Sleep, Loop
from sprite.core.prefix import COMMENT_PREFIX
from sprite.core.runner import Runner
from sprite.core.variable_store import VariableStore

__all__ = [
    "Interpreter", "LoopFrame", "ParseError",
    "strip_comment", "tokenize", "expand_sugar",
    "parse_text", "parse_script",
]

_INT_RE = re.compile(r"[+-]?[0-9]+")

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def strip_comment(line: str) -> str:
    """Return line with a trailing comment (** …) removed."""
    index = line.find(COMMENT_PREFIX)
    if index < 0:
        return line
    return line[:index]


def tokenize(line: str) -> list[str]:
    """Split one source line into a token list.

    Returns an empty list for blank/comment-only lines.
    """
    return strip_comment(line.strip()).split()


def expand_sugar(tokens: list[str], sugar_map: dict[str, str]) -> list[str]:
    """Replace an alias opcode with its canonical equivalent.

    Examples
    --------
    >>> expand_sugar(["click", "left"], {"click": "mouse"})
    ['mouse', 'left']
    """
    if not tokens:
        return tokens
    canonical = sugar_map.get(tokens[0], tokens[0])
    if canonical in OPCODES:
        return [canonical] + tokens[1:]
    return tokens


# ---------------------------------------------------------------------------
# Loop frames
# ---------------------------------------------------------------------------

@dataclass
class LoopFrame:
    """An open loop-start whose body is still being collected."""
    count:    int
    line_num: int                        # 1-based line of the loop-start
    body:     list[Instruction] = field(default_factory=list)

    def close(self) -> Loop:
        return Loop(count=self.count, body=tuple(self.body))


# ---------------------------------------------------------------------------
# Interpreter
# ---------------------------------------------------------------------------

class Interpreter:
    """Turns script lines into a top-level instruction list.

    Parameters
    ----------
    sugar_map : dict[str, str], optional
        alias → opcode mapping (see SettingsManager.syntax_sugar).
    log_fn : LogFn, optional
        ``(level, message)`` callback; lines are logged at TRACE and
        parsed instructions at DEBUG.
    """

    def __init__(
        self,
        sugar_map: dict[str, str] | None = None,
        log_fn:    LogFn | None = None,
    ) -> None:
        self._sugar        = sugar_map or {}
        self._log          = log_fn or null_log
        self.variables     = VariableStore()
        self.instructions: list[Instruction] = []
        self._handlers = {
            OP_POS:        self._parse_pos,
            OP_MOVE:       self._parse_move,
            OP_MOUSE:      self._parse_mouse,
            OP_SLEEP:      self._parse_sleep,
            OP_LOOP_START: self._parse_loop_start,
            OP_LOOP_END:   self._parse_loop_end,
        }

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def parse_line(self, raw_line: str, line_num: int, loop_stack: list[LoopFrame]) -> None:
        """Process one source line.

        Mutates the variable store, ``loop_stack`` and ``self.instructions``.
        Raises ParseError on the first problem found.
        """
        tokens = expand_sugar(tokenize(raw_line), self._sugar)
        if not tokens:
            return

        self._log("TRACE", f"parse line {line_num}: {raw_line.strip()}")
        op, args = tokens[0], tokens[1:]
        handler = self._handlers.get(op)
        if handler is None:
            raise ScriptSyntaxError(line_num, f"unknown instruction [{op}]")
        handler(args, line_num, loop_stack)

    def parse_text(self, text: str) -> list[Instruction]:
        """Parse a whole script held in memory.

        Fails fast on the first bad line; an unclosed loop-start at the end
        of input is a ScriptSyntaxError.  Each call starts from an empty
        variable store and instruction list.
        """
        self.variables    = VariableStore()
        self.instructions = []
        loop_stack: list[LoopFrame] = []
        # Only "\n" ends a line, so line numbers match the file
        for line_num, raw in enumerate(text.split("\n"), start=1):
            self.parse_line(raw.rstrip("\r"), line_num, loop_stack)

        if loop_stack:
            frame = loop_stack[-1]
            raise ScriptSyntaxError(
                frame.line_num,
                f"missing [{OP_LOOP_END}] for [{OP_LOOP_START}] at line {frame.line_num}",
            )
        return self.instructions

    def parse_script(self, path: Union[str, Path]) -> list[Instruction]:
        """Read a UTF-8 script file and parse it.

        OSError propagates; a file that is not valid UTF-8 is also an OSError.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise OSError(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
        return self.parse_text(text)

    def execute(self, sink, log_fn: LogFn | None = None) -> None:
        """Run the parsed instructions against ``sink``."""
        Runner(sink, log_fn=log_fn or self._log).run(self.instructions)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _emit(self, ins: Instruction, loop_stack: list[LoopFrame]) -> None:
        """Append to the innermost open loop, or the top level."""
        if loop_stack:
            loop_stack[-1].body.append(ins)
        else:
            self.instructions.append(ins)

    @staticmethod
    def _int(token: str, op: str, line_num: int,
             lo: Optional[int] = None, hi: Optional[int] = None) -> int:
        if not _INT_RE.fullmatch(token):
            raise ScriptValueError(line_num, f"[{op}] args must be int, got {token!r}")
        value = int(token)
        if (lo is not None and value < lo) or (hi is not None and value > hi):
            raise ScriptValueError(line_num, f"[{op}] arg out of range: {value}")
        return value

    def _coord(self, token: str, op: str, line_num: int) -> int:
        return self._int(token, op, line_num, INT32_MIN, INT32_MAX)

    def _count(self, token: str, op: str, line_num: int) -> int:
        return self._int(token, op, line_num, lo=0)

    # ------------------------------------------------------------------
    # Opcodes
    # ------------------------------------------------------------------

    def _parse_pos(self, args: list[str], line_num: int, loop_stack: list[LoopFrame]) -> None:
        if len(args) != 3:
            raise ScriptSyntaxError(line_num, f"[{OP_POS}] requires 3 args: name x y")
        name = args[0]
        x = self._coord(args[1], OP_POS, line_num)
        y = self._coord(args[2], OP_POS, line_num)
        self.variables.set(name, x, y)
        self._log("DEBUG", f"line {line_num}: parsed [{OP_POS}] {name} {x} {y}")

    def _parse_move(self, args: list[str], line_num: int, loop_stack: list[LoopFrame]) -> None:
        if len(args) == 1:
            point = self.variables.get(args[0])
            if point is None:
                raise ScriptValueError(line_num, f"variable not defined {args[0]}")
            x, y = point
            self._log("DEBUG", f"line {line_num}: parsed [{OP_MOVE}] {args[0]} ({x} {y})")
        elif len(args) == 2:
            x = self._coord(args[0], OP_MOVE, line_num)
            y = self._coord(args[1], OP_MOVE, line_num)
            self._log("DEBUG", f"line {line_num}: parsed [{OP_MOVE}] {x} {y}")
        else:
            raise ScriptValueError(line_num, f"[{OP_MOVE}] takes a pos name or x y")
        self._emit(Move(x, y), loop_stack)

    def _parse_mouse(self, args: list[str], line_num: int, loop_stack: list[LoopFrame]) -> None:
        if not 1 <= len(args) <= 2:
            raise ScriptSyntaxError(line_num, f"[{OP_MOUSE}] requires button [count]")
        button = args[0]
        count = (
            self._count(args[1], OP_MOUSE, line_num)
            if len(args) == 2 else DEFAULT_CLICK_COUNT
        )
        self._log("DEBUG", f"line {line_num}: parsed [{OP_MOUSE}] {button} {count}")
        self._emit(Mouse(button, count), loop_stack)

    def _parse_sleep(self, args: list[str], line_num: int, loop_stack: list[LoopFrame]) -> None:
        if len(args) != 1:
            raise ScriptSyntaxError(line_num, f"[{OP_SLEEP}] requires 1 arg")
        ms = self._count(args[0], OP_SLEEP, line_num)
        self._log("DEBUG", f"line {line_num}: parsed [{OP_SLEEP}] {ms}")
        self._emit(Sleep(ms), loop_stack)

    def _parse_loop_start(self, args: list[str], line_num: int, loop_stack: list[LoopFrame]) -> None:
        if len(args) != 1:
            raise ScriptSyntaxError(line_num, f"[{OP_LOOP_START}] requires 1 arg")
        count = self._count(args[0], OP_LOOP_START, line_num)
        self._log("DEBUG", f"line {line_num}: parsed [{OP_LOOP_START}] {count}")
        loop_stack.append(LoopFrame(count=count, line_num=line_num))

    def _parse_loop_end(self, args: list[str], line_num: int, loop_stack: list[LoopFrame]) -> None:
        if args:
            raise ScriptSyntaxError(line_num, f"[{OP_LOOP_END}] takes no args")
        if not loop_stack:
            raise ScriptSyntaxError(line_num, f"missing [{OP_LOOP_START}]")
        self._log("DEBUG", f"line {line_num}: parsed [{OP_LOOP_END}]")
        # The closed loop lands in its parent frame, or the top level
        self._emit(loop_stack.pop().close(), loop_stack)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_text(
    text: str,
    sugar_map: dict[str, str] | None = None,
    log_fn:    LogFn | None = None,
) -> list[Instruction]:
    """Convenience: parse script text with a fresh Interpreter."""
    return Interpreter(sugar_map, log_fn).parse_text(text)


def parse_script(
    path: Union[str, Path],
    sugar_map: dict[str, str] | None = None,
    log_fn:    LogFn | None = None,
) -> list[Instruction]:
    """Convenience: parse a script file with a fresh Interpreter."""
    return Interpreter(sugar_map, log_fn).parse_script(path)
