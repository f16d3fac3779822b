"""Parse errors raised by the sprite interpreter.

Every error carries the 1-based source line it was found on.  File
errors are not wrapped: a missing or unreadable script raises OSError.
"""
from __future__ import annotations


class ParseError(Exception):
    """Base class for fatal parse errors."""

    kind = "ParseError"

    def __init__(self, line_num: int, message: str) -> None:
        super().__init__(line_num, message)
        self.line_num = line_num
        self.message  = message

    def __str__(self) -> str:
        return f"line {self.line_num} - {self.kind}: {self.message}"


class ScriptSyntaxError(ParseError):
    """Malformed structure: unknown opcode, unmatched loop, bad arity."""

    kind = "SyntaxError"


class ScriptValueError(ParseError):
    """Well-formed line with an invalid argument value."""

    kind = "ValueError"
