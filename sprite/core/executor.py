"""Action sinks — where executed instructions turn into effects.

Runner calls exactly three methods on its sink:

    move_pointer_to(x, y)
    click_button(button, count)
    pause(ms)

LoggingSink only records and logs the intended actions; it never touches
the operating system and never blocks.  For real pointer input see
input_sink.PynputSink.
"""
from __future__ import annotations

from typing import Any, Protocol

from sprite.core.console_log import LogFn, null_log


class ActionSink(Protocol):
    def move_pointer_to(self, x: int, y: int) -> None: ...

    def click_button(self, button: str, count: int) -> None: ...

    def pause(self, ms: int) -> None: ...


class LoggingSink:
    """Records every intended action as a tuple and logs it at INFO.

    ``actions`` holds ``("move", x, y)``, ``("click", button, count)`` and
    ``("pause", ms)`` entries in execution order.
    """

    def __init__(self, log_fn: LogFn | None = None) -> None:
        self._log = log_fn or null_log
        self.actions: list[tuple[Any, ...]] = []

    def move_pointer_to(self, x: int, y: int) -> None:
        self.actions.append(("move", x, y))
        self._log("INFO", f"move pointer to ({x}, {y})")

    def click_button(self, button: str, count: int) -> None:
        self.actions.append(("click", button, count))
        self._log("INFO", f"click {button} button {count} time(s)")

    def pause(self, ms: int) -> None:
        self.actions.append(("pause", ms))
        self._log("INFO", f"wait {ms} ms")

    def clear(self) -> None:
        self.actions.clear()
