"""Real input sink — drives the pointer with pynput controllers.

Design notes
------------
- One PynputSink instance per playback session.
- A click is press, wait ``mousewait`` ms, release; repeated ``count`` times.
- pause() really sleeps, scaled by playback_speed, and returns only when
  the wait is over so ordering is preserved.
"""
from __future__ import annotations

import time

from pynput import mouse

from sprite.core.console_log import LogFn, null_log
from sprite.core.constants import MIN_PLAYBACK_SPEED
from sprite.core.keys import parse_button


class PynputSink:
    """Executes pointer actions using a pynput mouse controller."""

    def __init__(self, settings, log_fn: LogFn | None = None, controller=None) -> None:
        self._settings = settings
        self._mc       = controller if controller is not None else mouse.Controller()
        self._log      = log_fn or null_log

    # ------------------------------------------------------------------
    # Timing helpers
    # ------------------------------------------------------------------

    def _sleep(self, ms: float) -> None:
        """Sleep for ``ms`` milliseconds (scaled by playback_speed)."""
        speed = max(MIN_PLAYBACK_SPEED, self._settings.playback_speed)
        target = ms / speed / 1000.0
        if target > 0:
            time.sleep(target)

    # ------------------------------------------------------------------
    # ActionSink
    # ------------------------------------------------------------------

    def move_pointer_to(self, x: int, y: int) -> None:
        self._log("DEBUG", f"pointer → ({x}, {y})")
        self._mc.position = (x, y)

    def click_button(self, button: str, count: int) -> None:
        btn = parse_button(button)
        if btn is None:
            raise ValueError(f"Unknown mouse button: {button!r}")
        self._log("DEBUG", f"click {button} x{count}")
        for _ in range(count):
            self._mc.press(btn)
            self._sleep(self._settings.mousewait)
            self._mc.release(btn)

    def pause(self, ms: int) -> None:
        self._log("DEBUG", f"sleep {ms} ms")
        self._sleep(ms)
