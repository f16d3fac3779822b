"""Button-name mapping for pynput.

Script button names are matched case-insensitively.
"""
from __future__ import annotations

from typing import Optional

from pynput import mouse

BUTTON_MAP: dict[str, mouse.Button] = {
    "LEFT":   mouse.Button.left,
    "RIGHT":  mouse.Button.right,
    "MIDDLE": mouse.Button.middle,
}


def parse_button(name: str) -> Optional[mouse.Button]:
    """Convert a script button name to a pynput Button, or None."""
    return BUTTON_MAP.get(name.upper())
