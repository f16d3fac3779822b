"""Settings manager — reads settings.ini via configparser.

Every value has a fallback, so a missing file or key gives the defaults.
"""
from configparser import ConfigParser
from pathlib import Path

from sprite.core.console_log import LEVELS
from sprite.core.constants import DEFAULT_MOUSEWAIT_MS, OPCODES

DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    def __init__(self, ini_path: Path) -> None:
        self.ini_path = ini_path
        self.config = ConfigParser(comment_prefixes=(";",), inline_comment_prefixes=(";",))
        if ini_path.exists():
            self.config.read(ini_path, encoding="utf-8")

    @property
    def log_level(self) -> str:
        """Configured minimum log level; unknown names fall back to INFO."""
        level = self.config.get("GENERAL", "log_level", fallback=DEFAULT_LOG_LEVEL).upper()
        return level if level in LEVELS else DEFAULT_LOG_LEVEL

    @property
    def real_input(self) -> bool:
        return self.config.getboolean("INPUT", "real_input", fallback=False)

    @property
    def mousewait(self) -> int:
        return self.config.getint("INPUT", "mousewait", fallback=DEFAULT_MOUSEWAIT_MS)

    @property
    def playback_speed(self) -> float:
        return self.config.getfloat("INPUT", "playback_speed", fallback=1.0)

    @property
    def syntax_sugar(self) -> dict[str, str]:
        """Return alias→opcode mapping from [COMMANDS] section.

        Aliases that do not point at a known opcode are dropped.
        """
        if not self.config.has_section("COMMANDS"):
            return {}
        return {
            k: v.lower()
            for k, v in self.config.items("COMMANDS")
            if v.lower() in OPCODES
        }
