"""Sprite — Entry point.

Usage: python main.py script.spr
"""
from __future__ import annotations

import sys
from pathlib import Path

from sprite.core.console_log import ConsoleLog
from sprite.core.errors import ParseError
from sprite.core.executor import LoggingSink
from sprite.core.instructions import count_effects
from sprite.core.parser import Interpreter
from sprite.core.runner import Runner
from sprite.core.settings_manager import SettingsManager

BASE_DIR = Path(__file__).parent


def _make_sink(settings: SettingsManager, log: ConsoleLog):
    if settings.real_input:
        from sprite.core.input_sink import PynputSink
        return PynputSink(settings, log_fn=log)
    return LoggingSink(log_fn=log)


def main(argv: list[str] | None = None, settings: SettingsManager | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = settings or SettingsManager(BASE_DIR / "settings.ini")
    log = ConsoleLog(settings.log_level)

    if not argv:
        log("ERROR", "missing sprite script file, usage: sprite `script.spr`")
        return 1
    filename = argv[0]

    interpreter = Interpreter(settings.syntax_sugar, log_fn=log)
    log("TRACE", f"parse {filename}")
    try:
        instructions = interpreter.parse_script(filename)
    except OSError as exc:
        log("ERROR", f"cannot read {filename}: {exc}")
        return 1
    except ParseError as exc:
        log("ERROR", str(exc))
        return 1

    log("TRACE", f"execute {filename}")
    try:
        Runner(_make_sink(settings, log), log_fn=log).run(instructions)
    except Exception as exc:          # noqa: BLE001
        log("ERROR", f"execution failed: {exc!r}")
        return 1

    log("SUCCESS", f"done ({count_effects(instructions)} actions)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
