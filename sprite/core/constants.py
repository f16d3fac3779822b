"""Centralised tunables and magic numbers.

All numeric constants that control parsing and playback are collected
here so they are easy to find, document, and adjust.
"""

# ---------------------------------------------------------------------------
# Opcodes  (sprite/core/parser.py)
# ---------------------------------------------------------------------------
OP_POS        = "pos"
OP_MOVE       = "move"
OP_MOUSE      = "mouse"
OP_SLEEP      = "sleep"
OP_LOOP_START = "loop-start"
OP_LOOP_END   = "loop-end"

OPCODES = frozenset({
    OP_POS, OP_MOVE, OP_MOUSE, OP_SLEEP, OP_LOOP_START, OP_LOOP_END,
})

# ---------------------------------------------------------------------------
# Parser  (sprite/core/parser.py)
# ---------------------------------------------------------------------------
DEFAULT_CLICK_COUNT = 1
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# ---------------------------------------------------------------------------
# Input sink  (sprite/core/input_sink.py)
# ---------------------------------------------------------------------------
DEFAULT_MOUSEWAIT_MS   = 50     # press → release delay for one click
MIN_PLAYBACK_SPEED     = 0.01   # guards against division by zero
