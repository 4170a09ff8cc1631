"""Key labels → Actions.

The layout mirrors the classic four-column pad:

    AC      DEL  ÷
    1   2   3    *
    4   5   6    +
    7   8   9    -
    .   0   =

Single-character keys may be typed run together ("12+3="); word keys
(AC, DEL, enter, ...) are separated by whitespace.
"""

from __future__ import annotations

import re

from calcstate.models import DIGITS, Action, Operation

KEYPAD_LAYOUT: list[list[str]] = [
    ["AC", "DEL", "÷"],
    ["1", "2", "3", "*"],
    ["4", "5", "6", "+"],
    ["7", "8", "9", "-"],
    [".", "0", "="],
]

# Keyboard spellings of the on-screen operator symbols
OPERATOR_ALIASES = {
    "/": Operation.DIVIDE,
    "x": Operation.MULTIPLY,
    "X": Operation.MULTIPLY,
    "×": Operation.MULTIPLY,
}

_WORD_KEYS = {
    "ac": Action.clear,
    "c": Action.clear,
    "clear": Action.clear,
    "del": Action.delete_digit,
    "backspace": Action.delete_digit,
    "=": Action.evaluate,
    "enter": Action.evaluate,
}

_SYMBOLS = {op.value for op in Operation} | set(OPERATOR_ALIASES)

# A known word key (longest first), or any single non-space character
_TOKEN_RE = re.compile(
    "(?i:"
    + "|".join(re.escape(w) for w in sorted(_WORD_KEYS, key=len, reverse=True) if len(w) > 1)
    + r")|\S"
)


def action_for_key(label: str) -> Action:
    """Translate one key label into an Action.

    Raises:
        ValueError: if the label is not on the keypad.
    """
    key = label.strip()
    if key in DIGITS:
        return Action.add_digit(key)
    if key in OPERATOR_ALIASES:
        return Action.choose_operation(OPERATOR_ALIASES[key])
    if key in _SYMBOLS:
        return Action.choose_operation(key)
    factory = _WORD_KEYS.get(key.lower())
    if factory is None:
        raise ValueError(f"Unknown key: {label!r}")
    return factory()


def tokenize_keys(text: str) -> list[str]:
    """Split typed input into key labels.

    Known word keys are matched first, case-insensitively; everything else
    is one key per character, so "2xAC" is 2, multiply, clear.

    >>> tokenize_keys("12+3.5=")
    ['1', '2', '+', '3', '.', '5', '=']
    >>> tokenize_keys("5 x 3 AC")
    ['5', 'x', '3', 'AC']
    """
    return _TOKEN_RE.findall(text)
