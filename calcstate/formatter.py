"""Display formatting for operand text.

Groups the integer part of an operand into thousands and leaves the
fraction exactly as typed, so "12." stays "12." while the user is mid-entry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_INTEGER_RE = re.compile(r"([+-]?)(\d+)(?:[eE]([+-]?\d+))?")


@dataclass(frozen=True)
class FormatterConfig:
    """Digit grouping settings for the integer part."""

    separator: str = ","
    group_size: int = 3

    def __post_init__(self) -> None:
        if self.group_size < 1:
            raise ValueError(f"group_size must be positive, got {self.group_size}")


DEFAULT_CONFIG = FormatterConfig()


def _group(digits: str, config: FormatterConfig) -> str:
    """Insert separators every ``group_size`` digits, counting from the right."""
    size = config.group_size
    head = len(digits) % size or size
    groups = [digits[:head]]
    groups.extend(digits[i:i + size] for i in range(head, len(digits), size))
    return config.separator.join(groups)


def format_integer(text: str, config: FormatterConfig = DEFAULT_CONFIG) -> str:
    """Format the integer part of an operand.

    The text is read as a whole number first: "" is 0, leading zeros
    collapse, exponent forms expand ("1e+21" → 1 followed by 21 zeros,
    "1e-7" rounds to 0) and a leading "-" is kept. Non-numeric text comes
    out as "∞" / "-∞" for infinities and "NaN" otherwise.
    """
    stripped = text.strip()
    if stripped in ("Infinity", "+Infinity"):
        return "∞"
    if stripped == "-Infinity":
        return "-∞"
    if not stripped:
        return "0"
    match = _INTEGER_RE.fullmatch(stripped)
    if not match:
        return "NaN"

    sign, mantissa, exponent = match.groups()
    value = int(mantissa)
    shift = int(exponent or 0)
    if shift >= 0:
        value *= 10 ** shift
    else:
        # Round half up
        value, rest = divmod(value, 10 ** -shift)
        if 2 * rest >= 10 ** -shift:
            value += 1

    # A sign is kept even on zero, so "-0.5" keeps its minus
    return ("-" if sign == "-" else "") + _group(str(value), config)


def format_operand(
    operand: Optional[str],
    config: FormatterConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    """Format operand text for display.

    Args:
        operand: Raw operand text, or None when nothing is entered.
        config: Grouping settings.

    Returns:
        The display text ("" for an empty operand), or None when there is
        nothing to render.
    """
    if operand is None:
        return None
    if operand == "":
        # Uncomputable result: blank display
        return ""
    integer, dot, decimal = operand.partition(".")
    if not dot:
        return format_integer(integer, config)
    return f"{format_integer(integer, config)}.{decimal}"
