"""Arithmetic for a single pending operation.

Operands arrive as display text. They are read with prefix decimal parsing
(the longest leading number wins, so "12abc" reads as 12) and the result is
handed back as text in canonical number form. An empty string means the pair
was not computable yet; it is not an error.
"""

from __future__ import annotations

import math
import operator
import re
from decimal import Decimal
from typing import Callable, Optional

from calcstate.models import Operation

# Leading number: optional sign, then Infinity or a decimal with optional exponent
_NUMBER_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)

# Positional notation is used for decimal exponents in [-7, 21)
_MAX_POSITIONAL = 21
_MIN_POSITIONAL = -6


def parse_operand(text: Optional[str]) -> Optional[float]:
    """Read the leading number of ``text``; None when there is none."""
    if text is None:
        return None
    match = _NUMBER_PREFIX_RE.match(text)
    if not match:
        return None
    return float(match.group(1).replace("Infinity", "inf"))


def _divide(prev: float, current: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN."""
    if current == 0.0:
        if prev == 0.0 or math.isnan(prev):
            return math.nan
        negative = (prev < 0) != (math.copysign(1.0, current) < 0)
        return -math.inf if negative else math.inf
    return prev / current


_OPERATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _divide,
}


def number_to_string(value: float) -> str:
    """Canonical text for a float.

    Integral values drop the fraction, -0.0 reads "0", and everything else
    uses the shortest digits that round-trip, switching to exponent form
    outside the positional range:

        8.0   -> "8"
        1e21  -> "1e+21"
        1e-7  -> "1e-7"
        inf   -> "Infinity"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    exact = Decimal(repr(abs(value))).normalize()
    _, digit_tuple, exponent = exact.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # n: position of the decimal point relative to the first digit
    n = k + exponent

    if k <= n <= _MAX_POSITIONAL:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _MAX_POSITIONAL:
        return sign + digits[:n] + "." + digits[n:]
    if _MIN_POSITIONAL < n <= 0:
        return sign + "0." + "0" * (-n) + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def evaluate(
    previous_operand: Optional[str],
    current_operand: Optional[str],
    operation: Optional[str],
) -> str:
    """Compute ``previous <operation> current`` as text.

    Args:
        previous_operand: Left-hand operand text.
        current_operand: Right-hand operand text.
        operation: One of ``+ - * ÷``.

    Returns:
        The result in canonical form, or "" when either operand is not a
        number or the operation is not recognized.
    """
    prev = parse_operand(previous_operand)
    current = parse_operand(current_operand)
    if prev is None or current is None:
        return ""

    func = _OPERATIONS.get(operation)
    if func is None:
        return ""
    return number_to_string(func(prev, current))
