"""
Numeric helpers shared by the state machine and the presentation adapter.

Parsing and formatting mirror what a browser does with ``parseFloat`` and
``Number.prototype.toString`` so the displays read the same as the page's
native number handling: ``12`` rather than ``12.0``, ``Infinity`` rather than
``inf``.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Callable, Dict

import numpy as np

from .state import Operator

_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?))"
)

# Exponential notation kicks in past these decimal exponents.
_MAX_FIXED_EXPONENT = 21
_MIN_FIXED_EXPONENT = -6

_OPERATIONS: Dict[Operator, Callable[[np.float64, np.float64], np.float64]] = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
}


def parse_number(text: str) -> float:
    """
    Parse the longest numeric prefix of ``text``.

    Args:
        text: Input buffer contents, possibly partial (``"3."``, ``"-"``)

    Returns:
        The parsed value, or NaN when no numeric prefix exists
    """
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def calculate(left: float, operator: Operator, right: float) -> float:
    """
    Apply a binary operator with IEEE-754 semantics.

    Division by zero gives an infinity (or NaN for 0/0) instead of raising.
    """
    with np.errstate(all="ignore"):
        result = _OPERATIONS[operator](np.float64(left), np.float64(right))
    return float(result)


def format_number(value: float) -> str:
    """
    Render a float the way a browser prints a number.

    Args:
        value: Number to render

    Returns:
        Shortest round-trip representation, without a trailing ``.0``
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    # position of the decimal point relative to the first significant digit
    n = exponent + k

    if k <= n <= _MAX_FIXED_EXPONENT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_FIXED_EXPONENT:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_FIXED_EXPONENT < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        power = n - 1
        mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + body


__all__ = ["parse_number", "calculate", "format_number"]
