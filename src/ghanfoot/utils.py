"""
Numeric Helpers
===============
Lenient parsing and fixed-decimal formatting for values typed into the form.

Why is this file needed?
------------------------
1. Live typing: half-typed input ("", "1.", "abc") is the normal case, so every
   calculation goes through ONE parse-or-default function instead of ad-hoc
   try/except blocks at each call site.
2. Display: volumes are shown with a fixed number of decimals, rounded half up
   on the exact binary value of the float.
"""
import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

# Leading numeric prefix, e.g. "12.5abc" -> "12.5", " -3e2 m" -> "-3e2".
# ASCII digits only: "١٢" or "１２" are not numbers for the form.
_NUMBER_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_float(value: Any, default: float = 0.0) -> float:
    """
    Parse a number from user input, falling back to `default` on failure.

    Only the leading numeric part of a string is used, trailing characters are
    ignored. NaN is never returned.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float)):
        number = float(value)
        return default if math.isnan(number) else number

    match = _NUMBER_PREFIX.match(str(value))
    if not match:
        return default

    text = match.group(1)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def is_blank(value: Any) -> bool:
    """True for None, empty text, zero and NaN (values that carry no input)."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def to_fixed(value: float, digits: int) -> str:
    """Format `value` with exactly `digits` decimals (round half up)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    with localcontext() as ctx:
        # enough digits for any finite double
        ctx.prec = 350 + digits
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if value == 0:
        # -0.0 prints unsigned
        rounded = abs(rounded)
    return f"{rounded:f}"
