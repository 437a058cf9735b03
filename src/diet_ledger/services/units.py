"""Parsing and formatting of unit-suffixed magnitudes such as "120kcal"."""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

_DISCARD = re.compile(r"[^\d.\-]+")
_NUMBER_PREFIX = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")
_TENTH = Decimal("0.1")
# wide enough for any finite float at tenths precision
_CONTEXT = Context(prec=400)

KCAL = "kcal"
GRAMS = "g"


def parse_magnitude(value: object) -> float:
    """Return the numeric magnitude in a free-form quantity string.

    Every character other than digits, "." and "-" is dropped and the longest
    leading number is parsed. Missing or garbled input resolves to 0.0.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
        return number if math.isfinite(number) else 0.0
    if not isinstance(value, str):
        return 0.0
    cleaned = _DISCARD.sub("", value)
    match = _NUMBER_PREFIX.match(cleaned)
    if match is None:
        return 0.0
    number = float(match.group())
    return number if math.isfinite(number) else 0.0


def round_tenths(value: float) -> float:
    """Round to one decimal place, halves away from zero; non-finite -> 0.0."""
    if not math.isfinite(value):
        return 0.0
    rounded = Decimal(repr(value)).quantize(
        _TENTH, rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    # -0.0 + 0.0 is 0.0
    return float(rounded) + 0.0


def format_magnitude(value: float, unit: str) -> str:
    """Render a magnitude with one decimal place and a unit suffix."""
    return f"{round_tenths(value):.1f}{unit}"


def format_kcal(value: float) -> str:
    """Render a calorie magnitude, e.g. "120.0kcal"."""
    return format_magnitude(value, KCAL)


def format_grams(value: float) -> str:
    """Render a gram magnitude, e.g. "10.0g"."""
    return format_magnitude(value, GRAMS)
