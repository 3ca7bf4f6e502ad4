import math
import sys
from decimal import Decimal
from typing import Union

Number = Union[int, float]

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    """Full English month name for a 1-based month number."""
    return MONTH_NAMES[month - 1]


def round_half_up(value: float) -> int:
    # Browser-style rounding: halves go towards +infinity.
    return int(math.floor(value + 0.5))


def round2(value: float) -> float:
    """Round to 2 decimals, half away from zero, after nudging by machine epsilon."""
    nudged = value + sys.float_info.epsilon
    scaled = math.floor(abs(nudged) * 100 + 0.5)
    return math.copysign(scaled, nudged) / 100


def js_number(value: Number) -> str:
    """Format a number the way a browser prints it: 8 not 8.0, 7.9 not 7.90."""
    if isinstance(value, int):
        return str(value)
    value = float(value) + 0.0
    text = repr(value)
    if "e" in text:
        # browsers only switch to exponent form outside [1e-7, 1e21)
        if 1e-7 <= abs(value) < 1e21:
            return format(Decimal(text), "f")
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent):+d}"
    if text.endswith(".0"):
        text = text[:-2]
    return text
