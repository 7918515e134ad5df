"""
Number coercion and display formatting for analyzer readouts.

Conventions:
- Form inputs arrive as raw strings; empty means 0, unparseable means NaN.
- Readouts are fixed-decimal strings, rounded half away from zero.
- Non-finite values print as NaN / Infinity / -Infinity.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

import numpy as np


_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

_INFINITY_TEXT = {
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}

# Above this magnitude fixed notation is abandoned.
_FIXED_LIMIT = 1e21


def to_number(value) -> float:
    """Coerce a form value (number or text) to float, NaN if unparseable."""
    if value is None:
        return math.nan
    if isinstance(value, (bool, int, float, np.number)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    if text in _INFINITY_TEXT:
        return _INFINITY_TEXT[text]
    if not _NUMBER_RE.fullmatch(text):
        return math.nan
    return float(text)


def format_plain(value: float) -> str:
    """Shortest text for a number: 138 -> '138', 6.2 -> '6.2'."""
    x = float(value)
    if not math.isfinite(x):
        return _format_non_finite(x)
    if x == 0:
        return "0"
    if x.is_integer() and abs(x) < _FIXED_LIMIT:
        return str(int(x))
    return repr(x)


def format_fixed(value: float, decimals: Optional[int]) -> str:
    """
    Format with a fixed number of decimals.

    Rounds the exact binary value half away from zero, so 40.5 -> '41'
    and 1.005 -> '1.00' (1.005 is stored just below the tie).
    decimals=None falls back to format_plain.
    """
    if decimals is None:
        return format_plain(value)
    x = float(value)
    if not math.isfinite(x):
        return _format_non_finite(x)
    if abs(x) >= _FIXED_LIMIT:
        return format_plain(x)
    if x == 0:
        x = 0.0  # drop the sign of -0.0
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def _format_non_finite(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    return "Infinity" if x > 0 else "-Infinity"
