"""
Display formatting for calculator results.
"""

import math
from typing import Optional

import numpy as np

# Magnitudes outside [SMALL_THRESHOLD, LARGE_THRESHOLD) switch to scientific notation
LARGE_THRESHOLD = 1e12
SMALL_THRESHOLD = 1e-6
SCIENTIFIC_DIGITS = 10
SIGNIFICANT_DIGITS = 12
# Enough digits to identify any float64
MAX_ROUND_TRIP_DIGITS = 17


def format_number(value: float) -> str:
    """
    Format a result for display.

    Large and tiny magnitudes use scientific notation with trailing zeros
    trimmed ("1.23456789e+12"); everything else is rounded to twelve
    significant digits and printed positionally, which hides float noise
    such as 0.1 + 0.2 = 0.30000000000000004.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude >= LARGE_THRESHOLD or magnitude < SMALL_THRESHOLD:
        return np.format_float_scientific(
            value,
            precision=SCIENTIFIC_DIGITS,
            unique=False,
            trim="-",
            exp_digits=1,
        )

    rounded = float(f"{value:.{SIGNIFICANT_DIGITS}g}")
    return np.format_float_positional(rounded, trim="-")


def format_for_input(value: float, max_length: Optional[int] = None) -> Optional[str]:
    """
    Render a result as expression text that tokenizes back to the value.

    Uses the shortest positional representation that round-trips, never an
    exponent, since the tokenizer does not accept one. When `max_length` is
    given and that text is longer, significant digits are dropped until it
    fits; the text then only approximates the value.

    Returns:
        The expression text, or None when even a single significant digit
        does not fit (magnitudes far beyond the input limit)
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite value as input: {value}")
    if value == 0:
        return "0"

    text = np.format_float_positional(value, trim="-")
    if max_length is None or len(text) <= max_length:
        return text

    for digits in range(MAX_ROUND_TRIP_DIGITS, 0, -1):
        text = np.format_float_positional(
            value, precision=digits, unique=False, fractional=False, trim="-"
        )
        if len(text) <= max_length:
            return text
    return None
