"""Numeric helper functions."""

import re
from typing import Any, Optional

import numpy as np

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def guarded_ratio(numerator: float, denominator: float, fallback: float) -> float:
    """Divide when the denominator is positive, otherwise return ``fallback``."""
    if denominator > 0:
        return numerator / denominator
    return fallback


def sanitize_float(value: Any) -> Optional[float]:
    """Coerce different numeric types to clean floats, returning None for invalid values."""
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (np.generic, float, int, np.integer)):
        value = float(value)
        if not np.isfinite(value):
            return None
        return value
    return None


def parse_locale_number(value: Any) -> float:
    """Turn a user-entered field into a finite float.

    Accepts a comma as decimal separator (``"0,6"``) and reads the leading
    numeric part of free text (``"12 caballos"``). Anything that yields no
    finite number becomes ``0.0``.
    """
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value.replace(",", ".", 1))
        if match is None:
            return 0.0
        value = float(match.group(0))
    number = sanitize_float(value)
    return 0.0 if number is None else number
