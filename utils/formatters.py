"""Helpers for formatting and serialising calculator results."""

from dataclasses import asdict, is_dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Sequence

import numpy as np

from constants import CURRENCY_SYMBOL, MISSING_VALUE
from .math_utils import sanitize_float


def _round_half_up(value: float, digits: int) -> Decimal:
    """Round the magnitude of ``value`` with ties going away from zero.

    Works on the exact binary value, like es-MX currency and fixed-point
    rendering in the browser.
    """
    return abs(Decimal(value)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def format_currency(value: float) -> str:
    """Render MXN the way es-MX does with no fractional digits: ``$2,400``."""
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_round_half_up(value, 0):,.0f}"


def format_percent(value: float) -> str:
    return f"{format_fixed(value * 100, 1)}%"


def format_fixed(value: float, digits: int = 2) -> str:
    if not np.isfinite(value):
        return format_export_value(value)
    sign = "-" if value < 0 else ""
    return f"{sign}{_round_half_up(value, digits):.{digits}f}"


def format_payback(periods: float) -> str:
    if not periods:
        return MISSING_VALUE
    return format_fixed(periods, 2)


def format_break_even(consults: float) -> str:
    if not np.isfinite(consults):
        return MISSING_VALUE
    return format_fixed(consults, 1)


def _shortest_number(number: float) -> str:
    # Shortest round-trip digits laid out like a browser's String(n):
    # plain notation between 1e-6 and 1e21, exponent form outside it.
    _, digits, exponent = Decimal(repr(abs(number))).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    k = len(digits)
    n = exponent + k
    prefix = "-" if number < 0 else ""
    if k <= n <= 21:
        return prefix + text + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + text[:n] + "." + text[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * (-n) + text
    power = n - 1
    mantissa = text if k == 1 else text[0] + "." + text[1:]
    return f"{prefix}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def format_export_value(value: Any) -> str:
    """Render a cell for the delimited export.

    Numbers use the shortest round-trip form without a trailing ``.0``;
    non-finite values are spelled ``Infinity``/``-Infinity``/``NaN``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        return str(value)
    number = float(value)
    if np.isnan(number):
        return "NaN"
    if np.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"
    return _shortest_number(number)


def rows_to_delimited(rows: Iterable[Sequence[Any]], delimiter: str = ",") -> str:
    """Join rows into delimited text. Cells are not quoted or escaped."""
    return "\n".join(
        delimiter.join(format_export_value(cell) for cell in row)
        for row in rows
    )


def serialize_result(record: Any) -> Dict[str, Any]:
    """Dataclass or pydantic record to a JSON-safe dict (non-finite -> None)."""
    if is_dataclass(record):
        data = asdict(record)
    else:
        data = record.model_dump()
    return {key: sanitize_float(value) for key, value in data.items()}
