"""Utility helpers for the equine calculators."""

from .math_utils import guarded_ratio, parse_locale_number, sanitize_float
from .formatters import (
    format_break_even,
    format_currency,
    format_export_value,
    format_fixed,
    format_payback,
    format_percent,
    rows_to_delimited,
    serialize_result,
)

__all__ = [
    "guarded_ratio",
    "parse_locale_number",
    "sanitize_float",
    "format_currency",
    "format_percent",
    "format_fixed",
    "format_payback",
    "format_break_even",
    "format_export_value",
    "rows_to_delimited",
    "serialize_result",
]
