"""Numeric primitives: token parsing, rounding, unit conversion."""

from .parser import NumericToken, UnitKind, parse_numeric_token, parse_plain_number
from .rounding import format_number, round_and_format, round_to_precision
from .units import ABSOLUTE_UNITS, PIXELS_PER_UNIT, convert_to_px, is_absolute, to_pixels
from .zeros import strip_leading_zero

__all__ = [
    "ABSOLUTE_UNITS",
    "NumericToken",
    "PIXELS_PER_UNIT",
    "UnitKind",
    "convert_to_px",
    "format_number",
    "is_absolute",
    "parse_numeric_token",
    "parse_plain_number",
    "round_and_format",
    "round_to_precision",
    "strip_leading_zero",
    "to_pixels",
]
