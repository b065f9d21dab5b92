"""Absolute length units and their CSS pixel equivalents."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .parser import NumericToken, UnitKind
from .rounding import format_number, round_to_precision

__all__ = ["ABSOLUTE_UNITS", "PIXELS_PER_UNIT", "convert_to_px", "is_absolute", "to_pixels"]

# CSS reference pixel: 96px per inch
PIXELS_PER_UNIT: Mapping[UnitKind, float] = MappingProxyType(
    {
        UnitKind.CM: 96 / 2.54,
        UnitKind.MM: 96 / 25.4,
        UnitKind.IN: 96.0,
        UnitKind.PT: 4 / 3,
        UnitKind.PC: 16.0,
    }
)
ABSOLUTE_UNITS = frozenset(PIXELS_PER_UNIT)


def is_absolute(unit: Optional[UnitKind]) -> bool:
    return unit in ABSOLUTE_UNITS


def to_pixels(value: float, unit: UnitKind) -> float:
    """Express ``value`` (in ``unit``) as CSS pixels."""

    try:
        return PIXELS_PER_UNIT[unit] * value
    except KeyError:
        raise ValueError(f"Unit '{unit.value}' has no fixed pixel size") from None


def convert_to_px(token: NumericToken, precision: int) -> Optional[float]:
    """Return the rounded pixel value of ``token`` when it reads shorter.

    The rendered pixel number (without any suffix) must be strictly
    shorter than the token as written, unit included. ``None`` means the
    original unit should be kept.
    """

    unit = token.unit
    if unit is None or not is_absolute(unit):
        return None
    px_value = round_to_precision(to_pixels(token.parsed_value, unit), precision)
    if len(format_number(px_value)) < len(token.text):
        return px_value
    return None
