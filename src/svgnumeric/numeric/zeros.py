"""Drop the redundant ``0`` in front of a decimal point."""
from __future__ import annotations

from .rounding import format_number

__all__ = ["strip_leading_zero"]


def strip_leading_zero(value: float) -> str:
    """Render ``value`` without the leading zero of a pure fraction.

    ``0.5`` becomes ``.5`` and ``-0.5`` becomes ``-.5``; anything whose
    magnitude is zero or at least one is rendered unchanged.
    """

    text = format_number(value)
    if 0 < value < 1 and text.startswith("0"):
        return text[1:]
    if -1 < value < 0 and text.startswith("-0"):
        return "-" + text[2:]
    return text
