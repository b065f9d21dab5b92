"""Recognise numeric attribute tokens with an optional length unit."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["NumericToken", "UnitKind", "parse_numeric_token", "parse_plain_number"]


class UnitKind(str, Enum):
    """Unit suffixes accepted after a numeric attribute value."""

    PX = "px"
    PT = "pt"
    PC = "pc"
    MM = "mm"
    CM = "cm"
    M = "m"
    IN = "in"
    FT = "ft"
    EM = "em"
    EX = "ex"
    PERCENT = "%"


_MANTISSA = r"[-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?"
# two-letter suffixes first so "mm" is never read as "m" + garbage
_UNITS = "|".join(re.escape(unit.value) for unit in sorted(UnitKind, key=lambda u: -len(u.value)))
_TOKEN_PATTERN = re.compile(rf"(?P<mantissa>{_MANTISSA})(?P<unit>{_UNITS})?", re.ASCII)
_PLAIN_PATTERN = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?", re.ASCII)


@dataclass(frozen=True)
class NumericToken:
    """A number as written in an attribute, split from its unit."""

    mantissa_text: str
    parsed_value: float
    unit: Optional[UnitKind] = None

    @property
    def text(self) -> str:
        """The token exactly as it appeared in the attribute."""

        return self.mantissa_text + (self.unit.value if self.unit else "")


def parse_numeric_token(value: str) -> Optional[NumericToken]:
    """Return the :class:`NumericToken` for ``value`` or ``None``.

    Only a whole-string match counts: surrounding whitespace, a second
    number or any unknown suffix makes the value unparseable.
    """

    match = _TOKEN_PATTERN.fullmatch(value)
    if match is None:
        return None
    mantissa = match.group("mantissa")
    parsed = float(mantissa)
    if not math.isfinite(parsed):
        return None
    unit = match.group("unit")
    return NumericToken(
        mantissa_text=mantissa,
        parsed_value=parsed,
        unit=UnitKind(unit) if unit else None,
    )


def parse_plain_number(value: str) -> Optional[float]:
    """Parse a unitless decimal number, returning ``None`` when it is not one."""

    if not _PLAIN_PATTERN.fullmatch(value):
        return None
    parsed = float(value)
    return parsed if math.isfinite(parsed) else None
