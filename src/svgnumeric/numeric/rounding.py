"""Fixed-precision rounding and shortest round-trip number rendering.

Rounding follows ``Number.prototype.toFixed``: the exact binary value of
the double is rounded half away from zero, so ``1.005`` stays below the
half-way point and rounds down. Rendering follows the ECMAScript
Number-to-String layout on top of Python's shortest ``repr`` digits.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

__all__ = ["format_number", "round_and_format", "round_to_precision"]

_MAX_POSITIONAL_EXPONENT = 21
_MIN_POSITIONAL_EXPONENT = -6
# doubles this large carry no fractional digits
_FIXED_LIMIT = 1e21


def round_to_precision(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` fractional digits."""

    if precision < 0:
        raise ValueError("precision must be non-negative")
    if not math.isfinite(value) or abs(value) >= _FIXED_LIMIT:
        return value
    with localcontext() as ctx:
        ctx.prec = _MAX_POSITIONAL_EXPONENT + precision + 2
        quantum = Decimal(1).scaleb(-precision)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Render ``value`` with the fewest digits that read back as the same double."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # value == 0.digits * 10**n
    n = k + exponent

    if k <= n <= _MAX_POSITIONAL_EXPONENT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_POSITIONAL_EXPONENT:
        body = digits[:n] + "." + digits[n:]
    elif _MIN_POSITIONAL_EXPONENT < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def round_and_format(value: float, precision: int) -> str:
    return format_number(round_to_precision(value, precision))
