from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Default decimal context precision
_MIN_PRECISION = 28


def round_half_up(value: float, digits: int = 2) -> float:
    """Round like a calculator: halves go away from zero.

    Works on the shortest decimal representation of ``value`` so that
    ``round_half_up(2.675)`` is ``2.68`` rather than Python's ``2.67``.
    Non-finite values come back unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # enough digits for the integer part plus the kept fraction
        ctx.prec = max(_MIN_PRECISION, exact.adjusted() + digits + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def mean(values) -> float | None:
    """Average of the non-null values, ``None`` when there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)
