"""Numeric helpers shared by the calculation and reporting steps."""

import math
from decimal import Decimal, ROUND_HALF_UP


def round2(value: float) -> float:
    """
    Round to 2 decimal places, halves away from zero.

    The value is quantized from its shortest decimal representation, so
    2.005 rounds to 2.01 and -2.005 to -2.01 (built-in ``round`` would give
    2.0 because of binary representation and banker's rounding).
    """
    if not math.isfinite(value):
        return value
    quantized = Decimal(repr(float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return float(quantized)
