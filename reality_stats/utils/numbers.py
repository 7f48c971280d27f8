"""Rounding and percentage formatting for report values."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

Number = Union[int, float]


def _quantize(value: Number, places: int) -> Decimal:
    """Round half up to ``places`` decimals with enough precision for any float."""
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize fails once the result needs more digits than the context holds
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


def round_half_up(value: Number, places: int = 2) -> float:
    """
    Round a value to a fixed number of decimals, ties away from zero.

    The exact binary value of the float is rounded, so 0.125 becomes 0.13
    while 1.005 (stored as 1.00499...) becomes 1.0.
    """
    return float(_quantize(value, places))


def safe_ratio(numerator: Number, denominator: Number) -> float:
    """Divide, returning 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def format_percent(value: Number, places: int = 2) -> str:
    """Render a percentage such as 12.5 as "12.50%"."""
    return f"{_quantize(value, places)}%"
