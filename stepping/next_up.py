import math

from .bit_views import float64_to_int64, int64_to_float64
from .min_value import min_value


def next_up(x: float) -> float:
    """
    Returns the smallest float64 strictly greater than x.

    NaN stays NaN and +inf saturates. Both zeros step to min_value(). Otherwise the
    integer view of x is moved by one: up for positive x, down for negative x. The
    raw int64 of any float grows with its magnitude (for negatives it climbs from
    -2**63 toward -2**52), so decrementing a negative one moves it toward zero.
    next_up(-min_value()) is -0.0 and next_up(max) is +inf.
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x == math.inf:
        return math.inf
    if x == 0.0:
        return min_value()
    bits = float64_to_int64(x)
    return int64_to_float64(bits + 1 if x > 0.0 else bits - 1)
