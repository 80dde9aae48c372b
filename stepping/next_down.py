import math

from .bit_views import float64_to_int64, int64_to_float64
from .min_value import min_value


def next_down(x: float) -> float:
    """Returns the largest float64 strictly less than x. Mirror image of next_up."""
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x == -math.inf:
        return -math.inf
    if x == 0.0:
        return -min_value()
    bits = float64_to_int64(x)
    return int64_to_float64(bits - 1 if x > 0.0 else bits + 1)
