import math

from .next_down import next_down
from .next_up import next_up


def next_after(x: float, y: float) -> float:
    """
    Returns the float64 adjacent to x in the direction of y.

    If x == y (0.0 and -0.0 compare equal) y itself is returned, so
    next_after(0.0, -0.0) is -0.0. NaN in either argument gives NaN.
    """
    x = float(x)
    y = float(y)
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == y:
        return y
    return next_up(x) if x < y else next_down(x)
