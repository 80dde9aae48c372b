import math
import sys

import pytest

from stepping.min_value import min_value
from stepping.next_down import next_down
from stepping.next_up import next_up

INF = math.inf
NAN = math.nan
FLOAT_MAX = sys.float_info.max


def assert_same_float(expected, actual):
    if math.isnan(expected):
        assert math.isnan(actual)
    else:
        assert actual == expected, f"expected {expected!r}, got {actual!r}"
        assert math.copysign(1.0, actual) == math.copysign(1.0, expected)


@pytest.mark.parametrize(
    "expected, x",
    [
        pytest.param(NAN, NAN, id="NaN"),
        pytest.param(-INF, -INF, id="negative infinity"),
        pytest.param(FLOAT_MAX, INF, id="positive infinity"),
        pytest.param(-min_value(), 0.0, id="positive zero"),
        pytest.param(-min_value(), -0.0, id="negative zero"),
        pytest.param(0.9999999999999999, 1.0, id="positive value"),
        pytest.param(0.0, min_value(), id="min positive value"),
        pytest.param(-1.0000000000000002, -1.0, id="negative value"),
        pytest.param(-INF, -FLOAT_MAX, id="negative max finite value"),
        pytest.param(
            2.225073858507201e-308, sys.float_info.min, id="smallest normal"
        ),
    ],
)
def test_next_down(expected, x):
    assert_same_float(expected, next_down(x))


@pytest.mark.parametrize(
    "x", [1.0, -1.0, 0.1, -7.25e-200, 1e-310, -1e-310, -123456789.0, -(2.0**1000)]
)
def test_next_down_is_strictly_less_and_round_trips(x):
    down = next_down(x)
    assert down < x
    assert_same_float(x, next_up(down))


def test_next_down_mirrors_next_up():
    for x in [0.5, 3.0, 1e-320, 1e300]:
        assert_same_float(-next_up(x), next_down(-x))
