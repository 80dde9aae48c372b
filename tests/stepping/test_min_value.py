import math

from stepping.min_value import min_value


def test_min_value():
    assert min_value() == 5.0e-324
    assert math.copysign(1.0, min_value()) == 1.0


def test_min_value_is_smallest_subnormal():
    assert min_value() == 2.0**-1074
    assert min_value() / 2 == 0.0
    assert -min_value() == -5.0e-324
    assert min_value().hex() == "0x0.0000000000001p-1022"
