from .bit_views import int64_to_float64


def min_value() -> float:
    """Smallest positive subnormal float64 (5e-324), i.e. the bit pattern 0x1."""
    return int64_to_float64(1)
