import sys

import torch

# Bit pattern of 1.0 and -2.0 as signed int64, used to validate the platform layout.
_ONE_BITS = 0x3FF0000000000000
_MINUS_TWO_BITS = -0x4000000000000000


def float64_to_int64(value: float) -> int:
    """Reinterprets the 8 bytes of a binary64 float as a signed 64-bit integer."""
    return torch.tensor(value, dtype=torch.float64).view(torch.int64).item()


def int64_to_float64(bits: int) -> float:
    """Reinterprets a signed 64-bit integer as the binary64 float with the same bytes."""
    return torch.tensor(bits, dtype=torch.int64).view(torch.float64).item()


def check_float64_layout():
    """
    Verifies that Python floats and torch.float64 are IEEE-754 binary64 and that
    torch.int64 is exactly 64 bits wide.

    Raises RuntimeError otherwise. Every stepping function relies on a lossless
    float64 <-> int64 reinterpretation, so this runs once when the package is imported.
    """
    if sys.float_info.mant_dig != 53 or sys.float_info.max_exp != 1024:
        raise RuntimeError(
            f"Python floats are not IEEE-754 binary64 (mant_dig={sys.float_info.mant_dig}, max_exp={sys.float_info.max_exp})"
        )
    if torch.finfo(torch.float64).bits != 64 or torch.iinfo(torch.int64).bits != 64:
        raise RuntimeError(
            f"Unsupported torch layout: float64 has {torch.finfo(torch.float64).bits} bits, int64 has {torch.iinfo(torch.int64).bits} bits"
        )
    if (
        float64_to_int64(1.0) != _ONE_BITS
        or float64_to_int64(-2.0) != _MINUS_TWO_BITS
        or int64_to_float64(_ONE_BITS) != 1.0
    ):
        raise RuntimeError(
            "float64 values do not reinterpret as IEEE-754 binary64 bit patterns on this platform"
        )


check_float64_layout()
