import torch

from .min_value import min_value


def get_float64_constants() -> tuple[float, float, float, float]:
    """Gets the lowest, max, smallest positive normal and smallest positive subnormal float64."""
    finfo = torch.finfo(torch.float64)
    return float(finfo.min), float(finfo.max), float(finfo.tiny), min_value()
