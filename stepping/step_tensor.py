import math

import torch

from .min_value import min_value


def _check_float64_tensor(tensor):
    if not isinstance(tensor, torch.Tensor):
        raise TypeError(f"Expected a torch.Tensor but got {type(tensor).__name__}")
    if tensor.dtype != torch.float64:
        raise ValueError(
            f"Unsupported dtype for float64 stepping: {tensor.dtype}. Only torch.float64 is supported."
        )


def _step_bits(tensor: torch.Tensor, positive_delta: int) -> torch.Tensor:
    # int64 wraparound at the NaN/inf/-0.0 patterns is masked out by the callers.
    bits = tensor.contiguous().view(torch.int64)
    stepped_bits = torch.where(
        tensor > 0, bits + positive_delta, bits - positive_delta
    )
    return stepped_bits.view(torch.float64)


def next_up_tensor(tensor: torch.Tensor, debug_mode: bool = False) -> torch.Tensor:
    """
    Elementwise next_up for a torch.float64 tensor.

    Same rules as the scalar version: NaN stays NaN, +inf saturates, both zeros
    step to the smallest positive subnormal. Shape, dtype and device are preserved.
    """
    _check_float64_tensor(tensor)
    if tensor.numel() == 0:
        return tensor.clone()

    result = _step_bits(tensor, 1)
    result = torch.where(tensor == 0, torch.full_like(tensor, min_value()), result)
    result = torch.where(tensor == math.inf, tensor, result)
    result = torch.where(torch.isnan(tensor), tensor, result)

    if debug_mode:
        print(
            f"DEBUG next_up_tensor: shape={tuple(tensor.shape)}, zeros={(tensor == 0).sum().item()}, nans={torch.isnan(tensor).sum().item()}, infs={torch.isinf(tensor).sum().item()}"
        )
    return result


def next_down_tensor(tensor: torch.Tensor, debug_mode: bool = False) -> torch.Tensor:
    """Elementwise next_down for a torch.float64 tensor."""
    _check_float64_tensor(tensor)
    if tensor.numel() == 0:
        return tensor.clone()

    result = _step_bits(tensor, -1)
    result = torch.where(tensor == 0, torch.full_like(tensor, -min_value()), result)
    result = torch.where(tensor == -math.inf, tensor, result)
    result = torch.where(torch.isnan(tensor), tensor, result)

    if debug_mode:
        print(
            f"DEBUG next_down_tensor: shape={tuple(tensor.shape)}, zeros={(tensor == 0).sum().item()}, nans={torch.isnan(tensor).sum().item()}, infs={torch.isinf(tensor).sum().item()}"
        )
    return result


def next_after_tensor(
    tensor: torch.Tensor, toward, debug_mode: bool = False
) -> torch.Tensor:
    """
    Elementwise next_after for a torch.float64 tensor.

    toward can be a Python float or a tensor broadcastable to tensor's shape.
    Where an element equals its target (0.0 == -0.0 included) the target is
    returned, keeping its zero sign. NaN on either side gives NaN.
    """
    _check_float64_tensor(tensor)
    toward = torch.as_tensor(toward, dtype=torch.float64, device=tensor.device)
    toward = toward.expand_as(tensor)
    if tensor.numel() == 0:
        return tensor.clone()

    result = torch.where(
        tensor < toward, next_up_tensor(tensor), next_down_tensor(tensor)
    )
    result = torch.where(tensor == toward, toward, result)
    nan_mask = torch.isnan(tensor) | torch.isnan(toward)
    result = torch.where(nan_mask, torch.full_like(tensor, math.nan), result)

    if debug_mode:
        print(
            f"DEBUG next_after_tensor: shape={tuple(tensor.shape)}, up={(tensor < toward).sum().item()}, down={(tensor > toward).sum().item()}, equal={(tensor == toward).sum().item()}, nan={nan_mask.sum().item()}"
        )
    return result
