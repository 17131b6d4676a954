"""Parameter handling shared by the curve and surface evaluators."""

import math
from typing import Optional, Union

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError

EXTRAPOLATE_MODES = ("error", "clamp", "extrapolate")


def as_floating_point(points: Tensor) -> Tensor:
    """Promote integer control points to the default floating point dtype.

    Floating point and complex points are returned unchanged, so a
    parameter converted with :func:`as_parameter` never truncates.
    """
    if points.is_floating_point() or points.is_complex():
        return points
    return points.to(torch.get_default_dtype())


def as_parameter(t: Union[float, Tensor], like: Tensor) -> Tensor:
    """Convert t to a tensor with the device of ``like``.

    The dtype follows ``like`` unless ``like`` holds integers, in which
    case the default floating point dtype is used.
    """
    dtype = like.dtype
    if not (like.is_floating_point() or like.is_complex()):
        dtype = torch.get_default_dtype()
    return torch.as_tensor(t, dtype=dtype, device=like.device)


def as_scalar_parameter(t: Union[float, Tensor], like: Tensor) -> Tensor:
    """Convert t to a 0-dimensional tensor matching ``like``.

    Construction pyramids are built for one parameter value at a time.
    """
    t = as_parameter(t, like)
    if t.numel() != 1:
        raise ValueError(
            f"Expected a single parameter value, got shape {tuple(t.shape)}"
        )
    return t.reshape(())


def apply_extrapolation(
    t: Tensor,
    extrapolate: str,
    t_min: float = 0.0,
    t_max: float = 1.0,
) -> Tensor:
    """Apply an extrapolation mode to parameter values.

    Parameters
    ----------
    t : Tensor
        Parameter values.
    extrapolate : str
        One of ``"error"``, ``"clamp"`` or ``"extrapolate"``.
    t_min, t_max : float
        Parameter domain.

    Raises
    ------
    ExtrapolationError
        If any value is outside the domain and extrapolate == "error".
    ValueError
        If extrapolate is not a known mode.
    """
    if extrapolate == "error":
        if torch.any(t < t_min) or torch.any(t > t_max):
            raise ExtrapolationError(
                f"Parameter values outside [{t_min}, {t_max}]. "
                "Use extrapolate='clamp' or 'extrapolate'."
            )
    elif extrapolate == "clamp":
        t = torch.clamp(t, t_min, t_max)
    elif extrapolate != "extrapolate":
        raise ValueError(
            f"extrapolate must be one of {EXTRAPOLATE_MODES}, got {extrapolate!r}"
        )
    return t


def trace_parameters(
    max_t: float,
    step: float = 0.01,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Sample parameters 0, step, 2*step, ... below max_t, then max_t itself.

    max_t is clamped to [0, 1], so a polyline never runs backwards from
    the start of the curve or past its end.

    The exact end value is always the last sample, so a traced polyline
    never stops short of max_t because of step rounding.

    Examples
    --------
    >>> trace_parameters(0.025, step=0.01)
    tensor([0.0000, 0.0100, 0.0200, 0.0250], dtype=torch.float64)
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    if dtype is None:
        dtype = torch.float64

    max_t = min(max(float(max_t), 0.0), 1.0)
    count = max(math.ceil(max_t / step), 1)

    values = [0.0]
    values.extend(k * step for k in range(1, count) if k * step < max_t)
    if max_t != 0.0:
        values.append(max_t)

    return torch.tensor(values, dtype=dtype, device=device)
