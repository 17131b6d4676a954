"""Normalization of rational Bezier weights."""

import warnings
from typing import Mapping, Optional, Sequence, Union

import torch
from torch import Tensor

from ..._degenerate_weight_error import DegenerateWeightError

Weights = Union[None, Tensor, Sequence[float], Mapping[int, float]]


def rational_bezier_weights(
    n_control: int,
    weights: Weights = None,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Build the weight vector of a rational Bezier curve.

    A missing weight means 1. Weights may be given as:

    - ``None``: every weight is 1.
    - a tensor or sequence of length ``n_control``.
    - a mapping from control point index to weight; indices absent from
      the mapping get weight 1.

    Parameters
    ----------
    n_control : int
        Number of control points.
    weights : Tensor, sequence, mapping or None
        Weights as described above.
    dtype : torch.dtype, optional
        Default is torch.float64.
    device : torch.device, optional
        Device of the returned tensor.

    Returns
    -------
    Tensor
        Weights, shape (n_control,).

    Raises
    ------
    ValueError
        If a weight vector has the wrong length.
    IndexError
        If a mapping names an index outside [0, n_control).

    Examples
    --------
    >>> rational_bezier_weights(4, {1: 8.0, 2: 3.0})
    tensor([1., 8., 3., 1.], dtype=torch.float64)
    """
    if dtype is None:
        dtype = torch.float64

    if weights is None:
        return torch.ones(n_control, dtype=dtype, device=device)

    if isinstance(weights, Mapping):
        result = torch.ones(n_control, dtype=dtype, device=device)
        for index, weight in weights.items():
            if not 0 <= index < n_control:
                raise IndexError(
                    f"Weight index {index} outside [0, {n_control})"
                )
            result[index] = float(weight)
        return result

    result = torch.as_tensor(weights, dtype=dtype, device=device)
    if result.shape != (n_control,):
        raise ValueError(
            f"Expected {n_control} weights, got shape {tuple(result.shape)}"
        )
    return result


def validate_weights(weights: Tensor) -> None:
    """Raise DegenerateWeightError unless every weight is positive."""
    if torch.any(~(weights > 0)):
        raise DegenerateWeightError(
            f"Rational Bezier weights must be positive, got {weights.tolist()}"
        )


def warn_degenerate_weights(weights: Tensor) -> None:
    """Warn when a non-positive weight reaches an evaluator.

    The evaluators still perform the arithmetic; clamping belongs to the
    editing layer (see ``torchcurves.editing.clamp_weights``).
    """
    if weights.is_meta or torch.compiler.is_compiling():
        return
    if torch.any(~(weights > 0)):
        warnings.warn(
            f"Non-positive rational Bezier weights {weights.tolist()} may "
            f"produce NaN or infinite points. Clamp weights before evaluating.",
            RuntimeWarning,
            stacklevel=3,
        )
