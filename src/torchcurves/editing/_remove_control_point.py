from typing import Optional, Tuple

import torch
from torch import Tensor

from .._insufficient_points_error import InsufficientPointsError


def remove_control_point(
    points: Tensor,
    index: int,
    weights: Optional[Tensor] = None,
    minimum: int = 2,
) -> Tuple[Tensor, Optional[Tensor]]:
    """
    Remove one control point.

    Parameters
    ----------
    points : Tensor
        Control points, shape (N, *value_shape).
    index : int
        Index of the point to remove. Negative indices count from the end.
    weights : Tensor, optional
        Weights, shape (N,), removed alongside the point.
    minimum : int
        Smallest polygon size the removal may leave.

    Returns
    -------
    points : Tensor
        Control points, shape (N - 1, *value_shape).
    weights : Tensor or None
        Weights, shape (N - 1,), or None if no weights were given.

    Raises
    ------
    InsufficientPointsError
        If the polygon would shrink below ``minimum`` points.
    IndexError
        If index is out of range.
    """
    n_points = points.shape[0]

    if not -n_points <= index < n_points:
        raise IndexError(f"Point index {index} outside polygon of {n_points}")
    if n_points - 1 < minimum:
        raise InsufficientPointsError(
            f"Removing a point would leave {n_points - 1} points, "
            f"at least {minimum} are required"
        )

    index = index % n_points
    points = torch.cat([points[:index], points[index + 1 :]], dim=0)

    if weights is not None:
        weights = torch.cat([weights[:index], weights[index + 1 :]], dim=0)

    return points, weights
