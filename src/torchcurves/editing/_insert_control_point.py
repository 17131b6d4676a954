from typing import Optional, Tuple

import torch
from torch import Tensor

from .._insufficient_points_error import InsufficientPointsError


def insert_control_point(
    points: Tensor,
    weights: Optional[Tensor] = None,
) -> Tuple[Tensor, Optional[Tensor]]:
    """
    Insert a control point in the middle of a control polygon.

    The new point is the midpoint of the points at indices
    ``floor(N / 2) - 1`` and ``floor(N / 2)`` and is inserted between
    them. With a single point, the point is duplicated.

    Parameters
    ----------
    points : Tensor
        Control points, shape (N, *value_shape), N >= 1.
    weights : Tensor, optional
        Weights, shape (N,). The new point gets weight 1.

    Returns
    -------
    points : Tensor
        Control points, shape (N + 1, *value_shape).
    weights : Tensor or None
        Weights, shape (N + 1,), or None if no weights were given.

    Examples
    --------
    >>> points = torch.tensor([[0., 0.], [2., 2.], [4., 0.]])
    >>> insert_control_point(points)[0]
    tensor([[0., 0.],
            [1., 1.],
            [2., 2.],
            [4., 0.]])
    """
    n_points = points.shape[0]
    if n_points < 1:
        raise InsufficientPointsError("Cannot insert into an empty polygon")

    index = n_points // 2
    before = points[max(index - 1, 0)]
    after = points[min(index, n_points - 1)]
    new_point = ((before + after) / 2).unsqueeze(0)

    points = torch.cat([points[:index], new_point, points[index:]], dim=0)

    if weights is not None:
        weights = torch.cat(
            [weights[:index], weights.new_ones(1), weights[index:]], dim=0
        )

    return points, weights
