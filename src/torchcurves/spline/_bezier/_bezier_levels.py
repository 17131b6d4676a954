"""De Casteljau construction pyramid of a Bezier curve."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Union

from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from ...interpolation import lerp
from .._parameter import (
    apply_extrapolation,
    as_floating_point,
    as_scalar_parameter,
)

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def de_casteljau_levels(points: Tensor, t: Tensor) -> List[Tensor]:
    """Pyramid of ``points`` at a 0-dimensional parameter ``t``.

    Level 0 is a copy of ``points``; each following level holds one point
    less, down to the single point on the curve.
    """
    levels = [points.clone()]
    current = points
    while current.shape[0] > 1:
        current = lerp(current[:-1], current[1:], t)
        levels.append(current)
    return levels


def bezier_levels(
    curve: BezierCurve,
    t: Union[float, Tensor],
) -> List[Tensor]:
    """
    All intermediate levels of De Casteljau's algorithm at one parameter.

    Used to draw the step-by-step construction of a point on the curve:
    one color per level, lines between points of the same level.

    Parameters
    ----------
    curve : BezierCurve
        Bezier curve with N control points
    t : float or Tensor
        A single parameter value.

    Returns
    -------
    levels : list of Tensor
        N tensors. Level k has shape (N - k, *value_shape); level 0 equals
        the control points and the last level holds the point on the curve.

    Raises
    ------
    InsufficientPointsError
        If the curve has no control points.
    ValueError
        If t holds more than one value.

    Examples
    --------
    >>> import torch
    >>> curve = BezierCurve(
    ...     control_points=torch.tensor([[0., 0.], [1., 2.], [2., 0.]]),
    ...     extrapolate="extrapolate",
    ...     batch_size=[],
    ... )
    >>> [level.shape[0] for level in bezier_levels(curve, 0.5)]
    [3, 2, 1]
    """
    control_points = as_floating_point(curve.control_points)

    if control_points.shape[0] < 1:
        raise InsufficientPointsError(
            "Bezier curve requires at least 1 control point"
        )

    t = as_scalar_parameter(t, control_points)
    t = apply_extrapolation(t, curve.extrapolate)

    return de_casteljau_levels(control_points, t)
