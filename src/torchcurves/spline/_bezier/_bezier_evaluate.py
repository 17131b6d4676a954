"""Bezier curve evaluation using De Casteljau's algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from ...interpolation import lerp
from .._parameter import apply_extrapolation, as_floating_point, as_parameter

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def bezier_evaluate(
    curve: BezierCurve,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a Bezier curve at parameter values using De Casteljau's algorithm.

    De Casteljau's algorithm is numerically stable and works for any degree.
    It recursively computes linear interpolations between adjacent control
    points until a single point remains.

    Parameters
    ----------
    curve : BezierCurve
        Bezier curve with control points
    t : float or Tensor
        Parameter values, shape (*query_shape). Values in [0, 1] lie on
        the curve segment; other values extrapolate unless the curve's
        extrapolate mode says otherwise.

    Returns
    -------
    points : Tensor
        Evaluated points, shape (*query_shape, *value_shape)

    Raises
    ------
    InsufficientPointsError
        If the curve has no control points.
    ExtrapolationError
        If any parameter is outside [0, 1] and curve.extrapolate == 'error'

    Notes
    -----
    De Casteljau's algorithm for control points P_0, P_1, ..., P_n:

    1. Set b_i^(0) = P_i for i = 0, ..., n
    2. For r = 1, ..., n:
       b_i^(r) = (1-t) * b_i^(r-1) + t * b_{i+1}^(r-1)  for i = 0, ..., n-r
    3. Result: B(t) = b_0^(n)

    A single control point is returned unchanged for every t. The result
    is exactly P_0 at t = 0 and exactly P_n at t = 1.
    """
    control_points = as_floating_point(curve.control_points)

    n_control = control_points.shape[0]
    if n_control < 1:
        raise InsufficientPointsError(
            "Bezier curve requires at least 1 control point"
        )

    t = as_parameter(t, control_points)

    # Check if t is scalar
    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    # Store original query shape
    query_shape = t.shape
    t_flat = apply_extrapolation(t.flatten(), curve.extrapolate)

    n_points = t_flat.shape[0]
    value_shape = control_points.shape[1:]

    # Working array, shape (n_points, n_control, *value_shape)
    work = (
        control_points.unsqueeze(0)
        .expand(n_points, *control_points.shape)
        .clone()
    )
    t_exp = t_flat.view(-1, *([1] * control_points.dim()))

    for _ in range(1, n_control):
        work = lerp(work[:, :-1], work[:, 1:], t_exp)

    result = work[:, 0].reshape(*query_shape, *value_shape)

    if is_scalar:
        result = result.squeeze(0)

    return result
