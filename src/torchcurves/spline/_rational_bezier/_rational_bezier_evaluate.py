"""Rational Bezier evaluation by weighted Bernstein summation."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Union

from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from ...combinatorics import bernstein_polynomial
from .._parameter import apply_extrapolation, as_floating_point, as_parameter
from ._rational_bezier_weights import warn_degenerate_weights

if TYPE_CHECKING:
    from ._rational_bezier import RationalBezierCurve

# Bernstein summation loses precision beyond this degree.
_MAX_STABLE_DEGREE = 20


def rational_bezier_evaluate(
    curve: RationalBezierCurve,
    t: Union[float, Tensor],
) -> Tensor:
    r"""
    Evaluate a rational Bezier curve at parameter values.

    .. math::

        C(t) = \frac{\sum_i B_{i,n}(t) \, w_i \, P_i}{\sum_i B_{i,n}(t) \, w_i}

    Parameters
    ----------
    curve : RationalBezierCurve
        Rational Bezier curve
    t : float or Tensor
        Parameter values, shape (*query_shape).

    Returns
    -------
    points : Tensor
        Evaluated points, shape (*query_shape, D)

    Raises
    ------
    InsufficientPointsError
        If the curve has no control points.
    ExtrapolationError
        If any parameter is outside [0, 1] and curve.extrapolate == 'error'

    Warns
    -----
    RuntimeWarning
        If a weight is not positive. The division is still performed, so
        a vanishing denominator yields NaN or infinite coordinates.

    Notes
    -----
    This is the direct basis form. It agrees with the final level of
    :func:`rational_bezier_levels` (homogeneous De Casteljau) up to
    rounding.
    """
    control_points = as_floating_point(curve.control_points)
    weights = curve.weights.to(control_points.dtype)

    n_control = control_points.shape[0]
    if n_control < 1:
        raise InsufficientPointsError(
            "Rational Bezier curve requires at least 1 control point"
        )

    warn_degenerate_weights(weights)

    degree = n_control - 1
    if degree > _MAX_STABLE_DEGREE:
        warnings.warn(
            f"Bernstein summation at degree {degree} loses precision. "
            f"Consider rational_bezier_levels for high-degree curves.",
            RuntimeWarning,
            stacklevel=2,
        )

    t = as_parameter(t, control_points)

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = apply_extrapolation(t.flatten(), curve.extrapolate)

    # (n_points, n_control)
    basis = bernstein_polynomial(degree, t_flat)
    weighted = basis * weights

    numerator = (weighted.unsqueeze(-1) * control_points).sum(dim=1)
    denominator = weighted.sum(dim=1, keepdim=True)

    result = (numerator / denominator).reshape(
        *query_shape, control_points.shape[-1]
    )

    if is_scalar:
        result = result.squeeze(0)

    return result
