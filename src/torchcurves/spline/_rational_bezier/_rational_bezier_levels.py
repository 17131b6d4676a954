"""Homogeneous De Casteljau construction of a rational Bezier curve."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Union

import torch
from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from .._bezier._bezier_levels import de_casteljau_levels
from .._parameter import (
    apply_extrapolation,
    as_floating_point,
    as_scalar_parameter,
)
from ._rational_bezier_weights import warn_degenerate_weights

if TYPE_CHECKING:
    from ._rational_bezier import RationalBezierCurve


def rational_bezier_homogeneous_levels(
    curve: RationalBezierCurve,
    t: Union[float, Tensor],
) -> List[Tensor]:
    """
    De Casteljau pyramid of a rational curve in homogeneous coordinates.

    Each control point (x, y, ...) with weight w is lifted to
    (x*w, y*w, ..., w) and all channels, including the weight channel,
    are interpolated together.

    Parameters
    ----------
    curve : RationalBezierCurve
        Rational Bezier curve with N control points of dimension D
    t : float or Tensor
        A single parameter value.

    Returns
    -------
    levels : list of Tensor
        N tensors. Level k has shape (N - k, D + 1); the last column is
        the interpolated weight.
    """
    control_points = as_floating_point(curve.control_points)
    weights = curve.weights.to(control_points.dtype)

    if control_points.shape[0] < 1:
        raise InsufficientPointsError(
            "Rational Bezier curve requires at least 1 control point"
        )

    warn_degenerate_weights(weights)

    t = as_scalar_parameter(t, control_points)
    t = apply_extrapolation(t, curve.extrapolate)

    homogeneous = torch.cat(
        [control_points * weights.unsqueeze(-1), weights.unsqueeze(-1)],
        dim=-1,
    )
    return de_casteljau_levels(homogeneous, t)


def rational_bezier_levels(
    curve: RationalBezierCurve,
    t: Union[float, Tensor],
) -> List[Tensor]:
    """
    Construction pyramid of a rational Bezier curve in Cartesian space.

    Intermediate rational points only make sense in homogeneous form, so
    the pyramid is computed by :func:`rational_bezier_homogeneous_levels`
    and every level after the first is projected back by dividing by its
    weight channel.

    Parameters
    ----------
    curve : RationalBezierCurve
        Rational Bezier curve with N control points of dimension D
    t : float or Tensor
        A single parameter value.

    Returns
    -------
    levels : list of Tensor
        N tensors. Level k has shape (N - k, D); level 0 equals the control
        points and the last level holds the point on the curve.

    Warns
    -----
    RuntimeWarning
        If a weight is not positive.
    """
    homogeneous_levels = rational_bezier_homogeneous_levels(curve, t)

    levels = [as_floating_point(curve.control_points).clone()]
    for level in homogeneous_levels[1:]:
        levels.append(level[:, :-1] / level[:, -1:])
    return levels
