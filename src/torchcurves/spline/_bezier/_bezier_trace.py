"""Polyline sampling of a Bezier curve."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from .._parameter import as_floating_point, trace_parameters
from ._bezier_evaluate import bezier_evaluate

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def bezier_trace(
    curve: BezierCurve,
    max_t: float = 1.0,
    step: float = 0.01,
) -> Tensor:
    """
    Sample a Bezier curve from t = 0 up to and including t = max_t.

    Parameters
    ----------
    curve : BezierCurve
        Bezier curve with control points
    max_t : float
        Last parameter value of the polyline. The curve is traced only
        partially when max_t < 1.
    step : float
        Parameter spacing between samples.

    Returns
    -------
    polyline : Tensor
        Points on the curve, shape (n_samples, *value_shape). The last
        point is exactly the curve point at max_t.
    """
    control_points = as_floating_point(curve.control_points)
    t = trace_parameters(
        max_t,
        step,
        dtype=control_points.dtype,
        device=control_points.device,
    )
    return bezier_evaluate(curve, t)
