"""Polyline sampling of a rational Bezier curve."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from .._parameter import as_floating_point, trace_parameters
from ._rational_bezier_evaluate import rational_bezier_evaluate

if TYPE_CHECKING:
    from ._rational_bezier import RationalBezierCurve


def rational_bezier_trace(
    curve: RationalBezierCurve,
    max_t: float = 1.0,
    step: float = 0.01,
) -> Tensor:
    """Sample a rational Bezier curve from t = 0 up to and including max_t.

    Returns a tensor of shape (n_samples, D) whose last row is exactly the
    curve point at max_t.
    """
    control_points = as_floating_point(curve.control_points)
    t = trace_parameters(
        max_t,
        step,
        dtype=control_points.dtype,
        device=control_points.device,
    )
    return rational_bezier_evaluate(curve, t)
