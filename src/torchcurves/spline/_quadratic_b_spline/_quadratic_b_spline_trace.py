from __future__ import annotations

import math
from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._parameter import as_floating_point, trace_parameters
from ._quadratic_b_spline import quadratic_b_spline_segment_count
from ._quadratic_b_spline_point_at import quadratic_b_spline_point_at

if TYPE_CHECKING:
    from ._quadratic_b_spline import QuadraticBSpline


def quadratic_b_spline_trace(
    spline: QuadraticBSpline,
    max_t: float = 1.0,
    step: float = 0.01,
) -> Tensor:
    """
    Sample a quadratic B-spline up to a global parameter.

    Segments before ``floor(max_t * S)`` are traced completely, the
    current segment up to its local parameter, later segments not at
    all. Every traced segment ends with its exact end point.

    Parameters
    ----------
    spline : QuadraticBSpline
        The spline.
    max_t : float
        Global parameter, clamped to [0, 1].
    step : float
        Local parameter spacing between samples within a segment.

    Returns
    -------
    polyline : Tensor
        Points, shape (n_samples, *value_shape). Empty when the spline has
        no segment.
    """
    control_points = as_floating_point(spline.control_points)
    value_shape = control_points.shape[1:]

    n_segments = quadratic_b_spline_segment_count(spline)
    if n_segments < 1:
        return control_points.new_empty((0, *value_shape))

    max_t = min(max(float(max_t), 0.0), 1.0)
    total = max_t * n_segments
    current = math.floor(total)

    pieces = []
    for segment in range(min(current, n_segments - 1) + 1):
        if segment < current:
            segment_max = 1.0
        else:
            segment_max = total - segment

        t = trace_parameters(
            segment_max,
            step,
            dtype=control_points.dtype,
            device=control_points.device,
        )
        pieces.append(quadratic_b_spline_point_at(spline, segment, t))

    return torch.cat(pieces, dim=0)
