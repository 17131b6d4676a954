from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

from ..._insufficient_points_error import InsufficientPointsError
from ._quadratic_b_spline import quadratic_b_spline_segment_count

if TYPE_CHECKING:
    from ._quadratic_b_spline import QuadraticBSpline


def quadratic_b_spline_locate(
    spline: QuadraticBSpline,
    max_t: float,
) -> Tuple[int, float]:
    """
    Map a global parameter onto a segment index and a local parameter.

    The global parameter covers the whole chain of segments: with S
    segments, ``total = max_t * S``, the segment is ``floor(total)`` and
    the local parameter is the fractional remainder. At max_t = 1 the
    last segment is returned with local parameter 1.

    Parameters
    ----------
    spline : QuadraticBSpline
        The spline.
    max_t : float
        Global parameter. Clamped to [0, 1].

    Returns
    -------
    segment : int
        Segment index in [0, S).
    local_t : float
        Local parameter in [0, 1].

    Raises
    ------
    InsufficientPointsError
        If the spline has no segment.

    Examples
    --------
    >>> import torch
    >>> spline = QuadraticBSpline(
    ...     control_points=torch.zeros(5, 2),
    ...     duplicate_endpoints=True,
    ...     batch_size=[],
    ... )
    >>> quadratic_b_spline_locate(spline, 0.5)
    (2, 0.5)
    >>> quadratic_b_spline_locate(spline, 1.0)
    (4, 1.0)
    """
    n_segments = quadratic_b_spline_segment_count(spline)
    if n_segments < 1:
        raise InsufficientPointsError(
            "Quadratic B-spline requires at least 3 stored control points"
        )

    max_t = min(max(float(max_t), 0.0), 1.0)

    total = max_t * n_segments
    segment = math.floor(total)
    local_t = total - segment

    if segment >= n_segments:
        segment = n_segments - 1
        local_t = 1.0

    return segment, local_t
