from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from .._parameter import as_floating_point, as_parameter
from ._quadratic_b_spline import quadratic_b_spline_control_polygon
from ._quadratic_b_spline_basis import quadratic_b_spline_basis

if TYPE_CHECKING:
    from ._quadratic_b_spline import QuadraticBSpline


def segment_control_points(
    spline: QuadraticBSpline,
    segment: int,
) -> Tuple[Tensor, Tensor, Tensor]:
    """The three stored control points shaping one segment."""
    polygon = as_floating_point(quadratic_b_spline_control_polygon(spline))
    n_segments = polygon.shape[0] - 2

    if n_segments < 1:
        raise InsufficientPointsError(
            "Quadratic B-spline requires at least 3 stored control points"
        )
    if not 0 <= segment < n_segments:
        raise IndexError(
            f"Segment index {segment} outside [0, {n_segments})"
        )

    return polygon[segment], polygon[segment + 1], polygon[segment + 2]


def quadratic_b_spline_point_at(
    spline: QuadraticBSpline,
    segment: int,
    local_t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate one segment of a quadratic B-spline by its basis functions.

    Parameters
    ----------
    spline : QuadraticBSpline
        The spline.
    segment : int
        Segment index i; the segment uses stored points i, i+1, i+2.
    local_t : float or Tensor
        Local parameter values, shape (*query_shape).

    Returns
    -------
    Tensor
        Points, shape (*query_shape, *value_shape).

    Raises
    ------
    InsufficientPointsError
        If the spline has no segment.
    IndexError
        If segment is out of range.

    Notes
    -----
    Adjacent segments meet exactly: the end of segment i and the start of
    segment i+1 are both the midpoint of stored points i+1 and i+2.
    """
    p0, p1, p2 = segment_control_points(spline, segment)

    t = as_parameter(local_t, p0)
    t = t.view(*t.shape, *([1] * p0.dim()))

    b0, b1, b2 = quadratic_b_spline_basis(t)
    return b0 * p0 + b1 * p1 + b2 * p2
