from __future__ import annotations

from typing import TYPE_CHECKING, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ...interpolation import lerp, midpoint
from .._parameter import as_scalar_parameter
from ._quadratic_b_spline_point_at import segment_control_points

if TYPE_CHECKING:
    from ._quadratic_b_spline import QuadraticBSpline


@tensorclass
class QuadraticBSplineConstruction:
    """Geometric construction of a quadratic B-spline point.

    Attributes
    ----------
    m1 : Tensor
        Midpoint of the first two segment control points.
    m2 : Tensor
        Midpoint of the last two segment control points.
    q0 : Tensor
        Point on the leg m1 -> P_{i+1} of the "hat" m1, P_{i+1}, m2.
    q1 : Tensor
        Point on the leg P_{i+1} -> m2.
    final : Tensor
        Point on the curve.
    """

    m1: Tensor
    m2: Tensor
    q0: Tensor
    q1: Tensor
    final: Tensor


def quadratic_b_spline_construction_at(
    spline: QuadraticBSpline,
    segment: int,
    local_t: Union[float, Tensor],
) -> QuadraticBSplineConstruction:
    """
    Midpoint construction of the point at (segment, local_t).

    With segment control points P_i, P_{i+1}, P_{i+2}:

    1. m1 = mid(P_i, P_{i+1}), m2 = mid(P_{i+1}, P_{i+2})
    2. q0 = lerp(m1, P_{i+1}, t), q1 = lerp(P_{i+1}, m2, t)
    3. final = lerp(q0, q1, t)

    This is De Casteljau's algorithm on the quadratic Bezier form
    (m1, P_{i+1}, m2) of the segment, so ``final`` equals
    :func:`quadratic_b_spline_point_at` up to rounding.

    Parameters
    ----------
    spline : QuadraticBSpline
        The spline.
    segment : int
        Segment index.
    local_t : float or Tensor
        A single local parameter value.

    Returns
    -------
    QuadraticBSplineConstruction
        Construction points, each of shape value_shape.

    Raises
    ------
    InsufficientPointsError
        If the spline has no segment.
    IndexError
        If segment is out of range.
    """
    p0, p1, p2 = segment_control_points(spline, segment)
    t = as_scalar_parameter(local_t, p0)

    m1 = midpoint(p0, p1)
    m2 = midpoint(p1, p2)
    q0 = lerp(m1, p1, t)
    q1 = lerp(p1, m2, t)
    final = lerp(q0, q1, t)

    return QuadraticBSplineConstruction(
        m1=m1,
        m2=m2,
        q0=q0,
        q1=q1,
        final=final,
        batch_size=[],
    )
