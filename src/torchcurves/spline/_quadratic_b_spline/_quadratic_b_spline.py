"""Uniform quadratic B-spline representation and convenience function."""

from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class QuadraticBSpline:
    """Uniform quadratic B-spline over a control polygon.

    The curve is a chain of quadratic segments; segment i is shaped by
    three consecutive points of the stored control polygon.

    Attributes
    ----------
    control_points : Tensor
        Visible control polygon, shape (K, *value_shape).
    duplicate_endpoints : bool
        If True, the stored polygon repeats the first and last visible
        points, ``[P_0, P_0, P_1, ..., P_{K-1}, P_{K-1}]``, so that the
        curve starts at P_0 and ends at P_{K-1}. The repeated entries
        are derived from control_points and cannot be edited on their
        own.

    Notes
    -----
    With M stored points the spline has M - 2 segments, so K visible
    points give K segments when duplicate_endpoints is True and K - 2
    otherwise.
    """

    control_points: Tensor
    duplicate_endpoints: bool


def quadratic_b_spline_control_polygon(spline: QuadraticBSpline) -> Tensor:
    """Return the stored control polygon, shape (M, *value_shape).

    Examples
    --------
    >>> spline = QuadraticBSpline(
    ...     control_points=torch.tensor([[0.], [1.], [2.]]),
    ...     duplicate_endpoints=True,
    ...     batch_size=[],
    ... )
    >>> quadratic_b_spline_control_polygon(spline).flatten()
    tensor([0., 0., 1., 2., 2.])
    """
    control_points = spline.control_points
    if not spline.duplicate_endpoints or control_points.shape[0] == 0:
        return control_points
    return torch.cat(
        [control_points[:1], control_points, control_points[-1:]], dim=0
    )


def quadratic_b_spline_segment_count(spline: QuadraticBSpline) -> int:
    """Number of quadratic segments, M - 2 for M stored points.

    Zero or negative when the polygon is too short to carry a curve.
    """
    return quadratic_b_spline_control_polygon(spline).shape[0] - 2


def quadratic_b_spline(
    control_points: torch.Tensor,
    duplicate_endpoints: bool = True,
) -> Callable[[float], torch.Tensor]:
    """Create a uniform quadratic B-spline from a control polygon.

    This is a convenience function that creates a QuadraticBSpline and
    returns a callable evaluating it at a global parameter in [0, 1]
    spanning all segments.

    Parameters
    ----------
    control_points : Tensor
        Visible control polygon, shape (K, *value_shape).
    duplicate_endpoints : bool, optional
        Repeat the first and last points so the curve is anchored at
        them. Default is True.

    Returns
    -------
    spline : Callable[[float], Tensor]
        Function mapping a global parameter to a point on the curve.

    Examples
    --------
    >>> import torch
    >>> points = torch.tensor([[0., 0.], [1., 1.], [2., 0.]])
    >>> curve = quadratic_b_spline(points)
    >>> curve(0.0)
    tensor([0., 0.])
    >>> curve(1.0)
    tensor([2., 0.])
    """
    from ._quadratic_b_spline_evaluate import quadratic_b_spline_evaluate

    spline = QuadraticBSpline(
        control_points=control_points,
        duplicate_endpoints=duplicate_endpoints,
        batch_size=[],
    )
    return lambda max_t: quadratic_b_spline_evaluate(spline, max_t)
