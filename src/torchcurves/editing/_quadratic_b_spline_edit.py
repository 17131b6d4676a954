"""Editing of a quadratic B-spline through its visible control polygon."""

from ..spline import QuadraticBSpline
from ._insert_control_point import insert_control_point
from ._remove_control_point import remove_control_point


def quadratic_b_spline_insert(spline: QuadraticBSpline) -> QuadraticBSpline:
    """Insert a control point in the middle of the visible polygon.

    Returns a new spline. Duplicated end points follow the visible
    polygon automatically.
    """
    points, _ = insert_control_point(spline.control_points)
    return QuadraticBSpline(
        control_points=points,
        duplicate_endpoints=spline.duplicate_endpoints,
        batch_size=[],
    )


def quadratic_b_spline_remove(
    spline: QuadraticBSpline,
    index: int,
) -> QuadraticBSpline:
    """Remove a point of the visible polygon.

    With duplicated end points the first and last points are fixed and
    cannot be removed, and two visible points (two segments) must remain.
    Without duplication three points (one segment) must remain.

    Raises
    ------
    IndexError
        If index is out of range.
    ValueError
        If index names a fixed end point.
    InsufficientPointsError
        If the removal would leave too few points.
    """
    n_points = spline.control_points.shape[0]

    if not -n_points <= index < n_points:
        raise IndexError(f"Point index {index} outside polygon of {n_points}")

    if spline.duplicate_endpoints:
        if index % n_points in (0, n_points - 1):
            raise ValueError(
                f"Point {index} is a fixed end point of the spline"
            )
        minimum = 2
    else:
        minimum = 3

    points, _ = remove_control_point(
        spline.control_points, index, minimum=minimum
    )
    return QuadraticBSpline(
        control_points=points,
        duplicate_endpoints=spline.duplicate_endpoints,
        batch_size=[],
    )
