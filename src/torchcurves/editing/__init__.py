"""Control polygon editing helpers.

These implement the constraints an interactive editor enforces before
handing control points to the evaluators: weights are clamped positive,
insertion happens at the middle of the polygon, polygons never shrink
below their minimum size, and the duplicated end points of a quadratic
B-spline are never edited on their own.
"""

from ._clamp_weights import MIN_WEIGHT, clamp_weights
from ._insert_control_point import insert_control_point
from ._quadratic_b_spline_edit import (
    quadratic_b_spline_insert,
    quadratic_b_spline_remove,
)
from ._remove_control_point import remove_control_point

__all__ = [
    "MIN_WEIGHT",
    "clamp_weights",
    "insert_control_point",
    "quadratic_b_spline_insert",
    "quadratic_b_spline_remove",
    "remove_control_point",
]
