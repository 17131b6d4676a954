from ._quadratic_b_spline import (
    QuadraticBSpline,
    quadratic_b_spline,
    quadratic_b_spline_control_polygon,
    quadratic_b_spline_segment_count,
)
from ._quadratic_b_spline_basis import quadratic_b_spline_basis
from ._quadratic_b_spline_construction_at import (
    QuadraticBSplineConstruction,
    quadratic_b_spline_construction_at,
)
from ._quadratic_b_spline_evaluate import quadratic_b_spline_evaluate
from ._quadratic_b_spline_locate import quadratic_b_spline_locate
from ._quadratic_b_spline_point_at import quadratic_b_spline_point_at
from ._quadratic_b_spline_trace import quadratic_b_spline_trace

__all__ = [
    "QuadraticBSpline",
    "QuadraticBSplineConstruction",
    "quadratic_b_spline",
    "quadratic_b_spline_basis",
    "quadratic_b_spline_construction_at",
    "quadratic_b_spline_control_polygon",
    "quadratic_b_spline_evaluate",
    "quadratic_b_spline_locate",
    "quadratic_b_spline_point_at",
    "quadratic_b_spline_segment_count",
    "quadratic_b_spline_trace",
]
