"""Parametric curves with construction pyramids for PyTorch tensors.

Every curve exposes its point evaluation and the intermediate levels of
the recursive construction that produces it, for step-by-step drawing.

Bezier Curves
-------------
bezier
    Create a Bezier curve from control points (callable).
bezier_evaluate
    Evaluate a Bezier curve with De Casteljau's algorithm.
bezier_levels
    De Casteljau pyramid at one parameter.
bezier_split
    Split a Bezier curve into two.
bezier_trace
    Polyline samples up to a parameter.

Rational Bezier (NURBS) Curves
------------------------------
rational_bezier
    Create a weighted Bezier curve (callable).
rational_bezier_evaluate
    Evaluate by weighted Bernstein summation.
rational_bezier_levels
    Homogeneous De Casteljau pyramid projected to Cartesian space.
rational_bezier_homogeneous_levels
    Homogeneous De Casteljau pyramid.
rational_bezier_trace
    Polyline samples up to a parameter.
rational_bezier_weights
    Build a weight vector; missing weights default to 1.

Uniform Quadratic B-Splines
---------------------------
quadratic_b_spline
    Create a spline from a control polygon (callable).
quadratic_b_spline_segment_count
    Number of quadratic segments.
quadratic_b_spline_locate
    Map a global parameter to (segment, local parameter).
quadratic_b_spline_point_at
    Evaluate one segment.
quadratic_b_spline_construction_at
    Midpoint construction of one point.
quadratic_b_spline_trace
    Polyline samples up to a global parameter.

Data Types
----------
BezierCurve
    Bezier curve.
RationalBezierCurve
    Rational Bezier curve.
QuadraticBSpline
    Uniform quadratic B-spline.
QuadraticBSplineConstruction
    Result of quadratic_b_spline_construction_at.
"""

from .._curve_error import CurveError
from .._degenerate_weight_error import DegenerateWeightError
from .._extrapolation_error import ExtrapolationError
from .._insufficient_points_error import InsufficientPointsError
from ._bezier import (
    BezierCurve,
    bezier,
    bezier_evaluate,
    bezier_levels,
    bezier_split,
    bezier_trace,
)
from ._quadratic_b_spline import (
    QuadraticBSpline,
    QuadraticBSplineConstruction,
    quadratic_b_spline,
    quadratic_b_spline_basis,
    quadratic_b_spline_construction_at,
    quadratic_b_spline_control_polygon,
    quadratic_b_spline_evaluate,
    quadratic_b_spline_locate,
    quadratic_b_spline_point_at,
    quadratic_b_spline_segment_count,
    quadratic_b_spline_trace,
)
from ._rational_bezier import (
    RationalBezierCurve,
    rational_bezier,
    rational_bezier_evaluate,
    rational_bezier_homogeneous_levels,
    rational_bezier_levels,
    rational_bezier_trace,
    rational_bezier_weights,
)

__all__ = [
    "BezierCurve",
    "CurveError",
    "DegenerateWeightError",
    "ExtrapolationError",
    "InsufficientPointsError",
    "QuadraticBSpline",
    "QuadraticBSplineConstruction",
    "RationalBezierCurve",
    "bezier",
    "bezier_evaluate",
    "bezier_levels",
    "bezier_split",
    "bezier_trace",
    "quadratic_b_spline",
    "quadratic_b_spline_basis",
    "quadratic_b_spline_construction_at",
    "quadratic_b_spline_control_polygon",
    "quadratic_b_spline_evaluate",
    "quadratic_b_spline_locate",
    "quadratic_b_spline_point_at",
    "quadratic_b_spline_segment_count",
    "quadratic_b_spline_trace",
    "rational_bezier",
    "rational_bezier_evaluate",
    "rational_bezier_homogeneous_levels",
    "rational_bezier_levels",
    "rational_bezier_trace",
    "rational_bezier_weights",
]
