from ._rational_bezier import (
    RationalBezierCurve,
    rational_bezier,
)
from ._rational_bezier_evaluate import rational_bezier_evaluate
from ._rational_bezier_levels import (
    rational_bezier_homogeneous_levels,
    rational_bezier_levels,
)
from ._rational_bezier_trace import rational_bezier_trace
from ._rational_bezier_weights import rational_bezier_weights

__all__ = [
    "RationalBezierCurve",
    "rational_bezier",
    "rational_bezier_evaluate",
    "rational_bezier_homogeneous_levels",
    "rational_bezier_levels",
    "rational_bezier_trace",
    "rational_bezier_weights",
]
