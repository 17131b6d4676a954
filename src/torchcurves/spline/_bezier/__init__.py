from ._bezier import (
    BezierCurve,
    bezier,
)
from ._bezier_evaluate import bezier_evaluate
from ._bezier_levels import bezier_levels
from ._bezier_split import bezier_split
from ._bezier_trace import bezier_trace

__all__ = [
    "BezierCurve",
    "bezier",
    "bezier_evaluate",
    "bezier_levels",
    "bezier_split",
    "bezier_trace",
]
