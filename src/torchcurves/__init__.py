"""torchcurves: PyTorch operators for parametric curve and surface construction."""

from . import (
    combinatorics,
    editing,
    interpolation,
    presets,
    spline,
    surface,
)
from ._curve_error import CurveError
from ._degenerate_weight_error import DegenerateWeightError
from ._extrapolation_error import ExtrapolationError
from ._insufficient_points_error import InsufficientPointsError

__all__ = [
    "CurveError",
    "DegenerateWeightError",
    "ExtrapolationError",
    "InsufficientPointsError",
    "combinatorics",
    "editing",
    "interpolation",
    "presets",
    "spline",
    "surface",
]

__version__ = "0.1.0"
