from ._presets import (
    bezier_curve_preset,
    bezier_surface_preset,
    quadratic_b_spline_preset,
    rational_bezier_curve_preset,
)

__all__ = [
    "bezier_curve_preset",
    "bezier_surface_preset",
    "quadratic_b_spline_preset",
    "rational_bezier_curve_preset",
]
