"""Hypothesis strategies for testing curve and surface operators.

Example usage:

    import hypothesis

    from torchcurves.spline import BezierCurve, bezier_evaluate
    from torchcurves.testing import control_points, parameters

    @hypothesis.given(points=control_points(), t=parameters())
    def test_endpoint(points, t):
        ...
"""

from .strategies import (
    control_grids,
    control_points,
    coordinates,
    parameters,
    positive_weights,
)

__all__ = [
    "control_grids",
    "control_points",
    "coordinates",
    "parameters",
    "positive_weights",
]
