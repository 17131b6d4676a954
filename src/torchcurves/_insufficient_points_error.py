from ._curve_error import CurveError


class InsufficientPointsError(CurveError):
    """Raised when a curve, spline or grid has too few control points."""

    pass
