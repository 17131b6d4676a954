from ._curve_error import CurveError


class DegenerateWeightError(CurveError):
    """Raised when a rational curve is validated with a non-positive weight."""

    pass
