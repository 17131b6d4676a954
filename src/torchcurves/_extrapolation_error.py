from ._curve_error import CurveError


class ExtrapolationError(CurveError):
    """Raised when a parameter is outside [0, 1] with extrapolate='error'."""

    pass
