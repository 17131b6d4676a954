class CurveError(Exception):
    """Base exception for curve and surface operations."""

    pass
