from torch import Tensor


def midpoint(a: Tensor, b: Tensor) -> Tensor:
    """Midpoint (a + b) / 2 of two points."""
    return (a + b) / 2
