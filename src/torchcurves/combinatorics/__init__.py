from ._bernstein_polynomial import bernstein_polynomial
from ._binomial_coefficient import binomial_coefficient
from ._factorial import factorial

__all__ = [
    "bernstein_polynomial",
    "binomial_coefficient",
    "factorial",
]
