from typing import Tuple, Union

from torch import Tensor


def quadratic_b_spline_basis(
    t: Union[float, Tensor],
) -> Tuple[Union[float, Tensor], ...]:
    r"""
    Uniform quadratic B-spline basis on one segment.

    .. math::

        b_0(t) = \tfrac{1}{2}(1 - t)^2, \quad
        b_1(t) = \tfrac{1}{2} + t - t^2, \quad
        b_2(t) = \tfrac{1}{2} t^2

    The three functions sum to 1 for every t.

    Parameters
    ----------
    t : float or Tensor
        Local segment parameter in [0, 1].

    Returns
    -------
    tuple
        (b0, b1, b2), each with the shape of t.
    """
    b0 = 0.5 * (1 - t) ** 2
    b1 = 0.5 + t - t * t
    b2 = 0.5 * t * t
    return b0, b1, b2
