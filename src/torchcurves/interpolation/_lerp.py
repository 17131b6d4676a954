from typing import Union

from torch import Tensor


def lerp(a: Tensor, b: Tensor, t: Union[float, Tensor]) -> Tensor:
    r"""
    Linear interpolation between points.

    .. math::

        \operatorname{lerp}(a, b, t) = (1 - t) a + t b

    Applied componentwise, broadcasting over leading batch dimensions.
    Every evaluator in torchcurves interpolates through this function so
    that all of them share one floating point evaluation order.

    Parameters
    ----------
    a : Tensor
        Start points, shape (..., D).
    b : Tensor
        End points, broadcastable with a.
    t : float or Tensor
        Interpolation parameter, broadcastable with a. Values outside
        [0, 1] extrapolate along the line through a and b.

    Returns
    -------
    Tensor
        Interpolated points.

    Notes
    -----
    ``torch.lerp`` switches between two formulas at t = 0.5. The single
    two-product form used here returns a at t = 0 and b at t = 1 exactly
    and keeps one evaluation order for every t.
    """
    return (1 - t) * a + t * b
