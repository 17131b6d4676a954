"""Bernstein basis polynomials."""

from typing import Optional, Union

import torch
from torch import Tensor

from ._binomial_coefficient import binomial_coefficient


def bernstein_polynomial(
    n: int,
    t: Union[float, Tensor],
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""Evaluate all Bernstein basis polynomials of degree n.

    .. math::

        B_{i,n}(t) = \binom{n}{i} (1 - t)^{n - i} t^i, \quad i = 0, \ldots, n

    Parameters
    ----------
    n : int
        Polynomial degree. Must be non-negative.
    t : float or Tensor
        Parameter values, shape (*query_shape).
    dtype : torch.dtype, optional
        Data type used when t is not already a floating point tensor.
        Default is torch.float64.
    device : torch.device, optional
        Device used when t is not already a tensor.

    Returns
    -------
    Tensor
        Basis values, shape (*query_shape, n + 1).

    Examples
    --------
    >>> bernstein_polynomial(2, 0.5)
    tensor([0.2500, 0.5000, 0.2500], dtype=torch.float64)
    """
    if n < 0:
        raise ValueError(f"Degree must be non-negative, got {n}")

    if isinstance(t, Tensor) and t.is_floating_point():
        dtype = t.dtype
        device = t.device
    elif dtype is None:
        dtype = torch.float64

    t = torch.as_tensor(t, dtype=dtype, device=device)

    i = torch.arange(n + 1, dtype=dtype, device=t.device)
    coefficients = torch.tensor(
        [float(binomial_coefficient(n, k)) for k in range(n + 1)],
        dtype=dtype,
        device=t.device,
    )

    t_exp = t.unsqueeze(-1)

    # torch.pow(0, 0) == 1 keeps the end point bases exact
    return coefficients * torch.pow(1 - t_exp, n - i) * torch.pow(t_exp, i)
