"""Initial control point layouts of the interactive demonstrations."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from ..surface import bezier_surface_grid


def bezier_curve_preset(
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Cubic Bezier control polygon, shape (4, 2).

    Examples
    --------
    >>> bezier_curve_preset()
    tensor([[100., 400.],
            [200., 100.],
            [600., 100.],
            [700., 400.]], dtype=torch.float64)
    """
    if dtype is None:
        dtype = torch.float64
    return torch.tensor(
        [[100.0, 400.0], [200.0, 100.0], [600.0, 100.0], [700.0, 400.0]],
        dtype=dtype,
        device=device,
    )


def rational_bezier_curve_preset(
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """Cubic rational Bezier control polygon (4, 2) and weights (4,)."""
    if dtype is None:
        dtype = torch.float64
    points = torch.tensor(
        [[150.0, 400.0], [300.0, 50.0], [500.0, 80.0], [650.0, 400.0]],
        dtype=dtype,
        device=device,
    )
    weights = torch.tensor([1.0, 8.0, 3.0, 1.0], dtype=dtype, device=device)
    return points, weights


def quadratic_b_spline_preset(
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Visible quadratic B-spline control polygon, shape (5, 2).

    Meant for ``duplicate_endpoints=True``, which yields 7 stored points
    and 5 segments.
    """
    if dtype is None:
        dtype = torch.float64
    return torch.tensor(
        [
            [100.0, 300.0],
            [250.0, 100.0],
            [400.0, 300.0],
            [550.0, 100.0],
            [700.0, 300.0],
        ],
        dtype=dtype,
        device=device,
    )


def bezier_surface_preset(
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Bicubic control grid, shape (4, 4, 3)."""
    return bezier_surface_grid(4, 4, dtype=dtype, device=device)
