"""Procedural default control grid."""

import math
from typing import Optional

import torch
from torch import Tensor

MIN_GRID_SIZE = 2
MAX_GRID_SIZE = 8


def bezier_surface_grid(
    rows: int = 4,
    cols: int = 4,
    spacing: float = 100.0,
    amplitude: float = 50.0,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""Generate a deterministic control grid with a sinusoidal bump.

    Control point (i, j) sits at

    .. math::

        x = j s - \frac{(C - 1) s}{2}, \quad
        z = i s - \frac{(R - 1) s}{2}, \quad
        h = A \sin\left(\frac{\pi i}{R - 1}\right)
              \sin\left(\frac{\pi j}{C - 1}\right)

    and is stored y-up as (x, h, z), so the grid lies in the x/z plane
    centered on the origin and bulges upwards in its interior.

    Parameters
    ----------
    rows, cols : int
        Grid size. Each is clamped to [2, 8].
    spacing : float
        Distance s between neighboring control points.
    amplitude : float
        Height A of the bump.
    dtype : torch.dtype, optional
        Default is torch.float64.
    device : torch.device, optional
        Device of the returned tensor.

    Returns
    -------
    Tensor
        Control grid, shape (rows, cols, 3).

    Examples
    --------
    >>> grid = bezier_surface_grid(2, 3)
    >>> grid.shape
    torch.Size([2, 3, 3])
    >>> grid[0, 0]
    tensor([-100.,    0.,  -50.], dtype=torch.float64)
    """
    if dtype is None:
        dtype = torch.float64

    rows = max(MIN_GRID_SIZE, min(MAX_GRID_SIZE, int(rows)))
    cols = max(MIN_GRID_SIZE, min(MAX_GRID_SIZE, int(cols)))

    offset_x = -(cols - 1) * spacing / 2
    offset_z = -(rows - 1) * spacing / 2

    i = torch.arange(rows, dtype=dtype, device=device).view(-1, 1)
    j = torch.arange(cols, dtype=dtype, device=device).view(1, -1)

    x = (offset_x + j * spacing).expand(rows, cols)
    z = (offset_z + i * spacing).expand(rows, cols)
    height = (
        amplitude
        * torch.sin(i / (rows - 1) * math.pi)
        * torch.sin(j / (cols - 1) * math.pi)
    )

    return torch.stack([x, height, z], dim=-1)
