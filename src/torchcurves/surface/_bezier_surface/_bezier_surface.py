"""Tensor-product Bezier surface representation and convenience function."""

from typing import Callable, Tuple

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError


@tensorclass
class BezierSurface:
    """Tensor-product Bezier surface over a rectangular control grid.

    Attributes
    ----------
    control_points : Tensor
        Control grid, shape (R, C, *value_shape) with R, C >= 2. Row i is
        control_points[i]; the parameter u runs along each row and v runs
        across the rows.
    extrapolate : str
        How to handle (u, v) outside [0, 1]^2: "error", "clamp",
        "extrapolate"
    """

    control_points: Tensor
    extrapolate: str

    @property
    def degree(self) -> Tuple[int, int]:
        """Bidegree (R - 1, C - 1)."""
        rows, cols = self.control_points.shape[:2]
        return rows - 1, cols - 1


def bezier_surface(
    control_points: torch.Tensor,
    extrapolate: str = "extrapolate",
) -> Callable[[torch.Tensor, torch.Tensor], torch.Tensor]:
    """Create a tensor-product Bezier surface from a control grid.

    This is a convenience function that creates a BezierSurface and
    returns a callable that evaluates it.

    Parameters
    ----------
    control_points : Tensor
        Control grid, shape (R, C, D) with R, C >= 2.
    extrapolate : str, optional
        One of ``"extrapolate"`` (default), ``"clamp"`` or ``"error"``.

    Returns
    -------
    surface : Callable[[Tensor, Tensor], Tensor]
        Function that evaluates the surface at (u, v).

    Raises
    ------
    ValueError
        If control_points is not a 3-dimensional grid.
    InsufficientPointsError
        If the grid has fewer than 2 rows or 2 columns.

    Examples
    --------
    >>> import torch
    >>> grid = torch.tensor(
    ...     [[[0., 0., 0.], [1., 0., 0.]], [[0., 0., 1.], [1., 1., 1.]]]
    ... )
    >>> surface = bezier_surface(grid)
    >>> surface(torch.tensor(0.5), torch.tensor(0.5))
    tensor([0.5000, 0.2500, 0.5000])
    """
    from ._bezier_surface_evaluate import bezier_surface_evaluate

    if control_points.dim() != 3:
        raise ValueError(
            f"Control grid must have shape (R, C, D), got {tuple(control_points.shape)}"
        )

    rows, cols = control_points.shape[:2]
    if rows < 2 or cols < 2:
        raise InsufficientPointsError(
            f"Bezier surface requires at least a 2x2 grid, got {rows}x{cols}"
        )

    surface = BezierSurface(
        control_points=control_points,
        extrapolate=extrapolate,
        batch_size=[],
    )
    return lambda u, v: bezier_surface_evaluate(surface, u, v)
