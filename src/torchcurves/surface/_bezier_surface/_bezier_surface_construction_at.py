"""Two-stage De Casteljau construction of a surface point."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, NamedTuple, Union

import torch
from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from ...spline._bezier._bezier_levels import de_casteljau_levels
from ...spline._parameter import (
    apply_extrapolation,
    as_floating_point,
    as_scalar_parameter,
)

if TYPE_CHECKING:
    from ._bezier_surface import BezierSurface


class BezierSurfaceConstruction(NamedTuple):
    """Construction of a surface point at one (u, v).

    Parameters
    ----------
    row_pyramids : list of list of Tensor
        For each of the R rows, the De Casteljau pyramid of that row at u.
    row_results : Tensor
        Final point of each row pyramid, shape (R, *value_shape). These
        are the control points of the v-isoparametric curve through the
        surface point.
    column_pyramid : list of Tensor
        De Casteljau pyramid of row_results at v. Its last level holds the
        surface point.
    """

    row_pyramids: List[List[Tensor]]
    row_results: Tensor
    column_pyramid: List[Tensor]

    @property
    def point(self) -> Tensor:
        """The surface point, shape value_shape."""
        return self.column_pyramid[-1][0]


def bezier_surface_construction_at(
    surface: BezierSurface,
    u: Union[float, Tensor],
    v: Union[float, Tensor],
) -> BezierSurfaceConstruction:
    """
    Row-then-column construction of the surface point at (u, v).

    Parameters
    ----------
    surface : BezierSurface
        Surface with an (R, C, *value_shape) control grid
    u : float or Tensor
        A single parameter value along the rows.
    v : float or Tensor
        A single parameter value across the rows.

    Returns
    -------
    BezierSurfaceConstruction
        Row pyramids, row results and the column pyramid.

    Examples
    --------
    >>> import torch
    >>> surface = BezierSurface(
    ...     control_points=torch.zeros(3, 4, 3),
    ...     extrapolate="extrapolate",
    ...     batch_size=[],
    ... )
    >>> construction = bezier_surface_construction_at(surface, 0.5, 0.5)
    >>> len(construction.row_pyramids), len(construction.row_pyramids[0])
    (3, 4)
    >>> construction.row_results.shape
    torch.Size([3, 3])
    """
    control_points = as_floating_point(surface.control_points)

    if control_points.shape[0] < 1 or control_points.shape[1] < 1:
        raise InsufficientPointsError("Bezier surface has an empty grid")

    u = as_scalar_parameter(u, control_points)
    v = as_scalar_parameter(v, control_points)
    u = apply_extrapolation(u, surface.extrapolate)
    v = apply_extrapolation(v, surface.extrapolate)

    row_pyramids = [de_casteljau_levels(row, u) for row in control_points]
    row_results = torch.stack([pyramid[-1][0] for pyramid in row_pyramids])
    column_pyramid = de_casteljau_levels(row_results, v)

    return BezierSurfaceConstruction(
        row_pyramids=row_pyramids,
        row_results=row_results,
        column_pyramid=column_pyramid,
    )
