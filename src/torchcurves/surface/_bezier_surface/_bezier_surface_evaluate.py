"""Tensor-product Bezier surface evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from ...interpolation import lerp
from ...spline._parameter import (
    apply_extrapolation,
    as_floating_point,
    as_parameter,
)

if TYPE_CHECKING:
    from ._bezier_surface import BezierSurface


def bezier_surface_evaluate(
    surface: BezierSurface,
    u: Union[float, Tensor],
    v: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a tensor-product Bezier surface at parameter pairs.

    Every row of the control grid is reduced to one point by De
    Casteljau's algorithm at u; the column of row results is then reduced
    at v.

    Parameters
    ----------
    surface : BezierSurface
        Surface with an (R, C, *value_shape) control grid
    u : float or Tensor
        Parameter along the rows, shape (*query_shape).
    v : float or Tensor
        Parameter across the rows, broadcastable with u.

    Returns
    -------
    points : Tensor
        Surface points, shape (*query_shape, *value_shape)

    Raises
    ------
    InsufficientPointsError
        If the grid is empty.
    ExtrapolationError
        If u or v is outside [0, 1] and surface.extrapolate == 'error'

    Notes
    -----
    All rows are reduced in a single vectorized pass. The arithmetic
    applied to each row is the same sequence of :func:`lerp` calls that
    :func:`torchcurves.spline.bezier_evaluate` applies, so the result is
    bit-identical to evaluating the rows one after another.

    The corners are interpolated exactly: (0, 0) gives the first point
    of the first row and (1, 1) the last point of the last row.
    """
    control_points = as_floating_point(surface.control_points)

    n_rows, n_cols = control_points.shape[:2]
    if n_rows < 1 or n_cols < 1:
        raise InsufficientPointsError("Bezier surface has an empty grid")

    u = as_parameter(u, control_points)
    v = as_parameter(v, control_points)
    u, v = torch.broadcast_tensors(u, v)

    is_scalar = u.dim() == 0
    if is_scalar:
        u = u.unsqueeze(0)
        v = v.unsqueeze(0)

    query_shape = u.shape
    u_flat = apply_extrapolation(u.flatten(), surface.extrapolate)
    v_flat = apply_extrapolation(v.flatten(), surface.extrapolate)

    n_points = u_flat.shape[0]
    value_shape = control_points.shape[2:]
    value_ones = [1] * len(value_shape)

    # Row pass, shape (n_points, R, C, *value_shape)
    work = (
        control_points.unsqueeze(0)
        .expand(n_points, *control_points.shape)
        .clone()
    )
    u_exp = u_flat.view(-1, 1, 1, *value_ones)
    for _ in range(1, n_cols):
        work = lerp(work[:, :, :-1], work[:, :, 1:], u_exp)

    # Column pass over the row results, shape (n_points, R, *value_shape)
    column = work[:, :, 0]
    v_exp = v_flat.view(-1, 1, *value_ones)
    for _ in range(1, n_rows):
        column = lerp(column[:, :-1], column[:, 1:], v_exp)

    result = column[:, 0].reshape(*query_shape, *value_shape)

    if is_scalar:
        result = result.squeeze(0)

    return result
