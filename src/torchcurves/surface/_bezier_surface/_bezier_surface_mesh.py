"""Triangle mesh and isoparametric curves of a Bezier surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

import torch
from torch import Tensor

from ...spline._parameter import as_floating_point
from ._bezier_surface_evaluate import bezier_surface_evaluate

if TYPE_CHECKING:
    from ._bezier_surface import BezierSurface


class BezierSurfaceMesh(NamedTuple):
    """Triangulated samples of a surface.

    Parameters
    ----------
    vertices : Tensor
        Surface points, shape ((segments + 1) ** 2, D), v-major.
    uvs : Tensor
        (u, v) of each vertex, shape ((segments + 1) ** 2, 2).
    faces : Tensor
        Vertex indices, shape (2 * segments ** 2, 3), int64.
    """

    vertices: Tensor
    uvs: Tensor
    faces: Tensor


def _unit_samples(count: int, like: Tensor) -> Tensor:
    return (
        torch.arange(count + 1, dtype=like.dtype, device=like.device) / count
    )


def bezier_surface_mesh(
    surface: BezierSurface,
    segments: int = 32,
) -> BezierSurfaceMesh:
    """
    Sample a surface on a regular (u, v) grid and triangulate it.

    Vertex ``i * (segments + 1) + j`` is the surface point at
    ``u = j / segments``, ``v = i / segments``. Each grid cell with corners
    a = (i, j), b = (i + 1, j), c = (i + 1, j + 1), d = (i, j + 1) becomes
    the triangles (a, b, d) and (b, c, d).

    Parameters
    ----------
    surface : BezierSurface
        The surface.
    segments : int
        Number of cells along each parameter direction.

    Returns
    -------
    BezierSurfaceMesh
        Vertices, per-vertex (u, v) and triangle indices.
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")

    control_points = as_floating_point(surface.control_points)
    samples = _unit_samples(segments, control_points)
    v, u = torch.meshgrid(samples, samples, indexing="ij")

    points = bezier_surface_evaluate(surface, u, v)
    vertices = points.reshape(-1, *control_points.shape[2:])
    uvs = torch.stack([u, v], dim=-1).reshape(-1, 2)

    stride = segments + 1
    i = torch.arange(segments, device=control_points.device).view(-1, 1)
    j = torch.arange(segments, device=control_points.device).view(1, -1)

    a = (i * stride + j).flatten()
    b = ((i + 1) * stride + j).flatten()
    c = b + 1
    d = a + 1

    faces = torch.stack(
        [torch.stack([a, b, d], dim=-1), torch.stack([b, c, d], dim=-1)],
        dim=1,
    ).reshape(-1, 3)

    return BezierSurfaceMesh(vertices=vertices, uvs=uvs, faces=faces)


def bezier_surface_isocurve(
    surface: BezierSurface,
    parameter: float,
    direction: str = "u",
    steps: int = 100,
) -> Tensor:
    """
    Sample an isoparametric curve of a surface.

    Parameters
    ----------
    surface : BezierSurface
        The surface.
    parameter : float
        Fixed parameter value.
    direction : str
        ``"u"`` holds u fixed and varies v over [0, 1]; ``"v"`` holds v
        fixed and varies u.
    steps : int
        Number of intervals; steps + 1 points are returned.

    Returns
    -------
    Tensor
        Curve points, shape (steps + 1, D).
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    t = _unit_samples(steps, as_floating_point(surface.control_points))
    fixed = torch.full_like(t, float(parameter))

    if direction == "u":
        return bezier_surface_evaluate(surface, fixed, t)
    if direction == "v":
        return bezier_surface_evaluate(surface, t, fixed)
    raise ValueError(f"direction must be 'u' or 'v', got {direction!r}")
