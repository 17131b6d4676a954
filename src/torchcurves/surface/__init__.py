"""Tensor-product Bezier surfaces.

Surfaces
--------
bezier_surface
    Create a surface from a control grid (callable).
bezier_surface_evaluate
    Evaluate a surface at (u, v) pairs.
bezier_surface_construction_at
    Row and column De Casteljau pyramids of one surface point.
bezier_surface_grid
    Deterministic default control grid.
bezier_surface_mesh
    Triangulated samples of a surface.
bezier_surface_isocurve
    Isoparametric curve of a surface.

Data Types
----------
BezierSurface
    Tensor-product Bezier surface.
BezierSurfaceConstruction
    Result of bezier_surface_construction_at.
BezierSurfaceMesh
    Result of bezier_surface_mesh.
"""

from ._bezier_surface import (
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    BezierSurface,
    BezierSurfaceConstruction,
    BezierSurfaceMesh,
    bezier_surface,
    bezier_surface_construction_at,
    bezier_surface_evaluate,
    bezier_surface_grid,
    bezier_surface_isocurve,
    bezier_surface_mesh,
)

__all__ = [
    "MAX_GRID_SIZE",
    "MIN_GRID_SIZE",
    "BezierSurface",
    "BezierSurfaceConstruction",
    "BezierSurfaceMesh",
    "bezier_surface",
    "bezier_surface_construction_at",
    "bezier_surface_evaluate",
    "bezier_surface_grid",
    "bezier_surface_isocurve",
    "bezier_surface_mesh",
]
