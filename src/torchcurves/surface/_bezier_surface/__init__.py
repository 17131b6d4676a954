from ._bezier_surface import (
    BezierSurface,
    bezier_surface,
)
from ._bezier_surface_construction_at import (
    BezierSurfaceConstruction,
    bezier_surface_construction_at,
)
from ._bezier_surface_evaluate import bezier_surface_evaluate
from ._bezier_surface_grid import (
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    bezier_surface_grid,
)
from ._bezier_surface_mesh import (
    BezierSurfaceMesh,
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
