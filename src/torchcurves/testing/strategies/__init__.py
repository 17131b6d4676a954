from ._control_grids import control_grids
from ._control_points import control_points
from ._coordinates import coordinates
from ._parameters import parameters
from ._positive_weights import positive_weights

__all__ = [
    "control_grids",
    "control_points",
    "coordinates",
    "parameters",
    "positive_weights",
]
