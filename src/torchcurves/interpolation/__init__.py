from ._lerp import lerp
from ._midpoint import midpoint

__all__ = [
    "lerp",
    "midpoint",
]
