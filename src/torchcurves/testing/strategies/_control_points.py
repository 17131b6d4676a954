import hypothesis.strategies
import torch

from ._coordinates import coordinates


@hypothesis.strategies.composite
def control_points(
    draw: hypothesis.strategies.DrawFn,
    min_points: int = 2,
    max_points: int = 8,
    dim: int = 2,
    min_value: float = -1000.0,
    max_value: float = 1000.0,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """Strategy for control polygons of shape (N, dim)."""
    n_points = draw(
        hypothesis.strategies.integers(
            min_value=min_points, max_value=max_points
        )
    )
    values = draw(
        hypothesis.strategies.lists(
            coordinates(min_value, max_value),
            min_size=n_points * dim,
            max_size=n_points * dim,
        )
    )
    return torch.tensor(values, dtype=dtype).reshape(n_points, dim)
