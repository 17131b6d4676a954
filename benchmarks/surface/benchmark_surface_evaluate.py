"""Benchmark tensor-product Bezier surface evaluation.

Compares the vectorized row/column evaluation against evaluating every
row as a separate Bezier curve, across grid sizes and mesh resolutions.
"""

import time

import torch

from torchcurves.spline import BezierCurve, bezier_evaluate
from torchcurves.surface import (
    BezierSurface,
    bezier_surface_evaluate,
    bezier_surface_grid,
)


def _evaluate_sequential(surface: BezierSurface, u, v):
    # (R, Q, D) row results, one column curve per query
    row_results = torch.stack(
        [
            bezier_evaluate(
                BezierCurve(
                    control_points=row,
                    extrapolate="extrapolate",
                    batch_size=[],
                ),
                u,
            )
            for row in surface.control_points
        ]
    )
    return torch.stack(
        [
            bezier_evaluate(
                BezierCurve(
                    control_points=row_results[:, k],
                    extrapolate="extrapolate",
                    batch_size=[],
                ),
                v[k],
            )
            for k in range(v.shape[0])
        ]
    )


def benchmark_surface(
    grid_size: int,
    segments: int,
    n_iterations: int = 20,
    device: str = "cpu",
    method: str = "vectorized",
) -> float:
    """Benchmark surface evaluation on a (segments + 1)^2 sample grid.

    Parameters
    ----------
    grid_size : int
        Rows and columns of the control grid.
    segments : int
        Samples per parameter direction, minus one.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'vectorized' or 'sequential'.

    Returns
    -------
    float
        Average time per evaluation in milliseconds.
    """
    surface = BezierSurface(
        control_points=bezier_surface_grid(
            grid_size, grid_size, device=device
        ),
        extrapolate="extrapolate",
        batch_size=[],
    )
    samples = torch.linspace(
        0, 1, segments + 1, dtype=torch.float64, device=device
    )
    v, u = torch.meshgrid(samples, samples, indexing="ij")
    u = u.flatten()
    v = v.flatten()

    if method == "vectorized":
        evaluate_fn = bezier_surface_evaluate
    elif method == "sequential":
        evaluate_fn = _evaluate_sequential
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(3):
        _ = evaluate_fn(surface, u, v)

    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = evaluate_fn(surface, u, v)

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run surface evaluation benchmarks across grid sizes."""
    grid_sizes = [2, 4, 6, 8]
    resolutions = [8, 16, 32]

    print("Bezier Surface Evaluation Benchmark")
    print("=" * 60)
    print(
        f"{'Grid':>6} {'Segments':>10} {'Vectorized (ms)':>18} "
        f"{'Sequential (ms)':>18}"
    )
    print("-" * 60)

    for grid_size in grid_sizes:
        for segments in resolutions:
            ms_vectorized = benchmark_surface(grid_size, segments)
            ms_sequential = benchmark_surface(
                grid_size, segments, n_iterations=3, method="sequential"
            )
            print(
                f"{grid_size:>6} {segments:>10} "
                f"{ms_vectorized:>18.4f} {ms_sequential:>18.4f}"
            )

    print()
    print("Notes:")
    print("- Vectorized reduces all rows of all queries in one pass")
    print("- Sequential builds one curve per row, then one per query")


if __name__ == "__main__":
    main()
