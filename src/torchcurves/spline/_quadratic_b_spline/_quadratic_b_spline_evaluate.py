from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ._quadratic_b_spline_locate import quadratic_b_spline_locate
from ._quadratic_b_spline_point_at import quadratic_b_spline_point_at

if TYPE_CHECKING:
    from ._quadratic_b_spline import QuadraticBSpline


def quadratic_b_spline_evaluate(
    spline: QuadraticBSpline,
    max_t: float,
) -> Tensor:
    """Evaluate a quadratic B-spline at a global parameter in [0, 1].

    Equivalent to :func:`quadratic_b_spline_point_at` at the segment and
    local parameter returned by :func:`quadratic_b_spline_locate`.
    """
    segment, local_t = quadratic_b_spline_locate(spline, max_t)
    return quadratic_b_spline_point_at(spline, segment, local_t)
