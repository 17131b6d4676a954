"""Rational Bezier (NURBS) curve representation and convenience function."""

from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ..._insufficient_points_error import InsufficientPointsError
from .._parameter import as_floating_point
from ._rational_bezier_evaluate import rational_bezier_evaluate
from ._rational_bezier_weights import (
    Weights,
    rational_bezier_weights,
    validate_weights,
)


@tensorclass
class RationalBezierCurve:
    """Rational Bezier curve defined by weighted control points.

    Each control point P_i carries a weight w_i. Raising w_i pulls the
    curve towards P_i; with all weights equal the curve is the ordinary
    Bezier curve of the same control points.

    Attributes
    ----------
    control_points : Tensor
        Control points, shape (n+1, D) for degree n
    weights : Tensor
        Weights, shape (n+1,). Expected to be positive.
    extrapolate : str
        How to handle out-of-domain queries: "error", "clamp", "extrapolate"
    """

    control_points: Tensor
    weights: Tensor
    extrapolate: str

    @property
    def degree(self) -> int:
        """Return the degree of the rational Bezier curve."""
        return self.control_points.shape[0] - 1


def rational_bezier(
    control_points: torch.Tensor,
    weights: Weights = None,
    extrapolate: str = "extrapolate",
    validate: bool = False,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a rational Bezier curve from weighted control points.

    Parameters
    ----------
    control_points : Tensor
        Control points, shape (n+1, D).
    weights : Tensor, sequence, mapping or None, optional
        Per-point weights; see :func:`rational_bezier_weights`. Missing
        weights default to 1.
    extrapolate : str, optional
        How to handle out-of-domain queries. One of ``"extrapolate"``
        (default), ``"clamp"`` or ``"error"``.
    validate : bool, optional
        If True, reject non-positive weights up front instead of letting
        them reach the evaluator.

    Returns
    -------
    curve : Callable[[Tensor], Tensor]
        Function that evaluates the curve at given parameter values.

    Raises
    ------
    InsufficientPointsError
        If no control points are given.
    DegenerateWeightError
        If validate is True and a weight is not positive.
    """
    if control_points.dim() != 2:
        raise ValueError(
            f"control_points must have shape (n, D), got {tuple(control_points.shape)}"
        )
    if control_points.shape[0] < 1:
        raise InsufficientPointsError(
            "Rational Bezier curve requires at least 1 control point"
        )

    control_points = as_floating_point(control_points)
    weights = rational_bezier_weights(
        control_points.shape[0],
        weights,
        dtype=control_points.dtype,
        device=control_points.device,
    )
    if validate:
        validate_weights(weights)

    curve = RationalBezierCurve(
        control_points=control_points,
        weights=weights,
        extrapolate=extrapolate,
        batch_size=[],
    )
    return lambda t: rational_bezier_evaluate(curve, t)
