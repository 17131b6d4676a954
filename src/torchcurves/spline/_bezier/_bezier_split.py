"""Bezier curve subdivision (splitting) using De Casteljau's algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._bezier_levels import bezier_levels

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def bezier_split(
    curve: BezierCurve,
    t: Union[float, Tensor] = 0.5,
) -> tuple[BezierCurve, BezierCurve]:
    """
    Split a Bezier curve at parameter t into two curves.

    Uses De Casteljau's algorithm to find the control points of the
    two subcurves. The first curve covers [0, t] and the second covers [t, 1].

    Parameters
    ----------
    curve : BezierCurve
        Input Bezier curve
    t : float or Tensor
        Split parameter in [0, 1]. Default is 0.5 (midpoint split).

    Returns
    -------
    left : BezierCurve
        Left subcurve covering the parameter range [0, t]
    right : BezierCurve
        Right subcurve covering the parameter range [t, 1]

    Notes
    -----
    The construction pyramid contains the control points of both
    subcurves:

    - Left subcurve control points: b_0^(0), b_0^(1), ..., b_0^(n)
      (the leftmost point at each level)
    - Right subcurve control points: b_0^(n), b_1^(n-1), ..., b_n^(0)
      (the rightmost point at each level, from the bottom up)
    """
    from ._bezier import BezierCurve

    pyramid = bezier_levels(curve, t)

    left_control = torch.stack([level[0] for level in pyramid], dim=0)
    right_control = torch.stack(
        [level[-1] for level in reversed(pyramid)], dim=0
    )

    left = BezierCurve(
        control_points=left_control,
        extrapolate=curve.extrapolate,
        batch_size=[],
    )

    right = BezierCurve(
        control_points=right_control,
        extrapolate=curve.extrapolate,
        batch_size=[],
    )

    return left, right
