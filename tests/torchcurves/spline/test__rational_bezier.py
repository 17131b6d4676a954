"""Tests for rational Bezier curve functions."""

import hypothesis
import hypothesis.strategies
import pytest
import torch

from torchcurves.presets import rational_bezier_curve_preset
from torchcurves.spline import (
    BezierCurve,
    DegenerateWeightError,
    InsufficientPointsError,
    RationalBezierCurve,
    bezier_evaluate,
    rational_bezier,
    rational_bezier_evaluate,
    rational_bezier_homogeneous_levels,
    rational_bezier_levels,
    rational_bezier_trace,
    rational_bezier_weights,
)
from torchcurves.testing import control_points, parameters, positive_weights


def _curve(points, weights=None, extrapolate="extrapolate"):
    return RationalBezierCurve(
        control_points=points,
        weights=rational_bezier_weights(
            points.shape[0], weights, dtype=points.dtype
        ),
        extrapolate=extrapolate,
        batch_size=[],
    )


class TestRationalBezierWeights:
    """Tests for rational_bezier_weights function."""

    def test_none_is_unit(self):
        weights = rational_bezier_weights(3)
        assert torch.equal(weights, torch.ones(3, dtype=torch.float64))

    def test_mapping_defaults_to_one(self):
        """Indices missing from a mapping get weight 1."""
        weights = rational_bezier_weights(4, {1: 8.0, 2: 3.0})
        expected = torch.tensor([1.0, 8.0, 3.0, 1.0], dtype=torch.float64)
        assert torch.equal(weights, expected)

    def test_sequence(self):
        weights = rational_bezier_weights(2, [0.5, 2.0], dtype=torch.float32)
        assert weights.dtype == torch.float32
        assert weights.tolist() == [0.5, 2.0]

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            rational_bezier_weights(3, [1.0, 2.0])

    def test_mapping_index_out_of_range(self):
        with pytest.raises(IndexError):
            rational_bezier_weights(3, {3: 2.0})


class TestRationalBezier:
    """Tests for the rational_bezier convenience function."""

    def test_mapping_weights(self):
        """A sparse mapping equals the full weight vector."""
        points, weights = rational_bezier_curve_preset()
        sparse = rational_bezier(points, {1: 8.0, 2: 3.0})
        full = rational_bezier(points, weights)
        t = torch.linspace(0, 1, 11, dtype=torch.float64)
        assert torch.equal(sparse(t), full(t))

    def test_validate_rejects_zero_weight(self):
        points = torch.tensor([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
        with pytest.raises(DegenerateWeightError):
            rational_bezier(points, [1.0, 0.0, 1.0], validate=True)

    def test_validate_rejects_negative_weight(self):
        points = torch.tensor([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
        with pytest.raises(DegenerateWeightError):
            rational_bezier(points, {2: -1.0}, validate=True)

    def test_validate_accepts_positive_weights(self):
        points, weights = rational_bezier_curve_preset()
        curve = rational_bezier(points, weights, validate=True)
        assert curve(0.5).shape == (2,)

    def test_integer_control_points(self):
        """Integer coordinates keep fractional parameters and weights."""
        points = torch.tensor([[150, 400], [300, 50], [500, 80], [650, 400]])
        curve = rational_bezier(points, {1: 8.0, 2: 3.0})
        expected, weights = rational_bezier_curve_preset()
        reference = rational_bezier(expected, weights)
        t = torch.linspace(0, 1, 11, dtype=torch.float64)
        result = curve(t)
        assert result.is_floating_point()
        assert torch.allclose(result.double(), reference(t), rtol=1e-6)

    def test_requires_points(self):
        with pytest.raises(InsufficientPointsError):
            rational_bezier(torch.zeros(0, 2))

    def test_requires_point_matrix(self):
        with pytest.raises(ValueError):
            rational_bezier(torch.zeros(3, 2, 2))


class TestRationalBezierEvaluate:
    """Tests for rational_bezier_evaluate function."""

    def test_unit_weights_match_bezier(self):
        """With all weights 1 the curve is the ordinary Bezier curve."""
        points, _ = rational_bezier_curve_preset()
        t = torch.linspace(0, 1, 21, dtype=torch.float64)

        rational = rational_bezier_evaluate(_curve(points), t)
        polynomial = bezier_evaluate(
            BezierCurve(
                control_points=points, extrapolate="extrapolate", batch_size=[]
            ),
            t,
        )
        assert torch.allclose(rational, polynomial, rtol=1e-12, atol=1e-9)

    def test_equal_weights_match_bezier(self):
        """Scaling every weight by the same factor changes nothing."""
        points, _ = rational_bezier_curve_preset()
        t = torch.linspace(0, 1, 21, dtype=torch.float64)
        scaled = rational_bezier_evaluate(_curve(points, [5.0] * 4), t)
        unit = rational_bezier_evaluate(_curve(points), t)
        assert torch.allclose(scaled, unit, rtol=1e-12, atol=1e-9)

    def test_endpoints(self):
        """Unit end weights reproduce the end points exactly."""
        points, weights = rational_bezier_curve_preset()
        curve = _curve(points, weights)
        assert torch.equal(rational_bezier_evaluate(curve, 0.0), points[0])
        assert torch.equal(rational_bezier_evaluate(curve, 1.0), points[-1])

    def test_weight_pulls_curve(self):
        """Raising a weight moves the curve towards its point."""
        points = torch.tensor(
            [[0.0, 0.0], [1.0, 2.0], [2.0, 0.0]], dtype=torch.float64
        )
        low = rational_bezier_evaluate(_curve(points, [1.0, 1.0, 1.0]), 0.5)
        high = rational_bezier_evaluate(_curve(points, [1.0, 10.0, 1.0]), 0.5)
        assert high[1] > low[1]
        assert torch.allclose(high[0], low[0])

    def test_quarter_circle(self):
        """Weights (1, 1/sqrt(2), 1) give an exact circular arc."""
        points = torch.tensor(
            [[1.0, 0.0], [1.0, 1.0], [0.0, 1.0]], dtype=torch.float64
        )
        curve = _curve(points, [1.0, 2.0**-0.5, 1.0])
        t = torch.linspace(0, 1, 17, dtype=torch.float64)
        radius = rational_bezier_evaluate(curve, t).norm(dim=-1)
        assert torch.allclose(radius, torch.ones_like(radius))

    def test_batch_query(self):
        points, weights = rational_bezier_curve_preset()
        t = torch.rand(3, 4, dtype=torch.float64)
        assert rational_bezier_evaluate(_curve(points, weights), t).shape == (
            3,
            4,
            2,
        )

    def test_single_point(self):
        points = torch.tensor([[3.0, 4.0]], dtype=torch.float64)
        result = rational_bezier_evaluate(_curve(points, [2.0]), 0.7)
        assert torch.allclose(result, points[0])

    def test_non_positive_weight_warns(self):
        """Degenerate weights are evaluated with a RuntimeWarning."""
        points = torch.tensor(
            [[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]], dtype=torch.float64
        )
        curve = _curve(points, [1.0, 0.0, 1.0])
        with pytest.warns(RuntimeWarning):
            result = rational_bezier_evaluate(curve, 0.5)
        assert torch.allclose(
            result, torch.tensor([1.0, 0.0], dtype=torch.float64)
        )

    def test_vanishing_denominator(self):
        """A zero denominator is not hidden from the caller."""
        points = torch.tensor([[0.0, 0.0], [2.0, 0.0]], dtype=torch.float64)
        curve = _curve(points, [1.0, -1.0])
        with pytest.warns(RuntimeWarning):
            result = rational_bezier_evaluate(curve, 0.5)
        assert not torch.all(torch.isfinite(result))

    def test_high_degree_warns(self):
        points = torch.rand(23, 2, dtype=torch.float64)
        with pytest.warns(RuntimeWarning, match="degree 22"):
            rational_bezier_evaluate(_curve(points), 0.5)

    def test_empty_raises(self):
        with pytest.raises(InsufficientPointsError):
            rational_bezier_evaluate(_curve(torch.zeros(0, 2)), 0.5)


class TestRationalBezierLevels:
    """Tests for the homogeneous De Casteljau construction."""

    def test_homogeneous_shapes(self):
        """Level k has N - k points with one extra weight channel."""
        points, weights = rational_bezier_curve_preset()
        levels = rational_bezier_homogeneous_levels(_curve(points, weights), 0.4)
        assert [tuple(level.shape) for level in levels] == [
            (4, 3),
            (3, 3),
            (2, 3),
            (1, 3),
        ]

    def test_homogeneous_lift(self):
        """Level 0 holds weighted points and the weights."""
        points, weights = rational_bezier_curve_preset()
        level = rational_bezier_homogeneous_levels(
            _curve(points, weights), 0.4
        )[0]
        assert torch.equal(level[:, :2], points * weights.unsqueeze(-1))
        assert torch.equal(level[:, 2], weights)

    def test_cartesian_levels(self):
        """Level 0 is the control polygon, later levels are projected."""
        points, weights = rational_bezier_curve_preset()
        levels = rational_bezier_levels(_curve(points, weights), 0.4)
        assert [tuple(level.shape) for level in levels] == [
            (4, 2),
            (3, 2),
            (2, 2),
            (1, 2),
        ]
        assert torch.equal(levels[0], points)

    def test_unit_weight_levels_match_bezier_levels(self):
        """Intermediate points coincide with the polynomial pyramid."""
        from torchcurves.spline import bezier_levels

        points, _ = rational_bezier_curve_preset()
        rational = rational_bezier_levels(_curve(points), 0.3)
        polynomial = bezier_levels(
            BezierCurve(
                control_points=points, extrapolate="extrapolate", batch_size=[]
            ),
            0.3,
        )
        for a, b in zip(rational, polynomial):
            assert torch.allclose(a, b)

    def test_preset_strategies_agree(self):
        """Bernstein summation and homogeneous De Casteljau agree."""
        points, weights = rational_bezier_curve_preset()
        curve = _curve(points, weights)
        for t in torch.linspace(0, 1, 11, dtype=torch.float64):
            direct = rational_bezier_evaluate(curve, t)
            constructed = rational_bezier_levels(curve, t)[-1][0]
            assert torch.allclose(direct, constructed, rtol=1e-9, atol=1e-9)

    @hypothesis.given(
        points=control_points(),
        t=parameters(),
        data=hypothesis.strategies.data(),
    )
    @hypothesis.settings(deadline=None)
    def test_strategies_agree(self, points, t, data):
        """Both evaluation strategies agree for positive weights."""
        weights = data.draw(positive_weights(points.shape[0]))
        curve = _curve(points, weights)

        direct = rational_bezier_evaluate(curve, t)
        constructed = rational_bezier_levels(curve, t)[-1][0]
        assert torch.allclose(direct, constructed, rtol=1e-9, atol=1e-7)

    def test_integer_control_points(self):
        """Integer curves built directly are evaluated in floating point."""
        points = torch.tensor([[100, 400], [200, 100], [600, 100], [700, 400]])
        curve = RationalBezierCurve(
            control_points=points,
            weights=torch.ones(4, dtype=torch.int64),
            extrapolate="extrapolate",
            batch_size=[],
        )
        expected = torch.tensor([400.0, 175.0])
        assert torch.allclose(rational_bezier_evaluate(curve, 0.5), expected)
        levels = rational_bezier_levels(curve, 0.5)
        assert levels[0].is_floating_point()
        assert torch.allclose(levels[-1][0], expected)

    def test_non_positive_weight_warns(self):
        points = torch.tensor([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
        with pytest.warns(RuntimeWarning):
            rational_bezier_levels(_curve(points, [1.0, -0.5, 1.0]), 0.5)

    def test_rejects_batched_parameter(self):
        points, weights = rational_bezier_curve_preset()
        with pytest.raises(ValueError):
            rational_bezier_levels(
                _curve(points, weights), torch.tensor([0.2, 0.4])
            )


class TestRationalBezierTrace:
    """Tests for rational_bezier_trace function."""

    def test_trace_ends_at_max_t(self):
        points, weights = rational_bezier_curve_preset()
        curve = _curve(points, weights)
        polyline = rational_bezier_trace(curve, max_t=0.5, step=0.1)
        assert polyline.shape == (6, 2)
        assert torch.allclose(polyline[-1], rational_bezier_evaluate(curve, 0.5))
