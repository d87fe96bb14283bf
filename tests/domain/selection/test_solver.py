"""Tests for the selection ratio solver."""

import math

import pytest

from scroll_selector.domain.selection.models import SelectionParams
from scroll_selector.domain.selection.solver import (
    blend_weights,
    compute_selection_ratio,
    curve_bottom,
    curve_middle,
    curve_top,
    remap_ratio,
)


@pytest.fixture
def params() -> SelectionParams:
    """Default parameters: 2500px ranges, middle at 0.5, stiffness 0.6."""
    return SelectionParams(
        top_perception_range=2500,
        bottom_perception_range=2500,
        selection_y_mid=0.5,
        stiffness=0.6,
    )


class TestComputeSelectionRatio:
    """Test the top-level dispatch over known/unknown distances."""

    def test_both_unknown_is_neutral(self, params: SelectionParams):
        assert compute_selection_ratio(params, None, None) == 0.5

    def test_neutral_uses_configured_mid(self):
        params = SelectionParams(selection_y_mid=0.3)
        assert compute_selection_ratio(params, None, None) == 0.3

    def test_top_edge_reached(self, params: SelectionParams):
        assert compute_selection_ratio(params, 0, None) == pytest.approx(0.0, abs=1e-6)

    def test_bottom_edge_reached(self, params: SelectionParams):
        assert compute_selection_ratio(params, None, 0) == pytest.approx(1.0, abs=1e-6)

    def test_bottom_at_range_is_neutral(self, params: SelectionParams):
        assert compute_selection_ratio(params, None, 2500) == pytest.approx(0.5, abs=1e-6)

    def test_symmetric_midpoint(self, params: SelectionParams):
        ratio = compute_selection_ratio(params, 1250, 1250)
        assert ratio == pytest.approx(0.5, abs=0.05)

    def test_top_only_matches_top_curve(self, params: SelectionParams):
        assert compute_selection_ratio(params, 700, None) == curve_top(params, 700)

    def test_top_only_is_monotonic(self, params: SelectionParams):
        """Ratio never increases while approaching the top edge."""
        ratios = [compute_selection_ratio(params, d, None) for d in range(2450, -1, -50)]
        for previous, current in zip(ratios, ratios[1:]):
            assert current <= previous + 1e-12
        assert ratios[-1] == pytest.approx(0.0, abs=1e-6)

    def test_bottom_only_is_monotonic(self, params: SelectionParams):
        """Ratio never decreases while approaching the bottom edge."""
        ratios = [compute_selection_ratio(params, None, d) for d in range(2450, -1, -50)]
        for previous, current in zip(ratios, ratios[1:]):
            assert current >= previous - 1e-12
        assert ratios[-1] == pytest.approx(1.0, abs=1e-6)

    def test_straight_line_with_full_stiffness(self):
        params = SelectionParams(stiffness=1.0)
        assert compute_selection_ratio(params, 500, None) == pytest.approx(0.1, abs=1e-6)

    def test_undeterminable_geometry_is_none(self, params: SelectionParams):
        """A distance outside the perception range has no curve value."""
        assert compute_selection_ratio(params, 3000, None) is None
        assert compute_selection_ratio(params, None, 3000) is None
        assert compute_selection_ratio(params, 3000, 100) is None

    def test_remapped_interval(self):
        params = SelectionParams(remapped_interval=(0.2, 0.8))
        assert compute_selection_ratio(params, None, None) == pytest.approx(0.5)
        assert compute_selection_ratio(params, 0, None) == pytest.approx(0.2, abs=1e-6)
        assert compute_selection_ratio(params, None, 0) == pytest.approx(0.8, abs=1e-6)

    def test_none_is_never_remapped(self):
        params = SelectionParams(remapped_interval=(0.2, 0.8))
        assert compute_selection_ratio(params, 3000, None) is None


class TestCurveComponents:
    """Test the top and bottom curves."""

    def test_top_curve_spans_zero_to_mid(self, params: SelectionParams):
        assert curve_top(params, 0) == pytest.approx(0.0, abs=1e-6)
        assert curve_top(params, 2500) == pytest.approx(0.5, abs=1e-6)

    def test_bottom_curve_spans_zero_to_remaining(self):
        params = SelectionParams(selection_y_mid=0.4)
        assert curve_bottom(params, 0) == pytest.approx(0.0, abs=1e-6)
        assert curve_bottom(params, 2500) == pytest.approx(0.6, abs=1e-6)


class TestBlend:
    """Test blending of the top and bottom curves."""

    def test_weights_at_window_start(self, params: SelectionParams):
        assert blend_weights(params, 0, 1000) == (1.0, 0.0)

    def test_weights_at_window_end(self, params: SelectionParams):
        assert blend_weights(params, 1000, 0) == (0.0, 1.0)

    def test_weights_are_square_root_eased(self, params: SelectionParams):
        top, bottom = blend_weights(params, 1250, 1250)
        assert top == pytest.approx(math.sqrt(0.5))
        assert bottom == pytest.approx(math.sqrt(0.5))

    def test_weights_with_asymmetric_ranges(self):
        params = SelectionParams(top_perception_range=1000, bottom_perception_range=2000)
        # window [max(0, 2500 - 2000), min(1000, 2500)] = [500, 1000]
        top, bottom = blend_weights(params, 750, 1750)
        assert top == pytest.approx(math.sqrt(0.5))
        assert bottom == pytest.approx(math.sqrt(0.5))

    def test_continuous_at_window_start(self, params: SelectionParams):
        """At the window start the blend equals the top-only ratio."""
        blended = curve_middle(params, 0, 1000)
        assert blended == pytest.approx(compute_selection_ratio(params, 0, None), abs=1e-9)

    def test_continuous_at_window_end(self, params: SelectionParams):
        """At the window end the blend equals the bottom-only ratio."""
        blended = curve_middle(params, 1000, 0)
        assert blended == pytest.approx(compute_selection_ratio(params, None, 0), abs=1e-9)

    def test_stays_within_unit_interval(self, params: SelectionParams):
        for top in range(0, 2500, 100):
            for bottom in range(0, 2500, 100):
                ratio = curve_middle(params, top, bottom)
                assert ratio is not None
                assert -1e-6 <= ratio <= 1.0 + 1e-6

    def test_empty_window_is_neutral(self, params: SelectionParams):
        """Content that cannot scroll at all selects the neutral position."""
        assert blend_weights(params, 0, 0) is None
        assert curve_middle(params, 0, 0) == 0.5

    def test_failing_curve_propagates_none(self, params: SelectionParams):
        assert curve_middle(params, 100, 2600) is None


class TestRemapRatio:
    """Test affine remapping of the ratio."""

    def test_identity_without_interval(self):
        assert remap_ratio(0.3, None) == 0.3

    def test_maps_into_interval(self):
        assert remap_ratio(0.25, (10.0, 20.0)) == 12.5

    def test_reversed_interval(self):
        assert remap_ratio(0.25, (1.0, 0.0)) == 0.75

    def test_none_stays_none(self):
        assert remap_ratio(None, (0.0, 1.0)) is None
        assert remap_ratio(None, None) is None
