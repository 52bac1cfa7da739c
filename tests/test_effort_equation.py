"""Tests for the effort equation."""

import math

import pytest

from contracts import PowerMode, calculate_effort, real_power, truncated_power
from contracts.effort_equation import effort_multiplier, power, scale_exponent, schedule_exponent
from errors import EstimationValidationError


class TestPower:
    """Real and integer-truncated exponentiation."""

    def test_real_power_uses_fractional_exponent(self):
        assert real_power(2.0, 0.5) == pytest.approx(math.sqrt(2.0))

    def test_truncated_power_drops_fraction(self):
        """1.3 truncates to 1, so the result is the base itself."""
        assert truncated_power(2.0, 1.3) == 2.0
        assert truncated_power(3.0, 2.9) == 9.0

    def test_truncated_power_below_one_is_one(self):
        assert truncated_power(50.0, 0.91) == 1.0

    def test_dispatch(self):
        assert power(4.0, 1.5) == pytest.approx(8.0)
        assert power(4.0, 1.5, PowerMode.LEGACY_TRUNCATED) == 4.0


class TestExponentParts:

    def test_scale_exponent_adds_weighted_ratings(self):
        assert scale_exponent(0.91, [(4.05, 3.0), (3.04, 1.0)]) == pytest.approx(0.91 + 12.15 + 3.04)

    def test_scale_exponent_without_factors_is_base(self):
        assert scale_exponent(0.91, []) == 0.91

    def test_effort_multiplier_is_product(self):
        assert effort_multiplier([1.17, 0.85]) == pytest.approx(1.17 * 0.85)

    def test_effort_multiplier_empty_is_one(self):
        assert effort_multiplier([]) == 1.0

    def test_schedule_exponent(self):
        assert schedule_exponent(1.01) == pytest.approx(0.28)
        assert schedule_exponent(13.06) == pytest.approx(0.28 + 0.2 * 12.05)


class TestCalculateEffort:
    """End-to-end effort, duration and team size."""

    def test_regression_fixture(self):
        """A=2.94, B=0.91, one factor 4.05 x 3.0, size 50."""
        figures = calculate_effort(2.94, 0.91, 50.0, [(4.05, 3.0)], [])

        assert figures.exponent_b == pytest.approx(13.06)
        assert figures.effort_multiplier == 1.0
        assert figures.effort_pm == pytest.approx(2.94 * 50.0 ** 13.06, rel=1e-9)
        assert figures.effort_pm == pytest.approx(4.5383249325e22, rel=1e-6)

        d = 0.28 + 0.2 * (13.06 - 1.01)
        assert figures.duration_months == pytest.approx(3.67 * figures.effort_pm ** d, rel=1e-9)
        assert figures.team_size == pytest.approx(figures.effort_pm / figures.duration_months)

    def test_nominal_project(self):
        """No scale factors and no cost drivers: PM = A * Size^B."""
        figures = calculate_effort(2.94, 0.91, 10.0, [], [])

        assert figures.exponent_b == 0.91
        assert figures.effort_pm == pytest.approx(2.94 * 10.0 ** 0.91)
        assert figures.duration_months == pytest.approx(
            3.67 * figures.effort_pm ** (0.28 + 0.2 * (0.91 - 1.01))
        )

    def test_cost_drivers_scale_effort_linearly(self):
        base = calculate_effort(2.45, 0.91, 20.0, [], [])
        adjusted = calculate_effort(2.45, 0.91, 20.0, [], [1.17, 0.85])

        assert adjusted.effort_multiplier == pytest.approx(1.17 * 0.85)
        assert adjusted.effort_pm == pytest.approx(base.effort_pm * 1.17 * 0.85)

    def test_team_size_is_effort_over_duration(self):
        figures = calculate_effort(2.45, 0.91, 35.0, [(3.04, 0.05)], [1.1])
        assert figures.team_size == pytest.approx(figures.effort_pm / figures.duration_months)
        assert figures.team_size * figures.duration_months == pytest.approx(figures.effort_pm)

    def test_effort_grows_with_size(self):
        small = calculate_effort(2.94, 0.91, 10.0, [], [])
        large = calculate_effort(2.94, 0.91, 100.0, [], [])
        assert large.effort_pm > small.effort_pm

    @pytest.mark.parametrize("size", [0.0, -5.0])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(EstimationValidationError):
            calculate_effort(2.94, 0.91, size, [], [])

    def test_overflow_is_a_validation_error(self):
        ratings = [(4.05, 5.0), (3.04, 5.0), (4.24, 5.0), (3.29, 5.0), (4.68, 5.0)]
        with pytest.raises(EstimationValidationError) as exc_info:
            calculate_effort(2.94, 0.91, 1e6, ratings, [])
        assert exc_info.value.component == "effort_equation"

    def test_legacy_truncated_mode(self):
        """Exponent 1.3 truncates to 1; D < 1 truncates to 0, so TDEV = C."""
        figures = calculate_effort(2.0, 1.3, 10.0, [], [], PowerMode.LEGACY_TRUNCATED)

        assert figures.effort_pm == 20.0
        assert figures.duration_months == 3.67
        assert figures.team_size == pytest.approx(20.0 / 3.67)
