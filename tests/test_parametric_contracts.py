"""Tests for the parametric contracts."""

import pytest
from pydantic import ValidationError

from contracts import (
    CostDriver,
    CostDriverGroup,
    CostDriverType,
    ParametricEstimate,
    ParametricInput,
    ParametricModel,
    PowerMode,
    RatingUpdate,
    ScaleFactor,
    ScaleFactorType,
    rating_label,
)
from errors import NotFoundError


def _make_model(a=2.94, b=0.91):
    return ParametricModel(id="early_design", name="Early Design", a=a, b=b)


def _make_scale_factor(rating=0.0, weight=4.05, sf_id="prec"):
    return ScaleFactor(
        id=sf_id,
        type=ScaleFactorType.PRECEDENTEDNESS,
        name="Precedentedness",
        rating=rating,
        weight=weight,
    )


def _make_cost_driver(rating=2.0, table=None, value=1.0):
    return CostDriver(
        id="cplx",
        type=CostDriverType.PRODUCT_COMPLEXITY,
        name="Product Complexity",
        rating=rating,
        value=value,
        rating_multipliers=table,
    )


CPLX_TABLE = [0.73, 0.87, 1.00, 1.17, 1.34, 1.74]


class TestRatings:

    def test_rating_labels(self):
        assert rating_label(0) == "Very Low"
        assert rating_label(2) == "Nominal"
        assert rating_label(2.4) == "Nominal"
        assert rating_label(2.6) == "High"
        assert rating_label(5) == "Extra High"

    @pytest.mark.parametrize("rating", [-0.1, 5.1])
    def test_scale_factor_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            _make_scale_factor(rating=rating)

    @pytest.mark.parametrize("rating", [-1.0, 6.0])
    def test_cost_driver_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            _make_cost_driver(rating=rating)

    def test_input_ratings_checked(self):
        with pytest.raises(ValidationError):
            ParametricInput(model_id="early_design", project_size=10, scale_factor_ratings={"prec": 7})
        with pytest.raises(ValidationError):
            RatingUpdate(estimate_id="x", cost_driver_ratings={"cplx": -1})


class TestScaleFactor:

    def test_impact_is_weight_times_rating(self):
        assert _make_scale_factor(rating=3.0).impact == pytest.approx(12.15)

    def test_with_rating_returns_copy(self):
        catalog_entry = _make_scale_factor()
        rated = catalog_entry.with_rating(2.5)

        assert rated.rating == 2.5
        assert catalog_entry.rating == 0.0
        assert rated.weight == catalog_entry.weight

    def test_frozen(self):
        sf = _make_scale_factor()
        with pytest.raises(ValidationError):
            sf.rating = 3.0


class TestCostDriver:

    def test_value_read_from_table(self):
        assert _make_cost_driver(rating=3.0, table=CPLX_TABLE).value == pytest.approx(1.17)
        assert _make_cost_driver(rating=5.0, table=CPLX_TABLE).value == pytest.approx(1.74)

    def test_value_interpolated_between_levels(self):
        driver = _make_cost_driver(rating=2.5, table=CPLX_TABLE)
        assert driver.value == pytest.approx((1.00 + 1.17) / 2)

    def test_nominal_rating_is_one(self):
        assert _make_cost_driver(table=CPLX_TABLE).value == pytest.approx(1.0)

    def test_value_stands_without_table(self):
        """Without a multiplier table the given value is kept for any rating."""
        driver = _make_cost_driver(rating=4.0, value=1.25)
        assert driver.value == 1.25

    def test_re_rating_updates_value(self):
        driver = _make_cost_driver(table=CPLX_TABLE).with_rating(1.0)
        assert driver.value == pytest.approx(0.87)

    def test_table_needs_six_levels(self):
        with pytest.raises(ValidationError):
            _make_cost_driver(table=[1.0, 1.1])

    def test_table_multipliers_positive(self):
        with pytest.raises(ValidationError):
            _make_cost_driver(table=[0.0, 0.87, 1.00, 1.17, 1.34, 1.74])

    def test_value_must_be_positive(self):
        with pytest.raises(ValidationError):
            _make_cost_driver(value=0.0)

    def test_group(self):
        assert _make_cost_driver().group == CostDriverGroup.PRODUCT


class TestParametricEstimate:
    """Derived figures stay consistent with the inputs."""

    def test_derived_figures_computed_on_build(self):
        estimate = ParametricEstimate(
            project_size=50.0,
            model=_make_model(),
            scale_factors=[_make_scale_factor(rating=3.0)],
        )
        assert estimate.exponent_b == pytest.approx(13.06)
        assert estimate.effort_pm == pytest.approx(4.5383249325e22, rel=1e-6)
        assert estimate.team_size == pytest.approx(estimate.effort_pm / estimate.duration_months)

    def test_supplied_derived_values_are_overwritten(self):
        estimate = ParametricEstimate(project_size=10.0, model=_make_model(), effort_pm=1.0, team_size=99.0)
        assert estimate.effort_pm == pytest.approx(2.94 * 10.0 ** 0.91)
        assert estimate.team_size != 99.0

    def test_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            ParametricEstimate(project_size=0.0, model=_make_model())

    def test_frozen(self):
        estimate = ParametricEstimate(project_size=10.0, model=_make_model())
        with pytest.raises(ValidationError):
            estimate.effort_pm = 1.0

    def test_with_ratings_rebuilds(self):
        original = ParametricEstimate(
            project_size=10.0,
            model=_make_model(),
            scale_factors=[_make_scale_factor(rating=0.0)],
            cost_drivers=[_make_cost_driver(table=CPLX_TABLE)],
        )
        updated = original.with_ratings({"prec": 0.1}, {"cplx": 3.0})

        assert original.exponent_b == pytest.approx(0.91)
        assert original.effort_multiplier == pytest.approx(1.0)
        assert updated.exponent_b == pytest.approx(0.91 + 0.405)
        assert updated.effort_multiplier == pytest.approx(1.17)
        assert updated.effort_pm == pytest.approx(2.94 * 10.0 ** (0.91 + 0.405) * 1.17)

    def test_with_ratings_size_and_model_in_one_rebuild(self):
        original = ParametricEstimate(
            project_size=10.0,
            model=_make_model(),
            scale_factors=[_make_scale_factor(rating=5.0)],
        )
        post = ParametricModel(id="post_architecture", name="Post-Architecture", a=2.45, b=0.91)
        updated = original.with_ratings({"prec": 0.0}, project_size=1e6, model=post)

        assert updated.project_size == 1e6
        assert updated.model.id == "post_architecture"
        assert updated.effort_pm == pytest.approx(2.45 * 1e6 ** 0.91)

    def test_with_ratings_unknown_id(self):
        estimate = ParametricEstimate(
            project_size=10.0, model=_make_model(), scale_factors=[_make_scale_factor()]
        )
        with pytest.raises(NotFoundError) as exc_info:
            estimate.with_ratings({"team": 1.0})
        assert exc_info.value.entity_id == "team"

        with pytest.raises(NotFoundError):
            estimate.with_ratings(cost_driver_ratings={"cplx": 1.0})

    def test_with_project_size(self):
        estimate = ParametricEstimate(project_size=10.0, model=_make_model(), id="p-1")
        bigger = estimate.with_project_size(20.0)

        assert bigger.id == "p-1"
        assert bigger.effort_pm == pytest.approx(2.94 * 20.0 ** 0.91)
        assert estimate.effort_pm == pytest.approx(2.94 * 10.0 ** 0.91)

    def test_with_model(self):
        estimate = ParametricEstimate(project_size=10.0, model=_make_model())
        post = estimate.with_model(ParametricModel(id="post_architecture", name="Post-Architecture", a=2.45, b=0.91))
        assert post.effort_pm == pytest.approx(2.45 * 10.0 ** 0.91)

    def test_legacy_power_mode_carried_through(self):
        estimate = ParametricEstimate(
            project_size=10.0, model=_make_model(a=2.0, b=1.3), power_mode=PowerMode.LEGACY_TRUNCATED
        )
        assert estimate.effort_pm == 20.0
        assert estimate.with_project_size(5.0).effort_pm == 10.0
