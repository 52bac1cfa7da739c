"""Parametric estimate use cases: create, re-rate, and expand into a detailed result."""

import logging
from typing import Dict, List

from catalog.base import ParametricCatalog, ParametricEstimateRepository
from contracts import (
    CostDriver,
    DetailedResult,
    ParametricEstimate,
    ParametricInput,
    ParametricModel,
    PowerMode,
    RatingUpdate,
    ScaleFactor,
)
from errors import EstimationValidationError, NotFoundError
from estimation import generate_detailed_result


logger = logging.getLogger(__name__)


def _validate_project_size(project_size: float) -> None:
    if project_size <= 0:
        raise EstimationValidationError(
            "project size must be greater than 0",
            component="parametric_service",
            details={"project_size": project_size},
        )


class ParametricEstimationService:
    """Builds parametric estimates from catalog ids and ratings.

    Every id is resolved against the catalog before any arithmetic, so a
    single unknown id fails the whole operation and nothing is saved.
    """

    def __init__(
        self,
        catalog: ParametricCatalog,
        estimates: ParametricEstimateRepository,
        power_mode: PowerMode = PowerMode.REAL,
    ):
        """Initialize the service.

        Args:
            catalog: Read-only model / scale factor / cost driver catalog
            estimates: Store for parametric estimates
            power_mode: Exponentiation mode for new estimates
        """
        self.catalog = catalog
        self.estimates = estimates
        self.power_mode = power_mode

    def resolve_scale_factors(self, ratings: Dict[str, float]) -> List[ScaleFactor]:
        """Catalog scale factors rated per ``ratings``, in input order."""
        return [
            self._lookup(self.catalog.find_scale_factor_by_id, sf_id).with_rating(rating)
            for sf_id, rating in ratings.items()
        ]

    def resolve_cost_drivers(self, ratings: Dict[str, float]) -> List[CostDriver]:
        """Catalog cost drivers rated per ``ratings``, in input order."""
        return [
            self._lookup(self.catalog.find_cost_driver_by_id, cd_id).with_rating(rating)
            for cd_id, rating in ratings.items()
        ]

    def resolve_model(self, model_id: str) -> ParametricModel:
        if not model_id:
            raise EstimationValidationError("model id is required", component="parametric_service")
        return self._lookup(self.catalog.find_model_by_id, model_id)

    def build_estimate(self, data: ParametricInput) -> ParametricEstimate:
        """Resolve and compute without saving."""
        _validate_project_size(data.project_size)
        model = self.resolve_model(data.model_id)
        scale_factors = self.resolve_scale_factors(data.scale_factor_ratings)
        cost_drivers = self.resolve_cost_drivers(data.cost_driver_ratings)

        return ParametricEstimate(
            project_size=data.project_size,
            model=model,
            scale_factors=scale_factors,
            cost_drivers=cost_drivers,
            power_mode=self.power_mode,
        )

    def create_estimate(self, data: ParametricInput) -> ParametricEstimate:
        """Create, compute and save a parametric estimate.

        Raises:
            EstimationValidationError: project size <= 0 or no model id
            NotFoundError: unknown model, scale factor or cost driver id
        """
        estimate = self.estimates.save(self.build_estimate(data))
        logger.info(
            "Created parametric estimate %s: size=%s, model=%s, effort=%.2f PM, duration=%.2f months",
            estimate.id, estimate.project_size, estimate.model.id,
            estimate.effort_pm, estimate.duration_months,
        )
        return estimate

    def get_estimate(self, estimate_id: str) -> ParametricEstimate:
        return self.estimates.find_by_id(estimate_id)

    def update_ratings(self, update: RatingUpdate) -> ParametricEstimate:
        """Apply new ratings (and optionally size / model), recompute and save.

        Raises:
            NotFoundError: unknown estimate, model, or a factor id not on the estimate
            EstimationValidationError: new project size <= 0
        """
        estimate = self.estimates.find_by_id(update.estimate_id)

        if update.project_size is not None:
            _validate_project_size(update.project_size)
        model = None
        if update.model_id is not None:
            model = self.resolve_model(update.model_id)
        estimate = estimate.with_ratings(
            update.scale_factor_ratings,
            update.cost_driver_ratings,
            project_size=update.project_size,
            model=model,
        )

        estimate = self.estimates.save(estimate)
        logger.info(
            "Updated parametric estimate %s: effort=%.2f PM, duration=%.2f months",
            estimate.id, estimate.effort_pm, estimate.duration_months,
        )
        return estimate

    def detailed_result(self, estimate_id: str, hourly_rate: float = 0.0) -> DetailedResult:
        return generate_detailed_result(self.estimates.find_by_id(estimate_id), hourly_rate)

    def list_models(self) -> List[ParametricModel]:
        return self.catalog.list_models()

    def list_scale_factors(self) -> List[ScaleFactor]:
        return self.catalog.list_scale_factors()

    def list_cost_drivers(self) -> List[CostDriver]:
        return self.catalog.list_cost_drivers()

    def _lookup(self, finder, entity_id: str):
        try:
            return finder(entity_id)
        except NotFoundError:
            logger.warning("Catalog lookup failed for %r", entity_id)
            raise
