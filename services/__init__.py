"""Use cases over the estimation engine and its repositories."""

from .parametric_service import ParametricEstimationService
from .factor_service import FactorService
from .process_service import ProcessService
from .estimate_service import EstimateService

__all__ = [
    "ParametricEstimationService",
    "FactorService",
    "ProcessService",
    "EstimateService",
]
