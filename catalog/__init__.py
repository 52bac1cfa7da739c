"""Catalog and repository collaborators of the estimation engine."""

from .base import (
    ParametricCatalog,
    ProcessRepository,
    FactorRepository,
    ParametricEstimateRepository,
    EstimateRepository,
)
from .memory import (
    InMemoryParametricCatalog,
    InMemoryProcessRepository,
    InMemoryFactorRepository,
    InMemoryParametricEstimateRepository,
    InMemoryEstimateRepository,
)
from .defaults import (
    EARLY_DESIGN_ID,
    POST_ARCHITECTURE_ID,
    DEFAULT_MODELS,
    DEFAULT_SCALE_FACTORS,
    DEFAULT_COST_DRIVERS,
    default_catalog,
)

__all__ = [
    # Interfaces
    "ParametricCatalog",
    "ProcessRepository",
    "FactorRepository",
    "ParametricEstimateRepository",
    "EstimateRepository",
    # In-memory
    "InMemoryParametricCatalog",
    "InMemoryProcessRepository",
    "InMemoryFactorRepository",
    "InMemoryParametricEstimateRepository",
    "InMemoryEstimateRepository",
    # Standard catalog
    "EARLY_DESIGN_ID",
    "POST_ARCHITECTURE_ID",
    "DEFAULT_MODELS",
    "DEFAULT_SCALE_FACTORS",
    "DEFAULT_COST_DRIVERS",
    "default_catalog",
]
