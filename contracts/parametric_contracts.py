"""Parametric model contracts: scale factors, cost drivers, model coefficients.

A ParametricEstimate is frozen. Its derived figures (exponent, effort,
duration, team size) are recomputed by ``calculate_effort`` whenever an
instance is built, so changing an input always means building a new
estimate through ``with_ratings`` / ``with_project_size`` / ``with_model``.
"""

import math
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from errors import NotFoundError
from .effort_equation import PowerMode, calculate_effort


MIN_RATING = 0.0
MAX_RATING = 5.0
NOMINAL_RATING = 2.0

RATING_LEVELS: Tuple[str, ...] = (
    "Very Low",
    "Low",
    "Nominal",
    "High",
    "Very High",
    "Extra High",
)


def rating_label(rating: float) -> str:
    """Name of the rating level closest to ``rating``."""
    index = int(math.floor(rating + 0.5))
    return RATING_LEVELS[max(0, min(index, len(RATING_LEVELS) - 1))]


def _check_rating(rating: float) -> float:
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(f"rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
    return rating


class ScaleFactorType(str, Enum):
    """The five scale factors of the exponent."""
    PRECEDENTEDNESS = "precedentedness"
    DEVELOPMENT_FLEXIBILITY = "development_flexibility"
    ARCHITECTURE_RISK = "architecture_risk"
    TEAM_COHESION = "team_cohesion"
    PROCESS_MATURITY = "process_maturity"


class CostDriverGroup(str, Enum):
    """Grouping of cost drivers."""
    PRODUCT = "product"
    PLATFORM = "platform"
    PERSONNEL = "personnel"
    PROJECT = "project"


class CostDriverType(str, Enum):
    """Effort multipliers of the post-architecture model."""
    # Product
    REQUIRED_RELIABILITY = "required_reliability"
    DATABASE_SIZE = "database_size"
    PRODUCT_COMPLEXITY = "product_complexity"
    REQUIRED_REUSABILITY = "required_reusability"
    DOCUMENTATION = "documentation"
    # Platform
    EXECUTION_TIME = "execution_time"
    STORAGE_CONSTRAINT = "storage_constraint"
    PLATFORM_VOLATILITY = "platform_volatility"
    # Personnel
    ANALYST_CAPABILITY = "analyst_capability"
    PROGRAMMER_CAPABILITY = "programmer_capability"
    PERSONNEL_CONTINUITY = "personnel_continuity"
    APPLICATION_EXPERIENCE = "application_experience"
    PLATFORM_EXPERIENCE = "platform_experience"
    LANGUAGE_EXPERIENCE = "language_experience"
    # Project
    TOOL_USE = "tool_use"
    MULTISITE_DEVELOPMENT = "multisite_development"
    SCHEDULE_CONSTRAINT = "schedule_constraint"


COST_DRIVER_GROUPS: Dict[CostDriverType, CostDriverGroup] = {
    CostDriverType.REQUIRED_RELIABILITY: CostDriverGroup.PRODUCT,
    CostDriverType.DATABASE_SIZE: CostDriverGroup.PRODUCT,
    CostDriverType.PRODUCT_COMPLEXITY: CostDriverGroup.PRODUCT,
    CostDriverType.REQUIRED_REUSABILITY: CostDriverGroup.PRODUCT,
    CostDriverType.DOCUMENTATION: CostDriverGroup.PRODUCT,
    CostDriverType.EXECUTION_TIME: CostDriverGroup.PLATFORM,
    CostDriverType.STORAGE_CONSTRAINT: CostDriverGroup.PLATFORM,
    CostDriverType.PLATFORM_VOLATILITY: CostDriverGroup.PLATFORM,
    CostDriverType.ANALYST_CAPABILITY: CostDriverGroup.PERSONNEL,
    CostDriverType.PROGRAMMER_CAPABILITY: CostDriverGroup.PERSONNEL,
    CostDriverType.PERSONNEL_CONTINUITY: CostDriverGroup.PERSONNEL,
    CostDriverType.APPLICATION_EXPERIENCE: CostDriverGroup.PERSONNEL,
    CostDriverType.PLATFORM_EXPERIENCE: CostDriverGroup.PERSONNEL,
    CostDriverType.LANGUAGE_EXPERIENCE: CostDriverGroup.PERSONNEL,
    CostDriverType.TOOL_USE: CostDriverGroup.PROJECT,
    CostDriverType.MULTISITE_DEVELOPMENT: CostDriverGroup.PROJECT,
    CostDriverType.SCHEDULE_CONSTRAINT: CostDriverGroup.PROJECT,
}


class ScaleFactor(BaseModel):
    """A scale factor contributing weight * rating to the effort exponent."""
    id: str = Field(..., min_length=1, description="Catalog identifier")
    type: ScaleFactorType = Field(..., description="Scale factor category")
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field(default="", description="What the factor measures")
    rating: float = Field(default=MIN_RATING, description="Very Low (0) to Extra High (5)")
    weight: float = Field(..., description="Fixed per category; impact on the exponent")

    model_config = {"frozen": True}

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, v: float) -> float:
        return _check_rating(v)

    @property
    def impact(self) -> float:
        """Additive contribution to the exponent."""
        return self.weight * self.rating

    def with_rating(self, rating: float) -> "ScaleFactor":
        """Copy of this catalog entry rated at ``rating``."""
        return ScaleFactor.model_validate({**self.model_dump(), "rating": rating})


class CostDriver(BaseModel):
    """A cost driver contributing its value multiplicatively to effort.

    When ``rating_multipliers`` holds one multiplier per rating level
    (Very Low .. Extra High) the value is read from that table, linearly
    interpolated between adjacent levels. Without a table the catalog value
    stands.
    """
    id: str = Field(..., min_length=1, description="Catalog identifier")
    type: CostDriverType = Field(..., description="Cost driver category")
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field(default="", description="What the driver measures")
    rating: float = Field(default=NOMINAL_RATING, description="Very Low (0) to Extra High (5)")
    value: float = Field(default=1.0, gt=0, description="Effort multiplier; nominal = 1.0")
    rating_multipliers: Optional[List[float]] = Field(
        default=None,
        description="Multiplier per rating level, Very Low through Extra High",
    )

    model_config = {"frozen": True}

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, v: float) -> float:
        return _check_rating(v)

    @field_validator("rating_multipliers")
    @classmethod
    def one_multiplier_per_level(cls, v: Optional[List[float]]) -> Optional[List[float]]:
        if v is None:
            return v
        if len(v) != len(RATING_LEVELS):
            raise ValueError(f"rating_multipliers needs {len(RATING_LEVELS)} entries, got {len(v)}")
        if any(m <= 0 for m in v):
            raise ValueError("rating multipliers must be greater than 0")
        return v

    @model_validator(mode='after')
    def resolve_value(self) -> 'CostDriver':
        """Read the value for the current rating from the multiplier table."""
        if self.rating_multipliers:
            object.__setattr__(self, 'value', self.multiplier_at(self.rating))
        return self

    @property
    def group(self) -> CostDriverGroup:
        return COST_DRIVER_GROUPS[self.type]

    def multiplier_at(self, rating: float) -> float:
        table = self.rating_multipliers
        if not table:
            return self.value
        low = int(math.floor(rating))
        if low >= len(table) - 1:
            return table[-1]
        fraction = rating - low
        return table[low] + (table[low + 1] - table[low]) * fraction

    def with_rating(self, rating: float) -> "CostDriver":
        """Copy of this catalog entry rated at ``rating``."""
        return CostDriver.model_validate({**self.model_dump(), "rating": rating})


class ParametricModel(BaseModel):
    """Effort equation coefficients: PM = A * Size^B * EM."""
    id: str = Field(..., min_length=1, description="Catalog identifier")
    name: str = Field(..., min_length=1, description="Early Design or Post-Architecture")
    description: str = Field(default="")
    a: float = Field(..., gt=0, description="Multiplicative calibration constant A")
    b: float = Field(..., description="Base scale exponent before scale factor adjustment")

    model_config = {"frozen": True}


class ParametricEstimate(BaseModel):
    """A parametric estimate with its derived effort figures."""
    id: str = Field(default="", description="Estimate identifier")
    project_size: float = Field(..., gt=0, description="Size in KSLOC or function points")
    model: ParametricModel
    scale_factors: List[ScaleFactor] = Field(default_factory=list)
    cost_drivers: List[CostDriver] = Field(default_factory=list)
    power_mode: PowerMode = Field(default=PowerMode.REAL)

    # Derived; always overwritten from the inputs above
    exponent_b: float = Field(default=0.0, description="B + sum(weight * rating)")
    effort_multiplier: float = Field(default=1.0, description="Product of cost driver values")
    effort_pm: float = Field(default=0.0, description="Person-months")
    duration_months: float = Field(default=0.0, description="Calendar months")
    team_size: float = Field(default=0.0, description="Average staff, effort_pm / duration_months")

    model_config = {"frozen": True}

    @model_validator(mode='after')
    def derive_effort(self) -> 'ParametricEstimate':
        """Recompute all derived figures together from the current inputs."""
        figures = calculate_effort(
            coefficient_a=self.model.a,
            base_exponent=self.model.b,
            project_size=self.project_size,
            weighted_ratings=[(sf.weight, sf.rating) for sf in self.scale_factors],
            driver_values=[cd.value for cd in self.cost_drivers],
            mode=self.power_mode,
        )
        object.__setattr__(self, 'exponent_b', figures.exponent_b)
        object.__setattr__(self, 'effort_multiplier', figures.effort_multiplier)
        object.__setattr__(self, 'effort_pm', figures.effort_pm)
        object.__setattr__(self, 'duration_months', figures.duration_months)
        object.__setattr__(self, 'team_size', figures.team_size)
        return self

    def _rebuild(self, **changes) -> "ParametricEstimate":
        fields = {
            "id": self.id,
            "project_size": self.project_size,
            "model": self.model,
            "scale_factors": self.scale_factors,
            "cost_drivers": self.cost_drivers,
            "power_mode": self.power_mode,
        }
        fields.update(changes)
        return ParametricEstimate(**fields)

    def with_ratings(
        self,
        scale_factor_ratings: Optional[Dict[str, float]] = None,
        cost_driver_ratings: Optional[Dict[str, float]] = None,
        project_size: Optional[float] = None,
        model: Optional[ParametricModel] = None,
    ) -> "ParametricEstimate":
        """New estimate with the given factors re-rated.

        A new ``project_size`` or ``model`` is applied in the same rebuild, so
        the figures are derived once from the final inputs.

        Raises:
            NotFoundError: an id is not one of this estimate's factors
        """
        scale_factor_ratings = scale_factor_ratings or {}
        cost_driver_ratings = cost_driver_ratings or {}

        known_sf = {sf.id for sf in self.scale_factors}
        for sf_id in scale_factor_ratings:
            if sf_id not in known_sf:
                raise NotFoundError("scale factor", sf_id, component="parametric_estimate")
        known_cd = {cd.id for cd in self.cost_drivers}
        for cd_id in cost_driver_ratings:
            if cd_id not in known_cd:
                raise NotFoundError("cost driver", cd_id, component="parametric_estimate")

        scale_factors = [
            sf.with_rating(scale_factor_ratings[sf.id]) if sf.id in scale_factor_ratings else sf
            for sf in self.scale_factors
        ]
        cost_drivers = [
            cd.with_rating(cost_driver_ratings[cd.id]) if cd.id in cost_driver_ratings else cd
            for cd in self.cost_drivers
        ]
        changes = {"scale_factors": scale_factors, "cost_drivers": cost_drivers}
        if project_size is not None:
            changes["project_size"] = project_size
        if model is not None:
            changes["model"] = model
        return self._rebuild(**changes)

    def with_project_size(self, project_size: float) -> "ParametricEstimate":
        return self._rebuild(project_size=project_size)

    def with_model(self, model: ParametricModel) -> "ParametricEstimate":
        return self._rebuild(model=model)


class ParametricInput(BaseModel):
    """Caller input for a parametric estimate: ids and ratings, resolved against the catalog."""
    model_config = {"protected_namespaces": ()}

    model_id: str = Field(..., description="Catalog id of the parametric model")
    project_size: float = Field(..., description="KSLOC or function points; must be > 0")
    scale_factor_ratings: Dict[str, float] = Field(
        default_factory=dict, description="Scale factor id -> rating"
    )
    cost_driver_ratings: Dict[str, float] = Field(
        default_factory=dict, description="Cost driver id -> rating"
    )

    @field_validator("scale_factor_ratings", "cost_driver_ratings")
    @classmethod
    def ratings_in_range(cls, v: Dict[str, float]) -> Dict[str, float]:
        for rating in v.values():
            _check_rating(rating)
        return v


class RatingUpdate(BaseModel):
    """Changes to an existing parametric estimate."""
    model_config = {"protected_namespaces": ()}

    estimate_id: str = Field(..., description="Parametric estimate to update")
    scale_factor_ratings: Dict[str, float] = Field(default_factory=dict)
    cost_driver_ratings: Dict[str, float] = Field(default_factory=dict)
    project_size: Optional[float] = Field(None, description="New size, if it changed")
    model_id: Optional[str] = Field(None, description="New model, if it changed")

    @field_validator("scale_factor_ratings", "cost_driver_ratings")
    @classmethod
    def ratings_in_range(cls, v: Dict[str, float]) -> Dict[str, float]:
        for rating in v.values():
            _check_rating(rating)
        return v
