"""Detailed result contracts: ranges, phases, factor analysis and risks.

A DetailedResult is a read-only projection of a ParametricEstimate. It is
regenerated on demand and never stored.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum


class RiskLevel(str, Enum):
    """Overall or per-item risk level."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskCategory(str, Enum):
    """Area a risk belongs to."""
    TECHNICAL = "Technical"
    COST = "Cost"
    SCHEDULE = "Schedule"
    PROCESS = "Process"


class ValueRange(BaseModel):
    """Optimistic / nominal / pessimistic spread around a figure."""
    optimistic: float
    nominal: float
    pessimistic: float


class TeamSizeRange(BaseModel):
    minimum: float
    average: float
    maximum: float


class CostRange(BaseModel):
    minimum: float
    nominal: float
    maximum: float


class CostEstimate(BaseModel):
    """Cost figures; present only when an hourly rate was given."""
    hourly_rate: float = Field(..., gt=0)
    total_cost: float = Field(..., ge=0)
    cost_range: CostRange


class PhaseEffort(BaseModel):
    """Effort and schedule share of one development phase."""
    phase: str
    percent_effort: float = Field(..., ge=0, le=1)
    percent_duration: float = Field(..., ge=0, le=1)
    effort: float = Field(..., description="Person-months for this phase")
    duration: float = Field(..., description="Calendar months for this phase")
    average_staff: float = Field(..., description="effort / duration")


class FactorAnalysis(BaseModel):
    """Impact analysis of one scale factor or cost driver."""
    name: str
    rating: float
    impact: float = Field(..., description="weight * rating for scale factors, value for cost drivers")
    sensitivity: float
    recommendation: str = Field(default="", description="Empty unless the factor is worth improving")


class RiskFactor(BaseModel):
    """A project risk identified from the parametric inputs."""
    category: RiskCategory
    name: str
    level: RiskLevel
    impact: float
    description: str
    mitigation: str


class DetailedResult(BaseModel):
    """Full report expanded from a computed ParametricEstimate."""
    project_size: float
    model_type: str = Field(..., description="Name of the parametric model used")

    base_effort: float = Field(..., description="A * Size^B, no factor adjustment")
    adjusted_effort: float = Field(..., description="Effort after scale factors and cost drivers")
    effort_range: ValueRange

    duration: float
    duration_range: ValueRange

    team_size: float
    team_size_range: TeamSizeRange

    cost_estimate: Optional[CostEstimate] = None

    phase_distribution: List[PhaseEffort] = Field(default_factory=list)

    scale_factor_analysis: List[FactorAnalysis] = Field(default_factory=list)
    cost_driver_analysis: List[FactorAnalysis] = Field(default_factory=list)

    risk_level: RiskLevel
    risk_factors: List[RiskFactor] = Field(default_factory=list)
