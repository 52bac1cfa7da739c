"""Factor contracts: named multipliers applied to estimated hours."""

from pydantic import BaseModel, Field
from enum import Enum


class FactorType(str, Enum):
    """Category of an estimation factor."""
    TEAM_EXPERIENCE = "team_experience"
    PROJECT_COMPLEXITY = "project_complexity"
    TECHNICAL_DEBT = "technical_debt"
    RISK_BUFFER = "risk_buffer"


class Factor(BaseModel):
    """A multiplier that affects the estimation.

    1.0 means no impact, > 1.0 increases time, < 1.0 decreases time.
    """
    id: str = Field(default="", description="Factor identifier")
    type: FactorType = Field(..., description="Factor category")
    name: str = Field(..., min_length=1, description="Human-readable factor name")
    description: str = Field(default="", description="When this factor applies")
    impact: float = Field(..., gt=0, description="Multiplier applied to hours")

    model_config = {"frozen": True}

    def apply(self, hours: float) -> float:
        """Apply the factor to the given hours."""
        return hours * self.impact
