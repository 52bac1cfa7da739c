"""Project-level estimate contracts and the inputs of the estimate use cases."""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .factor_contracts import Factor
from .parametric_contracts import ParametricEstimate, ParametricInput
from .process_contracts import Task, MIN_COMPLEXITY, MAX_COMPLEXITY


class EstimateStatus(str, Enum):
    """Lifecycle status of an estimate."""
    DRAFT = "draft"
    COMPLETED = "completed"
    APPROVED = "approved"


class CalculationMethod(str, Enum):
    """Method that produced a CalculationResult."""
    ACTIVITY_BASED = "activity_based"
    PARAMETRIC_BASED = "parametric_based"


class CalculationResult(BaseModel):
    """Totals produced by one estimation method."""
    method: CalculationMethod
    total_hours: float = Field(..., ge=0)
    person_months: float = Field(..., ge=0)
    team_size: float = Field(..., ge=0)
    duration_months: float = Field(..., ge=0)
    confidence: float = Field(..., gt=0.0, le=1.0, description="Estimation confidence, 0-1")


class ProcessEstimate(BaseModel):
    """Estimation details for one process."""
    process_id: str = Field(..., min_length=1)
    process_name: str = Field(default="")
    tasks: List[Task] = Field(default_factory=list)
    base_hours: float = Field(default=0.0, ge=0, description="Sum of task hours before global factors")
    total_hours: float = Field(default=0.0, ge=0, description="After applying global factors")


class Estimate(BaseModel):
    """Work effort estimation for the entire project."""
    id: str = Field(default="")
    project_id: str = Field(..., min_length=1)
    project_name: str = Field(..., min_length=1)
    process_estimates: List[ProcessEstimate] = Field(default_factory=list)
    global_factors: List[Factor] = Field(default_factory=list, description="Factors applied project-wide")
    parametric_estimate: Optional[ParametricEstimate] = None
    total_hours: float = Field(default=0.0, ge=0, description="Reconciled total")
    status: EstimateStatus = EstimateStatus.DRAFT
    created_by: str = Field(default="")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    notes: str = Field(default="")

    @property
    def task_count(self) -> int:
        return sum(len(pe.tasks) for pe in self.process_estimates)


class TaskInput(BaseModel):
    """A task as submitted by the caller; factors are referenced by id."""
    process_id: str
    activity_id: str
    name: str
    description: str = ""
    complexity: int = Field(3, ge=MIN_COMPLEXITY, le=MAX_COMPLEXITY)
    scale: float = Field(1.0, gt=0)
    dependencies: List[str] = Field(default_factory=list)
    custom_factor_ids: List[str] = Field(default_factory=list)


class CreateEstimateInput(BaseModel):
    """Input for creating a project estimate."""
    project_id: str
    project_name: str
    tasks: List[TaskInput] = Field(default_factory=list)
    global_factor_ids: List[str] = Field(default_factory=list)
    parametric: Optional[ParametricInput] = None
    created_by: str = ""
    notes: str = ""


class UpdateEstimateInput(BaseModel):
    """Replacement values for an existing estimate; None leaves a part unchanged."""
    id: str
    tasks: Optional[List[TaskInput]] = None
    global_factor_ids: Optional[List[str]] = None
    parametric: Optional[ParametricInput] = None
    remove_parametric: bool = False
    notes: Optional[str] = None


class ProcessComparison(BaseModel):
    """Per-process difference between two estimates."""
    process_id: str
    process_name: str = ""
    first_hours: float = 0.0
    second_hours: float = 0.0
    difference_hours: float = 0.0


class EstimateComparison(BaseModel):
    """Difference between two estimates (second minus first)."""
    first_estimate_id: str
    second_estimate_id: str
    first_total_hours: float
    second_total_hours: float
    difference_hours: float
    percent_change: Optional[float] = Field(None, description="None when the first total is 0")
    processes: List[ProcessComparison] = Field(default_factory=list)
    effort_pm_difference: Optional[float] = Field(
        None, description="Parametric effort delta when both estimates have one"
    )

    @property
    def by_process(self) -> Dict[str, ProcessComparison]:
        return {p.process_id: p for p in self.processes}
