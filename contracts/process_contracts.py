"""Process, activity and task contracts for the activity-based estimate."""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum

from .factor_contracts import Factor


MIN_COMPLEXITY = 1
MAX_COMPLEXITY = 5


class ProcessCategory(str, Enum):
    """Main development process categories, in their natural order."""
    REQUIREMENT_DEFINITION = "requirement_definition"
    FUNCTIONAL_SPECIFICATION = "functional_specification"
    BASIC_DESIGN = "basic_design"
    DETAILED_DESIGN = "detailed_design"
    IMPLEMENTATION = "implementation"
    TESTING = "testing"
    DELIVERY = "delivery"


class Activity(BaseModel):
    """A standard activity within a process."""
    id: str = Field(..., min_length=1, description="Activity identifier")
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    base_hours: float = Field(..., ge=0, description="Standard base hours for this activity")
    deliverables: List[str] = Field(default_factory=list, description="Expected deliverables")

    model_config = {"frozen": True}


class Process(BaseModel):
    """A development process category and its standard activities."""
    id: str = Field(..., min_length=1, description="Process identifier")
    category: ProcessCategory
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    activities: List[Activity] = Field(default_factory=list)
    order: int = Field(default=0, description="Position in the natural process order")

    model_config = {"frozen": True}

    def find_activity(self, activity_id: str) -> Optional[Activity]:
        for activity in self.activities:
            if activity.id == activity_id:
                return activity
        return None


def complexity_multiplier(complexity: int) -> float:
    """0.8 + 0.2 * complexity: 1 -> 1.0, 3 -> 1.4, 5 -> 1.8."""
    return 0.8 + 0.2 * complexity


class Task(BaseModel):
    """A development task estimated against a catalog activity."""
    id: str = Field(default="", description="Task identifier")
    process_id: str = Field(..., min_length=1, description="Process this task belongs to")
    activity_id: str = Field(..., min_length=1, description="Activity within the process")
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    complexity: int = Field(3, ge=MIN_COMPLEXITY, le=MAX_COMPLEXITY, description="1-5 scale")
    scale: float = Field(1.0, gt=0, description="Size multiplier for the activity's base hours")
    dependencies: List[str] = Field(default_factory=list, description="IDs of tasks this one depends on")
    custom_factors: List[Factor] = Field(default_factory=list, description="Task-specific factors")

    def calculate_base_hours(self, activity: Activity) -> float:
        """activity.base_hours * scale * complexity multiplier (before factors)."""
        return activity.base_hours * self.scale * complexity_multiplier(self.complexity)

    def calculate_hours(self, activity: Activity) -> float:
        """Base hours with every custom factor applied in order."""
        hours = self.calculate_base_hours(activity)
        for factor in self.custom_factors:
            hours = factor.apply(hours)
        return hours
