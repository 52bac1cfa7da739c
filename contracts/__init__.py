"""Pydantic contracts for the Effort Estimator.

Everything the engine consumes or returns is typed through these contracts.
"""

from .effort_equation import (
    PowerMode,
    EffortFigures,
    calculate_effort,
    real_power,
    truncated_power,
)

from .factor_contracts import (
    FactorType,
    Factor,
)

from .parametric_contracts import (
    RATING_LEVELS,
    NOMINAL_RATING,
    rating_label,
    ScaleFactorType,
    CostDriverGroup,
    CostDriverType,
    COST_DRIVER_GROUPS,
    ScaleFactor,
    CostDriver,
    ParametricModel,
    ParametricEstimate,
    ParametricInput,
    RatingUpdate,
)

from .process_contracts import (
    ProcessCategory,
    Activity,
    Process,
    Task,
    complexity_multiplier,
)

from .result_contracts import (
    RiskLevel,
    RiskCategory,
    ValueRange,
    TeamSizeRange,
    CostRange,
    CostEstimate,
    PhaseEffort,
    FactorAnalysis,
    RiskFactor,
    DetailedResult,
)

from .estimate_contracts import (
    EstimateStatus,
    CalculationMethod,
    CalculationResult,
    ProcessEstimate,
    Estimate,
    TaskInput,
    CreateEstimateInput,
    UpdateEstimateInput,
    ProcessComparison,
    EstimateComparison,
)

__all__ = [
    # Effort equation
    "PowerMode",
    "EffortFigures",
    "calculate_effort",
    "real_power",
    "truncated_power",
    # Factors
    "FactorType",
    "Factor",
    # Parametric model
    "RATING_LEVELS",
    "NOMINAL_RATING",
    "rating_label",
    "ScaleFactorType",
    "CostDriverGroup",
    "CostDriverType",
    "COST_DRIVER_GROUPS",
    "ScaleFactor",
    "CostDriver",
    "ParametricModel",
    "ParametricEstimate",
    "ParametricInput",
    "RatingUpdate",
    # Processes
    "ProcessCategory",
    "Activity",
    "Process",
    "Task",
    "complexity_multiplier",
    # Detailed result
    "RiskLevel",
    "RiskCategory",
    "ValueRange",
    "TeamSizeRange",
    "CostRange",
    "CostEstimate",
    "PhaseEffort",
    "FactorAnalysis",
    "RiskFactor",
    "DetailedResult",
    # Estimate
    "EstimateStatus",
    "CalculationMethod",
    "CalculationResult",
    "ProcessEstimate",
    "Estimate",
    "TaskInput",
    "CreateEstimateInput",
    "UpdateEstimateInput",
    "ProcessComparison",
    "EstimateComparison",
]
