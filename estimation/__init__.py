"""Estimation engine: detailed results, activity-based totals and reconciliation."""

from .detailed_result import (
    HOURS_PER_PERSON_MONTH,
    PHASE_DISTRIBUTION,
    generate_detailed_result,
    assess_risk_level,
    identify_risk_factors,
)
from .activity_based import calculate_activity_based, calculate_task_hours
from .reconciler import parametric_result, reconcile
from .calculator import calculate_total_hours

__all__ = [
    "HOURS_PER_PERSON_MONTH",
    "PHASE_DISTRIBUTION",
    "generate_detailed_result",
    "assess_risk_level",
    "identify_risk_factors",
    "calculate_activity_based",
    "calculate_task_hours",
    "parametric_result",
    "reconcile",
    "calculate_total_hours",
]
