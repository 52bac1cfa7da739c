"""Confidence-weighted reconciliation of the activity-based and parametric totals."""

from typing import Optional

from contracts import CalculationMethod, CalculationResult, ParametricEstimate
from estimation.detailed_result import HOURS_PER_PERSON_MONTH


PARAMETRIC_CONFIDENCE = 0.85


def parametric_result(estimate: ParametricEstimate) -> CalculationResult:
    """Express a parametric estimate as hours for reconciliation."""
    return CalculationResult(
        method=CalculationMethod.PARAMETRIC_BASED,
        total_hours=estimate.effort_pm * HOURS_PER_PERSON_MONTH,
        person_months=estimate.effort_pm,
        team_size=estimate.team_size,
        duration_months=estimate.duration_months,
        confidence=PARAMETRIC_CONFIDENCE,
    )


def reconcile(
    activity: CalculationResult,
    parametric: Optional[CalculationResult] = None,
) -> float:
    """Weighted average of the two totals by confidence.

    Without a parametric result the activity-based total is returned as is.
    """
    if parametric is None:
        return activity.total_hours

    a, b = activity.total_hours, parametric.total_hours
    if a == b:
        return a

    total_confidence = activity.confidence + parametric.confidence
    activity_weight = activity.confidence / total_confidence
    parametric_weight = parametric.confidence / total_confidence
    blended = a * activity_weight + b * parametric_weight

    # clamp to [min(a, b), max(a, b)]
    return min(max(blended, min(a, b)), max(a, b))
