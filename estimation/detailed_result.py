"""Detailed result generation for a computed parametric estimate.

Expands effort / duration / team size into ranges, a phase breakdown,
per-factor sensitivity and a risk assessment. Reads the estimate only.
"""

import logging
from typing import List, Optional, Tuple

from contracts import (
    CostEstimate,
    CostRange,
    DetailedResult,
    FactorAnalysis,
    ParametricEstimate,
    PhaseEffort,
    RiskCategory,
    RiskFactor,
    RiskLevel,
    TeamSizeRange,
    ValueRange,
)
from contracts.effort_equation import power
from errors import EstimationValidationError


logger = logging.getLogger(__name__)

HOURS_PER_PERSON_MONTH = 160.0

# (low, high) multipliers around the nominal figure
EFFORT_RANGE = (0.8, 1.2)
DURATION_RANGE = (0.85, 1.15)
TEAM_SIZE_RANGE = (0.7, 1.3)
COST_RANGE = (0.8, 1.2)

# (phase, share of effort, share of duration). Phases overlap in time, so the
# duration shares do not sum to 1.
PHASE_DISTRIBUTION: Tuple[Tuple[str, float, float], ...] = (
    ("Requirements & Planning", 0.08, 0.15),
    ("System Design", 0.18, 0.25),
    ("Detailed Design", 0.25, 0.35),
    ("Construction & Unit Test", 0.26, 0.45),
    ("Integration Test", 0.15, 0.25),
    ("System Test", 0.08, 0.15),
)

SCALE_FACTOR_RECOMMENDATION_RATING = 3.5
COST_DRIVER_RECOMMENDATION_VALUE = 1.2
HIGH_RISK_SCALE_FACTOR_RATING = 4.0
HIGH_RISK_COST_DRIVER_VALUE = 1.3
HIGH_RISK_COUNT = 3
MEDIUM_RISK_COUNT = 1
LARGE_PROJECT_SIZE = 100.0
LARGE_PROJECT_IMPACT = 1.3

SCALE_FACTOR_RECOMMENDATION = "Improving this factor may reduce the required effort."
COST_DRIVER_RECOMMENDATION = "Optimising this driver may reduce the required effort."


def _spread(nominal: float, multipliers: Tuple[float, float]) -> ValueRange:
    low, high = multipliers
    return ValueRange(optimistic=nominal * low, nominal=nominal, pessimistic=nominal * high)


def estimate_cost(effort_pm: float, hourly_rate: float) -> Optional[CostEstimate]:
    """Cost at ``hourly_rate``; None when no rate was given."""
    if hourly_rate <= 0:
        return None
    total_cost = effort_pm * HOURS_PER_PERSON_MONTH * hourly_rate
    return CostEstimate(
        hourly_rate=hourly_rate,
        total_cost=total_cost,
        cost_range=CostRange(
            minimum=total_cost * COST_RANGE[0],
            nominal=total_cost,
            maximum=total_cost * COST_RANGE[1],
        ),
    )


def distribute_phases(effort_pm: float, duration_months: float) -> List[PhaseEffort]:
    """Split effort and schedule over the fixed phase table."""
    phases = []
    for name, percent_effort, percent_duration in PHASE_DISTRIBUTION:
        effort = effort_pm * percent_effort
        duration = duration_months * percent_duration
        phases.append(
            PhaseEffort(
                phase=name,
                percent_effort=percent_effort,
                percent_duration=percent_duration,
                effort=effort,
                duration=duration,
                average_staff=effort / duration,
            )
        )
    return phases


def analyze_scale_factors(estimate: ParametricEstimate) -> List[FactorAnalysis]:
    """Impact = weight * rating; sensitivity = effect of half a rating point per person-month."""
    analyses = []
    for sf in estimate.scale_factors:
        analyses.append(
            FactorAnalysis(
                name=sf.name,
                rating=sf.rating,
                impact=sf.weight * sf.rating,
                sensitivity=(sf.weight * 0.5) / estimate.effort_pm,
                recommendation=(
                    SCALE_FACTOR_RECOMMENDATION
                    if sf.rating > SCALE_FACTOR_RECOMMENDATION_RATING
                    else ""
                ),
            )
        )
    return analyses


def analyze_cost_drivers(estimate: ParametricEstimate) -> List[FactorAnalysis]:
    """Impact = value; sensitivity = relative change for a 10% increase (always 0.1)."""
    analyses = []
    for cd in estimate.cost_drivers:
        increased = cd.value * 1.1
        analyses.append(
            FactorAnalysis(
                name=cd.name,
                rating=cd.rating,
                impact=cd.value,
                sensitivity=(increased - cd.value) / cd.value,
                recommendation=(
                    COST_DRIVER_RECOMMENDATION
                    if cd.value > COST_DRIVER_RECOMMENDATION_VALUE
                    else ""
                ),
            )
        )
    return analyses


def count_high_risk_factors(estimate: ParametricEstimate) -> int:
    """Scale factors rated above 4.0 plus cost drivers valued above 1.3."""
    count = sum(1 for sf in estimate.scale_factors if sf.rating > HIGH_RISK_SCALE_FACTOR_RATING)
    count += sum(1 for cd in estimate.cost_drivers if cd.value > HIGH_RISK_COST_DRIVER_VALUE)
    return count


def assess_risk_level(estimate: ParametricEstimate) -> RiskLevel:
    """High for 3+ high-risk factors, Medium for 1+, otherwise Low."""
    count = count_high_risk_factors(estimate)
    if count >= HIGH_RISK_COUNT:
        return RiskLevel.HIGH
    if count >= MEDIUM_RISK_COUNT:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def identify_risk_factors(estimate: ParametricEstimate) -> List[RiskFactor]:
    risks = []

    for sf in estimate.scale_factors:
        if sf.rating > HIGH_RISK_SCALE_FACTOR_RATING:
            risks.append(
                RiskFactor(
                    category=RiskCategory.PROCESS,
                    name=sf.name,
                    level=RiskLevel.HIGH,
                    impact=sf.weight * sf.rating,
                    description="High scale factor rating inflates the effort exponent",
                    mitigation="Consider process improvements and risk reduction measures",
                )
            )

    for cd in estimate.cost_drivers:
        if cd.value > HIGH_RISK_COST_DRIVER_VALUE:
            risks.append(
                RiskFactor(
                    category=RiskCategory.TECHNICAL,
                    name=cd.name,
                    level=RiskLevel.HIGH,
                    impact=cd.value,
                    description="High cost driver value multiplies the required effort",
                    mitigation="Consider technical countermeasures and improvements",
                )
            )

    if estimate.project_size > LARGE_PROJECT_SIZE:
        risks.append(
            RiskFactor(
                category=RiskCategory.TECHNICAL,
                name="Large project",
                level=RiskLevel.MEDIUM,
                impact=LARGE_PROJECT_IMPACT,
                description="Project size increases integration and coordination complexity",
                mitigation="Consider modularisation and incremental delivery",
            )
        )

    return risks


def generate_detailed_result(
    estimate: ParametricEstimate,
    hourly_rate: float = 0.0,
) -> DetailedResult:
    """Expand a computed estimate into the full report.

    Args:
        estimate: A computed ParametricEstimate
        hourly_rate: Cost per hour; 0 omits the cost section

    Returns:
        DetailedResult; the estimate is not modified
    """
    if hourly_rate < 0:
        raise EstimationValidationError(
            "hourly rate must not be negative",
            component="detailed_result",
            details={"hourly_rate": hourly_rate},
        )

    effort_pm = estimate.effort_pm
    duration = estimate.duration_months
    team_size = estimate.team_size

    result = DetailedResult(
        project_size=estimate.project_size,
        model_type=estimate.model.name,
        base_effort=estimate.model.a * power(estimate.project_size, estimate.model.b, estimate.power_mode),
        adjusted_effort=effort_pm,
        effort_range=_spread(effort_pm, EFFORT_RANGE),
        duration=duration,
        duration_range=_spread(duration, DURATION_RANGE),
        team_size=team_size,
        team_size_range=TeamSizeRange(
            minimum=team_size * TEAM_SIZE_RANGE[0],
            average=team_size,
            maximum=team_size * TEAM_SIZE_RANGE[1],
        ),
        cost_estimate=estimate_cost(effort_pm, hourly_rate),
        phase_distribution=distribute_phases(effort_pm, duration),
        scale_factor_analysis=analyze_scale_factors(estimate),
        cost_driver_analysis=analyze_cost_drivers(estimate),
        risk_level=assess_risk_level(estimate),
        risk_factors=identify_risk_factors(estimate),
    )
    logger.debug(
        "Detailed result for %s: effort=%.3f PM, risk=%s, %d risk factors",
        estimate.id or "<unsaved>", effort_pm, result.risk_level.value, len(result.risk_factors),
    )
    return result
