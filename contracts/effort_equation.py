"""Effort equation for the parametric model.

    PM   = A * Size^E * EM        E = B + sum(weight_i * rating_i)
    TDEV = C * PM^D               D = 0.28 + 0.2 * (E - 1.01)
    Team = PM / TDEV

Pure functions over plain floats. ``ParametricEstimate`` calls
``calculate_effort`` every time it is built, so the four derived figures
are always produced together.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from errors import EstimationValidationError


SCHEDULE_COEFFICIENT = 3.67  # C
SCHEDULE_BASE_EXPONENT = 0.28
SCHEDULE_EXPONENT_SLOPE = 0.2
SCHEDULE_EXPONENT_PIVOT = 1.01


class PowerMode(str, Enum):
    """How base**exponent is evaluated."""
    REAL = "real"
    # Repeats the multiplication int(exponent) times; reproduces the output of
    # the first-generation tool and nothing else.
    LEGACY_TRUNCATED = "legacy_truncated"


def real_power(base: float, exponent: float) -> float:
    """Real-valued exponentiation."""
    return math.pow(base, exponent)


def truncated_power(base: float, exponent: float) -> float:
    """Integer-truncated exponentiation (exponent 1.3 -> base, 0.9 -> 1.0)."""
    result = 1.0
    for _ in range(int(exponent)):
        result *= base
    return result


def power(base: float, exponent: float, mode: PowerMode = PowerMode.REAL) -> float:
    """Dispatch to the power function for ``mode``."""
    if mode == PowerMode.LEGACY_TRUNCATED:
        return truncated_power(base, exponent)
    return real_power(base, exponent)


@dataclass(frozen=True)
class EffortFigures:
    """Derived figures of one effort calculation."""
    exponent_b: float
    effort_multiplier: float
    effort_pm: float
    duration_months: float
    team_size: float


def scale_exponent(base_exponent: float, weighted_ratings: Iterable[Tuple[float, float]]) -> float:
    """E = B + sum(weight * rating)."""
    exponent = base_exponent
    for weight, rating in weighted_ratings:
        exponent += weight * rating
    return exponent


def effort_multiplier(values: Iterable[float]) -> float:
    """Product of cost driver values; 1.0 for no drivers."""
    em = 1.0
    for value in values:
        em *= value
    return em


def schedule_exponent(exponent_b: float) -> float:
    """D = 0.28 + 0.2 * (E - 1.01)."""
    return SCHEDULE_BASE_EXPONENT + SCHEDULE_EXPONENT_SLOPE * (exponent_b - SCHEDULE_EXPONENT_PIVOT)


def _overflow(project_size: float, exponent_b: float) -> EstimationValidationError:
    return EstimationValidationError(
        "effort equation overflowed; scale factor ratings are out of range",
        component="effort_equation",
        details={"project_size": project_size, "exponent_b": exponent_b},
    )


def calculate_effort(
    coefficient_a: float,
    base_exponent: float,
    project_size: float,
    weighted_ratings: Iterable[Tuple[float, float]],
    driver_values: Iterable[float],
    mode: PowerMode = PowerMode.REAL,
) -> EffortFigures:
    """Compute exponent, effort, duration and team size in one pass.

    Args:
        coefficient_a: Model calibration constant A
        base_exponent: Model base exponent B
        project_size: KSLOC or function points, must be > 0
        weighted_ratings: (weight, rating) per scale factor
        driver_values: Effort multiplier per cost driver
        mode: Exponentiation mode

    Returns:
        EffortFigures with team_size == effort_pm / duration_months
    """
    if project_size <= 0:
        raise EstimationValidationError(
            "project size must be greater than 0",
            component="effort_equation",
            details={"project_size": project_size},
        )

    exponent_b = scale_exponent(base_exponent, weighted_ratings)
    em = effort_multiplier(driver_values)
    try:
        effort_pm = coefficient_a * power(project_size, exponent_b, mode) * em
        duration_months = SCHEDULE_COEFFICIENT * power(effort_pm, schedule_exponent(exponent_b), mode)
    except OverflowError as exc:
        raise _overflow(project_size, exponent_b) from exc
    if not (math.isfinite(effort_pm) and math.isfinite(duration_months)) or duration_months <= 0:
        raise _overflow(project_size, exponent_b)

    return EffortFigures(
        exponent_b=exponent_b,
        effort_multiplier=em,
        effort_pm=effort_pm,
        duration_months=duration_months,
        team_size=effort_pm / duration_months,
    )
