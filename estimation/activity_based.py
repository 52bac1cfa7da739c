"""Activity-based (bottom-up) calculation.

For each process: task hours = activity base hours * scale * complexity
multiplier, then every task factor in order; the process subtotal is stored
as base hours, then every global factor is applied in order to give the
process total. The project total is the sum of process totals.
"""

import logging
from typing import List, Sequence, Tuple

from catalog.base import ProcessRepository
from contracts import (
    CalculationMethod,
    CalculationResult,
    Factor,
    Process,
    ProcessEstimate,
    Task,
)
from errors import ActivityNotFoundError, TaskProcessMismatchError
from estimation.detailed_result import HOURS_PER_PERSON_MONTH


logger = logging.getLogger(__name__)

DEFAULT_TEAM_SIZE = 5.0
ACTIVITY_BASED_CONFIDENCE = 0.8


def calculate_task_hours(task: Task, process: Process) -> float:
    """Hours for one task, resolved against its owning process."""
    if task.process_id != process.id:
        raise TaskProcessMismatchError(
            f"task {task.name!r} belongs to process {task.process_id!r}, "
            f"not {process.id!r}",
            component="activity_based",
            details={"task_process_id": task.process_id, "process_id": process.id},
        )
    activity = process.find_activity(task.activity_id)
    if activity is None:
        raise ActivityNotFoundError(task.activity_id, process.id)
    return task.calculate_hours(activity)


def apply_factors(hours: float, factors: Sequence[Factor]) -> float:
    for factor in factors:
        hours = factor.apply(hours)
    return hours


def calculate_activity_based(
    process_estimates: Sequence[ProcessEstimate],
    global_factors: Sequence[Factor],
    processes: ProcessRepository,
) -> Tuple[List[ProcessEstimate], CalculationResult]:
    """Compute per-process hours and the activity-based project total.

    Args:
        process_estimates: Tasks grouped by process
        global_factors: Project-wide factors, applied to each process subtotal
        processes: Lookup for process definitions and their activities

    Returns:
        (recalculated copies of the process estimates, CalculationResult)

    Raises:
        NotFoundError: a process id is unknown
        ActivityNotFoundError: a task references an activity missing from its process
    """
    updated: List[ProcessEstimate] = []
    project_total = 0.0

    for pe in process_estimates:
        process = processes.find_by_id(pe.process_id)

        process_base = sum(calculate_task_hours(task, process) for task in pe.tasks)
        process_total = apply_factors(process_base, global_factors)

        updated.append(
            pe.model_copy(
                update={
                    "process_name": pe.process_name or process.name,
                    "base_hours": process_base,
                    "total_hours": process_total,
                }
            )
        )
        project_total += process_total
        logger.debug(
            "Process %s: %d tasks, base %.2f h, total %.2f h",
            process.id, len(pe.tasks), process_base, process_total,
        )

    person_months = project_total / HOURS_PER_PERSON_MONTH
    result = CalculationResult(
        method=CalculationMethod.ACTIVITY_BASED,
        total_hours=project_total,
        person_months=person_months,
        team_size=DEFAULT_TEAM_SIZE,
        duration_months=person_months / DEFAULT_TEAM_SIZE,
        confidence=ACTIVITY_BASED_CONFIDENCE,
    )
    return updated, result
