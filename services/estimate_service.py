"""Project estimate use cases.

An estimate is assembled from task inputs and factor ids, calculated with
``calculate_total_hours`` and only then saved, so a broken reference never
leaves a half-built estimate in the repository.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from catalog.base import EstimateRepository, FactorRepository, ProcessRepository
from contracts import (
    CreateEstimateInput,
    DetailedResult,
    Estimate,
    EstimateComparison,
    EstimateStatus,
    Factor,
    ParametricEstimate,
    ParametricInput,
    ProcessComparison,
    ProcessEstimate,
    Task,
    TaskInput,
    UpdateEstimateInput,
)
from errors import EstimationValidationError, NotFoundError
from estimation import calculate_total_hours, generate_detailed_result
from services.parametric_service import ParametricEstimationService


logger = logging.getLogger(__name__)


class EstimateService:
    """Creates, recalculates and compares project estimates."""

    def __init__(
        self,
        estimates: EstimateRepository,
        processes: ProcessRepository,
        factors: FactorRepository,
        parametric_service: ParametricEstimationService,
    ):
        """Initialize the service.

        Args:
            estimates: Store for project estimates
            processes: Process definitions the tasks are estimated against
            factors: Factors referenced by id from tasks and the project
            parametric_service: Builds the optional parametric side of an estimate
        """
        self.estimates = estimates
        self.processes = processes
        self.factors = factors
        self.parametric_service = parametric_service

    def create_estimate(self, data: CreateEstimateInput) -> Estimate:
        """Build, calculate and save a new estimate.

        Raises:
            EstimationValidationError: missing project id / name, or invalid parametric input
            NotFoundError: unknown process, activity, factor or catalog id
        """
        if not data.project_id:
            raise EstimationValidationError("project id is required", component="estimate_service")
        if not data.project_name:
            raise EstimationValidationError("project name is required", component="estimate_service")

        process_estimates = self._group_tasks(data.tasks)
        global_factors = self._resolve_factors(data.global_factor_ids)
        parametric = self._build_parametric(data.parametric)

        estimate = Estimate(
            project_id=data.project_id,
            project_name=data.project_name,
            process_estimates=process_estimates,
            global_factors=global_factors,
            parametric_estimate=parametric,
            created_by=data.created_by,
            notes=data.notes,
        )
        estimate = calculate_total_hours(estimate, self.processes)
        estimate = self.estimates.save(self._save_parametric(estimate))
        logger.info(
            "Created estimate %s for project %s: %d tasks, %.2f h",
            estimate.id, estimate.project_id, estimate.task_count, estimate.total_hours,
        )
        return estimate

    def update_estimate(self, data: UpdateEstimateInput) -> Estimate:
        """Replace the supplied parts of an estimate and recalculate it."""
        current = self.estimates.find_by_id(data.id)
        changes: Dict[str, object] = {}

        if data.tasks is not None:
            changes["process_estimates"] = self._group_tasks(data.tasks)
        if data.global_factor_ids is not None:
            changes["global_factors"] = self._resolve_factors(data.global_factor_ids)
        if data.remove_parametric:
            changes["parametric_estimate"] = None
        elif data.parametric is not None:
            changes["parametric_estimate"] = self._build_parametric(data.parametric)
        if data.notes is not None:
            changes["notes"] = data.notes

        estimate = calculate_total_hours(current.model_copy(update=changes), self.processes)
        estimate = self.estimates.update(self._save_parametric(estimate))
        logger.info("Updated estimate %s: %.2f h", estimate.id, estimate.total_hours)
        return estimate

    def recalculate(self, estimate_id: str) -> Estimate:
        """Recompute an estimate against the current processes, factors and parametric estimate.

        Factors are re-read by id and a stored parametric estimate is re-read
        from its repository; a reference that no longer resolves aborts the
        recalculation and leaves the stored estimate untouched.
        """
        current = self.estimates.find_by_id(estimate_id)

        process_estimates = [
            pe.model_copy(update={
                "tasks": [
                    task.model_copy(update={"custom_factors": self._refresh_factors(task.custom_factors)})
                    for task in pe.tasks
                ],
            })
            for pe in current.process_estimates
        ]
        parametric = current.parametric_estimate
        if parametric is not None and parametric.id:
            parametric = self.parametric_service.get_estimate(parametric.id)

        estimate = current.model_copy(update={
            "process_estimates": process_estimates,
            "global_factors": self._refresh_factors(current.global_factors),
            "parametric_estimate": parametric,
        })
        estimate = calculate_total_hours(estimate, self.processes)
        estimate = self.estimates.update(estimate)
        logger.info("Recalculated estimate %s: %.2f h", estimate.id, estimate.total_hours)
        return estimate

    def get_estimate(self, estimate_id: str) -> Estimate:
        return self.estimates.find_by_id(estimate_id)

    def get_project_estimates(self, project_id: str) -> List[Estimate]:
        return self.estimates.find_by_project_id(project_id)

    def get_detailed_estimate(
        self, estimate_id: str, hourly_rate: float = 0.0
    ) -> Tuple[Estimate, Optional[DetailedResult]]:
        """The estimate plus, when it has a parametric side, its detailed result."""
        estimate = self.estimates.find_by_id(estimate_id)
        if estimate.parametric_estimate is None:
            return estimate, None
        return estimate, generate_detailed_result(estimate.parametric_estimate, hourly_rate)

    def compare_estimates(self, first_id: str, second_id: str) -> EstimateComparison:
        """Differences from the first estimate to the second."""
        first = self.estimates.find_by_id(first_id)
        second = self.estimates.find_by_id(second_id)

        difference = second.total_hours - first.total_hours
        percent_change = None
        if first.total_hours != 0:
            percent_change = difference / first.total_hours * 100

        effort_pm_difference = None
        if first.parametric_estimate is not None and second.parametric_estimate is not None:
            effort_pm_difference = (
                second.parametric_estimate.effort_pm - first.parametric_estimate.effort_pm
            )

        return EstimateComparison(
            first_estimate_id=first.id,
            second_estimate_id=second.id,
            first_total_hours=first.total_hours,
            second_total_hours=second.total_hours,
            difference_hours=difference,
            percent_change=percent_change,
            processes=_compare_processes(first.process_estimates, second.process_estimates),
            effort_pm_difference=effort_pm_difference,
        )

    def set_status(self, estimate_id: str, status: EstimateStatus) -> Estimate:
        estimate = self.estimates.find_by_id(estimate_id)
        estimate = self.estimates.update(
            estimate.model_copy(update={"status": EstimateStatus(status), "updated_at": datetime.now()})
        )
        logger.info("Estimate %s is now %s", estimate.id, estimate.status.value)
        return estimate

    def _build_parametric(self, data: Optional[ParametricInput]) -> Optional[ParametricEstimate]:
        if data is None:
            return None
        return self.parametric_service.build_estimate(data)

    def _save_parametric(self, estimate: Estimate) -> Estimate:
        """Store a freshly built parametric side once the whole estimate has calculated."""
        parametric = estimate.parametric_estimate
        if parametric is None or parametric.id:
            return estimate
        parametric = self.parametric_service.estimates.save(parametric)
        return estimate.model_copy(update={"parametric_estimate": parametric})

    def _resolve_factors(self, factor_ids: Sequence[str]) -> List[Factor]:
        resolved = []
        for factor_id in factor_ids:
            try:
                resolved.append(self.factors.find_by_id(factor_id))
            except NotFoundError:
                logger.warning("Unknown factor id %r", factor_id)
                raise
        return resolved

    def _refresh_factors(self, factors: Sequence[Factor]) -> List[Factor]:
        return self._resolve_factors([factor.id for factor in factors])

    def _group_tasks(self, tasks: Sequence[TaskInput]) -> List[ProcessEstimate]:
        """Group tasks into one ProcessEstimate per process, in process order."""
        grouped: Dict[str, List[Task]] = {}
        for index, task in enumerate(tasks, start=1):
            grouped.setdefault(task.process_id, []).append(
                Task(
                    id=f"task-{index}",
                    process_id=task.process_id,
                    activity_id=task.activity_id,
                    name=task.name,
                    description=task.description,
                    complexity=task.complexity,
                    scale=task.scale,
                    dependencies=task.dependencies,
                    custom_factors=self._resolve_factors(task.custom_factor_ids),
                )
            )

        processes = []
        for process_id in grouped:
            try:
                processes.append(self.processes.find_by_id(process_id))
            except NotFoundError:
                logger.warning("Unknown process id %r", process_id)
                raise
        processes.sort(key=lambda p: p.order)

        return [
            ProcessEstimate(process_id=p.id, process_name=p.name, tasks=grouped[p.id])
            for p in processes
        ]


def _compare_processes(
    first: Sequence[ProcessEstimate], second: Sequence[ProcessEstimate]
) -> List[ProcessComparison]:
    first_by_id = {pe.process_id: pe for pe in first}
    second_by_id = {pe.process_id: pe for pe in second}

    comparisons = []
    for process_id in list(first_by_id) + [pid for pid in second_by_id if pid not in first_by_id]:
        before = first_by_id.get(process_id)
        after = second_by_id.get(process_id)
        first_hours = before.total_hours if before else 0.0
        second_hours = after.total_hours if after else 0.0
        comparisons.append(
            ProcessComparison(
                process_id=process_id,
                process_name=(before or after).process_name,
                first_hours=first_hours,
                second_hours=second_hours,
                difference_hours=second_hours - first_hours,
            )
        )
    return comparisons
