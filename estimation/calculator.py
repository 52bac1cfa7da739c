"""Project-level total: activity-based calculation reconciled with the parametric estimate."""

import logging
from datetime import datetime

from catalog.base import ProcessRepository
from contracts import Estimate
from estimation.activity_based import calculate_activity_based
from estimation.reconciler import parametric_result, reconcile


logger = logging.getLogger(__name__)


def calculate_total_hours(estimate: Estimate, processes: ProcessRepository) -> Estimate:
    """Recalculate every process and the reconciled total.

    All-or-nothing: any failed lookup raises before a new snapshot exists,
    and the input estimate is never modified.

    Args:
        estimate: Estimate holding tasks, global factors and optionally a parametric estimate
        processes: Lookup for process definitions

    Returns:
        New Estimate with process hours and total_hours reflecting the current inputs
    """
    process_estimates, activity = calculate_activity_based(
        estimate.process_estimates, estimate.global_factors, processes
    )

    parametric = None
    if estimate.parametric_estimate is not None:
        parametric = parametric_result(estimate.parametric_estimate)

    total_hours = reconcile(activity, parametric)
    logger.debug(
        "Estimate %s: activity %.2f h, parametric %s, reconciled %.2f h",
        estimate.id or "<unsaved>",
        activity.total_hours,
        f"{parametric.total_hours:.2f} h" if parametric else "none",
        total_hours,
    )

    return estimate.model_copy(
        update={
            "process_estimates": process_estimates,
            "total_hours": total_hours,
            "updated_at": datetime.now(),
        }
    )
