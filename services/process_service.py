"""Process use cases: read the process catalog and adjust activity hours."""

import logging
from typing import List

from catalog.base import ProcessRepository
from contracts import Activity, Process, ProcessCategory
from errors import ActivityNotFoundError


logger = logging.getLogger(__name__)


class ProcessService:
    """Reads and updates development processes and their activities.

    Stored estimates keep only process and activity ids, so a change made
    here shows up in an estimate the next time it is recalculated.
    """

    def __init__(self, processes: ProcessRepository):
        self.processes = processes

    def get_process(self, process_id: str) -> Process:
        return self.processes.find_by_id(process_id)

    def get_process_by_category(self, category: ProcessCategory) -> Process:
        return self.processes.find_by_category(ProcessCategory(category))

    def list_processes(self) -> List[Process]:
        """All processes in their natural order."""
        return self.processes.find_all()

    def update_process(self, process: Process) -> Process:
        """Replace an existing process.

        Raises:
            NotFoundError: no process with this id
        """
        process = self.processes.update(process)
        logger.info("Updated process %s (%d activities)", process.id, len(process.activities))
        return process

    def update_activity(self, process_id: str, activity: Activity) -> Process:
        """Replace the activity with the same id within a process.

        Raises:
            NotFoundError: unknown process
            ActivityNotFoundError: the process has no activity with this id
        """
        process = self.processes.find_by_id(process_id)
        if process.find_activity(activity.id) is None:
            logger.warning("Activity %r not found in process %r", activity.id, process_id)
            raise ActivityNotFoundError(activity.id, process_id)

        activities = [activity if a.id == activity.id else a for a in process.activities]
        process = self.processes.update(process.model_copy(update={"activities": activities}))
        logger.info(
            "Updated activity %s in process %s: %.1f base hours",
            activity.id, process.id, activity.base_hours,
        )
        return process
