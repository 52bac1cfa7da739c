"""Exception hierarchy for the Effort Estimator.

Validation errors are caller-fixable; not-found errors signal a broken
reference into the catalog. Neither is retried: any failure aborts the
whole estimate computation before anything is saved.
"""

from typing import Any, Dict, Optional


class EstimationError(Exception):
    """Base exception for all estimation errors."""

    def __init__(
        self,
        message: str,
        component: str = "unknown",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.component = component
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "component": self.component,
            "details": self.details,
        }


class EstimationValidationError(EstimationError):
    pass


class NotFoundError(EstimationError):
    """An id that does not exist in the catalog or repository."""

    def __init__(self, entity: str, entity_id: str, component: str = "catalog"):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} not found: {entity_id!r}",
            component=component,
            details={"entity": entity, "id": entity_id},
        )


class ActivityNotFoundError(NotFoundError):
    """A task references an activity missing from its process."""

    def __init__(self, activity_id: str, process_id: str):
        super().__init__("activity", activity_id, component="activity_based")
        self.process_id = process_id
        self.message = f"activity {activity_id!r} not found in process {process_id!r}"
        self.details["process_id"] = process_id
        self.args = (self.message,)


class TaskProcessMismatchError(EstimationError):
    pass
