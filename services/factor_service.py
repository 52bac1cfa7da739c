"""Factor use cases."""

import logging
from typing import List, Optional

from catalog.base import FactorRepository
from contracts import Factor, FactorType
from errors import EstimationValidationError


logger = logging.getLogger(__name__)


def _validate(name: str, impact: float) -> None:
    if not name or not name.strip():
        raise EstimationValidationError("factor name is required", component="factor_service")
    if impact <= 0:
        raise EstimationValidationError(
            "factor impact must be greater than 0",
            component="factor_service",
            details={"name": name, "impact": impact},
        )


class FactorService:
    """Create, read, update and delete estimation factors."""

    def __init__(self, factors: FactorRepository):
        self.factors = factors

    def create_factor(
        self,
        factor_type: FactorType,
        name: str,
        impact: float,
        description: str = "",
    ) -> Factor:
        _validate(name, impact)
        factor = self.factors.save(
            Factor(type=factor_type, name=name, impact=impact, description=description)
        )
        logger.info("Created factor %s (%s, impact %.2f)", factor.id, factor.name, factor.impact)
        return factor

    def update_factor(
        self,
        factor_id: str,
        name: Optional[str] = None,
        impact: Optional[float] = None,
        description: Optional[str] = None,
    ) -> Factor:
        """Replace the given fields of an existing factor; None keeps the current value."""
        current = self.factors.find_by_id(factor_id)
        changes = {
            key: value
            for key, value in (("name", name), ("impact", impact), ("description", description))
            if value is not None
        }
        _validate(changes.get("name", current.name), changes.get("impact", current.impact))

        factor = self.factors.update(Factor.model_validate({**current.model_dump(), **changes}))
        logger.info("Updated factor %s", factor.id)
        return factor

    def get_factor(self, factor_id: str) -> Factor:
        return self.factors.find_by_id(factor_id)

    def list_factors(self) -> List[Factor]:
        return self.factors.find_all()

    def delete_factor(self, factor_id: str) -> None:
        self.factors.delete(factor_id)
        logger.info("Deleted factor %s", factor_id)
