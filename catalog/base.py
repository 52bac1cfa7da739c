"""Repository interfaces the engine reads from and the use cases write to."""

from abc import ABC, abstractmethod
from typing import List

from contracts import (
    CostDriver,
    Estimate,
    Factor,
    ParametricEstimate,
    ParametricModel,
    Process,
    ProcessCategory,
    ScaleFactor,
)


class ParametricCatalog(ABC):
    """Read-only catalog of parametric models, scale factors and cost drivers.

    Every ``find_*`` raises NotFoundError for an unknown id.
    """

    @abstractmethod
    def find_model_by_id(self, model_id: str) -> ParametricModel:
        pass

    @abstractmethod
    def find_scale_factor_by_id(self, factor_id: str) -> ScaleFactor:
        pass

    @abstractmethod
    def find_cost_driver_by_id(self, driver_id: str) -> CostDriver:
        pass

    @abstractmethod
    def list_models(self) -> List[ParametricModel]:
        pass

    @abstractmethod
    def list_scale_factors(self) -> List[ScaleFactor]:
        pass

    @abstractmethod
    def list_cost_drivers(self) -> List[CostDriver]:
        pass


class ProcessRepository(ABC):
    """Process definitions with their activities."""

    @abstractmethod
    def find_by_id(self, process_id: str) -> Process:
        pass

    @abstractmethod
    def find_by_category(self, category: ProcessCategory) -> Process:
        pass

    @abstractmethod
    def find_all(self) -> List[Process]:
        """All processes in their natural order."""
        pass

    @abstractmethod
    def save(self, process: Process) -> Process:
        pass

    @abstractmethod
    def update(self, process: Process) -> Process:
        """Replace an existing process; raises NotFoundError for an unknown id."""
        pass


class FactorRepository(ABC):
    """Estimation factors."""

    @abstractmethod
    def find_by_id(self, factor_id: str) -> Factor:
        pass

    @abstractmethod
    def find_all(self) -> List[Factor]:
        pass

    @abstractmethod
    def save(self, factor: Factor) -> Factor:
        """Store a new factor; assigns an id when it has none."""
        pass

    @abstractmethod
    def update(self, factor: Factor) -> Factor:
        pass

    @abstractmethod
    def delete(self, factor_id: str) -> None:
        pass


class ParametricEstimateRepository(ABC):
    """Stored parametric estimates."""

    @abstractmethod
    def save(self, estimate: ParametricEstimate) -> ParametricEstimate:
        """Store (insert or replace); assigns an id when it has none."""
        pass

    @abstractmethod
    def find_by_id(self, estimate_id: str) -> ParametricEstimate:
        pass


class EstimateRepository(ABC):
    """Stored project estimates."""

    @abstractmethod
    def save(self, estimate: Estimate) -> Estimate:
        """Store a new estimate; assigns an id when it has none."""
        pass

    @abstractmethod
    def update(self, estimate: Estimate) -> Estimate:
        pass

    @abstractmethod
    def find_by_id(self, estimate_id: str) -> Estimate:
        pass

    @abstractmethod
    def find_by_project_id(self, project_id: str) -> List[Estimate]:
        pass

    @abstractmethod
    def delete(self, estimate_id: str) -> None:
        pass
