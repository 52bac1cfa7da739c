"""In-memory repositories.

The parametric catalog is read-only once built and safe to share between
concurrent computations. The other repositories are plain dict stores used by
the CLI and the tests.
"""

import secrets
from types import MappingProxyType
from typing import Dict, Iterable, List

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
from errors import NotFoundError
from .base import (
    EstimateRepository,
    FactorRepository,
    ParametricCatalog,
    ParametricEstimateRepository,
    ProcessRepository,
)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{secrets.token_hex(4)}"


class InMemoryParametricCatalog(ParametricCatalog):
    """Immutable catalog built from model, scale factor and cost driver entries."""

    def __init__(
        self,
        models: Iterable[ParametricModel],
        scale_factors: Iterable[ScaleFactor],
        cost_drivers: Iterable[CostDriver],
    ):
        self._models = MappingProxyType({m.id: m for m in models})
        self._scale_factors = MappingProxyType({sf.id: sf for sf in scale_factors})
        self._cost_drivers = MappingProxyType({cd.id: cd for cd in cost_drivers})

    def find_model_by_id(self, model_id: str) -> ParametricModel:
        try:
            return self._models[model_id]
        except KeyError:
            raise NotFoundError("parametric model", model_id) from None

    def find_scale_factor_by_id(self, factor_id: str) -> ScaleFactor:
        try:
            return self._scale_factors[factor_id]
        except KeyError:
            raise NotFoundError("scale factor", factor_id) from None

    def find_cost_driver_by_id(self, driver_id: str) -> CostDriver:
        try:
            return self._cost_drivers[driver_id]
        except KeyError:
            raise NotFoundError("cost driver", driver_id) from None

    def list_models(self) -> List[ParametricModel]:
        return list(self._models.values())

    def list_scale_factors(self) -> List[ScaleFactor]:
        return list(self._scale_factors.values())

    def list_cost_drivers(self) -> List[CostDriver]:
        return list(self._cost_drivers.values())


class InMemoryProcessRepository(ProcessRepository):

    def __init__(self, processes: Iterable[Process] = ()):
        self._processes: Dict[str, Process] = {p.id: p for p in processes}

    def find_by_id(self, process_id: str) -> Process:
        try:
            return self._processes[process_id]
        except KeyError:
            raise NotFoundError("process", process_id) from None

    def find_by_category(self, category: ProcessCategory) -> Process:
        for process in self.find_all():
            if process.category == category:
                return process
        raise NotFoundError("process", ProcessCategory(category).value)

    def find_all(self) -> List[Process]:
        return sorted(self._processes.values(), key=lambda p: p.order)

    def save(self, process: Process) -> Process:
        self._processes[process.id] = process
        return process

    def update(self, process: Process) -> Process:
        self.find_by_id(process.id)
        self._processes[process.id] = process
        return process


class InMemoryFactorRepository(FactorRepository):

    def __init__(self, factors: Iterable[Factor] = ()):
        self._factors: Dict[str, Factor] = {}
        for factor in factors:
            self.save(factor)

    def find_by_id(self, factor_id: str) -> Factor:
        try:
            return self._factors[factor_id]
        except KeyError:
            raise NotFoundError("factor", factor_id) from None

    def find_all(self) -> List[Factor]:
        return list(self._factors.values())

    def save(self, factor: Factor) -> Factor:
        if not factor.id:
            factor = factor.model_copy(update={"id": _new_id("factor")})
        self._factors[factor.id] = factor
        return factor

    def update(self, factor: Factor) -> Factor:
        self.find_by_id(factor.id)
        self._factors[factor.id] = factor
        return factor

    def delete(self, factor_id: str) -> None:
        self.find_by_id(factor_id)
        del self._factors[factor_id]


class InMemoryParametricEstimateRepository(ParametricEstimateRepository):

    def __init__(self):
        self._estimates: Dict[str, ParametricEstimate] = {}

    def save(self, estimate: ParametricEstimate) -> ParametricEstimate:
        if not estimate.id:
            # the id takes no part in the derived figures
            estimate = estimate.model_copy(update={"id": _new_id("parametric")})
        self._estimates[estimate.id] = estimate
        return estimate

    def find_by_id(self, estimate_id: str) -> ParametricEstimate:
        try:
            return self._estimates[estimate_id]
        except KeyError:
            raise NotFoundError("parametric estimate", estimate_id, component="repository") from None


class InMemoryEstimateRepository(EstimateRepository):

    def __init__(self):
        self._estimates: Dict[str, Estimate] = {}

    def save(self, estimate: Estimate) -> Estimate:
        if not estimate.id:
            estimate = estimate.model_copy(update={"id": _new_id("estimate")})
        self._estimates[estimate.id] = estimate
        return estimate

    def update(self, estimate: Estimate) -> Estimate:
        self.find_by_id(estimate.id)
        self._estimates[estimate.id] = estimate
        return estimate

    def find_by_id(self, estimate_id: str) -> Estimate:
        try:
            return self._estimates[estimate_id]
        except KeyError:
            raise NotFoundError("estimate", estimate_id, component="repository") from None

    def find_by_project_id(self, project_id: str) -> List[Estimate]:
        return [e for e in self._estimates.values() if e.project_id == project_id]

    def delete(self, estimate_id: str) -> None:
        self.find_by_id(estimate_id)
        del self._estimates[estimate_id]
