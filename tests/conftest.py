"""Shared fixtures: a small process catalog, a few factors and wired services."""

import pytest

from catalog import (
    InMemoryEstimateRepository,
    InMemoryFactorRepository,
    InMemoryParametricEstimateRepository,
    InMemoryProcessRepository,
    default_catalog,
)
from contracts import (
    Activity,
    Factor,
    FactorType,
    Process,
    ProcessCategory,
)
from services import EstimateService, FactorService, ParametricEstimationService, ProcessService


def _make_processes():
    return [
        Process(
            id="dev",
            category=ProcessCategory.IMPLEMENTATION,
            name="Implementation",
            order=2,
            activities=[Activity(id="code", name="Coding", base_hours=40.0)],
        ),
        Process(
            id="req",
            category=ProcessCategory.REQUIREMENT_DEFINITION,
            name="Requirement Definition",
            order=1,
            activities=[
                Activity(id="interview", name="Stakeholder interviews", base_hours=10.0),
                Activity(id="reqdoc", name="Requirements document", base_hours=20.0),
            ],
        ),
    ]


def _make_factors():
    return [
        Factor(id="f-team", type=FactorType.TEAM_EXPERIENCE, name="Junior team", impact=1.1),
        Factor(id="f-debt", type=FactorType.TECHNICAL_DEBT, name="Legacy code", impact=1.2),
        Factor(id="f-risk", type=FactorType.RISK_BUFFER, name="Risk buffer", impact=1.5),
    ]


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def processes():
    return InMemoryProcessRepository(_make_processes())


@pytest.fixture
def factors():
    return InMemoryFactorRepository(_make_factors())


@pytest.fixture
def parametric_repo():
    return InMemoryParametricEstimateRepository()


@pytest.fixture
def estimate_repo():
    return InMemoryEstimateRepository()


@pytest.fixture
def parametric_service(catalog, parametric_repo):
    return ParametricEstimationService(catalog, parametric_repo)


@pytest.fixture
def factor_service(factors):
    return FactorService(factors)


@pytest.fixture
def process_service(processes):
    return ProcessService(processes)


@pytest.fixture
def estimate_service(estimate_repo, processes, factors, parametric_service):
    return EstimateService(estimate_repo, processes, factors, parametric_service)
