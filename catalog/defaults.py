"""Standard parametric catalog: the two models, five scale factors and seventeen cost drivers.

Cost driver tables list one multiplier per rating level, Very Low through
Extra High. Levels the published model leaves undefined repeat the nearest
defined level.
"""

from typing import List

from contracts import (
    CostDriver,
    CostDriverType,
    ParametricModel,
    ScaleFactor,
    ScaleFactorType,
)
from .memory import InMemoryParametricCatalog


EARLY_DESIGN_ID = "early_design"
POST_ARCHITECTURE_ID = "post_architecture"


DEFAULT_MODELS: List[ParametricModel] = [
    ParametricModel(
        id=EARLY_DESIGN_ID,
        name="Early Design",
        description="Early Design model for estimates made before the architecture is settled",
        a=2.94,
        b=0.91,
    ),
    ParametricModel(
        id=POST_ARCHITECTURE_ID,
        name="Post-Architecture",
        description="Post-Architecture model for detailed estimation",
        a=2.45,
        b=0.91,
    ),
]


DEFAULT_SCALE_FACTORS: List[ScaleFactor] = [
    ScaleFactor(
        id="prec",
        type=ScaleFactorType.PRECEDENTEDNESS,
        name="Precedentedness",
        description="Experience with similar projects",
        weight=4.05,
    ),
    ScaleFactor(
        id="flex",
        type=ScaleFactorType.DEVELOPMENT_FLEXIBILITY,
        name="Development Flexibility",
        description="Flexibility of the development process",
        weight=3.04,
    ),
    ScaleFactor(
        id="resl",
        type=ScaleFactorType.ARCHITECTURE_RISK,
        name="Architecture / Risk Resolution",
        description="Degree of risk management and architectural resolution",
        weight=4.24,
    ),
    ScaleFactor(
        id="team",
        type=ScaleFactorType.TEAM_COHESION,
        name="Team Cohesion",
        description="Cooperation and consistency of the team",
        weight=3.29,
    ),
    ScaleFactor(
        id="pmat",
        type=ScaleFactorType.PROCESS_MATURITY,
        name="Process Maturity",
        description="Maturity of the organisation's process",
        weight=4.68,
    ),
]


def _driver(driver_id: str, driver_type: CostDriverType, name: str, description: str, table: List[float]) -> CostDriver:
    return CostDriver(
        id=driver_id,
        type=driver_type,
        name=name,
        description=description,
        rating_multipliers=table,
    )


DEFAULT_COST_DRIVERS: List[CostDriver] = [
    # Product
    _driver("rely", CostDriverType.REQUIRED_RELIABILITY, "Required Reliability",
            "Consequence of a system failure", [0.82, 0.92, 1.00, 1.10, 1.26, 1.26]),
    _driver("data", CostDriverType.DATABASE_SIZE, "Database Size",
            "Test database size relative to program size", [0.90, 0.90, 1.00, 1.14, 1.28, 1.28]),
    _driver("cplx", CostDriverType.PRODUCT_COMPLEXITY, "Product Complexity",
            "Control, computation, device, data management and UI complexity",
            [0.73, 0.87, 1.00, 1.17, 1.34, 1.74]),
    _driver("ruse", CostDriverType.REQUIRED_REUSABILITY, "Required Reusability",
            "Effort to build components for reuse", [0.95, 0.95, 1.00, 1.07, 1.15, 1.24]),
    _driver("docu", CostDriverType.DOCUMENTATION, "Documentation",
            "Documentation match to life-cycle needs", [0.81, 0.91, 1.00, 1.11, 1.23, 1.23]),
    # Platform
    _driver("time", CostDriverType.EXECUTION_TIME, "Execution Time Constraint",
            "Share of available execution time used", [1.00, 1.00, 1.00, 1.11, 1.29, 1.63]),
    _driver("stor", CostDriverType.STORAGE_CONSTRAINT, "Main Storage Constraint",
            "Share of available main storage used", [1.00, 1.00, 1.00, 1.05, 1.17, 1.46]),
    _driver("pvol", CostDriverType.PLATFORM_VOLATILITY, "Platform Volatility",
            "Rate of change of the underlying platform", [0.87, 0.87, 1.00, 1.15, 1.30, 1.30]),
    # Personnel
    _driver("acap", CostDriverType.ANALYST_CAPABILITY, "Analyst Capability",
            "Ability and experience of the analysts", [1.42, 1.19, 1.00, 0.85, 0.71, 0.71]),
    _driver("pcap", CostDriverType.PROGRAMMER_CAPABILITY, "Programmer Capability",
            "Ability and experience of the programmers", [1.34, 1.15, 1.00, 0.88, 0.76, 0.76]),
    _driver("pcon", CostDriverType.PERSONNEL_CONTINUITY, "Personnel Continuity",
            "Annual personnel turnover", [1.29, 1.12, 1.00, 0.90, 0.81, 0.81]),
    _driver("apex", CostDriverType.APPLICATION_EXPERIENCE, "Application Experience",
            "Team experience with this type of application", [1.22, 1.10, 1.00, 0.88, 0.81, 0.81]),
    _driver("plex", CostDriverType.PLATFORM_EXPERIENCE, "Platform Experience",
            "Team experience with the platform", [1.19, 1.09, 1.00, 0.91, 0.85, 0.85]),
    _driver("ltex", CostDriverType.LANGUAGE_EXPERIENCE, "Language and Tool Experience",
            "Team experience with languages and tools", [1.20, 1.09, 1.00, 0.91, 0.84, 0.84]),
    # Project
    _driver("tool", CostDriverType.TOOL_USE, "Use of Software Tools",
            "Maturity and coverage of the tool set", [1.17, 1.09, 1.00, 0.90, 0.78, 0.78]),
    _driver("site", CostDriverType.MULTISITE_DEVELOPMENT, "Multisite Development",
            "Geographic distribution and communication support", [1.22, 1.09, 1.00, 0.93, 0.86, 0.80]),
    _driver("sced", CostDriverType.SCHEDULE_CONSTRAINT, "Required Development Schedule",
            "Schedule compression relative to nominal", [1.43, 1.14, 1.00, 1.00, 1.00, 1.00]),
]


def default_catalog() -> InMemoryParametricCatalog:
    """Catalog holding the standard models, scale factors and cost drivers."""
    return InMemoryParametricCatalog(DEFAULT_MODELS, DEFAULT_SCALE_FACTORS, DEFAULT_COST_DRIVERS)
