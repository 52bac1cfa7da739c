#!/usr/bin/env python3
"""Effort Estimator CLI - estimate a project from a JSON description.

Usage:
    # Activity-based estimate, reconciled with the parametric block if present
    python main.py --input ./project.json

    # Include cost ranges and force the Early Design model
    python main.py --input ./project.json --hourly-rate 120 --model early_design

    # Show the parametric catalog
    python main.py --list-catalog
"""

import sys
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

try:
    import click
    from rich.console import Console
    from rich.panel import Panel
except ImportError:
    print("Missing dependencies. Run: pip install click rich")
    sys.exit(1)

from pydantic import ValidationError

from catalog import (
    InMemoryEstimateRepository,
    InMemoryFactorRepository,
    InMemoryParametricEstimateRepository,
    InMemoryProcessRepository,
    ParametricCatalog,
    default_catalog,
)
from contracts import (
    CreateEstimateInput,
    DetailedResult,
    Estimate,
    Factor,
    PowerMode,
    Process,
    rating_label,
)
from config import settings
from errors import EstimationError
from services import EstimateService, ParametricEstimationService


console = Console()
logger = logging.getLogger("effort_estimator")


def load_project(
    input_path: str, model_id: Optional[str] = None
) -> Tuple[List[Process], List[Factor], CreateEstimateInput]:
    """Read a project description.

    Args:
        input_path: JSON file with project_id, project_name, processes,
            factors, tasks, global_factors and an optional parametric block
        model_id: Parametric model to use when the block names none

    Returns:
        (processes, factors, CreateEstimateInput)
    """
    data = json.loads(Path(input_path).read_text(encoding="utf-8"))

    processes = [Process.model_validate(p) for p in data.get("processes", [])]
    factors = [Factor.model_validate(f) for f in data.get("factors", [])]

    parametric = data.get("parametric")
    if parametric is not None:
        parametric = dict(parametric)
        if model_id:
            parametric["model_id"] = model_id
        parametric.setdefault("model_id", settings.default_model_id)

    estimate_input = CreateEstimateInput.model_validate({
        "project_id": data.get("project_id", ""),
        "project_name": data.get("project_name", ""),
        "tasks": data.get("tasks", []),
        "global_factor_ids": data.get("global_factors", []),
        "parametric": parametric,
        "created_by": data.get("created_by", ""),
        "notes": data.get("notes", ""),
    })
    return processes, factors, estimate_input


def build_services(
    processes: List[Process],
    factors: List[Factor],
    catalog: Optional[ParametricCatalog] = None,
    power_mode: PowerMode = PowerMode.REAL,
) -> EstimateService:
    """Wire in-memory repositories around the standard catalog."""
    parametric_service = ParametricEstimationService(
        catalog or default_catalog(),
        InMemoryParametricEstimateRepository(),
        power_mode=power_mode,
    )
    return EstimateService(
        InMemoryEstimateRepository(),
        InMemoryProcessRepository(processes),
        InMemoryFactorRepository(factors),
        parametric_service,
    )


def build_report(estimate: Estimate, detailed: Optional[DetailedResult]) -> Dict[str, Any]:
    return {
        "estimate": estimate.model_dump(mode="json"),
        "detailed_result": detailed.model_dump(mode="json") if detailed else None,
    }


def print_catalog(catalog: ParametricCatalog):
    console.print("[bold]Parametric models:[/bold]")
    for model in catalog.list_models():
        console.print(f"  {model.id:18} {model.name:20} A={model.a:.2f}  B={model.b:.2f}")

    console.print("\n[bold]Scale factors:[/bold]")
    for sf in catalog.list_scale_factors():
        console.print(f"  {sf.id:6} {sf.name:32} weight={sf.weight:.2f}")

    console.print("\n[bold]Cost drivers:[/bold]")
    for cd in catalog.list_cost_drivers():
        table = ", ".join(f"{m:.2f}" for m in cd.rating_multipliers or [])
        console.print(f"  {cd.id:6} {cd.name:32} [dim]{cd.group.value:9}[/dim] {table}")


def print_estimate(estimate: Estimate, detailed: Optional[DetailedResult]):
    console.print("\n[bold]Activity breakdown:[/bold]")
    for pe in estimate.process_estimates:
        console.print(
            f"  {pe.process_name or pe.process_id:30} {len(pe.tasks):3} tasks  "
            f"base {pe.base_hours:10.1f} h  total {pe.total_hours:10.1f} h"
        )
    for factor in estimate.global_factors:
        console.print(f"  [dim]global factor:[/dim] {factor.name} x{factor.impact:.2f}")

    console.print(f"\n[green]Total hours:[/green] {estimate.total_hours:,.1f}")

    if detailed is None:
        return

    console.print(f"\n[bold]Parametric estimate ({detailed.model_type}, size {detailed.project_size:g}):[/bold]")
    console.print(
        f"  Effort:    {detailed.adjusted_effort:,.2f} PM  "
        f"({detailed.effort_range.optimistic:,.2f} - {detailed.effort_range.pessimistic:,.2f})"
    )
    console.print(
        f"  Duration:  {detailed.duration:,.2f} months  "
        f"({detailed.duration_range.optimistic:,.2f} - {detailed.duration_range.pessimistic:,.2f})"
    )
    console.print(
        f"  Team size: {detailed.team_size:,.2f}  "
        f"({detailed.team_size_range.minimum:,.2f} - {detailed.team_size_range.maximum:,.2f})"
    )

    if detailed.cost_estimate:
        cost = detailed.cost_estimate
        console.print(
            f"  Cost:      {cost.total_cost:,.0f} at {cost.hourly_rate:,.2f}/h  "
            f"({cost.cost_range.minimum:,.0f} - {cost.cost_range.maximum:,.0f})"
        )

    console.print("\n[bold]Phase distribution:[/bold]")
    for phase in detailed.phase_distribution:
        console.print(
            f"  {phase.phase:26} {phase.effort:10.2f} PM  {phase.duration:8.2f} months  "
            f"staff {phase.average_staff:6.2f}"
        )

    analyses = detailed.scale_factor_analysis + detailed.cost_driver_analysis
    recommendations = [a for a in analyses if a.recommendation]
    if recommendations:
        console.print("\n[bold]Recommendations:[/bold]")
        for analysis in recommendations:
            console.print(f"  - {analysis.name} ({rating_label(analysis.rating)}): {analysis.recommendation}")

    colour = {"Low": "green", "Medium": "yellow", "High": "red"}[detailed.risk_level.value]
    console.print(f"\n[bold]Risk level:[/bold] [{colour}]{detailed.risk_level.value}[/{colour}]")
    for risk in detailed.risk_factors:
        console.print(f"  - [{risk.category.value}] {risk.name}: {risk.description}")
        console.print(f"    [dim]Mitigation:[/dim] {risk.mitigation}")


def write_report(report: Dict[str, Any], project_id: str, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    report_path = output_dir / f"estimate_{project_id}.json"
    report_path.write_text(json.dumps(report, indent=settings.json_indent))
    return report_path


@click.command()
@click.option(
    "--input", "-i", "input_path",
    required=False,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the project JSON file"
)
@click.option(
    "--hourly-rate", "-r",
    type=click.FloatRange(min=0),
    default=None,
    help=f"Hourly rate for cost ranges (default: {settings.default_hourly_rate:g}; 0 disables cost)"
)
@click.option(
    "--model", "-m", "model_id",
    default=None,
    help=f"Parametric model id (default: {settings.default_model_id})"
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the estimate and detailed result as JSON"
)
@click.option(
    "--legacy-power",
    is_flag=True,
    help="Use integer-truncated exponentiation for comparison with older figures"
)
@click.option(
    "--list-catalog",
    is_flag=True,
    help="List parametric models, scale factors and cost drivers and exit"
)
@click.option(
    "--output", "-o", "output_dir",
    default=None,
    help=f"Output directory for the JSON report (default: {settings.output_dir})"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose output"
)
def main(
    input_path: Optional[str],
    hourly_rate: Optional[float],
    model_id: Optional[str],
    as_json: bool,
    legacy_power: bool,
    list_catalog: bool,
    output_dir: Optional[str],
    verbose: bool,
):
    """Effort Estimator: activity-based and parametric project estimation.

    Sums task hours per process, reconciles them with a COCOMO II style
    parametric estimate, and reports effort, schedule, cost, phases and risk.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    catalog = default_catalog()

    if list_catalog:
        print_catalog(catalog)
        return

    if not input_path:
        console.print("[red]Error: --input is required[/red]")
        sys.exit(1)

    power_mode = PowerMode.LEGACY_TRUNCATED if legacy_power else settings.power_mode
    rate = settings.default_hourly_rate if hourly_rate is None else hourly_rate

    try:
        processes, factors, estimate_input = load_project(input_path, model_id)
        service = build_services(processes, factors, catalog, power_mode)
        estimate = service.create_estimate(estimate_input)
        estimate, detailed = service.get_detailed_estimate(estimate.id, rate)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: {input_path} is not valid JSON:[/red] {e}")
        sys.exit(1)
    except ValidationError as e:
        console.print(f"[red]Error: invalid project description:[/red]\n{e}")
        sys.exit(1)
    except EstimationError as e:
        logger.debug("Estimation failed: %s", e.to_dict())
        console.print(f"[red]Error:[/red] {e.message}")
        sys.exit(1)

    report = build_report(estimate, detailed)
    report_path = write_report(
        report, estimate.project_id, Path(output_dir) if output_dir else settings.get_output_path()
    )

    if as_json:
        click.echo(json.dumps(report, indent=settings.json_indent))
        return

    console.print(Panel.fit(
        f"[bold blue]{estimate.project_name}[/bold blue]\n"
        f"[dim]{estimate.project_id} - {estimate.task_count} tasks[/dim]",
        border_style="blue"
    ))
    print_estimate(estimate, detailed)
    console.print(f"\n[bold]Report saved to:[/bold] {report_path}")


if __name__ == "__main__":
    main()
