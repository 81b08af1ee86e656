"""Solve command implemented against the solver registry"""

import dataclasses
from pathlib import Path
from typing import Optional

import click

from ...registry import registry
from ...config import get_config
from ...exceptions import PartitionError, SolverIntegrationError
from ...partition import check_partition
from ...utils.error_handling import retry_on_failure
from ...utils.solution_format import format_partition, save_results
from ..utils import load_graph_or_exit

# Exit status when the solver proves that no partition exists
EXIT_NO_PARTITION = 2


@click.command()
@click.argument("graph_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--backend", "-b", help="Solver backend registered in the registry (defaults from config)")
@click.option("--solver-path", "-s", help="External SAT solver executable (dimacs backend)")
@click.option("--timeout", "-t", type=float, default=None, help="Timeout in seconds (defaults from config)")
@click.option("--work-dir", "-w", type=click.Path(file_okay=False), help="Where the CNF and solver output are written")
@click.option("--output", "-o", type=click.Path(file_okay=False), help="Results directory for the JSON outcome")
@click.option("--retries", type=int, default=0, show_default=True, help="Retry the solver on integration failures")
@click.option("--verify", is_flag=True, help="Check the decoded partition against the graph")
def solve(
    graph_file: str,
    backend: Optional[str],
    solver_path: Optional[str],
    timeout: Optional[float],
    work_dir: Optional[str],
    output: Optional[str],
    retries: int,
    verify: bool,
):
    """Partition the nodes of GRAPH_FILE into three sets."""

    # Ensure registration side-effects
    import graphsplit.solvers.unified_bridge  # noqa: F401

    description = load_graph_or_exit(graph_file)
    graph = description.graph

    cfg = get_config()
    overrides = {}
    if solver_path:
        overrides["solver_path"] = solver_path
    if work_dir:
        overrides["work_dir"] = Path(work_dir)
    run_cfg = dataclasses.replace(cfg, **overrides) if overrides else cfg

    chosen = backend or cfg.default_backend
    effective_timeout = timeout if timeout is not None else cfg.default_timeout

    try:
        solver_cls = registry.require_solver(chosen)
    except PartitionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(
        f"Partitioning {graph.node_count} nodes "
        f"({graph.positive_edge_count} positive, {graph.negative_edge_count} negative edges) "
        f"with backend '{chosen}'"
    )

    @retry_on_failure(exceptions=(SolverIntegrationError,), retries=max(retries, 0))
    def run():
        return solver_cls(graph, effective_timeout, run_cfg).solve()

    try:
        outcome = run()
    except SolverIntegrationError as e:
        click.echo(f"Solver failure during {e.stage}: {e}", err=True)
        raise SystemExit(1)
    except PartitionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(format_partition(outcome))

    if verify and outcome.satisfiable:
        problems = check_partition(graph, outcome.partition)
        if problems:
            for problem in problems:
                click.echo(f"Invalid partition: {problem}", err=True)
            raise SystemExit(1)
        click.echo("Partition verified")

    if output:
        saved = save_results(Path(graph_file).stem, {chosen: outcome}, Path(output))
        click.echo(f"Results saved to {saved}")

    click.echo(f"Solution completed in {outcome.elapsed:.2f}s")
    if not outcome.satisfiable:
        raise SystemExit(EXIT_NO_PARTITION)
