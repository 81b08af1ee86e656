"""Encode command: write the DIMACS instance without solving it"""

from pathlib import Path
from typing import Optional

import click

from ...exceptions import PartitionError
from ...sat.clauses import ClauseGenerator, expected_clause_count
from ...sat.dimacs import read_dimacs, write_dimacs
from ..utils import load_graph_or_exit


@click.command()
@click.argument("graph_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="CNF file (default: GRAPH_FILE with .cnf suffix)")
@click.option("--check", is_flag=True, help="Re-read the written file and compare its header with the instance")
def encode(graph_file: str, output: Optional[str], check: bool):
    """Write the CNF encoding of GRAPH_FILE in DIMACS format."""
    graph = load_graph_or_exit(graph_file).graph
    instance = ClauseGenerator(graph).generate()
    target = Path(output) if output else Path(graph_file).with_suffix(".cnf")

    try:
        write_dimacs(instance, target)
    except PartitionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Wrote {instance.variable_count} variables, {instance.clause_count} clauses to {target}")

    if check:
        reread = read_dimacs(target)
        expected = expected_clause_count(graph)
        if (reread.variable_count, reread.clause_count) != (instance.variable_count, expected):
            click.echo(
                f"Error: header p cnf {reread.variable_count} {reread.clause_count}, "
                f"expected p cnf {instance.variable_count} {expected}",
                err=True,
            )
            raise SystemExit(1)
        click.echo("Header check passed")
