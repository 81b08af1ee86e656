"""Decode command: turn a saved solver answer into a partition"""

import click

from ...exceptions import PartitionError
from ...partition import check_partition
from ...sat.decoder import decode_result
from ...sat.variables import VariableEncoder
from ...utils.solution_format import format_partition
from ..utils import load_graph_or_exit
from .solve import EXIT_NO_PARTITION


@click.command()
@click.argument("graph_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("result_file", type=click.Path(exists=True, dir_okay=False))
def decode(graph_file: str, result_file: str):
    """Decode RESULT_FILE (solver output) for the graph in GRAPH_FILE."""
    graph = load_graph_or_exit(graph_file).graph
    with open(result_file, "r") as f:
        text = f.read()

    try:
        outcome = decode_result(text, VariableEncoder(graph.node_count))
    except PartitionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(format_partition(outcome))
    if not outcome.satisfiable:
        raise SystemExit(EXIT_NO_PARTITION)
    for problem in check_partition(graph, outcome.partition):
        click.echo(f"Warning: {problem}", err=True)
