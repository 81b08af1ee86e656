"""Generate command: write a random signed graph file"""

from typing import Optional

import click

from ...exceptions import ConfigurationError
from ...utils.generator import generate_graph
from ...utils.graph_format import format_graph, write_graph


@click.command()
@click.argument("n", type=int)
@click.option("--negative", type=float, default=0.5, show_default=True, help="Fraction of negative edges")
@click.option("--positive", type=float, default=0.5, show_default=True, help="Fraction of positive edges")
@click.option("--density", "-d", type=float, default=0.5, show_default=True, help="Edge probability per node pair")
@click.option("--seed", type=int, default=None, help="Random seed")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Graph file (default: print to stdout)")
def generate(n: int, negative: float, positive: float, density: float, seed: Optional[int], output: Optional[str]):
    """Generate a random signed graph with N nodes."""
    try:
        description = generate_graph(n, negative, positive, density, seed=seed)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if output:
        path = write_graph(description, output)
        graph = description.graph
        click.echo(
            f"Wrote {graph.node_count} nodes, {graph.positive_edge_count} positive and "
            f"{graph.negative_edge_count} negative edges to {path}"
        )
    else:
        click.echo(format_graph(description), nl=False)
