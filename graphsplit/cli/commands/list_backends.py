"""List solver backends command (modular CLI)"""

import click

from ...registry import registry


@click.command(name="list-backends")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed backend information")
def list_backends(verbose: bool):
    """List available solver backends."""
    # Ensure registrations
    import graphsplit.solvers.unified_bridge  # noqa: F401

    click.echo("=== Solver Backends ===")
    for name, md in registry.get_all_metadata().items():
        if verbose:
            click.echo(f"  - {name}")
            click.echo(f"      Description: {md.description or 'N/A'}")
            click.echo(f"      Runs as: {md.backend}")
            click.echo(f"      Version: {md.version}")
        else:
            desc = f" - {md.description}" if md.description else ""
            click.echo(f"  - {name}{desc}")
