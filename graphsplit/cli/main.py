"""Main CLI entry point (modular)"""

import click

from .. import __version__
from ..exceptions import ConfigurationError
from .utils import LOG_LEVELS, configure_logging

# Commands will be imported and registered below
from .commands import solve as solve_cmd
from .commands import encode as encode_cmd
from .commands import decode as decode_cmd
from .commands import generate as generate_cmd
from .commands import list_backends as list_backends_cmd


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults from config)",
)
def cli(log_level):
    """Signed graph 3-partition solver (SAT reduction)"""
    try:
        configure_logging(log_level)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


# Register modular commands
cli.add_command(solve_cmd.solve)
cli.add_command(encode_cmd.encode)
cli.add_command(decode_cmd.decode)
cli.add_command(generate_cmd.generate)
cli.add_command(list_backends_cmd.list_backends)


if __name__ == "__main__":
    cli()
