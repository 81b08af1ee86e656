"""CLI utilities for logging and common helpers"""

import logging
from pathlib import Path
from typing import Optional

import click

from ..config import get_config
from ..exceptions import ConfigurationError, PartitionError
from ..utils.graph_format import GraphDescription, read_graph

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger from the config (or an explicit level).

    A no-op when the root logger already has handlers (embedding apps, pytest).

    Raises:
        ConfigurationError: if the level is unknown or the log file cannot be opened
    """
    if logging.getLogger().handlers:
        return
    cfg = get_config()
    level = (level or cfg.log_level).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    handlers = [logging.StreamHandler()]
    if cfg.log_file:
        try:
            handlers.append(logging.FileHandler(cfg.log_file))
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {cfg.log_file}: {e}") from e
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def load_graph_or_exit(path: str) -> GraphDescription:
    """Read a graph file, reporting problems as a CLI error (exit code 1)."""
    try:
        return read_graph(Path(path))
    except PartitionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
