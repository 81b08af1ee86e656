"""
Partition output utilities

Text rendering of a partition outcome and JSON results files, one file per
graph, keyed by backend name.
"""

from typing import Dict
import json
import logging
from pathlib import Path

from ..partition import PartitionOutcome

logger = logging.getLogger(__name__)


def format_partition(outcome: PartitionOutcome) -> str:
    """Render an outcome as 'Set k: <1-based node ids>' lines."""
    if not outcome.satisfiable:
        return "No partition exists"
    lines = []
    for index, members in enumerate(outcome.partition.sets(), 1):
        lines.append(f"Set {index}: " + " ".join(str(node) for node in members))
    return "\n".join(lines)


def save_results(
    graph_name: str,
    results: Dict[str, PartitionOutcome],
    output_dir: Path
) -> Path:
    """
    Save outcomes as JSON, merging with results already stored for the graph

    Args:
        graph_name: Name of the graph (file stem)
        results: Dictionary mapping backend names to outcomes
        output_dir: Output directory path

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"{graph_name}.json"

    # Load existing data if file exists
    existing_data = {}
    if output_file.exists():
        try:
            with open(output_file, 'r') as f:
                existing_data = json.load(f)
        except (json.JSONDecodeError, IOError):
            logger.warning("Ignoring unreadable results file %s", output_file)
            existing_data = {}

    for backend, outcome in results.items():
        existing_data[backend] = outcome.to_dict()

    with open(output_file, 'w') as f:
        json.dump(existing_data, f, indent=2)
    return output_file
