"""
DIMACS CNF serialization.

Format:
- Lines starting with 'c' are comments
- Problem line: 'p cnf <num_vars> <num_clauses>'
- Clause lines: space-separated literals ending with 0
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import CNFWriteError
from .cnf import CNFInstance

logger = logging.getLogger(__name__)

_HEADER = re.compile(r"p\s+cnf\s+(\d+)\s+(\d+)\s*$")


def to_dimacs(instance: CNFInstance, comments: Iterable[str] = ()) -> str:
    """Render the instance; header counts are taken from the instance itself."""
    lines = [f"c {c}" if c else "c" for c in comments]
    lines.append(f"p cnf {instance.variable_count} {instance.clause_count}")
    for clause in instance.clauses:
        lines.append(" ".join(str(lit) for lit in clause) + " 0")
    return "\n".join(lines) + "\n"


def write_dimacs(instance: CNFInstance, path: Union[str, Path], comments: Iterable[str] = ()) -> Path:
    """
    Write the instance to ``path`` (parent directories are created).

    Raises:
        CNFWriteError: if the file cannot be written
    """
    path = Path(path)
    text = to_dimacs(instance, comments)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="ascii") as f:
            f.write(text)
    except OSError as e:
        raise CNFWriteError(f"Cannot write CNF file {path}: {e}") from e
    logger.debug("Wrote %d clauses to %s", instance.clause_count, path)
    return path


def parse_dimacs(content: str) -> CNFInstance:
    """
    Parse a DIMACS CNF string.

    Raises:
        ValueError: if the problem line is missing or malformed, a literal is
            not an integer, or the clause count differs from the header
    """
    num_variables = None
    num_clauses = None
    clauses: List[List[int]] = []
    current: List[int] = []

    for line_num, line in enumerate(content.splitlines(), 1):
        line = line.strip()

        if not line or line.startswith("c"):
            continue

        if line.startswith("p"):
            if num_variables is not None:
                raise ValueError(f"Duplicate problem line at line {line_num}")
            match = _HEADER.match(line)
            if not match:
                raise ValueError(f"Invalid problem line at line {line_num}: {line}")
            num_variables = int(match.group(1))
            num_clauses = int(match.group(2))
            continue

        if num_variables is None:
            raise ValueError(f"Clause before problem line at line {line_num}")

        try:
            literals = [int(x) for x in line.split()]
        except ValueError as e:
            raise ValueError(f"Invalid literal at line {line_num}: {line}") from e

        for lit in literals:
            if lit == 0:
                clauses.append(current)
                current = []
            else:
                current.append(lit)

    if num_variables is None:
        raise ValueError("Missing problem line (p cnf ...)")
    if current:
        raise ValueError("Last clause is not terminated by 0")
    if len(clauses) != num_clauses:
        raise ValueError(f"Header declares {num_clauses} clauses, found {len(clauses)}")

    return CNFInstance(variable_count=num_variables, clauses=clauses)


def read_dimacs(path: Union[str, Path]) -> CNFInstance:
    """Parse a DIMACS CNF file."""
    with open(path, "r") as f:
        return parse_dimacs(f.read())
