"""
Decoding of SAT solver results into partitions.

Two output dialects are understood:

- SAT competition format, as printed on stdout by MiniSat-compatible
  solvers (CaDiCaL, Kissat, Glucose with -model, ...)::

    c comment
    s SATISFIABLE
    v 1 -2 -3 4 0

- MiniSat result file format::

    SAT
    1 -2 -3 4 0

Anything else (no status, UNKNOWN, missing values) is a MalformedResultError,
which is never confused with an unsatisfiable answer.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Dict, List, Optional

from ..exceptions import MalformedResultError
from ..partition import Partition, PartitionOutcome
from .variables import SET_COUNT, VariableEncoder

logger = logging.getLogger(__name__)


class SolverStatus(Enum):
    SATISFIABLE = "SATISFIABLE"
    UNSATISFIABLE = "UNSATISFIABLE"


_STATUS_TOKENS = {
    "SATISFIABLE": SolverStatus.SATISFIABLE,
    "SAT": SolverStatus.SATISFIABLE,
    "UNSATISFIABLE": SolverStatus.UNSATISFIABLE,
    "UNSAT": SolverStatus.UNSATISFIABLE,
}


@dataclass
class SolverOutput:
    """Structured solver answer: status plus variable -> truth value."""

    status: SolverStatus
    assignment: Dict[int, bool] = field(default_factory=dict)

    @property
    def satisfiable(self) -> bool:
        return self.status is SolverStatus.SATISFIABLE


def _status_of(token: str, line_num: int) -> SolverStatus:
    status = _STATUS_TOKENS.get(token.upper())
    if status is None:
        raise MalformedResultError(f"Solver reported status {token!r} at line {line_num}")
    return status


def parse_solver_output(text: str) -> SolverOutput:
    """
    Parse raw solver output.

    Raises:
        MalformedResultError: if the status token is missing or unknown, a
            value is not an integer, or the value list lacks its 0 sentinel
    """
    status: Optional[SolverStatus] = None
    values: List[int] = []
    terminated = False
    bare_format = False

    for line_num, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line or line == "c" or line.startswith("c "):
            continue

        tokens = line.split()
        head = tokens[0]

        if head == "s" or (head.upper() in _STATUS_TOKENS and len(tokens) == 1):
            token = " ".join(tokens[1:]) if head == "s" else head
            if not token:
                raise MalformedResultError(f"Empty status line at line {line_num}")
            new_status = _status_of(token, line_num)
            if status is not None and new_status is not status:
                raise MalformedResultError(f"Conflicting status lines (line {line_num})")
            status = new_status
            bare_format = head != "s"
            continue

        if head == "v":
            numbers = tokens[1:]
        elif bare_format and status is not None:
            numbers = tokens
        else:
            # Solver chatter (statistics, banners) outside the grammar
            continue

        if terminated:
            raise MalformedResultError(f"Values after the 0 sentinel at line {line_num}")
        for token in numbers:
            try:
                value = int(token)
            except ValueError:
                raise MalformedResultError(f"Invalid value {token!r} at line {line_num}") from None
            if value == 0:
                terminated = True
                break
            values.append(value)

    if status is None:
        raise MalformedResultError("No SATISFIABLE/UNSATISFIABLE status in solver output")

    if status is SolverStatus.UNSATISFIABLE:
        return SolverOutput(status)

    if not terminated:
        raise MalformedResultError("Assignment is not terminated by 0 (truncated output?)")

    assignment: Dict[int, bool] = {}
    for value in values:
        var = abs(value)
        if assignment.get(var, value > 0) != (value > 0):
            raise MalformedResultError(f"Variable {var} assigned both true and false")
        assignment[var] = value > 0
    return SolverOutput(status, assignment)


def decode(output: SolverOutput, encoder: VariableEncoder) -> PartitionOutcome:
    """
    Turn a solver answer into a partition outcome.

    Raises:
        MalformedResultError: if a variable of the encoding has no value, or
            a node is not in exactly one set
    """
    if not output.satisfiable:
        logger.debug("Solver reported UNSATISFIABLE: no partition exists")
        return PartitionOutcome(satisfiable=False)

    missing = [v for v in range(1, encoder.variable_count + 1) if v not in output.assignment]
    if missing:
        raise MalformedResultError(
            f"Assignment has {encoder.variable_count - len(missing)} of "
            f"{encoder.variable_count} values (first missing: {missing[0]})"
        )

    sets = []
    for node in range(encoder.node_count):
        chosen = [s for s, var in enumerate(encoder.variables_of(node)) if output.assignment[var]]
        if len(chosen) != 1:
            raise MalformedResultError(
                f"Node {node + 1} is in {len(chosen)} of {SET_COUNT} sets; "
                "assignment does not satisfy the encoding"
            )
        sets.append(chosen[0])
    return PartitionOutcome(satisfiable=True, partition=Partition(tuple(sets)))


def decode_result(text: str, encoder: VariableEncoder) -> PartitionOutcome:
    """Parse and decode raw solver output."""
    return decode(parse_solver_output(text), encoder)
