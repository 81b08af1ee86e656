"""Partition results and their verification against a graph"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .graph import SET_COUNT, GraphModel, Sign


@dataclass(frozen=True)
class Partition:
    """Assignment of every node (0-based) to a set index in {0, 1, 2}."""

    assignment: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "assignment", tuple(int(s) for s in self.assignment))
        for node, s in enumerate(self.assignment):
            if not 0 <= s < SET_COUNT:
                raise ValueError(f"Node {node} assigned to invalid set {s}")

    @property
    def node_count(self) -> int:
        return len(self.assignment)

    def set_of(self, node: int) -> int:
        return self.assignment[node]

    def sets(self) -> List[List[int]]:
        """The three sets as ordered lists of 1-based node ids."""
        result: List[List[int]] = [[] for _ in range(SET_COUNT)]
        for node, s in enumerate(self.assignment):
            result[s].append(node + 1)
        return result


@dataclass
class PartitionOutcome:
    """Answer to a partition request: either a partition or "none exists"."""

    satisfiable: bool
    partition: Optional[Partition] = None
    backend: str = ""
    elapsed: float = 0.0

    def __post_init__(self):
        if self.satisfiable and self.partition is None:
            raise ValueError("A satisfiable outcome needs a partition")
        if not self.satisfiable and self.partition is not None:
            raise ValueError("An unsatisfiable outcome cannot carry a partition")

    def to_dict(self) -> Dict[str, Any]:
        """Convert outcome to dictionary format"""
        return {
            "satisfiable": self.satisfiable,
            "sets": self.partition.sets() if self.partition else [],
            "backend": self.backend,
            "time": round(self.elapsed, 3),
        }


def check_partition(graph: GraphModel, partition: Partition) -> List[str]:
    """
    Verify a partition against the graph

    Returns:
        Human readable violations; empty when the partition is valid
    """
    if partition.node_count != graph.node_count:
        return [f"Partition covers {partition.node_count} nodes, graph has {graph.node_count}"]

    problems = []
    for s, members in enumerate(partition.sets()):
        if not members:
            problems.append(f"Set {s + 1} is empty")
    for i, j, sign in graph.edges():
        same = partition.set_of(i) == partition.set_of(j)
        if sign == Sign.POSITIVE and not same:
            problems.append(f"Positive edge ({i + 1}, {j + 1}) crosses sets")
        elif sign == Sign.NEGATIVE and same:
            problems.append(f"Negative edge ({i + 1}, {j + 1}) inside set {partition.set_of(i) + 1}")
    return problems
