import logging
from itertools import combinations, product
from typing import List, Sequence

from ..graph import GraphModel, Sign
from .cnf import Clause, CNFInstance
from .variables import SET_COUNT, VariableEncoder

logger = logging.getLogger(__name__)

# --- Cardinality helpers ---

def at_least_one(literals: Sequence[int]) -> List[Clause]:
    """Sum(literals) >= 1 as a single OR clause."""
    return [tuple(literals)]

def at_most_one_pairwise(literals: Sequence[int]) -> List[Clause]:
    """Sum(literals) <= 1 using pairwise encoding (O(n^2) clauses)."""
    return [(-l1, -l2) for l1, l2 in combinations(literals, 2)]

def exactly_one_pairwise(literals: Sequence[int]) -> List[Clause]:
    """Sum(literals) == 1: the at-least-one clause followed by the pairwise exclusions."""
    return at_least_one(literals) + at_most_one_pairwise(literals)

# --- Partition constraints ---

def non_empty_sets(encoder: VariableEncoder) -> List[Clause]:
    """One clause per set: some node occupies it."""
    return [
        tuple(encoder.var(node, s) for node in range(encoder.node_count))
        for s in range(SET_COUNT)
    ]

def single_set(encoder: VariableEncoder, node: int) -> List[Clause]:
    """The node belongs to exactly one of the three sets (4 clauses)."""
    return exactly_one_pairwise(encoder.variables_of(node))

def positive_edge(encoder: VariableEncoder, x: int, y: int) -> List[Clause]:
    """
    x and y share a set (8 clauses).

    CNF of (x0 & y0) | (x1 & y1) | (x2 & y2): every clause picks, for each
    set slot, either x's or y's literal.
    """
    xs = encoder.variables_of(x)
    ys = encoder.variables_of(y)
    return [tuple(choice) for choice in product(*zip(xs, ys))]

def negative_edge(encoder: VariableEncoder, x: int, y: int) -> List[Clause]:
    """x and y are never in the same set (3 clauses)."""
    return [(-a, -b) for a, b in zip(encoder.variables_of(x), encoder.variables_of(y))]


def expected_clause_count(graph: GraphModel) -> int:
    """Closed form of the clause count produced by ClauseGenerator."""
    return (
        SET_COUNT
        + 4 * graph.node_count
        + 8 * graph.positive_edge_count
        + 3 * graph.negative_edge_count
    )


class ClauseGenerator:
    """
    Reduces a signed graph 3-partition question to CNF.

    Clauses come out grouped: set non-emptiness, exactly-one-set per node,
    then edge constraints in row-major order over the upper triangle of the
    sign matrix.
    """

    def __init__(self, graph: GraphModel, encoder: VariableEncoder = None):
        self.graph = graph
        self.encoder = encoder or VariableEncoder(graph.node_count)
        if self.encoder.node_count != graph.node_count:
            raise ValueError(
                f"Encoder covers {self.encoder.node_count} nodes, graph has {graph.node_count}"
            )

    def clauses(self) -> List[Clause]:
        enc = self.encoder
        clauses = non_empty_sets(enc)
        for node in range(self.graph.node_count):
            clauses.extend(single_set(enc, node))
        for i, j, sign in self.graph.edges():
            if sign == Sign.POSITIVE:
                clauses.extend(positive_edge(enc, i, j))
            elif sign == Sign.NEGATIVE:
                clauses.extend(negative_edge(enc, i, j))
        return clauses

    def generate(self) -> CNFInstance:
        instance = CNFInstance(variable_count=self.encoder.variable_count, clauses=self.clauses())
        logger.debug(
            "Encoded %r into %d variables and %d clauses",
            self.graph, instance.variable_count, instance.clause_count,
        )
        return instance


def generate_cnf(graph: GraphModel) -> CNFInstance:
    """Shortcut for ClauseGenerator(graph).generate()."""
    return ClauseGenerator(graph).generate()
