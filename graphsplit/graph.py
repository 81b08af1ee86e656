"""
Signed graph model

Holds the node count and the two parallel matrices (edge presence and edge
sign) that describe a signed, undirected graph. The model is validated once
at construction and is read-only afterwards.
"""

from enum import IntEnum
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .exceptions import InvalidGraphError


class Sign(IntEnum):
    """Sign of the relation between two nodes"""

    NONE = 0
    POSITIVE = 1
    NEGATIVE = -1

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Sign":
        try:
            return _FROM_SYMBOL[symbol]
        except KeyError:
            raise ValueError(f"Unknown edge sign {symbol!r}") from None


_SYMBOLS = {Sign.NONE: "0", Sign.POSITIVE: "+", Sign.NEGATIVE: "-"}
_FROM_SYMBOL = {v: k for k, v in _SYMBOLS.items()}

Edge = Tuple[int, int, Sign]

# Number of sets every partition splits the nodes into
SET_COUNT = 3


class GraphModel:
    """
    Immutable signed graph.

    ``adjacency[i][j]`` is true when nodes i and j are related and
    ``sign[i][j]`` carries the sign of that relation (``Sign.NONE`` where no
    edge exists). Both matrices must be symmetric with an empty diagonal.

    Raises:
        InvalidGraphError: if the data breaks any of the invariants above
    """

    __slots__ = ("_node_count", "_adjacency", "_sign")

    def __init__(self, node_count: int, adjacency: Sequence[Sequence[bool]], sign: Sequence[Sequence[int]]):
        if isinstance(node_count, bool) or not isinstance(node_count, (int, np.integer)):
            raise InvalidGraphError(f"Node count must be an integer, got {node_count!r}")
        if node_count < 1:
            raise InvalidGraphError("Graph must have at least one node")

        try:
            raw_adj = np.asarray(adjacency)
            raw_sgn = np.asarray(sign)
        except (TypeError, ValueError) as e:
            raise InvalidGraphError(f"Graph matrices are malformed: {e}") from e

        shape = (int(node_count), int(node_count))
        if raw_adj.shape != shape:
            raise InvalidGraphError(f"Adjacency matrix has shape {raw_adj.shape}, expected {shape}")
        if raw_sgn.shape != shape:
            raise InvalidGraphError(f"Sign matrix has shape {raw_sgn.shape}, expected {shape}")
        # domain checks run on the raw values; casting would hide 1.7 or 5
        if raw_adj.dtype.kind not in "biuf" or not np.isin(raw_adj, [0, 1]).all():
            raise InvalidGraphError("Adjacency matrix contains values other than 0, 1")
        if raw_sgn.dtype.kind not in "biuf" or not np.isin(raw_sgn, [s.value for s in Sign]).all():
            raise InvalidGraphError("Sign matrix contains values other than -1, 0, 1")
        adj = raw_adj.astype(bool)
        sgn = raw_sgn.astype(np.int8)
        if adj.diagonal().any() or sgn.diagonal().any():
            node = int(np.flatnonzero(adj.diagonal() | (sgn.diagonal() != 0))[0])
            raise InvalidGraphError(f"Self-loop on node {node}")
        if not (adj == adj.T).all():
            raise InvalidGraphError("Adjacency matrix is not symmetric")
        if not (sgn == sgn.T).all():
            raise InvalidGraphError("Sign matrix is not symmetric")
        mismatch = np.argwhere(adj != (sgn != 0))
        if len(mismatch):
            i, j = (int(x) for x in mismatch[0])
            raise InvalidGraphError(f"Adjacency and sign disagree on pair ({i}, {j})")

        adj.setflags(write=False)
        sgn.setflags(write=False)
        self._node_count = int(node_count)
        self._adjacency = adj
        self._sign = sgn

    @classmethod
    def from_edges(
        cls,
        node_count: int,
        positive: Iterable[Tuple[int, int]] = (),
        negative: Iterable[Tuple[int, int]] = (),
    ) -> "GraphModel":
        """Build a graph from lists of positive and negative node pairs"""
        if isinstance(node_count, bool) or not isinstance(node_count, int) or node_count < 1:
            raise InvalidGraphError(f"Invalid node count {node_count!r}")
        sign = np.zeros((node_count, node_count), dtype=np.int8)
        for value, pairs in ((Sign.POSITIVE, positive), (Sign.NEGATIVE, negative)):
            for i, j in pairs:
                if not (0 <= i < node_count and 0 <= j < node_count):
                    raise InvalidGraphError(f"Edge ({i}, {j}) references a missing node")
                if sign[i, j] not in (0, value):
                    raise InvalidGraphError(f"Edge ({i}, {j}) is both positive and negative")
                sign[i, j] = sign[j, i] = value
        return cls(node_count, sign != 0, sign)

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def adjacency(self) -> np.ndarray:
        """Read-only boolean adjacency matrix"""
        return self._adjacency

    @property
    def sign(self) -> np.ndarray:
        """Read-only int8 sign matrix (values of ``Sign``)"""
        return self._sign

    def has_edge(self, i: int, j: int) -> bool:
        return bool(self._adjacency[i, j])

    def sign_of(self, i: int, j: int) -> Sign:
        return Sign(int(self._sign[i, j]))

    def edges(self, sign: Optional[Sign] = None) -> Iterator[Edge]:
        """Yield each undirected edge once as (i, j, sign) with i <= j, row-major."""
        for i, j in zip(*np.nonzero(np.triu(self._sign))):
            edge_sign = Sign(int(self._sign[i, j]))
            if sign is None or edge_sign == sign:
                yield int(i), int(j), edge_sign

    @property
    def positive_edge_count(self) -> int:
        return int(np.count_nonzero(np.triu(self._sign) == Sign.POSITIVE))

    @property
    def negative_edge_count(self) -> int:
        return int(np.count_nonzero(np.triu(self._sign) == Sign.NEGATIVE))

    @property
    def edge_count(self) -> int:
        return self.positive_edge_count + self.negative_edge_count

    def __eq__(self, other):
        if not isinstance(other, GraphModel):
            return NotImplemented
        return (
            self._node_count == other._node_count
            and np.array_equal(self._adjacency, other._adjacency)
            and np.array_equal(self._sign, other._sign)
        )

    def __repr__(self) -> str:
        return (
            f"GraphModel(nodes={self._node_count}, positive={self.positive_edge_count}, "
            f"negative={self.negative_edge_count})"
        )
