"""Numbering of the propositional variables "node n belongs to set s"."""

from dataclasses import dataclass
from typing import Tuple

from ..graph import SET_COUNT


def var_id(node: int, set_index: int) -> int:
    """Variable id for (node, set_index): ids 3n+1 .. 3n+3 belong to node n."""
    return node * SET_COUNT + set_index + 1


@dataclass(frozen=True)
class VariableEncoder:
    """
    Dense, 1-based bijection between (node, set) pairs and variable ids.

    Holds nothing but the node count, which bounds the variable domain to
    ``[1, 3 * node_count]``.
    """

    node_count: int

    def __post_init__(self):
        if self.node_count < 1:
            raise ValueError("VariableEncoder needs at least one node")

    @property
    def variable_count(self) -> int:
        return SET_COUNT * self.node_count

    def var(self, node: int, set_index: int) -> int:
        self._check_node(node)
        if not 0 <= set_index < SET_COUNT:
            raise ValueError(f"Set index {set_index} outside [0, {SET_COUNT})")
        return var_id(node, set_index)

    def first_var(self, node: int) -> int:
        """Variable meaning "node belongs to set 0"."""
        self._check_node(node)
        return var_id(node, 0)

    def variables_of(self, node: int) -> Tuple[int, int, int]:
        first = self.first_var(node)
        return first, first + 1, first + 2

    def locate(self, variable: int) -> Tuple[int, int]:
        """Inverse of ``var``: returns (node, set_index)."""
        if not 1 <= variable <= self.variable_count:
            raise ValueError(f"Variable {variable} outside [1, {self.variable_count}]")
        return divmod(variable - 1, SET_COUNT)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise ValueError(f"Node {node} outside [0, {self.node_count})")
