"""Random signed graph generation"""

import logging
from typing import Optional

import numpy as np

from ..exceptions import ConfigurationError
from ..graph import GraphModel, Sign
from .graph_format import GraphDescription

logger = logging.getLogger(__name__)


def generate_graph(
    node_count: int,
    negative_fraction: float = 0.5,
    positive_fraction: float = 0.5,
    density: float = 0.5,
    seed: Optional[int] = None,
) -> GraphDescription:
    """
    Generate a random signed graph.

    Every unordered pair of distinct nodes gets an edge with probability
    ``density``; an edge is positive with probability
    ``positive_fraction / (positive_fraction + negative_fraction)`` and
    negative otherwise.

    Raises:
        ConfigurationError: on a non-positive node count, fractions outside
            [0, 1], or both fractions zero while density > 0
    """
    if node_count < 1:
        raise ConfigurationError("Node count must be at least 1")
    for name, value in (
        ("negative_fraction", negative_fraction),
        ("positive_fraction", positive_fraction),
        ("density", density),
    ):
        if not 0.0 <= value <= 1.0:
            raise ConfigurationError(f"{name} must lie in [0, 1], got {value}")
    total = negative_fraction + positive_fraction
    if total == 0 and density > 0:
        raise ConfigurationError("At least one of the edge sign fractions must be positive")

    rng = np.random.default_rng(seed)
    upper = np.triu(rng.random((node_count, node_count)) < density, k=1)
    positive = rng.random((node_count, node_count)) < (positive_fraction / total if total else 0.0)

    sign = np.where(upper, np.where(positive, Sign.POSITIVE.value, Sign.NEGATIVE.value), Sign.NONE.value)
    sign = (sign + sign.T).astype(np.int8)

    graph = GraphModel(node_count, sign != 0, sign)
    logger.debug("Generated %r (seed=%s)", graph, seed)
    return GraphDescription(graph, negative_fraction, positive_fraction, density)
