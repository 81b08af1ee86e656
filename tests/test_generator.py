import numpy as np
import pytest

from graphsplit.exceptions import ConfigurationError
from graphsplit.utils.generator import generate_graph


def test_same_seed_same_graph():
    a = generate_graph(12, 0.3, 0.7, 0.4, seed=7)
    b = generate_graph(12, 0.3, 0.7, 0.4, seed=7)
    assert a.graph == b.graph
    assert a.density == 0.4


def test_generated_graph_is_valid():
    graph = generate_graph(15, 0.5, 0.5, 0.5, seed=1).graph
    assert (graph.sign == graph.sign.T).all()
    assert not graph.adjacency.diagonal().any()


def test_density_extremes():
    assert generate_graph(6, 0.5, 0.5, 0.0, seed=0).graph.edge_count == 0
    assert generate_graph(6, 0.5, 0.5, 1.0, seed=0).graph.edge_count == 15


def test_only_positive_or_only_negative():
    graph = generate_graph(8, 0.0, 1.0, 1.0, seed=3).graph
    assert graph.negative_edge_count == 0
    graph = generate_graph(8, 1.0, 0.0, 1.0, seed=3).graph
    assert graph.positive_edge_count == 0


@pytest.mark.parametrize(
    "args",
    [(0, 0.5, 0.5, 0.5), (5, -0.1, 0.5, 0.5), (5, 0.5, 1.5, 0.5), (5, 0.5, 0.5, 2.0), (5, 0.0, 0.0, 0.5)],
)
def test_invalid_parameters(args):
    with pytest.raises(ConfigurationError):
        generate_graph(*args)


def test_no_edges_allowed_without_fractions():
    graph = generate_graph(4, 0.0, 0.0, 0.0, seed=0).graph
    assert np.count_nonzero(graph.sign) == 0
