import pytest

from graphsplit.partition import Partition, PartitionOutcome, check_partition
from graphsplit.utils.solution_format import format_partition, save_results


def test_sets_are_one_based():
    partition = Partition((2, 0, 0, 1))
    assert partition.sets() == [[2, 3], [4], [1]]


def test_invalid_set_index():
    with pytest.raises(ValueError):
        Partition((0, 3))


def test_check_partition_reports_violations(mixed_graph):
    assert check_partition(mixed_graph, Partition((0, 0, 1, 2))) == []
    problems = check_partition(mixed_graph, Partition((0, 1, 1, 1)))
    assert "Set 3 is empty" in problems
    assert "Positive edge (1, 2) crosses sets" in problems
    assert "Negative edge (2, 3) inside set 2" in problems
    assert "Negative edge (3, 4) inside set 2" in problems
    assert check_partition(mixed_graph, Partition((0, 1))) != []


def test_outcome_consistency():
    with pytest.raises(ValueError):
        PartitionOutcome(satisfiable=True)
    with pytest.raises(ValueError):
        PartitionOutcome(satisfiable=False, partition=Partition((0,)))


def test_format_partition():
    outcome = PartitionOutcome(True, Partition((1, 0, 2, 0)))
    assert format_partition(outcome) == "Set 1: 2 4\nSet 2: 1\nSet 3: 3"
    assert format_partition(PartitionOutcome(False)) == "No partition exists"


def test_save_results_merges_backends(tmp_path):
    import json

    save_results("g", {"dimacs": PartitionOutcome(True, Partition((0, 1, 2)), "dimacs", 0.5)}, tmp_path)
    path = save_results("g", {"z3": PartitionOutcome(False, backend="z3")}, tmp_path)
    data = json.loads(path.read_text())
    assert data["dimacs"]["sets"] == [[1], [2], [3]]
    assert data["z3"] == {"satisfiable": False, "sets": [], "backend": "z3", "time": 0.0}
