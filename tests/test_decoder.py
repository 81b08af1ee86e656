import pytest

from graphsplit.exceptions import MalformedResultError, SolverIntegrationError
from graphsplit.sat.decoder import SolverStatus, decode, decode_result, parse_solver_output
from graphsplit.sat.variables import VariableEncoder

from conftest import partition_assignment


def competition_output(assignment):
    values = " ".join(str(v if assignment[v] else -v) for v in sorted(assignment))
    return f"c some solver\ns SATISFIABLE\nv {values} 0\n"


def test_synthetic_assignment_round_trip():
    wanted = (1, 0, 2, 1)
    text = competition_output(partition_assignment(wanted))
    outcome = decode_result(text, VariableEncoder(4))
    assert outcome.satisfiable
    assert outcome.partition.assignment == wanted
    assert outcome.partition.sets() == [[2], [1, 4], [3]]


def test_values_split_over_several_v_lines():
    text = "s SATISFIABLE\nv 1 -2 -3\nv -4 5 -6\nv -7 -8 9 0\n"
    outcome = decode_result(text, VariableEncoder(3))
    assert outcome.partition.assignment == (0, 1, 2)


def test_minisat_result_file_format():
    text = "SAT\n-1 2 -3 4 -5 -6 -7 -8 9 0\n"
    outcome = decode_result(text, VariableEncoder(3))
    assert outcome.partition.assignment == (1, 0, 2)


@pytest.mark.parametrize("text", ["s UNSATISFIABLE\n", "UNSAT\n", "c stats\ns UNSATISFIABLE\n"])
def test_unsatisfiable_means_no_partition(text):
    outcome = decode_result(text, VariableEncoder(3))
    assert not outcome.satisfiable
    assert outcome.partition is None


def test_solver_chatter_is_ignored():
    text = "c banner\nrestarts : 3\ns SATISFIABLE\nv 1 -2 -3 0\n"
    output = parse_solver_output(text)
    assert output.status is SolverStatus.SATISFIABLE
    assert output.assignment == {1: True, 2: False, 3: False}


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "No SATISFIABLE"),
        ("c only comments\n", "No SATISFIABLE"),
        ("s UNKNOWN\n", "UNKNOWN"),
        ("s\n", "Empty status"),
        ("s SATISFIABLE\nv 1 -2 -3\n", "not terminated"),
        ("s SATISFIABLE\n", "not terminated"),
        ("s SATISFIABLE\nv 1 x 0\n", "Invalid value"),
        ("s SATISFIABLE\nv 1 0\nv 2 0\n", "after the 0 sentinel"),
        ("s SATISFIABLE\ns UNSATISFIABLE\n", "Conflicting"),
        ("s SATISFIABLE\nv 1 -1 0\n", "both true and false"),
    ],
)
def test_malformed_output(text, message):
    with pytest.raises(MalformedResultError, match=message):
        parse_solver_output(text)


def test_truncated_assignment_is_not_unsat():
    # values for two of three nodes only
    text = "s SATISFIABLE\nv 1 -2 -3 -4 5 -6 0\n"
    with pytest.raises(MalformedResultError, match="first missing: 7") as info:
        decode_result(text, VariableEncoder(3))
    assert isinstance(info.value, SolverIntegrationError)
    assert info.value.stage == "decode"


@pytest.mark.parametrize("node_values", ["-1 -2 -3", "1 2 -3"])
def test_node_without_exactly_one_set(node_values):
    text = f"s SATISFIABLE\nv {node_values} -4 5 -6 0\n"
    with pytest.raises(MalformedResultError, match="Node 1 is in"):
        decode_result(text, VariableEncoder(2))


def test_extra_variables_are_ignored():
    text = "s SATISFIABLE\nv 1 -2 -3 10 -11 0\n"
    outcome = decode(parse_solver_output(text), VariableEncoder(1))
    assert outcome.partition.assignment == (0,)
