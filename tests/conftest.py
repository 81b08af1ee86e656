"""Shared fixtures for graphsplit tests."""

import itertools
import sys
import textwrap

import pytest

from graphsplit.config import Config
from graphsplit.graph import GraphModel
from graphsplit.sat.variables import SET_COUNT, var_id

# Brute-force DIMACS solver used in place of a real SAT binary. Prints SAT
# competition output and exits 10/20, or with --minisat writes a MiniSat
# result file given after the CNF path.
FAKE_SOLVER = textwrap.dedent(
    """
    import itertools
    import sys

    minisat = "--minisat" in sys.argv
    cnf_path = sys.argv[-2] if minisat else sys.argv[-1]
    nv = 0
    clauses = []
    with open(cnf_path) as f:
        for line in f:
            tokens = line.split()
            if not tokens or tokens[0] == "c":
                continue
            if tokens[0] == "p":
                nv = int(tokens[2])
                continue
            clauses.append([int(t) for t in tokens[:-1]])

    model = None
    for bits in itertools.product([False, True], repeat=nv):
        if all(any(bits[abs(l) - 1] == (l > 0) for l in c) for c in clauses):
            model = bits
            break

    values = " ".join(str(i + 1 if b else -(i + 1)) for i, b in enumerate(model or ()))
    if minisat:
        with open(sys.argv[-1], "w") as out:
            out.write("SAT\\n" + values + " 0\\n" if model else "UNSAT\\n")
        print("SATISFIABLE" if model else "UNSATISFIABLE")
    else:
        print("c fake solver")
        if model:
            print("s SATISFIABLE")
            print("v " + values + " 0")
        else:
            print("s UNSATISFIABLE")
    sys.exit(10 if model else 20)
    """
)


@pytest.fixture
def positive_triangle():
    return GraphModel.from_edges(3, positive=[(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def negative_triangle():
    return GraphModel.from_edges(3, negative=[(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def mixed_graph():
    # 0 and 1 together, 2 apart from both, 3 apart from 2
    return GraphModel.from_edges(4, positive=[(0, 1)], negative=[(1, 2), (0, 2), (2, 3)])


@pytest.fixture
def fake_solver(tmp_path):
    path = tmp_path / "fake_solver.py"
    path.write_text(FAKE_SOLVER)
    return path


@pytest.fixture
def make_config(tmp_path, fake_solver):
    """Config factory pointing the dimacs backend at the fake solver."""

    def factory(minisat: bool = False, **overrides) -> Config:
        args = [str(fake_solver)] + (["--minisat"] if minisat else [])
        values = dict(
            work_dir=tmp_path / "work",
            solver_path=sys.executable,
            solver_args=args,
            solver_writes_result_file=minisat,
        )
        values.update(overrides)
        return Config(**values)

    return factory


def partition_assignment(sets):
    """Canonical truth assignment {var: bool} placing node n in sets[n]."""
    return {
        var_id(node, s): s == chosen
        for node, chosen in enumerate(sets)
        for s in range(SET_COUNT)
    }


def clause_satisfied(clause, assignment):
    return any(assignment[abs(lit)] == (lit > 0) for lit in clause)


def satisfying_partitions(instance, node_count):
    """All partitions (tuples of set indices) whose canonical assignment satisfies the instance."""
    found = []
    for sets in itertools.product(range(SET_COUNT), repeat=node_count):
        assignment = partition_assignment(sets)
        if all(clause_satisfied(c, assignment) for c in instance.clauses):
            found.append(sets)
    return found


def satisfying_assignments(instance):
    """Brute force over every truth assignment (small instances only)."""
    found = []
    n = instance.variable_count
    for bits in itertools.product([False, True], repeat=n):
        assignment = {v + 1: bits[v] for v in range(n)}
        if all(clause_satisfied(c, assignment) for c in instance.clauses):
            found.append(assignment)
    return found
