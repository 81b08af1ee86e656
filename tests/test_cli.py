import json
import logging

import pytest
from click.testing import CliRunner

from graphsplit.cli.main import cli
from graphsplit.config import set_config
from graphsplit.sat.dimacs import read_dimacs
from graphsplit.utils.graph_format import GraphDescription, write_graph


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_config(make_config):
    cfg = make_config()
    set_config(cfg)
    yield cfg
    set_config(None)


@pytest.fixture
def graph_file(tmp_path, negative_triangle):
    return str(write_graph(GraphDescription(negative_triangle, 1.0, 0.0, 1.0), tmp_path / "tri.txt"))


@pytest.fixture
def unsat_graph_file(tmp_path, positive_triangle):
    return str(write_graph(GraphDescription(positive_triangle, 0.0, 1.0, 1.0), tmp_path / "pos.txt"))


def test_solve_finds_partition(runner, cli_config, graph_file, tmp_path):
    out_dir = tmp_path / "res"
    result = runner.invoke(cli, ["solve", graph_file, "--verify", "--output", str(out_dir)])
    assert result.exit_code == 0, result.output
    assert "Set 1:" in result.output
    assert "Partition verified" in result.output
    data = json.loads((out_dir / "tri.json").read_text())
    assert data["dimacs"]["satisfiable"] is True


def test_solve_unsat_exit_code(runner, cli_config, unsat_graph_file):
    result = runner.invoke(cli, ["solve", unsat_graph_file])
    assert result.exit_code == 2
    assert "No partition exists" in result.output


def test_solve_solver_failure_is_reported(runner, cli_config, graph_file, tmp_path):
    result = runner.invoke(cli, ["solve", graph_file, "--solver-path", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "Solver failure during launch" in result.output


def test_solve_unknown_backend(runner, cli_config, graph_file):
    result = runner.invoke(cli, ["solve", graph_file, "--backend", "nope"])
    assert result.exit_code == 1
    assert "not available" in result.output


def test_solve_bad_graph_file(runner, cli_config, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("three\n")
    result = runner.invoke(cli, ["solve", str(path)])
    assert result.exit_code == 1
    assert "Invalid node count" in result.output


def test_encode_with_check(runner, cli_config, graph_file, tmp_path):
    target = tmp_path / "out.cnf"
    result = runner.invoke(cli, ["encode", graph_file, "-o", str(target), "--check"])
    assert result.exit_code == 0, result.output
    assert "Header check passed" in result.output
    instance = read_dimacs(target)
    assert (instance.variable_count, instance.clause_count) == (9, 24)


def test_decode_saved_output(runner, cli_config, graph_file, tmp_path):
    result_file = tmp_path / "answer.txt"
    result_file.write_text("s SATISFIABLE\nv 1 -2 -3 -4 5 -6 -7 -8 9 0\n")
    result = runner.invoke(cli, ["decode", graph_file, str(result_file)])
    assert result.exit_code == 0, result.output
    assert "Set 1: 1" in result.output
    assert "Set 3: 3" in result.output


def test_decode_truncated_output(runner, cli_config, graph_file, tmp_path):
    result_file = tmp_path / "answer.txt"
    result_file.write_text("s SATISFIABLE\nv 1 -2 -3\n")
    result = runner.invoke(cli, ["decode", graph_file, str(result_file)])
    assert result.exit_code == 1
    assert "not terminated" in result.output


def test_generate_to_file_and_stdout(runner, cli_config, tmp_path):
    target = tmp_path / "g.txt"
    result = runner.invoke(cli, ["generate", "6", "--density", "1", "--seed", "4", "-o", str(target)])
    assert result.exit_code == 0, result.output
    assert target.read_text().splitlines()[0] == "6"

    result = runner.invoke(cli, ["generate", "3", "--density", "0", "--seed", "4"])
    assert result.exit_code == 0
    assert "000\n000\n000\n" in result.output


def test_generate_invalid(runner, cli_config):
    result = runner.invoke(cli, ["generate", "3", "--density", "2"])
    assert result.exit_code == 1


def test_list_backends(runner, cli_config):
    result = runner.invoke(cli, ["list-backends", "-v"])
    assert result.exit_code == 0
    assert "dimacs" in result.output
    assert "z3" in result.output


def test_unknown_log_level_is_a_usage_error(runner, cli_config):
    result = runner.invoke(cli, ["--log-level", "chatty", "list-backends"])
    assert result.exit_code == 2
    assert "chatty" in result.output


def test_unwritable_log_file_is_reported(runner, make_config, tmp_path, monkeypatch):
    # a directory cannot be opened as a log file
    set_config(make_config(log_file=tmp_path))
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    try:
        result = runner.invoke(cli, ["--log-level", "debug", "list-backends"])
    finally:
        set_config(None)
    assert result.exit_code == 1
    assert "Error: Cannot open log file" in result.output
