"""SAT reduction engine: variable numbering, clause generation, DIMACS I/O and result decoding."""

from .variables import SET_COUNT, VariableEncoder, var_id
from .cnf import Clause, CNFInstance
from .clauses import ClauseGenerator, expected_clause_count, generate_cnf
from .dimacs import to_dimacs, write_dimacs, parse_dimacs, read_dimacs
from .decoder import SolverOutput, SolverStatus, parse_solver_output, decode, decode_result

__all__ = [
    "SET_COUNT",
    "VariableEncoder",
    "var_id",
    "Clause",
    "CNFInstance",
    "ClauseGenerator",
    "expected_clause_count",
    "generate_cnf",
    "to_dimacs",
    "write_dimacs",
    "parse_dimacs",
    "read_dimacs",
    "SolverOutput",
    "SolverStatus",
    "parse_solver_output",
    "decode",
    "decode_result",
]
