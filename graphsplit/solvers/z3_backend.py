"""In-process backend solving the generated clauses with Z3."""

import logging

from z3 import Bool, Not, Or, Solver, is_true, sat, unsat

from ..base_solver import BasePartitionSolver, SolverMetadata
from ..exceptions import SolverIntegrationError, SolverTimeoutError
from ..sat.cnf import CNFInstance
from ..sat.decoder import SolverOutput, SolverStatus

logger = logging.getLogger(__name__)


class Z3PartitionSolver(BasePartitionSolver):
    """Feeds the same CNF clauses to z3 so both backends share one encoding."""

    def _solve_model(self, instance: CNFInstance) -> SolverOutput:
        variables = [Bool(f"x{v}") for v in range(instance.variable_count + 1)]

        def literal(lit: int):
            return variables[lit] if lit > 0 else Not(variables[-lit])

        solver = Solver()
        for clause in instance.clauses:
            lits = [literal(lit) for lit in clause]
            solver.add(Or(*lits) if len(lits) > 1 else lits[0])

        remaining = self.remaining_time
        if remaining is not None:
            solver.set("timeout", max(int(remaining * 1000), 1))

        result = solver.check()
        if result == unsat:
            return SolverOutput(SolverStatus.UNSATISFIABLE)
        if result != sat:
            reason = solver.reason_unknown()
            logger.warning("z3 returned %s: %s", result, reason)
            if "timeout" in reason or "canceled" in reason:
                raise SolverTimeoutError(f"z3 gave up: {reason}")
            raise SolverIntegrationError(f"z3 returned {result}: {reason}", stage="solve")

        model = solver.model()
        assignment = {
            v: is_true(model.evaluate(variables[v], model_completion=True))
            for v in range(1, instance.variable_count + 1)
        }
        return SolverOutput(SolverStatus.SATISFIABLE, assignment)

    @classmethod
    def get_metadata(cls) -> SolverMetadata:
        return SolverMetadata(
            name="z3",
            backend="z3 library",
            version="1.0",
            description="Same CNF clauses solved in-process by Z3",
        )
