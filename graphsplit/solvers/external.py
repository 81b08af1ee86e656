"""Backend that hands the DIMACS file to an external SAT solver process."""

import logging
from typing import List

from ..base_solver import BasePartitionSolver, SolverMetadata
from ..sat.cnf import CNFInstance
from ..sat.decoder import SolverOutput, parse_solver_output
from ..sat.dimacs import write_dimacs
from ..sat.runner import run_solver

logger = logging.getLogger(__name__)


class DimacsProcessSolver(BasePartitionSolver):
    """
    Writes ``config.cnf_path``, runs ``config.solver_path`` on it and parses
    the answer. The raw answer is kept in ``config.result_path`` so it can be
    decoded again later (``graphsplit decode``).
    """

    def _comments(self) -> List[str]:
        return [
            "graphsplit: signed graph 3-partition",
            f"nodes={self.graph.node_count} positive={self.graph.positive_edge_count} "
            f"negative={self.graph.negative_edge_count}",
            "variable 3*n+s+1 <=> node n (0-based) in set s",
        ]

    def _solve_model(self, instance: CNFInstance) -> SolverOutput:
        cfg = self.config
        cnf_path = write_dimacs(instance, cfg.cnf_path, comments=self._comments())

        result_path = cfg.result_path
        text = run_solver(
            cnf_path,
            solver_path=cfg.solver_path,
            args=cfg.solver_args,
            timeout=self.remaining_time,
            accepted_exit_codes=cfg.accepted_exit_codes,
            result_path=result_path if cfg.solver_writes_result_file else None,
        )
        if not cfg.solver_writes_result_file:
            result_path.write_text(text)
        logger.debug("Solver answer stored in %s", result_path)
        return parse_solver_output(text)

    @classmethod
    def get_metadata(cls) -> SolverMetadata:
        return SolverMetadata(
            name="dimacs",
            backend="external process",
            version="1.0",
            description="DIMACS file solved by an external SAT solver (MiniSat, CaDiCaL, ...)",
        )
