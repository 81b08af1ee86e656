"""Base solver interface for all partition solver backends"""

from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass
import logging
import time

from .config import Config
from .exceptions import ConfigurationError
from .graph import GraphModel
from .partition import PartitionOutcome
from .sat.clauses import ClauseGenerator
from .sat.cnf import CNFInstance
from .sat.decoder import SolverOutput, decode
from .sat.variables import VariableEncoder
from .utils.error_handling import solver_stage

logger = logging.getLogger(__name__)


@dataclass
class SolverMetadata:
    """Metadata about a solver backend"""
    name: str
    backend: str  # external process or library
    version: str
    description: str = ""


class BasePartitionSolver(ABC):
    """
    Abstract base class for all partition solvers.

    Runs the pipeline encode -> solve -> decode with timing. Unlike a
    search that merely fails to find an answer, every failure here propagates
    as an exception: only a decoded UNSATISFIABLE answer yields an outcome
    without a partition.
    """

    def __init__(self, graph: GraphModel, timeout: Optional[float] = 300, config: Optional[Config] = None):
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("Timeout must be positive")
        self.graph = graph
        self.timeout = timeout
        self.config = config or Config()
        self.encoder = VariableEncoder(graph.node_count)
        self.start_time: Optional[float] = None

    def _build_model(self) -> CNFInstance:
        """Encode the graph as a CNF instance."""
        return ClauseGenerator(self.graph, self.encoder).generate()

    @abstractmethod
    def _solve_model(self, instance: CNFInstance) -> SolverOutput:
        """Solve the CNF instance and return the solver's structured answer."""
        pass

    def solve(self) -> PartitionOutcome:
        """Main solving method with timing and stage-tagged error handling."""
        self.start_time = time.time()
        name = self.get_metadata().name

        with solver_stage("encode"):
            instance = self._build_model()
        logger.info(
            "%s: solving %d variables, %d clauses", name, instance.variable_count, instance.clause_count
        )

        with solver_stage("solve"):
            output = self._solve_model(instance)

        with solver_stage("decode"):
            outcome = decode(output, self.encoder)

        outcome.backend = name
        outcome.elapsed = time.time() - self.start_time
        logger.info(
            "%s: %s in %.2fs", name, "partition found" if outcome.satisfiable else "no partition", outcome.elapsed
        )
        return outcome

    @property
    def elapsed_time(self) -> float:
        if self.start_time is None:
            return 0.0
        return time.time() - self.start_time

    @property
    def remaining_time(self) -> Optional[float]:
        if self.timeout is None:
            return None
        return max(self.timeout - self.elapsed_time, 0.0)

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> SolverMetadata:
        """Return metadata about this solver."""
        pass
