"""Unified registry bridge: exposes partition backends as registry solvers."""
from ..registry import registry

from .external import DimacsProcessSolver as _DimacsProcessSolver
from .z3_backend import Z3PartitionSolver as _Z3PartitionSolver


@registry.register("dimacs")
class DimacsSolver(_DimacsProcessSolver):
    """Registry wrapper for the external DIMACS solver process."""
    pass


@registry.register("z3")
class Z3Solver(_Z3PartitionSolver):
    """Registry wrapper for the in-process Z3 solver."""
    pass
