"""
Solver backend registry.
"""

from typing import Dict, Type, List, Optional
from .base_solver import BasePartitionSolver, SolverMetadata
from .exceptions import SolverNotFoundError


class SolverRegistry:
    def __init__(self):
        self._solvers: Dict[str, Type[BasePartitionSolver]] = {}

    def register(self, name: str):
        def decorator(cls: Type[BasePartitionSolver]):
            self._solvers[name] = cls
            return cls
        return decorator

    def get_solver(self, name: str) -> Optional[Type[BasePartitionSolver]]:
        return self._solvers.get(name)

    def require_solver(self, name: str) -> Type[BasePartitionSolver]:
        cls = self.get_solver(name)
        if cls is None:
            available = ", ".join(self.list_solvers()) or "none"
            raise SolverNotFoundError(f"Solver backend '{name}' not available. Available: {available}")
        return cls

    def list_solvers(self) -> List[str]:
        return sorted(self._solvers)

    def get_metadata(self, name: str) -> Optional[SolverMetadata]:
        cls = self.get_solver(name)
        return cls.get_metadata() if cls else None

    def get_all_metadata(self) -> Dict[str, SolverMetadata]:
        return {name: cls.get_metadata() for name, cls in sorted(self._solvers.items())}


# Global registry instance
registry = SolverRegistry()
