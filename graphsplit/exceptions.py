"""Custom exceptions for graphsplit"""

from typing import Optional


class PartitionError(Exception):
    """Base exception for graphsplit"""
    pass


class InvalidGraphError(PartitionError):
    """Raised when graph data breaks the GraphModel invariants"""
    pass


class GraphFormatError(InvalidGraphError):
    """Raised when a graph description file cannot be parsed"""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ConfigurationError(PartitionError):
    """Raised when configuration is invalid"""
    pass


class SolverNotFoundError(PartitionError):
    """Raised when requested solver backend is not registered"""
    pass


class CNFWriteError(PartitionError):
    """Raised when the CNF instance cannot be written to disk"""
    pass


class SolverIntegrationError(PartitionError):
    """
    Raised when talking to the SAT solver fails.

    Never means "no partition exists"; ``stage`` names the step that failed
    (launch, run, timeout, decode, ...).
    """

    def __init__(self, message: str, stage: str = "solve"):
        self.stage = stage
        super().__init__(f"[{stage}] {message}")


class SolverLaunchError(SolverIntegrationError):
    """Raised when the solver process cannot be started"""

    def __init__(self, message: str):
        super().__init__(message, stage="launch")


class SolverProcessError(SolverIntegrationError):
    """Raised when the solver process exits with an unexpected code"""

    def __init__(self, message: str, returncode: Optional[int] = None, output: str = ""):
        self.returncode = returncode
        self.output = output
        super().__init__(message, stage="run")


class SolverTimeoutError(SolverIntegrationError):
    """Raised when solver exceeds timeout"""

    def __init__(self, message: str):
        super().__init__(message, stage="timeout")


class MalformedResultError(SolverIntegrationError):
    """Raised when solver output is missing, truncated or inconsistent"""

    def __init__(self, message: str):
        super().__init__(message, stage="decode")
