"""Configuration management for graphsplit"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple
from pathlib import Path
import json
import os

from .exceptions import ConfigurationError


@dataclass
class Config:
    """
    Global configuration for the graphsplit command line.

    Can be loaded from file or environment variables. Library code never
    reads it implicitly; solvers receive it as an argument.
    """

    # Directories
    work_dir: Path = Path("work")
    results_dir: Path = Path("res")

    # File names inside work_dir
    cnf_filename: str = "graph.cnf"
    result_filename: str = "solver.out"

    # External solver
    solver_path: str = "minisat"
    solver_args: List[str] = field(default_factory=list)
    # MiniSat writes its model to a file given after the CNF path
    solver_writes_result_file: bool = True
    # 10/20 are the SAT competition exit codes for SAT/UNSAT
    accepted_exit_codes: Tuple[int, ...] = (0, 10, 20)

    # Default settings
    default_timeout: int = 300
    default_backend: str = "dimacs"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self):
        if self.default_timeout <= 0:
            raise ConfigurationError("default_timeout must be positive")
        if not self.cnf_filename or not self.result_filename:
            raise ConfigurationError("cnf_filename and result_filename must not be empty")
        self.accepted_exit_codes = tuple(int(c) for c in self.accepted_exit_codes)

    @property
    def cnf_path(self) -> Path:
        return self.work_dir / self.cnf_filename

    @property
    def result_path(self) -> Path:
        return self.work_dir / self.result_filename

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file"""
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        # parse nested path strings
        for key in ("work_dir", "results_dir"):
            if key in data:
                data[key] = Path(data[key])
        if "log_file" in data and data["log_file"]:
            data["log_file"] = Path(data["log_file"])
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables"""
        config = cls()

        if timeout := os.getenv("GRAPHSPLIT_TIMEOUT"):
            try:
                config.default_timeout = int(timeout)
            except ValueError:
                raise ConfigurationError(f"GRAPHSPLIT_TIMEOUT is not an integer: {timeout!r}") from None
            if config.default_timeout <= 0:
                raise ConfigurationError(f"GRAPHSPLIT_TIMEOUT must be positive, got {timeout!r}")

        if solver := os.getenv("GRAPHSPLIT_SOLVER"):
            config.solver_path = solver

        if work_dir := os.getenv("GRAPHSPLIT_WORK_DIR"):
            config.work_dir = Path(work_dir)

        if results_dir := os.getenv("GRAPHSPLIT_RESULTS_DIR"):
            config.results_dir = Path(results_dir)

        if log_level := os.getenv("GRAPHSPLIT_LOG_LEVEL"):
            config.log_level = log_level

        return config

    def save(self, path: Path) -> None:
        """Save configuration to file"""
        data = {
            "work_dir": str(self.work_dir),
            "results_dir": str(self.results_dir),
            "cnf_filename": self.cnf_filename,
            "result_filename": self.result_filename,
            "solver_path": self.solver_path,
            "solver_args": list(self.solver_args),
            "solver_writes_result_file": self.solver_writes_result_file,
            "accepted_exit_codes": list(self.accepted_exit_codes),
            "default_timeout": self.default_timeout,
            "default_backend": self.default_backend,
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)


_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        # Try to load from default locations
        config_paths = [
            Path("graphsplit_config.json"),
            Path.home() / ".graphsplit_config.json",
        ]

        for path in config_paths:
            if path.exists():
                _config = Config.from_file(path)
                break
        else:
            # Load from environment or use defaults
            _config = Config.from_env()

    return _config


def set_config(config: Optional[Config]) -> None:
    """Set global configuration instance (None forces a reload)"""
    global _config
    _config = config
