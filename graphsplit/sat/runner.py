"""
External SAT solver process interface.

Runs a DIMACS solver binary on a CNF file and returns its captured output.
Launch failures, timeouts and unexpected exit codes become distinct
SolverIntegrationError subclasses; none of them means "unsatisfiable".
"""

import logging
import subprocess
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from ..exceptions import SolverLaunchError, SolverProcessError, SolverTimeoutError

logger = logging.getLogger(__name__)

# 10 = SAT, 20 = UNSAT in the SAT competition convention
DEFAULT_EXIT_CODES = (0, 10, 20)

_EXCERPT_CHARS = 500


def run_solver(
    cnf_path: Union[str, Path],
    solver_path: str = "minisat",
    args: Sequence[str] = (),
    timeout: Optional[float] = None,
    accepted_exit_codes: Iterable[int] = DEFAULT_EXIT_CODES,
    result_path: Optional[Union[str, Path]] = None,
) -> str:
    """
    Run ``solver_path [args...] cnf_path [result_path]`` and return its answer.

    The answer is stdout (stderr merged), or the contents of ``result_path``
    for solvers that write their model to a file (MiniSat).

    Args:
        cnf_path: DIMACS file to solve
        solver_path: Solver executable (name on PATH or path)
        args: Extra command line arguments placed before the CNF path
        timeout: Wall-clock limit in seconds (None = no limit)
        accepted_exit_codes: Return codes treated as a normal finish
        result_path: File the solver writes its result to, passed after cnf_path

    Raises:
        SolverLaunchError: if the executable cannot be started
        SolverTimeoutError: if the solver exceeds ``timeout``
        SolverProcessError: if the solver exits with any other code
    """
    cmd = [str(solver_path), *[str(a) for a in args], str(cnf_path)]
    if result_path is not None:
        result_path = Path(result_path)
        result_path.unlink(missing_ok=True)
        cmd.append(str(result_path))
    logger.debug("Running solver: %s", " ".join(cmd))

    try:
        # run() kills and reaps the child on timeout or any exception
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning("Solver %s timed out after %ss", solver_path, timeout)
        raise SolverTimeoutError(f"{solver_path} did not finish within {timeout}s") from None
    except OSError as e:
        logger.error("Cannot launch solver %s: %s", solver_path, e)
        raise SolverLaunchError(f"Cannot launch {solver_path!r}: {e}") from e

    output = result.stdout or ""
    if result.returncode not in tuple(accepted_exit_codes):
        logger.warning("Solver %s exited with code %d", solver_path, result.returncode)
        raise SolverProcessError(
            f"{solver_path} exited with code {result.returncode}: {output[-_EXCERPT_CHARS:].strip()}",
            returncode=result.returncode,
            output=output,
        )

    if result_path is None:
        return output
    try:
        return result_path.read_text()
    except OSError as e:
        raise SolverProcessError(
            f"{solver_path} left no readable result file {result_path}: {e}",
            returncode=result.returncode,
            output=output,
        ) from e
