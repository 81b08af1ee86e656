"""Error handling utilities for solvers and CLI"""

from contextlib import contextmanager
from typing import Callable, Type, Tuple, Any
import functools
import logging
import time

from graphsplit.exceptions import PartitionError, SolverIntegrationError

logger = logging.getLogger(__name__)


@contextmanager
def solver_stage(stage: str):
    """
    Context manager tagging failures with the pipeline stage they happened in.

    graphsplit exceptions pass through unchanged; anything else is wrapped in
    a SolverIntegrationError so callers never mistake it for "no solution".

    Usage:
        with solver_stage("decode"):
            ... decoding code ...
    """
    try:
        yield
    except PartitionError:
        raise
    except Exception as e:  # noqa: BLE001
        logger.debug("Unexpected failure in stage %s", stage, exc_info=True)
        raise SolverIntegrationError(f"{type(e).__name__}: {e}", stage=stage) from e


def retry_on_failure(
    exceptions: Tuple[Type[BaseException], ...] = (SolverIntegrationError,),
    retries: int = 0,
    delay: float = 0.0,
    backoff: float = 1.0,
):
    """Retry decorator with optional backoff for transient failures."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            _retries = retries
            _delay = delay
            while True:
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if _retries <= 0:
                        raise
                    logger.warning("%s failed (%s), %d retries left", func.__name__, e, _retries)
                    if _delay > 0:
                        time.sleep(_delay)
                    _retries -= 1
                    _delay *= max(backoff, 1.0)

        return wrapper

    return decorator
