"""Decorator utilities for cross-cutting concerns."""
import time
import logging
import functools
from typing import Any, Callable, Optional, TypeVar, cast

from object_store.errors import ObjectStoreError

# Setup logging
logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

def log_operation(func: F = None, *, logger_name: Optional[str] = None) -> F:
    """Decorator to log a store operation and its execution time.

    Successful calls are logged at DEBUG. Rejected calls (an `ObjectStoreError`)
    are logged at WARNING and re-raised unchanged.

    Args:
        func: The function to decorate
        logger_name: Optional logger name (defaults to module logger)

    Returns:
        Decorated function that logs the operation
    """
    op_logger = logging.getLogger(logger_name) if logger_name else logger

    def decorator(inner: F) -> F:
        @functools.wraps(inner)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = inner(*args, **kwargs)
            except ObjectStoreError as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                op_logger.warning(f"{inner.__name__} rejected after {duration_ms:.3f}ms: {e}")
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000
            op_logger.debug(f"{inner.__name__} completed in {duration_ms:.3f}ms")
            return result
        return cast(F, wrapper)

    if func is not None:
        return decorator(func)
    return cast(F, decorator)
