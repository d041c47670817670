"""Retry with exponential backoff for sinks that talk to unreliable backends.

The pipeline itself never retries: a failed ``save`` aborts the run. Sinks that
want retries opt in by wrapping themselves in ``RetryingSink`` or by
decorating their ``save`` with ``retry_with_backoff``.
"""

import time
from functools import wraps
from logging import Logger
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

from ...logger import get_logger
from ..base import Sink

T = TypeVar("T")
R = TypeVar("R")


def call_with_retry(
    func: Callable[..., R],
    *args: Any,
    max_retries: int = 3,
    initial_delay: float = 1.0,
    backoff_factor: float = 2.0,
    max_delay: float = 30.0,
    retryable_exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    logger: Optional[Logger] = None,
    **kwargs: Any,
) -> R:
    """
    Call ``func`` and retry it on failure.

    Args:
        func: Function to call
        *args: Positional arguments for ``func``
        max_retries: Number of retries after the first attempt
        initial_delay: Seconds to wait before the first retry
        backoff_factor: Multiplier applied to the delay after each retry
        max_delay: Upper bound for the delay in seconds
        retryable_exceptions: Exception types that trigger a retry
        logger: Optional logger instance (creates default if not provided)
        **kwargs: Keyword arguments for ``func``

    Returns:
        The return value of ``func``

    Raises:
        ValueError: If ``max_retries`` or a delay is negative
        Exception: The last exception once all retries are exhausted, or any
            exception not listed in ``retryable_exceptions``
    """
    if max_retries < 0:
        raise ValueError("Max retries cannot be negative")
    if initial_delay < 0 or max_delay < 0:
        raise ValueError("Delays cannot be negative")

    logger = logger or get_logger()
    delay = initial_delay
    name = getattr(func, "__qualname__", repr(func))

    for attempt in range(max_retries + 1):
        try:
            return func(*args, **kwargs)
        except retryable_exceptions as e:
            if attempt == max_retries:
                logger.error(f"[RETRY_EXHAUSTED] All {max_retries} retries failed for {name}: {e}")
                raise

            logger.warning(
                f"[RETRY] Attempt {attempt + 1}/{max_retries} failed for {name}: {e}. Retrying in {delay:.1f}s..."
            )
            time.sleep(delay)
            delay = min(delay * backoff_factor, max_delay)

    raise AssertionError("unreachable")


def retry_with_backoff(
    max_retries: int = 3,
    initial_delay: float = 1.0,
    backoff_factor: float = 2.0,
    max_delay: float = 30.0,
    retryable_exceptions: Tuple[Type[BaseException], ...] = (Exception,),
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """
    Decorator form of ``call_with_retry``.

    Typical use is on a sink's ``save`` method::

        class ApiSink(Sink[dict]):
            @retry_with_backoff(max_retries=5, retryable_exceptions=(ConnectionError,))
            def save(self, item: dict) -> None:
                ...
    """

    def decorator(func: Callable[..., R]) -> Callable[..., R]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            return call_with_retry(
                func,
                *args,
                max_retries=max_retries,
                initial_delay=initial_delay,
                backoff_factor=backoff_factor,
                max_delay=max_delay,
                retryable_exceptions=retryable_exceptions,
                **kwargs,
            )

        return wrapper

    return decorator


class RetryingSink(Sink[T]):
    """
    Wrap another sink and retry its ``save`` with exponential backoff.

    The wrapper reuses the inner sink's name so errors and logs still point at
    the real sink. When retries are exhausted the inner sink's last exception
    is raised unchanged.
    """

    def __init__(
        self,
        sink: Sink[T],
        max_retries: int = 3,
        initial_delay: float = 1.0,
        backoff_factor: float = 2.0,
        max_delay: float = 30.0,
        retryable_exceptions: Tuple[Type[BaseException], ...] = (Exception,),
        logger: Optional[Logger] = None,
    ) -> None:
        if max_retries < 0:
            raise ValueError("Max retries cannot be negative")
        if initial_delay < 0 or max_delay < 0:
            raise ValueError("Delays cannot be negative")
        config: Dict[str, Any] = {
            "max_retries": max_retries,
            "initial_delay": initial_delay,
            "backoff_factor": backoff_factor,
            "max_delay": max_delay,
        }
        super().__init__(sink.name, config)
        self.sink = sink
        self.retryable_exceptions = retryable_exceptions
        self.logger = logger or get_logger()

    def save(self, item: T) -> None:
        call_with_retry(
            self.sink.save,
            item,
            max_retries=self.config["max_retries"],
            initial_delay=self.config["initial_delay"],
            backoff_factor=self.config["backoff_factor"],
            max_delay=self.config["max_delay"],
            retryable_exceptions=self.retryable_exceptions,
            logger=self.logger,
        )
