"""
Basic filter implementations.

This module provides generic filters that do not depend on the item type:
a wrapper for plain predicates and a filter for result-wrapped items.
"""

from __future__ import annotations

from logging import Logger
from typing import Any, Callable, Dict, TypeVar

from ...logger import get_logger
from ..base import Filter, Outcome

T = TypeVar("T")


class PredicateFilter(Filter[T]):
    """
    Filter that delegates the decision to a callable.

    The callable's return value is coerced with ``bool``.

    >>> even = PredicateFilter("even", lambda n: n % 2 == 0)
    >>> even.keep(2), even.keep(3)
    (True, False)
    """

    def __init__(self, name: str, predicate: Callable[[T], Any], config: Dict[str, Any] | None = None) -> None:
        super().__init__(name, config)
        self.predicate = predicate

    def keep(self, item: T) -> bool:
        return bool(self.predicate(item))


class OutcomeFilter(Filter[Outcome[Any]]):
    """
    Keep successful ``Outcome`` items and drop failed ones.

    Failed outcomes are counted in ``failure_count`` and, unless the
    ``log_failures`` config value is False, logged as warnings.
    """

    def __init__(self, name: str, config: Dict[str, Any] | None = None, logger: Logger | None = None) -> None:
        super().__init__(name, config)
        self.log_failures = bool(self.get_config_value("log_failures", True))
        self.failure_count = 0
        self.logger = logger or get_logger()

    def keep(self, item: Outcome[Any]) -> bool:
        if item.is_ok:
            return True
        self.failure_count += 1
        if self.log_failures:
            self.logger.warning(f"Filter '{self.name}': Dropping failed item: {item.error!r}")
        return False
