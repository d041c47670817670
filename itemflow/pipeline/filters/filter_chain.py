"""
FilterChain for evaluating multiple filters against one item.

This module provides the FilterChain class that evaluates filters in their
insertion order with all-must-keep semantics, stopping at the first drop.
"""

from __future__ import annotations

from logging import Logger
from typing import Any, Dict, Generic, Iterator, List, Sequence, Tuple, TypeVar

from ...exceptions import FilterError
from ...logger import get_logger
from ..base import Filter

T = TypeVar("T")


class FilterChain(Generic[T]):
    """
    Ordered, immutable chain of filters.

    An item is kept only if every filter keeps it. Evaluation short-circuits:
    once a filter drops the item, the remaining filters are not called. An
    empty chain keeps everything.
    """

    def __init__(self, name: str, filters: Sequence[Filter[T]] = (), logger: Logger | None = None) -> None:
        """
        Initialize the filter chain.

        Args:
            name: Name for this filter chain, usually the pipeline name
            filters: Filters to evaluate, in order
            logger: Optional logger instance (creates default if not provided)
        """
        self.name = name
        self._filters: Tuple[Filter[T], ...] = tuple(filters)
        self._drop_counts: List[int] = [0] * len(self._filters)
        self.logger = logger or get_logger()

    @property
    def filters(self) -> Tuple[Filter[T], ...]:
        return self._filters

    def keep(self, item: T) -> bool:
        """
        Evaluate the chain against a single item.

        Args:
            item: Item to evaluate

        Returns:
            True if every filter kept the item

        Raises:
            FilterError: If a filter raises instead of returning a decision
        """
        for i, filter_instance in enumerate(self._filters):
            try:
                kept = filter_instance.keep(item)
            except Exception as e:
                error_msg = f"Filter '{filter_instance.get_name()}' failed at step {i + 1}"
                self.logger.error(f"FilterChain '{self.name}': {error_msg}: {e}")
                raise FilterError(filter_instance, error_msg, e) from e

            if not kept:
                self._drop_counts[i] += 1
                self.logger.debug(
                    f"FilterChain '{self.name}': Item dropped by filter '{filter_instance.get_name()}' "
                    f"at step {i + 1}/{len(self._filters)}"
                )
                return False

        return True

    def get_filter_names(self) -> List[str]:
        return [filter_instance.get_name() for filter_instance in self._filters]

    def get_drop_counts(self) -> Dict[str, int]:
        """
        Get how many items each filter dropped.

        Filters sharing a name are summed together.

        Returns:
            Mapping of filter name to number of dropped items
        """
        counts: Dict[str, int] = {}
        for filter_instance, count in zip(self._filters, self._drop_counts):
            counts[filter_instance.get_name()] = counts.get(filter_instance.get_name(), 0) + count
        return counts

    def __iter__(self) -> Iterator[Filter[Any]]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __str__(self) -> str:
        return f"FilterChain(name='{self.name}', filters={len(self._filters)})"

    def __repr__(self) -> str:
        return f"FilterChain(name='{self.name}', filters={self.get_filter_names()})"
