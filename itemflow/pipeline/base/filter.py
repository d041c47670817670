"""
Filter capability: per-item keep/drop decisions.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Generic, TypeVar

from .component import PipelineComponent

T = TypeVar("T")


class Filter(PipelineComponent, Generic[T]):
    """
    Abstract base class for item filters.

    A filter is a read-only predicate. It may hold private state (counters,
    caches) but must never mutate the item it receives. The same filter
    instance is reused for every item of a run.
    """

    @abstractmethod
    def keep(self, item: T) -> bool:
        """
        Decide whether an item continues downstream.

        Args:
            item: The item produced by a source

        Returns:
            True to keep the item, False to drop it
        """
        pass
