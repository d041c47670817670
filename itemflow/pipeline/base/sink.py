"""
Sink capability: consumers of the items that survive filtering.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Generic, TypeVar

from .component import PipelineComponent

T = TypeVar("T")


class Sink(PipelineComponent, Generic[T]):
    """
    Abstract base class for item consumers.

    Sinks perform side effects (store, emit, write) and signal failure by
    raising. Every sink of a pipeline receives the same item object; sinks do
    not see each other's results.
    """

    @abstractmethod
    def save(self, item: T) -> None:
        """
        Consume an item.

        Args:
            item: An item that every filter kept

        Raises:
            Exception: Any exception aborts the whole pipeline run
        """
        pass
