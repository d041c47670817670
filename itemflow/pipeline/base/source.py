"""
Source capability: the producer side of a pipeline.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Generic, Iterator, TypeVar

from .component import PipelineComponent

T = TypeVar("T")


class Source(PipelineComponent, Generic[T]):
    """
    Abstract base class for item producers.

    A source owns its own cursor and yields items lazily, one at a time. The
    sequence may be finite or infinite. Sources are single-shot: once a
    pipeline has pulled from one, it is never restarted.
    """

    @abstractmethod
    def items(self) -> Iterator[T]:
        """
        Return the iterator the pipeline pulls items from.

        Raising from this method or from the returned iterator is reported as
        a ``SourceError``; normal termination (``StopIteration``) means the
        source is exhausted.

        Returns:
            Iterator over the items produced by this source
        """
        pass
