"""
Fluent builder for pipelines.
"""

from __future__ import annotations

from collections.abc import Iterable
from logging import Logger
from typing import Any, Generic, List, Optional, TypeVar

from ..exceptions import BuilderConsumedError, MissingSinkError, MissingSourceError
from ..settings import GlobalSettings
from .base import Filter, Sink, Source
from .filters import PredicateFilter
from .pipeline import Pipeline, _new_pipeline
from .sinks import CallableSink
from .sources import IterableSource

T = TypeVar("T")


class PipelineBuilder(Generic[T]):
    """
    Mutable accumulator that validates and produces a ``Pipeline``.

    Every ``add_*`` method appends to an ordered collection and returns the
    builder, so calls can be chained. ``build()`` is the only place where the
    configuration is checked: at least one source and at least one sink are
    required, filters are optional. After a successful ``build()`` the builder
    is consumed.

    Plain Python values are accepted where unambiguous: an iterable becomes an
    ``IterableSource``, a callable becomes a ``PredicateFilter`` or a
    ``CallableSink``.

    >>> from itemflow.pipeline.sinks import CollectingSink
    >>> sink = CollectingSink()
    >>> pipeline = (
    ...     PipelineBuilder("doc")
    ...     .add_source([1, 2, 3, 4])
    ...     .add_filter(lambda n: n % 2 == 0)
    ...     .add_sink(sink)
    ...     .build()
    ... )
    >>> pipeline.run().items_dispatched
    2
    >>> sink.items
    [2, 4]
    """

    def __init__(
        self, name: str = "pipeline", logger: Optional[Logger] = None, settings: Optional[GlobalSettings] = None
    ) -> None:
        self.name = name
        self._sources: List[Source[T]] = []
        self._filters: List[Filter[T]] = []
        self._sinks: List[Sink[T]] = []
        self._logger = logger
        self._settings = settings
        self._consumed = False

    def add_source(self, source: Any) -> PipelineBuilder[T]:
        """
        Append a source.

        Args:
            source: A ``Source`` instance, or any non-string iterable

        Returns:
            This builder
        """
        self._check_not_consumed()
        if isinstance(source, Source):
            self._sources.append(source)
        elif isinstance(source, Iterable) and not isinstance(source, (str, bytes, bytearray)):
            self._sources.append(IterableSource(f"source_{len(self._sources) + 1}", source))
        else:
            raise TypeError(f"Expected a Source or an iterable, got {type(source).__name__}")
        return self

    def add_filter(self, filter_instance: Any) -> PipelineBuilder[T]:
        """
        Append a filter.

        Args:
            filter_instance: A ``Filter`` instance, or a callable returning a keep/drop value

        Returns:
            This builder
        """
        self._check_not_consumed()
        if isinstance(filter_instance, Filter):
            self._filters.append(filter_instance)
        elif callable(filter_instance):
            name = _callable_name(filter_instance, f"filter_{len(self._filters) + 1}")
            self._filters.append(PredicateFilter(name, filter_instance))
        else:
            raise TypeError(f"Expected a Filter or a callable, got {type(filter_instance).__name__}")
        return self

    def add_sink(self, sink: Any) -> PipelineBuilder[T]:
        """
        Append a sink.

        Args:
            sink: A ``Sink`` instance, or a callable consuming one item

        Returns:
            This builder
        """
        self._check_not_consumed()
        if isinstance(sink, Sink):
            self._sinks.append(sink)
        elif callable(sink):
            name = _callable_name(sink, f"sink_{len(self._sinks) + 1}")
            self._sinks.append(CallableSink(name, sink))
        else:
            raise TypeError(f"Expected a Sink or a callable, got {type(sink).__name__}")
        return self

    def build(self) -> Pipeline[T]:
        """
        Validate the accumulated components and produce the pipeline.

        Returns:
            The immutable pipeline

        Raises:
            MissingSourceError: If no source was added (checked first)
            MissingSinkError: If no sink was added
            BuilderConsumedError: If this builder already built a pipeline
        """
        self._check_not_consumed()
        if not self._sources:
            raise MissingSourceError()
        if not self._sinks:
            raise MissingSinkError()

        pipeline: Pipeline[T] = _new_pipeline(
            self.name, self._sources, self._filters, self._sinks, logger=self._logger, settings=self._settings
        )
        self._consumed = True
        self._sources, self._filters, self._sinks = [], [], []
        return pipeline

    def _check_not_consumed(self) -> None:
        if self._consumed:
            raise BuilderConsumedError()

    def __repr__(self) -> str:
        return (
            f"PipelineBuilder(name='{self.name}', sources={len(self._sources)}, "
            f"filters={len(self._filters)}, sinks={len(self._sinks)})"
        )


def _callable_name(func: Any, fallback: str) -> str:
    """Name a coerced callable; anonymous functions get the positional fallback."""
    name = getattr(func, "__name__", None)
    if not isinstance(name, str) or name == "<lambda>":
        return fallback
    return name
