"""
Pipeline aggregate and its execution loop.

A pipeline drains its sources one after another, runs every item through the
filter chain and fans surviving items out to all sinks. The first failure
anywhere aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from logging import Logger
from typing import Any, Dict, Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from ..exceptions import BaseError, PipelineStateError, SinkError, SourceError
from ..logger import get_logger
from ..settings import GlobalSettings
from .base import Filter, Sink, Source
from .filters import FilterChain

T = TypeVar("T")

_EXHAUSTED = object()
_BUILDER_KEY = object()


class PipelineState(str, Enum):
    idle = "idle"
    pulling_source = "pulling_source"
    filtering = "filtering"
    sinking = "sinking"
    done = "done"
    failed = "failed"


@dataclass(frozen=True)
class RunSummary:
    """Counters describing a successful run."""

    items_pulled: int = 0
    items_dropped: int = 0
    items_dispatched: int = 0
    pulled_by_source: Dict[str, int] = field(default_factory=dict)
    dropped_by_filter: Dict[str, int] = field(default_factory=dict)


class Pipeline(Generic[T]):
    """
    Immutable composition of sources, filters and sinks over one item type.

    Instances are created by ``PipelineBuilder.build()``; the composition cannot
    change afterwards. A pipeline runs exactly once, because its sources are
    consumed by the run.
    """

    def __init__(
        self,
        name: str,
        sources: Sequence[Source[T]],
        filters: Sequence[Filter[T]],
        sinks: Sequence[Sink[T]],
        logger: Logger,
        settings: GlobalSettings,
        *,
        _key: object = None,
    ) -> None:
        if _key is not _BUILDER_KEY:
            raise TypeError("Pipeline instances are created with PipelineBuilder.build()")
        self._name = name
        self._sources: Tuple[Source[T], ...] = tuple(sources)
        self._sinks: Tuple[Sink[T], ...] = tuple(sinks)
        self._filter_chain: FilterChain[T] = FilterChain(name, filters, logger)
        self._logger = logger
        self._progress_log_interval = settings.run_settings.progress_log_interval
        self._state = PipelineState.idle

    @property
    def name(self) -> str:
        return self._name

    @property
    def sources(self) -> Tuple[Source[T], ...]:
        return self._sources

    @property
    def filters(self) -> Tuple[Filter[T], ...]:
        return self._filter_chain.filters

    @property
    def sinks(self) -> Tuple[Sink[T], ...]:
        return self._sinks

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def logger(self) -> Logger:
        return self._logger

    def run(self) -> RunSummary:
        """
        Drain every source through the filter chain into the sinks.

        Sources are drained sequentially in the order they were added. Each
        item is checked by the filters in order and, if kept, saved by every
        sink in order.

        Returns:
            Counters for the completed run

        Raises:
            PipelineStateError: If the pipeline already ran
            SourceError: If a source raised while producing items
            FilterError: If a filter raised instead of deciding
            SinkError: On the first sink failure; nothing else is pulled or saved
        """
        if self._state is not PipelineState.idle:
            raise PipelineStateError(self._state.value)

        self._logger.info(
            f"Pipeline '{self._name}': Starting run with {len(self._sources)} sources, "
            f"{len(self._filter_chain)} filters and {len(self._sinks)} sinks"
        )

        pulled_by_source: Dict[str, int] = {}
        items_pulled = 0
        items_dropped = 0
        items_dispatched = 0

        try:
            for source in self._sources:
                self._state = PipelineState.pulling_source
                iterator = self._open(source)
                source_pulled = 0
                drained = False
                try:
                    while True:
                        item = self._pull(source, iterator)
                        if item is _EXHAUSTED:
                            break
                        source_pulled += 1
                        items_pulled += 1

                        self._state = PipelineState.filtering
                        if self._filter_chain.keep(item):
                            self._state = PipelineState.sinking
                            self._dispatch(item)
                            items_dispatched += 1
                        else:
                            items_dropped += 1

                        self._state = PipelineState.pulling_source
                        if self._progress_log_interval and items_pulled % self._progress_log_interval == 0:
                            self._logger.info(
                                f"Pipeline '{self._name}': Progress - {items_pulled} pulled, "
                                f"{items_dropped} dropped, {items_dispatched} dispatched"
                            )
                    drained = True
                finally:
                    pulled_by_source[source.name] = pulled_by_source.get(source.name, 0) + source_pulled
                    self._close(source, iterator, propagate=drained)

                self._logger.info(
                    f"Pipeline '{self._name}': Source '{source.name}' exhausted after {source_pulled} items"
                )
        except BaseError as e:
            self._state = PipelineState.failed
            self._logger.error(f"Pipeline '{self._name}': Run failed after {items_pulled} items: {e}")
            raise
        except BaseException:
            self._state = PipelineState.failed
            raise

        self._state = PipelineState.done
        summary = RunSummary(
            items_pulled=items_pulled,
            items_dropped=items_dropped,
            items_dispatched=items_dispatched,
            pulled_by_source=pulled_by_source,
            dropped_by_filter=self._filter_chain.get_drop_counts(),
        )
        self._logger.info(
            f"Pipeline '{self._name}': Completed - {items_pulled} pulled, "
            f"{items_dropped} dropped, {items_dispatched} dispatched"
        )
        return summary

    def _open(self, source: Source[T]) -> Iterator[T]:
        try:
            return iter(source.items())
        except Exception as e:
            raise SourceError(source, "failed to start producing items", e) from e

    def _pull(self, source: Source[T], iterator: Iterator[T]) -> Any:
        try:
            return next(iterator)
        except StopIteration:
            return _EXHAUSTED
        except Exception as e:
            raise SourceError(source, "failed while producing items", e) from e

    def _close(self, source: Source[T], iterator: Iterator[T], propagate: bool) -> None:
        """
        Close the source iterator if it supports it.

        A close failure after the source was drained fails the run as a
        ``SourceError``. While another error is already propagating, the close
        failure is only logged so the original error reaches the caller.
        """
        close = getattr(iterator, "close", None)
        if not callable(close):
            return
        try:
            close()
        except Exception as e:
            if propagate:
                raise SourceError(source, "failed to close", e) from e
            self._logger.warning(f"Pipeline '{self._name}': Source '{source.name}' failed to close: {e}")

    def _dispatch(self, item: T) -> None:
        for sink in self._sinks:
            try:
                sink.save(item)
            except Exception as e:
                raise SinkError(sink, item, f"failed to save item: {e}", e) from e

    def __str__(self) -> str:
        return f"Pipeline(name='{self._name}', state='{self._state.value}')"

    def __repr__(self) -> str:
        return (
            f"Pipeline(name='{self._name}', sources={[s.name for s in self._sources]}, "
            f"filters={self._filter_chain.get_filter_names()}, sinks={[s.name for s in self._sinks]})"
        )


def _new_pipeline(
    name: str,
    sources: Sequence[Source[T]],
    filters: Sequence[Filter[T]],
    sinks: Sequence[Sink[T]],
    logger: Optional[Logger] = None,
    settings: Optional[GlobalSettings] = None,
) -> Pipeline[T]:
    settings = settings or GlobalSettings()
    logger = logger or get_logger(level=settings.logger_settings.level)
    return Pipeline(name, sources, filters, sinks, logger, settings, _key=_BUILDER_KEY)
