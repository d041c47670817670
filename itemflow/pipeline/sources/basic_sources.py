"""
Basic source implementations.

These adapt plain Python data into the ``Source`` contract. Concrete domain
sources (files, queues, databases) are expected to live in user code.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, TypeVar

from ..base import Source

T = TypeVar("T")


class IterableSource(Source[T]):
    """
    Source backed by any Python iterable.

    The iterator is captured once at construction, so the source is
    single-shot even when it wraps a re-iterable container such as a list.

    >>> source = IterableSource("numbers", [1, 2, 3])
    >>> list(source.items())
    [1, 2, 3]
    >>> list(source.items())
    []
    """

    def __init__(self, name: str, iterable: Iterable[T], config: Dict[str, Any] | None = None) -> None:
        super().__init__(name, config)
        self._iterator = iter(iterable)

    def items(self) -> Iterator[T]:
        return self._iterator


class StaticSource(Source[Any]):
    """
    Source that yields the ``items`` list from its configuration.

    Meant for declarative pipelines and fixtures, where the items are written
    directly in the pipeline description.
    """

    def __init__(self, name: str, config: Dict[str, Any] | None = None) -> None:
        super().__init__(name, config)
        self._consumed = False

    def validate_config(self) -> None:
        if not isinstance(self.get_config_value("items", []), list):
            raise ValueError("StaticSource 'items' must be a list")

    def items(self) -> Iterator[Any]:
        if self._consumed:
            return iter([])
        self._consumed = True
        values: List[Any] = list(self.get_config_value("items", []))
        return iter(values)
