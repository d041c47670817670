"""
Basic sink implementations.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, TypeVar

from ..base import Sink

T = TypeVar("T")


class CallableSink(Sink[T]):
    """
    Sink that hands every item to a callable.

    The callable's return value is ignored; raising signals failure.
    """

    def __init__(self, name: str, func: Callable[[T], Any], config: Dict[str, Any] | None = None) -> None:
        super().__init__(name, config)
        self.func = func

    def save(self, item: T) -> None:
        self.func(item)


class CollectingSink(Sink[Any]):
    """
    Sink that keeps every saved item in memory.

    >>> sink = CollectingSink("memory")
    >>> sink.save("a"); sink.save("b")
    >>> sink.items
    ['a', 'b']
    """

    def __init__(self, name: str = "collector", config: Dict[str, Any] | None = None) -> None:
        super().__init__(name, config)
        self.items: List[Any] = []

    def save(self, item: Any) -> None:
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)
