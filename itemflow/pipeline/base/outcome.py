"""
Result-wrapped items for sources that report per-item faults.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Either a produced value or the error that prevented producing it.

    A source that must not abort the whole run on a bad record can yield
    ``Outcome`` items and let ``OutcomeFilter`` (or a sink) deal with failures.

    >>> Outcome.ok(3).is_ok
    True
    >>> Outcome.ok(3).unwrap()
    3
    >>> failed = Outcome.failed(ValueError("bad row"))
    >>> failed.is_ok
    False
    >>> failed.unwrap()
    Traceback (most recent call last):
     ...
    ValueError: bad row
    """

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failed(cls, error: BaseException) -> Outcome[T]:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
