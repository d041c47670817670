from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .pipeline.base import Filter, Sink, Source


class BaseError(Exception):
    pass


class BuildErrorKind(str, Enum):
    missing_source = "MissingSource"
    missing_sink = "MissingSink"


class BuildError(BaseError):
    """
    Raised by ``PipelineBuilder.build()`` when the minimum viable configuration is not met.

    The builder stays usable after this error, so the caller can add the missing
    component and build again.
    """

    kind: BuildErrorKind


class MissingSourceError(BuildError):
    kind = BuildErrorKind.missing_source

    def __init__(self) -> None:
        super(MissingSourceError, self).__init__("all pipelines need at least one source")


class MissingSinkError(BuildError):
    kind = BuildErrorKind.missing_sink

    def __init__(self) -> None:
        super(MissingSinkError, self).__init__("all pipelines need at least one sink")


class BuilderConsumedError(BaseError):
    def __init__(self) -> None:
        super(BuilderConsumedError, self).__init__("builder has already produced a pipeline and cannot be reused")


class PipelineStateError(BaseError):
    def __init__(self, state: str) -> None:
        self.state = state
        super(PipelineStateError, self).__init__(f"pipeline cannot run from state '{state}'")


class SourceError(BaseError):
    """
    Exception raised when a source fails while producing items.

    Exhaustion is never reported through this error; it only wraps exceptions
    raised by the source itself.
    """

    def __init__(self, source: Source[Any], message: str, cause: Optional[BaseException] = None) -> None:
        self.source = source
        self.cause = cause
        super(SourceError, self).__init__(f"Source '{source.name}' error: {message}")


class FilterError(BaseError):
    """
    Exception raised when a filter raises instead of returning a keep/drop decision.
    """

    def __init__(self, filter_instance: Filter[Any], message: str, cause: Optional[BaseException] = None) -> None:
        self.filter = filter_instance
        self.cause = cause
        super(FilterError, self).__init__(f"Filter '{filter_instance.name}' error: {message}")


class SinkError(BaseError):
    """
    Exception raised when a sink fails to save an item.

    The sink's own exception is kept verbatim in ``cause`` (and as ``__cause__``).
    """

    def __init__(self, sink: Sink[Any], item: Any, message: str, cause: Optional[BaseException] = None) -> None:
        self.sink = sink
        self.item = item
        self.cause = cause
        super(SinkError, self).__init__(f"Sink '{sink.name}' error: {message}")


class ConfigurationError(BaseError):
    """Exception raised when configuration loading or validation fails."""

    pass


class UnknownComponentTypeError(BaseError, ValueError):
    def __init__(self, role: str, component_type: str) -> None:
        self.role = role
        self.component_type = component_type
        super(UnknownComponentTypeError, self).__init__(f"Unknown {role} type: '{component_type}'")


class ComponentCreationError(BaseError):
    def __init__(self, role: str, name: str, component_type: str, cause: Optional[BaseException] = None) -> None:
        self.role = role
        self.name = name
        self.component_type = component_type
        self.cause = cause
        super(ComponentCreationError, self).__init__(
            f"Failed to create {role} '{name}' of type '{component_type}': {cause}"
        )
