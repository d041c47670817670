"""Composable source, filter and sink pipelines."""

from .exceptions import (
    BaseError,
    BuildError,
    BuildErrorKind,
    FilterError,
    MissingSinkError,
    MissingSourceError,
    SinkError,
    SourceError,
)
from .pipeline import (
    Filter,
    Outcome,
    Pipeline,
    PipelineBuilder,
    PipelineState,
    RunSummary,
    Sink,
    Source,
)

__version__ = "0.1.0"

__all__ = [
    "BaseError",
    "BuildError",
    "BuildErrorKind",
    "Filter",
    "FilterError",
    "MissingSinkError",
    "MissingSourceError",
    "Outcome",
    "Pipeline",
    "PipelineBuilder",
    "PipelineState",
    "RunSummary",
    "Sink",
    "SinkError",
    "Source",
    "SourceError",
    "__version__",
]
