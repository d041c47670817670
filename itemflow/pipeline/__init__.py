"""
Pipeline Infrastructure

This module provides the building blocks of an item pipeline: capability
contracts for sources, filters and sinks, the fluent builder, the execution
loop and configuration-driven assembly.
"""

from .base import Filter, Outcome, PipelineComponent, Sink, Source
from .builder import PipelineBuilder
from .factory import (
    ComponentRegistry,
    ComponentRole,
    PipelineFactory,
    get_global_registry,
    register_filter,
    register_sink,
    register_source,
)
from .filters import FilterChain, OutcomeFilter, PredicateFilter
from .pipeline import Pipeline, PipelineState, RunSummary
from .sinks import CallableSink, CollectingSink, RetryingSink, call_with_retry, retry_with_backoff
from .sources import IterableSource, StaticSource

# Register the built-in configurable components in the global registries
register_source("static", StaticSource)
register_filter("outcome", OutcomeFilter)
register_sink("collecting", CollectingSink)

__all__ = [
    # Capability contracts
    "Filter",
    "Outcome",
    "PipelineComponent",
    "Sink",
    "Source",
    # Assembly and execution
    "FilterChain",
    "Pipeline",
    "PipelineBuilder",
    "PipelineState",
    "RunSummary",
    # Configuration-driven assembly
    "ComponentRegistry",
    "ComponentRole",
    "PipelineFactory",
    "get_global_registry",
    "register_filter",
    "register_sink",
    "register_source",
    # Basic implementations
    "CallableSink",
    "CollectingSink",
    "IterableSource",
    "OutcomeFilter",
    "PredicateFilter",
    "RetryingSink",
    "StaticSource",
    "call_with_retry",
    "retry_with_backoff",
]
