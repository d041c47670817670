"""
Pipeline Sinks

Generic sink implementations and the opt-in retry wrapper.
"""

from .basic_sinks import CallableSink, CollectingSink
from .retry import RetryingSink, call_with_retry, retry_with_backoff

__all__ = [
    "CallableSink",
    "CollectingSink",
    "RetryingSink",
    "call_with_retry",
    "retry_with_backoff",
]
