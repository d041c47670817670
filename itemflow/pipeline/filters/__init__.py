"""
Pipeline Filters

This module contains the filter chain used by the execution loop and generic
filter implementations.
"""

from .basic_filters import OutcomeFilter, PredicateFilter
from .filter_chain import FilterChain

__all__ = [
    "FilterChain",
    "OutcomeFilter",
    "PredicateFilter",
]
