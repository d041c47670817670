"""
Pipeline Base Classes

This module contains the abstract capability contracts that user-supplied
sources, filters and sinks implement.
"""

from .component import PipelineComponent
from .filter import Filter
from .outcome import Outcome
from .sink import Sink
from .source import Source

__all__ = [
    "Filter",
    "Outcome",
    "PipelineComponent",
    "Sink",
    "Source",
]
