"""
Pipeline Sources

Adapters turning plain Python data into pipeline sources.
"""

from .basic_sources import IterableSource, StaticSource

__all__ = [
    "IterableSource",
    "StaticSource",
]
