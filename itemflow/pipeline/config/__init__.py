"""
Pipeline Configuration

This module contains the declarative description of pipelines and its loader.
"""

from ...exceptions import ConfigurationError
from .config_loader import ConfigLoader, load_config
from .models import ComponentConfig, PipelineConfig

__all__ = [
    # Configuration models
    "ComponentConfig",
    "PipelineConfig",
    # Configuration loader
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
]
