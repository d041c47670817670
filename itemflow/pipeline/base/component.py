"""
Abstract base class shared by sources, filters and sinks.
"""
from __future__ import annotations

from abc import ABC
from typing import Any, Dict, Optional


class PipelineComponent(ABC):
    """
    Common base for every pipeline capability.

    A component has a name, used in logs and error messages, and an optional
    configuration dictionary. Components created from a configuration file
    are always instantiated as ``cls(name, config)``.
    """

    def __init__(self, name: str, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the pipeline component.

        Args:
            name: Name for this component instance
            config: Optional configuration dictionary for the component
        """
        self.name = name
        self.config = config or {}

    def validate_config(self) -> None:
        """
        Validate the component's configuration.

        Called by ``PipelineFactory`` right after instantiation. Override it in
        concrete components to check their specific requirements.

        Raises:
            ValueError: If the configuration is invalid
        """
        pass

    def get_config_value(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def get_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', config={self.config})"
