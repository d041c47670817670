"""
Registries and factory for creating pipelines from configuration.

This module provides configuration-driven component creation: component
classes are registered under a type name per role, and ``PipelineFactory``
turns a ``PipelineConfig`` into a built ``Pipeline``.
"""

from __future__ import annotations

from enum import Enum
from logging import Logger
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from ..exceptions import ComponentCreationError, UnknownComponentTypeError
from ..logger import get_logger
from ..settings import GlobalSettings
from .base import Filter, PipelineComponent, Sink, Source
from .builder import PipelineBuilder
from .config import ComponentConfig, PipelineConfig, load_config
from .pipeline import Pipeline


class ComponentRole(str, Enum):
    source = "source"
    filter = "filter"
    sink = "sink"


_BASE_CLASSES: Dict[ComponentRole, Type[PipelineComponent]] = {
    ComponentRole.source: Source,
    ComponentRole.filter: Filter,
    ComponentRole.sink: Sink,
}


class ComponentRegistry:
    """
    Registry for component types of one role.

    Maintains a mapping of type names to component classes, enabling dynamic
    instantiation based on configuration.
    """

    def __init__(self, role: ComponentRole) -> None:
        self.role = role
        self.base_class = _BASE_CLASSES[role]
        self._component_types: Dict[str, Type[PipelineComponent]] = {}

    def register(self, component_type: str, component_class: Type[PipelineComponent]) -> None:
        """
        Register a component type with its corresponding class.

        Args:
            component_type: String identifier for the component type
            component_class: Class to register, a subclass of the role's base class

        Raises:
            ValueError: If component_type is already registered or the class has the wrong base
        """
        if component_type in self._component_types:
            raise ValueError(f"{self.role.value.capitalize()} type '{component_type}' is already registered")

        if not (isinstance(component_class, type) and issubclass(component_class, self.base_class)):
            raise ValueError(
                f"{self.role.value.capitalize()} class must inherit from {self.base_class.__name__} base class"
            )

        self._component_types[component_type] = component_class

    def unregister(self, component_type: str) -> bool:
        if component_type in self._component_types:
            del self._component_types[component_type]
            return True
        return False

    def get_component_class(self, component_type: str) -> Type[PipelineComponent]:
        """
        Get the component class for a given type.

        Raises:
            UnknownComponentTypeError: If the type is not registered
        """
        if component_type not in self._component_types:
            raise UnknownComponentTypeError(self.role.value, component_type)

        return self._component_types[component_type]

    def get_registered_types(self) -> List[str]:
        return list(self._component_types.keys())

    def is_registered(self, component_type: str) -> bool:
        return component_type in self._component_types


class PipelineFactory:
    """
    Factory for creating pipelines from configuration.

    Enabled components are instantiated as ``cls(name, config)`` and passed to
    a ``PipelineBuilder`` in the order they appear in the configuration, so a
    configuration without sources or sinks fails exactly like a hand-built
    pipeline would.
    """

    def __init__(
        self,
        registries: Optional[Mapping[ComponentRole, ComponentRegistry]] = None,
        logger: Logger | None = None,
        settings: GlobalSettings | None = None,
    ) -> None:
        """
        Initialize the pipeline factory.

        Args:
            registries: Registries per role; roles left out use the global registries
            logger: Optional logger instance (creates default if not provided)
            settings: Optional settings passed on to built pipelines
        """
        self.registries: Dict[ComponentRole, ComponentRegistry] = dict(_global_registries)
        self.registries.update(registries or {})
        self.settings = settings
        self.logger = logger or get_logger()

    def create_component(self, role: ComponentRole, config: ComponentConfig) -> PipelineComponent:
        """
        Create a component instance from configuration.

        Args:
            role: Role the component plays in the pipeline
            config: Component configuration object

        Returns:
            Configured component instance

        Raises:
            UnknownComponentTypeError: If the type is not registered for the role
            ComponentCreationError: If instantiation or config validation fails
        """
        self.logger.info(f"Creating {role.value} '{config.name}' of type '{config.type}'")

        component_class = self.registries[role].get_component_class(config.type)

        try:
            component = component_class(config.name, dict(config.config))  # type: ignore[call-arg]
            component.validate_config()
        except Exception as e:
            self.logger.error(f"Failed to create {role.value} '{config.name}' of type '{config.type}': {e}")
            raise ComponentCreationError(role.value, config.name, config.type, e) from e

        return component

    def create_builder(self, config: PipelineConfig) -> PipelineBuilder[Any]:
        """
        Create a builder pre-populated with every enabled component.

        The returned builder can still be extended before ``build()``.
        """
        builder: PipelineBuilder[Any] = PipelineBuilder(config.pipeline_name, logger=self.logger, settings=self.settings)
        sections = (
            (ComponentRole.source, config.sources, builder.add_source),
            (ComponentRole.filter, config.filters, builder.add_filter),
            (ComponentRole.sink, config.sinks, builder.add_sink),
        )
        for role, component_configs, add in sections:
            for component_config in component_configs:
                if not component_config.enabled:
                    self.logger.info(f"Skipping disabled {role.value} '{component_config.name}'")
                    continue
                add(self.create_component(role, component_config))
        return builder

    def create_pipeline(self, config: PipelineConfig) -> Pipeline[Any]:
        """
        Create a pipeline from configuration.

        Raises:
            MissingSourceError: If no enabled source is configured
            MissingSinkError: If no enabled sink is configured
        """
        pipeline = self.create_builder(config).build()
        self.logger.info(
            f"Successfully created pipeline '{config.pipeline_name}' with {len(pipeline.sources)} sources, "
            f"{len(pipeline.filters)} filters and {len(pipeline.sinks)} sinks"
        )
        return pipeline

    def create_pipeline_from_file(self, file_path: Union[str, Path]) -> Pipeline[Any]:
        return self.create_pipeline(load_config(file_path))


# Global registry instances
_global_registries: Dict[ComponentRole, ComponentRegistry] = {role: ComponentRegistry(role) for role in ComponentRole}


def get_global_registry(role: ComponentRole) -> ComponentRegistry:
    return _global_registries[ComponentRole(role)]


def register_source(source_type: str, source_class: Type[Source[Any]]) -> None:
    _global_registries[ComponentRole.source].register(source_type, source_class)


def register_filter(filter_type: str, filter_class: Type[Filter[Any]]) -> None:
    _global_registries[ComponentRole.filter].register(filter_type, filter_class)


def register_sink(sink_type: str, sink_class: Type[Sink[Any]]) -> None:
    _global_registries[ComponentRole.sink].register(sink_type, sink_class)
