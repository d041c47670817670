"""
Configuration data models for declarative pipelines.

This module defines the structures a YAML or JSON pipeline description is
validated into before components are instantiated.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ComponentConfig(BaseModel):
    """Configuration for a single source, filter or sink."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    config: Dict[str, Any] = Field(default_factory=dict)
    enabled: bool = True
    description: Optional[str] = None


class PipelineConfig(BaseModel):
    """
    Declarative description of a pipeline.

    Sources and sinks may be empty here; the builder reports a missing source
    or sink when the pipeline is created.

    >>> cfg = PipelineConfig(
    ...     pipeline_name="demo",
    ...     sources=[ComponentConfig(name="numbers", type="static", config={"items": [1, 2]})],
    ...     sinks=[ComponentConfig(name="memory", type="collecting")],
    ... )
    >>> [s.name for s in cfg.get_enabled_sources()]
    ['numbers']
    >>> cfg.filters
    []
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    pipeline_name: str = Field(min_length=1)
    description: Optional[str] = None
    version: str = "1.0"
    sources: List[ComponentConfig] = Field(default_factory=list)
    filters: List[ComponentConfig] = Field(default_factory=list)
    sinks: List[ComponentConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_names(self) -> PipelineConfig:
        for role, components in (("Source", self.sources), ("Filter", self.filters), ("Sink", self.sinks)):
            duplicates = sorted(name for name, count in Counter(c.name for c in components).items() if count > 1)
            if duplicates:
                raise ValueError(f"{role} names must be unique, duplicated: {duplicates}")
        return self

    def get_enabled_sources(self) -> List[ComponentConfig]:
        return [comp for comp in self.sources if comp.enabled]

    def get_enabled_filters(self) -> List[ComponentConfig]:
        return [comp for comp in self.filters if comp.enabled]

    def get_enabled_sinks(self) -> List[ComponentConfig]:
        return [comp for comp in self.sinks if comp.enabled]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
