"""
Configuration loader for declarative pipelines.

This module provides functionality to load and validate pipeline descriptions
from YAML and JSON files, converting them to ``PipelineConfig`` objects.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ...exceptions import ConfigurationError
from .models import PipelineConfig


class ConfigLoader:
    """
    Configuration loader for pipeline descriptions.

    Supports loading configurations from YAML and JSON files with validation
    and error handling.
    """

    @staticmethod
    def load_from_file(file_path: Union[str, Path]) -> PipelineConfig:
        """
        Load configuration from a file.

        Args:
            file_path: Path to the configuration file (YAML or JSON)

        Returns:
            PipelineConfig: Parsed and validated configuration object

        Raises:
            ConfigurationError: If file loading or parsing fails
            FileNotFoundError: If the configuration file does not exist
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {file_path}: {e}") from e

        suffix = file_path.suffix.lower()
        try:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(content)
            elif suffix == ".json":
                data = json.loads(content)
            else:
                # JSON is a subset of YAML, so the YAML parser covers both
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {file_path}: {e}") from e

        return ConfigLoader.load_from_dict(data)

    @staticmethod
    def load_from_dict(data: Any) -> PipelineConfig:
        """
        Load configuration from a dictionary.

        Args:
            data: Configuration data as dictionary

        Returns:
            PipelineConfig: Parsed and validated configuration object

        Raises:
            ConfigurationError: If validation fails
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(data).__name__}")
        if "pipeline_name" not in data:
            raise ConfigurationError("Missing required field: pipeline_name")

        try:
            return PipelineConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation error: {e}") from e

    @staticmethod
    def save_to_file(config: PipelineConfig, file_path: Union[str, Path], format: str = "yaml") -> None:
        """
        Save configuration to a file.

        Args:
            config: Configuration object to save
            file_path: Path where to save the configuration
            format: Output format ('yaml' or 'json')

        Raises:
            ConfigurationError: If saving fails
            ValueError: If format is not supported
        """
        if format.lower() not in ["yaml", "yml", "json"]:
            raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")

        file_path = Path(file_path)
        data = config.to_dict()

        try:
            with open(file_path, "w", encoding="utf-8") as file:
                if format.lower() in ["yaml", "yml"]:
                    yaml.safe_dump(data, file, default_flow_style=False, indent=2, sort_keys=False)
                else:
                    json.dump(data, file, indent=2, ensure_ascii=False)
        except (OSError, yaml.YAMLError, TypeError) as e:
            raise ConfigurationError(f"Failed to save configuration to {file_path}: {e}") from e


def load_config(file_path: Union[str, Path]) -> PipelineConfig:
    """
    Convenience function to load configuration from a file.

    Args:
        file_path: Path to the configuration file

    Returns:
        PipelineConfig: Loaded configuration

    Raises:
        ConfigurationError: If loading fails
    """
    return ConfigLoader.load_from_file(file_path)
