"""
Pytest configuration and fixtures for itemflow tests
"""

import os
from collections.abc import Generator
from typing import List

from pytest import fixture

from itemflow.settings import GlobalSettings


@fixture
def clean_env() -> Generator[None, None, None]:
    """Hide ITEMFLOW_* variables of the developer's shell from settings."""
    saved = {key: value for key, value in os.environ.items() if key.startswith("ITEMFLOW_")}
    for key in saved:
        del os.environ[key]
    yield
    os.environ.update(saved)


@fixture
def default_settings(clean_env: None) -> GlobalSettings:
    return GlobalSettings()


@fixture
def call_log() -> List[str]:
    """Shared, ordered record of component calls within a single test."""
    return []
