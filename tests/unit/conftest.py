"""
Pytest fixtures for unit tests.

Provides registries isolated from the process environment.
"""

import pytest

from exmap import CommandRegistry, RegistryConfig


ENV_VARS = ("EXMAP_PARAMETER_NAMES", "EXMAP_DOC_MARKER", "EXMAP_STRICT_SYNTAX")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove registry settings inherited from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> CommandRegistry:
    """An empty registry with default configuration."""
    return CommandRegistry(config=RegistryConfig())


@pytest.fixture
def strict_registry() -> CommandRegistry:
    """An empty registry rejecting unknown syntax flags."""
    return CommandRegistry(config=RegistryConfig(strict_syntax=True))
