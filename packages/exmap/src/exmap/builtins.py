"""
Default Registry

Builds a registry holding the standard ex commands from the bundled
command table. Call create_default_registry() once at startup and pass the
registry to whatever needs it.
"""

import logging
from importlib import resources
from typing import Optional

from .config import RegistryConfig
from .loader import CommandTableLoader
from .registry import CommandRegistry
from .scope import ScopeMatcher

logger = logging.getLogger(__name__)

BUILTIN_TABLE = "ex_commands.yaml"


def create_default_registry(
    config: Optional[RegistryConfig] = None,
    scope_matcher: Optional[ScopeMatcher] = None,
) -> CommandRegistry:
    """Create a registry populated with the built-in ex commands."""
    registry = CommandRegistry(config=config, scope_matcher=scope_matcher)

    table = resources.files("exmap").joinpath("data").joinpath(BUILTIN_TABLE)
    stats = CommandTableLoader(registry).load_text(table.read_text(encoding="utf-8"), source=BUILTIN_TABLE)
    if stats["errors"]:
        # the bundled table must always load cleanly
        raise RuntimeError(f"Built-in command table failed to load: {stats['errors']}")

    logger.debug(f"Default registry ready with {len(registry)} commands")
    return registry
