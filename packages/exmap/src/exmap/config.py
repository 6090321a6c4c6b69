"""
Registry Configuration

Builds registry settings from environment variables. Every field has a
default so an unconfigured process gets the conventional ex behaviour.
"""

import logging
import os
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

# register, line/command target, free-form argument
DEFAULT_PARAMETER_NAMES: Tuple[str, str, str] = ("register", "command", "argument")
DEFAULT_DOCUMENTATION_MARKER: str = "+"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class RegistryConfig:
    """Configuration for a command registry."""

    parameter_names: Tuple[str, str, str] = DEFAULT_PARAMETER_NAMES
    documentation_marker: str = DEFAULT_DOCUMENTATION_MARKER
    strict_syntax: bool = False  # reject unknown syntax flag characters

    def __post_init__(self):
        if len(self.parameter_names) != len(DEFAULT_PARAMETER_NAMES):
            raise ValueError(
                f"parameter_names needs {len(DEFAULT_PARAMETER_NAMES)} labels, "
                f"got {len(self.parameter_names)}"
            )
        if len(self.documentation_marker) != 1:
            raise ValueError(
                f"documentation_marker must be a single character: {self.documentation_marker!r}"
            )
        self.parameter_names = tuple(self.parameter_names)


def _parse_parameter_names(value: str) -> Tuple[str, str, str]:
    """Parse a comma separated label list, padding with the defaults."""
    labels = [label.strip() for label in value.split(",")]
    names = list(DEFAULT_PARAMETER_NAMES)
    for index, label in enumerate(labels[: len(names)]):
        if label:
            names[index] = label
    return tuple(names)


def get_registry_config() -> RegistryConfig:
    """Build registry config from environment variables."""
    parameter_names = DEFAULT_PARAMETER_NAMES
    if os.environ.get("EXMAP_PARAMETER_NAMES"):
        parameter_names = _parse_parameter_names(os.environ["EXMAP_PARAMETER_NAMES"])

    config = RegistryConfig(
        parameter_names=parameter_names,
        documentation_marker=os.environ.get("EXMAP_DOC_MARKER") or DEFAULT_DOCUMENTATION_MARKER,
        strict_syntax=os.environ.get("EXMAP_STRICT_SYNTAX", "").lower() in _TRUE_VALUES,
    )
    logger.debug(f"Registry config: {config}")
    return config
