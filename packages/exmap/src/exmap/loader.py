"""
Command Table Loader

Loads ex command definitions from YAML command tables into a registry.

Expected document layout:
    commands:
      - names: [write, w]
        syntax: "r%!+e1x"
        action: ex_write
        parameter_names: [register, command, file]
        documentation: "Write the buffer to +file+."
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import ValidationError

from .definition import CommandDefinitionError, SymbolicAction
from .registry import CommandRegistry
from .schemas import CommandEntrySchema, CommandTableSchema

logger = logging.getLogger(__name__)


class CommandTableLoader:
    """
    Loads command tables into a registry.

    Invalid entries are skipped and reported; valid entries are registered
    in document order.
    """

    def __init__(self, registry: CommandRegistry):
        self.registry = registry
        self._errors: List[str] = []

    @property
    def errors(self) -> List[str]:
        """Errors from every load this loader has performed."""
        return self._errors.copy()

    def _record_error(self, stats: Dict[str, Any], message: str) -> None:
        stats["errors"].append(message)
        self._errors.append(message)
        logger.error(message)

    def load_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load a command table file.

        Returns dict with load statistics; errors cover this load only.
        """
        path = Path(path)
        logger.info(f"Loading command table from: {path}")

        stats = {"commands": 0, "errors": []}
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._record_error(stats, f"Error loading {path}: {e}")
            return stats
        return self.load_data(data or {}, source=str(path))

    def load_text(self, text: str, source: str = "<string>") -> Dict[str, Any]:
        """Load a command table from YAML text."""
        stats = {"commands": 0, "errors": []}
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            self._record_error(stats, f"Error loading {source}: {e}")
            return stats
        return self.load_data(data or {}, source=source)

    def load_data(self, data: Dict[str, Any], source: str = "<data>") -> Dict[str, Any]:
        """Register every valid entry of an already parsed command table."""
        stats = {"commands": 0, "errors": []}

        try:
            table = CommandTableSchema.model_validate(data)
        except ValidationError as e:
            self._record_error(stats, f"Invalid command table in {source}: {e}")
            return stats

        for index, entry_data in enumerate(table.commands):
            try:
                entry = CommandEntrySchema.model_validate(entry_data)
                self._register(entry)
                stats["commands"] += 1
            except (ValidationError, CommandDefinitionError) as e:
                self._record_error(stats, f"Error parsing command #{index} in {source}: {e}")

        logger.info(f"Loaded {stats['commands']} commands from {source}")
        return stats

    def _register(self, entry: CommandEntrySchema) -> None:
        self.registry.define(
            entry.names,
            entry.syntax,
            SymbolicAction(entry.action),
            scope=entry.scope,
            parameter_names=entry.parameter_names,
            documentation=entry.documentation,
        )
