"""
Ex Command Registry

Resolves typed ex command names, including unambiguous abbreviations
(w -> write, tabn -> tabnew), to command definitions and renders syntax
hints such as '[range]w[rite][!] [file]'.
"""

from .config import RegistryConfig, get_registry_config
from .definition import (
    CallableAction,
    CommandDefinition,
    CommandDefinitionError,
    CompletionProvider,
    SymbolicAction,
)
from .registry import CommandRegistry, LookupResult, LookupStatus
from .scope import ScopeMatcher, SelectorScopeMatcher
from .syntax import SyntaxFlag
from .loader import CommandTableLoader
from .builtins import create_default_registry

__all__ = [
    "RegistryConfig",
    "get_registry_config",
    "CallableAction",
    "CommandDefinition",
    "CommandDefinitionError",
    "CompletionProvider",
    "SymbolicAction",
    "CommandRegistry",
    "LookupResult",
    "LookupStatus",
    "ScopeMatcher",
    "SelectorScopeMatcher",
    "SyntaxFlag",
    "CommandTableLoader",
    "create_default_registry",
]
