"""
Command Registry

Ordered collection of ex command definitions.
Commands are looked up by name, alias, or any unambiguous prefix of either.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Union

from .config import RegistryConfig, get_registry_config
from .definition import CallableAction, CommandDefinition
from .scope import Scope, ScopeMatcher, SelectorScopeMatcher
from .syntax import SyntaxFlag

logger = logging.getLogger(__name__)


class LookupStatus(str, Enum):
    """Outcome of a command lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


@dataclass
class LookupResult:
    """Result of resolving a typed token to a command definition."""

    token: str
    status: LookupStatus
    definition: Optional[CommandDefinition] = None
    candidates: List[CommandDefinition] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.status == LookupStatus.FOUND

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND

    @property
    def ambiguous(self) -> bool:
        return self.status == LookupStatus.AMBIGUOUS

    @property
    def candidate_names(self) -> List[str]:
        """Primary names of the competing definitions of an ambiguous lookup."""
        return [candidate.name for candidate in self.candidates]


class CommandRegistry:
    """
    Registry of ex command definitions.

    Populated once at startup with define() or the command() decorator,
    then queried with lookup() and the hint methods.
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        scope_matcher: Optional[ScopeMatcher] = None,
    ):
        self._config = config or get_registry_config()
        self._scope_matcher = scope_matcher or SelectorScopeMatcher()
        self._definitions: List[CommandDefinition] = []

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def definitions(self) -> List[CommandDefinition]:
        """All definitions, in registration order."""
        return list(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(list(self._definitions))

    def __contains__(self, definition: object) -> bool:
        return any(existing is definition for existing in self._definitions)

    # =========================================================================
    # Registration
    # =========================================================================

    def define(
        self,
        names: Union[str, Sequence[str]],
        syntax: str,
        implementation,
        scope: Optional[str] = None,
        parameter_names: Optional[Sequence[str]] = None,
        documentation: str = "",
    ) -> CommandDefinition:
        """
        Add an ex command definition.

        Args:
            names: The primary name, or a list of names whose first entry is
                the primary name and the rest aliases.
            syntax: Syntax flag string describing the command's arguments.
            implementation: An action name or a callable taking zero or one
                argument (the parsed command).
            scope: Optional scope selector restricting where the command applies.
            parameter_names: Display labels for the register, line and
                argument parameters.
            documentation: Free text; parts enclosed in the documentation
                marker are rendered as parameter names.

        Returns:
            The new definition.

        Raises:
            CommandDefinitionError: If the definition is invalid. The registry
                is left unchanged.
        """
        if isinstance(names, str):
            names = [names]

        definition = CommandDefinition(
            names,
            syntax,
            implementation,
            scope_selector=scope,
            parameter_names=parameter_names,
            documentation=documentation,
            strict_syntax=self._config.strict_syntax,
            default_parameter_names=self._config.parameter_names,
            documentation_marker=self._config.documentation_marker,
        )
        self._definitions.append(definition)

        logger.debug(f"Registered command: {definition.name} {definition.names[1:]}")
        return definition

    def command(
        self,
        names: Union[str, Sequence[str]],
        syntax: str = "",
        scope: Optional[str] = None,
        parameter_names: Optional[Sequence[str]] = None,
        documentation: Optional[str] = None,
    ):
        """
        Decorator to register a function as an ex command.

        Usage:
            @registry.command(["write", "w"], syntax="r%!+e1x")
            def ex_write(command):
                ...
        """

        def decorator(func: Callable):
            self.define(
                names,
                syntax,
                CallableAction(func),
                scope=scope,
                parameter_names=parameter_names,
                documentation=documentation if documentation is not None else (func.__doc__ or ""),
            )
            return func

        return decorator

    # =========================================================================
    # Lookup
    # =========================================================================

    def _visible(self, scope: Optional[Scope]) -> List[CommandDefinition]:
        """Definitions applicable in the given scope (all when scope is None)."""
        if scope is None:
            return list(self._definitions)
        return [
            definition
            for definition in self._definitions
            if definition.scope_selector is None
            or self._scope_matcher.matches(definition.scope_selector, scope)
        ]

    def lookup(self, token: str, scope: Optional[Scope] = None) -> LookupResult:
        """
        Look up a command definition by name.

        The token may be abbreviated as long as it is not ambiguous. An exact
        name match always wins over prefix matches.

        Args:
            token: The typed command name.
            scope: Optional current scope; commands whose selector does not
                match it are ignored.
        """
        if not token:
            return LookupResult(token, LookupStatus.NOT_FOUND)

        candidates = self._visible(scope)

        exact = [definition for definition in candidates if token in definition.names]
        if len(exact) == 1:
            return LookupResult(token, LookupStatus.FOUND, exact[0])
        if len(exact) > 1:
            logger.debug(f"Ambiguous command {token}: {[d.name for d in exact]}")
            return LookupResult(token, LookupStatus.AMBIGUOUS, candidates=exact)

        matches = [
            definition
            for definition in candidates
            if any(name.startswith(token) for name in definition.names)
        ]
        if len(matches) == 1:
            return LookupResult(token, LookupStatus.FOUND, matches[0])
        if not matches:
            logger.debug(f"Unknown command: {token}")
            return LookupResult(token, LookupStatus.NOT_FOUND)

        logger.debug(f"Ambiguous command {token}: {[d.name for d in matches]}")
        return LookupResult(token, LookupStatus.AMBIGUOUS, candidates=matches)

    def names_matching(self, prefix: str, scope: Optional[Scope] = None) -> List[str]:
        """All visible names starting with prefix, in registration order."""
        return [
            name
            for definition in self._visible(scope)
            for name in definition.names
            if name.startswith(prefix)
        ]

    # =========================================================================
    # Hints
    # =========================================================================

    def _unique_prefix_length(self, definition: CommandDefinition) -> int:
        """Shortest prefix of the primary name no other definition's name shares."""
        name = definition.name
        others = [
            other_name
            for other in self._definitions
            if other is not definition
            for other_name in other.names
        ]
        for length in range(1, len(name)):
            head = name[:length]
            if not any(other_name[:length] == head for other_name in others):
                return length
        return len(name)

    def syntax_hint_for(
        self,
        definition: CommandDefinition,
        prefix: Optional[str] = None,
        argument: Optional[str] = None,
    ) -> Optional[str]:
        """
        Generate the command hint for a registered definition, e.g. 'w[rite][!]'.

        For definitions whose aliases are not prefixes of each other (tabedit
        and tabnew), prefix picks the alias to show; that alias is shown in
        full. An argument placeholder is appended after a space.

        Returns None if the definition is not in this registry.
        """
        if definition not in self:
            return None

        alias = None
        if prefix:
            alias = next((name for name in definition.names if name.startswith(prefix)), None)

        if alias is not None:
            hint = alias
        else:
            length = self._unique_prefix_length(definition)
            name = definition.name
            hint = name[:length]
            if length < len(name):
                hint += f"[{name[length:]}]"

        if definition.has_flag(SyntaxFlag.FORCE):
            hint += "[!]"
        if argument:
            hint += f" {argument}"
        return hint

    def usage_hint_for(
        self,
        definition: CommandDefinition,
        prefix: Optional[str] = None,
    ) -> Optional[str]:
        """
        Generate the full syntax hint, e.g. '[range]w[rite][!] [+cmd] [file]'.

        Returns None if the definition is not in this registry.
        """
        command_hint = self.syntax_hint_for(definition, prefix)
        if command_hint is None:
            return None
        return definition.syntax_hint(command_hint)
