"""
Command Definition

A single ex command: its names, syntax flags, scope restriction,
documentation and a reference to its implementation.

Everything except the alias list and the completion provider is fixed
at construction.
"""

import inspect
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple, Union

from .config import DEFAULT_DOCUMENTATION_MARKER, DEFAULT_PARAMETER_NAMES
from .syntax import SyntaxFlag, parse_syntax

logger = logging.getLogger(__name__)


class CommandDefinitionError(ValueError):
    """A command definition could not be constructed."""

    def __init__(self, message: str, names: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.names = list(names) if names else []


@dataclass(frozen=True)
class SymbolicAction:
    """Reference to an action defined outside the registry, by name."""

    name: str


@dataclass(frozen=True)
class CallableAction:
    """Embedded callable taking no argument or the parsed command."""

    func: Callable

    @property
    def accepts_argument(self) -> bool:
        """Whether the callable takes the parsed command as its argument."""
        return _positional_arity(self.func)[1]


Implementation = Union[SymbolicAction, CallableAction]


class CompletionProvider(ABC):
    """Supplies argument completions for a command."""

    @abstractmethod
    def completions_for(self, word: str, options: str = "") -> List[str]:
        pass


def _positional_arity(func: Callable) -> Tuple[int, bool]:
    """
    Return (required positional count, accepts a positional argument).

    Callables without an introspectable signature are assumed to take one
    optional argument.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 0, True

    required = 0
    accepts = False
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            accepts = True
            if parameter.default is parameter.empty:
                required += 1
        elif parameter.kind == parameter.VAR_POSITIONAL:
            accepts = True
        elif parameter.kind == parameter.KEYWORD_ONLY and parameter.default is parameter.empty:
            # can never be satisfied by the invoker
            required += 2
    return required, accepts


def _check_arity(func: Callable, names: Sequence[str]) -> None:
    required, _ = _positional_arity(func)
    if required > 1:
        raise CommandDefinitionError(
            f"Command implementation {func!r} must take zero or one argument",
            names,
        )


def as_implementation(implementation, names: Sequence[str] = ()) -> Implementation:
    """
    Normalize an implementation into a SymbolicAction or CallableAction.

    Accepts an existing variant, a non-empty action name, or a callable
    taking zero or one positional argument.
    """
    if isinstance(implementation, CallableAction):
        if not callable(implementation.func):
            raise CommandDefinitionError(
                f"CallableAction wraps a non-callable {type(implementation.func).__name__}",
                names,
            )
        _check_arity(implementation.func, names)
        return implementation

    if isinstance(implementation, SymbolicAction):
        if not isinstance(implementation.name, str) or not implementation.name:
            raise CommandDefinitionError("Symbolic action name must not be empty", names)
        return implementation

    if isinstance(implementation, str):
        if not implementation:
            raise CommandDefinitionError("Symbolic action name must not be empty", names)
        return SymbolicAction(implementation)

    if callable(implementation):
        _check_arity(implementation, names)
        return CallableAction(implementation)

    raise CommandDefinitionError(
        f"Command implementation must be an action name or a callable, "
        f"got {type(implementation).__name__}",
        names,
    )


class CommandDefinition:
    """
    Definition of an ex command.

    names[0] is the primary name, used in error messages and hints. The
    remaining names are aliases and may be added or removed later.
    """

    def __init__(
        self,
        names: Iterable[str],
        syntax: str,
        implementation,
        scope_selector: Optional[str] = None,
        parameter_names: Optional[Iterable[str]] = None,
        documentation: str = "",
        completion: Optional[CompletionProvider] = None,
        strict_syntax: bool = False,
        default_parameter_names: Sequence[str] = DEFAULT_PARAMETER_NAMES,
        documentation_marker: str = DEFAULT_DOCUMENTATION_MARKER,
    ):
        if isinstance(names, str):
            names = [names]
        elif not isinstance(names, Iterable):
            raise CommandDefinitionError(
                f"Command names must be a name or a list of names, got {type(names).__name__}"
            )

        self._names: List[str] = []
        for name in names:
            if not isinstance(name, str) or not name:
                raise CommandDefinitionError(f"Invalid command name: {name!r}", self._names)
            if name not in self._names:
                self._names.append(name)

        if not self._names:
            raise CommandDefinitionError("A command needs at least one name")

        syntax = syntax or ""
        self._flags, unknown = parse_syntax(syntax)
        if unknown:
            if strict_syntax:
                raise CommandDefinitionError(
                    f"Unknown syntax flags {''.join(unknown)!r} for command {self._names[0]}",
                    self._names,
                )
            logger.warning(f"Unknown syntax flags {''.join(unknown)!r} for command {self._names[0]}")

        self._syntax = syntax
        self._implementation = as_implementation(implementation, self._names)
        self._scope_selector = scope_selector or None
        self._documentation = documentation or ""
        self._documentation_marker = documentation_marker
        self.completion = completion

        labels = list(parameter_names) if parameter_names else []
        self._parameter_names = tuple(
            labels[i] if i < len(labels) and labels[i] else default
            for i, default in enumerate(default_parameter_names)
        )

    def __repr__(self) -> str:
        return f"CommandDefinition(names={self._names!r}, syntax={self._syntax!r})"

    @property
    def name(self) -> str:
        """The primary name of this command."""
        return self._names[0]

    @property
    def names(self) -> List[str]:
        """All names and aliases of this command."""
        return list(self._names)

    @property
    def syntax(self) -> str:
        return self._syntax

    @property
    def flags(self) -> FrozenSet[SyntaxFlag]:
        return self._flags

    def has_flag(self, flag: Union[SyntaxFlag, str]) -> bool:
        try:
            return SyntaxFlag(flag) in self._flags
        except ValueError:
            return False

    @property
    def scope_selector(self) -> Optional[str]:
        return self._scope_selector

    @property
    def implementation(self) -> Implementation:
        return self._implementation

    @property
    def action(self) -> Optional[str]:
        """Name of the symbolic action, or None for embedded callables."""
        if isinstance(self._implementation, SymbolicAction):
            return self._implementation.name
        return None

    @property
    def expression(self) -> Optional[Callable]:
        """The embedded callable, or None for symbolic actions."""
        if isinstance(self._implementation, CallableAction):
            return self._implementation.func
        return None

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        return self._parameter_names

    @property
    def documentation(self) -> str:
        return self._documentation

    @property
    def documentation_parameters(self) -> List[str]:
        """Parameter placeholders marked up in the documentation."""
        return [match.group(1) for match in self._placeholder_pattern().finditer(self._documentation)]

    def render_documentation(self, render_parameter: Optional[Callable[[str], str]] = None) -> str:
        """
        Render the documentation with its parameter placeholders substituted.

        Examples (default rendering):
            'Write to +file+.' -> 'Write to <file>.'
        """
        render = render_parameter or (lambda name: f"<{name}>")
        return self._placeholder_pattern().sub(lambda m: render(m.group(1)), self._documentation)

    def _placeholder_pattern(self) -> "re.Pattern":
        marker = re.escape(self._documentation_marker)
        return re.compile(f"{marker}([^{marker}]+){marker}")

    def add_alias(self, name: str) -> None:
        """Add an alias this command will respond to."""
        if not isinstance(name, str) or not name:
            raise CommandDefinitionError(f"Invalid alias: {name!r}", self._names)
        if name in self._names:
            return
        self._names.append(name)
        logger.debug(f"Added alias {name} to command {self.name}")

    def remove_alias(self, name: str) -> None:
        """Remove an alias. The primary name is never removed."""
        if name == self._names[0]:
            logger.warning(f"Refusing to remove primary name of command {name}")
            return
        if name in self._names:
            self._names.remove(name)
            logger.debug(f"Removed alias {name} from command {self.name}")

    def syntax_hint(self, command_hint: str) -> str:
        """
        Return a hint describing the syntax of this command.

        The command hint (e.g. 'w[rite][!]') depends on every other
        registered name, so it is supplied by the registry.

        Examples:
            write, 'r%!+e1x' -> '[range]w[rite][!] [+cmd] [file]'
            substitute, 'r~cm' -> '[range]s[ubstitute] [count] /pattern/replacement/[flags]'
        """
        register, line, argument = self._parameter_names[:3]
        parts = []

        if SyntaxFlag.PLUS_COMMAND in self._flags:
            parts.append("[+cmd]")
        if SyntaxFlag.REGISTER in self._flags:
            parts.append(f"[{register}]")
        if SyntaxFlag.LINE_REQUIRED in self._flags:
            parts.append(f"{{{line}}}")
        elif SyntaxFlag.LINE in self._flags:
            parts.append(f"[{line}]")
        if SyntaxFlag.COUNT in self._flags:
            parts.append("[count]")
        if SyntaxFlag.SUBSTITUTE in self._flags:
            parts.append("/pattern/replacement/[flags]")
        elif SyntaxFlag.PATTERN in self._flags:
            parts.append("/pattern/[flags]")

        if SyntaxFlag.SINGLE_EXTRA not in self._flags:
            argument = f"{argument} ..."
        if SyntaxFlag.EXTRA_REQUIRED in self._flags:
            parts.append(f"{{{argument}}}")
        elif SyntaxFlag.EXTRA in self._flags:
            parts.append(f"[{argument}]")

        hint = command_hint
        if SyntaxFlag.RANGE in self._flags:
            hint = f"[range]{hint}"
        return " ".join([hint] + parts)
