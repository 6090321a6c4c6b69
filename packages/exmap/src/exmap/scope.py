"""
Scope Matching

Decides whether a command's scope selector applies in the caller's current
context. The registry only depends on the ScopeMatcher interface; the default
SelectorScopeMatcher understands TextMate-style selectors.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Union

Scope = Union[str, Sequence[str]]


class ScopeMatcher(ABC):
    """Matches scope selectors against a scope."""

    @abstractmethod
    def matches(self, selector: str, scope: Scope) -> bool:
        pass


def scope_names(scope: Scope) -> List[str]:
    """
    Normalize a scope into its list of scope names, outermost first.

    Examples:
        'source.python string.quoted' -> ['source.python', 'string.quoted']
        ['source.python']              -> ['source.python']
    """
    if isinstance(scope, str):
        return scope.split()
    return [name for name in scope if name]


def _element_matches(element: str, name: str) -> bool:
    return name == element or name.startswith(element + ".")


def _path_matches(path: List[str], names: List[str]) -> bool:
    """Every selector element must match a scope name, in order."""
    position = 0
    for element in path:
        while position < len(names) and not _element_matches(element, names[position]):
            position += 1
        if position == len(names):
            return False
        position += 1
    return True


class SelectorScopeMatcher(ScopeMatcher):
    """
    TextMate-style scope selector matching.

    Supported syntax:
    - 'source' matches 'source' and 'source.python'
    - 'text.html string' matches a string scope nested in text.html
    - 'source.python, source.ruby' matches either alternative
    - 'source - comment' matches source scopes not inside a comment
    """

    def matches(self, selector: str, scope: Scope) -> bool:
        names = scope_names(scope)
        for alternative in selector.split(","):
            included, _, excluded = alternative.partition(" - ")
            path = included.split()
            if not path:
                continue
            if not _path_matches(path, names):
                continue
            excluded_path = excluded.split()
            if excluded_path and _path_matches(excluded_path, names):
                continue
            return True
        return False
