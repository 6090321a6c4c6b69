"""
Syntax Flags

Single-character descriptors of the argument grammar an ex command accepts.
The registry stores and exposes them; the command-line parser consumes them.
"""

from enum import Enum
from typing import FrozenSet, List, Tuple


class SyntaxFlag(str, Enum):
    """Flags that may appear in a command's syntax string."""

    FORCE = "!"  # allow ! directly after the command name
    RANGE = "r"
    WHOLE_FILE = "%"  # default to whole file if no range
    PLUS_COMMAND = "+"
    COUNT = "c"
    EXTRA = "e"
    EXTRA_REQUIRED = "E"
    SINGLE_EXTRA = "1"
    EXPAND = "x"  # expand wildcards and filename meta chars in extra arguments
    REGISTER = "R"
    LINE = "l"
    LINE_REQUIRED = "L"
    SUBSTITUTE = "~"  # /regexp/replace/flags
    PATTERN = "/"  # /regexp/flags
    NO_BAR = "|"  # do NOT end the command at a trailing bar
    MODIFIES = "m"


_FLAG_CHARS = frozenset(flag.value for flag in SyntaxFlag)


def parse_syntax(syntax: str) -> Tuple[FrozenSet[SyntaxFlag], List[str]]:
    """
    Split a syntax string into recognised flags and unknown characters.

    Examples:
        'r%!e1x' -> ({RANGE, WHOLE_FILE, FORCE, EXTRA, SINGLE_EXTRA, EXPAND}, [])
        'rq'     -> ({RANGE}, ['q'])
    """
    flags = set()
    unknown = []
    for char in syntax:
        if char in _FLAG_CHARS:
            flags.add(SyntaxFlag(char))
        elif char not in unknown:
            unknown.append(char)
    return frozenset(flags), unknown
