"""Translation of ``tree``-style flags into scan options.

Only a handful of flags from the Unix ``tree`` command are understood:

- ``-L <n>`` / ``-L<n>``: limit the listing to ``n`` levels.
- ``-a`` / ``--all``: include hidden entries.
- A bare token: the directory to render (the last one wins).

Any other flag is ignored so that callers can pass through arguments meant for the
real ``tree`` command without failing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

DEPTH_FLAG = "-L"
ALL_FLAGS = ("-a", "--all")
DEFAULT_PATH = "."


@dataclass
class TreeArgs:
    """Result of translating a token list.

    Attributes:
        path: Target directory, ``"."`` when no bare token was given.
        options: Only the options that were set, keyed by ``max_depth`` and ``show_hidden``.
    """

    path: str = DEFAULT_PATH
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ArgCursor:
    """Read position over a token sequence with one token of lookahead."""

    tokens: Sequence[str]
    position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def current(self) -> str:
        return self.tokens[self.position]

    def peek(self) -> Optional[str]:
        """Return the token after the current one, or None at the end."""
        following = self.position + 1
        return self.tokens[following] if following < len(self.tokens) else None

    def advance(self, count: int = 1) -> None:
        self.position += count


def parse_depth(value: Optional[str]) -> Optional[int]:
    """Parse a depth argument, returning None when it is missing or not an integer.

    Example:
        >>> parse_depth("3")
        3
        >>> parse_depth("three") is None
        True
    """
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def consume(cursor: ArgCursor, result: TreeArgs) -> None:
    """Interpret the token under the cursor, update ``result`` and move the cursor on.

    The cursor always advances by at least one token. ``-L`` advances by two when the
    following token is a valid depth; otherwise the following token is left in place
    and is interpreted on its own by the next call.
    """
    token = cursor.current()

    if token == DEPTH_FLAG:
        depth = parse_depth(cursor.peek())
        if depth is not None:
            result.options["max_depth"] = depth
            cursor.advance(2)
            return
    elif token.startswith(DEPTH_FLAG):
        depth = parse_depth(token[len(DEPTH_FLAG):])
        if depth is not None:
            result.options["max_depth"] = depth
    elif token in ALL_FLAGS:
        result.options["show_hidden"] = True
    elif not token.startswith("-"):
        result.path = token

    cursor.advance()


def translate_tree_args(tokens: Sequence[str]) -> TreeArgs:
    """Translate ``tree``-style arguments into a target path and partial scan options.

    Args:
        tokens: Arguments in command-line order.

    Returns:
        The target path and the options that were explicitly set.

    Example:
        >>> translate_tree_args(["-L", "2", "--noreport"])
        TreeArgs(path='.', options={'max_depth': 2})
        >>> translate_tree_args(["-a", "src", "-L1"])
        TreeArgs(path='src', options={'show_hidden': True, 'max_depth': 1})
    """
    result = TreeArgs()
    cursor = ArgCursor(tokens)
    while not cursor.at_end():
        consume(cursor, result)
    return result
