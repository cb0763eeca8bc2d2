"""Approximate .gitignore matching for tree generation."""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from gtree.types import PathType

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_PATTERNS: Tuple[str, ...] = (".git", ".DS_Store", "node_modules")

GITIGNORE_FILENAME = ".gitignore"


def pattern_matches(pattern: str, path: str) -> bool:
    """Check a single ignore pattern against a forward-slash relative path.

    Three pattern shapes are recognised:

    - ``prefix/**`` matches ``prefix`` itself and everything below it.
    - Any other pattern containing ``/`` matches when it occurs anywhere in the path.
    - A plain name matches when it equals one of the path's segments.

    Example:
        >>> pattern_matches("build/**", "build/out/app.js")
        True
        >>> pattern_matches("build/**", "buildfile")
        False
        >>> pattern_matches("ignored_dir/", "ignored_dir/secret.txt")
        True
        >>> pattern_matches("node_modules", "web/node_modules/react")
        True
        >>> pattern_matches("*.log", "app.log")
        False
    """
    if pattern.endswith("/**"):
        prefix = pattern[:-3]
        return path == prefix or path.startswith(prefix + "/")
    if "/" in pattern:
        return pattern in path
    return pattern in path.split("/")


def read_gitignore_patterns(base_dir: PathType) -> List[str]:
    """Read the usable patterns from ``<base_dir>/.gitignore``.

    Lines are stripped; blank lines and ``#`` comments are dropped. A missing or
    unreadable file yields an empty list.
    """
    gitignore = Path(base_dir) / GITIGNORE_FILENAME
    try:
        lines = gitignore.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("No usable ignore file at %s: %s", gitignore, e)
        return []

    patterns = []
    for line in lines:
        line = line.strip()
        if line and not line.startswith("#"):
            patterns.append(line)
    return patterns


class IgnoreSet(BaseExclusionRules):
    """Ordered, read-only collection of ignore patterns.

    This is a deliberately small subset of .gitignore semantics: there is no
    negation, no anchoring to the root and no ``**`` except as a trailing ``/**``.
    Patterns are evaluated with :func:`pattern_matches` and a path is excluded as
    soon as one of them matches.

    Attributes:
        patterns (Tuple[str, ...]): The raw patterns, defaults first.

    Example:
        >>> rules = IgnoreSet.from_patterns(["dist/**", "*.pyc", "secret.txt"])
        >>> rules.exclude("dist/bundle.js")
        True
        >>> rules.exclude("config/secret.txt")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def __init__(self, patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS) -> None:
        self._patterns = tuple(patterns)

    @classmethod
    def from_directory(cls, base_dir: PathType) -> "IgnoreSet":
        """Build the ignore set for a scan rooted at ``base_dir``.

        The result holds the default patterns followed by the lines of
        ``base_dir/.gitignore``, if that file can be read.

        Example:
            >>> import tempfile
            >>> with tempfile.TemporaryDirectory() as d:
            ...     _ = (Path(d) / ".gitignore").write_text("# build output\\ndist/\\n\\n")
            ...     IgnoreSet.from_directory(d).patterns
            ('.git', '.DS_Store', 'node_modules', 'dist/')
        """
        return cls(DEFAULT_IGNORE_PATTERNS + tuple(read_gitignore_patterns(base_dir)))

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "IgnoreSet":
        """Build an ignore set holding exactly ``patterns``, without the defaults."""
        return cls(patterns)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self._patterns

    def exclude(self, path: str) -> bool:
        return any(pattern_matches(pattern, path) for pattern in self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IgnoreSet):
            return NotImplemented
        return self._patterns == other._patterns

    def __hash__(self) -> int:
        return hash(self._patterns)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._patterns)!r})"
