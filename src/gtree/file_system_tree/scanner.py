"""Recursive directory scanning with depth, hidden-file and ignore filtering."""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from gtree.exceptions import TraversalError
from gtree.exclusion_rules.base_rules import BaseExclusionRules
from gtree.file_system_tree.file_system_node import FileSystemNode
from gtree.types import PathType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanOptions:
    """Settings for a single scan.

    Attributes:
        base_directory: Absolute path of the scan root. Relative paths handed to the
            exclusion rules are computed against it.
        max_depth: Number of directory levels to list below the root, or None for no
            limit. ``0`` lists nothing but the root itself.
        show_hidden: Whether entries whose name starts with ``.`` are listed.
    """

    base_directory: str
    max_depth: Optional[int] = None
    show_hidden: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")


def check_directory(path: PathType, display_path: Optional[PathType] = None) -> None:
    """Verify that ``path`` exists and is a directory.

    Args:
        path: The path to check.
        display_path: The path to quote in error messages. Defaults to ``path``.

    Raises:
        TraversalError: If the path does not exist or is not a directory.
    """
    shown = path if display_path is None else display_path
    if not os.path.exists(path):
        raise TraversalError.does_not_exist(shown)
    if not os.path.isdir(path):
        raise TraversalError.not_a_directory(shown)


def sort_key(node: FileSystemNode) -> Tuple[bool, str, str]:
    """Directories first, then case-insensitive name order with the raw name as tie-break."""
    return (not node.is_dir, node.name.casefold(), node.name)


def relative_to_base(path: PathType, base_directory: str) -> str:
    return os.path.relpath(path, base_directory).replace(os.sep, "/")


def scan_directory(
    dir_path: PathType,
    options: ScanOptions,
    ignore_set: Optional[BaseExclusionRules] = None,
    current_level: int = 0,
) -> List[FileSystemNode]:
    """List the retained entries of ``dir_path`` as sorted nodes, recursing into directories.

    Entries are dropped when they are hidden (unless ``options.show_hidden``) or when
    their path relative to ``options.base_directory`` is excluded by ``ignore_set``. A
    dropped directory is never descended into, so its whole subtree is absent.

    Only the top-level call validates its argument. A directory that exists but cannot
    be listed contributes no children; the error is logged at DEBUG level instead of
    raised, so one unreadable subdirectory never aborts the scan.

    Args:
        dir_path: Directory to list.
        options: Scan settings.
        ignore_set: Exclusion rules to apply. None disables ignore filtering.
        current_level: Depth of ``dir_path``'s entries below the scan root.

    Returns:
        The entries of ``dir_path``, directories first, each directory carrying its own
        scanned children.

    Raises:
        TraversalError: At the top level only, if ``dir_path`` is missing or not a directory.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as d:
        ...     os.mkdir(os.path.join(d, "src"))
        ...     open(os.path.join(d, "README.md"), "w").close()
        ...     [n.name for n in scan_directory(d, ScanOptions(base_directory=d))]
        ['src', 'README.md']
    """
    if current_level == 0:
        check_directory(dir_path)

    if options.max_depth is not None and current_level >= options.max_depth:
        return []

    try:
        with os.scandir(dir_path) as entries:
            listing = [(entry.name, entry.path, _is_directory(entry)) for entry in entries]
    except OSError as e:
        logger.debug("Skipping contents of unreadable directory %s: %s", dir_path, e)
        return []

    nodes = []
    for name, path, is_dir in listing:
        if name.startswith(".") and not options.show_hidden:
            continue

        relative_path = relative_to_base(path, options.base_directory)
        if ignore_set is not None and _is_excluded(ignore_set, relative_path, is_dir):
            continue

        node = FileSystemNode(name, relative_path=relative_path, is_dir=is_dir, level=current_level)
        if is_dir:
            node.children = scan_directory(path, options, ignore_set, current_level + 1)
        nodes.append(node)

    return sorted(nodes, key=sort_key)


def _is_excluded(ignore_set: BaseExclusionRules, relative_path: str, is_dir: bool) -> bool:
    if ignore_set.exclude(relative_path):
        return True
    # Directory patterns such as "build/" must also hide the directory entry itself
    return is_dir and ignore_set.exclude(relative_path + "/")


def _is_directory(entry: "os.DirEntry[str]") -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        # If we can't stat it, treat it as a non-directory
        return False

