"""Tree generation service.

This module resolves the requested directory (honouring the ``GTREE_BASE_PATH``
environment variable), validates it, and produces the rendered tree text. It also
offers small helpers that report the effective working directory.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from gtree.cli.tree_args import DEFAULT_PATH, translate_tree_args
from gtree.config import get_base_path
from gtree.exceptions import GtreeError
from gtree.file_system_tree.file_system_tree import FileSystemTree
from gtree.types import PathType

logger = logging.getLogger(__name__)


@dataclass
class CwdInfo:
    """Effective working directory, optionally expressed relative to another path."""

    absolute: str
    relative: Optional[str] = None
    base_path: Optional[str] = None


def resolve_target_path(target_path: PathType, base_path: Optional[str] = None) -> str:
    """Resolve ``target_path`` to an absolute path.

    Without a base path the target is resolved against the process working
    directory. With one, absolute targets are kept verbatim and relative targets
    are resolved against the base path.

    Args:
        target_path: Path requested by the caller.
        base_path: Directory to resolve relative targets against. Defaults to the
            value of ``GTREE_BASE_PATH``.

    Example:
        >>> resolve_target_path("src", "/workspace/project")
        '/workspace/project/src'
        >>> resolve_target_path("/absolute/path", "/workspace/project")
        '/absolute/path'
    """
    if base_path is None:
        base_path = get_base_path()

    target = os.fspath(target_path)
    if not base_path:
        return os.path.abspath(target)
    if os.path.isabs(target):
        return target
    return os.path.abspath(os.path.join(base_path, target))


def get_current_working_directory() -> str:
    """Return ``GTREE_BASE_PATH`` (resolved) if it is set, the process working directory otherwise.

    Raises:
        GtreeError: If the working directory cannot be determined.
    """
    try:
        base_path = get_base_path()
        if base_path:
            return os.path.abspath(base_path)
        return os.path.abspath(os.getcwd())
    except OSError as e:
        raise GtreeError(f"Failed to get current working directory: {e}") from e


def get_cwd_info(base_path: Optional[str] = None) -> CwdInfo:
    """Describe the effective working directory.

    Args:
        base_path: If given and not blank, the result also holds the resolved
            ``base_path`` and the working directory's path relative to it.

    Raises:
        GtreeError: If the working directory cannot be determined.
    """
    try:
        cwd = get_base_path() or os.getcwd()
        info = CwdInfo(absolute=os.path.abspath(cwd))
        if base_path and base_path.strip():
            info.base_path = os.path.abspath(base_path)
            info.relative = os.path.relpath(info.absolute, info.base_path)
        return info
    except (OSError, ValueError) as e:
        raise GtreeError(f"Failed to get current working directory info: {e}") from e


def generate_tree(
    target_path: PathType = DEFAULT_PATH,
    tree_args: Optional[Sequence[str]] = None,
    *,
    max_depth: Optional[int] = None,
    show_hidden: Optional[bool] = None,
) -> str:
    """Render the filtered tree of a directory.

    Options can be passed directly or as ``tree``-style arguments. Values taken from
    ``tree_args`` win over the keyword arguments, and a path given in ``tree_args``
    replaces ``target_path``.

    Args:
        target_path: Directory to render. Relative paths honour ``GTREE_BASE_PATH``.
        tree_args: ``tree``-style flags such as ``["-L", "2", "-a"]``.
        max_depth: Number of levels to list below the root.
        show_hidden: Whether to include entries whose name starts with a dot.

    Returns:
        The root directory's name on the first line followed by the tree lines.

    Raises:
        TraversalError: If the path does not exist or is not a directory.

    Example:
        >>> print(generate_tree("src", ["-L", "1"]), end="")  # doctest: +SKIP
        src
        ├── gtree
        └── setup.py
    """
    if tree_args:
        parsed = translate_tree_args(tree_args)
        if parsed.path != DEFAULT_PATH:
            target_path = parsed.path
        max_depth = parsed.options.get("max_depth", max_depth)
        show_hidden = parsed.options.get("show_hidden", show_hidden)

    absolute_path = resolve_target_path(target_path)
    logger.debug(
        "Generating tree for %s (max_depth=%s, show_hidden=%s)", absolute_path, max_depth, bool(show_hidden)
    )

    tree = FileSystemTree(
        absolute_path,
        max_depth=max_depth,
        show_hidden=bool(show_hidden),
        display_path=target_path,
    )
    return tree.get_tree_representation()
