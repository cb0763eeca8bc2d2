"""Filtered tree view of a directory.

This module provides the FileSystemTree class, which ties the scanner, the ignore
rules and the renderer together for one root directory.
"""

from pathlib import Path
from typing import Iterator, List, Optional

from anytree import PreOrderIter

from gtree.exclusion_rules.base_rules import BaseExclusionRules
from gtree.exclusion_rules.ignore_set import IgnoreSet
from gtree.file_system_tree.file_system_node import FileSystemNode
from gtree.file_system_tree.renderer import stream_lines
from gtree.file_system_tree.scanner import ScanOptions, check_directory, scan_directory
from gtree.types import PathType


class FileSystemTree:
    """A filtered tree representation of a directory structure.

    The tree is built lazily on first access and can be refreshed to reflect
    filesystem changes. Hidden entries are skipped unless ``show_hidden`` is set,
    and unless other rules are supplied the root's ``.gitignore`` plus the default
    patterns decide which paths are excluded.

    Attributes:
        root_path (Path): The root directory, as given.
        display_path (PathType): The path quoted in error messages.
        max_depth (Optional[int]): Number of levels to list below the root.
        show_hidden (bool): Whether dot-entries are listed.

    Example:
        >>> tree = FileSystemTree("src", max_depth=1)  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src
        ├── utils
        └── main.py
    """

    def __init__(
        self,
        root_path: PathType,
        max_depth: Optional[int] = None,
        show_hidden: bool = False,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        display_path: Optional[PathType] = None,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Directory to represent. Can be any path-like object.
            max_depth: Number of levels to list below the root. Defaults to no limit.
            show_hidden: Whether to list entries whose name starts with a dot.
            exclusion_rules: Rules for excluding paths. Defaults to the ignore set
                built from the root's ``.gitignore`` when the tree is first built.
            display_path: Path to quote in error messages. Defaults to ``root_path``.
        """
        self.root_path = Path(root_path)
        self.display_path = display_path if display_path is not None else root_path
        self.max_depth = max_depth
        self.show_hidden = show_hidden
        self.exclusion_rules = exclusion_rules
        self._nodes: Optional[List[FileSystemNode]] = None
        self._file_count = 0
        self._directory_count = 0

    @property
    def root_name(self) -> str:
        """The name shown on the first line: the real name of the root directory."""
        return self.root_path.resolve().name or str(self.root_path.resolve())

    def get_nodes(self) -> List[FileSystemNode]:
        """Get the top-level nodes of the tree, building it if needed.

        Raises:
            TraversalError: If the root path doesn't exist or isn't a directory.
        """
        if self._nodes is None:
            self._build_tree()
        assert self._nodes is not None
        return self._nodes

    def _build_tree(self) -> None:
        check_directory(self.root_path, self.display_path)

        base_directory = str(self.root_path.resolve())
        rules = self.exclusion_rules
        if rules is None:
            rules = IgnoreSet.from_directory(base_directory)

        options = ScanOptions(base_directory=base_directory, max_depth=self.max_depth, show_hidden=self.show_hidden)
        self._nodes = scan_directory(base_directory, options, rules)
        self._count_files_and_directories()

    def _count_files_and_directories(self) -> None:
        self._file_count = 0
        self._directory_count = 0
        for top in self._nodes or []:
            for node in PreOrderIter(top):
                if node.is_dir:
                    self._directory_count += 1
                else:
                    self._file_count += 1

    def get_file_count(self) -> int:
        """Get the number of files shown in the tree."""
        self.get_nodes()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories shown in the tree, excluding the root."""
        self.get_nodes()
        return self._directory_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time, without newlines.

        Yields:
            The root name, then one line per node in depth-first display order.
        """
        nodes = self.get_nodes()
        yield self.root_name
        yield from stream_lines(nodes)

    def get_tree_representation(self) -> str:
        """Get the complete tree text, each line terminated by a newline."""
        return "".join(line + "\n" for line in self.stream_tree_representation())

    def get_report(self) -> str:
        """Summary line in the style of ``tree``, e.g. ``"2 directories, 3 files"``."""
        directories = self.get_directory_count()
        files = self.get_file_count()
        return (
            f"{directories} {'directory' if directories == 1 else 'directories'}, "
            f"{files} {'file' if files == 1 else 'files'}"
        )

    def refresh(self) -> None:
        """Discard the cached tree and rebuild it from the current filesystem state."""
        self._nodes = None
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()
