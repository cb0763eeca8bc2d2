"""Node representation for file system elements in the tree."""

from typing import Any, Iterable, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the rendered tree.

    Extends anytree.Node with the data the scanner records for every entry. Tree
    navigation (parent, children, descendants) is inherited from anytree, which also
    guarantees that a node belongs to at most one parent.

    Attributes:
        name (str): The entry's base name.
        relative_path (str): Path relative to the scan root, using forward slashes.
        is_dir (bool): True if this node represents a directory.
        level (int): Depth below the scan root; the root's own entries are level 0.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> src = FileSystemNode("src", relative_path="src", is_dir=True)
        >>> main = FileSystemNode("main.py", parent=src, relative_path="src/main.py", level=1)
        >>> [child.name for child in src.children]
        ['main.py']
        >>> main.level
        1
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        relative_path: Optional[str] = None,
        is_dir: bool = False,
        level: int = 0,
        children: Optional[Iterable["FileSystemNode"]] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            relative_path: Forward-slash path relative to the scan root. Defaults to ``name``.
            is_dir: Whether this node represents a directory. Defaults to False.
            level: Depth below the scan root. Defaults to 0.
            children: Initial child nodes. Defaults to None.
            **kwargs: Additional attributes passed to anytree.Node.
        """
        super().__init__(name, parent, children, **kwargs)
        self.relative_path = relative_path if relative_path is not None else name
        self.is_dir = is_dir
        self.level = level
