"""Box-drawing rendering of scanned nodes, in the style of the Unix ``tree`` command."""

from typing import Iterator, Sequence

from gtree.file_system_tree.file_system_node import FileSystemNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def line_prefix(ancestor_is_last: Sequence[bool], is_last: bool) -> str:
    """Build the indentation and connector for one line.

    Example:
        >>> line_prefix((), False)
        '├── '
        >>> line_prefix((False, True), True)
        '│       └── '
    """
    indent = "".join(SPACE if last else PIPE for last in ancestor_is_last)
    return indent + (LAST_BRANCH if is_last else BRANCH)


def stream_lines(nodes: Sequence[FileSystemNode], ancestor_is_last: Sequence[bool] = ()) -> Iterator[str]:
    """Yield the rendered lines for ``nodes`` and their descendants, without newlines.

    Args:
        nodes: Sibling nodes in display order.
        ancestor_is_last: For each enclosing level, whether that ancestor was the last
            of its siblings.

    Yields:
        One line per node, depth first.
    """
    count = len(nodes)
    for i, node in enumerate(nodes):
        is_last = i == count - 1
        yield line_prefix(ancestor_is_last, is_last) + node.name
        if node.children:
            yield from stream_lines(node.children, tuple(ancestor_is_last) + (is_last,))


def render(nodes: Sequence[FileSystemNode], ancestor_is_last: Sequence[bool] = ()) -> str:
    """Render ``nodes`` as newline-terminated tree lines.

    Example:
        >>> src = FileSystemNode("src", is_dir=True)
        >>> _ = FileSystemNode("main.py", parent=src, level=1)
        >>> print(render([src, FileSystemNode("setup.py")]), end="")
        ├── src
        │   └── main.py
        └── setup.py
    """
    return "".join(line + "\n" for line in stream_lines(nodes, ancestor_is_last))


def render_tree(root_name: str, nodes: Sequence[FileSystemNode]) -> str:
    """Render a complete tree: the root's name on its own line, then its entries.

    Example:
        >>> render_tree("empty", [])
        'empty\\n'
    """
    return root_name + "\n" + render(nodes)
