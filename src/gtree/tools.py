"""Tool entry point for agent integrations.

``gtree_tool`` is the callable behind the ``gtree`` tool. Tool hosts expect a text
result, so failures are returned as ``"Error: ..."`` strings rather than raised.
"""

import logging
from typing import Any, Dict, List, Optional

from gtree.cli.tree_args import DEFAULT_PATH, translate_tree_args
from gtree.gtree import generate_tree

logger = logging.getLogger(__name__)

TOOL_NAME = "gtree"

TOOL_SCHEMA: Dict[str, Any] = {
    "name": TOOL_NAME,
    "description": (
        "Generate a tree view of directory structure, respecting .gitignore patterns "
        "(similar to the tree command with fd filtering)"
    ),
    "parameters": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "Target directory path (default: current directory)"},
            "maxDepth": {"type": "number", "description": "Maximum depth to traverse (equivalent to -L flag)"},
            "showHidden": {"type": "boolean", "description": "Show hidden files (equivalent to -a flag)"},
            "args": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Additional tree-style arguments like ['-L', '2'] or ['-a']",
            },
        },
    },
}


def gtree_tool(
    path: Optional[str] = None,
    max_depth: Optional[int] = None,
    show_hidden: Optional[bool] = None,
    args: Optional[List[str]] = None,
) -> str:
    """Run the ``gtree`` tool.

    Args:
        path: Target directory. Defaults to the current directory.
        max_depth: Number of levels to list below the root.
        show_hidden: Whether to include dot-entries.
        args: ``tree``-style arguments; a path or option given here overrides the
            corresponding keyword argument.

    Returns:
        The rendered tree, or ``"Error: <message>"`` if it could not be generated.
    """
    try:
        target_path = path or DEFAULT_PATH
        options: Dict[str, Any] = {"max_depth": max_depth, "show_hidden": bool(show_hidden)}

        if args:
            parsed = translate_tree_args(args)
            if parsed.path != DEFAULT_PATH:
                target_path = parsed.path
            options.update(parsed.options)

        return generate_tree(target_path, **options)
    except Exception as e:
        logger.debug("gtree tool failed", exc_info=True)
        return f"Error: {e}"
