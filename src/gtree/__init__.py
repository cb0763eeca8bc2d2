"""Git-aware directory tree rendering.

This package renders a filtered, box-drawing tree view of a directory, skipping
hidden entries, a few default exclusions and paths matched by the root
directory's .gitignore file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("gtree")
except PackageNotFoundError:
    __version__ = "unknown"

from gtree.exceptions import GtreeError, TraversalError  # noqa: E402
from gtree.gtree import generate_tree  # noqa: E402

__all__ = ["GtreeError", "TraversalError", "generate_tree", "__version__"]
