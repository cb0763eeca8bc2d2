"""Command-line argument parsing for gtree.

argparse handles gtree's own options. Everything it does not recognise (the
target directory and any ``tree``-style flags) is left over and handed to
:func:`gtree.cli.tree_args.translate_tree_args`.
"""

import argparse
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from gtree import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with gtree's own options.
    """
    description = """
    gtree: a git-aware directory tree viewer.

    Prints the tree of a directory in the style of the Unix 'tree' command while
    skipping hidden entries, .git, .DS_Store, node_modules and anything matched by
    the root directory's .gitignore file.

    Besides the options below, these 'tree' flags are understood:
      -L LEVEL      Descend at most LEVEL directories deep.
      -a, --all     Include hidden entries.
    Other 'tree' flags are accepted and ignored.

    Relative paths are resolved against $GTREE_BASE_PATH when it is set.
    """

    epilog = """
    Examples:
      # Current directory
      gtree

      # Two levels of a project, including dotfiles
      gtree -L 2 -a /path/to/project

      # Write the tree and a summary line to a file
      gtree -r -o tree.txt src
    """

    parser = argparse.ArgumentParser(
        prog="gtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"gtree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-r",
        "--report",
        action="store_true",
        help="Append a summary line with the number of directories and files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostic messages (such as skipped unreadable directories) to stderr.",
    )

    return parser


def parse_args(
    parser: argparse.ArgumentParser, argv: Optional[Sequence[str]] = None
) -> Tuple[argparse.Namespace, List[str]]:
    """Split the command line into gtree's options and the leftover ``tree`` tokens.

    Args:
        parser: Parser returned by :func:`create_parser`.
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        The parsed namespace and the unrecognised tokens, in their original order.
    """
    return parser.parse_known_args(argv)
