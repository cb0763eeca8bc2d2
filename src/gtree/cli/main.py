"""Command-line interface for gtree.

Exit Codes:
    0: Successful completion
    1: Runtime error (for example, the path does not exist)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g. when piping to `head`)

Example:
    # Render the current directory
    $ gtree

    # Limit depth and include hidden files
    $ gtree -L 2 -a /path/to/project
"""

import logging
import os
import sys
from typing import Optional, Sequence

from gtree.cli.argparser import create_parser, parse_args
from gtree.cli.tree_args import translate_tree_args
from gtree.file_system_tree.file_system_tree import FileSystemTree
from gtree.gtree import resolve_target_path

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the gtree command-line interface.

    Args:
        argv: Command-line arguments. Defaults to ``sys.argv[1:]``.
    """
    parser = create_parser()
    args, tree_tokens = parse_args(parser, argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)

    try:
        tree_args = translate_tree_args(tree_tokens)
        tree = FileSystemTree(
            resolve_target_path(tree_args.path),
            max_depth=tree_args.options.get("max_depth"),
            show_hidden=tree_args.options.get("show_hidden", False),
            display_path=tree_args.path,
        )

        output = tree.get_tree_representation()
        if args.report:
            output += "\n" + tree.get_report() + "\n"

        if args.output:
            args.output.write_text(output, encoding="utf-8")
        else:
            sys.stdout.write(output)
            sys.stdout.flush()

    except BrokenPipeError:
        # Silence the second error Python would report while flushing stdout at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
