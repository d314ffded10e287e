"""Command-line interface for project-tree.

This module wires the argument parser to the library: it builds the raw
configuration from the command line, runs the generator, and maps failures to
an error message on stderr and a non-zero exit status.

Exit Codes:
    0: Successful completion
    1: Runtime error (invalid rules, unusable paths, traversal or write failure)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Render the current directory
    $ project-tree

    # Skip extra directories and log files
    $ project-tree --ignore cache --ignore-ext .log
"""

import logging
import sys
from typing import Optional, Sequence

from project_tree.cli.argparser import create_parser
from project_tree.project_tree import generate_project_tree


def setup_logging() -> None:
    """Route library warnings to stderr."""
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING, format="Warning: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the project-tree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    setup_logging()
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        generate_project_tree(
            args.path,
            args.output,
            ignored_dirs=args.ignore,
            ignore_extensions=args.ignore_ext,
            only_extensions=args.only_ext,
            dirs_only=args.dirs_only,
        )
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    print(f"Project structure has been written to {args.output}")


if __name__ == "__main__":
    main()
