"""Command-line argument parsing for project-tree.

This module defines the command-line interface for project-tree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import List

from project_tree import __version__
from project_tree.config import DEFAULT_OUTPUT_FILE


def comma_separated(value: str) -> List[str]:
    """Split a comma-separated option value into trimmed, non-empty items.

    Example:
        >>> comma_separated(" .js, .ts ,,")
        ['.js', '.ts']
        >>> comma_separated("")
        []
    """
    return [item.strip() for item in value.split(",") if item.strip()]


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with project-tree's options.
    """
    description = """
    project-tree: Generate a project directory structure in Markdown format.

    Directories are listed before files, both alphabetically (case-insensitive).
    Common dependency, build, and cache directories (node_modules, .git, dist,
    __pycache__, ...) are skipped by default. Additional directory names can be
    listed one per line in a .projectignore file at the project root.
    """

    epilog = """
    Examples:
      # Render the current directory into project_structure.md
      project-tree

      # Render another directory into a custom file
      project-tree --path ../my-app --output docs/structure.md

      # Skip additional directories
      project-tree --ignore cache,fixtures

      # Hide or exclusively show files by extension
      project-tree --ignore-ext .log,.lock
      project-tree --only-ext .py

      # Directories only
      project-tree --dirs-only
    """

    parser = argparse.ArgumentParser(
        prog="project-tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"project-tree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "--ignore",
        type=comma_separated,
        default=[],
        metavar="DIRS",
        help="Comma-separated list of directories to ignore.",
    )
    parser.add_argument(
        "--ignore-ext",
        type=comma_separated,
        default=[],
        metavar="EXTENSIONS",
        help="Comma-separated list of file extensions to ignore (e.g., .js,.ts).",
    )
    parser.add_argument(
        "--only-ext",
        type=comma_separated,
        default=[],
        metavar="EXTENSIONS",
        help="Comma-separated list of file extensions to include (e.g., .js). Overrides --ignore-ext.",
    )
    parser.add_argument(
        "--dirs-only",
        action="store_true",
        help="Show only directories, excluding all files.",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=Path("."),
        metavar="DIR",
        help="Project root directory (default: current directory).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_FILE),
        metavar="FILE",
        help=f"Output Markdown file (default: {DEFAULT_OUTPUT_FILE}).",
    )

    return parser
