"""Project structure outline utilities.

This package renders a directory subtree as an indented text outline, with
directories listed before files, configurable exclusion rules, and a single
write of the result to an output file.
"""

from importlib.metadata import PackageNotFoundError, version

from project_tree.config import DEFAULT_IGNORED_DIRS, TraversalConfig, resolve_config
from project_tree.file_system_tree import FileSystemTree, render_tree
from project_tree.io.output_writer import write_lines
from project_tree.project_tree import generate_project_tree

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("project-tree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DEFAULT_IGNORED_DIRS",
    "FileSystemTree",
    "TraversalConfig",
    "generate_project_tree",
    "render_tree",
    "resolve_config",
    "write_lines",
]
