"""File system tree representation with configurable exclusion rules.

This module provides classes for building a tree of the visible entries below a
root directory and rendering it as an indented text outline.
"""

from .file_system_node import FileSystemNode
from .file_system_tree import (
    DIRECTORY_NOT_FOUND_MARKER,
    PERMISSION_DENIED_MARKER,
    DirEntry,
    FileSystemTree,
    render_tree,
)

__all__ = [
    "DIRECTORY_NOT_FOUND_MARKER",
    "PERMISSION_DENIED_MARKER",
    "DirEntry",
    "FileSystemNode",
    "FileSystemTree",
    "render_tree",
]
