"""File system tree representation with configurable exclusion rules.

This module provides the main FileSystemTree class, which walks a directory
depth-first, keeps the visible entries in an anytree structure, and renders that
structure as an indented outline.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Tuple

from project_tree.config import TraversalConfig
from project_tree.exceptions import TraversalError
from project_tree.exclusion_rules.composite_rules import CompositeExclusionRules
from project_tree.exclusion_rules.extension_rules import ExtensionRules
from project_tree.exclusion_rules.name_rules import DirectoryNameRules
from project_tree.file_system_tree.file_system_node import FileSystemNode

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MARKER = "[Permission Denied]"
DIRECTORY_NOT_FOUND_MARKER = "[Directory Not Found]"

BRANCH = "├── "
LAST_BRANCH = "└── "


class DirEntry(NamedTuple):
    """A single entry of one directory listing."""

    name: str
    is_dir: bool


def sort_key(entry: DirEntry) -> tuple:
    """Order directories before files, then by case-insensitive name.

    The exact name breaks ties so that ``README`` and ``readme`` always come out
    in the same order.
    """
    return (not entry.is_dir, entry.name.casefold(), entry.name)


def list_directory(path: Path) -> List[DirEntry]:
    """List the immediate entries of a directory in display order.

    Symbolic links are reported as what they are, not what they point to, so a
    link to a directory is listed as a file entry and never descended into.

    Raises:
        OSError: Any error raised by the underlying listing.
    """
    with os.scandir(path) as it:
        entries = [DirEntry(entry.name, entry.is_dir(follow_symlinks=False)) for entry in it]
    entries.sort(key=sort_key)
    return entries


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access. Only visible entries become nodes;
    hidden directories are never descended into.

    Listing Failure Behavior:
        - PermissionError: the directory's contents are replaced by a single
          ``[Permission Denied]`` marker node
        - FileNotFoundError (removed mid-traversal): replaced by a
          ``[Directory Not Found]`` marker node
        - any other OSError: TraversalError is raised and the tree is not built

    Attributes:
        config (TraversalConfig): The resolved settings for this tree.
        root_path (Path): The absolute path to the root directory.
        exclusion_rules (CompositeExclusionRules): Visibility rules built from config.

    Example:
        >>> from project_tree.config import resolve_config
        >>> tree = FileSystemTree(resolve_config("src"))  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src/
        ├── utils/
        │   └── helpers.py
        └── main.py
    """

    def __init__(self, config: TraversalConfig) -> None:
        self.config = config
        self.root_path = config.root_path
        self.exclusion_rules = CompositeExclusionRules(
            [
                DirectoryNameRules(config.ignored_dir_names),
                ExtensionRules(
                    ignored_extensions=config.ignored_extensions,
                    only_extensions=config.only_extensions,
                    dirs_only=config.dirs_only,
                ),
            ]
        )
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if necessary.

        Raises:
            TraversalError: If a directory listing fails with an unrecoverable error.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        """Walk the root directory depth-first and return the populated root node.

        Directories waiting to be listed are kept on an explicit stack, so the depth
        of the tree is limited by the filesystem rather than the interpreter.
        """
        logger.debug("Building tree for %s", self.root_path)
        self._file_count = 0
        self._directory_count = 0
        root = FileSystemNode(self.root_path.name, is_dir=True)
        pending: List[Tuple[FileSystemNode, Path]] = [(root, self.root_path)]
        while pending:
            node, path = pending.pop()
            subdirectories = self._populate(node, path)
            pending.extend(reversed(subdirectories))
        return root

    def _populate(self, node: FileSystemNode, path: Path) -> List[Tuple[FileSystemNode, Path]]:
        """Attach the visible children of ``path`` to ``node``.

        Returns:
            The newly attached directory nodes with their paths, in display order.
        """
        try:
            entries = list_directory(path)
        except PermissionError:
            logger.debug("Permission denied listing %s", path)
            FileSystemNode(PERMISSION_DENIED_MARKER, parent=node, is_marker=True)
            return []
        except FileNotFoundError:
            logger.debug("Directory vanished before listing: %s", path)
            FileSystemNode(DIRECTORY_NOT_FOUND_MARKER, parent=node, is_marker=True)
            return []
        except OSError as e:
            raise TraversalError(path, e.strerror or str(e))

        subdirectories = []
        for entry in entries:
            if self.exclusion_rules.exclude(entry.name, entry.is_dir):
                continue
            child = FileSystemNode(entry.name, parent=node, is_dir=entry.is_dir)
            if entry.is_dir:
                self._directory_count += 1
                subdirectories.append((child, path / entry.name))
            else:
                self._file_count += 1
        return subdirectories

    def get_file_count(self) -> int:
        """Get the number of visible files in the tree."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of visible directories in the tree (excluding root)."""
        self.get_tree()
        return self._directory_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the outline one line at a time.

        The first line is the root directory's name followed by ``/``. Every other
        line is the level's indent, a branch connector, the entry name, and a
        trailing ``/`` for directories. Marker lines carry the indent only.

        Yields:
            Lines of the outline, without line terminators.

        Raises:
            TraversalError: If a directory listing fails with an unrecoverable error.

        Example:
            >>> tree = FileSystemTree(config)  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            test-dir/
            ├── src/
            │   └── app.js
            ├── package.json
            └── README.md
        """
        root = self.get_tree()
        indent = self.config.indent

        yield f"{root.name}/"
        pending: List[Tuple[FileSystemNode, int, bool]] = []
        self._push_children(pending, root, 0)
        while pending:
            node, level, is_last = pending.pop()
            prefix = indent * level
            if node.is_marker:
                yield f"{prefix}{node.name}"
                continue

            connector = LAST_BRANCH if is_last else BRANCH
            suffix = "/" if node.is_dir else ""
            yield f"{prefix}{connector}{node.name}{suffix}"

            if node.is_dir:
                self._push_children(pending, node, level + 1)

    @staticmethod
    def _push_children(pending: List[Tuple[FileSystemNode, int, bool]], node: FileSystemNode, level: int) -> None:
        children = node.children
        last = len(children) - 1
        for i in range(last, -1, -1):
            pending.append((children[i], level, i == last))

    def get_tree_representation(self) -> str:
        """Get the complete outline as a single string joined by newlines."""
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Rebuild the tree to reflect the current filesystem state."""
        self._tree = None
        self._tree = self._build_tree()


def render_tree(config: TraversalConfig) -> List[str]:
    """Render the outline for a resolved configuration.

    Args:
        config: Configuration produced by :func:`project_tree.config.resolve_config`.

    Returns:
        The root line followed by every visible entry in depth-first pre-order.

    Raises:
        TraversalError: If a directory listing fails with an unrecoverable error.
    """
    return list(FileSystemTree(config).stream_tree_representation())
