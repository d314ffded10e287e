"""Configuration resolution for project-tree.

This module turns raw caller input (paths, rule lists, flags) into a validated,
immutable :class:`TraversalConfig`. All validation happens here, before any
directory is traversed, so a bad rule or an unusable path never produces partial
output.
"""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Sequence

from project_tree.exceptions import (
    InvalidRuleError,
    OutputPathError,
    RootAccessError,
    RootNotADirectoryError,
    RootNotFoundError,
    RootPermissionError,
)
from project_tree.io.ignore_file import IGNORE_FILE_NAME, read_ignore_file
from project_tree.types import PathType

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "│   "
DEFAULT_OUTPUT_FILE = "project_structure.md"

# Common package and build folders across tech stacks
DEFAULT_IGNORED_DIRS: FrozenSet[str] = frozenset(
    {
        "node_modules",
        "vendor",
        ".dart_tool",
        "packages",
        "target",
        "deps",
        "venv",
        ".venv",
        "env",
        ".env",
        "site-packages",
        "bower_components",
        "Pods",
        "dist",
        "build",
        ".next",
        "out",
        "public/build",
        "storage/framework/cache",
        "storage/framework/views",
        "target/debug",
        "target/release",
        "www",
        "bin",
        "obj",
        ".build",
        "artifacts",
        "coverage",
        ".cache",
        ".nuxt",
        ".output",
        ".git",
        "__pycache__",
        ".DS_Store",
        ".idea",
        ".vscode",
        ".history",
        "tmp",
        "temp",
        "log",
        "logs",
    }
)

_SEPARATORS = frozenset({"/", "\\", os.sep})


@dataclass(frozen=True)
class TraversalConfig:
    """Validated settings for a single rendering run.

    Instances are produced by :func:`resolve_config` and never change afterwards.

    Attributes:
        root_path: Absolute path of the directory to render.
        output_path: Absolute path of the file the outline is written to.
        indent: String repeated once per level in front of each line.
        ignored_dir_names: Directory names that are hidden, matched case-sensitively.
        ignored_extensions: Lowercase file extensions (with leading dot) that are hidden.
        only_extensions: Lowercase file extensions that are the only ones shown. When
            non-empty, ``ignored_extensions`` is not consulted.
        dirs_only: Hide every file regardless of the extension lists.
    """

    root_path: Path
    output_path: Path
    indent: str = DEFAULT_INDENT
    ignored_dir_names: FrozenSet[str] = DEFAULT_IGNORED_DIRS
    ignored_extensions: FrozenSet[str] = frozenset()
    only_extensions: FrozenSet[str] = frozenset()
    dirs_only: bool = False


def _has_separator(entry: str) -> bool:
    return any(sep in entry for sep in _SEPARATORS)


def validate_rules(entries: Iterable[str], rule_kind: str, *, extensions: bool = False) -> FrozenSet[str]:
    """Validate a list of filter rules and return them as a set.

    Args:
        entries: Rules exactly as the caller supplied them.
        rule_kind: Label used in the error message, e.g. ``"ignore extensions"``.
        extensions: When True, every entry must also start with ``.`` and the valid
            entries are lowercased.

    Returns:
        The validated (and, for extensions, lowercased) entries.

    Raises:
        InvalidRuleError: Listing every entry that is empty, contains a path
            separator, or (for extensions) does not start with ``.``.

    Example:
        >>> sorted(validate_rules([".JS", ".md"], "only extensions", extensions=True))
        ['.js', '.md']
        >>> validate_rules(["src/lib"], "ignore directories")
        Traceback (most recent call last):
        ...
        project_tree.exceptions.InvalidRuleError: Invalid ignore directories (must be simple names, no paths): src/lib
    """
    entries = list(entries)
    if extensions:
        invalid = [e for e in entries if not e or not e.startswith(".") or _has_separator(e)]
        requirement = "must start with '.' and be simple extensions"
    else:
        invalid = [e for e in entries if not e or _has_separator(e)]
        requirement = "must be simple names, no paths"

    if invalid:
        raise InvalidRuleError(rule_kind, invalid, requirement)

    if extensions:
        return frozenset(e.lower() for e in entries)
    return frozenset(entries)


def _validate_root(root_path: Path) -> None:
    try:
        is_dir = stat.S_ISDIR(root_path.stat().st_mode)
    except FileNotFoundError:
        raise RootNotFoundError(root_path)
    except PermissionError:
        raise RootPermissionError(root_path)
    except OSError as e:
        raise RootAccessError(root_path, e.strerror or str(e))

    if not is_dir:
        raise RootNotADirectoryError(root_path)


def _validate_output_parent(output_path: Path) -> None:
    parent = output_path.parent
    try:
        parent.stat()
    except FileNotFoundError:
        raise OutputPathError(parent)
    except OSError as e:
        raise OutputPathError(parent, e.strerror or str(e))

    if not parent.is_dir():
        raise OutputPathError(parent, "not a directory")


def _load_ignore_file(root_path: Path) -> List[str]:
    ignore_file = root_path / IGNORE_FILE_NAME
    try:
        return read_ignore_file(ignore_file)
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", IGNORE_FILE_NAME, e)
        return []


def resolve_config(
    root_path: PathType = ".",
    output_path: PathType = DEFAULT_OUTPUT_FILE,
    *,
    ignored_dirs: Sequence[str] = (),
    ignore_extensions: Sequence[str] = (),
    only_extensions: Sequence[str] = (),
    dirs_only: bool = False,
    indent: str = DEFAULT_INDENT,
) -> TraversalConfig:
    """Validate raw input and build a :class:`TraversalConfig`.

    Checks run in a fixed order: the root directory, the output file's parent
    directory, the optional ``.projectignore`` file inside the root, the
    caller-supplied directory names, and finally the two extension lists.

    Args:
        root_path: Directory to render. Relative paths are made absolute against the
            current working directory; symlinks are not resolved.
        output_path: File the outline will be written to.
        ignored_dirs: Extra directory names to hide, merged with
            :data:`DEFAULT_IGNORED_DIRS` and the ``.projectignore`` entries.
        ignore_extensions: File extensions to hide, e.g. ``[".log"]``.
        only_extensions: File extensions to show exclusively, e.g. ``[".py"]``.
        dirs_only: Hide all files.
        indent: Per-level indentation string.

    Returns:
        The validated configuration.

    Raises:
        RootNotFoundError: If ``root_path`` does not exist.
        RootNotADirectoryError: If ``root_path`` is not a directory.
        RootPermissionError: If ``root_path`` cannot be accessed.
        RootAccessError: For any other failure while checking ``root_path``.
        OutputPathError: If the output file's parent directory is missing or unusable.
        InvalidRuleError: If any caller-supplied rule is malformed.
    """
    root = Path(os.path.abspath(root_path))
    _validate_root(root)

    output = Path(os.path.abspath(output_path))
    _validate_output_parent(output)

    file_ignored_dirs = _load_ignore_file(root)

    user_ignored_dirs = validate_rules(ignored_dirs, "ignore directories")
    normalized_ignore_ext = validate_rules(ignore_extensions, "ignore extensions", extensions=True)
    normalized_only_ext = validate_rules(only_extensions, "only extensions", extensions=True)

    config = TraversalConfig(
        root_path=root,
        output_path=output,
        indent=indent,
        ignored_dir_names=DEFAULT_IGNORED_DIRS | user_ignored_dirs | frozenset(file_ignored_dirs),
        ignored_extensions=normalized_ignore_ext,
        only_extensions=normalized_only_ext,
        dirs_only=dirs_only,
    )
    logger.debug("Resolved configuration: %s", config)
    return config
