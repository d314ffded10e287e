"""Exclusion rules for files based on their extension."""

import os
from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules


def get_extension(name: str) -> str:
    """Return the lowercase extension of a file name, including the leading dot.

    Names without a dot, and dot-files such as ``.gitignore``, have no extension.

    Example:
        >>> get_extension("README.MD")
        '.md'
        >>> get_extension("archive.tar.gz")
        '.gz'
        >>> get_extension(".gitignore")
        ''
        >>> get_extension("Makefile")
        ''
    """
    return os.path.splitext(name)[1].lower()


class ExtensionRules(BaseExclusionRules):
    """Hide files by extension, or hide all files.

    Precedence, from strongest to weakest:

    1. ``dirs_only`` hides every file.
    2. A non-empty ``only_extensions`` set shows exactly the files whose extension
       it contains; ``ignored_extensions`` is not consulted at all.
    3. Otherwise files whose extension is in ``ignored_extensions`` are hidden.

    Directories are never excluded by these rules.

    Attributes:
        ignored_extensions (FrozenSet[str]): Lowercase extensions to hide.
        only_extensions (FrozenSet[str]): Lowercase extensions to show exclusively.
        dirs_only (bool): Whether all files are hidden.

    Example:
        >>> rules = ExtensionRules(ignored_extensions={".js"}, only_extensions={".js"})
        >>> rules.exclude("app.js", is_dir=False)
        False
        >>> rules.exclude("README.md", is_dir=False)
        True
        >>> ExtensionRules(only_extensions={".js"}, dirs_only=True).exclude("app.js", is_dir=False)
        True
    """

    def __init__(
        self,
        ignored_extensions: Iterable[str] = (),
        only_extensions: Iterable[str] = (),
        dirs_only: bool = False,
    ):
        self.ignored_extensions: FrozenSet[str] = frozenset(ignored_extensions)
        self.only_extensions: FrozenSet[str] = frozenset(only_extensions)
        self.dirs_only = dirs_only

    def exclude(self, name: str, is_dir: bool) -> bool:
        if is_dir:
            return False
        if self.dirs_only:
            return True

        ext = get_extension(name)
        if self.only_extensions:
            return ext not in self.only_extensions
        return ext in self.ignored_extensions
