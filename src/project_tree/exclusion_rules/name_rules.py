"""Exclusion rules matching directories by exact name."""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules


class DirectoryNameRules(BaseExclusionRules):
    """Hide directories whose name is in a fixed set.

    Matching is exact and case-sensitive. Files are never excluded by these rules,
    even when a file happens to share a name with an ignored directory.

    Attributes:
        names (FrozenSet[str]): Directory names to hide.

    Example:
        >>> rules = DirectoryNameRules(["cache", "dist"])
        >>> rules.exclude("cache", is_dir=True)
        True
        >>> rules.exclude("Cache", is_dir=True)
        False
    """

    def __init__(self, names: Iterable[str]):
        self.names: FrozenSet[str] = frozenset(names)

    def exclude(self, name: str, is_dir: bool) -> bool:
        return is_dir and name in self.names
