"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    An entry is excluded if ANY of the constituent rules excludes it. The renderer
    uses this to combine directory-name rules with extension rules into the single
    visibility check applied to every directory entry.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from project_tree.exclusion_rules.extension_rules import ExtensionRules
        >>> from project_tree.exclusion_rules.name_rules import DirectoryNameRules
        >>> composite = CompositeExclusionRules(
        ...     [DirectoryNameRules({"cache"}), ExtensionRules(ignored_extensions={".log"})]
        ... )
        >>> composite.exclude("cache", is_dir=True)
        True
        >>> composite.exclude("server.log", is_dir=False)
        True
        >>> composite.exclude("src", is_dir=True)
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine. Each rule must implement
                  the BaseExclusionRules interface.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, name: str, is_dir: bool) -> bool:
        """Check if an entry should be excluded by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule
        returns True for exclusion.
        """
        return any(rule.exclude(name, is_dir) for rule in self.rules)
