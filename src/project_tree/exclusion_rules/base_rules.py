from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Rules are evaluated against a single directory entry at a time: its simple name
    and whether it is a directory. Concrete rules decide whether that entry is hidden
    from the rendered outline.

    Example:
        >>> from project_tree.exclusion_rules.name_rules import DirectoryNameRules
        >>> rules = DirectoryNameRules({"node_modules"})
        >>> rules.exclude("node_modules", is_dir=True)
        True
        >>> rules.exclude("node_modules", is_dir=False)
        False
    """

    @abstractmethod
    def exclude(self, name: str, is_dir: bool) -> bool:
        """
        Determine if a directory entry should be excluded.

        Args:
            name (str): The entry's simple name (no directory component).
            is_dir (bool): Whether the entry is a directory.

        Returns:
            bool: True if the entry should be hidden, False if it should be rendered.
        """
        pass
