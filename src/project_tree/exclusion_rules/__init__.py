"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .extension_rules import ExtensionRules, get_extension
from .name_rules import DirectoryNameRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DirectoryNameRules",
    "ExtensionRules",
    "get_extension",
]
