"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .ignore_set import DEFAULT_IGNORE_PATTERNS, IgnoreSet, pattern_matches

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_IGNORE_PATTERNS",
    "IgnoreSet",
    "pattern_matches",
]
