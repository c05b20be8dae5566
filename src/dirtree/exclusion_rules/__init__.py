"""Name- and pattern-based filtering of directory entries."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .skip_lists import DEFAULT_SKIP_DIRS, DEFAULT_SKIP_FILES, HIDDEN_PREFIX, included

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_SKIP_DIRS",
    "DEFAULT_SKIP_FILES",
    "GitIgnoreExclusionRules",
    "HIDDEN_PREFIX",
    "included",
]
