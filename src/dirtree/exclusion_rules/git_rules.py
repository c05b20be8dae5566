"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.pattern import Pattern
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Matching is delegated to the pathspec library, which implements Git's wildmatch
    semantics: globs, directory patterns ending in ``/``, negation with ``!``, ``**``
    and comment lines.

    Patterns may come from files (``load_rules``) or be added one at a time
    (``add_rule``). They are evaluated in the order added, so a later negation can
    re-include a path excluded by an earlier pattern.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build2/")
        False
        >>> rules.add_rule("*.log")
        >>> rules.exclude("logs/app.log")
        True

    Note:
        Paths given to exclude() must use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize with patterns from the given files, if any.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Root-relative path, with a trailing ``/`` for directories.

        Returns:
            bool: True if the last matching pattern excludes the path.
        """
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        """Return True if at least one pattern has been loaded."""
        return len(self.spec.patterns) > 0

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.

        Example:
            >>> import os
            >>> import tempfile
            >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
            ...     _ = f.write('*.txt\\n!important.txt\\n')
            >>> rules = GitIgnoreExclusionRules(f.name)
            >>> rules.exclude("notes.txt")
            True
            >>> rules.exclude("important.txt")
            False
            >>> os.unlink(f.name)
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                gitignore_content = f.read().splitlines()

            new_patterns = PathSpec.from_lines(GitWildMatchPattern, gitignore_content).patterns
            self._extend(new_patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern.

        Args:
            rule: A pattern such as "*.pyc", "node_modules/" or "!keep.txt".
        """
        self._extend([GitWildMatchPattern(rule)])

    def _extend(self, patterns: Iterable[Pattern]) -> None:
        # PathSpec compiles its patterns when constructed
        self.spec = PathSpec([*self.spec.patterns, *patterns])
