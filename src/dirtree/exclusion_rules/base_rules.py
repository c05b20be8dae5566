from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Interface for pattern-based exclusion of tree entries.

    Exclusion rules run after the built-in skip lists. Where the skip lists compare a
    single entry name exactly, a rule object is shown the entry's path relative to the
    traversal root, written with forward slashes and ending in ``/`` for directories,
    and may decide with any logic it likes. An excluded directory takes its whole
    subtree with it.

    Only ``exclude`` is required. Reading rules from files and adding rules one at a
    time are optional; the default implementations raise NotImplementedError.

    A traversal only reads its rule object, so one object can serve several runs.

    Example:
        >>> class DistRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path == "dist/" or path.startswith("dist/")
        >>> rules = DistRules()
        >>> rules.exclude("dist/")
        True
        >>> rules.exclude("src/dist.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Decide whether an entry is left out of the tree.

        Args:
            path (str): The entry's root-relative path, e.g. ``"src/main.py"`` or
                ``"src/build/"``.

        Returns:
            bool: True to drop the entry (and, for a directory, everything below it).
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Append rules read from one or more files.

        Args:
            rules_files: A single rules file or a sequence of them, read in order.

        Raises:
            NotImplementedError: If this kind of rules cannot be read from files.
            FileNotFoundError: If a rules file is missing.
        """
        raise NotImplementedError(f"{self.__class__.__name__} cannot load rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Append one rule given as text.

        Raises:
            NotImplementedError: If this kind of rules cannot be added one at a time.
        """
        raise NotImplementedError(f"{self.__class__.__name__} cannot add individual rules.")
