"""Canonical path resolution and the set of visited directories."""

import errno
from pathlib import Path
from typing import Iterator, Set

from dirtree.types import PathType


def canonicalize(path: PathType) -> str:
    """Return the absolute, symlink-resolved form of ``path``.

    Args:
        path: The path to resolve.

    Returns:
        The canonical path as a string.

    Raises:
        OSError: If the path does not exist or cannot be resolved.
    """
    try:
        return str(Path(path).resolve(strict=True))
    except RuntimeError as e:
        # Older Python versions report symlink loops as RuntimeError
        raise OSError(errno.ELOOP, str(e), str(path))


class VisitedSet:
    """Canonical paths of the directories entered during one traversal.

    A directory's canonical path is added before its children are listed, so reaching
    the same real directory again, through a symlink loop or a second link, ends that
    branch instead of listing it twice.

    A VisitedSet belongs to exactly one traversal and must not be shared.

    Example:
        >>> visited = VisitedSet()
        >>> visited.visit("/srv/project")
        True
        >>> visited.visit("/srv/project")
        False
        >>> "/srv/project" in visited
        True
    """

    def __init__(self) -> None:
        self._paths: Set[str] = set()

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def add(self, path: str) -> None:
        self._paths.add(path)

    def visit(self, path: str) -> bool:
        """Mark ``path`` as visited.

        Returns:
            True if the path had not been visited before, False otherwise.
        """
        if path in self._paths:
            return False
        self._paths.add(path)
        return True
