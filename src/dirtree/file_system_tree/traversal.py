"""Depth-first traversal of a directory hierarchy.

This module walks a directory tree and produces the sequence of render events that the
renderer turns into tree lines. The walk applies the name-based filter policy and any
pattern-based exclusion rules, orders siblings deterministically, honours the depth
limit and guards against symlink cycles.
"""

import logging
import os
import stat
from typing import Iterator, NamedTuple, Optional

from dirtree.config import TraversalConfig
from dirtree.exceptions import PathResolutionError, RootNotADirectoryError, RootNotFoundError
from dirtree.exclusion_rules.skip_lists import included
from dirtree.file_system_tree.directory_entry import DirectoryEntry, list_directory
from dirtree.file_system_tree.visited_set import VisitedSet, canonicalize
from dirtree.types import PathType

logger = logging.getLogger(__name__)


class RenderEvent(NamedTuple):
    """One tree line to emit.

    Attributes:
        name (str): Base name of the entry.
        depth (int): Distance from the root; the root's direct children are at depth 1.
        is_last (bool): Whether the entry is the last surviving child of its parent.
        is_directory (bool): Whether the entry is a directory.
    """

    name: str
    depth: int
    is_last: bool
    is_directory: bool


def resolve_root(root_path: PathType) -> str:
    """Validate the traversal root and return its canonical path.

    Args:
        root_path: The root directory as given by the caller.

    Returns:
        The absolute, symlink-resolved path of the root.

    Raises:
        RootNotFoundError: If the root does not exist.
        RootNotADirectoryError: If the root exists but is not a directory.
        PathResolutionError: If the root cannot be inspected or canonicalized.
    """
    path = os.fspath(root_path)
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        raise RootNotFoundError(path)
    except OSError as e:
        raise PathResolutionError(path, e.strerror or str(e))

    if not stat.S_ISDIR(st.st_mode):
        raise RootNotADirectoryError(path)

    try:
        return canonicalize(path)
    except OSError as e:
        raise PathResolutionError(path, e.strerror or str(e))


def root_name(canonical_root: str) -> str:
    """Return the label printed on the first line of the tree.

    This is the last component of the canonical root path, or the whole path when
    there is no last component (a filesystem root such as ``/``).
    """
    return os.path.basename(canonical_root.rstrip(os.sep)) or canonical_root


def walk(root_path: PathType, config: Optional[TraversalConfig] = None) -> Iterator[RenderEvent]:
    """Walk a directory tree depth-first and yield one event per displayed entry.

    The root is validated before this function returns, so root errors are raised
    immediately and never after part of the tree has been produced. The root itself
    produces no event; use ``root_name`` for its label.

    Siblings are filtered before they are sorted and counted, sorted by byte-wise
    comparison of their file system names, and a directory's event always precedes
    the events of its children.

    Args:
        root_path: The directory to walk.
        config: Traversal options. Defaults to ``TraversalConfig()``.

    Returns:
        An iterator over the render events in display order.

    Raises:
        RootNotFoundError: If the root does not exist.
        RootNotADirectoryError: If the root is not a directory.
        PathResolutionError: If the root cannot be canonicalized.

    Example:
        >>> for event in walk("project"):  # doctest: +SKIP
        ...     print(event.depth, event.name)
        1 README.md
        1 src
        2 main.py
    """
    if config is None:
        config = TraversalConfig()
    canonical_root = resolve_root(root_path)
    return _walk_directory(canonical_root, "", 1, config, VisitedSet())


def _keep(entry: DirectoryEntry, relative_dir: str, config: TraversalConfig) -> bool:
    """Apply the filter policy, then the pattern rules, to one entry."""
    if not included(entry.name, entry.is_directory, config):
        return False

    if config.exclusion_rules is not None:
        relative_path = relative_dir + entry.name
        if entry.is_directory:
            relative_path += "/"
        if config.exclusion_rules.exclude(relative_path):
            return False

    return True


def _walk_directory(
    path: str,
    relative_dir: str,
    depth: int,
    config: TraversalConfig,
    visited: VisitedSet,
) -> Iterator[RenderEvent]:
    """Yield events for the children of ``path``, which are at ``depth``."""
    depth_limit = config.depth_limit
    if depth_limit is not None and depth > depth_limit:
        return

    try:
        canonical_path = canonicalize(path)
    except OSError as e:
        logger.debug("Cannot resolve %s: %s", path, e)
        return

    if not visited.visit(canonical_path):
        logger.debug("Already visited %s, not descending again", canonical_path)
        return

    try:
        entries = list_directory(path)
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return

    survivors = [entry for entry in entries if _keep(entry, relative_dir, config)]
    # Byte order of the on-disk names; undecodable names are surrogate-escaped str
    survivors.sort(key=lambda entry: os.fsencode(entry.name))

    count = len(survivors)
    for index, entry in enumerate(survivors):
        is_last = index == count - 1
        yield RenderEvent(entry.name, depth, is_last, entry.is_directory)

        if entry.is_directory and (config.follow_symlinks or not entry.is_symlink):
            yield from _walk_directory(
                entry.full_path,
                f"{relative_dir}{entry.name}/",
                depth + 1,
                config,
                visited,
            )
