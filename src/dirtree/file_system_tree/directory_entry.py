"""Directory listing primitive."""

import os
from typing import List, NamedTuple


class DirectoryEntry(NamedTuple):
    """One child discovered while listing a directory.

    Entries only live while their sibling group is filtered, sorted and rendered.

    Attributes:
        name (str): Base name of the entry.
        full_path (str): Parent path joined with ``name``; used for recursion.
        is_directory (bool): Whether the entry is a directory. Symlinks are followed,
            so a link to a directory counts as a directory.
        is_symlink (bool): Whether the entry itself is a symbolic link.
    """

    name: str
    full_path: str
    is_directory: bool
    is_symlink: bool


def list_directory(path: str) -> List[DirectoryEntry]:
    """List the immediate children of a directory.

    The ``.`` and ``..`` pseudo-entries are never returned. Entries whose type cannot
    be determined (for example a dangling symlink) are classified as non-directories.

    Args:
        path: Directory to list.

    Returns:
        The children in the order the operating system reports them.

    Raises:
        OSError: If the directory cannot be opened or read.
    """
    entries = []
    with os.scandir(path) as it:
        for dir_entry in it:
            try:
                is_directory = dir_entry.is_dir()
            except OSError:
                is_directory = False
            try:
                is_symlink = dir_entry.is_symlink()
            except OSError:
                is_symlink = False
            entries.append(DirectoryEntry(dir_entry.name, dir_entry.path, is_directory, is_symlink))
    return entries
