"""Built-in skip lists and the name-based filter policy.

The skip lists hold names of directories and files that are almost always noise in a
project listing: version-control metadata, dependency caches, editor settings and
operating system artifacts. Matching is exact and case-sensitive; there is no
globbing. Pattern-based filtering is handled separately by the exclusion rules.
"""

from typing import TYPE_CHECKING, FrozenSet

if TYPE_CHECKING:
    from dirtree.config import TraversalConfig

HIDDEN_PREFIX = "."

DEFAULT_SKIP_DIRS: FrozenSet[str] = frozenset(
    {
        # Cross-platform
        "node_modules",
        ".git",
        ".vscode",
        "__pycache__",
        "venv",
        ".idea",
        # Windows
        "$RECYCLE.BIN",
        "System Volume Information",
        "Windows.old",
        "AppData",
        "Temp",
    }
)

DEFAULT_SKIP_FILES: FrozenSet[str] = frozenset(
    {
        # Cross-platform
        ".gitignore",
        ".DS_Store",
        "Thumbs.db",
        ".env",
        # Windows
        "desktop.ini",
        "ntuser.dat",
        "NTUSER.DAT",
        "ntuser.dat.LOG1",
        "ntuser.dat.LOG2",
        "ntuser.ini",
    }
)


def included(name: str, is_directory: bool, config: "TraversalConfig") -> bool:
    """Decide whether an entry appears in the tree.

    Args:
        name: The entry's base name.
        is_directory: Whether the entry is a directory. Directories are checked against
            the directory lists, everything else against the file lists.
        config: The traversal configuration.

    Returns:
        True if the entry is kept. When ``config.skip_common`` is False every entry is
        kept, whatever ``skip_hidden`` says.

    Example:
        >>> from dirtree.config import TraversalConfig
        >>> included(".git", True, TraversalConfig())
        False
        >>> included(".git", False, TraversalConfig())
        True
        >>> included(".git", True, TraversalConfig(skip_common=False))
        True
        >>> included("build", True, TraversalConfig(custom_skip_dirs=("build",)))
        False
    """
    if not config.skip_common:
        return True

    if is_directory:
        if name in DEFAULT_SKIP_DIRS or name in config.custom_skip_dirs:
            return False
    elif name in DEFAULT_SKIP_FILES or name in config.custom_skip_files:
        return False

    if config.skip_hidden and name.startswith(HIDDEN_PREFIX):
        return False

    return True
