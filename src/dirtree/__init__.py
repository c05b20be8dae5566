"""Directory tree rendering utilities.

This package renders a directory hierarchy as an indented text tree, similar to the
Unix ``tree`` utility, filtering out common noise such as version-control metadata
and dependency caches. The output is suitable for pasting into prompts for Large
Language Models (LLMs).
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

from dirtree.config import TraversalConfig  # noqa: E402
from dirtree.dirtree import (  # noqa: E402
    DirTree,
    StreamingDirTree,
    generate_string,
    print_to_file,
    print_tree,
)
from dirtree.exceptions import (  # noqa: E402
    DirtreeError,
    PathResolutionError,
    RootNotADirectoryError,
    RootNotFoundError,
)
from dirtree.types import TreeFormat  # noqa: E402

__all__ = [
    "DirTree",
    "DirtreeError",
    "PathResolutionError",
    "RootNotADirectoryError",
    "RootNotFoundError",
    "StreamingDirTree",
    "TraversalConfig",
    "TreeFormat",
    "__version__",
    "generate_string",
    "print_to_file",
    "print_tree",
]
