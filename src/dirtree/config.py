"""Configuration for directory tree traversal and rendering."""

import dataclasses
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.types import TreeFormat


def _normalize_names(names: Iterable[str], kind: str) -> Tuple[str, ...]:
    """Return names as a duplicate-free tuple, preserving first-seen order."""
    if isinstance(names, str):
        raise TypeError(f"custom_skip_{kind} must be a collection of names, not a single string")

    result = []
    for name in names:
        if not isinstance(name, str) or not name:
            raise ValueError(f"Skip {kind} names must be non-empty strings, got {name!r}")
        if "/" in name or "\\" in name:
            raise ValueError(f"Skip {kind} names must not contain path separators: {name!r}")
        if name not in result:
            result.append(name)
    return tuple(result)


@dataclass(frozen=True)
class TraversalConfig:
    """Immutable options for a single tree traversal.

    A configuration is created up front and passed explicitly to every traversal
    call. It is never modified while a traversal is running; the ``with_*`` helpers
    return new instances instead.

    Attributes:
        max_depth: Maximum depth to display. The root's direct children are at depth 1.
            ``None``, zero and negative values all mean unlimited.
        skip_hidden: Exclude entries whose names start with a dot.
        skip_common: Master switch for name-based filtering. When False, nothing is
            filtered by name, including hidden entries.
        custom_skip_dirs: Directory names to skip in addition to the built-in list.
        custom_skip_files: File names to skip in addition to the built-in list.
        render_format: Glyph set used for the tree branches.
        follow_symlinks: Recurse into symbolic links that point to directories.
            Off by default; the cycle guard still applies when enabled.
        exclusion_rules: Optional gitignore-style rules applied to root-relative paths
            after the name-based filter.

    Example:
        >>> config = TraversalConfig(max_depth=2).with_skip_dir("build")
        >>> config.custom_skip_dirs
        ('build',)
        >>> TraversalConfig(max_depth=0).depth_limit is None
        True
    """

    max_depth: Optional[int] = None
    skip_hidden: bool = False
    skip_common: bool = True
    custom_skip_dirs: Tuple[str, ...] = ()
    custom_skip_files: Tuple[str, ...] = ()
    render_format: Union[TreeFormat, str] = TreeFormat.UNICODE
    follow_symlinks: bool = False
    exclusion_rules: Optional[BaseExclusionRules] = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and not isinstance(self.max_depth, int):
            raise TypeError(f"max_depth must be an int or None, got {type(self.max_depth).__name__}")

        # frozen dataclass: normalised values are written through object.__setattr__
        object.__setattr__(self, "custom_skip_dirs", _normalize_names(self.custom_skip_dirs, "dirs"))
        object.__setattr__(self, "custom_skip_files", _normalize_names(self.custom_skip_files, "files"))

        try:
            render_format = TreeFormat(self.render_format)
        except ValueError:
            raise ValueError(
                f"Invalid render_format: {self.render_format}. Must be one of: 'ascii', 'unicode'"
            )
        object.__setattr__(self, "render_format", render_format)

    @property
    def depth_limit(self) -> Optional[int]:
        """The effective depth limit, or None when depth is unlimited.

        Only strictly positive ``max_depth`` values constrain the traversal.
        """
        if self.max_depth is None or self.max_depth <= 0:
            return None
        return self.max_depth

    def with_skip_dir(self, dirname: str) -> "TraversalConfig":
        """Return a copy of this configuration that also skips ``dirname``."""
        return dataclasses.replace(self, custom_skip_dirs=self.custom_skip_dirs + (dirname,))

    def with_skip_file(self, filename: str) -> "TraversalConfig":
        """Return a copy of this configuration that also skips ``filename``."""
        return dataclasses.replace(self, custom_skip_files=self.custom_skip_files + (filename,))
