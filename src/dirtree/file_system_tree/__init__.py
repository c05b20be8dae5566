"""Traversal of directory hierarchies.

This package lists directories, guards against symlink cycles and walks a hierarchy
depth-first, producing the render events from which tree text is drawn.
"""

from .directory_entry import DirectoryEntry, list_directory
from .traversal import RenderEvent, resolve_root, root_name, walk
from .tree_node import TreeBuilder, TreeNode, build_tree
from .visited_set import VisitedSet, canonicalize

__all__ = [
    "DirectoryEntry",
    "RenderEvent",
    "TreeBuilder",
    "TreeNode",
    "VisitedSet",
    "build_tree",
    "canonicalize",
    "list_directory",
    "resolve_root",
    "root_name",
    "walk",
]
