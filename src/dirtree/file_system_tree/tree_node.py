"""Navigable tree model built from traversal events."""

from typing import Any, Iterable, List, Optional

from anytree import Node

from dirtree.file_system_tree.traversal import RenderEvent


class TreeNode(Node):  # type: ignore
    """Node representing a displayed file or directory.

    Extends anytree.Node with a directory flag. Inherits tree traversal and manipulation
    capabilities from anytree.Node.

    Attributes:
        name (str): The entry's base name, or the root label for the root node.
        parent (Optional[TreeNode]): The parent node.
        is_dir (bool): True for directories.
        children (tuple[TreeNode]): Child nodes in display order (inherited).

    Example:
        >>> root = TreeNode("project", is_dir=True)
        >>> child = TreeNode("setup.py", parent=root)
        >>> child.depth
        1
        >>> child.is_dir
        False
    """

    def __init__(self, name: str, parent: Optional["TreeNode"] = None, is_dir: bool = False, **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir


class TreeBuilder:
    """Grows a TreeNode hierarchy one render event at a time.

    Lets a caller record the displayed tree while the same events are being rendered,
    so the tree always matches the emitted lines.

    Attributes:
        root (TreeNode): The root node, labelled with the root label.
    """

    def __init__(self, root_label: str) -> None:
        self.root = TreeNode(root_label, is_dir=True)
        # stack[d] is the most recent node at depth d
        self._stack: List[TreeNode] = [self.root]

    def add(self, event: RenderEvent) -> TreeNode:
        """Attach the node for ``event`` under the most recent directory one level up."""
        del self._stack[event.depth :]
        node = TreeNode(event.name, parent=self._stack[-1], is_dir=event.is_directory)
        self._stack.append(node)
        return node


def build_tree(root_label: str, events: Iterable[RenderEvent]) -> TreeNode:
    """Rebuild the displayed tree from a sequence of render events.

    Events must be in traversal order: every event's parent is the most recent
    directory event one level up.

    Args:
        root_label: Name for the root node.
        events: Render events as produced by ``walk``.

    Returns:
        The root node. Node depths match the events' depths.

    Example:
        >>> events = [RenderEvent("a.txt", 1, False, False), RenderEvent("sub", 1, True, True),
        ...           RenderEvent("c.txt", 2, True, False)]
        >>> root = build_tree("R", events)
        >>> [child.name for child in root.children]
        ['a.txt', 'sub']
        >>> root.children[1].children[0].name
        'c.txt'
    """
    builder = TreeBuilder(root_label)
    for event in events:
        builder.add(event)
    return builder.root
