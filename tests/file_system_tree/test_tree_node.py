from anytree import PreOrderIter

from dirtree.file_system_tree.traversal import RenderEvent, walk
from dirtree.file_system_tree.tree_node import TreeBuilder, TreeNode, build_tree


def test_tree_node_attributes():
    root = TreeNode("root", is_dir=True)
    child = TreeNode("child.txt", parent=root)

    assert root.is_dir
    assert not child.is_dir
    assert child.parent is root
    assert root.children == (child,)
    assert child.path == (root, child)


def test_build_tree_empty():
    root = build_tree("empty", [])
    assert root.name == "empty"
    assert root.is_dir
    assert root.children == ()


def test_build_tree_nesting():
    events = [
        RenderEvent("a", 1, False, True),
        RenderEvent("b", 2, False, True),
        RenderEvent("deep.txt", 3, True, False),
        RenderEvent("c.txt", 2, True, False),
        RenderEvent("z.txt", 1, True, False),
    ]
    root = build_tree("R", events)

    assert [node.name for node in PreOrderIter(root)] == ["R", "a", "b", "deep.txt", "c.txt", "z.txt"]
    assert [child.name for child in root.children] == ["a", "z.txt"]
    a = root.children[0]
    assert [child.name for child in a.children] == ["b", "c.txt"]
    assert a.children[0].children[0].depth == 3


def test_build_tree_matches_walk(sample_tree):
    root = build_tree("R", walk(sample_tree))

    nodes = list(PreOrderIter(root))[1:]
    events = list(walk(sample_tree))
    assert [(node.name, node.depth, node.is_dir) for node in nodes] == [
        (event.name, event.depth, event.is_directory) for event in events
    ]


def test_tree_builder_grows_incrementally():
    builder = TreeBuilder("R")
    sub = builder.add(RenderEvent("sub", 1, False, True))
    leaf = builder.add(RenderEvent("c.txt", 2, True, False))

    assert leaf.parent is sub
    assert [child.name for child in builder.root.children] == ["sub"]

    builder.add(RenderEvent("z.txt", 1, True, False))
    assert [child.name for child in builder.root.children] == ["sub", "z.txt"]
