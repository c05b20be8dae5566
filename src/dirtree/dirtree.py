"""Directory tree rendering with streaming support.

This module ties the traversal, the renderer and the counters together. It provides a
streaming class that yields tree lines as the directory is walked, a complete class
that renders everything up front, and module-level functions for one-shot use.
"""

import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _package_version
from pathlib import Path
from typing import Iterator, Optional, TextIO

from anytree import PreOrderIter

from dirtree.config import TraversalConfig
from dirtree.exceptions import TokenizationError
from dirtree.file_system_tree.traversal import RenderEvent, resolve_root, root_name, walk
from dirtree.file_system_tree.tree_node import TreeBuilder, TreeNode, build_tree
from dirtree.rendering.renderer import TreeRenderer
from dirtree.token_counter import TokenCounter
from dirtree.types import PathType

logger = logging.getLogger(__name__)


class StreamingDirTree:
    """Streaming directory tree renderer.

    The root is validated when the object is created, so a missing or invalid root is
    reported before any output is produced. Tree lines are then generated while the
    directory is walked.

    Streaming properties:
    - The tree can only be streamed once per instance
    - Line, character and token counts are updated as lines are streamed
    - Counts reflect only streamed content until streaming_complete is True
    - Once streamed, directory and file counts come from the streamed entries

    Attributes:
        root_path (Path): The root directory as given.
        config (TraversalConfig): Traversal options.
        canonical_root (str): Absolute, symlink-resolved root path.
        root_label (str): Name printed on the first line of the tree.

    Example:
        >>> tree = StreamingDirTree("src")  # doctest: +SKIP
        >>> for line in tree.stream_tree():  # doctest: +SKIP
        ...     print(line, end='')  # Each line includes newline
        src
        ├── main.py
        └── utils
            └── helpers.py

    Raises:
        RootNotFoundError: If the root does not exist.
        RootNotADirectoryError: If the root is not a directory.
        PathResolutionError: If the root cannot be canonicalized.
        TokenizerNotAvailableError: If a tokenizer model is given but tiktoken is not installed.
    """

    def __init__(
        self,
        root_path: PathType,
        config: Optional[TraversalConfig] = None,
        *,
        tokenizer_model: Optional[str] = None,
    ):
        """Initialize streaming tree rendering.

        Args:
            root_path: Directory to render. Can be any path-like object.
            config: Traversal options. Defaults to ``TraversalConfig()``.
            tokenizer_model: Model whose tokenizer is used for the token count. If None,
                token counting is disabled.
        """
        self.root_path = Path(root_path)
        self.config = config if config is not None else TraversalConfig()
        self.canonical_root = resolve_root(self.root_path)
        self.root_label = root_name(self.canonical_root)

        self._renderer = TreeRenderer(self.config.render_format)
        self._counter = TokenCounter(model=tokenizer_model)
        self._tree: Optional[TreeNode] = None
        self._tree_complete = False

    @property
    def streaming_complete(self) -> bool:
        """Whether the tree has been fully streamed."""
        return self._tree_complete

    @property
    def token_count(self) -> Optional[int]:
        """Number of tokens streamed so far, or None if token counting is disabled."""
        return self._counter.get_total_tokens()

    @property
    def line_count(self) -> int:
        """Number of lines streamed so far."""
        return self._counter.get_total_lines()

    @property
    def character_count(self) -> int:
        """Number of characters streamed so far."""
        return self._counter.get_total_characters()

    @property
    def directory_count(self) -> int:
        """Number of displayed directories, excluding the root.

        Example:
            >>> StreamingDirTree("src").directory_count  # doctest: +SKIP
            5
        """
        return sum(1 for node in PreOrderIter(self.get_tree()) if node.is_dir) - 1

    @property
    def file_count(self) -> int:
        """Number of displayed non-directory entries."""
        return sum(1 for node in PreOrderIter(self.get_tree()) if not node.is_dir)

    def get_tree(self) -> TreeNode:
        """Get the displayed tree as a navigable anytree structure.

        After ``stream_tree`` has finished this is the tree that was streamed. Before
        that it is built on first access with its own traversal and cached; use
        ``refresh`` to rebuild it after the filesystem changes.

        Returns:
            The root node, labelled with ``root_label``.
        """
        if self._tree is None:
            self._tree = build_tree(self.root_label, walk(self.canonical_root, self.config))
        return self._tree

    def refresh(self) -> None:
        """Discard the cached tree so the next access reflects the current filesystem."""
        self._tree = None

    def _count_and_yield(self, text: str) -> str:
        try:
            self._counter.count(text)
        except TokenizationError as e:
            # The tree is still emitted, only the token total becomes unreliable
            logger.warning("%s", e)
        return text

    def stream_tree(self) -> Iterator[str]:
        """Stream the tree representation line by line.

        Returns:
            Iterator yielding newline-terminated lines, starting with the root label.

        Raises:
            RuntimeError: If the tree has already been streamed.
        """
        if self._tree_complete:
            raise RuntimeError("Tree has already been streamed")

        builder = TreeBuilder(self.root_label)
        events = self._record(walk(self.canonical_root, self.config), builder)
        for line in self._renderer.stream_lines(self.root_label, events):
            yield self._count_and_yield(line)

        self._tree = builder.root
        self._tree_complete = True

    def _record(self, events: Iterator[RenderEvent], builder: TreeBuilder) -> Iterator[RenderEvent]:
        for event in events:
            builder.add(event)
            yield event


class DirTree(StreamingDirTree):
    """Directory tree renderer that renders everything during initialization.

    Example:
        >>> tree = DirTree("src", TraversalConfig(max_depth=1))  # doctest: +SKIP
        >>> print(tree.tree_string, end="")  # doctest: +SKIP
        src
        ├── main.py
        └── utils
    """

    def __init__(
        self,
        root_path: PathType,
        config: Optional[TraversalConfig] = None,
        *,
        tokenizer_model: Optional[str] = None,
    ):
        super().__init__(root_path, config, tokenizer_model=tokenizer_model)
        self._tree_string = "".join(self.stream_tree())

    @property
    def tree_string(self) -> str:
        """Complete tree representation as a string."""
        return self._tree_string

    def get_tree_representation(self) -> str:
        return self._tree_string


def generate_string(root_path: PathType, config: Optional[TraversalConfig] = None) -> str:
    """Render the tree of ``root_path`` as one string.

    Raises:
        RootNotFoundError: If the root does not exist.
        RootNotADirectoryError: If the root is not a directory.
        PathResolutionError: If the root cannot be canonicalized.
    """
    return DirTree(root_path, config).tree_string


def print_to_file(output: TextIO, root_path: PathType, config: Optional[TraversalConfig] = None) -> int:
    """Write the tree of ``root_path`` to a text stream.

    Lines are written as the directory is walked. Nothing is written if the root is
    invalid. The written text is identical to ``generate_string(root_path, config)``.
    A name that is not valid in the stream's encoding is written as its raw file
    system bytes when the stream exposes a binary ``buffer``.

    Returns:
        0 once the whole tree has been written.

    Raises:
        RootNotFoundError: If the root does not exist.
        RootNotADirectoryError: If the root is not a directory.
        PathResolutionError: If the root cannot be canonicalized.
    """
    for line in StreamingDirTree(root_path, config).stream_tree():
        _write_line(output, line)
    return 0


def _write_line(output: TextIO, line: str) -> None:
    try:
        output.write(line)
    except UnicodeEncodeError:
        buffer = getattr(output, "buffer", None)
        if buffer is None:
            raise
        # Undecodable names are surrogate-escaped; hand their original bytes to the buffer
        output.flush()
        buffer.write(line.encode(getattr(output, "encoding", None) or "utf-8", errors="surrogateescape"))


def print_tree(root_path: PathType, config: Optional[TraversalConfig] = None) -> int:
    """Write the tree of ``root_path`` to standard output."""
    return print_to_file(sys.stdout, root_path, config)


def version() -> str:
    """Return the installed version of dirtree."""
    try:
        return _package_version("dirtree")
    except PackageNotFoundError:
        return "unknown"
