"""Text rendering of traversal events.

The renderer turns the ordered events produced by the traversal into indented lines.
Each line is ``<prefix><glyph><name>``. The glyph depends on whether the entry is the
last of its siblings, and the prefix is built from the continuation segments chosen
for each ancestor, so it depends only on the chain of last-sibling flags from the root
down to the entry, never on names.
"""

from typing import Iterable, Iterator, List, Union

from dirtree.file_system_tree.traversal import RenderEvent
from dirtree.rendering.glyphs import GlyphSet, glyphs_for
from dirtree.types import TreeFormat


class TreeRenderer:
    """Renders render events as tree text.

    Attributes:
        render_format (TreeFormat): The selected glyph set's format.
        glyphs (GlyphSet): The glyphs used for drawing.

    Example:
        >>> from dirtree.file_system_tree.traversal import RenderEvent
        >>> events = [
        ...     RenderEvent("a.txt", 1, False, False),
        ...     RenderEvent("sub", 1, True, True),
        ...     RenderEvent("c.txt", 2, True, False),
        ... ]
        >>> print(TreeRenderer("ascii").render("R", events), end="")
        R
        |-- a.txt
        `-- sub
            `-- c.txt
    """

    def __init__(self, render_format: Union[TreeFormat, str] = TreeFormat.UNICODE) -> None:
        self.render_format = TreeFormat(render_format)
        self.glyphs: GlyphSet = glyphs_for(self.render_format)

    def stream_lines(self, root_label: str, events: Iterable[RenderEvent]) -> Iterator[str]:
        """Yield the tree one newline-terminated line at a time.

        The first line is the root label, unprefixed. Events are consumed lazily, so
        lines can be written out while the traversal is still running.

        Args:
            root_label: Label for the first line.
            events: Render events in traversal order.

        Yields:
            Lines of the tree, each ending in a newline.
        """
        yield f"{root_label}\n"

        # prefixes[d] is the prefix for entries at depth d + 1
        prefixes: List[str] = [""]
        for event in events:
            del prefixes[event.depth :]
            prefix = prefixes[-1]

            if event.is_last:
                yield f"{prefix}{self.glyphs.corner}{event.name}\n"
                prefixes.append(prefix + self.glyphs.space)
            else:
                yield f"{prefix}{self.glyphs.branch}{event.name}\n"
                prefixes.append(prefix + self.glyphs.vertical)

    def render(self, root_label: str, events: Iterable[RenderEvent]) -> str:
        """Render the complete tree as a single string."""
        return "".join(self.stream_lines(root_label, events))
