"""Branch-drawing glyph sets."""

from typing import NamedTuple, Union

from dirtree.types import TreeFormat


class GlyphSet(NamedTuple):
    """The four segments used to draw a tree.

    Attributes:
        branch (str): Drawn before an entry that has later siblings.
        corner (str): Drawn before the last entry of a listing.
        vertical (str): Prefix segment inherited by children of a non-last entry.
        space (str): Prefix segment inherited by children of a last entry.
    """

    branch: str
    corner: str
    vertical: str
    space: str


ASCII_GLYPHS = GlyphSet(branch="|-- ", corner="`-- ", vertical="|   ", space="    ")
UNICODE_GLYPHS = GlyphSet(branch="├── ", corner="└── ", vertical="│   ", space="    ")

_GLYPH_SETS = {
    TreeFormat.ASCII: ASCII_GLYPHS,
    TreeFormat.UNICODE: UNICODE_GLYPHS,
}


def glyphs_for(render_format: Union[TreeFormat, str]) -> GlyphSet:
    """Return the glyph set for a render format.

    Example:
        >>> glyphs_for("ascii").corner
        '`-- '
    """
    return _GLYPH_SETS[TreeFormat(render_format)]
