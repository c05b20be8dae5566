"""Tree text rendering."""

from .glyphs import ASCII_GLYPHS, UNICODE_GLYPHS, GlyphSet, glyphs_for
from .renderer import TreeRenderer

__all__ = ["ASCII_GLYPHS", "UNICODE_GLYPHS", "GlyphSet", "TreeRenderer", "glyphs_for"]
