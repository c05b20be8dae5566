from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class TreeFormat(str, Enum):
    """Glyph set used when drawing tree branches.

    The format is always chosen explicitly through configuration and never
    detected from the terminal, so rendered output stays deterministic.

    Attributes:
        ASCII: Plain ASCII glyphs (``|-- ``, ``\\`-- ``, ``|   ``).
        UNICODE: Box-drawing glyphs (``├── ``, ``└── ``, ``│   ``).
    """

    ASCII = "ascii"
    UNICODE = "unicode"
