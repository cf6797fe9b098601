"""Arrange text in to grids for display in a terminal.
"""

from ._version import __version__
from .cell import Cell, display_width
from .display import Display
from .enums import Alignment, Direction
from .filling import Filling, Spaces, Text
from .grid import Dimensions, Grid, GridOptions

__all__ = [
    "__version__",
    "Alignment",
    "Cell",
    "Dimensions",
    "Direction",
    "Display",
    "Filling",
    "Grid",
    "GridOptions",
    "Spaces",
    "Text",
    "display_width",
]
