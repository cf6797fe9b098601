"""Enums used by the grid layout.
"""

from enum import Enum, unique


@unique
class Direction(Enum):
    """Order in which cells are written in to the grid."""

    #: Start at the top left and move rightwards, going back to the
    #: first column for a new row, like a typewriter.
    left_to_right = "left_to_right"

    #: Start at the top left and move downwards, going back to the
    #: first row for a new column, like ``ls`` lists files.
    top_to_bottom = "top_to_bottom"


@unique
class Alignment(Enum):
    """Side of its column a cell is justified to."""

    left = "left"
    right = "right"
