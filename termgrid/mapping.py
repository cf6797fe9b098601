"""Map between a cell's position in a sequence and its place in a grid.

The same mapping is used to measure the columns of a candidate layout
and to render it, so the two can never disagree about which cell goes
where.

"""

import typing

from .enums import Direction

if typing.TYPE_CHECKING:
    from typing import Tuple


class GridMapping(object):
    """A bidirectional mapping of cell indices to grid coordinates.

    Arguments:
        direction (~termgrid.enums.Direction): The order cells are
            written in.
        num_lines (int): The number of rows in the grid.
        num_columns (int): The number of columns in the grid.

    Example:
        >>> mapping = GridMapping(Direction.top_to_bottom, 3, 4)
        >>> mapping.position(4)
        (1, 1)
        >>> mapping.index(1, 1)
        4

    """

    __slots__ = ["direction", "num_lines", "num_columns"]

    def __init__(self, direction, num_lines, num_columns):
        # type: (Direction, int, int) -> None
        self.direction = direction
        self.num_lines = num_lines
        self.num_columns = num_columns

    def __repr__(self):
        return "GridMapping({!r}, {!r}, {!r})".format(
            self.direction, self.num_lines, self.num_columns
        )

    def column(self, index):
        # type: (int) -> int
        """Get the column a cell index falls in."""
        if self.direction is Direction.left_to_right:
            return index % self.num_columns
        return index // self.num_lines

    def row(self, index):
        # type: (int) -> int
        """Get the row a cell index falls in."""
        if self.direction is Direction.left_to_right:
            return index // self.num_columns
        return index % self.num_lines

    def position(self, index):
        # type: (int) -> Tuple[int, int]
        """Get the ``(row, column)`` of a cell index."""
        return self.row(index), self.column(index)

    def index(self, row, column):
        # type: (int, int) -> int
        """Get the cell index at a given row and column.

        The index may be past the end of the cell sequence when the
        final row (or column) of the grid is only partly filled.

        """
        if self.direction is Direction.left_to_right:
            return row * self.num_columns + column
        return row + self.num_lines * column
