"""A grid that has been laid out, ready to be rendered as text.
"""

import typing

from .enums import Alignment
from .errors import LayoutInvariantError
from .mapping import GridMapping

if typing.TYPE_CHECKING:
    from typing import Iterator, Text, Tuple
    from .cell import Cell
    from .grid import Dimensions, Grid, GridOptions


class Display(object):
    """A displayable representation of a `~termgrid.grid.Grid`.

    Displays are created by `Grid.fit_into_width` and
    `Grid.fit_into_columns`, and should not be constructed directly.
    The cells are copied from the grid, so adding cells to the grid
    afterwards does not change an existing display.

    Use `str` to get the rendered text, which has a newline after
    every line::

        >>> from termgrid import Grid
        >>> grid = Grid(filling=" | ")
        >>> grid.extend(["a", "bb", "ccc", "d"])
        >>> str(grid.fit_into_columns(2))
        'a   | bb\\nccc | d\\n'

    """

    def __init__(self, grid, dimensions):
        # type: (Grid, Dimensions) -> None
        self._cells = grid.cells  # type: Tuple[Cell, ...]
        self._options = grid.options  # type: GridOptions
        self._dimensions = dimensions

    def __repr__(self):
        return "Display(num_lines={!r}, widths={!r})".format(
            self._dimensions.num_lines, list(self._dimensions.widths)
        )

    def __str__(self):
        return "".join(line + "\n" for line in self.lines())

    def __eq__(self, other):
        if not isinstance(other, Display):
            return NotImplemented
        return (self._cells, self._options, self._dimensions) == (
            other._cells,
            other._options,
            other._dimensions,
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore

    @property
    def dimensions(self):
        # type: () -> Dimensions
        """`~termgrid.grid.Dimensions`: the size of the layout."""
        return self._dimensions

    @property
    def num_columns(self):
        # type: () -> int
        """`int`: the number of columns in the layout."""
        return len(self._dimensions.widths)

    def width(self):
        # type: () -> int
        """Get the total width of the rendered grid.

        This includes the separators between columns, but not any
        trailing newline.
        """
        widths = self._dimensions.widths
        if not widths:
            return 0
        return sum(widths) + self._options.filling.width * (len(widths) - 1)

    def row_count(self):
        # type: () -> int
        """Get the number of lines in the rendered grid."""
        return self._dimensions.num_lines

    def is_complete(self):
        # type: () -> bool
        """Check every column in the layout holds at least some content.

        A layout with more columns than cells (or a column-major layout
        whose final columns are never reached) has empty columns.
        """
        return all(width > 0 for width in self._dimensions.widths)

    def lines(self):
        # type: () -> Iterator[Text]
        """Iterate over the rendered lines, without line breaks.

        Slots past the final cell produce nothing, so a partly filled
        line ends after its last cell.

        Raises:
            ~termgrid.errors.LayoutInvariantError: If a column is
                narrower than a cell placed in it.

        """
        cells = self._cells
        num_cells = len(cells)
        num_lines, widths = self._dimensions
        num_columns = len(widths)
        last_column = num_columns - 1
        separator = self._options.filling.separator()
        mapping = GridMapping(self._options.direction, num_lines, num_columns)

        for row in range(num_lines):
            parts = []
            for column in range(num_columns):
                index = mapping.index(row, column)
                if index >= num_cells:
                    continue
                cell = cells[index]
                column_width = widths[column]
                if column_width < cell.width:
                    raise LayoutInvariantError(column, column_width, cell.width)
                padding = " " * (column_width - cell.width)
                if column == last_column:
                    # Nothing follows the final column, so only right
                    # aligned cells need padding.
                    if cell.alignment is Alignment.right:
                        parts.append(padding)
                    parts.append(cell.contents)
                elif cell.alignment is Alignment.right:
                    parts.extend((padding, cell.contents, separator))
                else:
                    parts.extend((cell.contents, padding, separator))
            yield "".join(parts)
