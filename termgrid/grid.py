"""Arrange cells in a grid that fits a terminal.

A `Grid` collects cells, then finds the layout that uses the fewest
lines for a given maximum width (`Grid.fit_into_width`), or lays the
cells out in a fixed number of columns (`Grid.fit_into_columns`)::

    >>> grid = Grid(GridOptions(filling=Spaces(1)))
    >>> grid.extend(["one", "two", "three", "four", "five", "six"])
    >>> print(grid.fit_into_width(16), end="")
    one  two  three
    four five six

"""

import logging
import typing
from collections import namedtuple

from ._repr import make_repr
from .cell import make_cell
from .display import Display
from .enums import Direction
from .errors import InvalidColumnCount, LayoutInvariantError
from .filling import Spaces, make_filling
from .mapping import GridMapping

if typing.TYPE_CHECKING:
    from typing import Iterable, Iterator, List, Optional, Tuple, Union
    from .cell import Cell
    from .filling import Filling

    CellLike = Union[Cell, str]


log = logging.getLogger("termgrid.grid")


Dimensions = namedtuple("Dimensions", ["num_lines", "widths"])
Dimensions.__doc__ = """The size of a candidate layout.

The number of columns is the length of ``widths``. A layout may have
unfilled slots at the end, so ``num_lines * len(widths)`` can be larger
than the number of cells.
"""


class GridOptions(object):
    """The user-assignable options for a grid.

    Arguments:
        direction (~termgrid.enums.Direction): The order cells are
            written in, across rows or down columns.
        filling (~termgrid.filling.Filling, int or str): The separator
            between columns. An integer is a number of spaces, and a
            string is used literally. Defaults to a single space.

    """

    __slots__ = ["_direction", "_filling"]

    def __init__(self, direction=Direction.left_to_right, filling=None):
        # type: (Direction, Optional[Union[Filling, int, str]]) -> None
        self._direction = Direction(direction)
        self._filling = Spaces(1) if filling is None else make_filling(filling)

    def __repr__(self):
        return make_repr(
            "GridOptions",
            direction=(self.direction, Direction.left_to_right),
            filling=(self.filling, Spaces(1)),
        )

    def __eq__(self, other):
        if not isinstance(other, GridOptions):
            return NotImplemented
        return (self.direction, self.filling) == (other.direction, other.filling)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.direction, self.filling))

    @property
    def direction(self):
        # type: () -> Direction
        """`~termgrid.enums.Direction`: the order cells are written in."""
        return self._direction

    @property
    def filling(self):
        # type: () -> Filling
        """`~termgrid.filling.Filling`: the separator between columns."""
        return self._filling


class Grid(object):
    """A collection of cells to be formatted in a grid.

    Cells can only be added, never removed. The widest and narrowest
    cell widths, their sum and the cell count are kept up to date with
    every addition, since the solver relies on them being exact.

    Arguments:
        options (GridOptions, optional): Options for the grid. If
            omitted, the ``direction`` and ``filling`` keyword
            arguments are used to build them.

    Raises:
        TypeError: If both ``options`` and keyword options are given.

    Note:
        A grid is not thread safe; concurrent calls to `add` must be
        serialized by the caller.

    """

    def __init__(self, options=None, **kwargs):
        # type: (Optional[GridOptions], **object) -> None
        if options is None:
            options = GridOptions(**kwargs)
        elif kwargs:
            raise TypeError(
                "can't give keyword options together with a GridOptions"
            )
        self._options = options
        self._cells = []  # type: List[Cell]
        self._widest = 0
        self._narrowest = float("inf")
        self._width_sum = 0

    def __repr__(self):
        return "<grid {} cells, {}>".format(len(self._cells), self._options)

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        # type: () -> Iterator[Cell]
        return iter(self._cells)

    @property
    def options(self):
        # type: () -> GridOptions
        """`GridOptions`: the options used to build the grid."""
        return self._options

    @property
    def cells(self):
        # type: () -> Tuple[Cell, ...]
        """`tuple`: the cells in the order they were added."""
        return tuple(self._cells)

    @property
    def count(self):
        # type: () -> int
        """`int`: the number of cells in the grid."""
        return len(self._cells)

    @property
    def widest(self):
        # type: () -> int
        """`int`: the width of the widest cell, or 0 if empty."""
        return self._widest

    @property
    def narrowest(self):
        # type: () -> Union[int, float]
        """`int`: the width of the narrowest cell, or infinity if empty."""
        return self._narrowest

    @property
    def width_sum(self):
        # type: () -> int
        """`int`: the total width of every cell."""
        return self._width_sum

    def reserve(self, additional):
        # type: (int) -> None
        """Hint that a number of cells are about to be added.

        Python lists manage their own capacity, so this only validates
        its argument.
        """
        if additional < 0:
            raise ValueError("can't reserve a negative number of cells")

    def add(self, cell):
        # type: (CellLike) -> None
        """Add a cell to the end of the grid.

        Arguments:
            cell (~termgrid.cell.Cell or str): The cell to add. A string
                is converted to a left-aligned cell of its display
                width.

        """
        cell = make_cell(cell)
        self._cells.append(cell)
        width = cell.width
        if width > self._widest:
            self._widest = width
        if width < self._narrowest:
            self._narrowest = width
        self._width_sum += width

    def extend(self, cells):
        # type: (Iterable[CellLike]) -> None
        """Add every cell in an iterable to the end of the grid."""
        for cell in cells:
            self.add(cell)

    def fit_into_columns(self, num_columns):
        # type: (int) -> Display
        """Lay out the cells in a fixed number of columns.

        There is no maximum width, so this always succeeds.

        Arguments:
            num_columns (int): The number of columns, at least 1.

        Returns:
            ~termgrid.display.Display: the laid out grid.

        Raises:
            ~termgrid.errors.InvalidColumnCount: If ``num_columns`` is
                less than 1.

        """
        return Display(self, self._columns_dimensions(num_columns))

    def fit_into_width(self, maximum_width):
        # type: (int) -> Optional[Display]
        """Lay out the cells in the fewest lines that fit a width.

        Arguments:
            maximum_width (int): The available width, including the
                separators between columns.

        Returns:
            ~termgrid.display.Display: the laid out grid, or `None` if
            no layout fits (for example if a single cell is wider than
            ``maximum_width``). A typical fallback is to print one cell
            per line.

        Raises:
            ValueError: If ``maximum_width`` is negative or not an
                integer.

        """
        dimensions = self._width_dimensions(maximum_width)
        if dimensions is None:
            return None
        return Display(self, dimensions)

    def _columns_dimensions(self, num_columns):
        # type: (int) -> Dimensions
        if (
            isinstance(num_columns, bool)
            or not isinstance(num_columns, int)
            or num_columns < 1
        ):
            raise InvalidColumnCount(num_columns)
        num_lines, remainder = divmod(len(self._cells), num_columns)
        if remainder:
            num_lines += 1
        return self._column_widths(num_lines, num_columns)

    def _column_widths(self, num_lines, num_columns):
        # type: (int, int) -> Dimensions
        mapping = GridMapping(self._options.direction, num_lines, num_columns)
        widths = [0] * num_columns
        for index, cell in enumerate(self._cells):
            column = mapping.column(index)
            if cell.width > widths[column]:
                widths[column] = cell.width
        return Dimensions(num_lines, tuple(widths))

    def _max_columns(self, maximum_width):
        # type: (int) -> int
        """Get an upper bound on the number of columns that could fit.

        The widest cell needs a column whatever the arrangement, and
        every other column needs at least the narrowest cell plus a
        separator.
        """
        count = len(self._cells)
        column_cost = self._narrowest + self._options.filling.width
        if column_cost <= 0:
            return count
        return min(count, (maximum_width - self._widest) // column_cost + 1)

    def _width_dimensions(self, maximum_width):
        # type: (int) -> Optional[Dimensions]
        if (
            isinstance(maximum_width, bool)
            or not isinstance(maximum_width, int)
            or maximum_width < 0
        ):
            raise ValueError(
                "maximum width must be a non-negative integer, not {!r}".format(
                    maximum_width
                )
            )
        count = len(self._cells)
        if not count:
            return Dimensions(0, ())

        if self._widest > maximum_width:
            log.debug(
                "widest cell (%d) does not fit in %d columns",
                self._widest,
                maximum_width,
            )
            return None

        if count == 1:
            return Dimensions(1, (self._widest,))

        filling_width = self._options.filling.width
        if filling_width > maximum_width:
            log.debug(
                "separator (%d) does not fit in %d columns",
                filling_width,
                maximum_width,
            )
            return None

        max_columns = self._max_columns(maximum_width)
        log.debug("trying %d to 2 columns for %d cells", max_columns, count)

        # More columns means fewer lines, so the first fit is the best.
        for num_columns in range(max_columns, 1, -1):
            dimensions = self._columns_dimensions(num_columns)
            adjusted_width = maximum_width - (num_columns - 1) * filling_width
            total_width = sum(dimensions.widths)
            if total_width < adjusted_width:
                log.debug(
                    "fitted %d cells in %d columns, %d lines",
                    count,
                    num_columns,
                    dimensions.num_lines,
                )
                return dimensions
            log.debug(
                "%d columns need %d of %d available",
                num_columns,
                total_width,
                adjusted_width,
            )

        dimensions = self._columns_dimensions(1)
        if dimensions.widths[0] > maximum_width:
            raise LayoutInvariantError(
                0,
                dimensions.widths[0],
                self._widest,
                msg="single column of width {{column_width}} overflows "
                "maximum width {}".format(maximum_width),
            )
        log.debug("falling back to a single column for %d cells", count)
        return dimensions
