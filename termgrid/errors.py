"""Exception classes thrown by termgrid.

Defects in the layout computation are reported as a subclass of
:class:`~termgrid.errors.GridError`. Misuse of the API (such as asking
for zero columns) raises a ``ValueError`` subclass, since it is not an
issue with the grid itself.

"""

__all__ = [
    "GridError",
    "InvalidColumnCount",
    "LayoutInvariantError",
]


class GridError(Exception):
    """Base exception class for the termgrid module."""

    default_message = "Unspecified error"

    def __init__(self, msg=None):
        self._msg = msg or self.default_message
        super(GridError, self).__init__()

    def __str__(self):
        """The error message."""
        msg = self._msg.format(**self.__dict__)
        return msg

    def __repr__(self):
        msg = self._msg.format(**self.__dict__)
        return "{}({!r})".format(self.__class__.__name__, msg)


class LayoutInvariantError(GridError):
    """A computed column is narrower than a cell placed in it.

    This can only happen through a bug in the dimension solver, so it
    should never be caught and recovered from.

    """

    default_message = (
        "column {column} is {column_width} wide but holds a cell "
        "of width {cell_width}"
    )

    def __init__(self, column, column_width, cell_width, msg=None):
        self.column = column
        self.column_width = column_width
        self.cell_width = cell_width
        super(LayoutInvariantError, self).__init__(msg=msg)

    def __reduce__(self):
        return (
            type(self),
            (self.column, self.column_width, self.cell_width, self._msg),
        )


class InvalidColumnCount(ValueError):
    """Exception raised when a grid is asked for fewer than one column.

    .. note::

        This exception is a subclass of ``ValueError`` as it is a misuse
        of the API rather than a problem with the layout.

    """

    def __init__(self, num_columns):
        self.num_columns = num_columns
        _msg = "number of columns must be at least 1, not {!r}".format(
            num_columns
        )
        super(InvalidColumnCount, self).__init__(_msg)

    def __reduce__(self):
        return (type(self), (self.num_columns,))
