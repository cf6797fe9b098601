"""Cells, the unit of content in a grid.
"""

import typing

from wcwidth import wcswidth, wcwidth

from ._repr import make_repr
from .enums import Alignment

if typing.TYPE_CHECKING:
    from typing import Optional, Text


def display_width(text):
    # type: (Text) -> int
    """Get the number of terminal columns a string occupies.

    Wide (East Asian) characters count as two columns and combining
    characters as none. Non-printable characters, which `wcwidth`
    refuses to measure, are counted as zero columns rather than making
    the whole string unmeasurable.

    Arguments:
        text (str): The string to measure.

    Returns:
        int: The display width, never negative.

    Example:
        >>> display_width("hello")
        5
        >>> display_width("\\u4e16\\u754c")
        4

    """
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in text)


class Cell(object):
    """A string and its pre-computed display width.

    The width defaults to the :func:`display_width` of the contents,
    but may be given explicitly when it is known in advance, or when
    the contents should be measured differently (for instance to skip
    terminal escape sequences). The solver trusts this value and never
    measures the contents again.

    Arguments:
        contents (str): The string to display when the cell is rendered.
        width (int, optional): Number of columns to reserve for the
            cell, or `None` to measure ``contents``.
        alignment (~termgrid.enums.Alignment): The side of its column
            the cell is justified to.

    Raises:
        TypeError: If ``width`` is not an integer.
        ValueError: If ``width`` is negative.

    """

    __slots__ = ["_contents", "_width", "_alignment"]

    def __init__(self, contents, width=None, alignment=Alignment.left):
        # type: (Text, Optional[int], Alignment) -> None
        if width is None:
            width = display_width(contents)
        elif isinstance(width, bool) or not isinstance(width, int):
            raise TypeError(
                "cell width must be an integer, not {!r}".format(width)
            )
        elif width < 0:
            raise ValueError(
                "cell width must not be negative, not {!r}".format(width)
            )
        self._contents = contents
        self._width = width
        self._alignment = Alignment(alignment)

    def __repr__(self):
        return make_repr(
            self.__class__.__name__,
            self._contents,
            width=(self._width, display_width(self._contents)),
            alignment=(self._alignment, Alignment.left),
        )

    def __str__(self):
        return self._contents

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return (self._contents, self._width, self._alignment) == (
            other._contents,
            other._width,
            other._alignment,
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._contents, self._width, self._alignment))

    @property
    def contents(self):
        # type: () -> Text
        """`str`: the string to display."""
        return self._contents

    @property
    def width(self):
        # type: () -> int
        """`int`: the number of columns reserved for the contents."""
        return self._width

    @property
    def alignment(self):
        # type: () -> Alignment
        """`~termgrid.enums.Alignment`: the justification of the cell."""
        return self._alignment

    def right_aligned(self):
        # type: () -> Cell
        """Get a copy of this cell justified to the right."""
        return Cell(self._contents, self._width, Alignment.right)

    def left_aligned(self):
        # type: () -> Cell
        """Get a copy of this cell justified to the left."""
        return Cell(self._contents, self._width, Alignment.left)


def make_cell(value):
    # type: (object) -> Cell
    """Coerce a value in to a `Cell`.

    Cells are returned unchanged; anything else is converted with
    `str` and measured.
    """
    if isinstance(value, Cell):
        return value
    return Cell(str(value))
