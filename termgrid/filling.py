"""Separators placed between adjacent columns.

A filling is rendered between every pair of neighbouring columns, but
never after the final column of a line. Its width counts against the
maximum width when fitting a grid.

"""

from ._repr import make_repr
from .cell import display_width


class Filling(object):
    """Abstract base class for column separators."""

    __slots__ = []  # type: list

    @property
    def width(self):
        # type: () -> int
        """`int`: the number of columns the separator occupies."""
        raise NotImplementedError("width")

    def separator(self):
        # type: () -> str
        """Get the literal string placed after a padded cell."""
        raise NotImplementedError("separator")


class Spaces(Filling):
    """A separator made of a number of space characters.

    Arguments:
        count (int): The number of spaces between columns.

    Raises:
        TypeError: If ``count`` is not an integer.
        ValueError: If ``count`` is negative.

    """

    __slots__ = ["_count"]

    def __init__(self, count):
        # type: (int) -> None
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(
                "number of spaces must be an integer, not {!r}".format(count)
            )
        if count < 0:
            raise ValueError(
                "number of spaces must not be negative, not {!r}".format(count)
            )
        self._count = count

    def __repr__(self):
        return make_repr("Spaces", self.count)

    def __eq__(self, other):
        return isinstance(other, Spaces) and self.count == other.count

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(("spaces", self.count))

    @property
    def count(self):
        # type: () -> int
        """`int`: the number of spaces between columns."""
        return self._count

    @property
    def width(self):
        return self.count

    def separator(self):
        return " " * self.count


class Text(Filling):
    """A separator made of an arbitrary string, such as ``" | "``.

    Arguments:
        text (str): The string placed between columns.

    """

    __slots__ = ["_text", "_width"]

    def __init__(self, text):
        # type: (str) -> None
        self._text = text
        self._width = display_width(text)

    def __repr__(self):
        return make_repr("Text", self.text)

    def __eq__(self, other):
        return isinstance(other, Text) and self.text == other.text

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(("text", self.text))

    @property
    def text(self):
        # type: () -> str
        """`str`: the string placed between columns."""
        return self._text

    @property
    def width(self):
        return self._width

    def separator(self):
        return self.text


def make_filling(value):
    # type: (object) -> Filling
    """Coerce a value in to a `Filling`.

    Integers become `Spaces`, strings become `Text`, and fillings are
    returned unchanged.

    Raises:
        TypeError: If ``value`` can't be used as a filling.

    """
    if isinstance(value, Filling):
        return value
    if isinstance(value, bool):
        raise TypeError("can't use {!r} as a filling".format(value))
    if isinstance(value, int):
        return Spaces(value)
    if isinstance(value, str):
        return Text(value)
    raise TypeError("can't use {!r} as a filling".format(value))
