"""Shortcuts for laying out lists of words.
"""

import shutil
import typing

from .enums import Direction
from .grid import Grid, GridOptions

if typing.TYPE_CHECKING:
    from typing import Iterable, List, Optional, Text, Union
    from .cell import Cell
    from .filling import Filling


def terminal_width(fallback=80):
    # type: (int) -> int
    """Get the width of the terminal, or ``fallback`` if unknown."""
    return shutil.get_terminal_size((fallback, 20)).columns


def quote(word):
    # type: (Text) -> Text
    """Quote a word containing spaces, so it reads as one item.

    Example:
        >>> quote('Python Wood')
        '"Python Wood"'
        >>> quote('egg')
        'egg'

    """
    if " " in word:
        return '"{}"'.format(word.replace('"', '\\"'))
    return word


def words2lines(
    words,  # type: Iterable[Union[Cell, Text]]
    max_width=None,  # type: Optional[int]
    direction=Direction.top_to_bottom,  # type: Direction
    filling=2,  # type: Union[Filling, int, Text]
    quote_spaces=False,  # type: bool
):
    # type: (...) -> List[Text]
    """Lay out words in columns, in the fewest lines that fit.

    If the words can't be arranged in to a grid (because one of them is
    wider than ``max_width``), each word is returned on its own line.

    Arguments:
        words (iterable): Strings or `~termgrid.cell.Cell` objects.
        max_width (int, optional): The maximum width of a line, or
            `None` to use the width of the terminal.
        direction (~termgrid.enums.Direction): The order words are
            written in, default is down the columns like ``ls``.
        filling (~termgrid.filling.Filling, int or str): The separator
            between columns.
        quote_spaces (bool): Put words containing spaces in quotes.

    Returns:
        list: The lines of text, without line breaks.

    Example:
        >>> words2lines(['one', 'two', 'three', 'four'], 12)
        ['one  three', 'two  four']

    """
    if max_width is None:
        max_width = terminal_width()
    grid = Grid(GridOptions(direction=direction, filling=filling))
    for word in words:
        if quote_spaces and isinstance(word, str):
            word = quote(word)
        grid.add(word)
    display = grid.fit_into_width(max_width)
    if display is None:
        return [cell.contents for cell in grid]
    return list(display.lines())
