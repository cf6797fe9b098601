import logging

import click

from termgrid import Alignment, Cell, Direction, Grid, GridOptions, Spaces, Text
from termgrid.errors import InvalidColumnCount
from termgrid.tools import quote as quote_word, terminal_width


def _read_items(items):
    if items:
        return list(items)
    stdin = click.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stdin if line.strip()]


@click.command(name="termgrid")
@click.argument("items", nargs=-1, required=False)
@click.option(
    "--width", "-w", type=click.IntRange(min=0), envvar="TERMGRID_WIDTH",
    help="maximum line width: default is the terminal width",
)
@click.option("--columns", "-c", type=int, help="use a fixed number of columns")
@click.option(
    "--across/--down", default=True,
    help="fill rows left to right (default), or columns top to bottom",
)
@click.option(
    "--spaces", "-s", type=click.IntRange(min=0),
    help="number of spaces between columns: default is 1",
)
@click.option(
    "--separator", "-t", envvar="TERMGRID_SEPARATOR",
    help="literal text between columns, instead of spaces",
)
@click.option("--right", "-r", is_flag=True, help="right align every item")
@click.option("--quote", "-q", is_flag=True, help="quote items containing spaces")
@click.option("--verbose", "-v", is_flag=True, help="log how the layout was chosen")
def termgrid(items, width, columns, across, spaces, separator, right, quote, verbose):
    '''arrange items in a grid that fits the terminal.

    Items are taken from the arguments, or one per line from stdin.

    \b
    example:
        termgrid one two three four five six
        ls | termgrid --down -s 2
        termgrid -w 24 -t ' | ' $(seq 1 20)
        termgrid -c 3 -r 1 22 333 4444
    '''
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if spaces is not None and separator is not None:
        raise click.UsageError("--spaces and --separator can't be used together")
    filling = Text(separator) if separator is not None else Spaces(
        1 if spaces is None else spaces
    )
    direction = Direction.left_to_right if across else Direction.top_to_bottom
    alignment = Alignment.right if right else Alignment.left

    grid = Grid(GridOptions(direction=direction, filling=filling))
    for item in _read_items(items):
        if quote:
            item = quote_word(item)
        grid.add(Cell(item, alignment=alignment))

    if columns is not None:
        try:
            display = grid.fit_into_columns(columns)
        except InvalidColumnCount as error:
            raise click.BadParameter(str(error), param_hint="'--columns'")
    else:
        display = grid.fit_into_width(terminal_width() if width is None else width)

    if display is None:
        # Too wide for a grid, so one item per line
        for cell in grid:
            click.echo(cell.contents)
        return
    click.echo(str(display), nl=False)
