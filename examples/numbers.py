"""
Display the numbers one to twelve, right aligned between pipes.

Usage:
    python numbers.py

"""

from termgrid import Cell, Grid, Text
from termgrid.enums import Alignment

WORDS = [
    "one", "two", "three", "four", "five", "six",
    "seven", "eight", "nine", "ten", "eleven", "twelve",
]

grid = Grid(filling=Text(" | "))
for word in WORDS:
    grid.add(Cell(word, alignment=Alignment.right))

display = grid.fit_into_width(32)
if display is None:
    print("\n".join(WORDS))
else:
    print(display, end="")
    print(f"{display.row_count()} rows, {display.width()} columns wide")
