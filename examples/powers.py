"""
Display the first 40 powers of two in columns.

Usage:
    python powers.py [WIDTH]

"""

import sys

from termgrid import Direction, Grid, GridOptions, Spaces


width = int(sys.argv[1]) if len(sys.argv) > 1 else 40

grid = Grid(GridOptions(direction=Direction.top_to_bottom, filling=Spaces(2)))
for power in range(40):
    grid.add(str(2 ** power))

display = grid.fit_into_width(width)
if display is None:
    print(f"Couldn't fit grid into {width} columns!")
else:
    print(display, end="")
