import unittest
from unittest import mock

from termgrid import errors
from termgrid.cell import Cell
from termgrid.enums import Alignment, Direction
from termgrid.filling import Spaces, Text
from termgrid.grid import Dimensions, Grid, GridOptions

NUMBERS = [
    "one", "two", "three", "four", "five", "six",
    "seven", "eight", "nine", "ten", "eleven", "twelve",
]


def _ceil_div(a, b):
    return -(-a // b)


class TestGridOptions(unittest.TestCase):
    def test_defaults(self):
        options = GridOptions()
        self.assertEqual(options.direction, Direction.left_to_right)
        self.assertEqual(options.filling, Spaces(1))
        self.assertEqual(repr(options), "GridOptions()")

    def test_coerce(self):
        options = GridOptions(direction="top_to_bottom", filling="|")
        self.assertEqual(options.direction, Direction.top_to_bottom)
        self.assertEqual(options.filling, Text("|"))
        self.assertEqual(GridOptions(filling=2), GridOptions(filling=Spaces(2)))
        self.assertEqual(repr(GridOptions(filling=2)), "GridOptions(filling=Spaces(2))")


class TestGrid(unittest.TestCase):
    def test_empty(self):
        grid = Grid()
        self.assertEqual(len(grid), 0)
        self.assertEqual(grid.count, 0)
        self.assertEqual(grid.widest, 0)
        self.assertEqual(grid.narrowest, float("inf"))
        self.assertEqual(grid.width_sum, 0)
        self.assertEqual(grid.cells, ())

    def test_aggregates(self):
        grid = Grid()
        grid.add("ab")
        self.assertEqual((grid.widest, grid.narrowest, grid.width_sum), (2, 2, 2))
        grid.add(Cell("c"))
        grid.add(Cell("defg", alignment=Alignment.right))
        self.assertEqual(grid.count, 3)
        self.assertEqual(grid.widest, 4)
        self.assertEqual(grid.narrowest, 1)
        self.assertEqual(grid.width_sum, 7)
        self.assertEqual([cell.contents for cell in grid], ["ab", "c", "defg"])

    def test_extend(self):
        grid = Grid()
        grid.reserve(len(NUMBERS))
        grid.extend(NUMBERS)
        self.assertEqual(grid.count, 12)
        self.assertEqual(grid.widest, 6)
        self.assertEqual(grid.narrowest, 3)
        self.assertEqual(grid.width_sum, sum(len(word) for word in NUMBERS))

    def test_reserve(self):
        grid = Grid()
        grid.reserve(0)
        with self.assertRaises(ValueError):
            grid.reserve(-1)
        self.assertEqual(len(grid), 0)

    def test_options(self):
        grid = Grid(direction=Direction.top_to_bottom, filling=2)
        self.assertEqual(
            grid.options, GridOptions(Direction.top_to_bottom, Spaces(2))
        )
        with self.assertRaises(TypeError):
            Grid(GridOptions(), filling=2)


class TestFitIntoColumns(unittest.TestCase):
    def setUp(self):
        self.grid = Grid()
        self.grid.extend(NUMBERS)

    def test_left_to_right(self):
        display = self.grid.fit_into_columns(5)
        self.assertEqual(display.dimensions, Dimensions(3, (6, 6, 5, 4, 4)))

    def test_top_to_bottom(self):
        grid = Grid(direction=Direction.top_to_bottom)
        grid.extend(NUMBERS)
        display = grid.fit_into_columns(5)
        self.assertEqual(display.dimensions, Dimensions(3, (5, 4, 5, 6, 0)))
        self.assertFalse(display.is_complete())

    def test_single_column(self):
        display = self.grid.fit_into_columns(1)
        self.assertEqual(display.dimensions, Dimensions(12, (6,)))

    def test_more_columns_than_cells(self):
        grid = Grid()
        grid.extend(["a", "bb"])
        display = grid.fit_into_columns(4)
        self.assertEqual(display.dimensions, Dimensions(1, (1, 2, 0, 0)))
        self.assertFalse(display.is_complete())

    def test_empty(self):
        display = Grid().fit_into_columns(3)
        self.assertEqual(display.dimensions, Dimensions(0, (0, 0, 0)))

    def test_invalid(self):
        for num_columns in [0, -1, 1.5, None, True]:
            with self.assertRaises(errors.InvalidColumnCount):
                self.grid.fit_into_columns(num_columns)
        with self.assertRaises(ValueError):
            self.grid.fit_into_columns(0)


class TestFitIntoWidth(unittest.TestCase):
    def make_grid(self, direction=Direction.left_to_right, filling=1):
        grid = Grid(direction=direction, filling=filling)
        grid.extend(NUMBERS)
        return grid

    def test_empty(self):
        for width in [0, 1, 80]:
            display = Grid().fit_into_width(width)
            self.assertEqual(display.dimensions, Dimensions(0, ()))
            self.assertEqual(display.row_count(), 0)
            self.assertEqual(display.num_columns, 0)
            self.assertEqual(display.width(), 0)

    def test_single_cell(self):
        grid = Grid()
        grid.add("abcde")
        for width in [5, 6, 100]:
            display = grid.fit_into_width(width)
            self.assertEqual(display.dimensions, Dimensions(1, (5,)))
            self.assertEqual(display.width(), 5)
        self.assertIsNone(grid.fit_into_width(4))

    def test_two_cells(self):
        grid = Grid(filling=Spaces(2))
        grid.extend(["ab", "cde"])
        display = grid.fit_into_width(20)
        self.assertEqual(display.dimensions, Dimensions(1, (2, 3)))
        self.assertEqual(display.width(), 7)

    def test_numbers(self):
        display = self.make_grid().fit_into_width(24)
        self.assertEqual(display.dimensions, Dimensions(3, (4, 3, 6, 6)))
        self.assertEqual(display.width(), 22)

    def test_numbers_top_to_bottom(self):
        display = self.make_grid(Direction.top_to_bottom).fit_into_width(24)
        self.assertEqual(display.dimensions, Dimensions(3, (5, 4, 5, 6)))

    def test_widest_too_wide(self):
        grid = self.make_grid()
        grid.add("a" * 30)
        self.assertIsNone(grid.fit_into_width(29))
        self.assertIsNotNone(grid.fit_into_width(30))

    def test_wide_pair(self):
        grid = Grid(filling=Spaces(2))
        grid.extend(["x" * 37, "y" * 41])
        self.assertIsNone(grid.fit_into_width(40))

    def test_wide_pair_single_column(self):
        grid = Grid(filling=Spaces(2))
        grid.extend(["x" * 37, "y" * 38])
        display = grid.fit_into_width(40)
        self.assertEqual(display.dimensions, Dimensions(2, (38,)))

    def test_exact_width_single_column(self):
        grid = Grid()
        grid.extend(["abc", "def"])
        # two columns would need 7, a lone column may fill the width
        display = grid.fit_into_width(3)
        self.assertEqual(display.dimensions, Dimensions(2, (3,)))

    def test_strictly_narrower(self):
        grid = Grid()
        grid.extend(["abc", "def"])
        self.assertEqual(grid.fit_into_width(7).num_columns, 1)
        self.assertEqual(grid.fit_into_width(8).num_columns, 2)

    def test_huge_separator(self):
        grid = Grid(filling=Spaces(100))
        grid.extend(["a", "b"])
        self.assertIsNone(grid.fit_into_width(99))

    def test_huge_unused_separator(self):
        grid = Grid(filling=Spaces(100))
        grid.add("a")
        display = grid.fit_into_width(99)
        self.assertEqual(display.dimensions, Dimensions(1, (1,)))

    def test_zero_width_cells(self):
        grid = Grid(filling=Spaces(0))
        grid.extend([Cell("x", 0), Cell("y", 0), Cell("z", 0)])
        display = grid.fit_into_width(5)
        self.assertEqual(display.dimensions, Dimensions(1, (0, 0, 0)))
        self.assertFalse(display.is_complete())

    def test_negative_width(self):
        with self.assertRaises(ValueError):
            self.make_grid().fit_into_width(-1)

    def test_integer_width(self):
        grid = self.make_grid()
        for width in [24.0, "24", True, None]:
            with self.assertRaises(ValueError):
                grid.fit_into_width(width)

    def test_overflowing_single_column(self):
        grid = Grid()
        grid.extend(["abc", "def"])
        with mock.patch.object(
            grid, "_columns_dimensions", return_value=Dimensions(2, (5,))
        ):
            with self.assertRaises(errors.LayoutInvariantError) as context:
                grid.fit_into_width(3)
        error = context.exception
        self.assertEqual(error.column, 0)
        self.assertEqual(error.column_width, 5)
        self.assertEqual(error.cell_width, 3)
        self.assertEqual(
            str(error), "single column of width 5 overflows maximum width 3"
        )

    def test_does_not_mutate(self):
        grid = self.make_grid()
        before = (grid.cells, grid.widest, grid.narrowest, grid.width_sum)
        grid.fit_into_width(24)
        grid.fit_into_columns(3)
        self.assertEqual(
            (grid.cells, grid.widest, grid.narrowest, grid.width_sum), before
        )

    def test_fewest_rows(self):
        for direction in Direction:
            for filling in [0, 1, 3, Text(" | ")]:
                grid = self.make_grid(direction, filling)
                filling_width = grid.options.filling.width
                for width in range(0, 80):
                    fitting = [
                        num_columns
                        for num_columns in range(2, grid.count + 1)
                        if sum(grid.fit_into_columns(num_columns).dimensions.widths)
                        < width - (num_columns - 1) * filling_width
                    ]
                    if grid.widest <= width:
                        fitting.append(1)
                    display = grid.fit_into_width(width)
                    if not fitting:
                        self.assertIsNone(display)
                        continue
                    expected = min(_ceil_div(grid.count, n) for n in fitting)
                    self.assertEqual(display.row_count(), expected)
                    self.assertLessEqual(display.width(), width)

    def test_monotonic(self):
        for direction in Direction:
            grid = self.make_grid(direction, 2)
            rows = [grid.fit_into_width(width).row_count() for width in range(6, 90)]
            self.assertEqual(rows, sorted(rows, reverse=True))

    def test_logging(self):
        grid = self.make_grid()
        with self.assertLogs("termgrid.grid", level="DEBUG") as logs:
            grid.fit_into_width(24)
        self.assertIn(
            "DEBUG:termgrid.grid:fitted 12 cells in 4 columns, 3 lines", logs.output
        )
        with self.assertLogs("termgrid.grid", level="DEBUG") as logs:
            self.assertIsNone(grid.fit_into_width(5))
        self.assertIn(
            "DEBUG:termgrid.grid:widest cell (6) does not fit in 5 columns",
            logs.output,
        )
