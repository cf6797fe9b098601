import pickle
import unittest

from termgrid import errors


class TestErrors(unittest.TestCase):
    def test_str(self):
        err = errors.GridError("oh dear")
        repr(err)
        self.assertEqual(str(err), "oh dear")

    def test_default_message(self):
        err = errors.GridError()
        self.assertEqual(str(err), "Unspecified error")

    def test_layout_invariant(self):
        err = errors.LayoutInvariantError(1, 3, 5)
        self.assertEqual(str(err), "column 1 is 3 wide but holds a cell of width 5")
        self.assertEqual(
            repr(err),
            "LayoutInvariantError('column 1 is 3 wide but holds a cell of width 5')",
        )
        self.assertIsInstance(err, errors.GridError)

    def test_invalid_column_count(self):
        err = errors.InvalidColumnCount(0)
        self.assertIsInstance(err, ValueError)
        self.assertEqual(err.num_columns, 0)
        self.assertEqual(str(err), "number of columns must be at least 1, not 0")

    def test_pickle(self):
        for err in [
            errors.LayoutInvariantError(2, 4, 6),
            errors.LayoutInvariantError(0, 1, 2, msg="custom {column}"),
            errors.InvalidColumnCount(-3),
        ]:
            copy = pickle.loads(pickle.dumps(err))
            self.assertIs(type(copy), type(err))
            self.assertEqual(str(copy), str(err))
