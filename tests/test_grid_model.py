import unittest

from wordgrid.domain.grid import Grid, OutOfBoundsError, PlacementConflictError, StateRegressionError
from wordgrid.domain.types import CellState, Direction
from wordgrid.placement.placer import try_place_word


class GridModelTests(unittest.TestCase):
    def setUp(self):
        self.grid = Grid(8)
        ok, self.word = try_place_word(self.grid, "cat", (0, 0), Direction.HORIZONTAL)
        self.assertTrue(ok)

    def test_bounds(self):
        self.assertTrue(self.grid.is_valid_coordinate((7, 7)))
        self.assertFalse(self.grid.is_valid_coordinate((8, 0)))
        self.assertFalse(self.grid.is_valid_coordinate((0, -1)))
        with self.assertRaises(OutOfBoundsError):
            self.grid.get_cell((8, 8))
        with self.assertRaises(IndexError):
            self.grid.get_cell((-1, 0))

    def test_word_is_upper_case_and_owns_cells(self):
        self.assertEqual(self.word.text, "CAT")
        self.assertEqual(self.grid.word_ids_at((0, 1)), [0])
        self.assertEqual(self.grid.letter_count, 3)
        self.assertEqual(self.grid.letter_positions("a"), [(0, 1)])
        self.assertEqual(self.grid.occupied_cells(), [(0, 0), (0, 1), (0, 2)])
        self.assertEqual(self.grid.letters(), ["A", "C", "T"])

    def test_set_letter_conflict(self):
        cell = self.grid.get_cell((0, 0))
        cell.set_letter("C", 1)
        self.assertEqual(cell.owners, [0, 1])
        self.assertEqual(cell.primary_owner, 0)
        with self.assertRaises(PlacementConflictError):
            cell.set_letter("D", 2)
        self.assertEqual(cell.letter, "C")

    def test_state_moves_forward_only(self):
        cell = self.grid.get_cell((0, 0))
        cell.set_state(CellState.PARTIALLY_KNOWN)
        cell.set_state(CellState.PARTIALLY_KNOWN)
        cell.set_state(CellState.REVEALED)
        for state in (CellState.HIDDEN, CellState.PARTIALLY_KNOWN, CellState.MISS):
            with self.assertRaises(StateRegressionError):
                cell.set_state(state)
        self.assertEqual(cell.state, CellState.REVEALED)

    def test_miss_is_terminal(self):
        cell = self.grid.get_cell((5, 5))
        cell.set_state(CellState.MISS)
        with self.assertRaises(StateRegressionError):
            cell.set_state(CellState.REVEALED)

    def test_reveal_coordinate_and_letter(self):
        self.assertFalse(self.grid.reveal_coordinate((4, 4)))
        self.assertEqual(self.grid.get_cell((4, 4)).state, CellState.MISS)

        self.assertTrue(self.grid.reveal_coordinate((0, 0)))
        self.assertEqual(self.grid.get_cell((0, 0)).state, CellState.PARTIALLY_KNOWN)
        self.assertTrue(self.grid.reveal_coordinate((0, 1), known_letters={"a"}))
        self.assertEqual(self.grid.get_cell((0, 1)).state, CellState.REVEALED)

        self.assertEqual(self.grid.reveal_letter("c"), [(0, 0)])
        self.assertEqual(self.grid.get_cell((0, 0)).state, CellState.REVEALED)

    def test_revealed_cell_never_goes_back(self):
        self.grid.reveal_coordinate((0, 0), known_letters={"C"})
        self.grid.reveal_coordinate((0, 0))
        self.grid.reveal_letter("C")
        self.assertEqual(self.grid.get_cell((0, 0)).state, CellState.REVEALED)

    def test_fully_revealed_is_recomputed(self):
        self.assertFalse(self.word.check_if_fully_revealed(self.grid))
        for pos in self.word.cells:
            self.grid.reveal_coordinate(pos)
        self.assertFalse(self.grid.is_word_fully_revealed(0))
        for letter in "CAT":
            self.grid.reveal_letter(letter)
        self.assertTrue(self.word.check_if_fully_revealed(self.grid))
        self.assertEqual(self.grid.fully_revealed_word_ids(), [0])

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            Grid(0)

    def test_render(self):
        text = self.grid.render(show_hidden=True)
        self.assertTrue(text.startswith("C A T"))
        self.assertNotIn("C", self.grid.render())


if __name__ == "__main__":
    unittest.main()
