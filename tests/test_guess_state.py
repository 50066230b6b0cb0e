import unittest

from wordgrid.domain.grid import Grid
from wordgrid.domain.guess_state import (
    PlayerGuessState,
    all_words_found,
    calculate_miss_limit,
    resolve_guess,
    word_pattern,
)
from wordgrid.domain.types import CellState, CoordinateGuess, DifficultyPreset, Direction, GuessResult, LetterGuess, WordGuess
from wordgrid.placement.placer import try_place_word


class MissLimitTests(unittest.TestCase):
    def test_table_values(self):
        self.assertEqual(calculate_miss_limit(8, 3, DifficultyPreset.NORMAL), 21)
        self.assertEqual(calculate_miss_limit(6, 4, DifficultyPreset.HARD), 12)
        self.assertEqual(calculate_miss_limit(12, 3, DifficultyPreset.EASY), 32)

    def test_unknown_grid_size_uses_default_bonus(self):
        with self.assertLogs("wordgrid.guess", level="WARNING"):
            limit = calculate_miss_limit(20, 3, DifficultyPreset.NORMAL)
        self.assertEqual(limit, calculate_miss_limit(8, 3, DifficultyPreset.NORMAL))


class GuessResolutionTests(unittest.TestCase):
    def setUp(self):
        self.grid = Grid(8)
        try_place_word(self.grid, "CAT", (0, 0), Direction.HORIZONTAL)
        try_place_word(self.grid, "DOG", (2, 0), Direction.HORIZONTAL)
        self.state = PlayerGuessState(miss_limit=10)

    def test_letter_guesses(self):
        self.assertEqual(resolve_guess(self.grid, self.state, LetterGuess("z")), GuessResult.MISS)
        self.assertEqual(self.state.miss_count, 1)
        self.assertEqual(resolve_guess(self.grid, self.state, LetterGuess("Z")), GuessResult.ALREADY_GUESSED)
        self.assertEqual(self.state.miss_count, 1)
        self.assertEqual(resolve_guess(self.grid, self.state, LetterGuess("1")), GuessResult.INVALID)

        self.assertEqual(resolve_guess(self.grid, self.state, LetterGuess("A")), GuessResult.HIT)
        self.assertEqual(word_pattern(self.grid, 0, self.state.known_letters), "_A_")

    def test_coordinate_then_letter_reveals(self):
        self.assertEqual(resolve_guess(self.grid, self.state, CoordinateGuess(0, 0)), GuessResult.HIT)
        self.assertEqual(self.grid.get_cell((0, 0)).state, CellState.PARTIALLY_KNOWN)
        self.assertIn((0, 0), self.state.hit_coordinates)

        resolve_guess(self.grid, self.state, LetterGuess("C"))
        self.assertEqual(self.grid.get_cell((0, 0)).state, CellState.REVEALED)

        self.assertEqual(resolve_guess(self.grid, self.state, CoordinateGuess(7, 7)), GuessResult.MISS)
        self.assertEqual(resolve_guess(self.grid, self.state, CoordinateGuess(7, 7)), GuessResult.ALREADY_GUESSED)
        self.assertEqual(resolve_guess(self.grid, self.state, CoordinateGuess(9, 9)), GuessResult.INVALID)
        self.assertEqual(self.state.miss_count, 1)

    def test_word_guesses(self):
        self.assertEqual(resolve_guess(self.grid, self.state, WordGuess("dog", 1)), GuessResult.HIT)
        self.assertIn(1, self.state.found_words)
        self.assertTrue({"D", "O", "G"} <= self.state.known_letters)

        self.assertEqual(resolve_guess(self.grid, self.state, WordGuess("COT", 0)), GuessResult.MISS)
        self.assertEqual(self.state.miss_count, 2)
        self.assertEqual(resolve_guess(self.grid, self.state, WordGuess("COT", 0)), GuessResult.ALREADY_GUESSED)
        self.assertEqual(resolve_guess(self.grid, self.state, WordGuess("C4T", 0)), GuessResult.INVALID)

    def test_all_words_found_by_letters(self):
        self.assertFalse(all_words_found(self.grid, self.state))
        for letter in "CATDOG":
            resolve_guess(self.grid, self.state, LetterGuess(letter))
        self.assertTrue(all_words_found(self.grid, self.state))
        self.assertEqual(sorted(self.state.found_words), [0, 1])

    def test_misses_are_capped(self):
        self.state.add_misses(50)
        self.assertEqual(self.state.miss_count, 10)
        self.assertTrue(self.state.is_out_of_misses)


if __name__ == "__main__":
    unittest.main()
