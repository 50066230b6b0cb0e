import random
import unittest

from wordgrid.domain.types import Direction
from wordgrid.placement import (
    SetupError,
    builtin_word_bank,
    builtin_word_lists,
    place_words,
    select_words,
    setup_ai_grid,
    word_lists_from_words,
)


class WordBankTests(unittest.TestCase):
    def test_builtin_lists(self):
        lists = builtin_word_lists()
        self.assertEqual(sorted(lists), [3, 4, 5, 6])
        for length, words in lists.items():
            self.assertTrue(words)
            for w in words:
                self.assertEqual(len(w), length)
                self.assertTrue(w.isalpha() and w.isupper())
        self.assertIn("CAT", builtin_word_bank())

    def test_word_lists_from_words(self):
        lists = word_lists_from_words(["cat", " Dog ", "owl", "it's", "horse"])
        self.assertEqual(lists[3], ("CAT", "DOG", "OWL"))
        self.assertEqual(lists[5], ("HORSE",))
        self.assertNotIn(4, lists)


class AISetupTests(unittest.TestCase):
    def test_select_words_cycles_lengths(self):
        words = select_words(builtin_word_lists(), 4, random.Random(1))
        self.assertEqual([len(w) for w in words], [3, 4, 5, 6])
        self.assertEqual(len(set(words)), 4)

        words = select_words(builtin_word_lists(), 5, random.Random(1), word_lengths=(3, 4))
        self.assertEqual([len(w) for w in words], [3, 4, 3, 4, 3])
        self.assertEqual(len(set(words)), 5)

    def test_select_words_runs_out(self):
        with self.assertRaises(SetupError):
            select_words({3: ("CAT",)}, 2, random.Random(1), word_lengths=(3,))
        self.assertEqual(select_words({}, 0, random.Random(1)), [])

    def test_place_words_without_overlap(self):
        words = ["CAT", "BIRD", "HORSE", "RABBIT"]
        grid = place_words(8, words, random.Random(5))
        self.assertEqual(len(grid.words), 4)
        self.assertEqual(grid.letter_count, sum(len(w) for w in words))
        self.assertEqual([w.text for w in grid.words], ["RABBIT", "HORSE", "BIRD", "CAT"])
        for word in grid.words:
            self.assertIn(word.direction, (Direction.HORIZONTAL, Direction.VERTICAL))
            for i, pos in enumerate(word.cells):
                self.assertEqual(grid.get_cell(pos).letter, word.text[i])
                self.assertEqual(len(grid.get_cell(pos).owners), 1)

    def test_place_words_impossible(self):
        with self.assertRaises(SetupError):
            place_words(3, ["HORSE"], random.Random(1), max_attempts=2)

    def test_setup_is_reproducible(self):
        a = setup_ai_grid(8, builtin_word_lists(), random.Random(99), word_count=4)
        b = setup_ai_grid(8, builtin_word_lists(), random.Random(99), word_count=4)
        self.assertEqual(a.words, b.words)


if __name__ == "__main__":
    unittest.main()
