import unittest

from wordgrid.domain.letters import (
    CONSONANTS_BY_FREQUENCY,
    FREQUENCY_DATA,
    LETTERS_BY_FREQUENCY,
    combined_frequency,
    frequency,
    frequency_rank,
    is_consonant,
    is_vowel,
    normalized_frequency,
    unguessed_by_frequency,
)


class LetterFrequencyTests(unittest.TestCase):
    def test_e_is_most_frequent(self):
        self.assertEqual(frequency_rank("E"), 1)
        self.assertEqual(frequency_rank("e"), 1)
        self.assertEqual(frequency_rank("T"), 2)
        self.assertAlmostEqual(normalized_frequency("E"), 1.0)

    def test_rank_order_matches_frequency_order(self):
        for x in FREQUENCY_DATA:
            for y in FREQUENCY_DATA:
                self.assertEqual(
                    frequency(x) >= frequency(y),
                    frequency_rank(x) <= frequency_rank(y),
                    msg=f"{x} vs {y}",
                )

    def test_tied_letters_share_a_rank(self):
        self.assertEqual(frequency_rank("C"), frequency_rank("U"))
        self.assertEqual(frequency_rank("M"), frequency_rank("W"))

    def test_non_letters(self):
        self.assertEqual(frequency_rank("1"), -1)
        self.assertEqual(frequency_rank("AB"), -1)
        self.assertEqual(frequency("?"), 0.0)
        self.assertFalse(is_consonant("?"))
        self.assertFalse(is_vowel(""))

    def test_classification(self):
        self.assertTrue(is_vowel("a"))
        self.assertTrue(is_consonant("b"))
        self.assertFalse(is_consonant("E"))
        self.assertNotIn("E", CONSONANTS_BY_FREQUENCY)
        self.assertEqual(len(LETTERS_BY_FREQUENCY), 26)

    def test_unguessed_by_frequency_is_pure(self):
        guessed = {"E", "t"}
        first = unguessed_by_frequency(guessed)
        second = unguessed_by_frequency(guessed)
        self.assertEqual(first, second)
        self.assertEqual(first[0], "A")
        self.assertEqual(len(first), 24)
        self.assertEqual(guessed, {"E", "t"})

    def test_combined_frequency(self):
        self.assertAlmostEqual(combined_frequency("ET"), 12.7 + 9.1)
        self.assertAlmostEqual(combined_frequency(""), 0.0)


if __name__ == "__main__":
    unittest.main()
