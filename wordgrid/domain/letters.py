"""English letter frequency reference data used to rank letter guesses."""
from typing import Dict, Iterable, Tuple

# Percent occurrence in typical English text.
FREQUENCY_DATA: Dict[str, float] = {
    "A": 8.2,
    "B": 1.5,
    "C": 2.8,
    "D": 4.3,
    "E": 12.7,
    "F": 2.2,
    "G": 2.0,
    "H": 6.1,
    "I": 7.0,
    "J": 0.15,
    "K": 0.77,
    "L": 4.0,
    "M": 2.4,
    "N": 6.7,
    "O": 7.5,
    "P": 1.9,
    "Q": 0.095,
    "R": 6.0,
    "S": 6.3,
    "T": 9.1,
    "U": 2.8,
    "V": 0.98,
    "W": 2.4,
    "X": 0.15,
    "Y": 2.0,
    "Z": 0.074,
}

MAX_FREQUENCY = max(FREQUENCY_DATA.values())

# Ties (C/U, M/W, G/Y, J/X) keep the conventional ETAOIN ordering.
LETTERS_BY_FREQUENCY: Tuple[str, ...] = (
    "E", "T", "A", "O", "I", "N", "S", "H", "R", "D",
    "L", "C", "U", "M", "W", "F", "G", "Y", "P", "B",
    "V", "K", "J", "X", "Q", "Z",
)

VOWELS: Tuple[str, ...] = ("E", "A", "O", "I", "U")

CONSONANTS_BY_FREQUENCY: Tuple[str, ...] = tuple(
    letter for letter in LETTERS_BY_FREQUENCY if letter not in VOWELS
)

# Competition ranking: tied letters share a rank.
_RANKS: Dict[str, int] = {
    letter: 1 + sum(1 for other in FREQUENCY_DATA.values() if other > freq)
    for letter, freq in FREQUENCY_DATA.items()
}


def _normalize(letter: str) -> str:
    if not isinstance(letter, str) or len(letter) != 1:
        return ""
    return letter.upper()


def is_letter(letter: str) -> bool:
    return _normalize(letter) in FREQUENCY_DATA


def frequency(letter: str) -> float:
    return FREQUENCY_DATA.get(_normalize(letter), 0.0)


def normalized_frequency(letter: str) -> float:
    return frequency(letter) / MAX_FREQUENCY


def frequency_rank(letter: str) -> int:
    """1 for the most frequent letter, -1 for anything outside A-Z.

    Letters with equal frequency share a rank (C and U are both 12).
    """
    return _RANKS.get(_normalize(letter), -1)


def is_vowel(letter: str) -> bool:
    return _normalize(letter) in VOWELS


def is_consonant(letter: str) -> bool:
    return is_letter(letter) and not is_vowel(letter)


def combined_frequency(letters: Iterable[str]) -> float:
    return sum(frequency(letter) for letter in letters)


def unguessed_by_frequency(guessed: Iterable[str]) -> Tuple[str, ...]:
    guessed_upper = {_normalize(g) for g in guessed}
    return tuple(letter for letter in LETTERS_BY_FREQUENCY if letter not in guessed_upper)


def letter_score(letter: str, pattern_bonus: float) -> float:
    return frequency(letter) + pattern_bonus
