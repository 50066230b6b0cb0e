from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Cell = Tuple[int, int]  # (row, col)


class CellState(Enum):
    HIDDEN = "hidden"
    MISS = "miss"
    PARTIALLY_KNOWN = "partially_known"
    REVEALED = "revealed"


class Direction(Enum):
    # Values are (d_row, d_col) unit vectors.
    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)
    DIAGONAL_DOWN_RIGHT = (1, 1)
    DIAGONAL_DOWN_LEFT = (1, -1)
    HORIZONTAL_REVERSE = (0, -1)
    VERTICAL_REVERSE = (-1, 0)
    DIAGONAL_UP_RIGHT = (-1, 1)
    DIAGONAL_UP_LEFT = (-1, -1)

    @property
    def vector(self) -> Cell:
        return self.value


class DifficultyPreset(Enum):
    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"

    @classmethod
    def parse(cls, name: str) -> "DifficultyPreset":
        key = (name or "").strip().lower()
        for preset in cls:
            if preset.value.lower() == key:
                return preset
        raise ValueError(f"Unknown difficulty preset '{name}'. Use Easy, Normal or Hard.")


class GuessResult(Enum):
    HIT = "hit"
    MISS = "miss"
    ALREADY_GUESSED = "already_guessed"
    INVALID = "invalid"


@dataclass(frozen=True)
class LetterGuess:
    letter: str

    def __post_init__(self):
        object.__setattr__(self, "letter", self.letter.upper())


@dataclass(frozen=True)
class CoordinateGuess:
    row: int
    col: int

    @property
    def cell(self) -> Cell:
        return self.row, self.col


@dataclass(frozen=True)
class WordGuess:
    text: str
    word_index: int = -1

    def __post_init__(self):
        object.__setattr__(self, "text", self.text.strip().upper())


Guess = Union[LetterGuess, CoordinateGuess, WordGuess]


def describe_guess(guess: Guess) -> str:
    if isinstance(guess, LetterGuess):
        return f"letter {guess.letter}"
    if isinstance(guess, CoordinateGuess):
        return f"coordinate ({guess.row},{guess.col})"
    if isinstance(guess, WordGuess):
        return f"word {guess.text} (index {guess.word_index})"
    raise TypeError(f"Unsupported guess type: {type(guess).__name__}")
