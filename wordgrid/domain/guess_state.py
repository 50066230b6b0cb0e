import logging
from dataclasses import dataclass, field
from typing import List, Set

from .config import (
    BASE_MISSES,
    GRID_MISS_BONUS,
    MAX_MISS_LIMIT,
    MIN_MISS_LIMIT,
    UNKNOWN_LETTER,
    WORD_COUNT_MISS_MODIFIER,
    WORD_GUESS_MISS_PENALTY,
)
from .grid import Grid
from .letters import is_letter
from .types import Cell, CoordinateGuess, DifficultyPreset, Guess, GuessResult, LetterGuess, WordGuess

log = logging.getLogger("wordgrid.guess")

_DIFFICULTY_MISS_MODIFIER = {
    DifficultyPreset.EASY: 4,
    DifficultyPreset.NORMAL: 0,
    DifficultyPreset.HARD: -4,
}


def calculate_miss_limit(grid_size: int, word_count: int, difficulty: DifficultyPreset) -> int:
    grid_bonus = GRID_MISS_BONUS.get(grid_size)
    if grid_bonus is None:
        log.warning("Unknown grid size %s, using the 8x8 miss bonus", grid_size)
        grid_bonus = GRID_MISS_BONUS[8]
    word_modifier = WORD_COUNT_MISS_MODIFIER.get(word_count, 0)
    total = BASE_MISSES + grid_bonus + word_modifier + _DIFFICULTY_MISS_MODIFIER[difficulty]
    return max(MIN_MISS_LIMIT, min(MAX_MISS_LIMIT, total))


@dataclass
class PlayerGuessState:
    """What one player has learned about the other's grid."""

    miss_limit: int
    miss_count: int = 0
    guessed_letters: Set[str] = field(default_factory=set)
    known_letters: Set[str] = field(default_factory=set)
    guessed_coordinates: Set[Cell] = field(default_factory=set)
    hit_coordinates: Set[Cell] = field(default_factory=set)
    guessed_words: Set[str] = field(default_factory=set)
    found_words: List[int] = field(default_factory=list)

    @property
    def is_out_of_misses(self) -> bool:
        return self.miss_count >= self.miss_limit

    def add_misses(self, count: int = 1) -> None:
        self.miss_count = min(self.miss_limit, self.miss_count + count)


def word_pattern(grid: Grid, word_id: int, known_letters: Set[str]) -> str:
    """Word text with letters the guesser has not found replaced by '_'."""
    text = grid.words[word_id].text
    return "".join(ch if ch in known_letters else UNKNOWN_LETTER for ch in text)


def all_words_found(grid: Grid, state: PlayerGuessState) -> bool:
    if not grid.words:
        return False
    for i in range(len(grid.words)):
        if i in state.found_words:
            continue
        if UNKNOWN_LETTER in word_pattern(grid, i, state.known_letters):
            return False
    return True


def _mark_complete_words(grid: Grid, state: PlayerGuessState) -> None:
    for i in range(len(grid.words)):
        if i not in state.found_words and UNKNOWN_LETTER not in word_pattern(grid, i, state.known_letters):
            state.found_words.append(i)


def resolve_letter_guess(grid: Grid, state: PlayerGuessState, letter: str) -> GuessResult:
    if not is_letter(letter):
        return GuessResult.INVALID
    letter = letter.upper()
    if letter in state.guessed_letters:
        return GuessResult.ALREADY_GUESSED
    state.guessed_letters.add(letter)

    if not grid.letter_positions(letter):
        state.add_misses()
        log.debug("Letter %s missed (%d/%d)", letter, state.miss_count, state.miss_limit)
        return GuessResult.MISS

    state.known_letters.add(letter)
    grid.reveal_letter(letter)
    _mark_complete_words(grid, state)
    return GuessResult.HIT


def resolve_coordinate_guess(grid: Grid, state: PlayerGuessState, cell: Cell) -> GuessResult:
    if not grid.is_valid_coordinate(cell):
        return GuessResult.INVALID
    if cell in state.guessed_coordinates:
        return GuessResult.ALREADY_GUESSED
    state.guessed_coordinates.add(cell)

    # A coordinate hit locates a letter without naming it.
    if grid.reveal_coordinate(cell, state.known_letters):
        state.hit_coordinates.add(cell)
        return GuessResult.HIT

    state.add_misses()
    log.debug("Coordinate %s missed (%d/%d)", cell, state.miss_count, state.miss_limit)
    return GuessResult.MISS


def resolve_word_guess(grid: Grid, state: PlayerGuessState, text: str, word_index: int) -> GuessResult:
    guess = (text or "").strip().upper()
    if not guess or not guess.isalpha():
        return GuessResult.INVALID
    if guess in state.guessed_words:
        return GuessResult.ALREADY_GUESSED
    state.guessed_words.add(guess)

    if 0 <= word_index < len(grid.words) and grid.words[word_index].text == guess:
        if word_index not in state.found_words:
            state.found_words.append(word_index)
        for ch in set(guess):
            state.guessed_letters.add(ch)
            state.known_letters.add(ch)
            grid.reveal_letter(ch)
        _mark_complete_words(grid, state)
        return GuessResult.HIT

    state.add_misses(WORD_GUESS_MISS_PENALTY)
    log.debug("Word %s wrong for index %d (%d/%d)", guess, word_index, state.miss_count, state.miss_limit)
    return GuessResult.MISS


def resolve_guess(grid: Grid, state: PlayerGuessState, guess: Guess) -> GuessResult:
    if isinstance(guess, LetterGuess):
        return resolve_letter_guess(grid, state, guess.letter)
    if isinstance(guess, CoordinateGuess):
        return resolve_coordinate_guess(grid, state, guess.cell)
    if isinstance(guess, WordGuess):
        return resolve_word_guess(grid, state, guess.text, guess.word_index)
    raise TypeError(f"Unsupported guess type: {type(guess).__name__}")
