import logging
import random
from typing import Dict, List, Optional, Sequence, Set, Tuple

from wordgrid.domain.config import DEFAULT_WORD_LENGTHS, PLACEMENT_MAX_ATTEMPTS
from wordgrid.domain.grid import Grid, Word
from wordgrid.domain.types import Cell, Direction

from .placer import try_place_word
from .validation import word_cell_positions

log = logging.getLogger("wordgrid.setup")

SETUP_DIRECTIONS: Tuple[Direction, ...] = (Direction.HORIZONTAL, Direction.VERTICAL)


class SetupError(RuntimeError):
    pass


def select_words(
    word_lists: Dict[int, Sequence[str]],
    word_count: int,
    rng: random.Random,
    word_lengths: Sequence[int] = DEFAULT_WORD_LENGTHS,
) -> List[str]:
    """Pick `word_count` distinct words, cycling through `word_lengths`."""
    if word_count <= 0:
        return []
    if not word_lengths:
        raise SetupError("word_lengths must not be empty")

    chosen: List[str] = []
    used: Set[str] = set()
    for i in range(word_count):
        length = word_lengths[i % len(word_lengths)]
        pool = sorted(w.upper() for w in word_lists.get(length, ()) if w.upper() not in used)
        if not pool:
            raise SetupError(f"no unused {length}-letter word left in the word bank")
        word = rng.choice(pool)
        used.add(word)
        chosen.append(word)
    return chosen


def candidate_starts(grid: Grid, length: int, direction: Direction) -> List[Cell]:
    out: List[Cell] = []
    for r in range(grid.size):
        for c in range(grid.size):
            cells = word_cell_positions((r, c), length, direction)
            if all(grid.is_valid_coordinate(p) for p in cells):
                out.append((r, c))
    return out


def _free_placements(grid: Grid, length: int, directions: Sequence[Direction]) -> List[Tuple[Cell, Direction]]:
    # AI grids never share cells between words.
    out: List[Tuple[Cell, Direction]] = []
    for direction in directions:
        for start in candidate_starts(grid, length, direction):
            cells = word_cell_positions(start, length, direction)
            if all(grid.get_cell(p).is_empty for p in cells):
                out.append((start, direction))
    return out


def _place_once(
    grid: Grid,
    words: Sequence[str],
    rng: random.Random,
    directions: Sequence[Direction],
) -> Optional[List[Word]]:
    placed: List[Word] = []
    for text in sorted(words, key=len, reverse=True):
        options = _free_placements(grid, len(text), directions)
        if not options:
            return None
        start, direction = rng.choice(options)
        ok, word = try_place_word(grid, text, start, direction)
        if not ok or word is None:
            return None
        placed.append(word)
    return placed


def place_words(
    grid_size: int,
    words: Sequence[str],
    rng: random.Random,
    max_attempts: int = PLACEMENT_MAX_ATTEMPTS,
    directions: Sequence[Direction] = SETUP_DIRECTIONS,
) -> Grid:
    """
    Build a grid holding every word, longest first, without overlaps.

    Each attempt starts from an empty grid; raises SetupError when no attempt
    fits all words.
    """
    for attempt in range(1, max(1, max_attempts) + 1):
        grid = Grid(grid_size)
        placed = _place_once(grid, words, rng, directions)
        if placed is not None:
            log.debug("Placed %d words on %dx%d grid (attempt %d)", len(placed), grid_size, grid_size, attempt)
            return grid
    raise SetupError(f"could not place {len(words)} words on a {grid_size}x{grid_size} grid")


def setup_ai_grid(
    grid_size: int,
    word_lists: Dict[int, Sequence[str]],
    rng: random.Random,
    word_count: int = 3,
    word_lengths: Sequence[int] = DEFAULT_WORD_LENGTHS,
    max_attempts: int = PLACEMENT_MAX_ATTEMPTS,
) -> Grid:
    words = select_words(word_lists, word_count, rng, word_lengths)
    log.info("AI setup selected %d words for a %dx%d grid", len(words), grid_size, grid_size)
    return place_words(grid_size, words, rng, max_attempts=max_attempts)
