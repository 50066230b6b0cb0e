from typing import List, Tuple

from wordgrid.domain.grid import Grid
from wordgrid.domain.types import Cell, Direction


def word_cell_positions(start: Cell, length: int, direction: Direction) -> Tuple[Cell, ...]:
    dr, dc = direction.vector
    r0, c0 = start
    return tuple((r0 + dr * i, c0 + dc * i) for i in range(length))


def can_place_word(grid: Grid, word: str, start: Cell, direction: Direction) -> bool:
    if validate_word_text(word):
        return False
    word = word.upper()
    positions = word_cell_positions(start, len(word), direction)

    for pos in positions:
        if not grid.is_valid_coordinate(pos):
            return False

    # Crossing is allowed only where the letters agree at the same index.
    for i, pos in enumerate(positions):
        cell = grid.get_cell(pos)
        if not cell.is_empty and cell.letter != word[i]:
            return False
    return True


def validate_word_text(text: str, grid_size: int = 0) -> List[str]:
    errors: List[str] = []
    if not text:
        errors.append("word must be non-empty")
        return errors
    if not (text.isascii() and text.isalpha()):
        errors.append(f"word {text!r} must contain only letters A-Z")
    if grid_size > 0 and len(text) > grid_size:
        errors.append(f"word {text!r} is longer than the {grid_size}x{grid_size} grid")
    return errors
