from typing import Optional, Tuple

from wordgrid.domain.grid import Grid, Word
from wordgrid.domain.types import Cell, Direction

from .validation import can_place_word, word_cell_positions


def try_place_word(grid: Grid, text: str, start: Cell, direction: Direction) -> Tuple[bool, Optional[Word]]:
    if not can_place_word(grid, text, start, direction):
        return False, None

    text = text.upper()
    positions = word_cell_positions(start, len(text), direction)
    word = Word(text, start, direction, positions)
    if word in grid.words:
        return False, None
    word_id = len(grid.words)
    for i, pos in enumerate(positions):
        # Claims an empty cell or joins the owners of a matching crossing letter.
        grid.get_cell(pos).set_letter(text[i], word_id)
    grid.add_word(word)
    return True, word
