from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_GRID_SIZE
from .types import Cell, CellState, Direction


class OutOfBoundsError(IndexError):
    pass


class StateRegressionError(RuntimeError):
    pass


class PlacementConflictError(ValueError):
    pass


# Allowed forward moves; staying in the same state is always allowed.
_STATE_TRANSITIONS = {
    CellState.HIDDEN: {CellState.MISS, CellState.PARTIALLY_KNOWN, CellState.REVEALED},
    CellState.PARTIALLY_KNOWN: {CellState.REVEALED},
    CellState.REVEALED: set(),
    CellState.MISS: set(),
}


def cell_index(r: int, c: int, grid_size: int = DEFAULT_GRID_SIZE) -> int:
    return r * grid_size + c


@dataclass
class GridCell:
    row: int
    col: int
    letter: Optional[str] = None
    state: CellState = CellState.HIDDEN
    # Indices into Grid.words; the first entry is the word that placed the letter.
    owners: List[int] = field(default_factory=list)

    @property
    def position(self) -> Cell:
        return self.row, self.col

    @property
    def is_empty(self) -> bool:
        return self.letter is None

    @property
    def primary_owner(self) -> Optional[int]:
        return self.owners[0] if self.owners else None

    def set_letter(self, letter: str, word_id: int) -> None:
        letter = letter.upper()
        if self.letter is not None and self.letter != letter:
            raise PlacementConflictError(
                f"cell ({self.row},{self.col}) holds {self.letter!r}, cannot place {letter!r}"
            )
        if self.letter is None:
            self.letter = letter
        if word_id not in self.owners:
            self.owners.append(word_id)

    def set_state(self, new_state: CellState) -> None:
        if new_state == self.state:
            return
        if new_state not in _STATE_TRANSITIONS[self.state]:
            raise StateRegressionError(
                f"cell ({self.row},{self.col}) cannot move from {self.state.name} to {new_state.name}"
            )
        self.state = new_state


@dataclass(frozen=True)
class Word:
    text: str
    start: Cell
    direction: Direction
    cells: Tuple[Cell, ...]

    def __post_init__(self):
        object.__setattr__(self, "text", self.text.upper())

    @property
    def length(self) -> int:
        return len(self.text)

    def letter_at(self, cell: Cell) -> Optional[str]:
        for i, pos in enumerate(self.cells):
            if pos == cell:
                return self.text[i]
        return None

    def check_if_fully_revealed(self, grid: "Grid") -> bool:
        for pos in self.cells:
            state = grid.get_cell(pos).state
            if state in (CellState.HIDDEN, CellState.PARTIALLY_KNOWN):
                return False
        return True


class Grid:
    def __init__(self, size: int = DEFAULT_GRID_SIZE):
        if size <= 0:
            raise ValueError("grid size must be positive")
        self.size = size
        self.cells: List[GridCell] = [
            GridCell(r, c) for r in range(size) for c in range(size)
        ]
        self.words: List[Word] = []

    def is_valid_coordinate(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.size and 0 <= c < self.size

    def get_cell(self, cell: Cell) -> GridCell:
        if not self.is_valid_coordinate(cell):
            raise OutOfBoundsError(f"({cell[0]},{cell[1]}) is outside a {self.size}x{self.size} grid")
        return self.cells[cell_index(cell[0], cell[1], self.size)]

    def add_word(self, word: Word) -> int:
        if word in self.words:
            return self.words.index(word)
        self.words.append(word)
        return len(self.words) - 1

    def word_ids_at(self, cell: Cell) -> List[int]:
        return list(self.get_cell(cell).owners)

    def occupied_cells(self) -> List[Cell]:
        return [gc.position for gc in self.cells if not gc.is_empty]

    @property
    def letter_count(self) -> int:
        return sum(1 for gc in self.cells if not gc.is_empty)

    def letters(self) -> List[str]:
        return sorted({gc.letter for gc in self.cells if gc.letter is not None})

    def letter_positions(self, letter: str) -> List[Cell]:
        letter = letter.upper()
        return [gc.position for gc in self.cells if gc.letter == letter]

    def is_word_fully_revealed(self, word_id: int) -> bool:
        return self.words[word_id].check_if_fully_revealed(self)

    def fully_revealed_word_ids(self) -> List[int]:
        return [i for i in range(len(self.words)) if self.is_word_fully_revealed(i)]

    # Guess-reveal operations

    def reveal_coordinate(self, cell: Cell, known_letters: Iterable[str] = ()) -> bool:
        """Mark a guessed cell. Returns True when the cell holds a letter."""
        gc = self.get_cell(cell)
        if gc.is_empty:
            gc.set_state(CellState.MISS)
            return False
        known = {k.upper() for k in known_letters}
        if gc.letter in known:
            gc.set_state(CellState.REVEALED)
        elif gc.state == CellState.HIDDEN:
            gc.set_state(CellState.PARTIALLY_KNOWN)
        return True

    def reveal_letter(self, letter: str) -> List[Cell]:
        """Upgrade located cells holding `letter` to REVEALED."""
        letter = letter.upper()
        upgraded: List[Cell] = []
        for gc in self.cells:
            if gc.letter == letter and gc.state == CellState.PARTIALLY_KNOWN:
                gc.set_state(CellState.REVEALED)
                upgraded.append(gc.position)
        return upgraded

    def render(self, show_hidden: bool = False) -> str:
        rows = []
        for r in range(self.size):
            line = []
            for c in range(self.size):
                gc = self.cells[cell_index(r, c, self.size)]
                if gc.state == CellState.MISS:
                    line.append("o")
                elif gc.state == CellState.REVEALED or (show_hidden and gc.letter):
                    line.append(gc.letter or ".")
                elif gc.state == CellState.PARTIALLY_KNOWN:
                    line.append("?")
                else:
                    line.append(".")
            rows.append(" ".join(line))
        return "\n".join(rows)
