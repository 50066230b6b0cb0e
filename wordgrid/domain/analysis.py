import math
from typing import Collection, List, Optional

from .config import (
    ADJACENCY_DENSE_WEIGHT,
    ADJACENCY_SPARSE_WEIGHT,
    AVERAGE_WORD_LENGTH,
    CENTER_BIAS_WEIGHT,
    DENSITY_HIGH,
    DENSITY_LOW,
    DENSITY_MEDIUM,
    DENSITY_VERY_LOW,
    HIGH_DENSITY_THRESHOLD,
    LINE_EXTENSION_BONUS,
    LOW_DENSITY_THRESHOLD,
    MEDIUM_DENSITY_THRESHOLD,
)
from .types import Cell


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def lerp(a: float, b: float, t: float) -> float:
    t = _clamp01(t)
    return a + (b - a) * t


# -----------------------------
# Fill ratio / density
# -----------------------------
def fill_ratio(grid_size: int, word_count: int, average_word_length: float = AVERAGE_WORD_LENGTH) -> float:
    if grid_size <= 0:
        return 0.0
    total_cells = grid_size * grid_size
    return _clamp01(word_count * average_word_length / total_cells)


def fill_ratio_exact(grid_size: int, letter_count: int) -> float:
    if grid_size <= 0:
        return 0.0
    return _clamp01(letter_count / (grid_size * grid_size))


def density_category(ratio: float) -> str:
    if ratio >= HIGH_DENSITY_THRESHOLD:
        return DENSITY_HIGH
    if ratio >= MEDIUM_DENSITY_THRESHOLD:
        return DENSITY_MEDIUM
    if ratio >= LOW_DENSITY_THRESHOLD:
        return DENSITY_LOW
    return DENSITY_VERY_LOW


# -----------------------------
# Adjacency
# -----------------------------
def is_valid_coordinate(r: int, c: int, grid_size: int) -> bool:
    return 0 <= r < grid_size and 0 <= c < grid_size


def adjacent_coordinates(r: int, c: int, grid_size: int) -> List[Cell]:
    out: List[Cell] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if is_valid_coordinate(nr, nc, grid_size):
            out.append((nr, nc))
    return out


def adjacent_coordinates_8way(r: int, c: int, grid_size: int) -> List[Cell]:
    out: List[Cell] = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            nr, nc = r + dr, c + dc
            if is_valid_coordinate(nr, nc, grid_size):
                out.append((nr, nc))
    return out


def is_adjacent_to_any(r: int, c: int, hits: Collection[Cell], grid_size: int) -> bool:
    return any(cell in hits for cell in adjacent_coordinates(r, c, grid_size))


def count_adjacent_hits(r: int, c: int, hits: Collection[Cell], grid_size: int) -> int:
    return sum(1 for cell in adjacent_coordinates(r, c, grid_size) if cell in hits)


def extends_hit_line(r: int, c: int, hits: Collection[Cell], grid_size: int) -> bool:
    """
    True when (r, c) continues or fills a straight run of hits along its row or column:
    two hits on one side, two on the other, or one hit on each side.

    Diagonal runs are not considered.
    """
    # Row
    if c >= 2 and (r, c - 1) in hits and (r, c - 2) in hits:
        return True
    if c <= grid_size - 3 and (r, c + 1) in hits and (r, c + 2) in hits:
        return True
    if 1 <= c <= grid_size - 2 and (r, c - 1) in hits and (r, c + 1) in hits:
        return True

    # Column
    if r >= 2 and (r - 1, c) in hits and (r - 2, c) in hits:
        return True
    if r <= grid_size - 3 and (r + 1, c) in hits and (r + 2, c) in hits:
        return True
    if 1 <= r <= grid_size - 2 and (r - 1, c) in hits and (r + 1, c) in hits:
        return True

    return False


# -----------------------------
# Center bias
# -----------------------------
def distance_from_center(r: int, c: int, grid_size: int) -> float:
    center = (grid_size - 1) / 2.0
    return math.hypot(r - center, c - center)


def center_bias_score(r: int, c: int, grid_size: int) -> float:
    max_distance = distance_from_center(0, 0, grid_size)
    if max_distance <= 0:
        return 1.0
    return 1.0 - distance_from_center(r, c, grid_size) / max_distance


# -----------------------------
# Scoring
# -----------------------------
def calculate_coordinate_score(
    r: int,
    c: int,
    hits: Collection[Cell],
    grid_size: int,
    ratio: float,
) -> float:
    # Adjacency counts for more on sparse grids.
    adjacency_weight = lerp(ADJACENCY_SPARSE_WEIGHT, ADJACENCY_DENSE_WEIGHT, ratio)
    score = count_adjacent_hits(r, c, hits, grid_size) * adjacency_weight
    if extends_hit_line(r, c, hits, grid_size):
        score += LINE_EXTENSION_BONUS
    score += center_bias_score(r, c, grid_size) * CENTER_BIAS_WEIGHT
    return score


def unguessed_coordinates(grid_size: int, guessed: Collection[Cell]) -> List[Cell]:
    return [
        (r, c)
        for r in range(grid_size)
        for c in range(grid_size)
        if (r, c) not in guessed
    ]


# -----------------------------
# Coordinate strings ("A1" = row 0, col 0)
# -----------------------------
def coordinate_to_string(r: int, c: int) -> str:
    return f"{chr(ord('A') + c)}{r + 1}"


def parse_coordinate(text: Optional[str]) -> Optional[Cell]:
    if not isinstance(text, str):
        return None
    text = text.strip()
    if len(text) < 2:
        return None
    col_char = text[0].upper()
    if not ("A" <= col_char <= "Z"):
        return None
    row_text = text[1:]
    if not (row_text.isascii() and row_text.isdigit()):
        return None
    row_num = int(row_text)
    if row_num < 1:
        return None
    return row_num - 1, ord(col_char) - ord("A")
