from .placer import try_place_word
from .setup import SETUP_DIRECTIONS, SetupError, place_words, select_words, setup_ai_grid
from .validation import can_place_word, validate_word_text, word_cell_positions
from .wordbank import builtin_word_bank, builtin_word_lists, word_lists_from_words

__all__ = [
    "SETUP_DIRECTIONS",
    "SetupError",
    "builtin_word_bank",
    "builtin_word_lists",
    "can_place_word",
    "place_words",
    "select_words",
    "setup_ai_grid",
    "try_place_word",
    "validate_word_text",
    "word_cell_positions",
    "word_lists_from_words",
]
