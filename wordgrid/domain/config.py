# Grid defaults
DEFAULT_GRID_SIZE = 8
MIN_GRID_SIZE = 6
MAX_GRID_SIZE = 12

AVERAGE_WORD_LENGTH = 4.5

# Density buckets drive strategy weighting; keep in sync with AIConfig thresholds.
HIGH_DENSITY_THRESHOLD = 0.35
MEDIUM_DENSITY_THRESHOLD = 0.20
LOW_DENSITY_THRESHOLD = 0.12

DENSITY_HIGH = "High"
DENSITY_MEDIUM = "Medium"
DENSITY_LOW = "Low"
DENSITY_VERY_LOW = "Very Low"

# Coordinate scoring weights.
# Adjacency multiplier is lerp(ADJACENCY_SPARSE_WEIGHT, ADJACENCY_DENSE_WEIGHT, fill_ratio).
ADJACENCY_SPARSE_WEIGHT = 3.0
ADJACENCY_DENSE_WEIGHT = 1.0
LINE_EXTENSION_BONUS = 0.5
CENTER_BIAS_WEIGHT = 0.3
PROXIMITY_BONUS = 0.3
PROXIMITY_MIN_DISTANCE = 2
PROXIMITY_MAX_DISTANCE = 3

# Letter scoring
PATTERN_BONUS_WEIGHT = 2.0

# Word guessing confidence
SINGLE_MATCH_CONFIDENCE = 0.95
REVEALED_WORD_CONFIDENCE = 1.0
MINIMUM_VIABLE_CONFIDENCE = 0.25

UNKNOWN_LETTER = "_"

# Miss limit table
BASE_MISSES = 15
MIN_MISS_LIMIT = 10
MAX_MISS_LIMIT = 40
GRID_MISS_BONUS = {
    6: 3,
    7: 4,
    8: 6,
    9: 8,
    10: 10,
    11: 12,
    12: 13,
}
# Keyed by word count; other counts add 0.
WORD_COUNT_MISS_MODIFIER = {
    3: 0,
    4: -2,
}
WORD_GUESS_MISS_PENALTY = 2

# AI setup
DEFAULT_WORD_LENGTHS = (3, 4, 5, 6)
PLACEMENT_MAX_ATTEMPTS = 100
