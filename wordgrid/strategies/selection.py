import random
from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, List, Optional, Sequence, Set, Tuple

from wordgrid.ai.config import AIConfig
from wordgrid.domain.analysis import (
    calculate_coordinate_score,
    coordinate_to_string,
    density_category,
    is_adjacent_to_any,
    lerp,
    unguessed_coordinates,
)
from wordgrid.domain.config import (
    HIGH_DENSITY_THRESHOLD,
    MINIMUM_VIABLE_CONFIDENCE,
    PATTERN_BONUS_WEIGHT,
    PROXIMITY_BONUS,
    PROXIMITY_MAX_DISTANCE,
    PROXIMITY_MIN_DISTANCE,
    REVEALED_WORD_CONFIDENCE,
    SINGLE_MATCH_CONFIDENCE,
    UNKNOWN_LETTER,
)
from wordgrid.domain.letters import frequency_rank, letter_score, unguessed_by_frequency
from wordgrid.domain.types import Cell, CoordinateGuess, Guess, LetterGuess, WordGuess


@dataclass(frozen=True)
class GuessRecommendation:
    guess: Guess
    confidence: float


@dataclass
class TurnContext:
    """
    Inputs for one AI decision.

    `patterns` and `hits` are what the AI currently remembers and feed scoring
    only. The guessed_* sets are the full record and decide which targets are
    still legal.
    """

    grid_size: int
    skill: float
    fill_ratio: float
    patterns: List[str]
    words_solved: List[bool]
    hits: Set[Cell] = field(default_factory=set)
    guessed_letters: Set[str] = field(default_factory=set)
    missed_letters: Set[str] = field(default_factory=set)
    guessed_coordinates: Set[Cell] = field(default_factory=set)
    guessed_words: Set[str] = field(default_factory=set)
    word_bank: AbstractSet[str] = frozenset()
    all_letters_found: bool = False
    all_letter_cells_found: bool = False


# -----------------------------
# Pattern matching
# -----------------------------
def matches_pattern(word: str, pattern: str, excluded: AbstractSet[str] = frozenset()) -> bool:
    """
    '_' matches any letter not in `excluded`; other characters must match exactly.
    """
    if len(word) != len(pattern):
        return False
    word = word.upper()
    for w, p in zip(word, pattern.upper()):
        if p == UNKNOWN_LETTER:
            if w in excluded:
                return False
        elif w != p:
            return False
    return True


def matching_words(pattern: str, word_bank: Iterable[str], excluded: AbstractSet[str] = frozenset()) -> List[str]:
    return sorted({w.upper() for w in word_bank if matches_pattern(w, pattern, excluded)})


def has_revealed_letters(pattern: str) -> bool:
    return any(ch != UNKNOWN_LETTER for ch in pattern)


def _pattern_exclusions(pattern: str, missed_letters: AbstractSet[str]) -> Set[str]:
    # A letter that is known shows up everywhere in the word, so it cannot hide behind '_'.
    return {ch for ch in pattern if ch != UNKNOWN_LETTER} | set(missed_letters)


def _pick_from_top(ranked: Sequence, pool_size: int, rng: random.Random) -> int:
    pool_size = max(1, min(pool_size, len(ranked)))
    return rng.randrange(pool_size)


# -----------------------------
# Letters
# -----------------------------
def pattern_bonus(letter: str, ctx: TurnContext) -> float:
    """Sum over unsolved patterns of the share of bank candidates that contain `letter`."""
    if not ctx.patterns or not ctx.word_bank:
        return 0.0
    total = 0.0
    for i, pattern in enumerate(ctx.patterns):
        if i < len(ctx.words_solved) and ctx.words_solved[i]:
            continue
        if letter in pattern:
            continue
        candidates = matching_words(pattern, ctx.word_bank, _pattern_exclusions(pattern, ctx.missed_letters))
        if candidates:
            total += sum(1 for w in candidates if letter in w) / len(candidates)
    return total


def score_letters(ctx: TurnContext) -> List[Tuple[str, float]]:
    scored = [
        (letter, letter_score(letter, pattern_bonus(letter, ctx) * PATTERN_BONUS_WEIGHT))
        for letter in unguessed_by_frequency(ctx.guessed_letters)
    ]
    scored.sort(key=lambda item: (-item[1], frequency_rank(item[0]), item[0]))
    return scored


def evaluate_letter_guess(ctx: TurnContext, config: AIConfig, rng: random.Random) -> Optional[GuessRecommendation]:
    if ctx.all_letters_found:
        return None
    scored = score_letters(ctx)
    if not scored:
        return None

    idx = _pick_from_top(scored, config.letter_selection_pool_size(ctx.skill), rng)
    letter, score = scored[idx]
    best = scored[0][1]
    confidence = score / best if best > 0 else 0.5
    return GuessRecommendation(LetterGuess(letter), confidence)


# -----------------------------
# Coordinates
# -----------------------------
def proximity_bonus(r: int, c: int, hits: AbstractSet[Cell], grid_size: int) -> float:
    if not hits or is_adjacent_to_any(r, c, hits, grid_size):
        return 0.0
    nearest = min(abs(r - hr) + abs(c - hc) for hr, hc in hits)
    if PROXIMITY_MIN_DISTANCE <= nearest <= PROXIMITY_MAX_DISTANCE:
        return PROXIMITY_BONUS
    return 0.0


def score_coordinates(ctx: TurnContext) -> List[Tuple[Cell, float]]:
    scored: List[Tuple[Cell, float]] = []
    for r, c in unguessed_coordinates(ctx.grid_size, ctx.guessed_coordinates):
        score = calculate_coordinate_score(r, c, ctx.hits, ctx.grid_size, ctx.fill_ratio)
        score += proximity_bonus(r, c, ctx.hits, ctx.grid_size)
        scored.append(((r, c), score))
    scored.sort(key=lambda item: (-item[1], item[0]))
    return scored


def evaluate_coordinate_guess(ctx: TurnContext, config: AIConfig, rng: random.Random) -> Optional[GuessRecommendation]:
    if ctx.all_letter_cells_found:
        return None
    scored = score_coordinates(ctx)
    if not scored:
        return None

    idx = _pick_from_top(scored, config.coordinate_selection_pool_size(ctx.skill), rng)
    (r, c), score = scored[idx]
    best = scored[0][1]
    confidence = score / best if best > 0 else 0.5
    # Coordinate guesses are less trustworthy on sparse grids.
    confidence *= lerp(0.5, 1.0, ctx.fill_ratio / HIGH_DENSITY_THRESHOLD)
    return GuessRecommendation(CoordinateGuess(r, c), max(0.0, min(1.0, confidence)))


# -----------------------------
# Words
# -----------------------------
def match_confidence(match_count: int) -> float:
    if match_count <= 0:
        return 0.0
    if match_count == 1:
        return SINGLE_MATCH_CONFIDENCE
    return 1.0 / match_count


def word_candidates(ctx: TurnContext, index: int) -> Tuple[List[str], float]:
    """Candidate words for one unsolved pattern and the confidence in guessing one of them."""
    pattern = ctx.patterns[index]
    if UNKNOWN_LETTER not in pattern:
        if pattern in ctx.guessed_words:
            return [], 0.0
        return [pattern], REVEALED_WORD_CONFIDENCE
    if not has_revealed_letters(pattern) or not ctx.word_bank:
        return [], 0.0

    matches = [
        w
        for w in matching_words(pattern, ctx.word_bank, _pattern_exclusions(pattern, ctx.missed_letters))
        if w not in ctx.guessed_words
    ]
    return matches, match_confidence(len(matches))


def evaluate_word_guess(ctx: TurnContext, config: AIConfig, rng: random.Random) -> Optional[GuessRecommendation]:
    threshold = config.word_guess_threshold_for_skill(ctx.skill)

    best_index = -1
    best_matches: List[str] = []
    best_confidence = 0.0
    for i in range(len(ctx.patterns)):
        if i < len(ctx.words_solved) and ctx.words_solved[i]:
            continue
        matches, confidence = word_candidates(ctx, i)
        if matches and confidence > best_confidence:
            best_index, best_matches, best_confidence = i, matches, confidence

    if best_index < 0:
        return None
    if best_confidence < threshold or best_confidence < MINIMUM_VIABLE_CONFIDENCE:
        return None
    text = rng.choice(best_matches)
    return GuessRecommendation(WordGuess(text, best_index), best_confidence)


# -----------------------------
# Debug breakdowns
# -----------------------------
def letter_score_breakdown(ctx: TurnContext, config: AIConfig, top_n: int = 10) -> str:
    scored = score_letters(ctx)
    lines = ["Letter scores (top candidates):"]
    for i, (letter, score) in enumerate(scored[:top_n], start=1):
        lines.append(f"  {i}. {letter}: {score:.2f}")
    lines.append(f"Selection pool size: {config.letter_selection_pool_size(ctx.skill)} (skill: {ctx.skill:.2f})")
    return "\n".join(lines)


def coordinate_score_breakdown(ctx: TurnContext, config: AIConfig, top_n: int = 10) -> str:
    scored = score_coordinates(ctx)
    lines = ["Coordinate scores (top candidates):"]
    for i, ((r, c), score) in enumerate(scored[:top_n], start=1):
        lines.append(f"  {i}. {coordinate_to_string(r, c)}: {score:.2f}")
    lines.append(f"Selection pool size: {config.coordinate_selection_pool_size(ctx.skill)} (skill: {ctx.skill:.2f})")
    lines.append(f"Fill ratio: {ctx.fill_ratio:.1%} ({density_category(ctx.fill_ratio)})")
    return "\n".join(lines)


def word_guess_breakdown(ctx: TurnContext, config: AIConfig) -> str:
    threshold = config.word_guess_threshold_for_skill(ctx.skill)
    lines = [f"Word guess analysis (skill: {ctx.skill:.2f}, threshold: {threshold:.0%}):"]
    for i, pattern in enumerate(ctx.patterns):
        solved = i < len(ctx.words_solved) and ctx.words_solved[i]
        lines.append(f"Word {i + 1}: {pattern}{' (SOLVED)' if solved else ''}")
        if solved:
            continue
        matches, confidence = word_candidates(ctx, i)
        lines.append(f"  -> {len(matches)} matches, confidence: {confidence:.0%}")
        if matches:
            shown = ", ".join(matches[:5])
            lines.append(f"  -> Candidates: {shown}{'...' if len(matches) > 5 else ''}")
        lines.append("  -> WOULD GUESS" if matches and confidence >= threshold else "  -> Below threshold")
    return "\n".join(lines)
