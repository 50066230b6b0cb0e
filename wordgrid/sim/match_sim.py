import logging
import os
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from wordgrid.ai.config import AIConfig
from wordgrid.ai.opponent import (
    build_view,
    debug_summary,
    decide_guess,
    initialize_difficulty,
    record_player_guess,
    report_outcome,
)
from wordgrid.domain.config import DEFAULT_GRID_SIZE, DEFAULT_WORD_LENGTHS
from wordgrid.domain.guess_state import PlayerGuessState, all_words_found, calculate_miss_limit, resolve_guess
from wordgrid.domain.types import CoordinateGuess, DifficultyPreset, GuessResult, LetterGuess, WordGuess
from wordgrid.placement.setup import setup_ai_grid
from wordgrid.placement.wordbank import builtin_word_lists
from wordgrid.strategies.registry import strategy_keys
from wordgrid.utils.debug import debug_event

log = logging.getLogger("wordgrid.sim")

DEFAULT_SIM_GAMES = 20


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() not in {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
        return value if value > 0 else default
    except ValueError:
        return default


def default_game_count() -> int:
    return _env_int("WORDGRID_SIM_GAMES", DEFAULT_SIM_GAMES)


@dataclass
class MatchResult:
    turns: int
    misses: int
    miss_limit: int
    won: bool
    skill_trace: List[float] = field(default_factory=list)
    guess_counts: Dict[str, int] = field(default_factory=lambda: {k: 0 for k in strategy_keys()})

    @property
    def final_skill(self) -> float:
        return self.skill_trace[-1] if self.skill_trace else 0.0


def _guess_kind(guess) -> str:
    if isinstance(guess, LetterGuess):
        return "letter"
    if isinstance(guess, CoordinateGuess):
        return "coordinate"
    if isinstance(guess, WordGuess):
        return "word"
    raise TypeError(f"Unsupported guess type: {type(guess).__name__}")


def simulate_ai_game(
    preset: DifficultyPreset = DifficultyPreset.NORMAL,
    grid_size: int = DEFAULT_GRID_SIZE,
    word_count: int = 3,
    player_hit_rate: float = 0.5,
    rng: Optional[random.Random] = None,
    config: Optional[AIConfig] = None,
    word_lengths: Sequence[int] = DEFAULT_WORD_LENGTHS,
    max_turns: Optional[int] = None,
) -> MatchResult:
    """
    Play one AI-only match against a randomly set up grid.

    The human side is a coin flip per turn with `player_hit_rate`, which is
    only used to drive the difficulty controller.
    """
    if rng is None:
        rng = random.Random()

    grid = setup_ai_grid(grid_size, builtin_word_lists(), rng, word_count=word_count, word_lengths=word_lengths)
    state = initialize_difficulty(preset, config=config, seed=rng.randrange(2**31))
    guesses = PlayerGuessState(miss_limit=calculate_miss_limit(grid_size, word_count, preset))

    if max_turns is None:
        max_turns = grid_size * grid_size + 26 + word_count

    result = MatchResult(turns=0, misses=0, miss_limit=guesses.miss_limit, won=False)
    result.skill_trace.append(state.skill)

    while result.turns < max_turns:
        record_player_guess(state, rng.random() < player_hit_rate)

        guess = decide_guess(state, build_view(grid, guesses))
        if guess is None:
            break
        outcome = resolve_guess(grid, guesses, guess)
        if outcome in (GuessResult.ALREADY_GUESSED, GuessResult.INVALID):
            log.warning("AI produced %s guess %s", outcome.value, guess)
            break

        report_outcome(state, guess, outcome == GuessResult.HIT)
        kind = _guess_kind(guess)
        result.guess_counts[kind] += 1
        result.turns += 1
        result.skill_trace.append(state.skill)

        if all_words_found(grid, guesses):
            result.won = True
            break
        if guesses.is_out_of_misses:
            break

    result.misses = guesses.miss_count
    if _env_flag("WORDGRID_SIM_SUMMARY", False):
        debug_event("Match finished", f"{result.turns} turns, won={result.won}", debug_summary(state))
    log.debug(
        "Simulated %s match: turns=%d misses=%d/%d won=%s",
        preset.value,
        result.turns,
        result.misses,
        result.miss_limit,
        result.won,
    )
    return result


def simulate_many(
    games: int,
    preset: DifficultyPreset = DifficultyPreset.NORMAL,
    seed: Optional[int] = None,
    **kwargs,
) -> List[MatchResult]:
    rng = random.Random(seed)
    return [simulate_ai_game(preset, rng=rng, **kwargs) for _ in range(max(0, games))]


def summarize_results(results: Sequence[MatchResult]) -> Dict[str, float]:
    n = len(results)
    total_guesses = sum(r.turns for r in results)
    summary = {
        "games": n,
        "win_rate": sum(1 for r in results if r.won) / n if n else 0.0,
        "avg_turns": total_guesses / n if n else 0.0,
        "avg_misses": sum(r.misses for r in results) / n if n else 0.0,
        "avg_final_skill": sum(r.final_skill for r in results) / n if n else 0.0,
    }
    # Share of all guesses made by each strategy.
    for key in strategy_keys():
        used = sum(r.guess_counts.get(key, 0) for r in results)
        summary[f"{key}_share"] = used / total_guesses if total_guesses else 0.0
    return summary
