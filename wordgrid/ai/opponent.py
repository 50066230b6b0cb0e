import logging
import random
from dataclasses import dataclass, field, replace
from typing import AbstractSet, Iterable, List, Optional, Set, Union

from wordgrid.domain.analysis import fill_ratio, fill_ratio_exact
from wordgrid.domain.config import UNKNOWN_LETTER
from wordgrid.domain.grid import Grid
from wordgrid.domain.guess_state import PlayerGuessState, word_pattern
from wordgrid.domain.types import Cell, DifficultyPreset, Guess, describe_guess
from wordgrid.placement.wordbank import builtin_word_bank
from wordgrid.strategies.selection import (
    TurnContext,
    evaluate_coordinate_guess,
    evaluate_letter_guess,
    evaluate_word_guess,
)

from .config import AIConfig, ai_difficulty_for_player, validate_config
from .difficulty import DifficultyController
from .memory import GuessMemory

log = logging.getLogger("wordgrid.ai.opponent")


@dataclass
class OpponentGridView:
    """Everything the AI may see of the grid it is guessing against."""

    grid_size: int
    word_lengths: List[int]
    patterns: List[str]
    words_solved: List[bool]
    guessed_letters: Set[str] = field(default_factory=set)
    hit_letters: Set[str] = field(default_factory=set)
    guessed_coordinates: Set[Cell] = field(default_factory=set)
    hit_coordinates: Set[Cell] = field(default_factory=set)
    guessed_words: Set[str] = field(default_factory=set)
    letter_cell_count: int = 0

    @property
    def missed_letters(self) -> Set[str]:
        return self.guessed_letters - self.hit_letters

    @property
    def fill_ratio(self) -> float:
        if self.letter_cell_count > 0:
            return fill_ratio_exact(self.grid_size, self.letter_cell_count)
        return fill_ratio(self.grid_size, len(self.word_lengths))

    @property
    def all_letters_found(self) -> bool:
        return bool(self.patterns) and all(UNKNOWN_LETTER not in p for p in self.patterns)

    @property
    def all_letter_cells_found(self) -> bool:
        return self.letter_cell_count > 0 and len(self.hit_coordinates) >= self.letter_cell_count


def build_view(grid: Grid, guess_state: PlayerGuessState) -> OpponentGridView:
    patterns = [word_pattern(grid, i, guess_state.known_letters) for i in range(len(grid.words))]
    return OpponentGridView(
        grid_size=grid.size,
        word_lengths=[w.length for w in grid.words],
        patterns=patterns,
        words_solved=[i in guess_state.found_words for i in range(len(grid.words))],
        guessed_letters=set(guess_state.guessed_letters),
        hit_letters=set(guess_state.known_letters),
        guessed_coordinates=set(guess_state.guessed_coordinates),
        hit_coordinates=set(guess_state.hit_coordinates),
        guessed_words=set(guess_state.guessed_words),
        letter_cell_count=grid.letter_count,
    )


@dataclass
class AIState:
    config: AIConfig
    preset: DifficultyPreset
    controller: DifficultyController
    memory: GuessMemory
    rng: random.Random
    word_bank: AbstractSet[str] = frozenset()

    @property
    def skill(self) -> float:
        return self.controller.skill


def initialize_difficulty(
    preset: Union[DifficultyPreset, str],
    config: Optional[AIConfig] = None,
    seed: Optional[int] = None,
    word_bank: Optional[Iterable[str]] = None,
) -> AIState:
    if not isinstance(preset, DifficultyPreset):
        preset = DifficultyPreset.parse(preset)
    config = config or AIConfig()
    errors = validate_config(config)
    if errors:
        raise ValueError("Invalid AI config: " + "; ".join(errors))

    bank = frozenset(w.upper() for w in word_bank) if word_bank is not None else frozenset(builtin_word_bank())
    state = AIState(
        config=config,
        preset=preset,
        controller=DifficultyController(config, preset),
        memory=GuessMemory(config),
        rng=random.Random(seed),
        word_bank=bank,
    )
    log.info("AI initialized: preset=%s skill=%.2f seed=%s", preset.value, state.skill, seed)
    return state


def initialize_for_player(
    player_preset: Union[DifficultyPreset, str],
    config: Optional[AIConfig] = None,
    seed: Optional[int] = None,
    word_bank: Optional[Iterable[str]] = None,
) -> AIState:
    if not isinstance(player_preset, DifficultyPreset):
        player_preset = DifficultyPreset.parse(player_preset)
    return initialize_difficulty(ai_difficulty_for_player(player_preset), config, seed, word_bank)


def _sync_memory(state: AIState, view: OpponentGridView) -> None:
    # Facts visible on the view but never reported count as learned now.
    known_hits = state.memory.ever_learned_hits()
    for cell in sorted(view.hit_coordinates - known_hits):
        state.memory.record_hit(cell)
    known_letters = state.memory.ever_learned_letters()
    for letter in sorted(view.hit_letters - known_letters):
        state.memory.record_revealed_letter(letter)


def _remembered_pattern(pattern: str, letters: Set[str]) -> str:
    return "".join(ch if ch in letters else UNKNOWN_LETTER for ch in pattern)


def build_turn_context(state: AIState, view: OpponentGridView) -> TurnContext:
    skill = state.skill
    letters = state.memory.effective_letters(skill, state.rng)
    hits = state.memory.effective_hits(skill, state.rng)
    return TurnContext(
        grid_size=view.grid_size,
        skill=skill,
        fill_ratio=view.fill_ratio,
        patterns=[_remembered_pattern(p, letters) for p in view.patterns],
        words_solved=list(view.words_solved),
        hits=hits,
        guessed_letters=set(view.guessed_letters),
        missed_letters=view.missed_letters,
        guessed_coordinates=set(view.guessed_coordinates),
        guessed_words=set(view.guessed_words) | state.memory.guessed_words(),
        word_bank=state.word_bank,
        all_letters_found=view.all_letters_found,
        all_letter_cells_found=view.all_letter_cells_found,
    )


def decide_guess(state: AIState, view: OpponentGridView) -> Optional[Guess]:
    """
    Pick exactly one guess for this turn, or None when nothing legal is left.

    A confident word guess preempts; otherwise letter vs coordinate is drawn
    from the density weights, falling back to the other category when the
    drawn one has no candidate.
    """
    _sync_memory(state, view)
    cfg = state.config
    ctx = build_turn_context(state, view)

    word = evaluate_word_guess(ctx, cfg, state.rng)
    if word is not None:
        log.debug("AI word guess %s (confidence %.2f)", describe_guess(word.guess), word.confidence)
        return word.guess

    letter_weight, _ = cfg.strategy_weights_for_density(ctx.fill_ratio)
    if state.rng.random() < letter_weight:
        evaluators = (evaluate_letter_guess, evaluate_coordinate_guess)
    else:
        evaluators = (evaluate_coordinate_guess, evaluate_letter_guess)

    for evaluate in evaluators:
        rec = evaluate(ctx, cfg, state.rng)
        if rec is not None:
            log.debug("AI %s (confidence %.2f, skill %.2f)", describe_guess(rec.guess), rec.confidence, ctx.skill)
            return rec.guess

    # Both categories looked finished; any unguessed target is still legal.
    relaxed = replace(ctx, all_letters_found=False, all_letter_cells_found=False)
    for evaluate in evaluators:
        rec = evaluate(relaxed, cfg, state.rng)
        if rec is not None:
            return rec.guess

    log.info("AI has no legal guess left")
    return None


def report_outcome(state: AIState, guess: Guess, was_hit: bool) -> AIState:
    """Record the result of the AI's own guess."""
    state.memory.record(guess, was_hit)
    state.memory.advance_turn()
    log.debug("AI %s -> %s", describe_guess(guess), "hit" if was_hit else "miss")
    return state


def record_player_guess(state: AIState, was_hit: bool) -> Optional[str]:
    """Feed the human's guess against the AI's grid into the difficulty controller."""
    return state.controller.record_player_guess(was_hit)


def think_time(state: AIState) -> float:
    return state.config.random_think_time(state.rng)


def debug_summary(state: AIState) -> str:
    return "\n".join(
        [
            "=== Difficulty ===",
            state.controller.debug_summary(),
            "=== Memory ===",
            state.memory.debug_summary(state.skill),
        ]
    )
