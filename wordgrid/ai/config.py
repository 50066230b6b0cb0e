import logging
import random
from dataclasses import asdict, dataclass, fields
from typing import Dict, List, Mapping, Tuple

from wordgrid.domain.config import MEDIUM_DENSITY_THRESHOLD
from wordgrid.domain.types import DifficultyPreset

log = logging.getLogger("wordgrid.ai")


@dataclass(frozen=True)
class AIConfig:
    """Match-scoped AI tuning. Read-only once a match starts."""

    # Skill
    min_skill: float = 0.15
    max_skill: float = 0.95
    skill_adjustment_step: float = 0.15

    easy_start_skill: float = 0.25
    normal_start_skill: float = 0.50
    hard_start_skill: float = 0.75

    # Streak thresholds per preset
    easy_hits_to_increase: int = 5
    normal_hits_to_increase: int = 3
    hard_hits_to_increase: int = 2

    easy_misses_to_decrease: int = 2
    normal_misses_to_decrease: int = 3
    hard_misses_to_decrease: int = 5

    # Adaptive threshold bounds
    min_hits_to_increase: int = 1
    max_hits_to_increase: int = 7
    min_misses_to_decrease: int = 1
    max_misses_to_decrease: int = 7
    consecutive_adjustments_to_adapt: int = 2
    recent_guesses_to_track: int = 5

    # Strategy
    high_density_threshold: float = 0.35
    low_density_threshold: float = 0.12
    word_guess_risk_factor: float = 0.7

    # Memory
    max_forget_chance: float = 0.3
    always_remember_recent: int = 3
    perfect_memory_skill: float = 0.8
    memory_window: int = 200

    # Presentation only; the decision itself never waits.
    min_think_time: float = 1.0
    max_think_time: float = 3.0

    # -----------------------------
    # Preset lookups
    # -----------------------------
    def start_skill_for(self, preset: DifficultyPreset) -> float:
        value = {
            DifficultyPreset.EASY: self.easy_start_skill,
            DifficultyPreset.NORMAL: self.normal_start_skill,
            DifficultyPreset.HARD: self.hard_start_skill,
        }[preset]
        return self.clamp_skill(value)

    def hits_to_increase_for(self, preset: DifficultyPreset) -> int:
        value = {
            DifficultyPreset.EASY: self.easy_hits_to_increase,
            DifficultyPreset.NORMAL: self.normal_hits_to_increase,
            DifficultyPreset.HARD: self.hard_hits_to_increase,
        }[preset]
        return self.clamp_hits_to_increase(value)

    def misses_to_decrease_for(self, preset: DifficultyPreset) -> int:
        value = {
            DifficultyPreset.EASY: self.easy_misses_to_decrease,
            DifficultyPreset.NORMAL: self.normal_misses_to_decrease,
            DifficultyPreset.HARD: self.hard_misses_to_decrease,
        }[preset]
        return self.clamp_misses_to_decrease(value)

    # -----------------------------
    # Clamping
    # -----------------------------
    def clamp_skill(self, skill: float) -> float:
        return max(self.min_skill, min(self.max_skill, skill))

    def clamp_hits_to_increase(self, value: int) -> int:
        return max(self.min_hits_to_increase, min(self.max_hits_to_increase, value))

    def clamp_misses_to_decrease(self, value: int) -> int:
        return max(self.min_misses_to_decrease, min(self.max_misses_to_decrease, value))

    # -----------------------------
    # Skill-derived parameters
    # -----------------------------
    def forget_chance_for_skill(self, skill: float) -> float:
        skill = max(0.0, min(1.0, skill))
        return (1.0 - skill) * self.max_forget_chance

    def word_guess_threshold_for_skill(self, skill: float) -> float:
        return 1.0 - skill * self.word_guess_risk_factor

    def letter_selection_pool_size(self, skill: float) -> int:
        if skill >= 0.9:
            return 1
        if skill >= 0.7:
            return 2
        if skill >= 0.4:
            return 5
        return 10

    def coordinate_selection_pool_size(self, skill: float) -> int:
        if skill >= 0.9:
            return 1
        if skill >= 0.7:
            return 3
        if skill >= 0.4:
            return 8
        return 15

    def strategy_weights_for_density(self, ratio: float) -> Tuple[float, float]:
        """(letter_weight, coordinate_weight); sparse grids favor letters."""
        if ratio >= self.high_density_threshold:
            return 0.4, 0.6
        if ratio >= MEDIUM_DENSITY_THRESHOLD:
            return 0.5, 0.5
        if ratio >= self.low_density_threshold:
            return 0.65, 0.35
        return 0.8, 0.2

    def random_think_time(self, rng: random.Random) -> float:
        return rng.uniform(self.min_think_time, self.max_think_time)

    # -----------------------------
    # Serialization
    # -----------------------------
    def normalized(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "AIConfig":
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, object] = {}
        for key, value in data.items():
            if key not in known:
                log.warning("Ignoring unknown AI config key %r", key)
                continue
            default = getattr(cls, key)
            kwargs[key] = int(value) if isinstance(default, int) else float(value)
        return cls(**kwargs)


def validate_config(config: AIConfig) -> List[str]:
    errors: List[str] = []

    if not (0.0 <= config.min_skill <= config.max_skill <= 1.0):
        errors.append("skill bounds must satisfy 0 <= min_skill <= max_skill <= 1")
    if config.skill_adjustment_step <= 0:
        errors.append("skill_adjustment_step must be positive")

    if config.min_hits_to_increase < 1 or config.min_hits_to_increase > config.max_hits_to_increase:
        errors.append("hits-to-increase bounds must satisfy 1 <= min <= max")
    if config.min_misses_to_decrease < 1 or config.min_misses_to_decrease > config.max_misses_to_decrease:
        errors.append("misses-to-decrease bounds must satisfy 1 <= min <= max")
    if config.consecutive_adjustments_to_adapt < 1:
        errors.append("consecutive_adjustments_to_adapt must be >= 1")
    if config.recent_guesses_to_track < 1:
        errors.append("recent_guesses_to_track must be >= 1")

    if not (0.0 <= config.low_density_threshold <= MEDIUM_DENSITY_THRESHOLD <= config.high_density_threshold <= 1.0):
        errors.append(
            f"density thresholds must satisfy 0 <= low <= {MEDIUM_DENSITY_THRESHOLD} <= high <= 1"
        )
    if not (0.0 <= config.word_guess_risk_factor <= 1.0):
        errors.append("word_guess_risk_factor must be within [0, 1]")

    if not (0.0 <= config.max_forget_chance <= 1.0):
        errors.append("max_forget_chance must be within [0, 1]")
    if config.always_remember_recent < 0:
        errors.append("always_remember_recent must be >= 0")
    if config.memory_window < 1:
        errors.append("memory_window must be >= 1")
    elif config.memory_window < config.always_remember_recent:
        errors.append("memory_window must be >= always_remember_recent")

    if config.min_think_time < 0 or config.min_think_time > config.max_think_time:
        errors.append("think time range must satisfy 0 <= min <= max")

    return errors


_AI_DIFFICULTY_FOR_PLAYER = {
    DifficultyPreset.EASY: DifficultyPreset.HARD,
    DifficultyPreset.NORMAL: DifficultyPreset.NORMAL,
    DifficultyPreset.HARD: DifficultyPreset.EASY,
}


def ai_difficulty_for_player(player_preset: DifficultyPreset) -> DifficultyPreset:
    """Player Easy means a Hard opponent and player Hard an Easy one."""
    return _AI_DIFFICULTY_FOR_PLAYER[player_preset]
