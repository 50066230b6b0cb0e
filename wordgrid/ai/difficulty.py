import logging
from collections import deque
from typing import Deque, Optional

from wordgrid.domain.types import DifficultyPreset

from .config import AIConfig

log = logging.getLogger("wordgrid.ai.difficulty")

ADJUST_INCREASE = "increase"
ADJUST_DECREASE = "decrease"


class DifficultyController:
    """
    Rubber-banding skill controller driven by the human player's guesses
    against the AI's own grid.

    A run of `hits_to_increase` player hits raises skill by one step, a run of
    `misses_to_decrease` player misses lowers it. Repeated adjustments in the
    same direction raise that direction's threshold so skill settles instead of
    running to an extreme.
    """

    def __init__(self, config: AIConfig, preset: DifficultyPreset = DifficultyPreset.NORMAL):
        self.config = config
        self.preset = preset
        self.skill = 0.0
        self.hits_to_increase = 0
        self.misses_to_decrease = 0
        self.consecutive_hits = 0
        self.consecutive_misses = 0
        self.same_direction_adjustments = 0
        self.last_adjustment: Optional[str] = None
        self.recent_outcomes: Deque[bool] = deque(maxlen=max(1, config.recent_guesses_to_track))
        self.reset(preset)

    def reset(self, preset: Optional[DifficultyPreset] = None) -> None:
        if preset is not None:
            self.preset = preset
        cfg = self.config
        self.skill = cfg.start_skill_for(self.preset)
        self.hits_to_increase = cfg.hits_to_increase_for(self.preset)
        self.misses_to_decrease = cfg.misses_to_decrease_for(self.preset)
        self.consecutive_hits = 0
        self.consecutive_misses = 0
        self.same_direction_adjustments = 0
        self.last_adjustment = None
        self.recent_outcomes.clear()
        log.debug(
            "Difficulty reset for %s: skill=%.2f hits_to_increase=%d misses_to_decrease=%d",
            self.preset.value,
            self.skill,
            self.hits_to_increase,
            self.misses_to_decrease,
        )

    def record_player_guess(self, was_hit: bool) -> Optional[str]:
        """Feed one resolved player guess. Returns the adjustment made, if any."""
        self.recent_outcomes.append(bool(was_hit))

        if was_hit:
            self.consecutive_hits += 1
            self.consecutive_misses = 0
            if self.consecutive_hits >= self.hits_to_increase:
                self.consecutive_hits = 0
                self._adjust(ADJUST_INCREASE)
                return ADJUST_INCREASE
        else:
            self.consecutive_misses += 1
            self.consecutive_hits = 0
            if self.consecutive_misses >= self.misses_to_decrease:
                self.consecutive_misses = 0
                self._adjust(ADJUST_DECREASE)
                return ADJUST_DECREASE
        return None

    def _adjust(self, direction: str) -> None:
        cfg = self.config
        old_skill = self.skill
        step = cfg.skill_adjustment_step if direction == ADJUST_INCREASE else -cfg.skill_adjustment_step
        self.skill = cfg.clamp_skill(self.skill + step)

        if self.last_adjustment == direction:
            self.same_direction_adjustments += 1
        else:
            self.same_direction_adjustments = 1
        self.last_adjustment = direction

        log.info("AI skill %s: %.2f -> %.2f", direction, old_skill, self.skill)

        if self.same_direction_adjustments >= cfg.consecutive_adjustments_to_adapt:
            self._adapt_threshold(direction)
            self.same_direction_adjustments = 0

    def _adapt_threshold(self, direction: str) -> None:
        cfg = self.config
        if direction == ADJUST_INCREASE:
            old = self.hits_to_increase
            self.hits_to_increase = cfg.clamp_hits_to_increase(old + 1)
            log.info("hits_to_increase adapted: %d -> %d", old, self.hits_to_increase)
        else:
            old = self.misses_to_decrease
            self.misses_to_decrease = cfg.clamp_misses_to_decrease(old + 1)
            log.info("misses_to_decrease adapted: %d -> %d", old, self.misses_to_decrease)

    def recent_hit_rate(self) -> float:
        if not self.recent_outcomes:
            return 0.0
        return sum(1 for hit in self.recent_outcomes if hit) / len(self.recent_outcomes)

    def debug_summary(self) -> str:
        recent = "".join("H" if hit else "M" for hit in self.recent_outcomes) or "-"
        return "\n".join(
            [
                f"Preset: {self.preset.value}",
                f"Skill: {self.skill:.2f}",
                f"HitsToIncrease: {self.hits_to_increase}",
                f"MissesToDecrease: {self.misses_to_decrease}",
                f"Streak: hits={self.consecutive_hits} misses={self.consecutive_misses}",
                f"Same-direction adjustments: {self.same_direction_adjustments} ({self.last_adjustment or 'none'})",
                f"Recent player guesses: {recent}",
            ]
        )
