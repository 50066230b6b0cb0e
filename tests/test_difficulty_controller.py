import random
import unittest

from wordgrid.ai.config import AIConfig
from wordgrid.ai.difficulty import ADJUST_DECREASE, ADJUST_INCREASE, DifficultyController
from wordgrid.domain.types import DifficultyPreset


class DifficultyControllerTests(unittest.TestCase):
    def setUp(self):
        self.config = AIConfig()
        self.controller = DifficultyController(self.config, DifficultyPreset.NORMAL)

    def test_normal_starting_state(self):
        c = self.controller
        self.assertAlmostEqual(c.skill, 0.50)
        self.assertEqual(c.hits_to_increase, 3)
        self.assertEqual(c.misses_to_decrease, 3)

    def test_three_hits_raise_skill(self):
        c = self.controller
        self.assertIsNone(c.record_player_guess(True))
        self.assertIsNone(c.record_player_guess(True))
        self.assertEqual(c.record_player_guess(True), ADJUST_INCREASE)
        self.assertAlmostEqual(c.skill, 0.65)
        self.assertEqual(c.consecutive_hits, 0)

    def test_opposite_outcome_breaks_streak(self):
        c = self.controller
        for hit in (True, True, False, True, True):
            self.assertIsNone(c.record_player_guess(hit))
        self.assertAlmostEqual(c.skill, 0.50)
        self.assertEqual(c.consecutive_hits, 2)
        self.assertEqual(c.consecutive_misses, 0)

    def test_three_misses_lower_skill(self):
        c = self.controller
        results = [c.record_player_guess(False) for _ in range(3)]
        self.assertEqual(results, [None, None, ADJUST_DECREASE])
        self.assertAlmostEqual(c.skill, 0.35)

    def test_repeated_increases_raise_threshold(self):
        c = self.controller
        for _ in range(3):
            c.record_player_guess(True)
        self.assertEqual(c.same_direction_adjustments, 1)
        self.assertEqual(c.hits_to_increase, 3)

        for _ in range(3):
            c.record_player_guess(True)
        self.assertAlmostEqual(c.skill, 0.80)
        self.assertEqual(c.hits_to_increase, 4)
        self.assertEqual(c.misses_to_decrease, 3)
        self.assertEqual(c.same_direction_adjustments, 0)

    def test_direction_change_restarts_counter(self):
        c = self.controller
        for _ in range(3):
            c.record_player_guess(True)
        for _ in range(3):
            c.record_player_guess(False)
        self.assertEqual(c.last_adjustment, ADJUST_DECREASE)
        self.assertEqual(c.same_direction_adjustments, 1)
        self.assertEqual(c.hits_to_increase, 3)
        self.assertEqual(c.misses_to_decrease, 3)

    def test_skill_clamped_at_bottom(self):
        c = DifficultyController(self.config, DifficultyPreset.EASY)
        c.record_player_guess(False)
        c.record_player_guess(False)
        self.assertAlmostEqual(c.skill, 0.15)

    def test_values_stay_in_bounds(self):
        cfg = self.config
        rng = random.Random(42)
        for preset in DifficultyPreset:
            c = DifficultyController(cfg, preset)
            for _ in range(500):
                c.record_player_guess(rng.random() < 0.5)
                self.assertGreaterEqual(c.skill, cfg.min_skill)
                self.assertLessEqual(c.skill, cfg.max_skill)
                self.assertGreaterEqual(c.hits_to_increase, cfg.min_hits_to_increase)
                self.assertLessEqual(c.hits_to_increase, cfg.max_hits_to_increase)
                self.assertGreaterEqual(c.misses_to_decrease, cfg.min_misses_to_decrease)
                self.assertLessEqual(c.misses_to_decrease, cfg.max_misses_to_decrease)

    def test_long_hit_run_saturates(self):
        c = self.controller
        for _ in range(200):
            c.record_player_guess(True)
        self.assertAlmostEqual(c.skill, self.config.max_skill)
        self.assertEqual(c.hits_to_increase, self.config.max_hits_to_increase)

    def test_reset(self):
        c = self.controller
        for _ in range(6):
            c.record_player_guess(True)
        c.reset(DifficultyPreset.HARD)
        self.assertAlmostEqual(c.skill, 0.75)
        self.assertEqual(c.hits_to_increase, 2)
        self.assertEqual(c.misses_to_decrease, 5)
        self.assertEqual(c.consecutive_hits, 0)
        self.assertIsNone(c.last_adjustment)
        self.assertEqual(len(c.recent_outcomes), 0)

    def test_recent_window_and_summary(self):
        c = self.controller
        for hit in (True, False, True, True, False, False, True):
            c.record_player_guess(hit)
        self.assertEqual(len(c.recent_outcomes), self.config.recent_guesses_to_track)
        self.assertAlmostEqual(c.recent_hit_rate(), 3 / 5)
        summary = c.debug_summary()
        self.assertIn("Skill: 0.50", summary)
        self.assertIn("HitsToIncrease: 3", summary)


if __name__ == "__main__":
    unittest.main()
