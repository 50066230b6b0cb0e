import os
import random
import unittest
from unittest import mock

from wordgrid.domain.types import DifficultyPreset
from wordgrid.sim.match_sim import (
    DEFAULT_SIM_GAMES,
    default_game_count,
    simulate_ai_game,
    simulate_many,
    summarize_results,
)
from wordgrid.strategies.registry import strategy_keys


class MatchSimTests(unittest.TestCase):
    def test_single_game(self):
        result = simulate_ai_game(DifficultyPreset.NORMAL, rng=random.Random(3))
        self.assertGreater(result.turns, 0)
        self.assertEqual(len(result.skill_trace), result.turns + 1)
        self.assertLessEqual(result.misses, result.miss_limit)
        self.assertEqual(sum(result.guess_counts.values()), result.turns)
        for skill in result.skill_trace:
            self.assertGreaterEqual(skill, 0.15)
            self.assertLessEqual(skill, 0.95)
        if not result.won:
            self.assertEqual(result.misses, result.miss_limit)

    def test_games_are_reproducible(self):
        a = simulate_ai_game(DifficultyPreset.HARD, grid_size=6, rng=random.Random(8))
        b = simulate_ai_game(DifficultyPreset.HARD, grid_size=6, rng=random.Random(8))
        self.assertEqual(a, b)

    def test_many_and_summary(self):
        results = simulate_many(3, DifficultyPreset.EASY, seed=1, grid_size=6)
        summary = summarize_results(results)
        self.assertEqual(summary["games"], 3)
        self.assertTrue(0.0 <= summary["win_rate"] <= 1.0)
        self.assertEqual(summarize_results([])["games"], 0)

    def test_guesses_counted_per_strategy(self):
        results = simulate_many(2, DifficultyPreset.NORMAL, seed=4, grid_size=6)
        for result in results:
            self.assertEqual(sorted(result.guess_counts), sorted(strategy_keys()))
        summary = summarize_results(results)
        shares = [summary[f"{key}_share"] for key in strategy_keys()]
        self.assertAlmostEqual(sum(shares), 1.0)
        self.assertEqual(summarize_results([])["letter_share"], 0.0)

    def test_game_count_from_env(self):
        with mock.patch.dict(os.environ, {"WORDGRID_SIM_GAMES": "7"}):
            self.assertEqual(default_game_count(), 7)
        with mock.patch.dict(os.environ, {"WORDGRID_SIM_GAMES": "lots"}):
            self.assertEqual(default_game_count(), DEFAULT_SIM_GAMES)

    def test_summary_event_logged_when_enabled(self):
        with mock.patch.dict(os.environ, {"WORDGRID_SIM_SUMMARY": "1"}):
            with self.assertLogs("wordgrid", level="INFO") as logs:
                simulate_ai_game(DifficultyPreset.NORMAL, grid_size=6, rng=random.Random(5))
        self.assertTrue(any("Match finished" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
