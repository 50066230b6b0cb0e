import random

from wordgrid.domain.types import DifficultyPreset
from wordgrid.sim.match_sim import simulate_ai_game


def main() -> None:
    result = simulate_ai_game(
        DifficultyPreset.NORMAL,
        grid_size=6,
        word_count=3,
        rng=random.Random(0),
    )
    print(
        f"Smoke OK: turns={result.turns} misses={result.misses}/{result.miss_limit} "
        f"won={result.won} final_skill={result.final_skill:.2f}"
    )


if __name__ == "__main__":
    main()
