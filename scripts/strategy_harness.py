#!/usr/bin/env python3
import argparse
import hashlib
import random
import statistics
import time
from typing import Iterable, List

from wordgrid.domain.config import MAX_GRID_SIZE, MIN_GRID_SIZE
from wordgrid.domain.types import DifficultyPreset
from wordgrid.sim.match_sim import default_game_count, simulate_ai_game
from wordgrid.strategies.registry import strategy_defs, strategy_keys
from wordgrid.utils.debug import configure_logging


def _stable_seed(global_seed: int, preset_key: str, game_index: int) -> int:
    payload = f"{int(global_seed)}|{preset_key}|{int(game_index)}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8).digest()
    return int.from_bytes(digest, "little") & 0x7FFFFFFF


def _percentile(values: List[int], pct: float) -> float:
    if not values:
        return 0.0
    if pct <= 0:
        return float(values[0])
    if pct >= 100:
        return float(values[-1])
    k = (len(values) - 1) * (pct / 100.0)
    f = int(k)
    c = min(f + 1, len(values) - 1)
    if f == c:
        return float(values[f])
    return float(values[f] * (c - k) + values[c] * (k - f))


def _resolve_presets(raw: str) -> List[DifficultyPreset]:
    if not raw or raw.strip().lower() in {"all", "*"}:
        return list(DifficultyPreset)
    return [DifficultyPreset.parse(p) for p in raw.split(",") if p.strip()]


def _run_preset(
    preset: DifficultyPreset,
    grid_size: int,
    word_count: int,
    hit_rate: float,
    games: int,
    seed: int,
) -> dict:
    turns: List[int] = []
    wins = 0
    final_skills: List[float] = []
    guess_counts = {k: 0 for k in strategy_keys()}
    start = time.perf_counter()
    for i in range(games):
        rng = random.Random(_stable_seed(seed, preset.value, i))
        result = simulate_ai_game(
            preset,
            grid_size=grid_size,
            word_count=word_count,
            player_hit_rate=hit_rate,
            rng=rng,
        )
        turns.append(result.turns)
        final_skills.append(result.final_skill)
        for key, count in result.guess_counts.items():
            guess_counts[key] += count
        wins += 1 if result.won else 0
    elapsed = time.perf_counter() - start
    turns_sorted = sorted(turns)
    return {
        "games": games,
        "win_rate": wins / games if games else 0.0,
        "mean": statistics.mean(turns) if turns else 0.0,
        "median": statistics.median(turns_sorted) if turns_sorted else 0.0,
        "p90": _percentile(turns_sorted, 90.0),
        "skill": statistics.mean(final_skills) if final_skills else 0.0,
        "time": elapsed,
        "guesses": guess_counts,
    }


def main(argv: Iterable[str] = None) -> int:
    parser = argparse.ArgumentParser(description="AI harness: compare difficulty presets on fixed RNG seeds.")
    parser.add_argument("--grid-size", type=int, default=8, help="Grid size (6-12)")
    parser.add_argument("--words", type=int, default=3, help="Words per grid (3 or 4)")
    parser.add_argument("--games", type=int, default=default_game_count(), help="Games per preset")
    parser.add_argument("--seed", type=int, default=1337, help="Global seed")
    parser.add_argument("--hit-rate", type=float, default=0.5, help="Simulated human hit rate")
    parser.add_argument("--presets", default="all", help="Comma-separated presets (Easy,Normal,Hard) or 'all'")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if not (MIN_GRID_SIZE <= args.grid_size <= MAX_GRID_SIZE):
        parser.error(f"--grid-size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}")

    configure_logging(args.debug)
    presets = _resolve_presets(args.presets)

    print(f"Grid: {args.grid_size}x{args.grid_size}, words: {args.words}, human hit rate: {args.hit_rate:.2f}")
    print(f"Games per preset: {args.games}, Seed: {args.seed}")
    if args.debug:
        for d in strategy_defs():
            print(f"  {d['name']}: {d['description']}")
    print()

    rows = []
    for preset in presets:
        stats = _run_preset(preset, args.grid_size, args.words, args.hit_rate, args.games, args.seed)
        rows.append((preset.value, stats))

    header = f"{'Preset':<10} {'Win%':>6} {'Mean':>6} {'Median':>6} {'P90':>6} {'Skill':>6} {'Time(s)':>8}"
    print(header)
    print("-" * len(header))
    for key, s in rows:
        print(
            f"{key:<10} {s['win_rate'] * 100:>6.1f} {s['mean']:>6.2f} {s['median']:>6.0f} {s['p90']:>6.0f} "
            f"{s['skill']:>6.2f} {s['time']:>8.2f}"
        )

    print()
    names = {str(d["key"]): str(d["name"]) for d in strategy_defs()}
    for key, s in rows:
        total = sum(s["guesses"].values()) or 1
        mix = ", ".join(f"{names[k]} {s['guesses'][k] / total:.0%}" for k in strategy_keys())
        print(f"{key:<10} {mix}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
