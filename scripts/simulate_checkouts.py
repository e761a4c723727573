"""
Monte Carlo checkout simulation.

Throw many darts at one target, or play many practice games along the
recommended routes, and report the outcome distribution.

Usage:
    python scripts/simulate_checkouts.py throws --target T20 --score 100 -n 10000
    python scripts/simulate_checkouts.py games --score 121 -n 2000 --triple 70
    python scripts/simulate_checkouts.py games --difficulty hard --json
"""
import sys
import json
import argparse
from collections import Counter
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from checkout_trainer.core import Config, DifficultyBand, PracticeSettings, build_practice_settings
from checkout_trainer.board import parse_target, BULLSEYE
from checkout_trainer.checkout import recommended_route
from checkout_trainer.simulation import ThrowSimulator, build_simulation_config
from checkout_trainer.game import PracticeGame, GameStatus
import logging

# Setup logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def choose_target(game: PracticeGame):
    """Aim at the next dart of the recommended route, or T20 to set one up."""
    route = recommended_route(game.pending_score)
    if route is not None:
        return route.targets[0]
    if game.pending_score <= 60 and game.pending_score % 2 == 0:
        return BULLSEYE if game.pending_score == 50 else parse_target(f"D{game.pending_score // 2}")
    return parse_target("T20" if game.pending_score > 60 else f"S{min(game.pending_score - 2, 20)}")


def run_throws(args, settings: PracticeSettings, simulator: ThrowSimulator) -> dict:
    target = parse_target(args.target)
    probability = settings.hit_probability(target.zone)

    hits = Counter()
    scores = np.empty(args.iterations, dtype=np.int64)
    for i in range(args.iterations):
        result = simulator.simulate(target, args.score, probability)
        hits[result.hit.label] += 1
        scores[i] = result.score

    return {
        "target": target.label,
        "remaining_score": args.score,
        "hit_probability": probability,
        "iterations": args.iterations,
        "perfect_hit_rate": hits[target.label] / args.iterations,
        "mean_score": float(scores.mean()),
        "hits": dict(hits.most_common()),
    }


def run_games(args, settings: PracticeSettings, simulator: ThrowSimulator, rng) -> dict:
    game = PracticeGame(settings=settings, simulator=simulator, rng=rng, starting_score=args.score)

    darts = []
    wins = 0
    for _ in range(args.iterations):
        if args.score is None:
            game.reset()
        else:
            game.try_again()

        while not game.is_over:
            game.throw(choose_target(game))

        if game.status == GameStatus.WON:
            wins += 1
            darts.append(game.darts_thrown)

    return {
        "starting_score": args.score,
        "difficulty": settings.difficulty.value,
        "iterations": args.iterations,
        "win_rate": wins / args.iterations,
        "mean_darts_to_finish": float(np.mean(darts)) if darts else None,
        "median_darts_to_finish": float(np.median(darts)) if darts else None,
    }


def main():
    parser = argparse.ArgumentParser(description="Simulate darts checkout practice")
    parser.add_argument("mode", choices=["throws", "games"], help="What to simulate")
    parser.add_argument("--target", type=str, default="T20", help="Aimed target for 'throws' (e.g. T20, D16, Bull)")
    parser.add_argument("--score", type=int, default=None, help="Remaining/starting score")
    parser.add_argument("-n", "--iterations", type=int, default=10000, help="Number of darts or games")
    parser.add_argument("--config", type=str, default=None, help="Path to config YAML")
    parser.add_argument("--triple", type=int, default=None, help="Triple hit percentage")
    parser.add_argument("--double", type=int, default=None, help="Double hit percentage")
    parser.add_argument("--single", type=int, default=None, help="Single hit percentage")
    parser.add_argument("--difficulty", type=str, default=None,
                        choices=[band.value for band in DifficultyBand],
                        help="Starting score band for 'games' without --score")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    config = Config(Path(args.config) if args.config else None)
    for zone in ("triple", "double", "single"):
        if getattr(args, zone) is not None:
            config.data["accuracy"][zone] = getattr(args, zone)
    if args.difficulty:
        config.data["practice"]["difficulty"] = args.difficulty
    if args.seed is not None:
        config.data["simulation"]["seed"] = args.seed

    settings = build_practice_settings(config)
    simulation_config = build_simulation_config(config)
    rng = np.random.default_rng(simulation_config.seed)
    simulator = ThrowSimulator(simulation_config, rng=rng)

    if args.mode == "throws":
        if args.score is None:
            args.score = 501
        report = run_throws(args, settings, simulator)
    else:
        report = run_games(args, settings, simulator, rng)

    if args.json:
        print(json.dumps(report, indent=2))
        return

    print("\n" + "=" * 50)
    for key, value in report.items():
        if isinstance(value, dict):
            print(f"{key}:")
            for label, count in value.items():
                pct = count / args.iterations * 100
                print(f"  {label:>6} {count:7} ({pct:5.1f}%)")
        elif isinstance(value, float):
            print(f"{key}: {value:.3f}")
        else:
            print(f"{key}: {value}")
    print("=" * 50 + "\n")


if __name__ == "__main__":
    main()
