"""
Terminal checkout practice.

Type a target label (T20, D16, S5, Bull, 25) to throw a dart at it.
Other commands: 'hint', 'retry', 'new', 'stats', 'quit'.

Usage:
    python scripts/practice.py
    python scripts/practice.py --config config/default_config.yaml --data data/
    python scripts/practice.py --score 121 --seed 7
"""
import sys
import argparse
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from checkout_trainer.core import Config, DEFAULT_CONFIG_PATH, build_practice_settings
from checkout_trainer.board import parse_target
from checkout_trainer.simulation import ThrowSimulator, build_simulation_config
from checkout_trainer.game import PracticeGame, GameStatus
from checkout_trainer.storage import YamlFileStore, ProgressStore, SettingsStore
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_status(game: PracticeGame) -> None:
    print(f"\nScore: {game.current_score}  |  Darts thrown: {game.darts_thrown}  "
          f"|  Darts left in visit: {game.darts_remaining}")


def print_hint(game: PracticeGame) -> None:
    routes = game.guidance()
    if not routes:
        print("No standard checkout for this score.")
        return
    for i, route in enumerate(routes):
        marker = "*" if i == 0 else " "
        print(f" {marker} {route}")


def print_review(game: PracticeGame) -> None:
    review = game.review()
    if game.status == GameStatus.WON:
        print(f"\nCHECKOUT! Finished {game.starting_score} in {game.darts_thrown} darts.")
    else:
        print("\nBUST! You busted or failed to finish on a double.")

    if review is None:
        return
    if review.last_dart is not None:
        print(f"Last dart should have been: {review.last_dart}")
    if review.route is not None:
        print(f"Optimal route for {review.score}: {review.route}")


def print_stats(progress_store: ProgressStore) -> None:
    progress = progress_store.load()
    bests = progress.personal_bests
    trends = progress_store.progress_trends()
    print(f"\nGames: {progress.total_games}  Wins: {progress.total_wins} ({progress.win_rate:.1f}%)")
    print(f"3-dart checkouts: {progress.games_with_3_darts}  Streak: {progress.current_streak}")
    print(f"Fewest darts: {bests.fewest_darts}  Best accuracy: {bests.best_accuracy}  "
          f"Best decisions: {bests.best_decision_rate}")
    print(f"Accuracy trend: {trends.accuracy_trend:+.1f}  Decision trend: {trends.decision_trend:+.1f}")


def main():
    parser = argparse.ArgumentParser(description="Practice darts checkouts in the terminal")
    parser.add_argument("--config", type=str, default=str(DEFAULT_CONFIG_PATH), help="Path to config YAML")
    parser.add_argument("--data", type=str, default=None, help="Progress directory (default: from config)")
    parser.add_argument("--score", type=int, default=None, help="Fixed starting score")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    config = Config(Path(args.config))
    if args.seed is not None:
        config.data["simulation"]["seed"] = args.seed

    store = YamlFileStore(Path(args.data or config.get("storage", "data_dir", "data")))
    settings_store = SettingsStore(store)
    progress_store = ProgressStore(store)

    # Stored settings win over the config file once the user has saved some
    settings = settings_store.load() if settings_store.has_settings() else build_practice_settings(config)

    simulation_config = build_simulation_config(config)
    rng = np.random.default_rng(simulation_config.seed)
    game = PracticeGame(
        settings=settings,
        simulator=ThrowSimulator(simulation_config, rng=rng),
        progress_store=progress_store,
        rng=rng,
        starting_score=args.score,
        exclude_bogeys=config.get("rules", "exclude_bogeys", True),
    )

    print(__doc__.split("Usage:")[0].strip())
    print_status(game)

    while True:
        try:
            command = input("> ").strip()
        except EOFError:
            break

        if not command:
            continue
        lowered = command.lower()

        if lowered in ("quit", "exit", "q"):
            break
        if lowered == "hint":
            print_hint(game)
            continue
        if lowered == "stats":
            print_stats(progress_store)
            continue
        if lowered == "retry":
            game.try_again()
            print_status(game)
            continue
        if lowered == "new":
            game.reset()
            print_status(game)
            continue

        if game.is_over:
            print("Game over. Type 'retry' or 'new'.")
            continue

        try:
            target = parse_target(command)
        except ValueError as e:
            print(e)
            continue

        result = game.throw(target)
        if result.was_accurate:
            print(f"You hit {target.label}! Scored {result.score} points")
        else:
            print(f"You missed {target.label}. Hit {result.hit.label} instead ({result.score} points)")

        if game.is_over:
            print_review(game)
        else:
            print_status(game)


if __name__ == "__main__":
    main()
