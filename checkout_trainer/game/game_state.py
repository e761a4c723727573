"""
Practice game loop.

Owns all mutable game state and feeds the simulator and advisor only the
numbers they need. Progress persistence goes through an injected store.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging

import numpy as np

from checkout_trainer.core import (
    CheckoutRoute,
    GameSession,
    PracticeSettings,
    Target,
    ThrowResult,
)
from checkout_trainer.board import random_finishable_score
from checkout_trainer.checkout import (
    get_optimal_checkouts,
    is_optimal_choice,
    recommended_route,
    suggest_last_dart,
)
from checkout_trainer.simulation import ThrowSimulator
from .stats import ThrowStats

logger = logging.getLogger(__name__)

VISIT_DARTS = 3


class GameStatus(Enum):
    """Lifecycle of one practice game."""
    PLAYING = "playing"
    WON = "won"
    BUST = "bust"


@dataclass(frozen=True)
class GameReview:
    """What the player should have thrown, shown once a game ends."""
    score: int  # Starting score on a win, score before the failed dart on a bust
    route: Optional[CheckoutRoute]
    last_dart: Optional[Target] = None  # Only set for busts


class PracticeGame:
    """
    Single-player checkout practice.

    A game starts from a finishable score and continues dart by dart until
    the score is checked out on a double/bull (won) or the player busts:
    the score goes below zero, lands on 1, or reaches zero without a
    finishing double.
    """

    def __init__(
            self,
            settings: Optional[PracticeSettings] = None,
            simulator: Optional[ThrowSimulator] = None,
            progress_store=None,
            rng: Optional[np.random.Generator] = None,
            starting_score: Optional[int] = None,
            exclude_bogeys: bool = True
    ):
        """
        Initialize and start a game.

        Args:
            settings: Accuracy and practice options
            simulator: Throw simulator (default: one sharing `rng`)
            progress_store: Optional ProgressStore receiving finished sessions
            rng: Random source for starting scores and the default simulator
            starting_score: Fixed starting score (default: random from the
                settings' difficulty band)
            exclude_bogeys: Never draw bogey numbers as starting scores
        """
        self.settings = settings or PracticeSettings()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.simulator = simulator or ThrowSimulator(rng=self.rng)
        self.progress_store = progress_store
        self.exclude_bogeys = exclude_bogeys

        self.starting_score = 0
        self.current_score = 0  # Shown to the player; updated per visit
        self.pending_score = 0  # True remainder after every dart
        self.darts_thrown = 0
        self.history: List[ThrowResult] = []
        self.user_route: List[Target] = []
        self.status = GameStatus.PLAYING
        self.score_before_bust: Optional[int] = None
        self.stats = ThrowStats()
        self.last_session: Optional[GameSession] = None

        self.start(starting_score)

    def start(self, starting_score: Optional[int] = None) -> int:
        """
        Start a new game.

        Args:
            starting_score: Score to check out (default: random)

        Returns:
            The starting score
        """
        if starting_score is None:
            starting_score = random_finishable_score(
                self.settings.difficulty,
                rng=self.rng,
                exclude_bogeys=self.exclude_bogeys,
            )

        self._begin(starting_score)
        logger.info(f"Practice game started: {starting_score} ({self.settings.difficulty.value})")
        return starting_score

    def try_again(self) -> None:
        """Replay the same starting score."""
        self._begin(self.starting_score)
        logger.info(f"Retrying {self.starting_score}")

    def reset(self) -> int:
        """Start over with a new random score."""
        return self.start()

    def _begin(self, starting_score: int) -> None:
        self.starting_score = starting_score
        self.current_score = starting_score
        self.pending_score = starting_score
        self.darts_thrown = 0
        self.history = []
        self.user_route = []
        self.status = GameStatus.PLAYING
        self.score_before_bust = None
        self.stats.reset()
        self.last_session = None

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    @property
    def darts_remaining(self) -> int:
        """Darts left in the current visit."""
        return VISIT_DARTS - (self.darts_thrown % VISIT_DARTS)

    def guidance(self) -> List[CheckoutRoute]:
        """Curated routes for the score still to check out."""
        return get_optimal_checkouts(self.pending_score)

    def throw(self, target: Target) -> ThrowResult:
        """
        Throw one dart at a target.

        Args:
            target: Aimed target (from the input device)

        Returns:
            Simulated outcome

        Raises:
            RuntimeError: If the game is already over
        """
        if self.is_over:
            raise RuntimeError(f"Game is over ({self.status.value}); call try_again() or reset()")

        score_before = self.pending_score
        was_optimal = is_optimal_choice(score_before, target)

        result = self.simulator.simulate(
            target,
            score_before,
            self.settings.hit_probability(target.zone),
        )

        self.stats.record(result.was_accurate, was_optimal)
        self.history.append(result)
        self.user_route.append(target)
        self.darts_thrown += 1

        new_score = score_before - result.score
        self.pending_score = new_score

        logger.debug(
            f"Dart {self.darts_thrown}: aimed {target.label}, hit {result.hit.label} "
            f"({score_before} → {new_score})"
        )

        if new_score < 0 or new_score == 1:
            self._finish(GameStatus.BUST, score_before)
        elif new_score == 0 and not result.hit.is_finishing:
            self._finish(GameStatus.BUST, score_before)
        elif new_score == 0:
            self._finish(GameStatus.WON)
        elif self.darts_thrown % VISIT_DARTS == 0 or self.settings.learning_mode:
            self.current_score = new_score

        return result

    def _finish(self, status: GameStatus, score_before_bust: Optional[int] = None) -> None:
        """Close the game and hand the session to the progress store."""
        self.status = status
        self.current_score = self.pending_score
        self.score_before_bust = score_before_bust
        completed = status == GameStatus.WON

        session = GameSession(
            starting_score=self.starting_score,
            darts_thrown=self.darts_thrown,
            completed=completed,
            accuracy=self.stats.accuracy,
            optimal_decision_rate=self.stats.optimal_decision_rate,
        )
        self.last_session = session

        if completed:
            logger.info(f"Checked out {self.starting_score} in {self.darts_thrown} darts")
        else:
            logger.info(f"Bust on {score_before_bust} after {self.darts_thrown} darts")

        if self.progress_store is not None:
            self.progress_store.add_session(session)
            self.progress_store.update_three_dart_streak(
                completed,
                self.darts_thrown,
                self.settings.learning_mode,
            )

    def review(self) -> Optional[GameReview]:
        """
        Suggested play for a finished game.

        Returns:
            GameReview, or None while the game is still running
        """
        if self.status == GameStatus.WON:
            return GameReview(
                score=self.starting_score,
                route=recommended_route(self.starting_score),
            )

        if self.status == GameStatus.BUST and self.score_before_bust is not None:
            return GameReview(
                score=self.score_before_bust,
                route=recommended_route(self.score_before_bust),
                last_dart=suggest_last_dart(self.score_before_bust),
            )

        return None
