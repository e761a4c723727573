"""
Long-term practice progress: totals, session history, streaks, personal bests.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

import yaml

from checkout_trainer.core import GameSession
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

PROGRESS_KEY = "darts_training_progress"
TREND_WINDOW = 20


@dataclass
class PersonalBests:
    fewest_darts: Optional[int] = None
    best_accuracy: Optional[float] = None
    best_decision_rate: Optional[float] = None


@dataclass
class ProgressData:
    """Snapshot of everything the progress store persists."""
    total_games: int = 0
    total_wins: int = 0
    total_darts: int = 0
    total_accurate_hits: int = 0
    total_optimal_decisions: int = 0
    total_decisions: int = 0
    sessions: List[GameSession] = field(default_factory=list)
    games_with_3_darts: int = 0
    current_streak: int = 0
    personal_bests: PersonalBests = field(default_factory=PersonalBests)

    @property
    def win_rate(self) -> float:
        """Percent of games checked out."""
        if self.total_games == 0:
            return 0.0
        return self.total_wins / self.total_games * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_games": self.total_games,
            "total_wins": self.total_wins,
            "total_darts": self.total_darts,
            "total_accurate_hits": self.total_accurate_hits,
            "total_optimal_decisions": self.total_optimal_decisions,
            "total_decisions": self.total_decisions,
            "sessions": [session.to_dict() for session in self.sessions],
            "games_with_3_darts": self.games_with_3_darts,
            "current_streak": self.current_streak,
            "personal_bests": {
                "fewest_darts": self.personal_bests.fewest_darts,
                "best_accuracy": self.personal_bests.best_accuracy,
                "best_decision_rate": self.personal_bests.best_decision_rate,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgressData":
        """Build a snapshot, keeping defaults for any missing field."""
        bests = data.get("personal_bests") or {}
        return cls(
            total_games=int(data.get("total_games", 0)),
            total_wins=int(data.get("total_wins", 0)),
            total_darts=int(data.get("total_darts", 0)),
            total_accurate_hits=int(data.get("total_accurate_hits", 0)),
            total_optimal_decisions=int(data.get("total_optimal_decisions", 0)),
            total_decisions=int(data.get("total_decisions", 0)),
            sessions=[GameSession.from_dict(s) for s in data.get("sessions") or []],
            games_with_3_darts=int(data.get("games_with_3_darts", 0)),
            current_streak=int(data.get("current_streak", 0)),
            personal_bests=PersonalBests(
                fewest_darts=bests.get("fewest_darts"),
                best_accuracy=bests.get("best_accuracy"),
                best_decision_rate=bests.get("best_decision_rate"),
            ),
        )


@dataclass(frozen=True)
class ProgressTrends:
    accuracy_trend: float
    decision_trend: float
    is_improving: bool


class ProgressStore:
    """
    Read-modify-write access to ProgressData on top of a KeyValueStore.

    Only the game loop talks to this store; the simulator and advisor never do.
    """

    def __init__(self, store: KeyValueStore, key: str = PROGRESS_KEY):
        self.store = store
        self.key = key

    def load(self) -> ProgressData:
        """
        Load the current snapshot.

        Returns:
            Stored progress, or empty progress if nothing is stored or the
            stored document cannot be read
        """
        try:
            data = self.store.get(self.key)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read progress: {e}, starting fresh")
            return ProgressData()

        if not data:
            return ProgressData()

        try:
            return ProgressData.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed progress data: {e}, starting fresh")
            return ProgressData()

    def save(self, snapshot: ProgressData) -> None:
        """Persist a snapshot, replacing the stored one."""
        self.store.set(self.key, snapshot.to_dict())
        logger.debug(f"Progress saved: {snapshot.total_games} games")

    def add_session(self, session: GameSession) -> ProgressData:
        """
        Record a finished game and update totals and personal bests.

        Args:
            session: Finished game summary

        Returns:
            The updated snapshot
        """
        progress = self.load()

        progress.sessions.append(session)
        progress.total_games += 1
        progress.total_darts += session.darts_thrown
        progress.total_accurate_hits += round(session.accuracy * session.darts_thrown / 100)
        progress.total_optimal_decisions += round(session.optimal_decision_rate * session.darts_thrown / 100)
        progress.total_decisions += session.darts_thrown

        bests = progress.personal_bests
        if session.completed:
            progress.total_wins += 1
            if bests.fewest_darts is None or session.darts_thrown < bests.fewest_darts:
                bests.fewest_darts = session.darts_thrown

        if bests.best_accuracy is None or session.accuracy > bests.best_accuracy:
            bests.best_accuracy = session.accuracy

        if bests.best_decision_rate is None or session.optimal_decision_rate > bests.best_decision_rate:
            bests.best_decision_rate = session.optimal_decision_rate

        self.save(progress)
        logger.info(
            f"Session recorded: {session.starting_score} "
            f"{'won' if session.completed else 'lost'} in {session.darts_thrown} darts"
        )
        return progress

    def update_three_dart_streak(
            self,
            completed: bool,
            darts_thrown: int,
            learning_mode: bool = False
    ) -> ProgressData:
        """
        Track checkouts within one visit.

        A win in three darts or fewer extends the streak; anything else
        resets it. Learning-mode games are not counted.
        """
        progress = self.load()
        if learning_mode:
            return progress

        if completed and darts_thrown <= 3:
            progress.games_with_3_darts += 1
            progress.current_streak += 1
        else:
            progress.current_streak = 0

        self.save(progress)
        return progress

    def reset_streak(self) -> None:
        progress = self.load()
        progress.current_streak = 0
        self.save(progress)

    def clear(self) -> None:
        """Delete all stored progress."""
        self.store.delete(self.key)
        logger.info("Progress cleared")

    def recent_sessions(self, count: int = 10) -> List[GameSession]:
        """Last `count` sessions, newest first."""
        sessions = self.load().sessions
        return list(reversed(sessions[-count:])) if count > 0 else []

    def progress_trends(self) -> ProgressTrends:
        """
        Compare the first and second half of the recent sessions.

        Returns:
            Differences in mean accuracy and decision rate (second half
            minus first half)
        """
        recent = self.load().sessions[-TREND_WINDOW:]
        if len(recent) < 2:
            return ProgressTrends(accuracy_trend=0.0, decision_trend=0.0, is_improving=False)

        midpoint = len(recent) // 2
        first, second = recent[:midpoint], recent[midpoint:]

        def mean(values):
            return sum(values) / len(values)

        accuracy_first = mean([s.accuracy for s in first])
        accuracy_second = mean([s.accuracy for s in second])
        decision_first = mean([s.optimal_decision_rate for s in first])
        decision_second = mean([s.optimal_decision_rate for s in second])

        return ProgressTrends(
            accuracy_trend=accuracy_second - accuracy_first,
            decision_trend=decision_second - decision_first,
            is_improving=accuracy_second > accuracy_first or decision_second > decision_first,
        )
