"""
Per-game throw statistics.
"""
from dataclasses import dataclass


@dataclass
class ThrowStats:
    """Accuracy and decision-quality counters for one game."""
    accurate_hits: int = 0
    total_darts: int = 0
    optimal_decisions: int = 0
    total_decisions: int = 0

    def record(self, was_accurate: bool, was_optimal: bool) -> None:
        """
        Count one dart.

        Args:
            was_accurate: Dart landed where it was aimed
            was_optimal: Aimed target belonged to a curated route
        """
        self.total_darts += 1
        self.total_decisions += 1
        if was_accurate:
            self.accurate_hits += 1
        if was_optimal:
            self.optimal_decisions += 1

    def reset(self) -> None:
        self.accurate_hits = 0
        self.total_darts = 0
        self.optimal_decisions = 0
        self.total_decisions = 0

    @property
    def accuracy(self) -> float:
        """Percent of darts that hit the aimed target."""
        if self.total_darts == 0:
            return 0.0
        return self.accurate_hits / self.total_darts * 100

    @property
    def optimal_decision_rate(self) -> float:
        """Percent of darts aimed along a curated route."""
        if self.total_decisions == 0:
            return 0.0
        return self.optimal_decisions / self.total_decisions * 100
