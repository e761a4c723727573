"""
Core data types for the checkout trainer.
Defines contracts between modules to ensure stable interfaces.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import time
import uuid


class Zone(Enum):
    """Scoring regions of the board."""
    SINGLE = "S"
    DOUBLE = "D"
    TRIPLE = "T"
    BULLSEYE = "BULL"
    OUTER_BULLSEYE = "OUTER_BULL"
    MISS = "MISS"  # Only produced by the simulator, never aimed at


MULTIPLIERS = {
    Zone.SINGLE: 1,
    Zone.DOUBLE: 2,
    Zone.TRIPLE: 3,
}

# Zones that legally end a checkout
FINISHING_ZONES = (Zone.DOUBLE, Zone.BULLSEYE)

BULLSEYE_NUMBER = 50
OUTER_BULLSEYE_NUMBER = 25


class DifficultyBand(Enum):
    """Starting score ranges for random practice games."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    RANDOM = "random"

    @property
    def score_range(self) -> Tuple[int, int]:
        """Inclusive (low, high) bounds of the band."""
        return {
            DifficultyBand.EASY: (2, 40),
            DifficultyBand.MEDIUM: (41, 120),
            DifficultyBand.HARD: (121, 170),
            DifficultyBand.RANDOM: (2, 170),
        }[self]


@dataclass(frozen=True)
class Target:
    """
    A single board target (where a dart is aimed or where it landed).

    `number` is the board position (1-20) for single, double and triple.
    Bullseye stores its point value (50) and outer bull stores 25, so
    persisted labels and numbers stay compatible with older data.
    """
    zone: Zone
    number: int

    def __post_init__(self):
        if self.zone in MULTIPLIERS:
            if not 1 <= self.number <= 20:
                raise ValueError(
                    f"{self.zone.name} target number must be 1-20, got {self.number}"
                )
        elif self.zone == Zone.BULLSEYE:
            if self.number != BULLSEYE_NUMBER:
                raise ValueError("Bullseye number must be 50")
        elif self.zone == Zone.OUTER_BULLSEYE:
            if self.number != OUTER_BULLSEYE_NUMBER:
                raise ValueError("Outer bullseye number must be 25")
        elif self.number != 0:
            raise ValueError("Miss number must be 0")

    @property
    def value(self) -> int:
        """Points scored by hitting this target."""
        if self.zone in MULTIPLIERS:
            return self.number * MULTIPLIERS[self.zone]
        if self.zone == Zone.MISS:
            return 0
        return self.number

    @property
    def label(self) -> str:
        """Display label (S20, D16, T19, Bull, 25, Miss)."""
        if self.zone in MULTIPLIERS:
            return f"{self.zone.value}{self.number}"
        if self.zone == Zone.BULLSEYE:
            return "Bull"
        if self.zone == Zone.OUTER_BULLSEYE:
            return "25"
        return "Miss"

    @property
    def is_finishing(self) -> bool:
        """True for doubles and the bullseye."""
        return self.zone in FINISHING_ZONES

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class ThrowResult:
    """
    Outcome of one simulated dart.
    """
    aimed: Target
    hit: Target

    @property
    def score(self) -> int:
        return self.hit.value

    @property
    def was_accurate(self) -> bool:
        return self.hit == self.aimed


@dataclass(frozen=True)
class CheckoutRoute:
    """Ordered finishing sequence of 1-3 targets for one remaining score."""
    targets: Tuple[Target, ...]

    def __post_init__(self):
        if not 1 <= len(self.targets) <= 3:
            raise ValueError("Checkout route must contain 1-3 targets")

    @property
    def total_score(self) -> int:
        return sum(target.value for target in self.targets)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(target.label for target in self.targets)

    @property
    def last_dart(self) -> Target:
        return self.targets[-1]

    def __len__(self) -> int:
        return len(self.targets)

    def __iter__(self):
        return iter(self.targets)

    def __str__(self) -> str:
        return " → ".join(self.labels)


@dataclass(frozen=True)
class RouteValidation:
    """Result of checking an arbitrary route against a score."""
    targets: Tuple[Target, ...]
    total_score: int
    is_valid: bool  # Sums to the score AND finishes on a double/bull
    finishes_on_double: bool


@dataclass
class PracticeSettings:
    """
    Per-zone accuracy (percentages) and practice options.

    Hit percentages must lie in 10-100. A missing bullseye percentage
    falls back to the single percentage.
    """
    triple: int = 65
    double: int = 65
    single: int = 85
    bullseye: Optional[int] = None
    difficulty: DifficultyBand = DifficultyBand.MEDIUM
    learning_mode: bool = False

    def __post_init__(self):
        if isinstance(self.difficulty, str):
            self.difficulty = DifficultyBand(self.difficulty)

        for name in ("triple", "double", "single", "bullseye"):
            percent = getattr(self, name)
            if percent is None and name == "bullseye":
                continue
            if not 10 <= percent <= 100:
                raise ValueError(f"{name} hit percentage must be 10-100, got {percent}")

    def hit_percentage(self, zone: Zone) -> int:
        """Configured hit percentage for an aimed zone."""
        if zone == Zone.TRIPLE:
            return self.triple
        if zone == Zone.DOUBLE:
            return self.double
        if zone == Zone.BULLSEYE and self.bullseye is not None:
            return self.bullseye
        return self.single

    def hit_probability(self, zone: Zone) -> float:
        """Configured hit chance for an aimed zone as a fraction."""
        return self.hit_percentage(zone) / 100

    def to_dict(self) -> dict:
        return {
            "triple": self.triple,
            "double": self.double,
            "single": self.single,
            "bullseye": self.bullseye,
            "difficulty": self.difficulty.value,
            "learning_mode": self.learning_mode,
        }


@dataclass
class GameSession:
    """
    Summary record emitted once per finished practice game.
    """
    starting_score: int
    darts_thrown: int
    completed: bool
    accuracy: float  # Percent of darts that hit the aimed target
    optimal_decision_rate: float  # Percent of darts aimed along a curated route
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "starting_score": self.starting_score,
            "darts_thrown": self.darts_thrown,
            "completed": self.completed,
            "accuracy": self.accuracy,
            "optimal_decision_rate": self.optimal_decision_rate,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameSession":
        return cls(
            starting_score=int(data["starting_score"]),
            darts_thrown=int(data["darts_thrown"]),
            completed=bool(data["completed"]),
            accuracy=float(data["accuracy"]),
            optimal_decision_rate=float(data["optimal_decision_rate"]),
            id=str(data.get("id") or uuid.uuid4().hex),
            timestamp=float(data.get("timestamp") or time.time()),
        )
