"""
Probabilistic throw simulator.

An aimed target resolves through a fixed cascade of increasingly bad
outcomes, drawn with a single uniform value r in [0, 1):

    r < p_hit                          perfect hit
    r < p_hit + p_adjacent             same zone, neighbouring number
    r < p_hit + p_adjacent + p_zone    wrong zone (same or neighbouring number)
    otherwise                          miss (triples still score)

A double or the bullseye that exactly finishes the remaining score always
lands when `guaranteed_finish` is enabled.
"""
from dataclasses import dataclass
from typing import Optional
import logging

import numpy as np

from checkout_trainer.core import Target, ThrowResult, Zone
from checkout_trainer.board import (
    OUTER_BULLSEYE,
    MISS,
    adjacent_numbers,
    make_target,
)

logger = logging.getLogger(__name__)

DEFAULT_HIT_PROBABILITY = 0.65
MIN_HIT_PROBABILITY = 0.10
MAX_HIT_PROBABILITY = 1.00

# Triple sub-branch split: same-number single, neighbouring single, neighbouring triple
TRIPLE_SAME_SINGLE = 0.5
TRIPLE_ADJACENT_SINGLE = 0.3


@dataclass
class SimulationConfig:
    """Configuration for the miss cascade."""
    adjacent_number_probability: float = 0.20
    wrong_zone_probability: float = 0.10
    guaranteed_finish: bool = True  # Exact finishing double/bull always lands
    seed: Optional[int] = None


class ThrowSimulator:
    """
    Converts an aimed target into a hit target.

    Holds no game state; only the random source advances between calls.
    The random source must provide `random()` and `integers(low, high)`
    like numpy.random.Generator.
    """

    def __init__(
            self,
            config: Optional[SimulationConfig] = None,
            rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize simulator.

        Args:
            config: Cascade configuration
            rng: Random source (default: numpy Generator seeded from config.seed)
        """
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    def simulate(
            self,
            aimed: Target,
            remaining_score: int,
            hit_probability: Optional[float] = None
    ) -> ThrowResult:
        """
        Simulate one dart.

        Args:
            aimed: Target the player aims at
            remaining_score: Score left before this dart
            hit_probability: Chance of a perfect hit (0.10-1.00),
                default 0.65

        Returns:
            ThrowResult with the aimed and hit targets

        Raises:
            ValueError: If the aimed target is a miss or the hit
                probability lies outside 0.10-1.00
        """
        if aimed.zone == Zone.MISS:
            raise ValueError("Cannot aim at a miss")

        if hit_probability is None:
            hit_probability = DEFAULT_HIT_PROBABILITY
        if not MIN_HIT_PROBABILITY <= hit_probability <= MAX_HIT_PROBABILITY:
            raise ValueError(
                f"Hit probability must be 0.10-1.00, got {hit_probability}"
            )

        if self.is_guaranteed_finish(aimed, remaining_score):
            logger.debug(f"{aimed.label} finishes {remaining_score}: guaranteed hit")
            return ThrowResult(aimed=aimed, hit=aimed)

        hit = self._resolve(aimed, hit_probability, self.rng.random())

        logger.debug(
            f"Aimed {aimed.label} (p={hit_probability:.2f}) → hit {hit.label} = {hit.value}"
        )
        return ThrowResult(aimed=aimed, hit=hit)

    def is_guaranteed_finish(self, aimed: Target, remaining_score: int) -> bool:
        """True if the override applies to this aim and score."""
        return (
            self.config.guaranteed_finish
            and aimed.zone in (Zone.DOUBLE, Zone.BULLSEYE)
            and aimed.value == remaining_score
        )

    def _resolve(self, aimed: Target, hit_probability: float, r: float) -> Target:
        """Walk the cascade bands for draw r."""
        adjacent_edge = hit_probability + self.config.adjacent_number_probability
        wrong_zone_edge = adjacent_edge + self.config.wrong_zone_probability

        if r < hit_probability:
            return aimed

        if r < adjacent_edge:
            return self._adjacent_number_hit(aimed)

        if r < wrong_zone_edge:
            return self._wrong_zone_hit(aimed)

        # Triples always score something
        if aimed.zone == Zone.TRIPLE:
            return self._triple_miss(aimed)

        return MISS

    def _adjacent_number_hit(self, aimed: Target) -> Target:
        if aimed.zone == Zone.BULLSEYE:
            return OUTER_BULLSEYE
        if aimed.zone == Zone.OUTER_BULLSEYE:
            return self._random_single()

        return Target(aimed.zone, self._random_neighbour(aimed.number))

    def _wrong_zone_hit(self, aimed: Target) -> Target:
        if aimed.zone in (Zone.BULLSEYE, Zone.OUTER_BULLSEYE):
            return self._random_single()

        if aimed.zone == Zone.TRIPLE:
            return self._triple_miss(aimed)

        other_zones = [
            zone for zone in (Zone.SINGLE, Zone.TRIPLE, Zone.DOUBLE)
            if zone != aimed.zone
        ]
        zone = other_zones[int(self.rng.integers(0, len(other_zones)))]
        return Target(zone, aimed.number)

    def _triple_miss(self, aimed: Target) -> Target:
        """Single same number 50%, single neighbour 30%, triple neighbour 20%."""
        miss_type = self.rng.random()

        if miss_type < TRIPLE_SAME_SINGLE:
            return Target(Zone.SINGLE, aimed.number)

        neighbour = self._random_neighbour(aimed.number)
        if miss_type < TRIPLE_SAME_SINGLE + TRIPLE_ADJACENT_SINGLE:
            return Target(Zone.SINGLE, neighbour)
        return Target(Zone.TRIPLE, neighbour)

    def _random_neighbour(self, number: int) -> int:
        neighbours = adjacent_numbers(number)
        return neighbours[int(self.rng.integers(0, len(neighbours)))]

    def _random_single(self) -> Target:
        return make_target(Zone.SINGLE, int(self.rng.integers(1, 21)))


_default_simulator: Optional[ThrowSimulator] = None


def simulate_throw(
        aimed: Target,
        remaining_score: int,
        hit_probability: Optional[float] = None
) -> ThrowResult:
    """Simulate one dart with a shared default simulator."""
    global _default_simulator
    if _default_simulator is None:
        _default_simulator = ThrowSimulator()
    return _default_simulator.simulate(aimed, remaining_score, hit_probability)
