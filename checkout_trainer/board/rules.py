"""
Finishing rules: which remaining scores can still be checked out, and
random starting scores for practice games.
"""
from typing import Optional, Tuple, Union
import logging

import numpy as np

from checkout_trainer.core import DifficultyBand

logger = logging.getLogger(__name__)

MAX_CHECKOUT = 170
MAX_TWO_DART_CHECKOUT = 110  # T20 + Bull
MAX_ONE_DART_CHECKOUT = 50  # Bull

# Within 2-170 but not reachable with three darts ending on a double
BOGEY_NUMBERS = frozenset({159, 162, 163, 165, 166, 168, 169})

ScoreBand = Union[DifficultyBand, Tuple[int, int]]


def is_finishable(score: int, darts_remaining: int, exclude_bogeys: bool = True) -> bool:
    """
    Arithmetic finishing rule (no search).

    Args:
        score: Remaining score
        darts_remaining: Darts left in the visit (1-3)
        exclude_bogeys: Treat bogey numbers as unfinishable

    Returns:
        True if the score can be finished with the remaining darts
    """
    if score <= 0 or score > MAX_CHECKOUT or score == 1:
        return False
    if exclude_bogeys and score in BOGEY_NUMBERS:
        return False

    if darts_remaining == 3:
        return True
    if darts_remaining == 2:
        return score <= MAX_TWO_DART_CHECKOUT
    if darts_remaining == 1:
        return score <= MAX_ONE_DART_CHECKOUT and score % 2 == 0

    return False


def finishable_scores(band: ScoreBand = DifficultyBand.RANDOM, exclude_bogeys: bool = True) -> list:
    """All three-dart finishable scores inside an inclusive band."""
    low, high = band.score_range if isinstance(band, DifficultyBand) else band
    return [
        score for score in range(low, high + 1)
        if is_finishable(score, 3, exclude_bogeys=exclude_bogeys)
    ]


def random_finishable_score(
        band: ScoreBand = DifficultyBand.MEDIUM,
        rng: Optional[np.random.Generator] = None,
        exclude_bogeys: bool = True
) -> int:
    """
    Draw a starting score uniformly from the finishable scores of a band.

    Args:
        band: Difficulty band or explicit (low, high) range
        rng: Random source (default: fresh numpy Generator)
        exclude_bogeys: Skip bogey numbers

    Returns:
        A score finishable with three darts. Falls back to the full 2-170
        range when the band holds no finishable score.
    """
    rng = rng if rng is not None else np.random.default_rng()

    candidates = finishable_scores(band, exclude_bogeys=exclude_bogeys)
    if not candidates:
        logger.debug(f"No finishable scores in band {band}, using full range")
        candidates = finishable_scores(DifficultyBand.RANDOM, exclude_bogeys=exclude_bogeys)

    return candidates[int(rng.integers(0, len(candidates)))]
