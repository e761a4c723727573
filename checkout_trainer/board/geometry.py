"""
Dartboard scoring geometry: targets, values, and segment adjacency.
"""
from typing import List, Tuple
import logging

from checkout_trainer.core import Target, Zone
from checkout_trainer.core.types import BULLSEYE_NUMBER, OUTER_BULLSEYE_NUMBER, MULTIPLIERS

logger = logging.getLogger(__name__)

# Official sector sequence (clockwise from top)
SECTOR_SEQUENCE = (20, 1, 18, 4, 13, 6, 10, 15, 2, 17,
                   3, 19, 7, 16, 8, 11, 14, 9, 12, 5)

BULLSEYE = Target(Zone.BULLSEYE, BULLSEYE_NUMBER)
OUTER_BULLSEYE = Target(Zone.OUTER_BULLSEYE, OUTER_BULLSEYE_NUMBER)
MISS = Target(Zone.MISS, 0)

_ZONE_PREFIXES = {
    "S": Zone.SINGLE,
    "D": Zone.DOUBLE,
    "T": Zone.TRIPLE,
}

_BULLSEYE_LABELS = {"BULL", "D25", "DB", "50"}
_OUTER_BULLSEYE_LABELS = {"25", "S25", "SB", "OUTER_BULL"}


def value_of(zone: Zone, number: int) -> int:
    """
    Points scored for a zone/number pair.

    Args:
        zone: Scoring zone
        number: Board number (1-20); ignored for the bull zones

    Returns:
        number, 2*number or 3*number for single/double/triple, 50 for the
        bullseye, 25 for the outer bull

    Raises:
        ValueError: If number is outside 1-20 for single/double/triple
    """
    if zone == Zone.BULLSEYE:
        return BULLSEYE_NUMBER
    if zone == Zone.OUTER_BULLSEYE:
        return OUTER_BULLSEYE_NUMBER
    if zone == Zone.MISS:
        return 0
    if not 1 <= number <= 20:
        raise ValueError(f"Board number must be 1-20, got {number}")
    return number * MULTIPLIERS[zone]


def make_target(zone: Zone, number: int = 0) -> Target:
    """Build a Target, filling in the fixed number of the bull zones."""
    if zone == Zone.BULLSEYE:
        return BULLSEYE
    if zone == Zone.OUTER_BULLSEYE:
        return OUTER_BULLSEYE
    if zone == Zone.MISS:
        return MISS
    return Target(zone, number)


def adjacent_numbers(number: int) -> Tuple[int, ...]:
    """
    Numbers physically next to `number` on the board.

    Args:
        number: Board number

    Returns:
        (anticlockwise neighbour, clockwise neighbour), or an empty tuple if
        the number is not on the board
    """
    if number not in SECTOR_SEQUENCE:
        return ()

    idx = SECTOR_SEQUENCE.index(number)
    count = len(SECTOR_SEQUENCE)
    return (SECTOR_SEQUENCE[(idx - 1) % count], SECTOR_SEQUENCE[(idx + 1) % count])


def parse_target(label: str) -> Target:
    """
    Parse a target label.

    Accepts S<n>, D<n>, T<n> (n in 1-20), Bull/D25/DB for the bullseye,
    25/S25/SB for the outer bull and Miss. Case-insensitive.

    Raises:
        ValueError: If the label is not a board target
    """
    text = label.strip().upper()

    if text in _BULLSEYE_LABELS:
        return BULLSEYE
    if text in _OUTER_BULLSEYE_LABELS:
        return OUTER_BULLSEYE
    if text == "MISS":
        return MISS

    zone = _ZONE_PREFIXES.get(text[:1])
    if zone is None or not text[1:].isdigit():
        raise ValueError(f"Unknown target label: {label!r}")

    return Target(zone, int(text[1:]))


def all_targets() -> List[Target]:
    """All 62 aimable targets: both bulls, then S/D/T for each number in board order."""
    targets = [BULLSEYE, OUTER_BULLSEYE]
    for number in SECTOR_SEQUENCE:
        targets.append(Target(Zone.SINGLE, number))
        targets.append(Target(Zone.DOUBLE, number))
        targets.append(Target(Zone.TRIPLE, number))
    return targets
