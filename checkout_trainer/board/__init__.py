"""
Board module - scoring geometry and finishing rules.
"""
from .geometry import (
    SECTOR_SEQUENCE,
    BULLSEYE,
    OUTER_BULLSEYE,
    MISS,
    value_of,
    make_target,
    adjacent_numbers,
    parse_target,
    all_targets,
)
from .rules import (
    BOGEY_NUMBERS,
    is_finishable,
    finishable_scores,
    random_finishable_score,
)

__all__ = [
    "SECTOR_SEQUENCE",
    "BULLSEYE",
    "OUTER_BULLSEYE",
    "MISS",
    "value_of",
    "make_target",
    "adjacent_numbers",
    "parse_target",
    "all_targets",
    "BOGEY_NUMBERS",
    "is_finishable",
    "finishable_scores",
    "random_finishable_score",
]
