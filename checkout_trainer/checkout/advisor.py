"""
Checkout advisor: curated finishing routes and route validation.
"""
from typing import List, Optional, Sequence
import logging

from checkout_trainer.core import CheckoutRoute, RouteValidation, Target, Zone
from checkout_trainer.board import BULLSEYE, parse_target
from .table import CHECKOUT_TABLE

logger = logging.getLogger(__name__)


def get_optimal_checkouts(score: int) -> List[CheckoutRoute]:
    """
    Look up the curated routes for a remaining score.

    Args:
        score: Remaining score

    Returns:
        Routes in curated order (first = recommended); empty if the score
        has no standard finish
    """
    labels = CHECKOUT_TABLE.get(score)
    if not labels:
        return []

    return [
        CheckoutRoute(tuple(parse_target(label) for label in route))
        for route in labels
    ]


def recommended_route(score: int) -> Optional[CheckoutRoute]:
    """First curated route for a score, or None."""
    routes = get_optimal_checkouts(score)
    return routes[0] if routes else None


def validate_route(score: int, route: Sequence[Target]) -> RouteValidation:
    """
    Check an arbitrary route against a score.

    Args:
        score: Score the route must finish
        route: Targets in throwing order

    Returns:
        RouteValidation; valid only if the values sum to the score and the
        last target is a double or the bullseye
    """
    targets = tuple(route)
    total_score = sum(target.value for target in targets)
    finishes_on_double = bool(targets) and targets[-1].is_finishing

    return RouteValidation(
        targets=targets,
        total_score=total_score,
        is_valid=total_score == score and finishes_on_double,
        finishes_on_double=finishes_on_double,
    )


def is_optimal_choice(score: int, target: Target) -> bool:
    """
    True if the target appears anywhere in a curated route for the score.

    Used to rate aiming decisions; position within the route is not checked.
    """
    return any(target in route.targets for route in get_optimal_checkouts(score))


def suggest_last_dart(score: int) -> Optional[Target]:
    """
    The dart that should have finished a score.

    Args:
        score: Score remaining before the failed dart

    Returns:
        D1-D20 for even scores up to 40, the bull for 50, else the last dart
        of the recommended route, else None
    """
    if 2 <= score <= 50 and score % 2 == 0:
        if score == 50:
            return BULLSEYE
        if score <= 40:
            return Target(Zone.DOUBLE, score // 2)

    route = recommended_route(score)
    return route.last_dart if route else None
