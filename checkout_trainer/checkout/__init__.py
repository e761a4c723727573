"""
Checkout module - curated finishing routes and route validation.
"""
from .table import CHECKOUT_TABLE
from .advisor import (
    get_optimal_checkouts,
    recommended_route,
    validate_route,
    is_optimal_choice,
    suggest_last_dart,
)

__all__ = [
    "CHECKOUT_TABLE",
    "get_optimal_checkouts",
    "recommended_route",
    "validate_route",
    "is_optimal_choice",
    "suggest_last_dart",
]
