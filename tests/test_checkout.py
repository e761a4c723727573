"""
Tests for the checkout advisor.
"""
import pytest

from checkout_trainer.core import Target, Zone
from checkout_trainer.board import BULLSEYE, OUTER_BULLSEYE, BOGEY_NUMBERS, MISS, is_finishable
from checkout_trainer.checkout import (
    CHECKOUT_TABLE,
    get_optimal_checkouts,
    recommended_route,
    validate_route,
    is_optimal_choice,
    suggest_last_dart,
)


def T(n):
    return Target(Zone.TRIPLE, n)


def D(n):
    return Target(Zone.DOUBLE, n)


def S(n):
    return Target(Zone.SINGLE, n)


def test_every_curated_route_is_valid():
    """Test all table routes sum to their score and end on a double/bull."""
    for score in CHECKOUT_TABLE:
        routes = get_optimal_checkouts(score)
        assert routes, score
        for route in routes:
            validation = validate_route(score, route.targets)
            assert validation.is_valid, (score, route.labels)
            assert 1 <= len(route) <= 3


def test_table_coverage():
    """Test which scores have guidance."""
    for score in range(2, 41, 2):
        routes = get_optimal_checkouts(score)
        assert routes[0].targets == (D(score // 2),)

    for score in range(41, 171):
        has_route = bool(get_optimal_checkouts(score))
        assert has_route == (score not in BOGEY_NUMBERS), score

    for score in range(3, 40, 2):
        assert get_optimal_checkouts(score) == []


def test_table_scores_are_finishable():
    """Test the table agrees with the finishing rule."""
    for score in CHECKOUT_TABLE:
        assert is_finishable(score, 3)


def test_max_checkout():
    """Test 170 = T20 T20 Bull."""
    routes = get_optimal_checkouts(170)
    assert routes[0].targets == (T(20), T(20), BULLSEYE)
    assert routes[0].total_score == 170
    assert routes[0].last_dart.zone == Zone.BULLSEYE


def test_unfinishable_scores():
    """Test empty results outside the table."""
    assert get_optimal_checkouts(169) == []
    assert get_optimal_checkouts(1) == []
    assert get_optimal_checkouts(0) == []
    assert get_optimal_checkouts(171) == []
    assert get_optimal_checkouts(-10) == []
    assert recommended_route(169) is None


def test_recommended_route_is_first_entry():
    """Test curated order decides the recommendation."""
    routes = get_optimal_checkouts(100)
    assert len(routes) == 2
    assert recommended_route(100) == routes[0]
    assert routes[0].labels == ("T20", "D20")

    assert recommended_route(50).labels == ("Bull",)
    assert recommended_route(82).labels == ("T14", "D20")


def test_validate_route():
    """Test route validation independent of the table."""
    result = validate_route(100, [T(20), D(20)])
    assert result.is_valid
    assert result.finishes_on_double
    assert result.total_score == 100

    # Alternative route not in the table
    assert validate_route(100, [T(20), S(10), D(15)]).is_valid

    # Wrong total
    result = validate_route(101, [T(20), D(20)])
    assert not result.is_valid
    assert result.finishes_on_double
    assert result.total_score == 100

    # Right total, single finish
    result = validate_route(60, [T(20)])
    assert not result.is_valid
    assert not result.finishes_on_double

    # Outer bull is not a finishing double
    assert not validate_route(25, [OUTER_BULLSEYE]).is_valid
    assert validate_route(50, [BULLSEYE]).is_valid


def test_validate_empty_route():
    """Test an empty route is never valid."""
    result = validate_route(0, [])
    assert not result.is_valid
    assert not result.finishes_on_double
    assert result.total_score == 0
    assert result.targets == ()


def test_is_optimal_choice():
    """Test decision classification."""
    assert is_optimal_choice(100, T(20))
    assert is_optimal_choice(100, D(20))
    assert is_optimal_choice(100, S(20))  # From the alternative route
    assert not is_optimal_choice(100, T(19))
    assert not is_optimal_choice(169, T(20))
    assert is_optimal_choice(82, BULLSEYE)


def test_suggest_last_dart():
    """Test the dart that should have finished a busted score."""
    assert suggest_last_dart(40) == D(20)
    assert suggest_last_dart(2) == D(1)
    assert suggest_last_dart(50) == BULLSEYE
    assert suggest_last_dart(44) == D(16)  # No D22; last dart of S12 D16
    assert suggest_last_dart(121) == D(14)
    assert suggest_last_dart(37) is None
    assert suggest_last_dart(169) is None


def test_routes_never_contain_miss():
    """Test curated routes only use board targets."""
    for score in CHECKOUT_TABLE:
        for route in get_optimal_checkouts(score):
            assert MISS not in route.targets


if __name__ == "__main__":
    pytest.main([__file__])
