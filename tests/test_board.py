"""
Unit tests for board module.
"""
import numpy as np
import pytest

from checkout_trainer.core import DifficultyBand, Target, Zone
from checkout_trainer.board import (
    SECTOR_SEQUENCE, BULLSEYE, OUTER_BULLSEYE, MISS, BOGEY_NUMBERS,
    value_of, make_target, adjacent_numbers, parse_target, all_targets,
    is_finishable, finishable_scores, random_finishable_score,
)


def test_value_of_formula():
    """Test value formula for every zone/number pair."""
    for number in range(1, 21):
        assert value_of(Zone.SINGLE, number) == number
        assert value_of(Zone.DOUBLE, number) == 2 * number
        assert value_of(Zone.TRIPLE, number) == 3 * number

    assert value_of(Zone.BULLSEYE, 50) == 50
    assert value_of(Zone.OUTER_BULLSEYE, 25) == 25


def test_value_of_matches_target():
    """Test that Target.value never disagrees with value_of."""
    for target in all_targets():
        assert target.value == value_of(target.zone, target.number)


def test_value_of_rejects_off_board_numbers():
    """Test precondition check."""
    with pytest.raises(ValueError):
        value_of(Zone.TRIPLE, 21)
    with pytest.raises(ValueError):
        value_of(Zone.SINGLE, 0)


def test_adjacent_numbers():
    """Test neighbours on the board."""
    assert adjacent_numbers(20) == (5, 1)
    assert adjacent_numbers(5) == (12, 20)
    assert adjacent_numbers(3) == (17, 19)

    for number in SECTOR_SEQUENCE:
        neighbours = adjacent_numbers(number)
        assert len(neighbours) == 2
        assert number not in neighbours
        assert all(n in SECTOR_SEQUENCE for n in neighbours)


def test_adjacent_numbers_off_board():
    """Test empty result for numbers not on the board."""
    assert adjacent_numbers(0) == ()
    assert adjacent_numbers(25) == ()
    assert adjacent_numbers(50) == ()


def test_make_target():
    """Test bull zones get their fixed numbers."""
    assert make_target(Zone.BULLSEYE) == BULLSEYE
    assert make_target(Zone.OUTER_BULLSEYE) == OUTER_BULLSEYE
    assert make_target(Zone.MISS) == MISS
    assert make_target(Zone.DOUBLE, 8) == Target(Zone.DOUBLE, 8)


def test_parse_target():
    """Test label parsing."""
    assert parse_target("T20") == Target(Zone.TRIPLE, 20)
    assert parse_target("d16") == Target(Zone.DOUBLE, 16)
    assert parse_target(" S5 ") == Target(Zone.SINGLE, 5)
    assert parse_target("Bull") == BULLSEYE
    assert parse_target("D25") == BULLSEYE
    assert parse_target("25") == OUTER_BULLSEYE
    assert parse_target("SB") == OUTER_BULLSEYE
    assert parse_target("Miss") == MISS

    for target in all_targets():
        assert parse_target(target.label) == target


def test_parse_target_invalid():
    """Test unknown labels."""
    for label in ("X20", "T21", "D0", "T", "", "treble twenty"):
        with pytest.raises(ValueError):
            parse_target(label)


def test_all_targets():
    """Test the aimable target list."""
    targets = all_targets()
    assert len(targets) == 62
    assert len(set(targets)) == 62
    assert MISS not in targets


def test_is_finishable_bounds():
    """Test the arithmetic finishing rule."""
    for darts in (1, 2, 3):
        assert not is_finishable(1, darts)
        assert not is_finishable(0, darts)
        assert not is_finishable(-4, darts)
        assert not is_finishable(171, darts)

    assert is_finishable(170, 3)
    assert is_finishable(2, 3)
    assert is_finishable(3, 3)
    assert is_finishable(110, 2)
    assert not is_finishable(111, 2)
    assert is_finishable(40, 1)
    assert is_finishable(50, 1)
    assert not is_finishable(39, 1)
    assert not is_finishable(52, 1)
    assert not is_finishable(40, 0)
    assert not is_finishable(40, 4)


def test_is_finishable_bogeys():
    """Test bogey exclusion and its toggle."""
    for score in BOGEY_NUMBERS:
        assert not is_finishable(score, 3)
        assert is_finishable(score, 3, exclude_bogeys=False)

    assert is_finishable(160, 3)
    assert is_finishable(167, 3)


def test_finishable_scores():
    """Test band filtering."""
    hard = finishable_scores(DifficultyBand.HARD)
    assert hard[0] == 121
    assert hard[-1] == 170
    assert not set(hard) & BOGEY_NUMBERS
    assert len(hard) == 50 - len(BOGEY_NUMBERS)

    assert finishable_scores((1, 3)) == [2, 3]
    assert finishable_scores((169, 169)) == []


def test_random_finishable_score_in_band():
    """Test sampling stays inside the band."""
    rng = np.random.default_rng(1)
    for band in DifficultyBand:
        low, high = band.score_range
        for _ in range(200):
            score = random_finishable_score(band, rng=rng)
            assert low <= score <= high
            assert is_finishable(score, 3)


def test_random_finishable_score_covers_band():
    """Test every easy score can be drawn."""
    rng = np.random.default_rng(7)
    drawn = {random_finishable_score(DifficultyBand.EASY, rng=rng) for _ in range(2000)}
    assert drawn == set(range(2, 41))


def test_random_finishable_score_empty_band_fallback():
    """Test fallback to 2-170 when a band has no finishable score."""
    rng = np.random.default_rng(3)
    for _ in range(100):
        score = random_finishable_score((169, 169), rng=rng)
        assert 2 <= score <= 170
        assert score not in BOGEY_NUMBERS

    # Without bogey exclusion the band is no longer empty
    assert random_finishable_score((169, 169), rng=rng, exclude_bogeys=False) == 169


def test_random_finishable_score_reproducible():
    """Test seeding."""
    first = [random_finishable_score(rng=np.random.default_rng(42)) for _ in range(5)]
    second = [random_finishable_score(rng=np.random.default_rng(42)) for _ in range(5)]
    assert first == second


if __name__ == "__main__":
    print("Running board module tests...")
    test_value_of_formula()
    print("✓ value_of test passed")
    test_adjacent_numbers()
    print("✓ Adjacency test passed")
    test_parse_target()
    print("✓ Label parsing test passed")
    test_is_finishable_bounds()
    print("✓ Finishability test passed")
    test_random_finishable_score_in_band()
    print("✓ Score sampling test passed")
    print("\n✓ All board tests passed!")
