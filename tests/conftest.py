"""
Shared test fixtures.
"""
import pytest


class ScriptedRng:
    """
    Stand-in for numpy.random.Generator that replays fixed draws.

    `random()` raises IndexError once its script is exhausted, so tests can
    assert that no draw happened. `integers()` returns `low` when unscripted.
    """

    def __init__(self, randoms=(), integers=()):
        self.randoms = list(randoms)
        self.scripted_integers = list(integers)

    def random(self):
        return self.randoms.pop(0)

    def integers(self, low, high):
        value = self.scripted_integers.pop(0) if self.scripted_integers else low
        assert low <= value < high
        return value


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng
