"""
Game module - practice game loop and statistics.
"""
from .stats import ThrowStats
from .game_state import PracticeGame, GameStatus, GameReview, VISIT_DARTS

__all__ = [
    "ThrowStats",
    "PracticeGame",
    "GameStatus",
    "GameReview",
    "VISIT_DARTS",
]
