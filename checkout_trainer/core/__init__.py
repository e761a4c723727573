"""
Core module - shared data types, YAML I/O, and configuration.
"""
from .types import (
    Zone,
    DifficultyBand,
    Target,
    ThrowResult,
    CheckoutRoute,
    RouteValidation,
    PracticeSettings,
    GameSession,
    FINISHING_ZONES,
)
from .io_utils import (
    atomic_write_yaml,
    load_yaml,
)
from .config_loader import Config, DEFAULT_CONFIG_PATH, build_practice_settings

__all__ = [
    # Types
    "Zone",
    "DifficultyBand",
    "Target",
    "ThrowResult",
    "CheckoutRoute",
    "RouteValidation",
    "PracticeSettings",
    "GameSession",
    "FINISHING_ZONES",
    # I/O
    "atomic_write_yaml",
    "load_yaml",
    # Config
    "Config",
    "DEFAULT_CONFIG_PATH",
    "build_practice_settings",
]
