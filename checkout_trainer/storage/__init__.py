"""
Storage module - key-value stores, progress tracking, and settings.
"""
from .kv_store import KeyValueStore, MemoryStore, YamlFileStore
from .progress_store import (
    ProgressStore,
    ProgressData,
    PersonalBests,
    ProgressTrends,
)
from .settings_store import SettingsStore

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "YamlFileStore",
    "ProgressStore",
    "ProgressData",
    "PersonalBests",
    "ProgressTrends",
    "SettingsStore",
]
