"""
Persisted practice settings.
"""
from typing import Any, Dict, Optional
import logging

import yaml

from checkout_trainer.core import PracticeSettings
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

SETTINGS_KEY = "darts_training_settings"


class SettingsStore:
    """Load and save PracticeSettings through a KeyValueStore."""

    def __init__(self, store: KeyValueStore, key: str = SETTINGS_KEY):
        self.store = store
        self.key = key

    def _read(self) -> Optional[Dict[str, Any]]:
        try:
            return self.store.get(self.key)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings: {e}, using defaults")
            return None

    def has_settings(self) -> bool:
        """True if a readable, non-empty settings document is stored."""
        return bool(self._read())

    def load(self) -> PracticeSettings:
        """Stored settings, or defaults if missing or invalid."""
        data = self._read()
        if not data:
            return PracticeSettings()

        try:
            return PracticeSettings(**{
                key: value for key, value in data.items()
                if key in PracticeSettings.__dataclass_fields__
            })
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid stored settings: {e}, using defaults")
            return PracticeSettings()

    def save(self, settings: PracticeSettings) -> None:
        self.store.set(self.key, settings.to_dict())
        logger.info("Settings saved")
