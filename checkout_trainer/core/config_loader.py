"""
Configuration loader with validation and defaults.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .io_utils import load_yaml
from .types import PracticeSettings

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


class Config:
    """
    Configuration container with practice defaults.
    """

    DEFAULTS = {
        # Hit percentages per aimed zone (10-100)
        "accuracy": {
            "triple": 65,
            "double": 65,
            "single": 85,
            "bullseye": None,  # None = use single
        },

        "practice": {
            "difficulty": "medium",  # easy, medium, hard, random
            "learning_mode": False,
        },

        # Miss cascade
        "simulation": {
            "adjacent_number_probability": 0.20,
            "wrong_zone_probability": 0.10,
            "guaranteed_finish": True,
            "seed": None,
        },

        "rules": {
            "exclude_bogeys": True,
        },

        "storage": {
            "data_dir": "data",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(config_path)
                self._merge_config(user_config)
                logger.info(f"Configuration loaded from {config_path}")
            except Exception as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        for section, values in user_config.items():
            # A bare section header parses to None and keeps its defaults
            if values is None:
                continue
            if section in self.data and isinstance(values, dict):
                self.data[section].update(values)
            else:
                self.data[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.get_section(section).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        return self.data.get(section) or {}


def build_practice_settings(config: Optional[Config] = None) -> PracticeSettings:
    """
    Construct PracticeSettings from the accuracy and practice sections.

    Args:
        config: Loaded configuration (defaults if None)

    Returns:
        Validated PracticeSettings

    Raises:
        ValueError: If a percentage lies outside 10-100 or the difficulty is unknown
    """
    config = config or Config()
    accuracy = config.get_section("accuracy")
    practice = config.get_section("practice")

    return PracticeSettings(
        triple=accuracy.get("triple", 65),
        double=accuracy.get("double", 65),
        single=accuracy.get("single", 85),
        bullseye=accuracy.get("bullseye"),
        difficulty=practice.get("difficulty", "medium"),
        learning_mode=bool(practice.get("learning_mode", False)),
    )
