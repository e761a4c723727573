"""
Builds the simulator configuration from the application config.
Unknown keys are ignored to keep older YAML files loading.
"""
from typing import Any, Dict, Optional
import logging

from checkout_trainer.core import Config
from .throw_simulator import SimulationConfig

logger = logging.getLogger(__name__)


def _apply_overrides(target: Any, overrides: Dict[str, Any]) -> None:
    """
    Apply dictionary overrides to a dataclass-like object.
    """
    for key, value in overrides.items():
        if hasattr(target, key):
            setattr(target, key, value)
        else:
            logger.debug("Ignoring unknown config key: %s", key)


def build_simulation_config(config: Optional[Config] = None) -> SimulationConfig:
    """
    Construct SimulationConfig from the `simulation` section.

    Args:
        config: Loaded configuration (defaults if None)

    Returns:
        Populated SimulationConfig
    """
    config = config or Config()
    simulation_config = SimulationConfig()
    _apply_overrides(simulation_config, config.get_section("simulation"))
    return simulation_config
