"""
Simulation module - probabilistic throw outcomes.
"""
from .throw_simulator import (
    ThrowSimulator,
    SimulationConfig,
    simulate_throw,
    DEFAULT_HIT_PROBABILITY,
)
from .config_loader import build_simulation_config

__all__ = [
    "ThrowSimulator",
    "SimulationConfig",
    "simulate_throw",
    "DEFAULT_HIT_PROBABILITY",
    "build_simulation_config",
]
