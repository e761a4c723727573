import textwrap
from pathlib import Path

import pytest

from checkout_trainer.core import Config, DifficultyBand, build_practice_settings
from checkout_trainer.simulation import SimulationConfig, build_simulation_config

REPO_CONFIG = Path(__file__).parent.parent / "config" / "default_config.yaml"


def test_missing_file_uses_defaults(tmp_path: Path):
    """Missing YAML should fall back to defaults without error."""
    config = Config(tmp_path / "no_config.yaml")

    assert config.get("accuracy", "triple") == 65
    assert config.get("rules", "exclude_bogeys") is True
    assert config.get("nope", "nothing", "fallback") == "fallback"


def test_defaults_are_not_shared():
    """Mutating one config must not leak into another."""
    first = Config()
    first.data["accuracy"]["triple"] = 10

    assert Config().get("accuracy", "triple") == 65


def test_shipped_config_matches_defaults():
    """The repository config file mirrors the built-in defaults."""
    assert Config(REPO_CONFIG).data == Config.DEFAULTS


def test_overrides_are_merged(tmp_path: Path):
    """Overrides from YAML replace only the keys they name."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent("""
        accuracy:
          triple: 40
          bullseye: 30
        practice:
          difficulty: hard
          learning_mode: true
        simulation:
          guaranteed_finish: false
          seed: 17
          wind_speed: 3
    """).strip())

    config = Config(config_path)
    settings = build_practice_settings(config)
    simulation = build_simulation_config(config)

    assert settings.triple == 40
    assert settings.double == 65
    assert settings.bullseye == 30
    assert settings.difficulty == DifficultyBand.HARD
    assert settings.learning_mode is True

    assert simulation.guaranteed_finish is False
    assert simulation.seed == 17
    assert simulation.adjacent_number_probability == pytest.approx(0.20)
    assert not hasattr(simulation, "wind_speed")


def test_malformed_file_uses_defaults(tmp_path: Path):
    """Unparseable YAML logs a warning and keeps defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("accuracy: [unclosed\n")

    config = Config(config_path)
    assert config.get_section("accuracy") == Config.DEFAULTS["accuracy"]


def test_empty_section_keeps_defaults(tmp_path: Path):
    """A section header with no keys leaves that section at its defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent("""
        accuracy:
          triple: 70
        practice:
        simulation:
    """).strip())

    config = Config(config_path)
    assert config.get_section("simulation") == Config.DEFAULTS["simulation"]
    assert config.get("practice", "difficulty") == "medium"

    assert build_simulation_config(config) == SimulationConfig()
    settings = build_practice_settings(config)
    assert settings.triple == 70
    assert settings.difficulty == DifficultyBand.MEDIUM

    config.data["simulation"]["seed"] = 5
    assert build_simulation_config(config).seed == 5


def test_default_builders():
    """Builders work without a config."""
    assert build_simulation_config() == SimulationConfig()
    settings = build_practice_settings()
    assert settings.single == 85
    assert settings.bullseye is None


def test_invalid_accuracy_raises(tmp_path: Path):
    """Out-of-range percentages fail fast."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("accuracy:\n  double: 150\n")

    with pytest.raises(ValueError):
        build_practice_settings(Config(config_path))
