"""
Tests for configuration loaded from code and environment.
"""

import pytest
from pydantic import ValidationError

from monopoly_sim.config import GameConfig
from monopoly_sim.exceptions import ConfigurationError
from monopoly_sim.settings import SimulationSettings, get_settings


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()

        assert config.starting_balance == 300
        assert config.lap_reward == 100
        assert config.num_properties == 20
        assert config.max_sell_cost == 300
        assert config.max_rent_cost == 80
        assert config.die_sides == 6
        assert config.max_num_turns == 1000
        assert config.seed is None

    @pytest.mark.parametrize(
        "field", ["num_properties", "max_sell_cost", "max_rent_cost", "die_sides", "max_num_turns"]
    )
    def test_non_positive_values_are_rejected(self, field):
        with pytest.raises(ConfigurationError):
            GameConfig(**{field: 0})

    def test_negative_balance_is_rejected(self):
        with pytest.raises(ConfigurationError):
            GameConfig(starting_balance=-1)


class TestSimulationSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("SIM_NUM_SIMULATIONS", "SIM_STARTING_BALANCE", "SIM_MAX_NUM_TURNS", "SIM_SEED", "SIM_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = SimulationSettings()

        assert settings.num_simulations == 300
        assert settings.starting_balance == 300
        assert settings.max_num_turns == 1000
        assert settings.seed is None
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SIM_NUM_SIMULATIONS", "12")
        monkeypatch.setenv("SIM_SEED", "99")
        monkeypatch.setenv("SIM_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.num_simulations == 12
        assert settings.seed == 99
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            SimulationSettings(log_level="loud")

    def test_non_positive_turn_cap(self):
        with pytest.raises(ValidationError):
            SimulationSettings(max_num_turns=0)

    def test_to_game_config(self):
        config = SimulationSettings(starting_balance=500, max_num_turns=50, seed=3).to_game_config()

        assert config.starting_balance == 500
        assert config.max_num_turns == 50
        assert config.seed == 3
        assert config.num_properties == 20
