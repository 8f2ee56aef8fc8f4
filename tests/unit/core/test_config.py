"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from creature_sim.core.config import (
    BattleSettings,
    Settings,
    SimulationSettings,
    clear_settings_cache,
    get_settings,
)
from creature_sim.core.exceptions import ConfigurationError


class TestSimulationSettings:
    """Tests for SimulationSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default simulation settings."""
        monkeypatch.chdir(tmp_path)

        settings = SimulationSettings()

        assert settings.min_catch_up_minutes == 1
        assert settings.background_min_minutes == 5
        assert settings.enforce_cooldowns is True

    def test_background_threshold_validation(self) -> None:
        """Test that the background threshold may not undercut the catch-up one."""
        with pytest.raises(ConfigurationError) as exc_info:
            SimulationSettings(min_catch_up_minutes=10, background_min_minutes=5)

        assert "background_min_minutes" in str(exc_info.value)
        assert exc_info.value.details["config_key"] == "background_min_minutes"

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables override defaults."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CREATURE_SIM_SIMULATION_BACKGROUND_MIN_MINUTES", "15")
        monkeypatch.setenv("CREATURE_SIM_SIMULATION_ENFORCE_COOLDOWNS", "false")

        settings = SimulationSettings()

        assert settings.background_min_minutes == 15
        assert settings.enforce_cooldowns is False


class TestBattleSettings:
    """Tests for BattleSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default battle settings."""
        monkeypatch.chdir(tmp_path)

        settings = BattleSettings()

        assert settings.max_turns == 20
        assert settings.post_battle_fatigue == 15
        assert settings.seed is None

    @pytest.mark.parametrize("max_turns", [0, 101])
    def test_max_turns_bounds(self, max_turns: int) -> None:
        """Test max_turns is limited to 1-100."""
        with pytest.raises(ValueError):
            BattleSettings(max_turns=max_turns)


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "Creature Simulator"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.battle.max_turns == 20

    def test_debug_mode(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test debug mode setting."""
        monkeypatch.setenv("CREATURE_SIM_DEBUG", "true")
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is True
        assert settings.is_production is False

    def test_is_production_property(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test is_production property."""
        monkeypatch.setenv("CREATURE_SIM_DEBUG", "false")
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.is_production is True

    def test_nested_env_values(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test nested sections read their own prefixed variables."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.battle.seed == 7
        assert settings.simulation.background_min_minutes == 10


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_returns_settings_instance(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that get_settings returns a Settings instance."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        settings = get_settings()

        assert isinstance(settings, Settings)

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_env_wrapped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that load failures surface as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CREATURE_SIM_LOG_LEVEL", "LOUD")
        clear_settings_cache()

        with pytest.raises(ConfigurationError):
            get_settings()
