"""Configuration management for the creature simulator.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides.

Example:
    >>> from creature_sim.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.battle.max_turns
    20

Environment Variables:
    CREATURE_SIM_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CREATURE_SIM_JSON_LOGS: Emit JSON logs instead of console output
    CREATURE_SIM_SIMULATION_MIN_CATCH_UP_MINUTES: Minimum offline gap applied at start-up
    CREATURE_SIM_SIMULATION_BACKGROUND_MIN_MINUTES: Minimum gap applied by the periodic tick
    CREATURE_SIM_BATTLE_MAX_TURNS: Turn cap for one battle
    CREATURE_SIM_BATTLE_SEED: Optional seed for reproducible battles
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from creature_sim.core import constants
from creature_sim.core.exceptions import ConfigurationError


class SimulationSettings(BaseSettings):
    """Configuration for time passage and owner actions.

    Attributes:
        min_catch_up_minutes: Smallest elapsed gap applied when catching up
            after the process starts.
        background_min_minutes: Smallest elapsed gap applied by the periodic
            background tick.
        enforce_cooldowns: Whether care sessions reject actions that are
            still cooling down.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATURE_SIM_SIMULATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    min_catch_up_minutes: int = Field(
        default=1,
        ge=0,
        description="Minimum elapsed minutes applied at start-up",
    )
    background_min_minutes: int = Field(
        default=5,
        ge=0,
        description="Minimum elapsed minutes applied by the background tick",
    )
    enforce_cooldowns: bool = Field(
        default=True,
        description="Reject actions that are still cooling down",
    )

    @model_validator(mode="after")
    def validate_tick_thresholds(self) -> "SimulationSettings":
        """Ensure the background threshold is not below the catch-up threshold.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If background_min_minutes < min_catch_up_minutes.
        """
        if self.background_min_minutes < self.min_catch_up_minutes:
            raise ConfigurationError(
                f"background_min_minutes ({self.background_min_minutes}) must not be "
                f"less than min_catch_up_minutes ({self.min_catch_up_minutes})",
                config_key="background_min_minutes",
            )
        return self


class BattleSettings(BaseSettings):
    """Configuration for battle resolution.

    Attributes:
        max_turns: Turn cap for one battle.
        post_battle_fatigue: Fatigue added to the creature after any battle.
        seed: Optional seed for the battle random source.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATURE_SIM_BATTLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_turns: int = Field(
        default=constants.MAX_BATTLE_TURNS,
        ge=1,
        le=100,
        description="Maximum turns per battle",
    )
    post_battle_fatigue: int = Field(
        default=constants.POST_BATTLE_FATIGUE,
        ge=0,
        le=100,
        description="Fatigue added after a battle",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for reproducible battles",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON logs.
        simulation: Time passage and action settings.
        battle: Battle settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATURE_SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Creature Simulator",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON formatted logs",
    )

    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    battle: BattleSettings = Field(default_factory=BattleSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "SimulationSettings",
    "BattleSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
