"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        CreatureSimError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Data validation errors.
        GameEngineError: Errors raised around the rules engines.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_logging_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from creature_sim.core.config import (
    BattleSettings,
    Settings,
    SimulationSettings,
    clear_settings_cache,
    get_settings,
)
from creature_sim.core.exceptions import (
    ActionCooldownError,
    ActionNotAllowedError,
    ConfigurationError,
    CreatureSimError,
    GameEngineError,
    ValidationError,
)
from creature_sim.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Exceptions
    "CreatureSimError",
    "ConfigurationError",
    "ValidationError",
    "GameEngineError",
    "ActionNotAllowedError",
    "ActionCooldownError",
    # Configuration
    "Settings",
    "SimulationSettings",
    "BattleSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
