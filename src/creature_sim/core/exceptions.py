"""Custom exception hierarchy for the creature lifecycle simulator.

The rules engines are total over their documented inputs and do not raise;
exceptions exist for the orchestration boundary (care sessions, creature
creation, settings loading). All of them inherit from CreatureSimError so a
caller can handle every failure from this package in one place.

Example:
    >>> from creature_sim.core.exceptions import ActionCooldownError
    >>> raise ActionCooldownError("Not ready yet", action="feed", retry_after_seconds=12.0)
"""

from __future__ import annotations

from typing import Any


class CreatureSimError(Exception):
    """Base exception for all creature simulator errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(CreatureSimError):
    """Base exception for errors raised around the rules engines.

    Raised by orchestration code when an owner request cannot be applied
    to the creature in its current state.
    """


class ActionNotAllowedError(GameEngineError):
    """Raised when an owner action is not valid for the creature's condition.

    For example feeding a sleeping creature, or training while exhausted.
    """

    def __init__(
        self,
        message: str,
        *,
        action: str | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with action context.

        Args:
            message: Human-readable error description.
            action: The action that was rejected.
            reason: Machine-readable rejection reason.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if action:
            combined_details["action"] = action
        if reason:
            combined_details["reason"] = reason
        super().__init__(message, details=combined_details)


class ActionCooldownError(GameEngineError):
    """Raised when an action is requested again before its cooldown elapsed."""

    def __init__(
        self,
        message: str,
        *,
        action: str | None = None,
        retry_after_seconds: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with cooldown context.

        Args:
            message: Human-readable error description.
            action: The action that is still cooling down.
            retry_after_seconds: Seconds to wait before retrying.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if action:
            combined_details["action"] = action
        if retry_after_seconds is not None:
            combined_details["retry_after_seconds"] = retry_after_seconds
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(CreatureSimError):
    """Raised when application configuration is invalid.

    This includes invalid values or incompatible configuration combinations.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(CreatureSimError):
    """Raised when caller-supplied data fails validation."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    "CreatureSimError",
    "GameEngineError",
    "ActionNotAllowedError",
    "ActionCooldownError",
    "ConfigurationError",
    "ValidationError",
]
