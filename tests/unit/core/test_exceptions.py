"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from creature_sim.core.exceptions import (
    ActionCooldownError,
    ActionNotAllowedError,
    ConfigurationError,
    CreatureSimError,
    GameEngineError,
    ValidationError,
)


class TestCreatureSimError:
    """Tests for the base CreatureSimError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = CreatureSimError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = CreatureSimError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = CreatureSimError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "CreatureSimError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestGameEngineExceptions:
    """Tests for game engine exceptions."""

    def test_action_not_allowed_details(self) -> None:
        """Test ActionNotAllowedError carries action and reason."""
        exc = ActionNotAllowedError("Nope", action="feed", reason="sleeping")
        assert exc.details == {"action": "feed", "reason": "sleeping"}

    def test_action_cooldown_details(self) -> None:
        """Test ActionCooldownError carries retry time."""
        exc = ActionCooldownError("Wait", action="play", retry_after_seconds=12.5)
        assert exc.details["action"] == "play"
        assert exc.details["retry_after_seconds"] == 12.5

    def test_inheritance(self) -> None:
        """Test exception inheritance chain."""
        for exc in (ActionNotAllowedError("x"), ActionCooldownError("y")):
            assert isinstance(exc, GameEngineError)
            assert isinstance(exc, CreatureSimError)


class TestConfigAndValidationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="max_turns")
        assert exc.details["config_key"] == "max_turns"

    def test_validation_error_fields(self) -> None:
        """Test ValidationError with field context."""
        exc = ValidationError("Blank", field_name="name", invalid_value="  ")
        assert exc.details == {"field_name": "name", "invalid_value": "  "}

    def test_catch_all_with_base(self) -> None:
        """Test every exception can be caught as CreatureSimError."""
        with pytest.raises(CreatureSimError):
            raise ValidationError("bad")
