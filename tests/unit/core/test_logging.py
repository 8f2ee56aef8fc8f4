"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest
import structlog

from creature_sim.core.config import Settings
from creature_sim.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


def read_entries(capsys: pytest.CaptureFixture[str]) -> list[dict[str, Any]]:
    """Parse the JSON log lines written to stdout so far."""
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line.strip()]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON entries carry the event, level, timestamp and app name."""
        configure_logging(json_format=True)

        get_logger("tests").info("Creature evolved", creature="Pip", stage="teen")

        [entry] = read_entries(capsys)
        assert entry["event"] == "Creature evolved"
        assert entry["creature"] == "Pip"
        assert entry["stage"] == "teen"
        assert entry["level"] == "info"
        assert entry["app"] == "creature_sim"
        assert "timestamp" in entry

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="WARNING", json_format=True)
        logger = get_logger("tests")

        logger.info("Form table built")
        logger.warning("Creature needs attention")

        assert [entry["event"] for entry in read_entries(capsys)] == ["Creature needs attention"]

    def test_unknown_level_falls_back_to_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="chatty", json_format=True)
        logger = get_logger("tests")

        logger.debug("Snapshot rejected")
        logger.info("Battle finished")

        assert [entry["event"] for entry in read_entries(capsys)] == ["Battle finished"]

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the development renderer writes readable lines."""
        configure_logging()

        get_logger("tests").info("Creature evolved", creature="Pip")

        output = capsys.readouterr().out
        assert "Creature evolved" in output
        assert "Pip" in output

    def test_stdlib_level_follows(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file(self, tmp_path: Path) -> None:
        """Test standard library records also land in the log file."""
        log_file = tmp_path / "creature_sim.log"
        configure_logging(level="INFO", log_file=str(log_file))

        logging.getLogger("creature_sim.host").warning("Save slot corrupted")

        assert "Save slot corrupted" in log_file.read_text()


class TestConfigureLoggingFromSettings:
    """Tests for configure_logging_from_settings."""

    def test_uses_settings_level_and_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test log_level and json_logs drive the configuration."""
        configure_logging_from_settings(Settings(log_level="ERROR", json_logs=True))
        logger = get_logger("tests")

        logger.warning("Creature needs attention")
        logger.error("Battle aborted", turns=3)

        [entry] = read_entries(capsys)
        assert entry["event"] == "Battle aborted"
        assert entry["level"] == "error"
        assert entry["turns"] == 3

    def test_defaults_to_global_settings(
        self,
        mock_env_vars: dict[str, str],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test the environment reaches the logger through get_settings."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CREATURE_SIM_JSON_LOGS", "true")

        configure_logging_from_settings()
        get_logger("tests").debug("Form table built", forms=105)

        [entry] = read_entries(capsys)
        assert entry["level"] == "debug"
        assert entry["forms"] == 105


class TestContext:
    """Tests for bind_context and clear_context."""

    def test_bound_context_in_every_entry(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_format=True)
        bind_context(creature_id="c-1", creature_name="Pip")
        logger = get_logger("tests")

        logger.info("Action applied", action="play")
        logger.info("Battle finished", outcome="win")

        entries = read_entries(capsys)
        assert len(entries) == 2
        for entry in entries:
            assert entry["creature_id"] == "c-1"
            assert entry["creature_name"] == "Pip"

    def test_clear_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_format=True)
        bind_context(creature_id="c-1")

        clear_context()
        get_logger("tests").info("Care session closed")

        assert structlog.contextvars.get_contextvars() == {}
        [entry] = read_entries(capsys)
        assert "creature_id" not in entry
