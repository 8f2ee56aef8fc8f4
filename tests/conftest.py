"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the creature simulator test suite. Every time-dependent fixture is
anchored to a fixed clock so no test depends on the wall clock.
"""

from __future__ import annotations

import logging
import random
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
import structlog

from creature_sim.models.creature import Creature, create_creature
from creature_sim.models.enums import Kind


if TYPE_CHECKING:
    from collections.abc import Generator

    from creature_sim.engine.forms import FormTable


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from creature_sim.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore default logging and drop bound context after each test."""
    from creature_sim.core.logging import clear_context

    root = logging.getLogger()
    level = root.level
    clear_context()
    yield
    clear_context()
    structlog.reset_defaults()
    # configure_logging installs plain stdlib handlers on the root logger
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "CREATURE_SIM_DEBUG": "true",
        "CREATURE_SIM_LOG_LEVEL": "DEBUG",
        "CREATURE_SIM_BATTLE_SEED": "7",
        "CREATURE_SIM_SIMULATION_BACKGROUND_MIN_MINUTES": "10",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Clock & Randomness Fixtures
# =============================================================================


@pytest.fixture
def now() -> datetime:
    """Fixed reference time used as the creation time of sample creatures."""
    return datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible battles."""
    return random.Random(1234)


class FixedRandom:
    """Random source that replays a fixed sequence of values.

    Once the sequence is exhausted the last value repeats.
    """

    def __init__(self, *values: float) -> None:
        self._values = list(values) or [0.99]
        self._index = 0

    def random(self) -> float:
        value = self._values[min(self._index, len(self._values) - 1)]
        self._index += 1
        return value


@pytest.fixture
def never_critical() -> FixedRandom:
    """Random source that never rolls a critical hit (and loses coin flips)."""
    return FixedRandom(0.99)


@pytest.fixture
def always_critical() -> FixedRandom:
    """Random source that always rolls a critical hit (and wins coin flips)."""
    return FixedRandom(0.0)


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def flame(now: datetime) -> Creature:
    """A newborn FLAME creature created at ``now``."""
    return create_creature("Pip", Kind.FLAME, now=now)


@pytest.fixture
def droplet(now: datetime) -> Creature:
    """A newborn DROPLET creature created at ``now``."""
    return create_creature("Bubbles", Kind.DROPLET, now=now)


@pytest.fixture
def sprout(now: datetime) -> Creature:
    """A newborn SPROUT creature created at ``now``."""
    return create_creature("Clover", Kind.SPROUT, now=now)


@pytest.fixture(scope="session")
def form_table() -> FormTable:
    """The complete evolution form table, built once per test session."""
    from creature_sim.engine.forms import FormTable

    return FormTable.build()


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    """The FixedRandom class, for tests that script their own sequence."""
    return FixedRandom
