"""Tests for the enumeration types."""

from __future__ import annotations

import pytest

from creature_sim.models.enums import (
    ActionType,
    AlertKind,
    BattleOutcome,
    EvolutionPath,
    GrowthStage,
    Kind,
    RejectionReason,
)


class TestGrowthStage:
    """Tests for GrowthStage ordering and thresholds."""

    def test_order_is_monotonic(self) -> None:
        """Test stages are ranked in declaration order."""
        assert [stage.order for stage in GrowthStage] == [0, 1, 2, 3, 4]

    def test_min_age_increases_with_order(self) -> None:
        """Test later stages need more days."""
        ages = [stage.min_age for stage in GrowthStage]
        assert ages == [0, 3, 7, 14, 21]

    def test_negative_age_is_baby(self) -> None:
        """Test a negative age resolves to BABY."""
        assert GrowthStage.from_age(-4) == GrowthStage.BABY

    def test_from_age_boundaries(self) -> None:
        """Test thresholds are inclusive."""
        assert GrowthStage.from_age(13) == GrowthStage.TEEN
        assert GrowthStage.from_age(14) == GrowthStage.ADULT


class TestEvolutionPath:
    """Tests for EvolutionPath classification."""

    def test_positive_and_negative_partition(self) -> None:
        """Test NORMAL is neutral and every other path is one or the other."""
        assert not EvolutionPath.NORMAL.is_positive
        assert not EvolutionPath.NORMAL.is_negative
        for path in EvolutionPath:
            if path is not EvolutionPath.NORMAL:
                assert path.is_positive != path.is_negative


class TestActionType:
    """Tests for ActionType metadata."""

    @pytest.mark.parametrize(
        ("action", "seconds"),
        [
            (ActionType.FEED, 30),
            (ActionType.PLAY, 60),
            (ActionType.TRAIN_STRENGTH, 120),
            (ActionType.TRAIN_DEFENSE, 120),
            (ActionType.TRAIN_SPEED, 120),
            (ActionType.CLEAN, 0),
            (ActionType.HEAL, 0),
        ],
    )
    def test_cooldowns(self, action: ActionType, seconds: int) -> None:
        """Test cooldown lengths."""
        assert action.cooldown_seconds == seconds

    def test_display_name(self) -> None:
        """Test display names are title cased."""
        assert ActionType.TRAIN_SPEED.display_name == "Train Speed"
        assert Kind.SPROUT.display_name == "Sprout"


class TestMiscEnums:
    """Tests for outcome, alert and rejection helpers."""

    def test_outcome_reversed(self) -> None:
        """Test reversing swaps WIN and LOSE only."""
        assert BattleOutcome.WIN.reversed() == BattleOutcome.LOSE
        assert BattleOutcome.LOSE.reversed() == BattleOutcome.WIN
        assert BattleOutcome.DRAW.reversed() == BattleOutcome.DRAW

    def test_alert_message(self) -> None:
        """Test alert templates take the creature name."""
        assert AlertKind.HUNGRY.message_template.format(name="Pip").startswith("Pip is hungry")

    def test_every_rejection_has_description(self) -> None:
        """Test each rejection reason can be shown to the owner."""
        for reason in RejectionReason:
            assert reason.description
