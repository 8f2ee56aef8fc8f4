"""Enumeration types for the creature simulator.

Defines the creature kinds, growth stages, evolution paths, owner actions,
battle outcomes and care alerts. Each enum's value is its lowercase token;
its name is the uppercase token used on the wire.
"""

from __future__ import annotations

from enum import StrEnum


class Kind(StrEnum):
    """The three creature archetypes chosen at creation.

    Each kind starts with its own base combat stats and contributes a
    small flavor delta to every evolution form.
    """

    FLAME = "flame"
    DROPLET = "droplet"
    SPROUT = "sprout"

    @property
    def display_name(self) -> str:
        """Get the human-readable kind name.

        Returns:
            Kind name (e.g., 'Flame').
        """
        return self.value.capitalize()


class GrowthStage(StrEnum):
    """Ordered, age-gated maturity levels.

    A creature's stage is a pure function of its age in whole days: the
    stage with the greatest ``min_age`` not exceeding the age.
    """

    BABY = "baby"
    CHILD = "child"
    TEEN = "teen"
    ADULT = "adult"
    PERFECT = "perfect"

    @property
    def min_age(self) -> int:
        """Minimum age in whole days for this stage."""
        ages = {
            GrowthStage.BABY: 0,
            GrowthStage.CHILD: 3,
            GrowthStage.TEEN: 7,
            GrowthStage.ADULT: 14,
            GrowthStage.PERFECT: 21,
        }
        return ages[self]

    @property
    def order(self) -> int:
        """Monotonic rank used to compare stages (0 for BABY)."""
        return list(GrowthStage).index(self)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_age(cls, age_days: int) -> GrowthStage:
        """Get the stage implied by an age.

        Args:
            age_days: Age of the creature in whole days.

        Returns:
            The stage with the greatest min_age not exceeding the age.
            Negative ages resolve to BABY.
        """
        for stage in sorted(cls, key=lambda s: s.min_age, reverse=True):
            if age_days >= stage.min_age:
                return stage
        return cls.BABY


class EvolutionPath(StrEnum):
    """How a creature was raised, which branches its evolution forms."""

    NORMAL = "normal"

    # Good care
    HAPPY = "happy"
    STRONG = "strong"
    WISE = "wise"

    # Poor care
    NEGLECTED = "neglected"
    SICK = "sick"
    ANGRY = "angry"

    @property
    def is_positive(self) -> bool:
        return self in (EvolutionPath.HAPPY, EvolutionPath.STRONG, EvolutionPath.WISE)

    @property
    def is_negative(self) -> bool:
        return self in (EvolutionPath.NEGLECTED, EvolutionPath.SICK, EvolutionPath.ANGRY)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ActionType(StrEnum):
    """Owner actions that can be applied to a creature."""

    FEED = "feed"
    PLAY = "play"
    CLEAN = "clean"
    SLEEP = "sleep"
    WAKE = "wake"
    TRAIN_STRENGTH = "train_strength"
    TRAIN_DEFENSE = "train_defense"
    TRAIN_SPEED = "train_speed"
    HEAL = "heal"
    BATTLE = "battle"

    @property
    def display_name(self) -> str:
        """Get the human-readable action name.

        Returns:
            Action name (e.g., 'Train Strength').
        """
        return self.value.replace("_", " ").title()

    @property
    def cooldown_seconds(self) -> int:
        """Seconds that must pass before the action may be repeated."""
        cooldowns = {
            ActionType.FEED: 30,
            ActionType.PLAY: 60,
            ActionType.TRAIN_STRENGTH: 120,
            ActionType.TRAIN_DEFENSE: 120,
            ActionType.TRAIN_SPEED: 120,
        }
        return cooldowns.get(self, 0)

    @property
    def is_training(self) -> bool:
        return self in (
            ActionType.TRAIN_STRENGTH,
            ActionType.TRAIN_DEFENSE,
            ActionType.TRAIN_SPEED,
        )


class BattleOutcome(StrEnum):
    """Battle result from the point of view of the calling side."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"

    def reversed(self) -> BattleOutcome:
        """Get the same outcome seen from the opponent's side."""
        if self is BattleOutcome.WIN:
            return BattleOutcome.LOSE
        if self is BattleOutcome.LOSE:
            return BattleOutcome.WIN
        return self


class AlertKind(StrEnum):
    """Reasons a creature needs the owner's attention, most urgent first."""

    SICK = "sick"
    HUNGRY = "hungry"
    DIRTY = "dirty"
    SAD = "sad"

    @property
    def message_template(self) -> str:
        """Format string for the owner-facing alert (takes ``name``)."""
        templates = {
            AlertKind.SICK: "{name} is sick! Please heal them soon!",
            AlertKind.HUNGRY: "{name} is hungry! Please feed them!",
            AlertKind.DIRTY: "{name}'s room is dirty! Please clean up!",
            AlertKind.SAD: "{name} is feeling sad! Please play with them!",
        }
        return templates[self]


class RejectionReason(StrEnum):
    """Why an owner action cannot be applied right now."""

    SLEEPING = "sleeping"
    NOT_HUNGRY = "not_hungry"
    TOO_TIRED = "too_tired"
    TOO_HUNGRY = "too_hungry"
    ALREADY_SLEEPING = "already_sleeping"
    NOT_SLEEPING = "not_sleeping"
    NOT_SICK = "not_sick"

    @property
    def description(self) -> str:
        descriptions = {
            RejectionReason.SLEEPING: "The creature is asleep",
            RejectionReason.NOT_HUNGRY: "The creature is not hungry",
            RejectionReason.TOO_TIRED: "The creature is too tired",
            RejectionReason.TOO_HUNGRY: "The creature is too hungry",
            RejectionReason.ALREADY_SLEEPING: "The creature is already asleep",
            RejectionReason.NOT_SLEEPING: "The creature is not asleep",
            RejectionReason.NOT_SICK: "The creature is not sick",
        }
        return descriptions[self]


__all__ = [
    "Kind",
    "GrowthStage",
    "EvolutionPath",
    "ActionType",
    "BattleOutcome",
    "AlertKind",
    "RejectionReason",
]
