"""Pydantic V2 schemas for the creature aggregate.

A Creature composes three value components (combat stats, condition
gauges and care history) plus its identity, growth stage, evolution path
and timestamps. All models are frozen: the engines produce a new
Creature for every change via ``model_copy(update=...)``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from creature_sim.core import constants
from creature_sim.core.exceptions import ValidationError
from creature_sim.models.enums import EvolutionPath, GrowthStage, Kind


Gauge = Annotated[
    int,
    Field(ge=constants.STAT_MIN, le=constants.STAT_MAX, description="Gauge value (0-100)"),
]
Counter = Annotated[int, Field(ge=0, description="Monotonic care counter")]


def utcnow() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(UTC)


def form_id(kind: Kind, stage: GrowthStage, path: EvolutionPath) -> str:
    """Build the identifier of the evolution form for a (kind, stage, path) cell.

    Example:
        >>> form_id(Kind.FLAME, GrowthStage.TEEN, EvolutionPath.STRONG)
        'flame_teen_strong'
    """
    return f"{kind.value}_{stage.value}_{path.value}"


# =============================================================================
# Components
# =============================================================================


class CombatStats(BaseModel):
    """Combat attributes used by the battle engine.

    Attributes:
        strength: Attack power.
        defense: Damage reduction (a third of it is subtracted from damage).
        speed: Initiative and critical-hit chance in percent.
        max_hp: Maximum hit points.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: int = Field(default=10, description="Attack power")
    defense: int = Field(default=10, description="Damage reduction")
    speed: int = Field(default=10, description="Initiative and critical chance")
    max_hp: int = Field(default=100, description="Maximum hit points")


class ConditionStats(BaseModel):
    """Condition gauges that drift with time and owner care.

    Higher hunger and fatigue are worse; higher happiness and cleanliness
    are better.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_hp: int = Field(default=100, ge=0, description="Current hit points")
    hunger: Gauge = 0
    happiness: Gauge = 100
    cleanliness: Gauge = 100
    fatigue: Gauge = 0
    is_sick: bool = False
    is_sleeping: bool = False


class CareHistory(BaseModel):
    """Cumulative counters that decide the evolution path.

    Counters only ever increase over a creature's lifetime.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_feedings: Counter = 0
    total_plays: Counter = 0
    total_trainings: Counter = 0
    total_cleanings: Counter = 0
    total_heals: Counter = 0
    neglect_count: Counter = 0
    sick_count: Counter = 0
    battle_wins: Counter = 0
    battle_losses: Counter = 0


# =============================================================================
# Creature
# =============================================================================


class Creature(BaseModel):
    """The virtual creature being raised.

    Attributes:
        id: Unique creature identifier.
        name: Display name.
        kind: Base archetype.
        growth_stage: Stage reached by the last evolution.
        evolution_path: Path chosen by the last evolution.
        created_at: Birth time; age is measured from here.
        last_cared_at: Time of the last owner action.
        last_updated_at: Time of the last time-passage update.
        combat: Combat stats.
        condition: Condition gauges.
        history: Care history counters.
        is_active: Whether this is the owner's current creature.
        evolution_id: Identifier of the current evolution form.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(default_factory=uuid4, description="Unique creature ID")
    name: str = Field(
        min_length=1,
        max_length=50,
        pattern=r"^[^|]+$",
        description="Display name (may not contain the snapshot separator)",
    )
    kind: Kind
    growth_stage: GrowthStage = GrowthStage.BABY
    evolution_path: EvolutionPath = EvolutionPath.NORMAL
    created_at: datetime = Field(default_factory=utcnow)
    last_cared_at: datetime = Field(default_factory=utcnow)
    last_updated_at: datetime = Field(default_factory=utcnow)
    combat: CombatStats = Field(default_factory=CombatStats)
    condition: ConditionStats = Field(default_factory=ConditionStats)
    history: CareHistory = Field(default_factory=CareHistory)
    is_active: bool = True
    evolution_id: str = ""

    @model_validator(mode="after")
    def validate_current_hp(self) -> "Creature":
        """Ensure current HP does not exceed max HP."""
        if self.condition.current_hp > self.combat.max_hp:
            msg = (
                f"current_hp ({self.condition.current_hp}) exceeds "
                f"max_hp ({self.combat.max_hp})"
            )
            raise ValueError(msg)
        return self

    def age_days(self, now: datetime) -> int:
        """Whole days elapsed since creation."""
        return int((now - self.created_at).total_seconds() // (constants.MINUTES_PER_DAY * 60))

    def calculated_stage(self, now: datetime) -> GrowthStage:
        """Growth stage implied by the creature's age at ``now``."""
        return GrowthStage.from_age(self.age_days(now))

    @property
    def sprite_id(self) -> str:
        """Form identifier derived from the current kind, stage and path."""
        return form_id(self.kind, self.growth_stage, self.evolution_path)

    @property
    def is_in_danger(self) -> bool:
        """Whether any condition needs urgent owner attention."""
        condition = self.condition
        return (
            condition.hunger >= constants.DANGER_HUNGER
            or condition.cleanliness <= constants.DANGER_CLEANLINESS
            or condition.happiness <= constants.DANGER_HAPPINESS
            or condition.is_sick
        )

    @property
    def overall_condition(self) -> int:
        """Overall wellbeing score from 0 to 100.

        Integer mean of satiety, happiness, cleanliness, restedness and
        health (0 when sick, 100 otherwise).
        """
        condition = self.condition
        scores = (
            constants.STAT_MAX - condition.hunger,
            condition.happiness,
            condition.cleanliness,
            constants.STAT_MAX - condition.fatigue,
            0 if condition.is_sick else constants.STAT_MAX,
        )
        return sum(scores) // len(scores)


# =============================================================================
# Factory
# =============================================================================

BASE_STATS: dict[Kind, CombatStats] = {
    Kind.FLAME: CombatStats(strength=15, defense=8, speed=12, max_hp=90),
    Kind.DROPLET: CombatStats(strength=10, defense=10, speed=10, max_hp=100),
    Kind.SPROUT: CombatStats(strength=8, defense=15, speed=8, max_hp=110),
}


def create_creature(name: str, kind: Kind, *, now: datetime | None = None) -> Creature:
    """Create a newborn creature with kind-specific base stats.

    Condition starts at full HP, fed, happy, clean and rested; every
    care counter starts at zero.

    Args:
        name: Display name; surrounding whitespace is stripped.
        kind: The creature's archetype.
        now: Creation time (defaults to the current UTC time).

    Returns:
        The new Creature.

    Raises:
        ValidationError: If the name is blank.
    """
    clean_name = name.strip()
    if not clean_name:
        raise ValidationError(
            "Creature name must not be blank",
            field_name="name",
            invalid_value=name,
        )

    created = now or utcnow()
    stats = BASE_STATS[kind]
    return Creature(
        name=clean_name,
        kind=kind,
        created_at=created,
        last_cared_at=created,
        last_updated_at=created,
        combat=stats,
        condition=ConditionStats(current_hp=stats.max_hp),
        evolution_id=form_id(kind, GrowthStage.BABY, EvolutionPath.NORMAL),
    )


__all__ = [
    "CombatStats",
    "ConditionStats",
    "CareHistory",
    "Creature",
    "BASE_STATS",
    "create_creature",
    "form_id",
    "utcnow",
]
