"""Pydantic V2 schemas for evolution forms and their stat modifiers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from creature_sim.models.creature import CombatStats
from creature_sim.models.enums import EvolutionPath, GrowthStage, Kind


class StatModifiers(BaseModel):
    """Signed stat deltas granted by an evolution form.

    Modifiers compose by field-wise addition and are added on top of the
    creature's current combat stats when it evolves.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength_bonus: int = 0
    defense_bonus: int = 0
    speed_bonus: int = 0
    max_hp_bonus: int = 0

    def __add__(self, other: StatModifiers) -> StatModifiers:
        return StatModifiers(
            strength_bonus=self.strength_bonus + other.strength_bonus,
            defense_bonus=self.defense_bonus + other.defense_bonus,
            speed_bonus=self.speed_bonus + other.speed_bonus,
            max_hp_bonus=self.max_hp_bonus + other.max_hp_bonus,
        )

    def apply_to(self, stats: CombatStats) -> CombatStats:
        """Add these modifiers to a set of combat stats.

        Args:
            stats: The stats to modify.

        Returns:
            New CombatStats with the deltas added.
        """
        return CombatStats(
            strength=stats.strength + self.strength_bonus,
            defense=stats.defense + self.defense_bonus,
            speed=stats.speed + self.speed_bonus,
            max_hp=stats.max_hp + self.max_hp_bonus,
        )


class EvolutionForm(BaseModel):
    """A named evolution form for one (kind, stage, path) combination.

    Attributes:
        id: Form identifier, e.g. ``flame_teen_strong``.
        kind: Creature kind.
        stage: Growth stage.
        path: Evolution path.
        display_name: Name shown to the owner.
        description: Flavor text shown to the owner.
        stat_modifiers: Stat deltas granted on evolving into this form.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    kind: Kind
    stage: GrowthStage
    path: EvolutionPath
    display_name: str
    description: str
    stat_modifiers: StatModifiers = Field(default_factory=StatModifiers)


__all__ = [
    "StatModifiers",
    "EvolutionForm",
]
