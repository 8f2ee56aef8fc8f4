"""Data models for the creature simulator.

Exports the enums, the Creature aggregate and its components, evolution
forms, and battle value types. All models are frozen pydantic models.
"""

from __future__ import annotations

from creature_sim.models.battle import (
    BattleRecord,
    BattleResult,
    BattleSnapshot,
    BattleTurn,
)
from creature_sim.models.creature import (
    BASE_STATS,
    CareHistory,
    CombatStats,
    ConditionStats,
    Creature,
    create_creature,
    form_id,
    utcnow,
)
from creature_sim.models.enums import (
    ActionType,
    AlertKind,
    BattleOutcome,
    EvolutionPath,
    GrowthStage,
    Kind,
    RejectionReason,
)
from creature_sim.models.evolution import EvolutionForm, StatModifiers


__all__ = [
    # Enums
    "Kind",
    "GrowthStage",
    "EvolutionPath",
    "ActionType",
    "BattleOutcome",
    "AlertKind",
    "RejectionReason",
    # Creature
    "CombatStats",
    "ConditionStats",
    "CareHistory",
    "Creature",
    "BASE_STATS",
    "create_creature",
    "form_id",
    "utcnow",
    # Evolution
    "StatModifiers",
    "EvolutionForm",
    # Battle
    "BattleSnapshot",
    "BattleTurn",
    "BattleResult",
    "BattleRecord",
]
