"""Rules engines for the creature simulator.

This module provides the decay and action rules, the evolution form
table and evolution rules, battle resolution, and the lifecycle
orchestration that drives them for one owned creature.

Submodules:
    actions: Owner actions, time passage, eligibility and cooldowns
    forms: The (kind x stage x path) evolution form table
    evolution: Evolution path selection and stat application
    battle: Turn-based battle resolution
    lifecycle: Catch-up ticking, battle bookkeeping and care sessions

Example:
    >>> from creature_sim.engine import CareSession, FormTable
    >>>
    >>> session = CareSession(creature, forms=FormTable.build())
    >>> session.perform(ActionType.FEED, now)
    >>> report = session.tick(later)
    >>> if report.evolved:
    ...     print(report.creature.evolution_id)
"""

from __future__ import annotations

# =============================================================================
# Actions & Time Passage
# =============================================================================
from creature_sim.engine.actions import (
    ACTION_HANDLERS,
    CooldownTracker,
    apply_action,
    apply_clean,
    apply_feed,
    apply_heal,
    apply_play,
    apply_sleep,
    apply_time_passage,
    apply_train_defense,
    apply_train_speed,
    apply_train_strength,
    apply_wake,
    check_action,
    clamp,
)

# =============================================================================
# Battle
# =============================================================================
from creature_sim.engine.battle import (
    BattleEngine,
    RandomSource,
    base_damage,
    critical_damage,
    resolve_outcome,
)

# =============================================================================
# Evolution
# =============================================================================
from creature_sim.engine.evolution import (
    EvolutionEngine,
    can_evolve,
    determine_evolution_path,
)
from creature_sim.engine.forms import FormTable, calculate_modifiers, create_form

# =============================================================================
# Lifecycle
# =============================================================================
from creature_sim.engine.lifecycle import (
    AdvanceReport,
    CareSession,
    advance,
    apply_battle_result,
    care_alert,
    elapsed_minutes,
)


__all__ = [
    # Actions
    "clamp",
    "apply_feed",
    "apply_play",
    "apply_clean",
    "apply_sleep",
    "apply_wake",
    "apply_train_strength",
    "apply_train_defense",
    "apply_train_speed",
    "apply_heal",
    "apply_time_passage",
    "apply_action",
    "check_action",
    "ACTION_HANDLERS",
    "CooldownTracker",
    # Battle
    "RandomSource",
    "BattleEngine",
    "base_damage",
    "critical_damage",
    "resolve_outcome",
    # Evolution
    "FormTable",
    "calculate_modifiers",
    "create_form",
    "EvolutionEngine",
    "can_evolve",
    "determine_evolution_path",
    # Lifecycle
    "AdvanceReport",
    "elapsed_minutes",
    "advance",
    "apply_battle_result",
    "care_alert",
    "CareSession",
]
