"""creature_sim - Virtual Creature Lifecycle Simulator.

The rules core of a virtual-pet game: creatures are born as one of three
kinds, drift in condition with real elapsed time, respond to owner care,
evolve along care-dependent paths as they age, and fight turn-based
battles against other creatures.

Every engine is a pure, synchronous transformation over frozen pydantic
models. Storage, scheduling, transport and rendering are left to the host
application.

Example:
    >>> from creature_sim import ActionType, CareSession, Kind, create_creature
    >>>
    >>> pip = create_creature("Pip", Kind.FLAME)
    >>> session = CareSession.start(pip)
    >>> session.perform(ActionType.PLAY)
    >>> report = session.tick(catch_up=True)

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Pydantic V2 schemas for creatures, forms and battles.
    engine: Decay, evolution, battle and lifecycle engines.
"""

from __future__ import annotations

# Core
from creature_sim.core.config import Settings, get_settings
from creature_sim.core.exceptions import CreatureSimError
from creature_sim.core.logging import configure_logging, get_logger

# Engines
from creature_sim.engine import (
    AdvanceReport,
    BattleEngine,
    CareSession,
    EvolutionEngine,
    FormTable,
    advance,
    apply_action,
    apply_time_passage,
    care_alert,
)

# Models
from creature_sim.models import (
    ActionType,
    BattleOutcome,
    BattleRecord,
    BattleResult,
    BattleSnapshot,
    Creature,
    EvolutionPath,
    GrowthStage,
    Kind,
    create_creature,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "CreatureSimError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Kind",
    "GrowthStage",
    "EvolutionPath",
    "ActionType",
    "BattleOutcome",
    "Creature",
    "create_creature",
    "BattleSnapshot",
    "BattleResult",
    "BattleRecord",
    # Engines
    "apply_action",
    "apply_time_passage",
    "FormTable",
    "EvolutionEngine",
    "BattleEngine",
    "AdvanceReport",
    "advance",
    "care_alert",
    "CareSession",
]
