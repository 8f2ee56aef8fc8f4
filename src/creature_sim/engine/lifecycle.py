"""Lifecycle orchestration for a single owned creature.

Ties the decay, evolution and battle engines together the way a host
application drives them: catching up on elapsed time, applying battle
results to the care history, picking the most urgent care alert, and
guarding owner actions with eligibility and cooldown checks.

The engines underneath never raise for in-domain input. CareSession is
the boundary where refused requests become exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from creature_sim.core import constants
from creature_sim.core.config import Settings, get_settings
from creature_sim.core.exceptions import ActionCooldownError, ActionNotAllowedError
from creature_sim.core.logging import (
    bind_context,
    clear_context,
    configure_logging_from_settings,
    get_logger,
)
from creature_sim.engine.actions import (
    CooldownTracker,
    apply_action,
    apply_time_passage,
    check_action,
    clamp,
)
from creature_sim.engine.battle import BattleEngine, RandomSource
from creature_sim.engine.evolution import EvolutionEngine, can_evolve
from creature_sim.engine.forms import FormTable
from creature_sim.models.battle import BattleRecord, BattleResult, BattleSnapshot
from creature_sim.models.creature import Creature, utcnow
from creature_sim.models.enums import ActionType, AlertKind, BattleOutcome, GrowthStage


logger = get_logger(__name__)


# =============================================================================
# Time Catch-up
# =============================================================================


@dataclass(frozen=True)
class AdvanceReport:
    """Result of advancing a creature to the present.

    Attributes:
        creature: The updated creature (the input itself when skipped).
        elapsed_minutes: Whole minutes since the previous update.
        applied: Whether time passage was applied.
        evolved: Whether the creature evolved.
        previous_stage: Growth stage before the update.
        newly_in_danger: Whether the creature entered danger during the update.
    """

    creature: Creature
    elapsed_minutes: int
    applied: bool = False
    evolved: bool = False
    previous_stage: GrowthStage = GrowthStage.BABY
    newly_in_danger: bool = False


def elapsed_minutes(creature: Creature, now: datetime) -> int:
    """Whole minutes between the creature's last update and ``now``."""
    return int((now - creature.last_updated_at).total_seconds() // 60)


def advance(
    creature: Creature,
    now: datetime | None = None,
    *,
    forms: FormTable,
    min_elapsed_minutes: int = 1,
) -> AdvanceReport:
    """Bring a creature up to date with the clock.

    Applies the drift of the minutes elapsed since ``last_updated_at`` and
    then evolves the creature when its age allows. Gaps shorter than
    ``min_elapsed_minutes`` (including a clock that moved backwards) leave
    the creature untouched.

    Args:
        creature: The creature to update.
        now: Reference time (defaults to the current UTC time).
        forms: Form table for evolution lookups, built once by the caller.
        min_elapsed_minutes: Smallest gap worth applying.

    Returns:
        An AdvanceReport describing what happened.
    """
    now = now or utcnow()
    minutes = elapsed_minutes(creature, now)
    previous_stage = creature.growth_stage

    if minutes < min_elapsed_minutes or minutes < 0:
        return AdvanceReport(
            creature=creature,
            elapsed_minutes=minutes,
            previous_stage=previous_stage,
        )

    updated = apply_time_passage(creature, minutes, now)

    evolved = False
    if can_evolve(updated, now):
        engine = EvolutionEngine(forms)
        updated = engine.evolve(updated, now)
        evolved = True

    newly_in_danger = updated.is_in_danger and not creature.is_in_danger
    if newly_in_danger:
        logger.warning(
            "Creature needs attention",
            creature=updated.name,
            alert=care_alert(updated),
        )

    return AdvanceReport(
        creature=updated,
        elapsed_minutes=minutes,
        applied=True,
        evolved=evolved,
        previous_stage=previous_stage,
        newly_in_danger=newly_in_danger,
    )


# =============================================================================
# Battle Bookkeeping & Alerts
# =============================================================================


def apply_battle_result(
    creature: Creature,
    outcome: BattleOutcome,
    now: datetime | None = None,
    *,
    fatigue: int = constants.POST_BATTLE_FATIGUE,
) -> Creature:
    """Record a battle outcome on the creature.

    A win or loss bumps the matching counter; a draw leaves the counters
    alone. Every battle tires the creature and counts as owner care.

    Args:
        creature: The creature that fought.
        outcome: Outcome from the creature's point of view.
        now: Battle time (defaults to the current UTC time).
        fatigue: Fatigue added by the battle.

    Returns:
        The updated creature.
    """
    history = creature.history
    if outcome is BattleOutcome.WIN:
        history = history.model_copy(update={"battle_wins": history.battle_wins + 1})
    elif outcome is BattleOutcome.LOSE:
        history = history.model_copy(update={"battle_losses": history.battle_losses + 1})

    condition = creature.condition.model_copy(
        update={"fatigue": clamp(creature.condition.fatigue + fatigue)}
    )
    return creature.model_copy(
        update={
            "history": history,
            "condition": condition,
            "last_cared_at": now or utcnow(),
        }
    )


def care_alert(creature: Creature) -> AlertKind | None:
    """The most urgent reason the creature needs attention, if any."""
    condition = creature.condition
    if condition.is_sick:
        return AlertKind.SICK
    if condition.hunger >= constants.DANGER_HUNGER:
        return AlertKind.HUNGRY
    if condition.cleanliness <= constants.DANGER_CLEANLINESS:
        return AlertKind.DIRTY
    if condition.happiness <= constants.DANGER_HAPPINESS:
        return AlertKind.SAD
    return None


# =============================================================================
# Care Session
# =============================================================================


class CareSession:
    """One owner's session with one creature.

    Holds the current creature value, the action cooldowns, the form table
    and the battle engine, and keeps a record of every battle fought.

    Example:
        >>> session = CareSession(create_creature("Pip", Kind.FLAME, now=now))
        >>> session.perform(ActionType.PLAY, now)
        >>> session.tick(now + timedelta(hours=1))
    """

    def __init__(
        self,
        creature: Creature,
        *,
        settings: Settings | None = None,
        forms: FormTable | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            creature: The creature this session owns.
            settings: Application settings (defaults to the global settings).
            forms: Form table (built once for the session if omitted).
            rng: Battle random source (defaults to one seeded from settings).
        """
        self.settings = settings or get_settings()
        self.forms = forms if forms is not None else FormTable.build()
        self.cooldowns = CooldownTracker()
        self.battles: list[BattleRecord] = []
        self._creature = creature

        if rng is None:
            self._battle_engine = BattleEngine.from_settings(self.settings.battle)
        else:
            self._battle_engine = BattleEngine(rng=rng, max_turns=self.settings.battle.max_turns)

        # every log line of this session carries the creature
        bind_context(creature_id=str(creature.id), creature_name=creature.name)

    @classmethod
    def start(
        cls,
        creature: Creature,
        *,
        settings: Settings | None = None,
        forms: FormTable | None = None,
        rng: RandomSource | None = None,
    ) -> CareSession:
        """Configure logging from settings and open a session.

        The entry point for a host application starting up with one
        creature. Arguments are as for the constructor.
        """
        settings = settings or get_settings()
        configure_logging_from_settings(settings)
        session = cls(creature, settings=settings, forms=forms, rng=rng)
        logger.info(
            "Care session started",
            kind=creature.kind.value,
            stage=creature.growth_stage.value,
        )
        return session

    def close(self) -> None:
        """End the session and drop its logging context."""
        logger.debug("Care session closed", battles=len(self.battles))
        clear_context()

    def __enter__(self) -> CareSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def creature(self) -> Creature:
        return self._creature

    def perform(self, action: ActionType, now: datetime | None = None) -> Creature:
        """Apply an owner action after checking eligibility and cooldown.

        Args:
            action: The action to apply.
            now: Action time (defaults to the current UTC time).

        Returns:
            The updated creature.

        Raises:
            ActionNotAllowedError: If the creature cannot take the action now.
            ActionCooldownError: If the action is still cooling down.
        """
        now = now or utcnow()

        if action is ActionType.BATTLE:
            raise ActionNotAllowedError(
                "Battles are started with CareSession.battle",
                action=action.value,
            )

        reason = check_action(self._creature, action)
        if reason is not None:
            logger.warning(
                "Action rejected",
                creature=self._creature.name,
                action=action.value,
                reason=reason.value,
            )
            raise ActionNotAllowedError(
                f"Cannot {action.display_name.lower()}: {reason.description}",
                action=action.value,
                reason=reason.value,
            )

        if self.settings.simulation.enforce_cooldowns:
            remaining = self.cooldowns.remaining_seconds(action, now)
            if remaining > 0:
                raise ActionCooldownError(
                    f"{action.display_name} is cooling down",
                    action=action.value,
                    retry_after_seconds=remaining,
                )

        self._creature = apply_action(self._creature, action, now)
        self.cooldowns.record(action, now)
        return self._creature

    def tick(self, now: datetime | None = None, *, catch_up: bool = False) -> AdvanceReport:
        """Advance the creature to ``now``.

        Args:
            now: Reference time (defaults to the current UTC time).
            catch_up: Use the start-up threshold instead of the background one.

        Returns:
            The AdvanceReport for this tick.
        """
        simulation = self.settings.simulation
        threshold = (
            simulation.min_catch_up_minutes if catch_up else simulation.background_min_minutes
        )
        report = advance(
            self._creature,
            now,
            forms=self.forms,
            min_elapsed_minutes=threshold,
        )
        self._creature = report.creature
        return report

    def battle(self, opponent: BattleSnapshot, now: datetime | None = None) -> BattleResult:
        """Fight an opponent and record the result.

        Args:
            opponent: The opponent's snapshot.
            now: Battle time (defaults to the current UTC time).

        Returns:
            The result from this creature's point of view.
        """
        now = now or utcnow()
        before = self._creature
        result = self._battle_engine.execute(BattleSnapshot.from_creature(before), opponent)

        self._creature = apply_battle_result(
            before,
            result.outcome,
            now,
            fatigue=self.settings.battle.post_battle_fatigue,
        )
        self.battles.append(BattleRecord.from_battle(before, opponent, result, now=now))
        return result


__all__ = [
    "AdvanceReport",
    "elapsed_minutes",
    "advance",
    "apply_battle_result",
    "care_alert",
    "CareSession",
]
