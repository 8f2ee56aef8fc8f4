"""Decay and action rules for the creature simulator.

Every function here takes a Creature and returns an updated copy. Owner
actions refresh ``last_cared_at``; time passage refreshes
``last_updated_at``. All gauge arithmetic is integer and clamped; none of
these functions raise for in-domain input.

Example:
    >>> from creature_sim.engine.actions import apply_feed
    >>> fed = apply_feed(creature, now=now)
    >>> fed.history.total_feedings - creature.history.total_feedings
    1
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from creature_sim.core import constants
from creature_sim.core.logging import get_logger
from creature_sim.models.creature import CareHistory, ConditionStats, Creature, utcnow
from creature_sim.models.enums import ActionType, RejectionReason


logger = get_logger(__name__)


def clamp(value: int, low: int = constants.STAT_MIN, high: int = constants.STAT_MAX) -> int:
    """Clamp a value into ``[low, high]``."""
    return max(low, min(high, value))


def _bump(history: CareHistory, counter: str) -> CareHistory:
    return history.model_copy(update={counter: getattr(history, counter) + 1})


def _cared(
    creature: Creature,
    now: datetime | None,
    *,
    condition: ConditionStats | None = None,
    counter: str | None = None,
    **combat_deltas: int,
) -> Creature:
    """Build the post-action creature with ``last_cared_at`` refreshed."""
    update: dict[str, object] = {"last_cared_at": now or utcnow()}
    if condition is not None:
        update["condition"] = condition
    if counter is not None:
        update["history"] = _bump(creature.history, counter)
    if combat_deltas:
        update["combat"] = creature.combat.model_copy(
            update={
                name: getattr(creature.combat, name) + delta
                for name, delta in combat_deltas.items()
            }
        )
    return creature.model_copy(update=update)


# =============================================================================
# Owner Actions
# =============================================================================


def apply_feed(creature: Creature, now: datetime | None = None) -> Creature:
    """Feed the creature: hunger -30, HP +10 (capped at max HP)."""
    condition = creature.condition
    return _cared(
        creature,
        now,
        condition=condition.model_copy(
            update={
                "hunger": clamp(condition.hunger - constants.FEED_HUNGER_RELIEF),
                "current_hp": clamp(
                    condition.current_hp + constants.FEED_HP_RESTORE,
                    high=creature.combat.max_hp,
                ),
            }
        ),
        counter="total_feedings",
    )


def apply_play(creature: Creature, now: datetime | None = None) -> Creature:
    """Play with the creature: happiness +20, fatigue +10, hunger +5."""
    condition = creature.condition
    return _cared(
        creature,
        now,
        condition=condition.model_copy(
            update={
                "happiness": clamp(condition.happiness + constants.PLAY_HAPPINESS_GAIN),
                "fatigue": clamp(condition.fatigue + constants.PLAY_FATIGUE_COST),
                "hunger": clamp(condition.hunger + constants.PLAY_HUNGER_COST),
            }
        ),
        counter="total_plays",
    )


def apply_clean(creature: Creature, now: datetime | None = None) -> Creature:
    """Clean up after the creature: cleanliness back to 100."""
    return _cared(
        creature,
        now,
        condition=creature.condition.model_copy(update={"cleanliness": constants.STAT_MAX}),
        counter="total_cleanings",
    )


def apply_sleep(creature: Creature, now: datetime | None = None) -> Creature:
    """Put the creature to sleep."""
    return _cared(
        creature,
        now,
        condition=creature.condition.model_copy(update={"is_sleeping": True}),
    )


def apply_wake(creature: Creature, now: datetime | None = None) -> Creature:
    """Wake the creature up, fully rested."""
    return _cared(
        creature,
        now,
        condition=creature.condition.model_copy(
            update={"is_sleeping": False, "fatigue": constants.STAT_MIN}
        ),
    )


def _train(creature: Creature, now: datetime | None, stat: str) -> Creature:
    condition = creature.condition
    return _cared(
        creature,
        now,
        condition=condition.model_copy(
            update={
                "fatigue": clamp(condition.fatigue + constants.TRAIN_FATIGUE_COST),
                "hunger": clamp(condition.hunger + constants.TRAIN_HUNGER_COST),
            }
        ),
        counter="total_trainings",
        **{stat: constants.TRAIN_STAT_GAIN},
    )


def apply_train_strength(creature: Creature, now: datetime | None = None) -> Creature:
    """Strength training: strength +1, fatigue +20, hunger +10."""
    return _train(creature, now, "strength")


def apply_train_defense(creature: Creature, now: datetime | None = None) -> Creature:
    """Defense training: defense +1, fatigue +20, hunger +10."""
    return _train(creature, now, "defense")


def apply_train_speed(creature: Creature, now: datetime | None = None) -> Creature:
    """Speed training: speed +1, fatigue +20, hunger +10."""
    return _train(creature, now, "speed")


def apply_heal(creature: Creature, now: datetime | None = None) -> Creature:
    """Cure sickness and restore HP to max."""
    return _cared(
        creature,
        now,
        condition=creature.condition.model_copy(
            update={"is_sick": False, "current_hp": creature.combat.max_hp}
        ),
        counter="total_heals",
    )


# =============================================================================
# Time Passage
# =============================================================================


def apply_time_passage(
    creature: Creature,
    elapsed_minutes: int,
    now: datetime | None = None,
) -> Creature:
    """Apply the drift of ``elapsed_minutes`` of real time.

    While sleeping only fatigue recovers (5 per full 10 minutes). While
    awake hunger, happiness, cleanliness and fatigue drift per full block
    of minutes; a starving creature loses HP; sickness may set in; and the
    neglect and sick counters are tallied at most once per call.

    Args:
        creature: The creature to update.
        elapsed_minutes: Whole minutes since the last update (non-negative).
        now: Update time (defaults to the current UTC time).

    Returns:
        The updated creature with ``last_updated_at`` refreshed.
    """
    updated_at = now or utcnow()
    before = creature.condition

    if before.is_sleeping:
        recovery = (
            elapsed_minutes // constants.SLEEP_RECOVERY_BLOCK_MINUTES
        ) * constants.SLEEP_FATIGUE_RECOVERY
        condition = before.model_copy(update={"fatigue": clamp(before.fatigue - recovery)})
        return creature.model_copy(
            update={"condition": condition, "last_updated_at": updated_at}
        )

    hunger = clamp(
        before.hunger
        + (elapsed_minutes // constants.HUNGER_BLOCK_MINUTES) * constants.HUNGER_PER_BLOCK
    )
    happiness = clamp(
        before.happiness
        - (elapsed_minutes // constants.HAPPINESS_BLOCK_MINUTES)
        * constants.HAPPINESS_DECAY_PER_BLOCK
    )
    cleanliness = clamp(
        before.cleanliness
        - (elapsed_minutes // constants.CLEANLINESS_BLOCK_MINUTES)
        * constants.CLEANLINESS_DECAY_PER_BLOCK
    )
    fatigue = clamp(
        before.fatigue
        + (elapsed_minutes // constants.FATIGUE_BLOCK_MINUTES) * constants.FATIGUE_PER_BLOCK
    )

    current_hp = before.current_hp
    if hunger >= constants.STARVING_HUNGER:
        current_hp = clamp(current_hp - constants.STARVING_HP_LOSS, high=creature.combat.max_hp)

    starving = hunger >= constants.STAT_MAX
    filthy = cleanliness <= constants.STAT_MIN
    exhausted_and_sad = (
        fatigue >= constants.STAT_MAX and happiness <= constants.DEPRESSED_HAPPINESS
    )
    falls_sick = not before.is_sick and (starving or filthy or exhausted_and_sad)

    condition = before.model_copy(
        update={
            "hunger": hunger,
            "happiness": happiness,
            "cleanliness": cleanliness,
            "fatigue": fatigue,
            "current_hp": current_hp,
            "is_sick": before.is_sick or falls_sick,
        }
    )

    history = creature.history
    if starving or filthy:
        history = _bump(history, "neglect_count")
    if falls_sick:
        history = _bump(history, "sick_count")
        logger.info(
            "Creature fell sick",
            creature=creature.name,
            hunger=hunger,
            cleanliness=cleanliness,
            fatigue=fatigue,
            happiness=happiness,
        )

    logger.debug(
        "Time passage applied",
        creature=creature.name,
        elapsed_minutes=elapsed_minutes,
        hunger=hunger,
        happiness=happiness,
        cleanliness=cleanliness,
        fatigue=fatigue,
    )

    return creature.model_copy(
        update={"condition": condition, "history": history, "last_updated_at": updated_at}
    )


# =============================================================================
# Action Dispatch & Eligibility
# =============================================================================

ACTION_HANDLERS: dict[ActionType, Callable[[Creature, datetime | None], Creature]] = {
    ActionType.FEED: apply_feed,
    ActionType.PLAY: apply_play,
    ActionType.CLEAN: apply_clean,
    ActionType.SLEEP: apply_sleep,
    ActionType.WAKE: apply_wake,
    ActionType.TRAIN_STRENGTH: apply_train_strength,
    ActionType.TRAIN_DEFENSE: apply_train_defense,
    ActionType.TRAIN_SPEED: apply_train_speed,
    ActionType.HEAL: apply_heal,
}


def apply_action(
    creature: Creature,
    action: ActionType,
    now: datetime | None = None,
) -> Creature:
    """Apply an owner action by type.

    BATTLE is resolved by the battle engine, so it returns the creature
    unchanged here.

    Args:
        creature: The creature to act on.
        action: The action to apply.
        now: Action time (defaults to the current UTC time).

    Returns:
        The updated creature.
    """
    handler = ACTION_HANDLERS.get(action)
    if handler is None:
        return creature

    logger.debug("Applying action", creature=creature.name, action=action.value)
    return handler(creature, now)


def check_action(creature: Creature, action: ActionType) -> RejectionReason | None:
    """Check whether an action makes sense for the creature right now.

    Args:
        creature: The creature to act on.
        action: The requested action.

    Returns:
        The reason the action is refused, or None if it may proceed.
    """
    condition = creature.condition

    if action is ActionType.FEED:
        if condition.is_sleeping:
            return RejectionReason.SLEEPING
        if condition.hunger <= constants.STAT_MIN:
            return RejectionReason.NOT_HUNGRY
    elif action is ActionType.PLAY:
        if condition.is_sleeping:
            return RejectionReason.SLEEPING
        if condition.fatigue >= constants.EXHAUSTED_FATIGUE:
            return RejectionReason.TOO_TIRED
    elif action is ActionType.SLEEP:
        if condition.is_sleeping:
            return RejectionReason.ALREADY_SLEEPING
    elif action is ActionType.WAKE:
        if not condition.is_sleeping:
            return RejectionReason.NOT_SLEEPING
    elif action is ActionType.HEAL:
        if not condition.is_sick:
            return RejectionReason.NOT_SICK
    elif action.is_training:
        if condition.is_sleeping:
            return RejectionReason.SLEEPING
        if condition.fatigue >= constants.EXHAUSTED_FATIGUE:
            return RejectionReason.TOO_TIRED
        if condition.hunger >= constants.TOO_HUNGRY_TO_TRAIN:
            return RejectionReason.TOO_HUNGRY

    return None


class CooldownTracker:
    """Track when each action last ran and whether it may run again.

    Example:
        >>> tracker = CooldownTracker()
        >>> tracker.record(ActionType.FEED, now)
        >>> tracker.is_ready(ActionType.FEED, now)
        False
    """

    def __init__(self) -> None:
        """Initialize with no actions recorded."""
        self._last_run: dict[ActionType, datetime] = {}

    def record(self, action: ActionType, now: datetime) -> None:
        """Remember that ``action`` ran at ``now``."""
        if action.cooldown_seconds > 0:
            self._last_run[action] = now

    def remaining_seconds(self, action: ActionType, now: datetime) -> float:
        """Seconds left before ``action`` may run again (0.0 when ready)."""
        last = self._last_run.get(action)
        if last is None:
            return 0.0
        elapsed = (now - last).total_seconds()
        return max(0.0, action.cooldown_seconds - elapsed)

    def is_ready(self, action: ActionType, now: datetime) -> bool:
        return self.remaining_seconds(action, now) <= 0.0

    def reset(self) -> None:
        self._last_run.clear()


__all__ = [
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
]
