"""Turn-based battle resolution between two creature snapshots.

The faster side attacks first (a coin flip breaks speed ties) and the
sides then alternate strictly. Each attack deals
``max(1, strength - defense / 3)`` damage, with the division truncated
toward zero. A critical hit with probability ``speed / 100`` multiplies
the damage by 1.5 (truncated). The battle
ends when either side reaches 0 HP or after the turn cap; a capped battle
is decided by remaining HP ratio.

Randomness comes from an injected random source so battles are
reproducible under a fixed seed. In networked play one side runs the
engine and ships the result; the other side replays it.

Example:
    >>> engine = BattleEngine(rng=random.Random(42))
    >>> result = engine.execute(mine, theirs)
    >>> result.outcome
    <BattleOutcome.WIN: 'win'>
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

from creature_sim.core import constants
from creature_sim.core.logging import get_logger
from creature_sim.models.battle import BattleResult, BattleSnapshot, BattleTurn
from creature_sim.models.enums import BattleOutcome


if TYPE_CHECKING:
    from creature_sim.core.config import BattleSettings

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Source of uniform floats in ``[0.0, 1.0)``.

    ``random.Random`` satisfies this protocol.
    """

    def random(self) -> float: ...


def base_damage(attacker: BattleSnapshot, defender: BattleSnapshot) -> int:
    """Non-critical damage of one attack (never below 1)."""
    # truncates toward zero for negative defense too
    mitigation = int(defender.defense / constants.DEFENSE_DIVISOR)
    return max(constants.MIN_DAMAGE, attacker.strength - mitigation)


def critical_damage(damage: int) -> int:
    """Damage after the critical multiplier, truncated toward zero."""
    return int(damage * constants.CRITICAL_MULTIPLIER)


def resolve_outcome(
    my_hp: int,
    my_max_hp: int,
    opponent_hp: int,
    opponent_max_hp: int,
) -> BattleOutcome:
    """Classify a finished battle from the first side's point of view.

    Knock-outs decide first (both down is a draw). Otherwise the higher
    remaining-HP ratio wins and equal ratios draw.
    """
    if my_hp <= 0 and opponent_hp <= 0:
        return BattleOutcome.DRAW
    if opponent_hp <= 0:
        return BattleOutcome.WIN
    if my_hp <= 0:
        return BattleOutcome.LOSE

    # Cross-multiplied so equal ratios compare exactly
    mine = my_hp * opponent_max_hp
    theirs = opponent_hp * my_max_hp
    if mine > theirs:
        return BattleOutcome.WIN
    if mine < theirs:
        return BattleOutcome.LOSE
    return BattleOutcome.DRAW


class BattleEngine:
    """Resolve battles between two snapshots.

    Attributes:
        max_turns: Turn cap for one battle.
    """

    def __init__(
        self,
        *,
        rng: RandomSource | None = None,
        max_turns: int = constants.MAX_BATTLE_TURNS,
    ) -> None:
        """Initialize the battle engine.

        Args:
            rng: Random source for initiative ties and critical hits.
                Defaults to a fresh ``random.Random``.
            max_turns: Turn cap for one battle.
        """
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self.max_turns = max_turns

    @classmethod
    def from_settings(cls, settings: BattleSettings) -> BattleEngine:
        """Build an engine from battle settings (seeded when a seed is set)."""
        return cls(rng=random.Random(settings.seed), max_turns=settings.max_turns)

    def _coin_flip(self) -> bool:
        return self._rng.random() < 0.5

    def _rolls_critical(self, attacker: BattleSnapshot) -> bool:
        return self._rng.random() < attacker.speed / 100.0

    def execute(self, mine: BattleSnapshot, opponent: BattleSnapshot) -> BattleResult:
        """Run a full battle.

        Args:
            mine: The calling side's snapshot.
            opponent: The other side's snapshot.

        Returns:
            The outcome from ``mine``'s point of view with the full turn log.
        """
        my_hp = mine.max_hp
        opponent_hp = opponent.max_hp
        turns: list[BattleTurn] = []

        if mine.speed == opponent.speed:
            my_turn = self._coin_flip()
        else:
            my_turn = mine.speed > opponent.speed

        logger.debug(
            "Battle started",
            mine=mine.name,
            opponent=opponent.name,
            first=mine.name if my_turn else opponent.name,
        )

        turn_number = 1
        while my_hp > 0 and opponent_hp > 0 and turn_number <= self.max_turns:
            attacker, defender = (mine, opponent) if my_turn else (opponent, mine)
            defender_hp = opponent_hp if my_turn else my_hp
            attacker_hp = my_hp if my_turn else opponent_hp

            damage = base_damage(attacker, defender)
            is_critical = self._rolls_critical(attacker)
            if is_critical:
                damage = critical_damage(damage)

            defender_hp = max(0, defender_hp - damage)
            if my_turn:
                opponent_hp = defender_hp
            else:
                my_hp = defender_hp

            if is_critical:
                message = (
                    f"{attacker.name} lands a critical hit! "
                    f"{damage} damage to {defender.name}!"
                )
            else:
                message = f"{attacker.name} deals {damage} damage to {defender.name}!"

            turns.append(
                BattleTurn(
                    turn_number=turn_number,
                    attacker_name=attacker.name,
                    defender_name=defender.name,
                    damage=damage,
                    attacker_hp_after=attacker_hp,
                    defender_hp_after=defender_hp,
                    is_critical=is_critical,
                    message=message,
                )
            )

            my_turn = not my_turn
            turn_number += 1

        outcome = resolve_outcome(my_hp, mine.max_hp, opponent_hp, opponent.max_hp)

        logger.info(
            "Battle finished",
            mine=mine.name,
            opponent=opponent.name,
            outcome=outcome.value,
            turns=len(turns),
            my_hp=my_hp,
            opponent_hp=opponent_hp,
        )

        return BattleResult(
            outcome=outcome,
            turns=tuple(turns),
            my_hp=my_hp,
            my_max_hp=mine.max_hp,
            opponent_hp=opponent_hp,
            opponent_max_hp=opponent.max_hp,
        )


__all__ = [
    "RandomSource",
    "BattleEngine",
    "base_damage",
    "critical_damage",
    "resolve_outcome",
]
