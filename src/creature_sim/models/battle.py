"""Pydantic V2 schemas for battles.

BattleSnapshot is the transport-safe copy of a creature's combat
attributes and has a stable pipe-delimited text encoding for crossing a
process or device boundary. BattleTurn and BattleResult describe one
resolved battle; BattleRecord is its flat, persistable summary.
"""

from __future__ import annotations

import re
from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from creature_sim.core import constants
from creature_sim.core.logging import get_logger
from creature_sim.models.creature import Creature, utcnow
from creature_sim.models.enums import BattleOutcome, EvolutionPath, GrowthStage, Kind


logger = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class BattleSnapshot(BaseModel):
    """Immutable combat-relevant copy of a creature.

    Wire format: ``name|KIND|STAGE|PATH|strength|defense|speed|max_hp|form_id``
    where the enum fields use their uppercase member names.

    Example:
        >>> snap = BattleSnapshot.decode("Pip|FLAME|BABY|NORMAL|15|8|12|90|flame_baby_normal")
        >>> snap.strength
        15
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, pattern=r"^[^|]+$")
    kind: Kind
    stage: GrowthStage
    path: EvolutionPath
    strength: int
    defense: int
    speed: int
    max_hp: int = Field(ge=0)
    form_id: str = Field(pattern=r"^[^|]*$")

    @classmethod
    def from_creature(cls, creature: Creature) -> BattleSnapshot:
        """Take a battle snapshot of a creature's current combat attributes."""
        return cls(
            name=creature.name,
            kind=creature.kind,
            stage=creature.growth_stage,
            path=creature.evolution_path,
            strength=creature.combat.strength,
            defense=creature.combat.defense,
            speed=creature.combat.speed,
            max_hp=creature.combat.max_hp,
            form_id=creature.sprite_id,
        )

    def encode(self) -> str:
        """Encode the snapshot as a single pipe-delimited line."""
        fields = (
            self.name,
            self.kind.name,
            self.stage.name,
            self.path.name,
            str(self.strength),
            str(self.defense),
            str(self.speed),
            str(self.max_hp),
            self.form_id,
        )
        return constants.SNAPSHOT_SEPARATOR.join(fields)

    @classmethod
    def decode(cls, encoded: str) -> BattleSnapshot | None:
        """Decode a snapshot produced by :meth:`encode`.

        Args:
            encoded: The pipe-delimited text.

        Returns:
            The snapshot, or None if the field count is wrong, an enum token
            is unknown, or a numeric field does not parse.
        """
        parts = encoded.split(constants.SNAPSHOT_SEPARATOR)
        if len(parts) != constants.SNAPSHOT_FIELD_COUNT:
            logger.debug(
                "Snapshot rejected",
                reason="field_count",
                expected=constants.SNAPSHOT_FIELD_COUNT,
                actual=len(parts),
            )
            return None

        name, kind, stage, path, strength, defense, speed, max_hp, form = parts
        numbers = (strength, defense, speed, max_hp)
        if not all(_INTEGER.fullmatch(number) for number in numbers):
            # stricter than int(), which takes "1_0" or " 12"
            logger.debug("Snapshot rejected", reason="numeric_field", fields=numbers)
            return None

        try:
            return cls(
                name=name,
                kind=Kind[kind],
                stage=GrowthStage[stage],
                path=EvolutionPath[path],
                strength=int(strength),
                defense=int(defense),
                speed=int(speed),
                max_hp=int(max_hp),
                form_id=form,
            )
        except (KeyError, ValueError) as exc:
            # pydantic.ValidationError is a ValueError subclass
            logger.debug("Snapshot rejected", reason=type(exc).__name__, error=str(exc))
            return None


class BattleTurn(BaseModel):
    """One attack within a battle.

    Attributes:
        turn_number: 1-based position in the battle.
        attacker_name: Name of the attacking side.
        defender_name: Name of the defending side.
        damage: Damage dealt this turn.
        attacker_hp_after: Attacker HP after the turn.
        defender_hp_after: Defender HP after the turn.
        is_critical: Whether the attack was a critical hit.
        message: Human-readable description of the turn.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    turn_number: int = Field(ge=1)
    attacker_name: str
    defender_name: str
    damage: int = Field(ge=0)
    attacker_hp_after: int = Field(ge=0)
    defender_hp_after: int = Field(ge=0)
    is_critical: bool = False
    message: str


class BattleResult(BaseModel):
    """Outcome and full turn log of one battle.

    The ``my_*`` fields describe the side that ran the engine (the first
    snapshot passed in); ``opponent_*`` fields describe the other side.
    The authoritative side computes the result once and ships it with
    ``model_dump_json``; the other side loads it and calls
    :meth:`mirrored` to replay the same log from its own perspective.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcome: BattleOutcome
    turns: tuple[BattleTurn, ...] = ()
    my_hp: int = Field(ge=0)
    my_max_hp: int = Field(ge=0)
    opponent_hp: int = Field(ge=0)
    opponent_max_hp: int = Field(ge=0)

    @property
    def turn_count(self) -> int:
        return len(self.turns)

    def mirrored(self) -> BattleResult:
        """The same battle seen from the opponent's side."""
        return BattleResult(
            outcome=self.outcome.reversed(),
            turns=self.turns,
            my_hp=self.opponent_hp,
            my_max_hp=self.opponent_max_hp,
            opponent_hp=self.my_hp,
            opponent_max_hp=self.my_max_hp,
        )

    def log_text(self) -> str:
        """Render the turn log as numbered lines."""
        return "\n".join(f"{turn.turn_number}. {turn.message}" for turn in self.turns)


class BattleRecord(BaseModel):
    """Flat summary of one battle, shaped for the persistence collaborator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(default_factory=uuid4)
    creature_id: UUID
    creature_name: str
    opponent_name: str
    opponent_kind: Kind
    opponent_stage: GrowthStage

    my_strength: int
    my_defense: int
    my_speed: int
    my_max_hp: int

    opponent_strength: int
    opponent_defense: int
    opponent_speed: int
    opponent_max_hp: int

    outcome: BattleOutcome
    battle_log: str = ""
    timestamp: datetime = Field(default_factory=utcnow)

    @classmethod
    def from_battle(
        cls,
        creature: Creature,
        opponent: BattleSnapshot,
        result: BattleResult,
        *,
        now: datetime | None = None,
    ) -> BattleRecord:
        """Summarize a battle fought by ``creature`` against ``opponent``.

        Args:
            creature: The owner's creature as it entered the battle.
            opponent: The opponent's snapshot.
            result: The result from the creature's perspective.
            now: Record timestamp (defaults to the current UTC time).

        Returns:
            The battle record.
        """
        return cls(
            creature_id=creature.id,
            creature_name=creature.name,
            opponent_name=opponent.name,
            opponent_kind=opponent.kind,
            opponent_stage=opponent.stage,
            my_strength=creature.combat.strength,
            my_defense=creature.combat.defense,
            my_speed=creature.combat.speed,
            my_max_hp=creature.combat.max_hp,
            opponent_strength=opponent.strength,
            opponent_defense=opponent.defense,
            opponent_speed=opponent.speed,
            opponent_max_hp=opponent.max_hp,
            outcome=result.outcome,
            battle_log=result.log_text(),
            timestamp=now or utcnow(),
        )


__all__ = [
    "BattleSnapshot",
    "BattleTurn",
    "BattleResult",
    "BattleRecord",
]
