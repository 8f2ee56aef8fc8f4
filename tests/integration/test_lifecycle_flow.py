"""Integration tests for a creature's lifecycle.

Tests complete scenarios from hatching through care, evolution and
networked battles.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from creature_sim.core.config import BattleSettings, Settings
from creature_sim.engine.battle import BattleEngine
from creature_sim.engine.forms import FormTable
from creature_sim.engine.lifecycle import CareSession
from creature_sim.models.battle import BattleResult, BattleSnapshot
from creature_sim.models.creature import Creature, create_creature
from creature_sim.models.enums import ActionType, BattleOutcome, EvolutionPath, GrowthStage, Kind


class TestRaisingFlow:
    """Test raising a creature over several in-game weeks."""

    def test_attentive_owner_raises_happy_creature(
        self,
        sprout: Creature,
        now: datetime,
        form_table: FormTable,
    ) -> None:
        """Play often enough and the creature evolves along the HAPPY path."""
        session = CareSession(sprout, settings=Settings(), forms=form_table, rng=random.Random(3))
        clock = now

        # Wake, feed, play and tuck in again every 20 minutes
        for _ in range(60):
            clock += timedelta(minutes=20)
            session.tick(clock)
            if session.creature.condition.is_sleeping:
                session.perform(ActionType.WAKE, clock)
            if session.creature.condition.hunger > 0:
                session.perform(ActionType.FEED, clock)
            session.perform(ActionType.PLAY, clock)
            session.perform(ActionType.SLEEP, clock)

        assert session.creature.growth_stage == GrowthStage.BABY
        assert session.creature.history.total_plays == 60

        # Asleep through the rest of the three days
        report = session.tick(now + timedelta(days=3), catch_up=True)

        assert report.evolved is True
        assert session.creature.history.neglect_count == 0
        assert session.creature.growth_stage == GrowthStage.CHILD
        assert session.creature.evolution_path == EvolutionPath.HAPPY
        assert session.creature.evolution_id == "sprout_child_happy"
        assert form_table.find(session.creature.evolution_id).display_name == "Cheerful Sprout"

    def test_neglected_creature(self, flame: Creature, now: datetime, form_table: FormTable) -> None:
        """Leave the creature alone for weeks, checking in once an hour."""
        session = CareSession(flame, settings=Settings(), forms=form_table)
        clock = now

        for _ in range(24 * 14):
            clock += timedelta(hours=1)
            session.tick(clock)

        creature = session.creature
        assert creature.growth_stage == GrowthStage.ADULT
        assert creature.evolution_path == EvolutionPath.NEGLECTED
        assert creature.condition.is_sick is True
        assert creature.history.sick_count == 1
        assert creature.history.neglect_count >= 10


class TestNetworkedBattle:
    """Test a battle between two devices exchanging snapshots."""

    def test_authority_and_replay(self, flame: Creature, droplet: Creature) -> None:
        """Both sides see the same log; only the outcome flips."""
        host_wire = BattleSnapshot.from_creature(flame).encode()
        guest_wire = BattleSnapshot.from_creature(droplet).encode()

        # Host decodes the guest's snapshot and runs the battle once
        guest_snapshot = BattleSnapshot.decode(guest_wire)
        assert guest_snapshot is not None
        host_snapshot = BattleSnapshot.decode(host_wire)
        assert host_snapshot is not None

        engine = BattleEngine(rng=random.Random(42))
        host_result = engine.execute(host_snapshot, guest_snapshot)

        # Guest receives the result as JSON and replays it from its side
        guest_result = BattleResult.model_validate_json(host_result.model_dump_json()).mirrored()

        assert guest_result.turns == host_result.turns
        assert guest_result.outcome == host_result.outcome.reversed()
        assert guest_result.my_hp == host_result.opponent_hp
        assert guest_result.log_text() == host_result.log_text()

    def test_sessions_track_records(self, now: datetime, form_table: FormTable) -> None:
        settings = Settings(battle=BattleSettings(seed=2024))
        hero = CareSession(create_creature("Hero", Kind.SPROUT, now=now), settings=settings, forms=form_table)
        rival = BattleSnapshot.from_creature(create_creature("Rival", Kind.FLAME, now=now))

        outcomes = [hero.battle(rival, now + timedelta(minutes=i)).outcome for i in range(3)]

        history = hero.creature.history
        assert history.battle_wins == outcomes.count(BattleOutcome.WIN)
        assert history.battle_losses == outcomes.count(BattleOutcome.LOSE)
        assert hero.creature.condition.fatigue == min(100, 15 * 3)
        assert [record.outcome for record in hero.battles] == outcomes
