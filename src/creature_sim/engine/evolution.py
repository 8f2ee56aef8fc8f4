"""Evolution rules for the creature simulator.

A creature evolves when its age crosses the next growth-stage threshold.
The path it takes is picked from its care history in a fixed priority
order, and the matching form's stat modifiers are added on top of its
current combat stats. Evolution never regresses a stage.

Example:
    >>> engine = EvolutionEngine(FormTable.build())
    >>> if can_evolve(creature, now):
    ...     creature = engine.evolve(creature, now)
"""

from __future__ import annotations

from datetime import datetime

from creature_sim.core import constants
from creature_sim.core.logging import get_logger
from creature_sim.engine.forms import FormTable
from creature_sim.models.creature import Creature, utcnow
from creature_sim.models.enums import EvolutionPath
from creature_sim.models.evolution import EvolutionForm


logger = get_logger(__name__)


def can_evolve(creature: Creature, now: datetime | None = None) -> bool:
    """Whether the creature's age implies a later stage than it has reached.

    Args:
        creature: The creature to check.
        now: Reference time (defaults to the current UTC time).

    Returns:
        True iff the age-implied stage's order is strictly greater than
        the stored stage's order.
    """
    implied = creature.calculated_stage(now or utcnow())
    return implied.order > creature.growth_stage.order


def determine_evolution_path(creature: Creature) -> EvolutionPath:
    """Pick the evolution path from the creature's care history.

    Rules are checked in priority order and the first match wins:
    neglect, sickness, play, training, balanced care, then NORMAL.
    ANGRY has no trigger here.
    """
    history = creature.history

    if history.neglect_count >= constants.NEGLECTED_MIN_NEGLECT:
        return EvolutionPath.NEGLECTED
    if history.sick_count >= constants.SICK_MIN_SICK_EVENTS:
        return EvolutionPath.SICK
    if history.total_plays >= constants.HAPPY_MIN_PLAYS:
        return EvolutionPath.HAPPY
    if history.total_trainings >= constants.STRONG_MIN_TRAININGS:
        return EvolutionPath.STRONG

    balanced = (
        history.total_feedings >= constants.WISE_MIN_FEEDINGS
        and history.total_plays >= constants.WISE_MIN_PLAYS
        and history.total_cleanings >= constants.WISE_MIN_CLEANINGS
        and history.neglect_count < constants.WISE_MAX_NEGLECT
    )
    if balanced:
        return EvolutionPath.WISE

    return EvolutionPath.NORMAL


class EvolutionEngine:
    """Apply evolutions using an explicitly supplied form table.

    Attributes:
        forms: The form table used for lookups.
    """

    def __init__(self, forms: FormTable) -> None:
        """Initialize the engine.

        Args:
            forms: Read-only table of evolution forms.
        """
        self.forms = forms

    def current_form(self, creature: Creature) -> EvolutionForm:
        """The form matching the creature's current kind, stage and path."""
        return self.forms.get(creature.kind, creature.growth_stage, creature.evolution_path)

    def evolve(self, creature: Creature, now: datetime | None = None) -> Creature:
        """Evolve the creature if its age allows it.

        The new stage comes from the creature's age, the path from its care
        history. The form's modifiers are added to the current combat stats
        (so evolutions compound across stages) and HP is fully restored.

        Args:
            creature: The creature to evolve.
            now: Reference time (defaults to the current UTC time).

        Returns:
            The evolved creature, or the same creature when it cannot evolve.
        """
        now = now or utcnow()
        if not can_evolve(creature, now):
            return creature

        new_stage = creature.calculated_stage(now)
        new_path = determine_evolution_path(creature)
        form = self.forms.get(creature.kind, new_stage, new_path)
        combat = form.stat_modifiers.apply_to(creature.combat)

        logger.info(
            "Creature evolved",
            creature=creature.name,
            from_stage=creature.growth_stage.value,
            to_stage=new_stage.value,
            path=new_path.value,
            form=form.id,
        )

        return creature.model_copy(
            update={
                "growth_stage": new_stage,
                "evolution_path": new_path,
                "evolution_id": form.id,
                "combat": combat,
                "condition": creature.condition.model_copy(
                    update={"current_hp": max(0, combat.max_hp)}
                ),
            }
        )


__all__ = [
    "can_evolve",
    "determine_evolution_path",
    "EvolutionEngine",
]
