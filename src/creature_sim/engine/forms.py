"""Evolution form table.

This module contains all the static data that describes evolution forms:
- Display names and descriptions for every (kind, stage, path) cell
- Stage, path and kind stat-modifier deltas

The modifier deltas are fixed: existing saved creatures were evolved with
these exact values, so changing them breaks stat parity.

A FormTable is built once from this data and passed to the evolution
engine. Tests may construct a reduced table; cells missing from a table
are regenerated from the same data on lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from creature_sim.core.logging import get_logger
from creature_sim.models.creature import form_id
from creature_sim.models.enums import EvolutionPath, GrowthStage, Kind
from creature_sim.models.evolution import EvolutionForm, StatModifiers


logger = get_logger(__name__)

P = EvolutionPath

# =============================================================================
# Stat Modifier Deltas
# =============================================================================

STAGE_BONUS: dict[GrowthStage, StatModifiers] = {
    GrowthStage.BABY: StatModifiers(),
    GrowthStage.CHILD: StatModifiers(
        strength_bonus=2, defense_bonus=2, speed_bonus=2, max_hp_bonus=10
    ),
    GrowthStage.TEEN: StatModifiers(
        strength_bonus=5, defense_bonus=5, speed_bonus=5, max_hp_bonus=25
    ),
    GrowthStage.ADULT: StatModifiers(
        strength_bonus=10, defense_bonus=10, speed_bonus=10, max_hp_bonus=50
    ),
    GrowthStage.PERFECT: StatModifiers(
        strength_bonus=20, defense_bonus=20, speed_bonus=20, max_hp_bonus=100
    ),
}

PATH_BONUS: dict[EvolutionPath, StatModifiers] = {
    P.NORMAL: StatModifiers(),
    P.HAPPY: StatModifiers(strength_bonus=0, defense_bonus=0, speed_bonus=5, max_hp_bonus=20),
    P.STRONG: StatModifiers(strength_bonus=10, defense_bonus=5, speed_bonus=0, max_hp_bonus=10),
    P.WISE: StatModifiers(strength_bonus=5, defense_bonus=5, speed_bonus=5, max_hp_bonus=15),
    P.NEGLECTED: StatModifiers(
        strength_bonus=-5, defense_bonus=-5, speed_bonus=-5, max_hp_bonus=-20
    ),
    P.SICK: StatModifiers(strength_bonus=-10, defense_bonus=-5, speed_bonus=-5, max_hp_bonus=-30),
    P.ANGRY: StatModifiers(strength_bonus=15, defense_bonus=-5, speed_bonus=10, max_hp_bonus=-10),
}

KIND_BONUS: dict[Kind, StatModifiers] = {
    Kind.FLAME: StatModifiers(strength_bonus=3, defense_bonus=-1, speed_bonus=2, max_hp_bonus=-5),
    Kind.DROPLET: StatModifiers(),
    Kind.SPROUT: StatModifiers(strength_bonus=-1, defense_bonus=3, speed_bonus=-1, max_hp_bonus=10),
}

# =============================================================================
# Names & Descriptions
# =============================================================================
# Per (kind, stage): path -> (display name, description). The None key is the
# default used for paths without their own entry.

FormNames = dict[EvolutionPath | None, tuple[str, str]]

FORM_NAMES: dict[Kind, dict[GrowthStage, FormNames]] = {
    Kind.FLAME: {
        GrowthStage.BABY: {
            None: ("Baby Flame", "A tiny ember has sparked to life."),
        },
        GrowthStage.CHILD: {
            P.HAPPY: ("Cheerful Flame", "A flame burning with glee!"),
            P.NEGLECTED: ("Withered Flame", "An ember about to go out..."),
            None: ("Flamelet", "A briskly burning flame."),
        },
        GrowthStage.TEEN: {
            P.HAPPY: ("Flame Dancer", "A flame that burns as if dancing!"),
            P.STRONG: ("Blaze Warrior", "The fierce power of fire!"),
            P.WISE: ("Wise Flame", "Wisdom glowing warmly."),
            P.NEGLECTED: ("Scorched Flame", "An ember smoldering darkly."),
            P.SICK: ("Feeble Flame", "A light flickering weakly."),
            None: ("Growing Flame", "A flame that keeps getting bigger."),
        },
        GrowthStage.ADULT: {
            P.HAPPY: ("Sun Flame", "A light that warms everyone!"),
            P.STRONG: ("Lava Warrior", "There is nothing it cannot melt!"),
            P.WISE: ("Sage Flame", "Lights the way with a wise glow."),
            P.NEGLECTED: ("Ash Flame", "A faint ember left behind."),
            P.SICK: ("Ailing Flame", "A wavering light of life."),
            P.ANGRY: ("Flame of Fury", "An uncontrollable blaze."),
            None: ("Full Flame", "A beautifully burning flame."),
        },
        GrowthStage.PERFECT: {
            P.HAPPY: ("Phoenix", "An everlasting flame of life!"),
            P.STRONG: ("Blaze King", "The mightiest fire warrior!"),
            P.WISE: ("Flame Sage", "The light of all-knowing wisdom."),
            None: ("Legendary Flame", "A flame become legend."),
        },
    },
    Kind.DROPLET: {
        GrowthStage.BABY: {
            None: ("Baby Droplet", "A tiny droplet has formed."),
        },
        GrowthStage.CHILD: {
            P.HAPPY: ("Cheerful Droplet", "A droplet bouncing along!"),
            P.NEGLECTED: ("Murky Droplet", "Water gone dirty..."),
            None: ("Droplet", "A clear droplet."),
        },
        GrowthStage.TEEN: {
            P.HAPPY: ("Water Sprite", "A dancing water spirit!"),
            P.STRONG: ("Wave Warrior", "The power of mighty waves!"),
            P.WISE: ("Wise Ripple", "Calm and deep wisdom."),
            P.NEGLECTED: ("Polluted Water", "Water gone foul."),
            P.SICK: ("Ailing Droplet", "Water flowing weakly."),
            None: ("Growing Droplet", "A droplet that keeps getting bigger."),
        },
        GrowthStage.ADULT: {
            P.HAPPY: ("Rainbow Tide", "Water shining in seven colors!"),
            P.STRONG: ("Tsunami Warrior", "An unstoppable wave!"),
            P.WISE: ("Abyssal Sage", "The wisdom of the deep sea."),
            P.NEGLECTED: ("Stagnant Water", "Water left standing too long."),
            P.SICK: ("Tainted Tide", "Sickly water."),
            P.ANGRY: ("Tempest", "A fury that sweeps everything away."),
            None: ("Full Droplet", "A beautiful wave."),
        },
        GrowthStage.PERFECT: {
            P.HAPPY: ("Wellspring of Life", "Water that revives every living thing!"),
            P.STRONG: ("Sea King", "The mightiest water warrior!"),
            P.WISE: ("Water Sage", "Knows every current in the world."),
            None: ("Legendary Tide", "Water become legend."),
        },
    },
    Kind.SPROUT: {
        GrowthStage.BABY: {
            None: ("Baby Sprout", "A tiny sprout has budded."),
        },
        GrowthStage.CHILD: {
            P.HAPPY: ("Cheerful Sprout", "A sprout growing in the sunshine!"),
            P.NEGLECTED: ("Wilted Sprout", "A sprout drying up..."),
            None: ("Sproutling", "A fresh green sprout."),
        },
        GrowthStage.TEEN: {
            P.HAPPY: ("Flower Bud", "Ready to burst into bloom!"),
            P.STRONG: ("Vine Warrior", "The strength of sturdy stems!"),
            P.WISE: ("Wise Leaf", "The wisdom of nature."),
            P.NEGLECTED: ("Weed", "Grass grown wild."),
            P.SICK: ("Ailing Sprout", "A sprout starting to wither."),
            None: ("Growing Sprout", "A sprout growing up fast."),
        },
        GrowthStage.ADULT: {
            P.HAPPY: ("Full Bloom", "A beautifully opened flower!"),
            P.STRONG: ("Great Tree Warrior", "A tree with deep roots!"),
            P.WISE: ("Forest Sage", "Knows everything in the forest."),
            P.NEGLECTED: ("Dry Tree", "A lifeless tree."),
            P.SICK: ("Rotting Tree", "A sickly tree."),
            P.ANGRY: ("Thornbush", "A fury that pierces everything."),
            None: ("Full Tree", "A beautiful tree."),
        },
        GrowthStage.PERFECT: {
            P.HAPPY: ("World Tree", "The source of all life!"),
            P.STRONG: ("Forest Guardian", "The mightiest nature warrior!"),
            P.WISE: ("Nature Sage", "All the wisdom of the earth."),
            None: ("Legendary Tree", "A tree become legend."),
        },
    },
}


def calculate_modifiers(kind: Kind, stage: GrowthStage, path: EvolutionPath) -> StatModifiers:
    """Total stat modifiers for a form: stage baseline + path delta + kind flavor."""
    return STAGE_BONUS[stage] + PATH_BONUS[path] + KIND_BONUS[kind]


def create_form(kind: Kind, stage: GrowthStage, path: EvolutionPath) -> EvolutionForm:
    """Build the evolution form for one (kind, stage, path) cell."""
    names = FORM_NAMES[kind][stage]
    display_name, description = names.get(path, names[None])
    return EvolutionForm(
        id=form_id(kind, stage, path),
        kind=kind,
        stage=stage,
        path=path,
        display_name=display_name,
        description=description,
        stat_modifiers=calculate_modifiers(kind, stage, path),
    )


class FormTable:
    """Read-only lookup of evolution forms keyed by (kind, stage, path).

    Example:
        >>> table = FormTable.build()
        >>> len(table)
        105
        >>> table.get(Kind.SPROUT, GrowthStage.PERFECT, EvolutionPath.HAPPY).display_name
        'World Tree'
    """

    def __init__(self, forms: Iterable[EvolutionForm]) -> None:
        """Initialize the table from a collection of forms.

        Args:
            forms: The forms to index; later duplicates replace earlier ones.
        """
        self._forms: dict[tuple[Kind, GrowthStage, EvolutionPath], EvolutionForm] = {
            (form.kind, form.stage, form.path): form for form in forms
        }
        self._by_id: dict[str, EvolutionForm] = {
            form.id: form for form in self._forms.values()
        }

    @classmethod
    def build(cls) -> FormTable:
        """Generate the complete table (every kind x stage x path cell)."""
        table = cls(
            create_form(kind, stage, path)
            for kind in Kind
            for stage in GrowthStage
            for path in EvolutionPath
        )
        logger.debug("Form table built", forms=len(table))
        return table

    def get(self, kind: Kind, stage: GrowthStage, path: EvolutionPath) -> EvolutionForm:
        """Look up a form, regenerating the cell if the table lacks it."""
        form = self._forms.get((kind, stage, path))
        if form is None:
            logger.warning(
                "Form table miss, regenerating cell",
                kind=kind.value,
                stage=stage.value,
                path=path.value,
            )
            form = create_form(kind, stage, path)
        return form

    def find(self, identifier: str) -> EvolutionForm | None:
        """Look up a form by its identifier, for display."""
        return self._by_id.get(identifier)

    def __len__(self) -> int:
        return len(self._forms)

    def __iter__(self) -> Iterator[EvolutionForm]:
        return iter(self._forms.values())

    def __contains__(self, key: object) -> bool:
        return key in self._forms


__all__ = [
    "STAGE_BONUS",
    "PATH_BONUS",
    "KIND_BONUS",
    "FORM_NAMES",
    "calculate_modifiers",
    "create_form",
    "FormTable",
]
