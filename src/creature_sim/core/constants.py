"""Rule constants for the creature simulator.

Every number the decay, action, evolution and battle rules depend on lives
here. Changing any of them changes the stats of existing saved creatures.
"""

from __future__ import annotations

# =============================================================================
# Condition Bounds
# =============================================================================

STAT_MIN = 0
"""Lower bound of every 0-100 condition gauge."""

STAT_MAX = 100
"""Upper bound of every 0-100 condition gauge."""

MINUTES_PER_DAY = 60 * 24

# =============================================================================
# Owner Actions
# =============================================================================

FEED_HUNGER_RELIEF = 30
FEED_HP_RESTORE = 10

PLAY_HAPPINESS_GAIN = 20
PLAY_FATIGUE_COST = 10
PLAY_HUNGER_COST = 5

TRAIN_STAT_GAIN = 1
TRAIN_FATIGUE_COST = 20
TRAIN_HUNGER_COST = 10

# =============================================================================
# Time Passage (amount per full block of minutes)
# =============================================================================

SLEEP_RECOVERY_BLOCK_MINUTES = 10
SLEEP_FATIGUE_RECOVERY = 5

HUNGER_BLOCK_MINUTES = 30
HUNGER_PER_BLOCK = 5

HAPPINESS_BLOCK_MINUTES = 60
HAPPINESS_DECAY_PER_BLOCK = 3

CLEANLINESS_BLOCK_MINUTES = 60
CLEANLINESS_DECAY_PER_BLOCK = 5

FATIGUE_BLOCK_MINUTES = 120
FATIGUE_PER_BLOCK = 5

STARVING_HUNGER = 90
"""Hunger at or above which time passage also drains HP."""

STARVING_HP_LOSS = 5

DEPRESSED_HAPPINESS = 20
"""Happiness at or below which full fatigue makes the creature sick."""

# =============================================================================
# Danger & Eligibility Thresholds
# =============================================================================

DANGER_HUNGER = 80
DANGER_CLEANLINESS = 20
DANGER_HAPPINESS = 20

EXHAUSTED_FATIGUE = 80
"""Fatigue at or above which play and training are refused."""

TOO_HUNGRY_TO_TRAIN = 80

# =============================================================================
# Evolution Path Triggers
# =============================================================================

NEGLECTED_MIN_NEGLECT = 10
SICK_MIN_SICK_EVENTS = 5
HAPPY_MIN_PLAYS = 50
STRONG_MIN_TRAININGS = 30

WISE_MIN_FEEDINGS = 20
WISE_MIN_PLAYS = 20
WISE_MIN_CLEANINGS = 10
WISE_MAX_NEGLECT = 3
"""Neglect count must stay strictly below this for balanced care."""

# =============================================================================
# Battle
# =============================================================================

MAX_BATTLE_TURNS = 20
DEFENSE_DIVISOR = 3
MIN_DAMAGE = 1
CRITICAL_MULTIPLIER = 1.5
POST_BATTLE_FATIGUE = 15

SNAPSHOT_SEPARATOR = "|"
SNAPSHOT_FIELD_COUNT = 9
