"""
Configuration constants for the workout generator.

Session-length tables, goal labels and the fixed guidance texts are
centralized here for easy tuning.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# CATALOG
# =============================================================================

CATALOG_ROW_LIMIT: Final[int] = 500  # Max base rows read from the catalog view
STRENGTH_DISCIPLINE: Final[str] = "strength"  # Only discipline currently composed

# =============================================================================
# SESSION LENGTH → EXERCISE COUNT
# =============================================================================

SHORT_SESSION_MAX_MINUTES: Final[int] = 30
MEDIUM_SESSION_MAX_MINUTES: Final[int] = 45

EXERCISES_SHORT: Final[int] = 4
EXERCISES_MEDIUM: Final[int] = 5
EXERCISES_LONG: Final[int] = 6

# (compound, accessory) targets for the strength composer
STRENGTH_SPLIT_SHORT: Final[tuple[int, int]] = (2, 2)
STRENGTH_SPLIT_MEDIUM: Final[tuple[int, int]] = (3, 2)
STRENGTH_SPLIT_LONG: Final[tuple[int, int]] = (3, 3)


def target_exercise_count(session_length_minutes: int) -> int:
    """
    Map session length to the total number of exercises.

    30 min → 4, 45 min → 5, anything longer → 6.
    """
    if session_length_minutes <= SHORT_SESSION_MAX_MINUTES:
        return EXERCISES_SHORT
    if session_length_minutes <= MEDIUM_SESSION_MAX_MINUTES:
        return EXERCISES_MEDIUM
    return EXERCISES_LONG


@dataclass(frozen=True)
class StrengthSplit:
    """Compound / accessory targets for one strength session."""

    compound: int
    accessory: int

    @property
    def total(self) -> int:
        return self.compound + self.accessory


def strength_split(session_length_minutes: int) -> StrengthSplit:
    """
    Compound vs accessory targets for the strength composer.

    30 min → 2/2, 45 min → 3/2, anything longer → 3/3.
    """
    if session_length_minutes <= SHORT_SESSION_MAX_MINUTES:
        compound, accessory = STRENGTH_SPLIT_SHORT
    elif session_length_minutes <= MEDIUM_SESSION_MAX_MINUTES:
        compound, accessory = STRENGTH_SPLIT_MEDIUM
    else:
        compound, accessory = STRENGTH_SPLIT_LONG
    return StrengthSplit(compound=compound, accessory=accessory)


# =============================================================================
# GOAL LABELS AND GUIDANCE
# =============================================================================

DEFAULT_GOAL_LABEL: Final[str] = "Workout"

GOAL_LABELS: Final[dict[str, str]] = {
    "build_muscle": "Build Muscle",
    "lose_fat": "Lose Fat",
    "get_stronger": "Get Stronger",
    "improve_endurance": "Improve Endurance",
}

GOAL_NOTES: Final[dict[str, str]] = {
    "build_muscle": (
        "Focus on controlled reps, full range of motion, and progressive overload. "
        "Aim to leave 1–3 good reps in the tank on most sets."
    ),
    "lose_fat": (
        "Keep your rest periods on the shorter side and maintain a steady pace. "
        "You should feel challenged but able to sustain the session."
    ),
    "improve_endurance": (
        "Move at a sustainable pace and focus on consistent effort across the session. "
        "You should finish feeling worked, not destroyed."
    ),
}

DEFAULT_GOAL_NOTES: Final[str] = (
    "Train with intent, keep your technique tight, and adjust weight so the last "
    "few reps are challenging but controlled."
)

# =============================================================================
# EMPTY-POOL MESSAGES
# =============================================================================

NO_EXERCISES_NOTE: Final[str] = (
    "No suitable exercises were found for your current focus, level, and equipment "
    "settings. Try adjusting your focus areas or home equipment options."
)

NO_STRENGTH_EXERCISES_NOTE: Final[str] = (
    "No suitable strength exercises were found for your current focus, level, and "
    "equipment settings. Try adjusting your focus areas or home equipment options."
)

# =============================================================================
# STRENGTH NOTES
# =============================================================================

STRENGTH_WORKOUT_NOTES: Final[str] = (
    "Warm up, get blood flowing and ensure muscles you are intending to train are "
    "ready for strenuous exercise. The aim for the workout is to get as close to "
    "failure as you can."
)

# Low-rep, high-load work on compounds
STRENGTH_COMPOUND_NOTES: Final[str] = (
    "3–5 sets with an aim of 3–6 reps. Ensure form is good throughout."
)

# Moderate reps with focus on the target muscle
STRENGTH_ACCESSORY_NOTES: Final[str] = (
    "3–4 sets with an aim of 5–8 reps. Focus on getting a good mind–muscle connection."
)
