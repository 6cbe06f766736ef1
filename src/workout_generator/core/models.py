"""
Data models for workout-generator.

Dataclasses for catalog rows, merged candidates, generation requests and
generated plans.  Closed vocabularies are Literal aliases; validation of
request values happens in GenerationRequest.__post_init__.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

TrainingLevel = Literal["beginner", "intermediate", "advanced"]
WorkoutGoal = Literal["build_muscle", "lose_fat", "get_stronger", "improve_endurance"]
WorkoutLocation = Literal["home", "gym", "both"]
FocusArea = Literal[
    "chest", "back", "shoulders", "biceps", "triceps", "legs", "glutes", "core"
]
HomeEquipment = Literal[
    "bodyweight", "dumbbells", "kettlebell", "resistance_bands", "pullup_bar", "bench"
]
CardioType = Literal["running", "cycling", "rowing", "skipping", "hiit_circuits"]

TRAINING_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")
WORKOUT_GOALS: tuple[str, ...] = (
    "build_muscle",
    "lose_fat",
    "get_stronger",
    "improve_endurance",
)
WORKOUT_LOCATIONS: tuple[str, ...] = ("home", "gym", "both")
FOCUS_AREAS: tuple[str, ...] = (
    "chest", "back", "shoulders", "biceps", "triceps", "legs", "glutes", "core",
)
HOME_EQUIPMENT: tuple[str, ...] = (
    "bodyweight", "dumbbells", "kettlebell", "resistance_bands", "pullup_bar", "bench",
)
CARDIO_TYPES: tuple[str, ...] = ("running", "cycling", "rowing", "skipping", "hiit_circuits")


class CompoundClass(Enum):
    """
    Compound/accessory classification of an exercise.

    UNKNOWN is grouped with ACCESSORY when composing strength workouts.
    """

    COMPOUND = "compound"
    ACCESSORY = "accessory"
    UNKNOWN = "unknown"

    @classmethod
    def from_flag(cls, flag: object) -> "CompoundClass":
        """Map a catalog is_compound value; anything but a real bool is UNKNOWN."""
        if flag is True:
            return cls.COMPOUND
        if flag is False:
            return cls.ACCESSORY
        return cls.UNKNOWN

    @property
    def is_accessory(self) -> bool:
        return self is not CompoundClass.COMPOUND


@dataclass(frozen=True)
class CatalogRow:
    """One row of the base catalog (identity, type, popularity, muscle)."""

    id: str
    name: str
    discipline: str | None = None  # e.g. "strength"
    popularity: float | None = None
    primary_muscle: str | None = None


@dataclass(frozen=True)
class SecondaryAttributes:
    """Equipment / level / compound columns looked up per exercise id."""

    id: str
    equipment: str | None = None
    level: str | None = None
    is_compound: bool | None = None


@dataclass(frozen=True)
class CandidateExercise:
    """
    A catalog row merged with its secondary attributes.

    Unknown secondary data is represented as equipment=None, level=None
    and compound=CompoundClass.UNKNOWN.
    """

    id: str
    name: str
    discipline: str | None
    popularity: float | None
    primary_muscle: str | None
    equipment: str | None = None
    level: TrainingLevel | None = None
    compound: CompoundClass = CompoundClass.UNKNOWN

    @property
    def popularity_score(self) -> float:
        """Popularity used for ranking; missing counts as zero."""
        return self.popularity or 0

    @property
    def is_compound(self) -> bool:
        return self.compound is CompoundClass.COMPOUND


@dataclass(frozen=True)
class GenerationRequest:
    """
    Everything the caller supplies for one workout generation.

    ``focus_areas`` keeps the caller's order; the strength composer covers
    areas in that order.  ``home_equipment`` only matters when
    ``location == "home"``.  ``cardio_preferences`` is accepted and
    validated but not used by any composer yet.
    """

    level: TrainingLevel
    goal: WorkoutGoal
    location: WorkoutLocation
    session_length_minutes: int
    focus_areas: tuple[FocusArea, ...] = ()
    home_equipment: tuple[HomeEquipment, ...] = ()
    cardio_preferences: tuple[CardioType, ...] = ()

    def __post_init__(self) -> None:
        """Validate request values."""
        if self.level not in TRAINING_LEVELS:
            raise ValueError(
                f"Invalid level: {self.level!r}. Must be one of {TRAINING_LEVELS}"
            )
        if self.goal not in WORKOUT_GOALS:
            raise ValueError(
                f"Invalid goal: {self.goal!r}. Must be one of {WORKOUT_GOALS}"
            )
        if self.location not in WORKOUT_LOCATIONS:
            raise ValueError(
                f"Invalid location: {self.location!r}. Must be one of {WORKOUT_LOCATIONS}"
            )
        if isinstance(self.session_length_minutes, bool) or self.session_length_minutes <= 0:
            raise ValueError("session_length_minutes must be positive")

        # Lists are accepted for convenience; store tuples so the request stays hashable.
        object.__setattr__(self, "focus_areas", tuple(self.focus_areas))
        object.__setattr__(self, "home_equipment", tuple(self.home_equipment))
        object.__setattr__(self, "cardio_preferences", tuple(self.cardio_preferences))

        for area in self.focus_areas:
            if area not in FOCUS_AREAS:
                raise ValueError(
                    f"Invalid focus area: {area!r}. Must be one of {FOCUS_AREAS}"
                )
        for item in self.home_equipment:
            if item not in HOME_EQUIPMENT:
                raise ValueError(
                    f"Invalid home equipment: {item!r}. Must be one of {HOME_EQUIPMENT}"
                )
        for cardio in self.cardio_preferences:
            if cardio not in CARDIO_TYPES:
                raise ValueError(
                    f"Invalid cardio type: {cardio!r}. Must be one of {CARDIO_TYPES}"
                )


@dataclass(frozen=True)
class GeneratedExercise:
    """One exercise slot in a generated workout."""

    exercise_id: str
    name: str
    order_index: int
    notes: str | None = None


@dataclass
class GeneratedPlan:
    """
    A generated workout.

    ``estimated_duration_minutes`` echoes the requested session length.
    ``notes`` is plan-level guidance, or an explanation when nothing
    could be selected.
    """

    title: str
    estimated_duration_minutes: int
    goal: WorkoutGoal
    location: WorkoutLocation
    exercises: list[GeneratedExercise] = field(default_factory=list)
    notes: str | None = None

    def __post_init__(self) -> None:
        """Validate ordering and uniqueness of the exercise list."""
        seen: set[str] = set()
        for position, ex in enumerate(self.exercises):
            if ex.order_index != position:
                raise ValueError(
                    f"order_index {ex.order_index} does not match position {position}"
                )
            if ex.exercise_id in seen:
                raise ValueError(f"Duplicate exercise_id in plan: {ex.exercise_id!r}")
            seen.add(ex.exercise_id)

    @property
    def exercise_ids(self) -> list[str]:
        return [ex.exercise_id for ex in self.exercises]
