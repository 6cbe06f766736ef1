"""
Eligibility filtering for generator candidates.

Narrows merged candidates to the pool a request may draw from:

1. strength discipline only, named exercises only
2. level gate (unknown level is reserved for intermediate/advanced users)
3. focus areas, when any were requested
4. home equipment, when training at home
5. dedupe by id, then rank by popularity (stable, highest first)
"""

from __future__ import annotations

from typing import Sequence

from .config import STRENGTH_DISCIPLINE
from .matching import equipment_compatible, matches_any_focus
from .models import CandidateExercise, GenerationRequest, TrainingLevel


def is_strength_candidate(candidate: CandidateExercise) -> bool:
    """True for named exercises of the strength discipline."""
    if not candidate.discipline or candidate.discipline.lower() != STRENGTH_DISCIPLINE:
        return False
    return bool(candidate.name)


def level_allows(
    exercise_level: TrainingLevel | None,
    user_level: TrainingLevel,
) -> bool:
    """
    Level gate.

    Beginner: beginner exercises only.
    Intermediate: beginner + intermediate.
    Advanced: everything.
    Exercises without a level are only offered to intermediate/advanced users.
    """
    if exercise_level is None:
        return user_level != "beginner"

    if user_level == "beginner":
        return exercise_level == "beginner"

    if user_level == "intermediate":
        return exercise_level in ("beginner", "intermediate")

    return True


def rank_by_popularity(candidates: Sequence[CandidateExercise]) -> list[CandidateExercise]:
    """Sort by popularity descending; ties keep catalog order."""
    return sorted(candidates, key=lambda c: -c.popularity_score)


def filter_candidates(
    request: GenerationRequest,
    candidates: Sequence[CandidateExercise],
) -> list[CandidateExercise]:
    """
    Build the ranked candidate pool for a request.

    Args:
        request: Generation request
        candidates: Merged catalog candidates in catalog order

    Returns:
        Deduplicated pool sorted by popularity (highest first)
    """
    pool = [
        c
        for c in candidates
        if is_strength_candidate(c) and level_allows(c.level, request.level)
    ]

    if request.focus_areas:
        pool = [c for c in pool if matches_any_focus(c.primary_muscle, request.focus_areas)]

    # Gym / both keep every equipment type.
    if request.location == "home":
        pool = [c for c in pool if equipment_compatible(c.equipment, request.home_equipment)]

    seen: set[str] = set()
    unique: list[CandidateExercise] = []
    for c in pool:
        if c.id in seen:
            continue
        seen.add(c.id)
        unique.append(c)

    return rank_by_popularity(unique)
