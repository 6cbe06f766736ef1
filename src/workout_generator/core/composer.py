"""
Workout composition from a ranked candidate pool.

Two strategies share the pool produced by filters.filter_candidates():

- generic: the top-N candidates by rank, N from the session length
- strength ("get_stronger"): greedy selection with focus coverage and a
  compound/accessory split, compounds listed first

Selection helpers return Selection records so the reason each exercise
was picked can be explained without re-running the algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from .config import (
    NO_EXERCISES_NOTE,
    NO_STRENGTH_EXERCISES_NOTE,
    STRENGTH_ACCESSORY_NOTES,
    STRENGTH_COMPOUND_NOTES,
    STRENGTH_WORKOUT_NOTES,
    strength_split,
    target_exercise_count,
)
from .formatter import build_plan, build_title
from .matching import matches_focus_area
from .models import CandidateExercise, GeneratedPlan, GenerationRequest

SelectionReason = Literal["ranked", "coverage", "compound", "accessory", "fill"]


@dataclass(frozen=True)
class Selection:
    """A chosen candidate and the pass that chose it."""

    candidate: CandidateExercise
    reason: SelectionReason
    focus_area: str | None = None  # set for coverage picks


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def select_ranked(pool: Sequence[CandidateExercise], target: int) -> list[Selection]:
    """Take the first ``target`` candidates of an already-ranked pool."""
    return [Selection(candidate=c, reason="ranked") for c in pool[:target]]


def select_strength(
    request: GenerationRequest,
    pool: Sequence[CandidateExercise],
) -> list[Selection]:
    """
    Greedy strength selection.

    Passes, in order, each candidate used at most once:
      1. coverage  – first unused match for every focus area, in request order
      2. compound  – compound candidates until the compound deficit is met
      3. accessory – accessory/unknown candidates until the accessory deficit is met
      4. fill      – anything left, in rank order, up to the target count

    The result is reordered so compounds come first; relative order within
    each group is preserved.
    """
    target = target_exercise_count(request.session_length_minutes)
    split = strength_split(request.session_length_minutes)

    chosen: list[Selection] = []
    used: set[str] = set()

    def take(c: CandidateExercise, reason: SelectionReason, area: str | None = None) -> None:
        chosen.append(Selection(candidate=c, reason=reason, focus_area=area))
        used.add(c.id)

    # 1) coverage
    for area in request.focus_areas:
        if len(chosen) >= target:
            break
        match = next(
            (
                c
                for c in pool
                if c.id not in used and matches_focus_area(c.primary_muscle, area)
            ),
            None,
        )
        if match is not None:
            take(match, "coverage", area)

    # Deficits are fixed after coverage; the coverage picks count toward the split.
    compounds_so_far = sum(1 for s in chosen if s.candidate.is_compound)
    need_compounds = max(0, split.compound - compounds_so_far)
    need_accessories = max(0, split.accessory - (len(chosen) - compounds_so_far))

    # 2) compound top-up
    for c in pool:
        if len(chosen) >= target or need_compounds <= 0:
            break
        if c.id in used or not c.is_compound:
            continue
        take(c, "compound")
        need_compounds -= 1

    # 3) accessory top-up (unknown classification counts as accessory)
    for c in pool:
        if len(chosen) >= target or need_accessories <= 0:
            break
        if c.id in used or not c.compound.is_accessory:
            continue
        take(c, "accessory")
        need_accessories -= 1

    # 4) fallback fill
    for c in pool:
        if len(chosen) >= target:
            break
        if c.id in used:
            continue
        take(c, "fill")

    # 5) compounds first
    return [s for s in chosen if s.candidate.is_compound] + [
        s for s in chosen if not s.candidate.is_compound
    ]


# ---------------------------------------------------------------------------
# Composers
# ---------------------------------------------------------------------------


def compose_generic(
    request: GenerationRequest,
    pool: Sequence[CandidateExercise],
    plan_notes: str | None,
    title_prefix: str | None = None,
) -> GeneratedPlan:
    """
    Generic composer for goals without specialised rules.

    Args:
        request: Generation request
        pool: Ranked candidate pool
        plan_notes: Goal guidance shown at the top of the workout
        title_prefix: Optional replacement for the goal label in the title

    Returns:
        GeneratedPlan without per-exercise notes
    """
    title = build_title(request.goal, request.focus_areas, title_prefix)

    if not pool:
        return build_plan(request, title, [], NO_EXERCISES_NOTE)

    target = target_exercise_count(request.session_length_minutes)
    chosen = [s.candidate for s in select_ranked(pool, target)]
    return build_plan(request, title, chosen, plan_notes)


def strength_exercise_notes(candidate: CandidateExercise) -> str:
    """Per-exercise prescription note for strength workouts."""
    if candidate.is_compound:
        return STRENGTH_COMPOUND_NOTES
    return STRENGTH_ACCESSORY_NOTES


def compose_strength(
    request: GenerationRequest,
    pool: Sequence[CandidateExercise],
) -> GeneratedPlan:
    """
    Strength composer for the "get_stronger" goal.

    The title always uses the goal label.  An empty pool returns no
    exercises and the strength-specific empty note instead of the
    strength guidance.
    """
    title = build_title(request.goal, request.focus_areas)

    if not pool:
        return build_plan(request, title, [], NO_STRENGTH_EXERCISES_NOTE)

    chosen = [s.candidate for s in select_strength(request, pool)]
    return build_plan(
        request,
        title,
        chosen,
        STRENGTH_WORKOUT_NOTES,
        exercise_notes=strength_exercise_notes,
    )
