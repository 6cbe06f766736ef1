"""
Workout generation entry point.

Runs the full pipeline for one request:

    provider → merge → filter → compose → format

Every call is independent: nothing is cached and the output depends only
on the request and the catalog snapshot the provider returns.
"""

from __future__ import annotations

from .catalog import CatalogProvider
from .composer import (
    Selection,
    compose_generic,
    compose_strength,
    select_ranked,
    select_strength,
)
from .config import (
    DEFAULT_GOAL_NOTES,
    GOAL_NOTES,
    NO_EXERCISES_NOTE,
    NO_STRENGTH_EXERCISES_NOTE,
    strength_split,
    target_exercise_count,
)
from .filters import filter_candidates
from .formatter import build_title
from .merger import fetch_candidates
from .models import CandidateExercise, GeneratedPlan, GenerationRequest

STRENGTH_GOAL = "get_stronger"

# Title prefixes for goals handled by the generic composer.
_GENERIC_TITLE_PREFIXES: dict[str, str] = {
    "build_muscle": "Build Muscle",
    "lose_fat": "Lose Fat",
    "improve_endurance": "Improve Endurance",
}


def build_candidate_pool(
    request: GenerationRequest,
    provider: CatalogProvider,
) -> list[CandidateExercise]:
    """Fetch, merge and filter the catalog into the ranked pool for a request."""
    return filter_candidates(request, fetch_candidates(provider))


def compose_plan(
    request: GenerationRequest,
    pool: list[CandidateExercise],
) -> GeneratedPlan:
    """Dispatch a ranked pool to the composer for the request's goal."""
    if request.goal == STRENGTH_GOAL:
        return compose_strength(request, pool)

    return compose_generic(
        request,
        pool,
        plan_notes=GOAL_NOTES.get(request.goal, DEFAULT_GOAL_NOTES),
        title_prefix=_GENERIC_TITLE_PREFIXES.get(request.goal),
    )


def generate_workout(
    request: GenerationRequest,
    provider: CatalogProvider,
) -> GeneratedPlan:
    """
    Generate a workout plan.

    Catalog read failures degrade to an empty or partially-known catalog
    (see merger.fetch_candidates), so this never raises once the request
    has been constructed.

    Args:
        request: Validated generation request
        provider: Catalog source

    Returns:
        GeneratedPlan; ``exercises`` may be empty, in which case ``notes``
        explains why
    """
    pool = build_candidate_pool(request, provider)
    return compose_plan(request, pool)


# ---------------------------------------------------------------------------
# Explain
# ---------------------------------------------------------------------------

_REASON_TEXT: dict[str, str] = {
    "ranked": "top of the popularity ranking",
    "coverage": "covers focus area",
    "compound": "compound top-up",
    "accessory": "accessory top-up",
    "fill": "fallback fill (pool short on the preferred type)",
}


def _describe(selection: Selection) -> str:
    c = selection.candidate
    reason = _REASON_TEXT[selection.reason]
    if selection.reason == "coverage" and selection.focus_area:
        reason = f"{reason} [cyan]{selection.focus_area}[/cyan]"
    muscle = c.primary_muscle or "?"
    return (
        f"{c.name}  ({muscle}, {c.compound.value}, popularity {c.popularity_score:g})"
        f" → {reason}"
    )


def explain_workout(
    request: GenerationRequest,
    provider: CatalogProvider,
) -> str:
    """
    Rich-markup step-by-step explanation of how a workout is composed.

    Uses the same pool and selection helpers as generate_workout(), so the
    explanation always agrees with the generated plan.
    """
    pool = build_candidate_pool(request, provider)
    target = target_exercise_count(request.session_length_minutes)
    rule = "─" * 54
    L: list[str] = []

    title = build_title(
        request.goal,
        request.focus_areas,
        None if request.goal == STRENGTH_GOAL else _GENERIC_TITLE_PREFIXES.get(request.goal),
    )
    L.append(f"[bold cyan]{title}  ·  {request.session_length_minutes} min[/bold cyan]")
    L.append(rule)

    L.append("\n[bold]REQUEST[/bold]")
    L.append(f"  Level: {request.level}  ·  Location: {request.location}")
    L.append(f"  Focus areas: {', '.join(request.focus_areas) or 'any'}")
    if request.location == "home":
        L.append(f"  Home equipment: {', '.join(request.home_equipment) or 'none specified'}")

    L.append(f"\n[bold]CANDIDATE POOL: {len(pool)}[/bold]")
    L.append("  Strength exercises passing level, focus and equipment filters,")
    L.append("  ranked by popularity (highest first).")

    L.append(f"\n[bold]TARGET: {target} exercises[/bold]")
    if request.goal == STRENGTH_GOAL:
        split = strength_split(request.session_length_minutes)
        L.append(f"  Strength split: {split.compound} compound + {split.accessory} accessory.")
        selections = select_strength(request, pool) if pool else []
    else:
        selections = select_ranked(pool, target)

    L.append("\n[bold]SELECTION[/bold]")
    if not selections:
        empty_note = NO_STRENGTH_EXERCISES_NOTE if request.goal == STRENGTH_GOAL else NO_EXERCISES_NOTE
        L.append(f"  [yellow]{empty_note}[/yellow]")
    for index, selection in enumerate(selections):
        L.append(f"  {index + 1}. {_describe(selection)}")
    if request.goal == STRENGTH_GOAL and selections:
        L.append("  Compound exercises are listed first.")
    if selections and len(selections) < target:
        L.append(
            f"  [yellow]Only {len(selections)} of {target} slots filled; "
            "the pool ran out of candidates.[/yellow]"
        )

    return "\n".join(L)
