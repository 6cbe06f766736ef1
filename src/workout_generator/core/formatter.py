"""
Plan formatting: titles, focus lists and the final GeneratedPlan.
"""

from __future__ import annotations

from typing import Callable, Sequence

from .config import DEFAULT_GOAL_LABEL, GOAL_LABELS
from .models import (
    CandidateExercise,
    GeneratedExercise,
    GeneratedPlan,
    GenerationRequest,
)


def goal_label(goal: str) -> str:
    """Display label for a goal ("get_stronger" → "Get Stronger")."""
    return GOAL_LABELS.get(goal, DEFAULT_GOAL_LABEL)


def _capitalize(s: str) -> str:
    if not s:
        return s
    return s[0].upper() + s[1:]


def format_focus_list(focus_areas: Sequence[str]) -> str:
    """
    Join focus areas for display.

    ["chest"] → "Chest"
    ["chest", "back"] → "Chest & Back"
    ["chest", "back", "biceps"] → "Chest, Back & Biceps"
    """
    if not focus_areas:
        return ""
    pretty = [_capitalize(area) for area in focus_areas]
    if len(pretty) == 1:
        return pretty[0]
    return f"{', '.join(pretty[:-1])} & {pretty[-1]}"


def build_title(
    goal: str,
    focus_areas: Sequence[str],
    override_prefix: str | None = None,
) -> str:
    """
    Goal-driven workout title.

    e.g. "Get Stronger – Chest & Back" or "Lose Fat Workout" when no
    focus areas were requested.
    """
    prefix = override_prefix if override_prefix is not None else goal_label(goal)
    focus = format_focus_list(focus_areas)
    if not focus:
        return f"{prefix} Workout"
    return f"{prefix} – {focus}"


def build_plan(
    request: GenerationRequest,
    title: str,
    chosen: Sequence[CandidateExercise],
    notes: str | None,
    exercise_notes: Callable[[CandidateExercise], str | None] | None = None,
) -> GeneratedPlan:
    """
    Assemble the final plan; order_index follows the order of ``chosen``.
    """
    exercises = [
        GeneratedExercise(
            exercise_id=c.id,
            name=c.name,
            order_index=index,
            notes=exercise_notes(c) if exercise_notes is not None else None,
        )
        for index, c in enumerate(chosen)
    ]
    return GeneratedPlan(
        title=title,
        estimated_duration_minutes=request.session_length_minutes,
        goal=request.goal,
        location=request.location,
        exercises=exercises,
        notes=notes,
    )
