"""
JSON serialization for generator data models.

Handles conversion between dataclasses and JSON-compatible dicts.
"""

import json
from typing import Any

from ..core.models import (
    CandidateExercise,
    CatalogRow,
    GeneratedExercise,
    GeneratedPlan,
    GenerationRequest,
    SecondaryAttributes,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_identifier(value: Any, name: str = "id") -> str:
    """
    Validate an exercise identifier.

    Identifiers are opaque; numbers are accepted and converted to str.

    Raises:
        ValidationError: If the value is missing or blank
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{name} is required")
    text = str(value).strip()
    if not text:
        raise ValidationError(f"{name} must be a non-empty string")
    return text


def validate_popularity(value: Any) -> float | None:
    """
    Validate an optional popularity score.

    Raises:
        ValidationError: If the value is not a non-negative number
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"popularity must be a number, got {value!r}")
    if value < 0:
        raise ValidationError(f"popularity must be non-negative, got {value}")
    return value


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def dict_to_catalog_row(data: dict[str, Any]) -> CatalogRow:
    """
    Convert a catalog document entry to its base CatalogRow.

    The discipline is read from ``type`` (or ``discipline``).
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Catalog entry must be a mapping, got {type(data).__name__}")
    return CatalogRow(
        id=validate_identifier(data.get("id")),
        name=str(data.get("name") or ""),
        discipline=_optional_str(data.get("type", data.get("discipline"))),
        popularity=validate_popularity(data.get("popularity")),
        primary_muscle=_optional_str(data.get("primary_muscle")),
    )


def dict_to_secondary_attributes(data: dict[str, Any]) -> SecondaryAttributes:
    """
    Convert a catalog document entry to its SecondaryAttributes.

    ``is_compound`` is kept only when it is a real boolean.
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Catalog entry must be a mapping, got {type(data).__name__}")
    is_compound = data.get("is_compound")
    return SecondaryAttributes(
        id=validate_identifier(data.get("id")),
        equipment=_optional_str(data.get("equipment")),
        level=_optional_str(data.get("level")),
        is_compound=is_compound if isinstance(is_compound, bool) else None,
    )


def _as_list(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{name} must be a list, got {type(value).__name__}")
    return [str(v).strip().lower() for v in value]


def dict_to_request(data: dict[str, Any]) -> GenerationRequest:
    """
    Convert a JSON dict to a GenerationRequest.

    Vocabulary values are lowercased before validation.

    Raises:
        ValidationError: If a field is missing or invalid
    """
    try:
        minutes = data["session_length_minutes"]
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            raise ValidationError(
                f"session_length_minutes must be an integer, got {minutes!r}"
            )
        return GenerationRequest(
            level=str(data["level"]).strip().lower(),  # type: ignore[arg-type]
            goal=str(data["goal"]).strip().lower(),  # type: ignore[arg-type]
            location=str(data["location"]).strip().lower(),  # type: ignore[arg-type]
            session_length_minutes=minutes,
            focus_areas=tuple(_as_list(data.get("focus_areas"), "focus_areas")),  # type: ignore[arg-type]
            home_equipment=tuple(_as_list(data.get("home_equipment"), "home_equipment")),  # type: ignore[arg-type]
            cardio_preferences=tuple(
                _as_list(data.get("cardio_preferences"), "cardio_preferences")
            ),  # type: ignore[arg-type]
        )
    except KeyError as e:
        raise ValidationError(f"Missing required field: {e}") from e
    except ValueError as e:
        raise ValidationError(str(e)) from e


def request_to_dict(request: GenerationRequest) -> dict[str, Any]:
    """Convert GenerationRequest to JSON-compatible dict."""
    return {
        "level": request.level,
        "goal": request.goal,
        "location": request.location,
        "session_length_minutes": request.session_length_minutes,
        "focus_areas": list(request.focus_areas),
        "home_equipment": list(request.home_equipment),
        "cardio_preferences": list(request.cardio_preferences),
    }


def exercise_to_dict(exercise: GeneratedExercise) -> dict[str, Any]:
    """Convert GeneratedExercise to JSON-compatible dict; notes omitted when absent."""
    result: dict[str, Any] = {
        "exercise_id": exercise.exercise_id,
        "name": exercise.name,
        "order_index": exercise.order_index,
    }
    if exercise.notes is not None:
        result["notes"] = exercise.notes
    return result


def plan_to_dict(plan: GeneratedPlan) -> dict[str, Any]:
    """Convert GeneratedPlan to JSON-compatible dict."""
    return {
        "title": plan.title,
        "estimated_duration_min": plan.estimated_duration_minutes,
        "goal": plan.goal,
        "location": plan.location,
        "exercises": [exercise_to_dict(ex) for ex in plan.exercises],
        "notes": plan.notes,
    }


def plan_to_json(plan: GeneratedPlan) -> str:
    """Serialize a plan to indented JSON (stable key order)."""
    return json.dumps(plan_to_dict(plan), indent=2, ensure_ascii=False)


def candidate_to_dict(candidate: CandidateExercise) -> dict[str, Any]:
    """Convert CandidateExercise to JSON-compatible dict."""
    return {
        "id": candidate.id,
        "name": candidate.name,
        "type": candidate.discipline,
        "popularity": candidate.popularity,
        "primary_muscle": candidate.primary_muscle,
        "equipment": candidate.equipment,
        "level": candidate.level,
        "compound": candidate.compound.value,
    }
