"""Generation commands: generate, explain, pool."""

import json

import typer

from ...core.generator import build_candidate_pool, explain_workout, generate_workout
from ...io.serializers import candidate_to_dict, plan_to_json
from .. import views
from ..app import (
    CardioOption,
    CatalogOption,
    EquipmentOption,
    FocusOption,
    GoalOption,
    JsonOption,
    LevelOption,
    LocationOption,
    MinutesOption,
    app,
    build_request,
    get_provider,
)


def _require_catalog(catalog_path):
    """Return the provider for ``catalog_path``; exit 1 if the file is missing."""
    provider = get_provider(catalog_path)
    if not provider.exists():
        views.print_error(f"Catalog file not found: {provider.path}")
        raise typer.Exit(1)
    return provider


@app.command()
def generate(
    level: LevelOption = "beginner",
    goal: GoalOption = "build_muscle",
    location: LocationOption = "gym",
    minutes: MinutesOption = 45,
    focus: FocusOption = None,
    equipment: EquipmentOption = None,
    cardio: CardioOption = None,
    catalog_path: CatalogOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Generate a workout for the given level, goal and focus areas.
    """
    request = build_request(level, goal, location, minutes, focus, equipment, cardio)
    provider = _require_catalog(catalog_path)

    plan = generate_workout(request, provider)

    if json_out:
        print(plan_to_json(plan))
        return

    views.print_plan(plan)


@app.command()
def explain(
    level: LevelOption = "beginner",
    goal: GoalOption = "build_muscle",
    location: LocationOption = "gym",
    minutes: MinutesOption = 45,
    focus: FocusOption = None,
    equipment: EquipmentOption = None,
    cardio: CardioOption = None,
    catalog_path: CatalogOption = None,
) -> None:
    """
    Explain step by step how the workout is composed.
    """
    request = build_request(level, goal, location, minutes, focus, equipment, cardio)
    provider = _require_catalog(catalog_path)

    views.console.print()
    views.console.print(explain_workout(request, provider))
    views.console.print()


@app.command()
def pool(
    level: LevelOption = "beginner",
    goal: GoalOption = "build_muscle",
    location: LocationOption = "gym",
    minutes: MinutesOption = 45,
    focus: FocusOption = None,
    equipment: EquipmentOption = None,
    cardio: CardioOption = None,
    catalog_path: CatalogOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show the ranked candidate pool the generator draws from.
    """
    request = build_request(level, goal, location, minutes, focus, equipment, cardio)
    provider = _require_catalog(catalog_path)

    candidates = build_candidate_pool(request, provider)

    if json_out:
        print(json.dumps([candidate_to_dict(c) for c in candidates], indent=2, ensure_ascii=False))
        return

    views.print_pool(candidates)
