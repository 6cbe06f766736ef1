"""
Catalog label matching.

Catalog muscle and equipment labels are free text.  Focus areas and home
equipment keys are matched against them through fixed keyword tables:

  chest / back / shoulders / biceps / triceps → the area name itself
  core                                       → core, abs, abdom
  glutes / legs                              → glute, quad, ham, calf, leg

Matching is a case-insensitive substring test against the catalog text.
"""

from __future__ import annotations

from typing import Iterable

from .models import FocusArea, HomeEquipment

_LOWER_BODY_KEYWORDS: tuple[str, ...] = ("glute", "quad", "ham", "calf", "leg")

FOCUS_KEYWORDS: dict[str, tuple[str, ...]] = {
    "chest": ("chest",),
    "back": ("back",),
    "shoulders": ("shoulders",),
    "biceps": ("biceps",),
    "triceps": ("triceps",),
    "core": ("core", "abs", "abdom"),
    "glutes": _LOWER_BODY_KEYWORDS,
    "legs": _LOWER_BODY_KEYWORDS,
}

BODYWEIGHT_KEY: str = "bodyweight"


def matches_focus_area(primary_muscle: str | None, area: FocusArea | str) -> bool:
    """
    Return True if the catalog muscle label belongs to the focus area.

    Args:
        primary_muscle: Free-text muscle label from the catalog (may be None)
        area: Focus area name (case-insensitive)

    Returns:
        False for a missing/blank label or an unmapped area
    """
    muscle = (primary_muscle or "").lower()
    if not muscle:
        return False
    keywords = FOCUS_KEYWORDS.get(area.lower(), ())
    return any(kw in muscle for kw in keywords)


def matches_any_focus(primary_muscle: str | None, areas: Iterable[str]) -> bool:
    """Return True if the muscle label matches at least one focus area."""
    return any(matches_focus_area(primary_muscle, area) for area in areas)


def equipment_key_label(key: HomeEquipment | str) -> str:
    """Catalog-style label for an equipment key ("resistance_bands" → "resistance bands")."""
    return key.lower().replace("_", " ")


def equipment_compatible(
    equipment: str | None,
    home_equipment: Iterable[str],
) -> bool:
    """
    Decide whether an exercise can be done with the user's home equipment.

    An exercise with no recorded equipment is bodyweight-only: it passes
    when the user gave no equipment preferences or selected "bodyweight".
    Otherwise the equipment label must contain one of the selected keys.
    """
    selected = [key.lower() for key in home_equipment]
    label = (equipment or "").lower().strip()

    if not label:
        if not selected:
            return True
        return BODYWEIGHT_KEY in selected

    return any(equipment_key_label(key) in label for key in selected)
