"""
Candidate merging.

Joins the base catalog rows with their secondary attributes into one
CandidateExercise per row.  Missing or unreadable secondary data never
fails the merge: the affected exercises get unknown equipment, level and
compound classification.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .catalog import CatalogProvider
from .models import (
    TRAINING_LEVELS,
    CandidateExercise,
    CatalogRow,
    CompoundClass,
    SecondaryAttributes,
    TrainingLevel,
)

logger = logging.getLogger(__name__)


def _normalize_level(raw: str | None) -> TrainingLevel | None:
    """Return a known TrainingLevel or None for missing/unrecognised values."""
    if raw is None:
        return None
    level = str(raw).strip().lower()
    return level if level in TRAINING_LEVELS else None  # type: ignore[return-value]


def _normalize_equipment(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def merge_candidates(
    rows: Sequence[CatalogRow],
    secondary: Iterable[SecondaryAttributes] = (),
) -> list[CandidateExercise]:
    """
    Merge catalog rows with secondary attributes.

    Args:
        rows: Base catalog rows (order is preserved)
        secondary: Secondary attribute rows; a later row for the same id wins

    Returns:
        One CandidateExercise per catalog row
    """
    by_id: dict[str, SecondaryAttributes] = {}
    for attrs in secondary:
        by_id[attrs.id] = attrs

    merged: list[CandidateExercise] = []
    for row in rows:
        attrs = by_id.get(row.id)
        merged.append(
            CandidateExercise(
                id=row.id,
                name=row.name,
                discipline=row.discipline,
                popularity=row.popularity,
                primary_muscle=row.primary_muscle,
                equipment=_normalize_equipment(attrs.equipment) if attrs else None,
                level=_normalize_level(attrs.level) if attrs else None,
                compound=CompoundClass.from_flag(attrs.is_compound) if attrs else CompoundClass.UNKNOWN,
            )
        )
    return merged


def fetch_candidates(provider: CatalogProvider) -> list[CandidateExercise]:
    """
    Read the catalog through the provider and merge it.

    A failing catalog read yields an empty list; a failing secondary
    read yields candidates with unknown secondary attributes.  Both are
    logged as warnings and never raised.
    """
    try:
        rows = provider.fetch_catalog()
    except Exception as exc:
        logger.warning("Catalog fetch failed (%s); continuing with empty catalog", exc)
        return []

    if not rows:
        return []

    ids = [row.id for row in rows]
    try:
        secondary = provider.fetch_secondary_attributes(ids)
    except Exception as exc:
        logger.warning(
            "Secondary attribute fetch failed for %d exercises (%s); "
            "treating equipment/level/compound as unknown",
            len(ids),
            exc,
        )
        secondary = []

    return merge_candidates(rows, secondary or [])
