"""
Generation engine: models, matching rules, filtering, composition.
"""

from .catalog import CatalogProvider, InMemoryCatalogProvider
from .generator import build_candidate_pool, explain_workout, generate_workout
from .models import GeneratedPlan, GenerationRequest

__all__ = [
    "CatalogProvider",
    "InMemoryCatalogProvider",
    "GeneratedPlan",
    "GenerationRequest",
    "build_candidate_pool",
    "explain_workout",
    "generate_workout",
]
