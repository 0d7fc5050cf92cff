"""
Ranking: orders merged candidates and resolves them for display.
"""

from typing import Iterable

from glowyze.catalog import IngredientCatalog
from glowyze.schemas import Locale, RecommendationView
from glowyze.services.candidate import RecommendationCandidate

HIGHLY_RECOMMENDED_THRESHOLD = 20


def is_highly_recommended(priority: int) -> bool:
    return priority > HIGHLY_RECOMMENDED_THRESHOLD


def rank(
    candidates: Iterable[RecommendationCandidate],
    catalog: IngredientCatalog,
    locale: Locale,
) -> list[RecommendationView]:
    """Sort by priority, highest first.

    sorted() is stable, so equal priorities keep their merge order.
    """
    ordered = sorted(candidates, key=lambda c: c.priority, reverse=True)
    views = []
    for candidate in ordered:
        ingredient = catalog.lookup(candidate.ingredient_id)
        views.append(RecommendationView(
            id=ingredient.id,
            name=ingredient.name,
            description=ingredient.description.get(locale),
            reason=candidate.reason.render(locale),
            priority=candidate.priority,
            highly_recommended=is_highly_recommended(candidate.priority),
        ))
    return views
