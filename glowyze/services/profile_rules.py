"""
Profile rule evaluator: fixed base recommendations per skin type.
"""

import logging
from dataclasses import dataclass

from glowyze.schemas import LocalizedText, SkinType
from glowyze.services.candidate import Reason, RecommendationCandidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileRule:
    ingredient_id: str
    priority: int
    reason: LocalizedText


PROFILE_RULES: dict[SkinType, tuple[ProfileRule, ...]] = {
    SkinType.OILY: (
        ProfileRule(
            "salicylic_acid", 10,
            LocalizedText(en="Matches Oily skin type", id="Sesuai tipe kulit Berminyak"),
        ),
        ProfileRule(
            "niacinamide", 10,
            LocalizedText(en="Oil control for Oily skin", id="Kontrol minyak untuk kulit Berminyak"),
        ),
    ),
    SkinType.DRY: (
        ProfileRule(
            "hyaluronic_acid", 10,
            LocalizedText(en="Hydration for Dry skin", id="Hidrasi untuk kulit Kering"),
        ),
        ProfileRule(
            "ceramides", 10,
            LocalizedText(en="Barrier repair for Dry skin", id="Perbaikan barrier kulit Kering"),
        ),
        ProfileRule(
            "squalane", 8,
            LocalizedText(en="Moisturizer for Dry skin", id="Pelembap untuk kulit Kering"),
        ),
    ),
    SkinType.COMBINATION: (
        ProfileRule(
            "niacinamide", 10,
            LocalizedText(en="Balances Combination skin", id="Menyeimbangkan kulit Kombinasi"),
        ),
    ),
    SkinType.SENSITIVE: (
        ProfileRule(
            "centella", 12,
            LocalizedText(en="Soothing for Sensitive skin", id="Menenangkan kulit Sensitif"),
        ),
        ProfileRule(
            "ceramides", 10,
            LocalizedText(en="Strengthens Sensitive barrier", id="Memperkuat barrier Sensitif"),
        ),
    ),
    SkinType.NORMAL: (
        ProfileRule(
            "vitamin_c", 5,
            LocalizedText(en="Maintenance for Normal skin", id="Perawatan kulit Normal"),
        ),
    ),
}


def resolve_skin_type(skin_type) -> SkinType:
    """Anything unrecognized is treated as normal skin."""
    try:
        return SkinType(skin_type)
    except (ValueError, TypeError):
        logger.debug("Unrecognized skin type %r, using normal", skin_type)
        return SkinType.NORMAL


def evaluate_profile(skin_type: SkinType) -> list[RecommendationCandidate]:
    """Base candidates for a skin type; never empty."""
    rules = PROFILE_RULES[resolve_skin_type(skin_type)]
    return [
        RecommendationCandidate(
            ingredient_id=rule.ingredient_id,
            reason=Reason(rule.reason),
            priority=rule.priority,
        )
        for rule in rules
    ]
