"""
Scan rule evaluator: threshold rules over the four scan metrics.

A metric above ACTIVATION_THRESHOLD activates its ordered rule list. Each rule
yields one candidate with priority = metric value + summand, the summand
ranking the ingredient's relevance for that concern.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from glowyze.schemas import LocalizedText, ScanMetrics
from glowyze.services.candidate import Reason, RecommendationCandidate, Severity
from glowyze.services.merger import RecommendationMerger

logger = logging.getLogger(__name__)

ACTIVATION_THRESHOLD = 25
HIGH_ACNE_THRESHOLD = 50


@dataclass(frozen=True)
class ScanRule:
    ingredient_id: str
    summand: int
    reason: LocalizedText
    with_severity: bool = False


# Order matters: it decides ties between metrics and the order of equal priorities
SCAN_RULES: dict[str, tuple[ScanRule, ...]] = {
    "acne": (
        ScanRule(
            "salicylic_acid", 20,
            LocalizedText(
                en="Targeting detected acne ({severity})",
                id="Menargetkan jerawat terdeteksi ({severity})",
            ),
            with_severity=True,
        ),
        ScanRule(
            "tea_tree", 10,
            LocalizedText(en="Natural anti-bacterial for acne", id="Anti-bakteri alami untuk jerawat"),
        ),
        ScanRule(
            "azelaic_acid", 15,
            LocalizedText(en="Reduces acne redness", id="Mengurangi kemerahan jerawat"),
        ),
    ),
    "wrinkles": (
        ScanRule(
            "retinol", 20,
            LocalizedText(en="Targeting signs of aging", id="Menargetkan tanda penuaan"),
        ),
        ScanRule(
            "peptides", 15,
            LocalizedText(en="Collagen support for firming", id="Dukungan kolagen untuk pengencangan"),
        ),
        ScanRule(
            "hyaluronic_acid", 10,
            LocalizedText(en="Plumps fine lines", id="Mengisi garis halus"),
        ),
    ),
    "pigmentation": (
        ScanRule(
            "vitamin_c", 20,
            LocalizedText(en="Brightens detected dark spots", id="Mencerahkan noda hitam terdeteksi"),
        ),
        ScanRule(
            "alpha_arbutin", 15,
            LocalizedText(en="Targeted spot treatment", id="Perawatan noda spesifik"),
        ),
        ScanRule(
            "niacinamide", 10,
            LocalizedText(en="Evens out skin tone", id="Meratakan warna kulit"),
        ),
        ScanRule(
            "glycolic_acid", 5,
            LocalizedText(en="Exfoliates pigmented cells", id="Mengangkat sel berpigmen"),
        ),
    ),
    "texture": (
        ScanRule(
            "glycolic_acid", 15,
            LocalizedText(en="Smoothes detected texture", id="Menghaluskan tekstur terdeteksi"),
        ),
        ScanRule(
            "snail_mucin", 10,
            LocalizedText(en="Repairs skin texture", id="Memperbaiki tekstur kulit"),
        ),
        ScanRule(
            "squalane", 5,
            LocalizedText(en="Softens rough skin", id="Melembutkan kulit kasar"),
        ),
    ),
}


def acne_severity(acne: int) -> Severity:
    return Severity.HIGH if acne > HIGH_ACNE_THRESHOLD else Severity.MODERATE


def is_active(value: int) -> bool:
    return value > ACTIVATION_THRESHOLD


def evaluate_scan(scan: Optional[ScanMetrics]) -> list[RecommendationCandidate]:
    """Candidates for every active metric, de-duplicated by ingredient.

    Returns an empty list when there is no scan.
    """
    if scan is None:
        return []

    merger = RecommendationMerger()
    for metric, value in scan.as_pairs():
        if not is_active(value):
            continue

        logger.debug("Scan metric %s=%d is active", metric, value)
        severity = acne_severity(value) if metric == "acne" else None
        for rule in SCAN_RULES[metric]:
            merger.offer(RecommendationCandidate(
                ingredient_id=rule.ingredient_id,
                reason=Reason(rule.reason, severity if rule.with_severity else None),
                priority=value + rule.summand,
            ))

    return merger.candidates()
