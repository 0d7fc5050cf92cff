"""
Page model for the "Ingredient Advice" screen.

Wraps the ranked list with the localized header, treatment focus card,
primary-concern badge and the non-medical disclaimer.
"""

from typing import Optional

from glowyze.schemas import (
    Locale,
    LocalizedText,
    RecommendationPage,
    RecommendationView,
    ScanMetrics,
    SkinType,
)
from glowyze.services.profile_rules import resolve_skin_type

TITLE = LocalizedText(en="Ingredient Advice", id="Saran Kandungan")
SUBTITLE = LocalizedText(
    en="Personalized based on your latest scan results.",
    id="Dipersonalisasi berdasarkan hasil scan terakhir Anda.",
)
FOCUS_LABEL = LocalizedText(en="Treatment Focus", id="Fokus Perawatan")
FOCUS_FROM_SCAN = LocalizedText(en="Based on Current Condition", id="Berdasarkan Kondisi Terkini")
PRIMARY_CONCERN_LABEL = LocalizedText(en="Primary Concern", id="Masalah Utama")
HIGHLY_RECOMMENDED_LABEL = LocalizedText(en="HIGHLY RECOMMENDED", id="SANGAT DISARANKAN")
EMPTY_MESSAGE = LocalizedText(
    en="Perform a face scan for accurate recommendations.",
    id="Lakukan scan wajah untuk rekomendasi yang lebih akurat.",
)
DISCLAIMER = LocalizedText(
    en=(
        "Disclaimer: This is not medical advice. Always patch test new products. "
        "Consult a dermatologist for severe skin conditions."
    ),
    id=(
        "Penting: Informasi ini bukan saran medis. Selalu lakukan patch test sebelum "
        "mencoba produk baru. Konsultasikan dengan dermatologis untuk masalah kulit serius."
    ),
)


def primary_concern(scan: Optional[ScanMetrics]) -> Optional[str]:
    """Metric with the highest score; the earliest metric wins a tie."""
    if scan is None:
        return None
    name, _ = max(scan.as_pairs(), key=lambda pair: pair[1])
    return name


def build_recommendation_page(
    locale: Locale,
    skin_type: SkinType,
    scan: Optional[ScanMetrics],
    recommendations: list[RecommendationView],
) -> RecommendationPage:
    locale = Locale(locale)
    concern = primary_concern(scan)
    if scan is not None:
        focus = FOCUS_FROM_SCAN.get(locale)
    else:
        focus = resolve_skin_type(skin_type).value.capitalize()

    return RecommendationPage(
        locale=locale,
        title=TITLE.get(locale),
        subtitle=SUBTITLE.get(locale),
        focus_label=FOCUS_LABEL.get(locale),
        focus=focus,
        primary_concern_label=PRIMARY_CONCERN_LABEL.get(locale),
        primary_concern=concern,
        primary_concern_badge=concern.upper() if concern else None,
        highly_recommended_label=HIGHLY_RECOMMENDED_LABEL.get(locale),
        items=recommendations,
        empty_message=None if recommendations else EMPTY_MESSAGE.get(locale),
        disclaimer=DISCLAIMER.get(locale),
    )
