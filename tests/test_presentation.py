"""
Tests for the "Ingredient Advice" page model.
"""

from glowyze.schemas import Locale, ScanMetrics, SkinType
from glowyze.services.presentation import build_recommendation_page, primary_concern
from glowyze.services.recommendation import compute_recommendations


def _page(locale=Locale.EN, skin_type=SkinType.OILY, scan=None):
    items = compute_recommendations(locale, skin_type, scan)
    return build_recommendation_page(locale, skin_type, scan, items)


class TestPrimaryConcern:
    def test_no_scan(self):
        assert primary_concern(None) is None

    def test_highest_metric(self):
        scan = ScanMetrics(acne=10, wrinkles=20, pigmentation=70, texture=40)
        assert primary_concern(scan) == "pigmentation"

    def test_tie_goes_to_earliest_metric(self):
        scan = ScanMetrics(acne=5, wrinkles=60, pigmentation=10, texture=60)
        assert primary_concern(scan) == "wrinkles"

    def test_all_zero(self):
        assert primary_concern(ScanMetrics()) == "acne"


class TestRecommendationPage:
    def test_without_scan_focus_is_skin_type(self):
        page = _page(skin_type=SkinType.COMBINATION)
        assert page.focus == "Combination"
        assert page.primary_concern is None

    def test_with_scan(self):
        page = _page(scan=ScanMetrics(acne=60))
        assert page.focus == "Based on Current Condition"
        assert page.primary_concern == "acne"
        assert [item.id for item in page.items][:1] == ["salicylic_acid"]

    def test_english_text(self):
        page = _page()
        assert page.title == "Ingredient Advice"
        assert page.focus_label == "Treatment Focus"
        assert page.highly_recommended_label == "HIGHLY RECOMMENDED"
        assert page.disclaimer.startswith("Disclaimer: This is not medical advice.")

    def test_indonesian_text(self):
        page = _page(locale=Locale.ID, scan=ScanMetrics(texture=30))
        assert page.title == "Saran Kandungan"
        assert page.focus == "Berdasarkan Kondisi Terkini"
        assert page.primary_concern_label == "Masalah Utama"
        assert page.highly_recommended_label == "SANGAT DISARANKAN"
        assert page.disclaimer.startswith("Penting:")

    def test_empty_message_only_without_items(self):
        assert _page().empty_message is None
        empty = build_recommendation_page(Locale.EN, SkinType.NORMAL, None, [])
        assert empty.empty_message == "Perform a face scan for accurate recommendations."

    def test_badge_is_upper_case(self):
        page = _page(scan=ScanMetrics(pigmentation=45, texture=30))
        assert page.primary_concern == "pigmentation"
        assert page.primary_concern_badge == "PIGMENTATION"

    def test_no_badge_without_scan(self):
        assert _page().primary_concern_badge is None


class TestUnrecognizedSkinType:
    def test_page_falls_back_to_normal(self):
        items = compute_recommendations(Locale.EN, "lizard")
        page = build_recommendation_page(Locale.EN, "lizard", None, items)
        assert page.focus == "Normal"
        assert [item.id for item in page.items] == ["vitamin_c"]

    def test_missing_skin_type_falls_back_to_normal(self):
        items = compute_recommendations(Locale.ID, None)
        page = build_recommendation_page(Locale.ID, None, None, items)
        assert page.focus == "Normal"
        assert page.items[0].reason == "Perawatan kulit Normal"

    def test_display_casing_is_accepted(self):
        page = build_recommendation_page(Locale.EN, "Sensitive", None, [])
        assert page.focus == "Sensitive"
