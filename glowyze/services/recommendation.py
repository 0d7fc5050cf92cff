from functools import lru_cache
from typing import Optional
import logging

from glowyze.catalog import IngredientCatalog, build_default_catalog
from glowyze.schemas import Locale, RecommendationView, ScanMetrics, SkinType
from glowyze.services.merger import RecommendationMerger
from glowyze.services.profile_rules import evaluate_profile
from glowyze.services.ranking import rank
from glowyze.services.scan_rules import evaluate_scan

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Stateless recommendation engine over a fixed ingredient catalog.

    Every call is a full re-evaluation:
    1. Scan rules (skipped without a scan)
    2. Skin-type rules
    3. Merge, keeping the highest priority per ingredient
    4. Rank and localize
    """

    def __init__(self, catalog: IngredientCatalog):
        self.catalog = catalog

    def compute(
        self,
        locale: Locale,
        skin_type: SkinType,
        scan: Optional[ScanMetrics] = None,
    ) -> list[RecommendationView]:
        locale = Locale(locale)
        merger = RecommendationMerger()

        scan_candidates = evaluate_scan(scan)
        merger.offer_all(scan_candidates)

        profile_candidates = evaluate_profile(skin_type)
        merger.offer_all(profile_candidates)

        logger.debug(
            "Merged %d scan and %d profile candidates into %d recommendations",
            len(scan_candidates), len(profile_candidates), len(merger),
        )
        return rank(merger.candidates(), self.catalog, locale)


@lru_cache()
def get_engine() -> RecommendationEngine:
    return RecommendationEngine(build_default_catalog())


def compute_recommendations(
    locale: Locale,
    skin_type: SkinType,
    scan: Optional[ScanMetrics] = None,
) -> list[RecommendationView]:
    """Recommendations from the default catalog."""
    return get_engine().compute(locale, skin_type, scan)
