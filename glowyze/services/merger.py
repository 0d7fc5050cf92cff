"""
Recommendation merger: one candidate per ingredient, highest priority wins.

Candidates are offered in evaluation order. A later candidate for an
ingredient already present replaces it only with a strictly higher priority,
so on a tie the first writer wins. A replaced entry keeps its original
position, which the stable ranking sort relies on.
"""

import logging
from typing import Iterable

from glowyze.services.candidate import RecommendationCandidate

logger = logging.getLogger(__name__)


def is_upgrade(new_priority: int, stored_priority: int) -> bool:
    """Whether a new candidate should replace the stored one."""
    return new_priority > stored_priority


class RecommendationMerger:
    def __init__(self):
        self._entries: dict[str, RecommendationCandidate] = {}

    def offer(self, candidate: RecommendationCandidate) -> bool:
        """Insert or upgrade. Returns True if the accumulator changed."""
        stored = self._entries.get(candidate.ingredient_id)
        if stored is None:
            self._entries[candidate.ingredient_id] = candidate
            return True

        if is_upgrade(candidate.priority, stored.priority):
            logger.debug(
                "Upgrading %s from priority %d to %d",
                candidate.ingredient_id, stored.priority, candidate.priority,
            )
            self._entries[candidate.ingredient_id] = candidate
            return True

        return False

    def offer_all(self, candidates: Iterable[RecommendationCandidate]) -> None:
        for candidate in candidates:
            self.offer(candidate)

    def candidates(self) -> list[RecommendationCandidate]:
        """Merged candidates in first-insertion order."""
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
