from dataclasses import dataclass
from enum import Enum
from typing import Optional

from glowyze.schemas import Locale, LocalizedText


class Severity(Enum):
    """Acne severity label, resolved to text only when rendering"""
    MODERATE = "moderate"
    HIGH = "high"

    def label(self, locale: Locale) -> str:
        return _SEVERITY_LABELS[self].get(locale)


_SEVERITY_LABELS = {
    Severity.MODERATE: LocalizedText(en="Moderate", id="Sedang"),
    Severity.HIGH: LocalizedText(en="High", id="Tinggi"),
}


@dataclass(frozen=True)
class Reason:
    """Justification template; `{severity}` is filled in at render time"""
    text: LocalizedText
    severity: Optional[Severity] = None

    def render(self, locale: Locale) -> str:
        template = self.text.get(locale)
        if self.severity is None:
            return template
        return template.format(severity=self.severity.label(locale))


@dataclass(frozen=True)
class RecommendationCandidate:
    ingredient_id: str
    reason: Reason
    priority: int
