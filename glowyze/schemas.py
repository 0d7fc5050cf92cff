"""
Pydantic schemas: the single source of truth for all data contracts.

ScanMetrics and SkinType are the inputs of the recommendation engine;
RecommendationView and RecommendationPage are what it hands to presentation.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ────────────────────────────────────────────────────────────────────


class Locale(str, enum.Enum):
    EN = "en"
    ID = "id"


class SkinType(str, enum.Enum):
    OILY = "oily"
    DRY = "dry"
    COMBINATION = "combination"
    NORMAL = "normal"
    SENSITIVE = "sensitive"

    @classmethod
    def _missing_(cls, value):
        # Accept "Oily", "DRY", ... as stored by older clients
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class IngredientCategory(str, enum.Enum):
    ACNE_CONTROL = "acne_control"
    BRIGHTENING = "brightening"
    ANTI_AGING = "anti_aging"
    HYDRATION = "hydration"


# ── Localized text ───────────────────────────────────────────────────────────


class LocalizedText(BaseModel):
    """One string per supported locale."""

    model_config = ConfigDict(frozen=True)

    en: str
    id: str

    def get(self, locale: Locale | str) -> str:
        return getattr(self, Locale(locale).value)


# ── Scan input ───────────────────────────────────────────────────────────────


class ScanMetrics(BaseModel):
    """Severity scores produced by the face scan, 0 (none) to 100 (severe)."""

    model_config = ConfigDict(frozen=True)

    acne: int = Field(default=0, ge=0, le=100)
    wrinkles: int = Field(default=0, ge=0, le=100)
    pigmentation: int = Field(default=0, ge=0, le=100)
    texture: int = Field(default=0, ge=0, le=100)

    def as_pairs(self) -> list[tuple[str, int]]:
        """(metric, value) pairs in declaration order."""
        return [(name, getattr(self, name)) for name in type(self).model_fields]


# ── Engine output ────────────────────────────────────────────────────────────


class RecommendationView(BaseModel):
    """A ranked, localized ingredient recommendation."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    reason: str
    priority: int = Field(ge=0)
    highly_recommended: bool


class IngredientView(BaseModel):
    """Catalog entry resolved for a single locale."""

    id: str
    name: str
    category: IngredientCategory
    description: str
    default_reason: str
    icon: str
    accent: str


class RecommendationPage(BaseModel):
    """Everything the "Ingredient Advice" screen renders."""

    locale: Locale
    title: str
    subtitle: str
    focus_label: str
    focus: str
    primary_concern_label: str
    primary_concern: Optional[str] = Field(
        default=None, description="Metric with the highest score, null without a scan"
    )
    primary_concern_badge: Optional[str] = Field(
        default=None, description="Primary concern as shown on the badge, e.g. ACNE"
    )
    highly_recommended_label: str
    items: list[RecommendationView] = Field(default_factory=list)
    empty_message: Optional[str] = None
    disclaimer: str


# ── API request ──────────────────────────────────────────────────────────────


class RecommendationRequest(BaseModel):
    locale: Optional[Locale] = Field(
        default=None, description="Display language, defaults to the configured locale"
    )
    skin_type: SkinType
    scan: Optional[ScanMetrics] = Field(
        default=None, description="Latest scan metrics, or null if the user has not scanned yet"
    )
