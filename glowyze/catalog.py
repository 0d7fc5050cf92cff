"""
Ingredient catalog: static metadata for every ingredient the rule tables can recommend.

The catalog is built once at startup and never mutated; the engine receives it
at construction time.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from glowyze.schemas import IngredientCategory, IngredientView, Locale, LocalizedText


class UnknownIngredientError(KeyError):
    """A rule table references an ingredient id the catalog does not contain."""


@dataclass(frozen=True)
class Ingredient:
    id: str
    name: str
    category: IngredientCategory
    description: LocalizedText
    default_reason: LocalizedText
    icon: str
    accent: str

    def localized(self, locale: Locale) -> IngredientView:
        return IngredientView(
            id=self.id,
            name=self.name,
            category=self.category,
            description=self.description.get(locale),
            default_reason=self.default_reason.get(locale),
            icon=self.icon,
            accent=self.accent,
        )


class IngredientCatalog:
    """Read-only registry of ingredients keyed by id, in insertion order."""

    def __init__(self, ingredients: Iterable[Ingredient]):
        entries: dict[str, Ingredient] = {}
        for ingredient in ingredients:
            if ingredient.id in entries:
                raise ValueError(f"Duplicate ingredient id in catalog: {ingredient.id}")
            entries[ingredient.id] = ingredient
        self._entries: Mapping[str, Ingredient] = MappingProxyType(entries)

    def lookup(self, ingredient_id: str) -> Ingredient:
        try:
            return self._entries[ingredient_id]
        except KeyError:
            raise UnknownIngredientError(ingredient_id) from None

    def __contains__(self, ingredient_id: object) -> bool:
        return ingredient_id in self._entries

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._entries)


def _text(en: str, id: str) -> LocalizedText:
    return LocalizedText(en=en, id=id)


# ── Default catalog ─────────────────────────────────────────────────────────


def build_default_catalog() -> IngredientCatalog:
    """The fourteen ingredients the app knows about, grouped by category."""
    return IngredientCatalog([
        # Acne & oil control
        Ingredient(
            id="salicylic_acid",
            name="Salicylic Acid (BHA)",
            category=IngredientCategory.ACNE_CONTROL,
            description=_text(
                "Penetrates pores to clear acne and reduce oil.",
                "Menembus pori-pori untuk membersihkan jerawat dan minyak.",
            ),
            default_reason=_text(
                "Best for Oily & Acne-prone skin",
                "Terbaik untuk kulit Berminyak & Berjerawat",
            ),
            icon="zap",
            accent="red",
        ),
        Ingredient(
            id="tea_tree",
            name="Tea Tree Oil",
            category=IngredientCategory.ACNE_CONTROL,
            description=_text(
                "Natural antibacterial properties to fight acne.",
                "Antibakteri alami untuk melawan bakteri penyebab jerawat.",
            ),
            default_reason=_text("Natural solution for Acne", "Solusi alami untuk Jerawat"),
            icon="leaf",
            accent="green",
        ),
        Ingredient(
            id="azelaic_acid",
            name="Azelaic Acid",
            category=IngredientCategory.ACNE_CONTROL,
            description=_text(
                "Reduces redness, kills bacteria, and unclogs pores.",
                "Mengurangi kemerahan, membunuh bakteri, dan membuka pori.",
            ),
            default_reason=_text("Great for Acne & Redness", "Bagus untuk Jerawat & Kemerahan"),
            icon="eraser",
            accent="rose",
        ),
        # Brightening & pigmentation
        Ingredient(
            id="vitamin_c",
            name="Vitamin C",
            category=IngredientCategory.BRIGHTENING,
            description=_text(
                "Brightens skin and fades dark spots.",
                "Mencerahkan kulit dan memudarkan bintik hitam.",
            ),
            default_reason=_text(
                "Targets Pigmentation & Dullness",
                "Target Pigmentasi & Kulit Kusam",
            ),
            icon="sun",
            accent="orange",
        ),
        Ingredient(
            id="alpha_arbutin",
            name="Alpha Arbutin",
            category=IngredientCategory.BRIGHTENING,
            description=_text(
                "Gentle skin brightener to reduce hyperpigmentation.",
                "Pencerah kulit lembut untuk mengurangi hiperpigmentasi.",
            ),
            default_reason=_text("Safe for Pigmentation spots", "Aman untuk noda Pigmentasi"),
            icon="sparkles",
            accent="amber",
        ),
        Ingredient(
            id="niacinamide",
            name="Niacinamide",
            category=IngredientCategory.BRIGHTENING,
            description=_text(
                "Regulates oil, minimizes pores, and brightens skin.",
                "Mengatur minyak, mengecilkan pori, dan mencerahkan.",
            ),
            default_reason=_text(
                "Versatile for Oil control & Pigmentation",
                "Serbaguna untuk kontrol Minyak & Pigmentasi",
            ),
            icon="shield",
            accent="blue",
        ),
        # Anti-aging & texture
        Ingredient(
            id="retinol",
            name="Retinol",
            category=IngredientCategory.ANTI_AGING,
            description=_text(
                "Accelerates cell turnover to reduce wrinkles.",
                "Mempercepat pergantian sel untuk kurangi kerutan.",
            ),
            default_reason=_text(
                "Anti-aging powerhouse for Wrinkles",
                "Anti-aging ampuh untuk Kerutan",
            ),
            icon="activity",
            accent="purple",
        ),
        Ingredient(
            id="peptides",
            name="Peptides",
            category=IngredientCategory.ANTI_AGING,
            description=_text(
                "Building blocks of collagen for firmer skin.",
                "Pembangun kolagen untuk kulit lebih kencang.",
            ),
            default_reason=_text("Firming support for Aging skin", "Mengencangkan kulit Menua"),
            icon="activity",
            accent="indigo",
        ),
        Ingredient(
            id="glycolic_acid",
            name="Glycolic Acid (AHA)",
            category=IngredientCategory.ANTI_AGING,
            description=_text(
                "Exfoliates dead skin cells for smoother texture.",
                "Mengangkat sel kulit mati untuk tekstur lebih halus.",
            ),
            default_reason=_text(
                "Smooths Texture & Fine lines",
                "Menghaluskan Tekstur & Garis halus",
            ),
            icon="eraser",
            accent="pink",
        ),
        # Hydration & repair
        Ingredient(
            id="hyaluronic_acid",
            name="Hyaluronic Acid",
            category=IngredientCategory.HYDRATION,
            description=_text(
                "Draws moisture into the skin for deep hydration.",
                "Menarik kelembapan ke dalam kulit untuk hidrasi mendalam.",
            ),
            default_reason=_text(
                "Essential for Dry & Dehydrated skin",
                "Penting untuk kulit Kering & Dehidrasi",
            ),
            icon="droplets",
            accent="cyan",
        ),
        Ingredient(
            id="ceramides",
            name="Ceramides",
            category=IngredientCategory.HYDRATION,
            description=_text(
                "Restores the skin barrier and locks in moisture.",
                "Memperbaiki skin barrier dan mengunci kelembapan.",
            ),
            default_reason=_text(
                "Repair for Dry & Sensitive skin",
                "Perbaikan untuk kulit Kering & Sensitif",
            ),
            icon="shield",
            accent="emerald",
        ),
        Ingredient(
            id="squalane",
            name="Squalane",
            category=IngredientCategory.HYDRATION,
            description=_text(
                "Lightweight oil that mimics skin natural oils.",
                "Minyak ringan yang menyerupai minyak alami kulit.",
            ),
            default_reason=_text("Light hydration for all types", "Hidrasi ringan untuk semua tipe"),
            icon="droplets",
            accent="teal",
        ),
        Ingredient(
            id="centella",
            name="Centella Asiatica",
            category=IngredientCategory.HYDRATION,
            description=_text(
                "Soothes inflammation and redness.",
                "Menenangkan peradangan dan kemerahan.",
            ),
            default_reason=_text("Calming for Sensitive skin", "Menenangkan untuk kulit Sensitif"),
            icon="check-circle",
            accent="green",
        ),
        Ingredient(
            id="snail_mucin",
            name="Snail Mucin",
            category=IngredientCategory.HYDRATION,
            description=_text(
                "Aids in repair and hydration.",
                "Membantu perbaikan dan hidrasi kulit.",
            ),
            default_reason=_text("Repair & Hydration boost", "Peningkat Perbaikan & Hidrasi"),
            icon="sparkles",
            accent="slate",
        ),
    ])
