from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from glowyze.config import get_settings
from glowyze.schemas import (
    IngredientView,
    Locale,
    RecommendationPage,
    RecommendationRequest,
    RecommendationView,
)
from glowyze.services.presentation import build_recommendation_page
from glowyze.services.recommendation import get_engine
import logging

settings = get_settings()

# Set up logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services
engine = get_engine()


def _compute(request: RecommendationRequest) -> tuple[Locale, list[RecommendationView]]:
    locale = request.locale or settings.default_locale
    try:
        items = engine.compute(locale, request.skin_type, request.scan)
    except Exception as e:
        logger.error(f"Error computing recommendations: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
    return locale, items


@app.get("/")
def health_check():
    return {"status": "healthy", "service": settings.app_name}


@app.get("/ingredients", response_model=list[IngredientView])
def list_ingredients(locale: Optional[Locale] = Query(default=None)):
    locale = locale or settings.default_locale
    return [ingredient.localized(locale) for ingredient in engine.catalog]


@app.post("/recommendations", response_model=list[RecommendationView])
def recommendations(request: RecommendationRequest):
    _, items = _compute(request)
    return items


@app.post("/recommendations/page", response_model=RecommendationPage)
def recommendation_page(request: RecommendationRequest):
    locale, items = _compute(request)
    return build_recommendation_page(locale, request.skin_type, request.scan, items)
