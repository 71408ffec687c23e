"""
Main routes da aplicação
"""
from fastapi import APIRouter, Depends

from event_agent.config import settings
from event_agent.api.dependencies import get_app_state, AppState
from event_agent.api.models import VocabularyOption, VocabularyResponse
from event_agent.extraction.constants import CATEGORY_LABELS, FORMAT_LABELS, TOPIC_LABELS

router = APIRouter()


@router.get("/")
async def root(app_state: AppState = Depends(get_app_state)):
    """Root endpoint with startup status"""
    return {
        "message": settings.API_TITLE,
        "status": "running" if app_state.startup_complete else "starting",
        "version": settings.API_VERSION,
        "endpoints": {
            "scrape": "/api/v1/agent/scrape",
            "health": "/api/v1/health",
            "vocabulary": "/api/v1/vocabulary"
        },
        "example_urls": settings.get_example_urls()
    }


@router.get("/api/v1/vocabulary", response_model=VocabularyResponse)
async def get_vocabulary():
    """Categorias, formatos e temas aceitos no formulário de cadastro"""
    return VocabularyResponse(
        categories=[
            VocabularyOption(value=category.value, label=label)
            for category, label in CATEGORY_LABELS.items()
        ],
        formats=[
            VocabularyOption(value=fmt.value, label=label)
            for fmt, label in FORMAT_LABELS.items()
        ],
        topics=[
            VocabularyOption(value=slug, label=label)
            for slug, label in TOPIC_LABELS.items()
        ]
    )
