"""
API module para o agente de extração de eventos

Este módulo contém os componentes da API: FastAPI app factory, models,
routes, middleware e utilities.
"""

from .app import create_app
from .models import (
    ScrapeRequest,
    ScrapeApiResponse,
    ScrapeApiError,
    HealthResponse,
    VocabularyResponse
)
from .exceptions import (
    ApiError,
    InvalidUrlError,
    ExtractionPipelineNotInitialized,
    ApplicationStartupIncomplete,
    InternalServerError
)
from .dependencies import AppState

__all__ = [
    # App factory
    'create_app',

    # Models
    'ScrapeRequest',
    'ScrapeApiResponse',
    'ScrapeApiError',
    'HealthResponse',
    'VocabularyResponse',

    # Exceptions
    'ApiError',
    'InvalidUrlError',
    'ExtractionPipelineNotInitialized',
    'ApplicationStartupIncomplete',
    'InternalServerError',

    # Dependencies
    'AppState'
]
