"""
FastAPI application factory e configuração
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from event_agent.api.dependencies import AppState
from event_agent.api.exceptions import ApiError
from event_agent.api.routes import scrape, health, root
from event_agent.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from event_agent.api.utils import create_error_response
from event_agent.config import settings
from event_agent.errors import ExtractionError


# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler para startup e shutdown"""
    # Startup
    app_state: AppState = app.state.agent

    logger.info("Starting extraction pipeline initialization...")

    try:
        from event_agent.extraction.pipeline import create_extraction_pipeline

        extraction_pipeline = create_extraction_pipeline()
        app_state.extraction_pipeline = extraction_pipeline
        logger.info("Extraction pipeline initialized successfully!")
    except Exception as e:
        logger.error(f"Failed to initialize extraction pipeline: {e}")
        app_state.extraction_pipeline = None

    app_state.startup_complete = True

    yield

    # Shutdown
    logger.info("Shutting down extraction pipeline...")
    if app_state.extraction_pipeline is not None:
        app_state.extraction_pipeline.cleanup()
    app_state.startup_complete = False
    logger.info("Application shutdown complete")


async def extraction_error_handler(request: Request, exc: ExtractionError) -> JSONResponse:
    """Typed pipeline failures keep their own status and a pt-BR message"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.message, exc.error_code)
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail), exc.error_code)
    )


def create_app() -> FastAPI:
    """Factory function para criar o FastAPI app"""
    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        lifespan=lifespan
    )
    app.state.agent = AppState()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    # Error envelopes
    app.add_exception_handler(ExtractionError, extraction_error_handler)
    app.add_exception_handler(ApiError, api_error_handler)

    # Include routers
    app.include_router(root.router)
    app.include_router(scrape.router)
    app.include_router(health.router)

    return app
