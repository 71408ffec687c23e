"""
FastAPI dependencies para o estado da aplicação e o extraction pipeline
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from event_agent.api.exceptions import (
    ExtractionPipelineNotInitialized,
    ApplicationStartupIncomplete
)
from event_agent.extraction.pipeline import ExtractionPipeline


@dataclass
class AppState:
    """Estado de uma instância da aplicação, guardado em ``app.state.agent``"""
    extraction_pipeline: Optional[ExtractionPipeline] = None
    startup_complete: bool = False


def get_app_state(request: Request) -> AppState:
    """Dependency que retorna o app state da aplicação atual"""
    return request.app.state.agent


def get_extraction_pipeline(app_state: AppState = Depends(get_app_state)) -> ExtractionPipeline:
    """Dependency que retorna o extraction pipeline, validando o startup"""
    if not app_state.startup_complete:
        raise ApplicationStartupIncomplete()

    if app_state.extraction_pipeline is None:
        raise ExtractionPipelineNotInitialized()

    return app_state.extraction_pipeline
